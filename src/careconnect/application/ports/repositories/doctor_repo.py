"""
Doctor repository interface: the doctor registry.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ....domain.entities.doctor import Doctor


class DoctorRepository(ABC):
    """Abstract repository for the doctor registry."""

    @abstractmethod
    async def save(self, doctor: Doctor) -> Doctor:
        """Insert or update a doctor."""
        pass

    @abstractmethod
    async def find_by_id(self, doctor_id: str) -> Optional[Doctor]:
        """Find a doctor by ID."""
        pass

    @abstractmethod
    async def find_all(self) -> List[Doctor]:
        """All doctors in registration order."""
        pass

    @abstractmethod
    async def find_by_email_or_name(
        self, email: Optional[str], name: Optional[str]
    ) -> Optional[Doctor]:
        """Locate the profile linked to a doctor account."""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass

"""
Appointment repository interface.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ....domain.entities.appointment import Appointment


class AppointmentRepository(ABC):
    """Abstract repository for appointments."""

    @abstractmethod
    async def save(self, appointment: Appointment) -> Appointment:
        """Insert or update an appointment."""
        pass

    @abstractmethod
    async def find_by_id(self, appointment_id: str) -> Optional[Appointment]:
        pass

    @abstractmethod
    async def find_all(self) -> List[Appointment]:
        """Newest first."""
        pass

    @abstractmethod
    async def find_by_user(self, user_id: str) -> List[Appointment]:
        pass

    @abstractmethod
    async def find_by_doctor(self, doctor_id: str) -> List[Appointment]:
        """Appointments currently assigned to a doctor."""
        pass

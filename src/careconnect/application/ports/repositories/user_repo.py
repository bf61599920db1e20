"""
User account repository interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ....domain.entities.user import User


class UserRepository(ABC):
    """Abstract repository for user accounts."""

    @abstractmethod
    async def save(self, user: User) -> User:
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Case-insensitive email lookup."""
        pass

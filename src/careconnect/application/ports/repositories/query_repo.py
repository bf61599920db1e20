"""
Health query repository interface.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ....domain.entities.health_query import HealthQuery


class HealthQueryRepository(ABC):
    """Abstract repository for health queries."""

    @abstractmethod
    async def save(self, query: HealthQuery) -> HealthQuery:
        """Insert or update a query."""
        pass

    @abstractmethod
    async def find_by_id(self, query_id: str) -> Optional[HealthQuery]:
        pass

    @abstractmethod
    async def find_all(self, category: Optional[str] = None) -> List[HealthQuery]:
        """Newest first, optionally restricted to one category."""
        pass

    @abstractmethod
    async def find_by_user(self, user_id: str) -> List[HealthQuery]:
        """A patient's own queries, newest first."""
        pass

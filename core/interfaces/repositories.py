"""
Repository interfaces - abstractions for data access.
This allows swapping implementations (Supabase -> PostgreSQL, in-memory fakes, etc.)
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, List, Any
from core.domain.models import CachedStandings, ClassifiedNewsRecord


class IStandingsCacheRepository(ABC):
    """Interface for the single-row standings cache"""

    @abstractmethod
    async def get_latest(self) -> Optional[CachedStandings]:
        """Most recent cached table, or None when the cache is empty"""
        pass

    @abstractmethod
    async def save(self, data: Any, updated_at: datetime) -> None:
        """Overwrite the cached table"""
        pass


class INewsRepository(ABC):
    """Interface for classified news storage"""

    @abstractmethod
    async def get_recent(self, since: datetime) -> List[dict]:
        """Records published since `since` (id, title, description, content_hash)"""
        pass

    @abstractmethod
    async def insert(self, record: ClassifiedNewsRecord) -> None:
        """Insert one record. Raises NewsInsertError on rejection."""
        pass

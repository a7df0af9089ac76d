"""
External data provider interfaces.
"""

from abc import ABC, abstractmethod
from typing import Optional, List, Any
from core.domain.models import RumorItem


class IStandingsProvider(ABC):
    """Interface for the league standings data source"""

    @abstractmethod
    async def get_laliga_standings(self) -> Optional[Any]:
        """Current La Liga table, or None when the provider has no data"""
        pass


class IRumorFetcher(ABC):
    """Interface for news feed collection"""

    @abstractmethod
    async def fetch_all_rumors(self, max_age_hours: Optional[int] = None) -> List[RumorItem]:
        """All feed items within the age window, newest first"""
        pass

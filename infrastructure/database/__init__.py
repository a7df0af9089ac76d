from infrastructure.database.standings_cache_repository import SupabaseStandingsCacheRepository
from infrastructure.database.news_repository import SupabaseNewsRepository

__all__ = [
    "SupabaseStandingsCacheRepository",
    "SupabaseNewsRepository",
]

"""
Supabase implementation of the standings cache repository.
"""

import logging
from datetime import datetime
from typing import Optional, Any

from supabase import Client

from core.domain.constants import STANDINGS_CACHE_TABLE, STANDINGS_CACHE_ROW_ID
from core.domain.models import CachedStandings
from core.interfaces.repositories import IStandingsCacheRepository
from infrastructure.database.supabase_client import run_sync

logger = logging.getLogger(__name__)


class SupabaseStandingsCacheRepository(IStandingsCacheRepository):
    """Single-row cache in `classification_cache`"""

    def __init__(self, client: Client):
        self._client = client

    @run_sync
    def _get_latest_sync(self) -> Optional[dict]:
        response = self._client.table(STANDINGS_CACHE_TABLE)\
            .select("data, last_updated")\
            .order("last_updated", desc=True)\
            .limit(1)\
            .execute()
        return response.data[0] if response.data else None

    async def get_latest(self) -> Optional[CachedStandings]:
        row = await self._get_latest_sync()
        if not row or row.get("last_updated") is None:
            return None
        return CachedStandings(data=row.get("data"), last_updated=row["last_updated"])

    @run_sync
    def _save_sync(self, data: Any, updated_at: datetime) -> None:
        row = {
            "id": STANDINGS_CACHE_ROW_ID,
            "data": data,
            "last_updated": updated_at.isoformat(),
        }
        self._client.table(STANDINGS_CACHE_TABLE)\
            .upsert(row, on_conflict="id")\
            .execute()

    async def save(self, data: Any, updated_at: datetime) -> None:
        await self._save_sync(data, updated_at)
        logger.debug(f"[STANDINGS_REPO] Cache row {STANDINGS_CACHE_ROW_ID} written at {updated_at.isoformat()}")

"""
Supabase implementation of the classified news repository.
"""

import logging
from datetime import datetime
from typing import List

from postgrest.exceptions import APIError
from supabase import Client

from core.domain.constants import NEWS_TABLE
from core.domain.exceptions import NewsInsertError
from core.domain.models import ClassifiedNewsRecord
from core.interfaces.repositories import INewsRepository
from infrastructure.database.supabase_client import run_sync

logger = logging.getLogger(__name__)


class SupabaseNewsRepository(INewsRepository):
    """Append-only news table keyed by unique `link`"""

    def __init__(self, client: Client):
        self._client = client

    @run_sync
    def _get_recent_sync(self, since: datetime) -> List[dict]:
        response = self._client.table(NEWS_TABLE)\
            .select("id, title, description, content_hash")\
            .gte("pub_date", since.isoformat())\
            .execute()
        return response.data or []

    async def get_recent(self, since: datetime) -> List[dict]:
        return await self._get_recent_sync(since)

    @run_sync
    def _insert_sync(self, row: dict) -> None:
        try:
            self._client.table(NEWS_TABLE).insert([row]).execute()
        except APIError as e:
            raise NewsInsertError(
                e.message or str(e),
                code=e.code,
                details=e.details,
                hint=e.hint,
            ) from e

    async def insert(self, record: ClassifiedNewsRecord) -> None:
        await self._insert_sync(record.to_row())

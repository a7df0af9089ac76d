"""
Rumor sync - one pass over all feeds: dedupe, classify, store.
Items are processed sequentially; a failing item never aborts the run.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from config.settings import Settings, get_settings
from core.domain.models import ClassificationKind, ClassifiedNewsRecord, SyncResult
from core.domain.exceptions import NewsInsertError
from core.interfaces.ai import INewsClassifier
from core.interfaces.providers import IRumorFetcher
from core.interfaces.repositories import INewsRepository
from core.services.deduplication_service import DeduplicationService
from core.utils.business_log import log_business

logger = logging.getLogger(__name__)


class RumorSyncService:
    """Sync Betis news/rumors from feeds into betis_news"""

    def __init__(
        self,
        settings: Settings,
        fetcher: IRumorFetcher,
        dedupe_service: DeduplicationService,
        classifier: INewsClassifier,
        news_repo: INewsRepository,
    ):
        self.settings = settings
        self.fetcher = fetcher
        self.dedupe_service = dedupe_service
        self.classifier = classifier
        self.news_repo = news_repo

    async def _load_window(self) -> List[dict]:
        since = datetime.now(timezone.utc) - timedelta(days=self.settings.dedup_window_days)
        try:
            return list(await self.news_repo.get_recent(since))
        except Exception as e:
            logger.warning(f"[RUMOR_SYNC] Could not load existing news, deduplicating against an empty window: {e}")
            return []

    async def sync_rumors(self) -> SyncResult:
        self.settings.require_sync_credentials()

        result = SyncResult()
        try:
            rumors = await self.fetcher.fetch_all_rumors()
            result.fetched = len(rumors)
            log_business("rumors_fetched", count=len(rumors))

            existing = await self._load_window()

            for rumor in rumors:
                try:
                    dedupe = self.dedupe_service.check_duplicate(rumor.title, rumor.description, existing)
                    if dedupe.is_duplicate:
                        result.duplicates += 1
                        continue

                    analysis = await self.classifier.analyze_rumor_credibility(
                        rumor.title,
                        rumor.description or "",
                        rumor.source,
                    )
                    result.analyzed += 1

                    if analysis.kind == ClassificationKind.TRANSFER_RUMOR:
                        result.transfer_rumors += 1
                        log_business(
                            "transfer_rumor_found",
                            title=rumor.title,
                            probability=analysis.probability,
                            source=rumor.source,
                        )
                    elif analysis.kind == ClassificationKind.REGULAR_NEWS:
                        result.regular_news += 1
                    else:
                        result.not_analyzed += 1

                    record = ClassifiedNewsRecord.from_analysis(
                        rumor,
                        dedupe.content_hash,
                        analysis,
                        analyzed_at=datetime.now(timezone.utc),
                    )
                    try:
                        await self.news_repo.insert(record)
                    except NewsInsertError as e:
                        if e.is_unique_violation:
                            result.duplicates += 1
                        else:
                            logger.error(
                                f"[RUMOR_SYNC] Failed to insert '{rumor.title}': {e} "
                                f"(code={e.code}, details={e.details}, hint={e.hint})"
                            )
                            result.errors += 1
                        continue

                    result.inserted += 1
                    # Same-run repeats (e.g. one story in two feeds) are caught too
                    existing.append({
                        "id": None,
                        "title": rumor.title,
                        "description": rumor.description,
                        "content_hash": dedupe.content_hash,
                    })
                except Exception as e:
                    logger.error(f"[RUMOR_SYNC] Error processing '{rumor.title}': {e}", exc_info=True)
                    result.errors += 1

            log_business("betis_news_sync_completed", **result.to_summary())
            return result
        except Exception as e:
            logger.error(f"[RUMOR_SYNC] Rumor sync failed: {e}", exc_info=True)
            raise


def create_rumor_sync_service(settings: Optional[Settings] = None) -> RumorSyncService:
    """Wire the service against Supabase, the feeds and OpenAI"""
    from infrastructure.ai.openai_service import OpenAINewsClassifier
    from infrastructure.database.news_repository import SupabaseNewsRepository
    from infrastructure.database.supabase_client import create_service_client
    from infrastructure.feeds.rss_fetcher import RSSFetcherService

    settings = settings or get_settings()
    client = create_service_client(settings)
    return RumorSyncService(
        settings=settings,
        fetcher=RSSFetcherService(settings),
        dedupe_service=DeduplicationService(settings.dedup_similarity_threshold),
        classifier=OpenAINewsClassifier(settings),
        news_repo=SupabaseNewsRepository(client),
    )


async def sync_rumors(settings: Optional[Settings] = None) -> SyncResult:
    """Entry point for cron/scripts. Fails before fetching if credentials are missing."""
    service = create_rumor_sync_service(settings)
    return await service.sync_rumors()

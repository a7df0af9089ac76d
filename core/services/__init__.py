from core.services.standings_service import StandingsService, StandingsResult
from core.services.deduplication_service import DeduplicationService
from core.services.rumor_sync_service import (
    RumorSyncService,
    create_rumor_sync_service,
    sync_rumors,
)

__all__ = [
    "StandingsService",
    "StandingsResult",
    "DeduplicationService",
    "RumorSyncService",
    "create_rumor_sync_service",
    "sync_rumors",
]

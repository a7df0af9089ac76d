"""
Standings service - serve La Liga table from cache, refresh from the provider when stale.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional

from core.domain.constants import STANDINGS_CACHE_TTL_HOURS
from core.domain.exceptions import ProviderErrorKind, classify_provider_error
from core.domain.models import CachedStandings
from core.interfaces.providers import IStandingsProvider
from core.interfaces.repositories import IStandingsCacheRepository
from locales import t

logger = logging.getLogger(__name__)

ERROR_MESSAGE_KEYS = {
    ProviderErrorKind.NETWORK: "standings_network_error",
    ProviderErrorKind.RATE_LIMIT: "standings_rate_limited",
    ProviderErrorKind.TIMEOUT: "standings_timeout",
    ProviderErrorKind.GENERIC: "standings_internal_error",
}


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class StandingsResult:
    """HTTP-shaped outcome: status code + JSON body"""
    status: int
    body: Dict[str, Any]


class StandingsService:
    """Cache-or-fetch for the league table"""

    def __init__(
        self,
        cache_repo: IStandingsCacheRepository,
        provider: IStandingsProvider,
        ttl: timedelta = timedelta(hours=STANDINGS_CACHE_TTL_HOURS),
        clock: Callable[[], datetime] = utcnow,
    ):
        self.cache_repo = cache_repo
        self.provider = provider
        self.ttl = ttl
        self.clock = clock

    def is_fresh(self, cached: Optional[CachedStandings], now: datetime) -> bool:
        return cached is not None and cached.is_fresh(now, self.ttl)

    async def _read_cache(self) -> Optional[CachedStandings]:
        try:
            return await self.cache_repo.get_latest()
        except Exception as e:
            logger.warning(f"[STANDINGS] Cache read failed, fetching from API: {e}")
            return None

    async def _write_cache(self, data: Any, now: datetime) -> None:
        # Cache write failures never reach the caller
        try:
            await self.cache_repo.save(data, now)
        except Exception as e:
            logger.warning(f"[STANDINGS] Cache write failed, serving fresh data anyway: {e}")

    async def get_standings(self) -> StandingsResult:
        now = self.clock()
        cached = await self._read_cache()

        if self.is_fresh(cached, now):
            logger.debug(f"[STANDINGS] Serving cache from {cached.last_updated}")
            return StandingsResult(200, {
                "standings": cached.data,
                "source": "cache",
                "lastUpdated": cached.last_updated,
            })

        try:
            standings = await self.provider.get_laliga_standings()
        except Exception as e:
            kind = classify_provider_error(e)
            logger.error(f"[STANDINGS] Provider fetch failed ({kind.value}): {e}")
            return StandingsResult(500, {
                "success": False,
                "error": t(ERROR_MESSAGE_KEYS[kind]),
            })

        if standings is None:
            logger.warning("[STANDINGS] Provider returned no standings")
            return StandingsResult(404, {"error": t("standings_not_found")})

        await self._write_cache(standings, now)
        return StandingsResult(200, {
            "standings": standings,
            "source": "api",
            "lastUpdated": now.isoformat(),
        })

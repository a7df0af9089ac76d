"""
Football-Data.org client.
Docs: https://www.football-data.org/documentation/quickstart
La Liga competition code: PD. Real Betis team id: 90.
"""

import logging
import httpx
from typing import Optional, Dict, Any

from config.settings import Settings
from core.domain.constants import COMPETITIONS, REAL_BETIS_TEAM_ID, STANDINGS_TABLE_TYPE
from core.domain.exceptions import ProviderError
from core.domain.models import Standing
from core.interfaces.providers import IStandingsProvider

logger = logging.getLogger(__name__)


class FootballDataClient(IStandingsProvider):
    """Thin keyed client. One request per call, no retries."""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = settings.football_data_base_url.rstrip("/")
        self.headers = {
            "X-Auth-Token": settings.football_data_api_key,
            "Content-Type": "application/json",
        }
        self.timeout = 30
        self._transport = transport

    async def _get(self, endpoint: str) -> Dict[str, Any]:
        url = f"{self.base_url}{endpoint}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url, headers=self.headers)
        except httpx.TimeoutException as e:
            raise ProviderError(f"Request timeout calling Football-Data API: {e}") from e
        except httpx.TransportError as e:
            raise ProviderError(f"Network error calling Football-Data API: {e}") from e

        if response.status_code == 429:
            raise ProviderError("Rate limit exceeded (429). Please wait before making more requests.", status=429)
        if response.status_code >= 500:
            raise ProviderError(
                f"Server error: {response.status_code} {response.reason_phrase}",
                status=response.status_code,
            )
        if response.status_code >= 400:
            raise ProviderError(
                f"Football-Data API error: {response.status_code} {response.reason_phrase}",
                status=response.status_code,
            )
        return response.json()

    async def get_standings(self, competition_code: str) -> Optional[Standing]:
        """Main (TOTAL) table of a competition, or None if the response has none"""
        payload = await self._get(f"/competitions/{competition_code}/standings")
        for standing in payload.get("standings") or []:
            if standing.get("type") == STANDINGS_TABLE_TYPE:
                return Standing.model_validate(standing)
        logger.warning(f"[FOOTBALL_DATA] No {STANDINGS_TABLE_TYPE} table for {competition_code}")
        return None

    async def get_laliga_standings(self) -> Optional[Dict[str, Any]]:
        standing = await self.get_standings(COMPETITIONS["LALIGA"])
        return standing.model_dump(mode="json", exclude_none=True) if standing else None

    async def get_team_position(self, team_id: int = REAL_BETIS_TEAM_ID) -> Optional[Dict[str, Any]]:
        """Position, points and form of a team in La Liga"""
        standing = await self.get_standings(COMPETITIONS["LALIGA"])
        if not standing:
            return None
        for entry in standing.table:
            if entry.team.get("id") == team_id:
                return {
                    "position": entry.position,
                    "points": entry.points,
                    "form": entry.form or "",
                }
        return None

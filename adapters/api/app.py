"""
Public API: lightweight aiohttp app.
GET /api/standings  La Liga table (cache or Football-Data.org)
GET /api/health     liveness
"""

import logging
from datetime import datetime, timezone
from aiohttp import web

from core.services.standings_service import StandingsService

logger = logging.getLogger(__name__)

STANDINGS_SERVICE_KEY = web.AppKey("standings_service", StandingsService)


async def handle_standings(request: web.Request) -> web.Response:
    service = request.app[STANDINGS_SERVICE_KEY]
    result = await service.get_standings()
    return web.json_response(result.body, status=result.status)


async def handle_health(request: web.Request) -> web.Response:
    return web.json_response({
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    })


def create_api_app(standings_service: StandingsService) -> web.Application:
    """Create aiohttp app with the public routes. Other methods get 405 from the router."""
    app = web.Application()
    app[STANDINGS_SERVICE_KEY] = standings_service
    app.router.add_get("/api/standings", handle_standings)
    app.router.add_get("/api/health", handle_health)
    return app

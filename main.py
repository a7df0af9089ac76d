"""
Peña Bética Escocesa API - Main entry point.

Serves the public JSON routes (standings, health).
News sync runs separately: python scripts/sync_rumors.py
"""

import asyncio
import logging
import sys
from datetime import timedelta
from aiohttp import web

from adapters.api import create_api_app
from config.features import features
from config.settings import Settings, get_settings
from core.domain.exceptions import ConfigurationError
from core.services.standings_service import StandingsService
from infrastructure.database.standings_cache_repository import SupabaseStandingsCacheRepository
from infrastructure.database.supabase_client import create_public_client
from infrastructure.football.football_data_client import FootballDataClient

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

# Set DEBUG level only for our app loggers, not for noisy libraries
if features.DEBUG_MODE:
    for name in ['adapters', 'core', 'infrastructure', 'business', '__main__']:
        logging.getLogger(name).setLevel(logging.DEBUG)
logging.getLogger('httpx').setLevel(logging.WARNING)
logging.getLogger('httpcore').setLevel(logging.WARNING)


def build_standings_service(settings: Settings) -> StandingsService:
    client = create_public_client(settings)
    return StandingsService(
        cache_repo=SupabaseStandingsCacheRepository(client),
        provider=FootballDataClient(settings),
        ttl=timedelta(hours=settings.standings_cache_ttl_hours),
    )


async def run_web_server(settings: Settings) -> web.AppRunner:
    """Run the aiohttp API on PORT."""
    app = create_api_app(build_standings_service(settings))
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "0.0.0.0", settings.port)
    await site.start()
    logger.info(f"API running on port {settings.port}, serving /api/standings")
    return runner


async def main():
    logger.info("=== Peña Bética API Starting ===")
    features.log_status()

    settings = get_settings()
    if not features.STANDINGS_ENABLED:
        logger.warning("Standings disabled (STANDINGS_ENABLED=false); nothing to serve")
        return

    try:
        runner = await run_web_server(settings)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    try:
        await asyncio.Event().wait()
    finally:
        await runner.cleanup()
        logger.info("API stopped.")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("API stopped by user (Ctrl+C)")

#!/usr/bin/env python3
"""
News sync - fetch feeds, dedupe, classify with OpenAI, store in betis_news.
Run with: python3 scripts/sync_rumors.py   (cron: every 30 min is plenty)
Requires: NEXT_PUBLIC_SUPABASE_URL, SUPABASE_SERVICE_ROLE_KEY, OPENAI_API_KEY
"""

import asyncio
import json
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.features import features
from core.domain.exceptions import ConfigurationError
from core.services.rumor_sync_service import sync_rumors

logger = logging.getLogger("sync_rumors")


async def run() -> int:
    """One sync pass. Returns the process exit code."""
    if not features.RUMOR_SYNC_ENABLED:
        logger.info("Rumor sync disabled (RUMOR_SYNC_ENABLED=false), skipping")
        return 0

    try:
        result = await sync_rumors()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except Exception as e:
        logger.error(f"Sync failed: {e}")
        return 1

    print(json.dumps(result.to_summary(), indent=2))
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.DEBUG if features.DEBUG_MODE else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)
    sys.exit(asyncio.run(run()))

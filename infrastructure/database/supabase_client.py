"""
Supabase client initialization.
Clients are built from explicit settings; nothing connects at import time.
"""

from supabase import create_client, Client
import asyncio
import concurrent.futures
import logging
import os
from functools import wraps

from config.settings import Settings
from core.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Dedicated bounded thread pool for DB operations, so bursts do not exhaust the
# default executor when many Supabase calls run concurrently.
_db_executor = concurrent.futures.ThreadPoolExecutor(
    max_workers=10,
    thread_name_prefix="supabase-db",
)


def _build_client(url: str, key: str) -> Client:
    # Schema isolation: staging can point at a separate schema
    schema = os.environ.get("DB_SCHEMA", "public")
    if schema != "public":
        from supabase.lib.client_options import ClientOptions
        return create_client(url, key, options=ClientOptions(schema=schema))
    return create_client(url, key)


def create_service_client(settings: Settings) -> Client:
    """Client with the service role key (bypasses RLS) for automated jobs."""
    settings.require_sync_credentials()
    return _build_client(settings.supabase_url, settings.supabase_service_role_key)


def create_public_client(settings: Settings) -> Client:
    """Client for read-mostly routes (anon key, service key as fallback)."""
    if not settings.supabase_url or not settings.public_supabase_key:
        logger.error(
            "Supabase credentials not configured! "
            f"SUPABASE_URL: {'set' if settings.supabase_url else 'MISSING'}, "
            f"SUPABASE_KEY: {'set' if settings.public_supabase_key else 'MISSING'}"
        )
        raise ConfigurationError("NEXT_PUBLIC_SUPABASE_URL and SUPABASE_KEY environment variables are required")
    return _build_client(settings.supabase_url, settings.public_supabase_key)


def run_sync(func):
    """
    Decorator to run synchronous Supabase operations in async context.
    Supabase Python SDK is synchronous, so we need this wrapper.
    Uses a dedicated bounded thread pool instead of the default executor.
    """
    @wraps(func)
    async def wrapper(*args, **kwargs):
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(_db_executor, lambda: func(*args, **kwargs))
    return wrapper

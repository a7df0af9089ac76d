"""
Feature flags for the API routes and the news sync job.
Each flag reads an env var; defaults keep everything on.
"""

import logging
import os

logger = logging.getLogger(__name__)


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class Features:
    """Feature toggles - set via env vars or defaults"""

    # === STANDINGS ===
    STANDINGS_ENABLED: bool = _env_flag("STANDINGS_ENABLED", "true")

    # === NEWS SYNC ===
    RUMOR_SYNC_ENABLED: bool = _env_flag("RUMOR_SYNC_ENABLED", "true")

    # === DEBUG ===
    DEBUG_MODE: bool = _env_flag("DEBUG", "false")
    LOG_AI_RESPONSES: bool = _env_flag("LOG_AI_RESPONSES", "false")

    @classmethod
    def to_dict(cls) -> dict:
        """Get all features as dict (useful for logging)"""
        return {
            "standings_enabled": cls.STANDINGS_ENABLED,
            "rumor_sync_enabled": cls.RUMOR_SYNC_ENABLED,
            "debug_mode": cls.DEBUG_MODE,
            "log_ai_responses": cls.LOG_AI_RESPONSES,
        }

    @classmethod
    def log_status(cls):
        """Log current feature status"""
        logger.info("=== Feature Flags ===")
        for key, value in cls.to_dict().items():
            logger.info(f"  {key}: {'on' if value else 'off'}")


# Shortcut
features = Features()

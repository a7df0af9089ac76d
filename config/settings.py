from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import AliasChoices, Field
from functools import lru_cache
from pathlib import Path

from core.domain.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings - reads from environment variables"""

    # Supabase
    supabase_url: str = Field(
        default="",
        validation_alias=AliasChoices("NEXT_PUBLIC_SUPABASE_URL", "SUPABASE_URL"),
    )
    supabase_key: str = Field(
        default="",
        validation_alias=AliasChoices("NEXT_PUBLIC_SUPABASE_ANON_KEY", "SUPABASE_KEY"),
    )
    supabase_service_role_key: str = Field(
        default="",
        validation_alias=AliasChoices("SUPABASE_SERVICE_ROLE_KEY", "SUPABASE_SERVICE_KEY"),
    )

    # Football-Data.org
    football_data_api_key: str = ""
    football_data_base_url: str = "https://api.football-data.org/v4"

    # AI Services
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"

    # Standings cache
    standings_cache_ttl_hours: int = 24

    # News sync
    news_max_age_hours: int = 24
    dedup_window_days: int = 30
    dedup_similarity_threshold: float = 85.0
    feed_timeout_seconds: float = 10.0

    # Web
    port: int = 8080

    # Environment
    env: str = "development"
    debug: bool = False

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env" if Path(".env").exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,  # SUPABASE_URL == supabase_url
        populate_by_name=True,
    )

    @property
    def public_supabase_key(self) -> str:
        """Key used by read-only routes; anon key if set, else the service key"""
        return self.supabase_key or self.supabase_service_role_key

    def require_sync_credentials(self) -> None:
        """The news sync writes with the service role and cannot run without it."""
        if not self.supabase_url or not self.supabase_service_role_key:
            raise ConfigurationError(
                "NEXT_PUBLIC_SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY "
                "environment variables are required"
            )


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process"""
    return Settings()

"""Configuration management for TubeSearch."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tubesearch.youtube.client import YouTubeClient


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="TUBESEARCH_", extra="ignore"
    )

    # YouTube Data API v3
    youtube_api_key: str = Field(
        min_length=1,
        validation_alias=AliasChoices(
            "YOUTUBE_API_KEY", "TUBESEARCH_YOUTUBE_API_KEY", "youtube_api_key"
        ),
    )
    youtube_api_base: str = YouTubeClient.BASE
    max_results: int = Field(default=YouTubeClient.MAX_RESULTS, ge=1, le=50)

    # Embedded player
    embed_base_url: str = "https://www.youtube.com/embed"

    # Database
    database_url: str = "sqlite+aiosqlite:///./comments.db"

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Environment
    env: str = Field(default="dev", pattern="^(dev|prod)$")
    log_level: str = Field(
        default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$"
    )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get cached settings instance (singleton pattern)."""
    global _settings
    if _settings is None:
        _settings = Settings()  # type: ignore[call-arg]
    return _settings

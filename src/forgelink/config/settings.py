"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic_settings import SettingsError

from forgelink.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FORGELINK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # General
    log_level: str = "WARNING"

    # Remote used when the current branch has no upstream
    default_remote: str = "origin"

    # Self-hosted forges, e.g. {"git.example.com": "gitlab"}
    forges: dict[str, str] = {}


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def load_settings() -> Settings:
    """Get settings, reporting invalid values as ConfigurationError."""
    try:
        return get_settings()
    except (ValidationError, SettingsError) as e:
        raise ConfigurationError(f"Invalid FORGELINK_* settings: {e}") from e

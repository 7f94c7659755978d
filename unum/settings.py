"""Launcher settings loaded from UNUM_* environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Launcher settings.

    - UNUM_EXECUTABLE: tool to exec, name or path (looked up on PATH)
    - UNUM_DEBUG: log at DEBUG level on stderr

    Config and cache locations are not settings: they follow
    XDG_CONFIG_HOME / XDG_CACHE_HOME (see unum.paths).
    """

    model_config = SettingsConfigDict(env_prefix="UNUM_")

    executable: str = "claude"
    debug: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

"""Service configuration loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class TaskspaceSettings(BaseSettings):
    """Taskspace Resource API settings.

    Fields are read from unprefixed environment variables (and ``.env``), so
    ``MONGO_URI`` maps to ``mongo_uri`` and ``PORT`` to ``port``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -- Logging ---------------------------------------------------------------
    log_level: str = "INFO"

    # -- Document store --------------------------------------------------------
    mongo_uri: str | None = None
    """MongoDB connection string.  Required for every store-backed endpoint."""

    mongo_db: str = "taskspace"
    """Database name used when ``mongo_uri`` does not name one."""

    mongo_timeout_ms: int = 5000

    # -- Server ----------------------------------------------------------------
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 8000
    cors_origins: list[str] = ["*"]

    # -- UI --------------------------------------------------------------------
    ui_dir: str = "dist"
    """Prebuilt frontend bundle served for every non-API path."""


@lru_cache(maxsize=1)
def get_settings() -> TaskspaceSettings:
    """Return a cached settings instance.

    Call ``get_settings.cache_clear()`` in tests to force a re-read after
    overriding env vars.
    """
    return TaskspaceSettings()

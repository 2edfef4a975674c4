"""Configuration for PocketDrive.

Settings come from ``POCKETDRIVE_*`` environment variables or a ``.env`` file.
``DIRECTORY_PATH`` is accepted as an alias for the root directory so existing
deployments keep working.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process-wide settings. The root is resolved once and never changes."""

    model_config = SettingsConfigDict(
        env_prefix="POCKETDRIVE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    root_dir: Path = Field(
        default=Path("."),
        validate_default=True,
        validation_alias=AliasChoices("POCKETDRIVE_ROOT_DIR", "DIRECTORY_PATH"),
        description="Directory the service is confined to",
    )
    scan_timeout: float | None = Field(
        default=30.0, description="Seconds allowed for one search scan (None = unbounded)"
    )
    io_timeout: float | None = Field(
        default=30.0, description="Seconds allowed for one listing or file read"
    )
    preview_media_type: str = Field(
        default="application/pdf", description="Content-Type sent for inline previews"
    )
    cors_allowed_origins: list[str] = Field(default_factory=list)
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"

    @field_validator("root_dir")
    @classmethod
    def _resolve_root(cls, v: Path) -> Path:
        return v.expanduser().resolve()

    @field_validator("scan_timeout", "io_timeout")
    @classmethod
    def _non_positive_is_unbounded(cls, v: float | None) -> float | None:
        if v is not None and v <= 0:
            return None
        return v

    @classmethod
    def load(cls, **overrides) -> Settings:
        """Build settings from the environment, applying explicit overrides."""
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance for the running process."""
    return Settings.load()

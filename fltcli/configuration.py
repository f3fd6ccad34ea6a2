"""Mini README: Centralised configuration for Fltcli.

Structure:
    * FltcliSettings - pydantic settings model describing runtime options.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    The entry point reads ``get_settings`` once and injects the storage path
    into the persistence layer, so nothing below the CLI refers to a global
    file name. Values come from ``FLTCLI_*`` environment variables or a local
    ``.env`` file; command-line options take precedence.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging_utils import resolve_level

DEFAULT_STORAGE_FILE = "sheet.json"


class FltcliSettings(BaseSettings):
    """Runtime configuration for the ledger command loop."""

    model_config = SettingsConfigDict(
        env_prefix="FLTCLI_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    storage_path: Path = Field(
        Path(DEFAULT_STORAGE_FILE),
        description="JSON file holding the ledger records.",
    )
    log_level: str = Field(
        "WARNING",
        description="Root logger level; anything above ERROR is capped so errors still reach stderr.",
    )

    @field_validator("storage_path", mode="before")
    @classmethod
    def _expand_path(cls, value: Union[str, Path]) -> Path:
        """Expand ``~`` without touching the filesystem."""

        return Path(value).expanduser()

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        """Accept standard logging level names in any casing."""

        resolve_level(value)
        return value.strip().upper()


@lru_cache()
def get_settings() -> FltcliSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return FltcliSettings()

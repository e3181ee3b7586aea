"""Tooling settings from ``CONFIG_GUARD_*`` environment variables.

``load_settings()`` is memoised with ``functools.lru_cache`` so the environment
is read at most once per process. Call ``load_settings.cache_clear()`` to force
a re-read (useful in tests).
"""

from __future__ import annotations

import functools
import logging
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GuardSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CONFIG_GUARD_", extra="ignore")

    schema_target: Optional[str] = Field(
        None,
        description="Default 'module.path:attribute' schema target for CLI commands.",
    )
    log_level: str = Field("WARNING", description="Logging level for the CLI.")
    json_indent: int = Field(2, ge=0, description="Indentation for JSON output.")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"log_level must be one of {list(_LEVELS)}, got {value!r}")
        return level

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


@functools.lru_cache(maxsize=1)
def load_settings() -> GuardSettings:
    """Read settings from the environment. Cached for the lifetime of the process."""
    return GuardSettings()

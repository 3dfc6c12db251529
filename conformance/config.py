# conformance/config.py

"""
Config module.

Runtime settings for conformance tasks, read from CONFORMANCE_* environment
variables (and an optional .env file) through pydantic-settings.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from conformance.constants import (
    CONFORMANCE_ATTACH_LOGGER,
    CONFORMANCE_DEV_MODE,
    CONFORMANCE_LOG_LEVEL,
    CONFORMANCE_PREFIX_COLOR,
    CONFORMANCE_USE_COLORS,
)
from conformance.logger import COLORS, LEVEL_MAP


class ConformanceConfig(BaseSettings):
    """Conformance task settings."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        env_prefix="conformance_",
        extra="ignore",
    )

    dev_mode: bool = CONFORMANCE_DEV_MODE
    log_level: str = CONFORMANCE_LOG_LEVEL
    attach_logger: bool = CONFORMANCE_ATTACH_LOGGER
    prefix_color: str = CONFORMANCE_PREFIX_COLOR
    use_colors: bool = CONFORMANCE_USE_COLORS

    @field_validator("log_level", mode="before")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        """Normalise to an upper-case level name known to the logger."""
        level = str(v).strip().upper()
        if level not in LEVEL_MAP:
            raise ValueError(
                f"log_level must be one of {', '.join(LEVEL_MAP)}, got {v!r}"
            )
        return level

    @field_validator("prefix_color")
    @classmethod
    def _validate_prefix_color(cls, v: str) -> str:
        if v not in COLORS:
            raise ValueError(f"unknown prefix_color {v!r}")
        return v

    @property
    def level(self) -> int:
        """Effective numeric logging level; dev mode forces DEBUG."""
        if self.dev_mode:
            return LEVEL_MAP["DEBUG"]
        return LEVEL_MAP[self.log_level]


@lru_cache(maxsize=1)
def get_config() -> ConformanceConfig:
    """Return the process-wide config, built on first use."""
    return ConformanceConfig()


def reset_config() -> None:
    """Drop the cached config so the next `get_config()` re-reads the environment."""
    get_config.cache_clear()

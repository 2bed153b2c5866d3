"""Library Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default: importing orderchain never requires an environment
    - Both getters are cached (lru_cache): single instance of each per process
    - Env vars are prefixed ORDERCHAIN_ (e.g. ORDERCHAIN_ACCEPT_INT_RESULTS=false)
    - ComparatorSettings holds only what chain construction reads; a bad logging
      value never reaches a comparator

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Combinators read settings once per built step, so a cache_clear() only affects new chains
"""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_CONFIG = SettingsConfigDict(
    env_prefix="ORDERCHAIN_", env_file=".env", case_sensitive=False,
    extra="ignore",
)


class ComparatorSettings(BaseSettings):
    """Settings read while building a chain."""

    model_config = _CONFIG

    # cmp-style ints (negative / zero / positive) from with_ / then_with*
    accept_int_results: bool = True


class Settings(BaseSettings):
    """Logging settings for applications embedding orderchain."""

    model_config = _CONFIG

    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case and reject names the logging module does not know."""
        level = str(v).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v!r}")
        return level

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        if v not in ("json", "text"):
            raise ValueError(f"log_format must be 'json' or 'text', got {v!r}")
        return v


@lru_cache
def get_comparator_settings() -> ComparatorSettings:
    return ComparatorSettings()


@lru_cache
def get_settings() -> Settings:
    return Settings()

"""verify_that configuration."""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class VerifySettings(BaseSettings):
    """Runtime options for matchers.

    Loads from environment variables automatically:
        VERIFY_THAT_STRICT_TYPES, VERIFY_THAT_QUOTE_FAILURES, VERIFY_THAT_WARN_UNCONSUMED
    """

    strict_types: bool = Field(
        default=True,
        description="Reject arguments that are not instances of the matcher's declared type",
    )
    quote_failures: bool = Field(
        default=True,
        description="Render failure text as a quoted display string in call diagnostics",
    )
    warn_unconsumed: bool = Field(
        default=True,
        description="Log a warning when a match context closes with pending specifications",
    )

    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="VERIFY_THAT_",
    )


SETTINGS_OVERRIDE: ContextVar[VerifySettings | None] = ContextVar("settings_override", default=None)


@lru_cache(maxsize=1)
def _load_settings() -> VerifySettings:
    return VerifySettings()


def get_settings() -> VerifySettings:
    """Return the active settings, honouring any `settings_scope` override."""
    return SETTINGS_OVERRIDE.get() or _load_settings()


def reload_settings() -> VerifySettings:
    """Re-read settings from the environment."""
    _load_settings.cache_clear()
    return _load_settings()


@contextmanager
def settings_scope(settings: VerifySettings) -> Iterator[VerifySettings]:
    """Temporarily override the active settings for the duration of the ``with`` block."""
    token = SETTINGS_OVERRIDE.set(settings)
    try:
        yield settings
    finally:
        SETTINGS_OVERRIDE.reset(token)

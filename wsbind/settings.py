"""Configuration loaded from WSBIND_* environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class WsbindSettings(BaseSettings):
    """Workspace binding validation settings.

    All fields are read from environment variables with the ``WSBIND_`` prefix.
    For example, ``WSBIND_AFFINITY_ASSISTANT_ENABLED=false`` maps to
    ``affinity_assistant_enabled``.
    """

    model_config = SettingsConfigDict(
        env_prefix="WSBIND_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # -- Scheduling ------------------------------------------------------------
    affinity_assistant_enabled: bool = True
    """Whether runs are co-scheduled with their claim by the affinity assistant.

    When enabled, admission also rejects runs binding more than one
    persistent volume claim.
    """


def get_settings() -> WsbindSettings:
    """Return a cached settings instance.

    Reads from environment variables and ``.env`` on first call, then returns
    the same object.  Call ``_get_settings_cached.cache_clear()`` in tests to
    force a re-read after overriding env vars.
    """
    return _get_settings_cached()


@lru_cache(maxsize=1)
def _get_settings_cached() -> WsbindSettings:
    return WsbindSettings()

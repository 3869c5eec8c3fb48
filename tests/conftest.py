"""Shared test fixtures: isolated settings and captured log messages."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from loguru import logger

from wsbind.settings import _get_settings_cached


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: object) -> Iterator[None]:
    """Drop WSBIND_* env vars and any cached settings around each test.

    Runs from ``tmp_path`` so a developer's ``.env`` is never picked up.
    """
    monkeypatch.delenv("WSBIND_AFFINITY_ASSISTANT_ENABLED", raising=False)
    monkeypatch.chdir(tmp_path)
    _get_settings_cached.cache_clear()
    yield
    _get_settings_cached.cache_clear()


@pytest.fixture
def log_messages() -> Iterator[list[tuple[str, str]]]:
    """Collect ``(level, message)`` pairs emitted through loguru."""
    messages: list[tuple[str, str]] = []
    handler_id = logger.add(
        lambda m: messages.append((m.record["level"].name, m.record["message"])),
        level="DEBUG",
    )
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def log_records() -> Iterator[list[dict]]:
    """Collect full loguru records, including bound ``extra`` fields."""
    records: list[dict] = []
    handler_id = logger.add(lambda m: records.append(m.record), level="DEBUG")
    yield records
    logger.remove(handler_id)

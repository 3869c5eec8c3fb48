"""Loguru logger bound to this package.

The host application owns sinks and levels; records from here carry
``component="wsbind"`` in ``record["extra"]`` so hosts can route or filter
them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from loguru import logger

if TYPE_CHECKING:
    from loguru import Logger

COMPONENT = "wsbind"


def get_logger(**context: Any) -> Logger:
    """Return the package logger with ``context`` bound as extra fields."""
    return logger.bind(component=COMPONENT, **context)

"""
Runtime configuration and logging setup.

Settings come from the environment (optionally seeded from a ``.env``
file by the entry points):

    NUMBER_WORDS_HOST        bind address for ``python api.py``  (127.0.0.1)
    NUMBER_WORDS_PORT        bind port                           (8000)
    NUMBER_WORDS_LOG_LEVEL   root log level                      (INFO)
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_logging_configured = False


@dataclass(frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"


def get_settings() -> Settings:
    """Build settings from the environment and sanity-check them."""
    raw_port = os.getenv("NUMBER_WORDS_PORT", "8000")
    try:
        port = int(raw_port)
    except ValueError:
        raise ValueError(f"NUMBER_WORDS_PORT is not an integer: {raw_port!r}") from None

    settings = Settings(
        host=os.getenv("NUMBER_WORDS_HOST", "127.0.0.1"),
        port=port,
        log_level=os.getenv("NUMBER_WORDS_LOG_LEVEL", "INFO").upper(),
    )

    if not 0 < settings.port < 65536:
        raise ValueError(f"NUMBER_WORDS_PORT out of range: {settings.port}")

    if settings.log_level not in _LOG_LEVELS:
        raise ValueError(f"Unknown NUMBER_WORDS_LOG_LEVEL: {settings.log_level!r}")

    return settings


def configure_logging(level: str = "INFO") -> None:
    """Attach a single stderr handler to the root logger. Safe to call twice."""
    global _logging_configured  # noqa: PLW0603
    if _logging_configured:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    _logging_configured = True

"""Pytest configuration — ensures the project root is importable."""

import logging
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from number_words import config  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_logging(monkeypatch):
    """Undo configure_logging() after each test.

    Its handler binds to whatever sys.stderr is at call time, which under
    capsys is a stream pytest closes when the test ends.
    """
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level
    monkeypatch.setattr(config, "_logging_configured", False)
    yield
    for handler in root_logger.handlers[:]:
        if handler not in saved_handlers:
            root_logger.removeHandler(handler)
    root_logger.setLevel(saved_level)

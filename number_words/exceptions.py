"""
Exception hierarchy for amount-to-words conversion.

Every user-facing failure is an ``InvalidInput``. The ``code`` attribute
tells the cases apart for logs and tests; callers only branch on success
vs. failure.
"""

from __future__ import annotations


class NumberWordsError(ValueError):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidInput(NumberWordsError):
    """The input text is not an amount we can spell out."""

    EMPTY_INPUT = "EMPTY_INPUT"
    INVALID_FORMAT = "INVALID_FORMAT"
    NEGATIVE_AMOUNT = "NEGATIVE_AMOUNT"
    AMOUNT_TOO_LARGE = "AMOUNT_TOO_LARGE"

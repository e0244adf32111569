"""
Amount-to-words converter — the public entry point of the package.

Flow:
    text ──► parse_amount ──► Amount(whole_part, fractional_part)
                                  │
                    render_whole_number (dollars, cents)
                                  │
                    pluralize + join with " AND "

The converter holds no mutable state; one instance can serve any number
of concurrent callers.
"""

from __future__ import annotations

import logging

from .exceptions import InvalidInput
from .models import Amount
from .parser import parse_amount
from .renderer import render_whole_number

logger = logging.getLogger(__name__)

ZERO_PHRASE = "ZERO DOLLARS"


def _clause(count: int, unit: str) -> str:
    """e.g. (1, "DOLLAR") → "ONE DOLLAR", (2, "CENT") → "TWO CENTS"."""
    suffix = "" if count == 1 else "S"
    return f"{render_whole_number(count)} {unit}{suffix}"


class NumberWordsConverter:
    """Converts decimal amount strings to dollar/cent wording.

    Usage:
        converter = NumberWordsConverter()
        converter.convert("123.45")
        # 'ONE HUNDRED AND TWENTY-THREE DOLLARS AND FORTY-FIVE CENTS'
    """

    def convert(self, text: str | None) -> str:
        """Spell out ``text`` as dollars and cents.

        Raises:
            InvalidInput: If the text is empty, malformed, negative or
                larger than 999,999,999,999.99.
        """
        try:
            amount = parse_amount(text)
        except InvalidInput as e:
            logger.debug("Rejected %r: [%s] %s", text, e.code, e.message)
            raise

        words = self.render(amount)
        logger.debug("Converted %r -> %r", text, words)
        return words

    @staticmethod
    def render(amount: Amount) -> str:
        """Assemble the phrase for an already-validated amount."""
        if amount.is_zero:
            return ZERO_PHRASE

        clauses: list[str] = []
        if amount.has_dollars:
            clauses.append(_clause(amount.whole_part, "DOLLAR"))
        if amount.has_cents:
            clauses.append(_clause(amount.fractional_part, "CENT"))

        # Sub-cent amounts such as "0.001" still need a dollar mention.
        if not clauses:
            return ZERO_PHRASE

        return " AND ".join(clauses)


_default_converter = NumberWordsConverter()


def convert(text: str | None) -> str:
    """Module-level shortcut for ``NumberWordsConverter().convert``."""
    return _default_converter.convert(text)

#!/usr/bin/env python3
"""
Number Words — Command Line Entry Point
========================================

Spells out one or more dollar amounts.

Usage:
    python main.py                      # Convert a built-in sample list
    python main.py 123.45 .50 1001      # Convert the given amounts
"""

from __future__ import annotations

import sys

from dotenv import load_dotenv

from number_words import InvalidInput, NumberWordsConverter
from number_words.config import configure_logging, get_settings

load_dotenv()


SAMPLE_AMOUNTS = [
    "0",
    "1",
    "11",
    "123.45",
    ".50",
    "1001",
    "1234567.89",
    "999999999999.99",
    "-123.45",
    "abc",
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_conversions(amounts: list[str], converter: NumberWordsConverter) -> int:
    """Convert and print each amount.

    Returns:
        0 if every amount converted, 1 if any was rejected.
    """
    failures = 0

    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  NUMBER WORDS{_RESET}")
    print(f"{'=' * _WIDTH}")

    for amount in amounts:
        print(f"  {_DIM}{amount!r}{_RESET}")
        try:
            words = converter.convert(amount)
        except InvalidInput as e:
            failures += 1
            print(f"    {_RED}[{e.code}] {e.message}{_RESET}")
        else:
            print(f"    {_GREEN}{words}{_RESET}")

    print(f"{'=' * _WIDTH}")
    if failures:
        print(f"  {_RED}{_BOLD}{failures} of {len(amounts)} amount(s) rejected{_RESET}")
    else:
        print(f"  {_GREEN}{_BOLD}All {len(amounts)} amount(s) converted{_RESET}")
    print(f"{'=' * _WIDTH}\n")

    return 1 if failures else 0


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Convert the amounts given on the command line (or the samples)."""
    configure_logging(get_settings().log_level)
    amounts = argv if argv else SAMPLE_AMOUNTS
    return print_conversions(amounts, NumberWordsConverter())


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))

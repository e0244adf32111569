"""
Validation and parsing of amount strings.

Parsing is locale-invariant: "." is always the decimal separator and ","
is only ever a digit-group separator, whatever the process locale says.

Accepted:
    "123.45"        → Amount(whole_part=123, fractional_part=45)
    ".5"            → Amount(whole_part=0, fractional_part=50)
    " 1,234.50 "    → Amount(whole_part=1234, fractional_part=50)
    "+7."           → Amount(whole_part=7, fractional_part=0)
    "5+"            → Amount(whole_part=5, fractional_part=0)

Rejected: exponents ("1e3"), currency symbols, "nan"/"inf", "_" separators,
negative values, anything above 999,999,999,999.99.
"""

from __future__ import annotations

import re
from decimal import Decimal

from .exceptions import InvalidInput
from .models import MAX_WHOLE_PART, Amount

MAX_AMOUNT = Decimal(MAX_WHOLE_PART) + Decimal("0.99")

# ASCII digits only; str.isdigit() and \d also accept other scripts.
_AMOUNT_RE = re.compile(
    r"""
    ^\s*
    (?P<sign>[+-])?
    (?P<whole>[0-9][0-9,]*)?
    (?:\.(?P<fraction>[0-9]*))?
    (?P<trailing_sign>[+-])?
    \s*$
    """,
    re.VERBOSE,
)


def parse_amount(text: str | None) -> Amount:
    """Validate ``text`` and split it into dollars and cents.

    Cents come from the first two digits after the point, right-padded
    with "0" (".5" is fifty cents). Further digits are truncated.

    Raises:
        InvalidInput: empty, malformed, negative or too-large input.
    """
    if text is None or not text.strip():
        raise InvalidInput(InvalidInput.EMPTY_INPUT, "Input cannot be null or empty")

    match = _AMOUNT_RE.match(text)
    # A sign may lead or trail ("5-"), but not both.
    if (
        match is None
        or not (match["whole"] or match["fraction"])
        or (match["sign"] and match["trailing_sign"])
    ):
        raise InvalidInput(
            InvalidInput.INVALID_FORMAT,
            "Invalid number format",
            {"input": text},
        )

    whole_digits = (match["whole"] or "0").replace(",", "")
    fraction_digits = match["fraction"] or ""
    value = Decimal(f"{whole_digits}.{fraction_digits or '0'}")

    if value == 0:
        return Amount(whole_part=0, fractional_part=0, is_zero=True)

    if "-" in (match["sign"], match["trailing_sign"]):
        raise InvalidInput(
            InvalidInput.NEGATIVE_AMOUNT,
            "Negative numbers are not supported",
            {"input": text},
        )

    if value > MAX_AMOUNT:
        raise InvalidInput(
            InvalidInput.AMOUNT_TOO_LARGE,
            "Number too large (maximum 999,999,999,999.99)",
            {"input": text, "maximum": str(MAX_AMOUNT)},
        )

    cents = fraction_digits.ljust(2, "0")[:2]
    return Amount(whole_part=int(value), fractional_part=int(cents))

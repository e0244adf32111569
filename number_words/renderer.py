"""
Render non-negative integers as upper-case English words.

    render_chunk(123)             → "ONE HUNDRED AND TWENTY-THREE"
    render_whole_number(1001)     → "ONE THOUSAND ONE"
    render_whole_number(1000000)  → "ONE MILLION"

"AND" only ever appears inside a single 3-digit chunk, between the
hundreds and the rest; never between scale groups.
"""

from __future__ import annotations

# ─── Word Lookup Tables ──────────────────────────────────────────────

_ONES: tuple[str, ...] = (
    "",
    "ONE",
    "TWO",
    "THREE",
    "FOUR",
    "FIVE",
    "SIX",
    "SEVEN",
    "EIGHT",
    "NINE",
    "TEN",
    "ELEVEN",
    "TWELVE",
    "THIRTEEN",
    "FOURTEEN",
    "FIFTEEN",
    "SIXTEEN",
    "SEVENTEEN",
    "EIGHTEEN",
    "NINETEEN",
)

# Indexed by tens digit; 0 and 1 are covered by _ONES.
_TENS: tuple[str, ...] = (
    "",
    "",
    "TWENTY",
    "THIRTY",
    "FORTY",
    "FIFTY",
    "SIXTY",
    "SEVENTY",
    "EIGHTY",
    "NINETY",
)

# Indexed by scale (power of 1000).
_SCALES: tuple[str, ...] = (
    "",
    "THOUSAND",
    "MILLION",
    "BILLION",
    "TRILLION",
)


# ─── Chunk Renderer ──────────────────────────────────────────────────


def render_chunk(number: int) -> str:
    """Render 0-999 as words. Returns "" for 0."""
    if not 0 <= number <= 999:
        raise ValueError(f"Chunk out of range 0-999: {number}")

    hundreds, remainder = divmod(number, 100)
    words = ""

    if hundreds:
        words = f"{_ONES[hundreds]} HUNDRED"
        if remainder:
            words += " AND "

    if remainder >= 20:
        tens_digit, ones_digit = divmod(remainder, 10)
        words += _TENS[tens_digit]
        if ones_digit:
            words += f"-{_ONES[ones_digit]}"
    elif remainder:
        words += _ONES[remainder]

    return words


# ─── Whole Number Renderer ──────────────────────────────────────────


def render_whole_number(number: int) -> str:
    """Render a non-negative integer as scale-grouped words.

    Peels off 3-digit chunks from the low end while dividing by 1000.
    Zero chunks are skipped along with their scale word.

    Returns:
        "" for 0; callers decide how zero is phrased.

    Raises:
        ValueError: negative input, or more groups than there are scale words.
    """
    if number < 0:
        raise ValueError(f"Cannot render a negative number: {number}")

    groups: list[str] = []
    scale = 0

    while number > 0:
        if scale >= len(_SCALES):
            raise ValueError("Number exceeds the largest supported scale (TRILLION)")

        number, chunk = divmod(number, 1000)
        if chunk:
            words = render_chunk(chunk)
            if scale:
                words += f" {_SCALES[scale]}"
            groups.append(words)
        scale += 1

    return " ".join(reversed(groups))

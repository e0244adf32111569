"""
Pydantic model for a parsed amount.

Bounds live on the fields, so an ``Amount`` that exists is always in range.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

MAX_WHOLE_PART = 999_999_999_999
MAX_FRACTIONAL_PART = 99


class Amount(BaseModel):
    """A non-negative amount split into dollars and cents."""

    model_config = ConfigDict(frozen=True)

    whole_part: int = Field(ge=0, le=MAX_WHOLE_PART)  # Dollars
    fractional_part: int = Field(ge=0, le=MAX_FRACTIONAL_PART)  # Cents (hundredths)
    is_zero: bool = False  # The parsed value was exactly zero

    @property
    def has_dollars(self) -> bool:
        return self.whole_part > 0

    @property
    def has_cents(self) -> bool:
        return self.fractional_part > 0

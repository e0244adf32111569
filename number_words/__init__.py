"""
Number Words — spell out dollar amounts in English.

    >>> from number_words import convert
    >>> convert("123.45")
    'ONE HUNDRED AND TWENTY-THREE DOLLARS AND FORTY-FIVE CENTS'
"""

from .converter import NumberWordsConverter, convert
from .exceptions import InvalidInput, NumberWordsError

__version__ = "1.0.0"

__all__ = ["InvalidInput", "NumberWordsConverter", "NumberWordsError", "convert"]

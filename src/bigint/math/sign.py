"""
Sign - знак arbitrary-precision значения

Порядок: NEGATIVE < ZERO < POSITIVE.
"""

from enum import Enum


class Sign(str, Enum):
    """Знак значения (символы совпадают с текстовым представлением)"""

    NEGATIVE = "-"
    ZERO = "0"
    POSITIVE = "+"

    @property
    def rank(self) -> int:
        """Числовой ранг для упорядочивания: -1 / 0 / 1"""
        if self is Sign.NEGATIVE:
            return -1
        if self is Sign.POSITIVE:
            return 1
        return 0

    def negated(self) -> "Sign":
        """Противоположный знак (ZERO остаётся ZERO)"""
        if self is Sign.NEGATIVE:
            return Sign.POSITIVE
        if self is Sign.POSITIVE:
            return Sign.NEGATIVE
        return Sign.ZERO

"""
Digit Store & Normalizer - хранение magnitude в системе счисления RADIX

Magnitude хранится как список sub-integers в base RADIX,
least-significant digit first (младший разряд в индексе 0).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый digit: 0 <= digit < RADIX
2. Старший digit непустого magnitude не равен нулю (нет ведущих нулей)
3. Пустой magnitude соответствует нулю (Sign.ZERO)
4. RADIX^2 + carry помещается в 32-bit accumulator (10000^2 < 2^31)
"""

from typing import Final, Iterable, List

from src.bigint.math.sign import Sign

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Основание внутреннего представления
RADIX: Final[int] = 10000

# Количество десятичных цифр в одном RADIX-digit (log10(RADIX))
RADIX_DIGITS: Final[int] = 4


# =============================================================================
# NORMALIZER
# =============================================================================


def normalize_magnitude(digits: List[int]) -> List[int]:
    """
    Удаление старших нулевых digits (in place).

    Args:
        digits: Magnitude (LSD first), изменяется на месте

    Returns:
        Тот же список без ведущих нулей (может стать пустым)

    Examples:
        >>> normalize_magnitude([5, 0, 0])
        [5]
        >>> normalize_magnitude([0, 0])
        []
    """
    while digits and digits[-1] == 0:
        digits.pop()
    return digits


def validate_magnitude(digits: Iterable[int]) -> List[int]:
    """
    Проверка сырых digits перед построением значения.

    Args:
        digits: Magnitude (LSD first)

    Returns:
        Новый список digits (без нормализации)

    Raises:
        ValueError: Если digit не int или вне диапазона [0, RADIX)
    """
    result: List[int] = []
    for index, digit in enumerate(digits):
        if isinstance(digit, bool) or not isinstance(digit, int):
            raise ValueError(f"digit at position {index} must be int, got {type(digit).__name__}")
        if digit < 0 or digit >= RADIX:
            raise ValueError(f"digit at position {index} out of range [0, {RADIX}): {digit}")
        result.append(digit)
    return result


# =============================================================================
# КОНВЕРСИЯ ИЗ MACHINE INTEGER
# =============================================================================


def magnitude_from_int(value: int) -> List[int]:
    """
    Разложение abs(value) на RADIX-digits.

    Повторяет value mod RADIX / value div RADIX до нуля.

    Examples:
        >>> magnitude_from_int(123456789)
        [6789, 2345, 1]
        >>> magnitude_from_int(0)
        []
    """
    remaining = abs(value)
    digits: List[int] = []
    while remaining > 0:
        remaining, digit = divmod(remaining, RADIX)
        digits.append(digit)
    return digits


def sign_of_int(value: int) -> Sign:
    """Знак machine integer: NEGATIVE / ZERO / POSITIVE."""
    if value < 0:
        return Sign.NEGATIVE
    if value > 0:
        return Sign.POSITIVE
    return Sign.ZERO


def shift_magnitude(digits: List[int], places: int) -> List[int]:
    """
    Сдвиг влево на places RADIX-разрядов (умножение на RADIX**places).

    Нулевой magnitude остаётся пустым, чтобы не нарушать нормализацию.
    """
    if not digits or places <= 0:
        return list(digits)
    return [0] * places + digits

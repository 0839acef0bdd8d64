"""
Multiplication Kernel - long multiplication и Karatsuba

Две стратегии над magnitudes (LSD first):
- long_multiply: школьное умножение столбиком, частичные произведения
  накапливаются через add_magnitudes
- karatsuba_multiply: divide-and-conquer, три произведения половинного
  размера; ниже karatsuba_cutoff переключается на long_multiply

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Обе стратегии дают идентичный результат (Karatsuba - только оптимизация)
2. Нулевой операнд даёт пустой magnitude
3. karatsuba_cutoff >= MIN_KARATSUBA_CUTOFF: каждое рекурсивное
   произведение строго короче исходного, рекурсия конечна
"""

import logging
from dataclasses import dataclass
from typing import Final, List, Sequence, Tuple

from src.bigint.math.digits import RADIX, normalize_magnitude, shift_magnitude
from src.bigint.math.kernels import add_magnitudes, sub_magnitudes

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Минимальная длина (в RADIX-digits) обоих операндов для Karatsuba
KARATSUBA_CUTOFF: Final[int] = 32

# Нижняя граница cutoff: при меньших значениях (lo + hi) может
# оказаться не короче исходного операнда
MIN_KARATSUBA_CUTOFF: Final[int] = 4


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class MultiplicationConfig:
    """Конфигурация multiplication kernel.

    karatsuba_cutoff: если хотя бы один операнд короче, используется
    long multiplication.
    use_karatsuba: False отключает Karatsuba полностью.
    """

    karatsuba_cutoff: int = KARATSUBA_CUTOFF
    use_karatsuba: bool = True

    def __post_init__(self) -> None:
        if self.karatsuba_cutoff < MIN_KARATSUBA_CUTOFF:
            raise ValueError(
                f"karatsuba_cutoff must be >= {MIN_KARATSUBA_CUTOFF}, got {self.karatsuba_cutoff}"
            )


DEFAULT_MULTIPLICATION_CONFIG: Final[MultiplicationConfig] = MultiplicationConfig()


# =============================================================================
# LONG MULTIPLICATION
# =============================================================================


def multiply_digit(a: Sequence[int], digit: int) -> List[int]:
    """
    Умножение magnitude на один RADIX-digit с распространением carry.

    Механика carry та же, что в add_magnitudes.

    Examples:
        >>> multiply_digit([9999, 9999], 9999)
        [1, 9999, 9998]
    """
    if digit == 0 or not a:
        return []

    result: List[int] = []
    carry = 0
    for value in a:
        carry, low = divmod(value * digit + carry, RADIX)
        result.append(low)

    if carry:
        result.append(carry)

    return result


def long_multiply(a: Sequence[int], b: Sequence[int]) -> List[int]:
    """
    Школьное умножение: для каждого digit b_j строка a * b_j,
    сдвинутая на j разрядов, прибавляется к аккумулятору.

    Args:
        a: Magnitude (LSD first)
        b: Magnitude (LSD first)

    Returns:
        Нормализованный magnitude a * b
    """
    accumulator: List[int] = []
    for position, digit in enumerate(b):
        row = multiply_digit(a, digit)
        if row:
            accumulator = add_magnitudes(accumulator, shift_magnitude(row, position))
    return accumulator


# =============================================================================
# KARATSUBA
# =============================================================================


def _split(digits: Sequence[int], size: int) -> Tuple[List[int], List[int]]:
    """Разбиение abs(n) = hi * RADIX**size + lo; обе части нормализованы."""
    low = normalize_magnitude(list(digits[:size]))
    high = normalize_magnitude(list(digits[size:]))
    return high, low


def karatsuba_multiply(
    a: Sequence[int],
    b: Sequence[int],
    cutoff: int = KARATSUBA_CUTOFF,
) -> List[int]:
    """
    Karatsuba multiplication.

    a = a1 * B + a0, b = b1 * B + b0, B = RADIX**half:
        z2 = a1 * b1
        z0 = a0 * b0
        z1 = (a0 + a1) * (b0 + b1) - z2 - z0
        a * b = z2 * B**2 + z1 * B + z0

    Args:
        a: Magnitude (LSD first)
        b: Magnitude (LSD first)
        cutoff: Если min(len(a), len(b)) < cutoff → long_multiply

    Returns:
        Нормализованный magnitude a * b

    Raises:
        ValueError: Если cutoff < MIN_KARATSUBA_CUTOFF
    """
    if cutoff < MIN_KARATSUBA_CUTOFF:
        raise ValueError(f"cutoff must be >= {MIN_KARATSUBA_CUTOFF}, got {cutoff}")

    if min(len(a), len(b)) < cutoff:
        return long_multiply(a, b)

    half = max(len(a), len(b)) // 2
    a_high, a_low = _split(a, half)
    b_high, b_low = _split(b, half)

    z2 = karatsuba_multiply(a_high, b_high, cutoff)
    z0 = karatsuba_multiply(a_low, b_low, cutoff)
    z1 = karatsuba_multiply(
        add_magnitudes(a_low, a_high),
        add_magnitudes(b_low, b_high),
        cutoff,
    )
    middle = sub_magnitudes(sub_magnitudes(z1, z2), z0)

    result = add_magnitudes(shift_magnitude(z2, 2 * half), shift_magnitude(middle, half))
    return add_magnitudes(result, z0)


# =============================================================================
# DISPATCH
# =============================================================================


def multiply_magnitudes(
    a: Sequence[int],
    b: Sequence[int],
    config: MultiplicationConfig = DEFAULT_MULTIPLICATION_CONFIG,
) -> List[int]:
    """
    Выбор стратегии умножения по размеру операндов.

    Args:
        a: Magnitude (LSD first)
        b: Magnitude (LSD first)
        config: Конфигурация (cutoff, включение Karatsuba)

    Returns:
        Нормализованный magnitude a * b
    """
    if not a or not b:
        return []

    if config.use_karatsuba and min(len(a), len(b)) >= config.karatsuba_cutoff:
        logger.debug(
            "karatsuba multiply: %d x %d digits (cutoff=%d)",
            len(a),
            len(b),
            config.karatsuba_cutoff,
        )
        return karatsuba_multiply(a, b, config.karatsuba_cutoff)

    return long_multiply(a, b)

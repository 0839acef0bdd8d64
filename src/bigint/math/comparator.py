"""
Comparator - полный порядок над (sign, magnitude)

Используется:
- Sign-dispatch слоем сложения/вычитания (выбор уменьшаемого)
- Публичными операторами сравнения BigInt

Корректность сравнения по длине опирается на нормализацию:
у magnitude нет ведущих нулевых digits.
"""

from typing import Sequence

from src.bigint.math.sign import Sign


def compare_magnitudes(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Трёхзначное сравнение нормализованных magnitudes.

    Сначала длина, затем digits от старшего к младшему.

    Args:
        a: Magnitude (LSD first)
        b: Magnitude (LSD first)

    Returns:
        -1 если a < b, 0 если равны, 1 если a > b

    Examples:
        >>> compare_magnitudes([1, 2], [9])
        1
        >>> compare_magnitudes([1, 2], [3, 2])
        -1
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for index in range(len(a) - 1, -1, -1):
        if a[index] != b[index]:
            return -1 if a[index] < b[index] else 1

    return 0


def compare(sign_a: Sign, a: Sequence[int], sign_b: Sign, b: Sequence[int]) -> int:
    """
    Трёхзначное сравнение знаковых значений.

    Порядок знаков NEGATIVE < ZERO < POSITIVE. При равных знаках
    решает magnitude; для NEGATIVE направление инвертируется
    (больший magnitude = меньшее значение).

    Returns:
        -1 / 0 / 1
    """
    if sign_a is not sign_b:
        return -1 if sign_a.rank < sign_b.rank else 1

    result = compare_magnitudes(a, b)
    if sign_a is Sign.NEGATIVE:
        return -result
    return result

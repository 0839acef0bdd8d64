"""
Add/Subtract Kernels - беззнаковые операции над magnitudes

Оба kernel работают только с неотрицательными magnitudes (LSD first).
Выбор kernel и порядка аргументов делает sign-dispatch слой BigInt.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. sub_magnitudes вызывается только при minuend >= subtrahend
2. Borrow/carry распространяются явным ограниченным циклом (без рекурсии)
3. Результат всегда нормализован
4. Входные списки не изменяются
"""

from typing import List, Sequence

from src.bigint.math.digits import RADIX, normalize_magnitude

# =============================================================================
# EXCEPTIONS
# =============================================================================


class KernelInvariantViolation(Exception):
    """
    Нарушение внутреннего инварианта kernel.

    Признак ошибки в реализации (например, borrow вышел за старший digit),
    а не ошибка входных данных. Вызывающий код не должен на это полагаться.
    """
    pass


# =============================================================================
# ADD
# =============================================================================


def add_magnitudes(a: Sequence[int], b: Sequence[int]) -> List[int]:
    """
    Сложение magnitudes с распространением carry.

    Недостающие digits более короткого операнда считаются нулями.
    Финальный ненулевой carry добавляет ещё один digit.

    Args:
        a: Magnitude (LSD first)
        b: Magnitude (LSD first)

    Returns:
        Новый нормализованный magnitude a + b

    Examples:
        >>> add_magnitudes([9999], [1])
        [0, 1]
        >>> add_magnitudes([], [5])
        [5]
    """
    result: List[int] = []
    carry = 0

    for index in range(max(len(a), len(b))):
        current = carry
        if index < len(a):
            current += a[index]
        if index < len(b):
            current += b[index]
        carry, digit = divmod(current, RADIX)
        result.append(digit)

    if carry:
        result.append(carry)

    return normalize_magnitude(result)


# =============================================================================
# SUBTRACT
# =============================================================================


def sub_magnitudes(minuend: Sequence[int], subtrahend: Sequence[int]) -> List[int]:
    """
    Вычитание magnitudes (minuend - subtrahend) с borrow.

    Если digit уменьшаемого меньше digit вычитаемого, занимаем единицу
    у ближайшего ненулевого старшего digit: промежуточные нули становятся
    RADIX - 1, текущий digit увеличивается на RADIX.

    Args:
        minuend: Уменьшаемое (должно быть >= subtrahend)
        subtrahend: Вычитаемое

    Returns:
        Новый нормализованный magnitude (может стать короче)

    Raises:
        KernelInvariantViolation: Если minuend < subtrahend (borrow вышел
            за старший digit)

    Examples:
        >>> sub_magnitudes([0, 1], [1])
        [9999]
        >>> sub_magnitudes([0, 0, 1], [1])
        [9999, 9999]
    """
    if len(subtrahend) > len(minuend):
        raise KernelInvariantViolation(
            f"subtrahend longer than minuend: {len(subtrahend)} > {len(minuend)} digits"
        )

    result = list(minuend)
    size = len(result)

    for index, digit in enumerate(subtrahend):
        if result[index] < digit:
            # Ищем ближайший ненулевой старший digit
            lender = index + 1
            while lender < size and result[lender] == 0:
                result[lender] = RADIX - 1
                lender += 1
            if lender == size:
                raise KernelInvariantViolation(
                    f"borrow ran past most significant digit at position {index}"
                )
            result[lender] -= 1
            result[index] += RADIX
        result[index] -= digit

    return normalize_magnitude(result)

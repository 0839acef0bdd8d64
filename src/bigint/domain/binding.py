"""
BigIntVar - изменяемая привязка к BigInt

BigInt immutable, поэтому pre/post increment/decrement и compound
assignment выражаются через привязку: каждая операция вычисляет
новое значение бинарным оператором и заменяет привязанное значение
целиком (старое состояние отбрасывается, не патчится).

Конкурентное изменение одной привязки требует внешней синхронизации.
"""

from typing import Any, Union

from src.bigint.domain.bigint import BigInt


class BigIntVar:
    """
    Изменяемая переменная, содержащая BigInt.

    Examples:
        >>> counter = BigIntVar(9)
        >>> counter.post_increment()
        BigInt('9')
        >>> counter.value
        BigInt('10')
    """

    __slots__ = ("_value",)

    def __init__(self, value: Union[BigInt, int, str] = 0) -> None:
        self._value = BigInt(value)

    @property
    def value(self) -> BigInt:
        return self._value

    def set(self, value: Union[BigInt, int, str]) -> None:
        """Замена значения (копия входа)"""
        self._value = BigInt(value)

    # =========================================================================
    # INCREMENT / DECREMENT
    # =========================================================================

    def pre_increment(self) -> BigInt:
        """++x: возвращает обновлённое значение"""
        self._value = self._value.increment()
        return self._value

    def post_increment(self) -> BigInt:
        """x++: возвращает значение до изменения"""
        previous = self._value
        self._value = previous.increment()
        return previous

    def pre_decrement(self) -> BigInt:
        """--x: возвращает обновлённое значение"""
        self._value = self._value.decrement()
        return self._value

    def post_decrement(self) -> BigInt:
        """x--: возвращает значение до изменения"""
        previous = self._value
        self._value = previous.decrement()
        return previous

    # =========================================================================
    # COMPOUND ASSIGNMENT
    # =========================================================================

    def __iadd__(self, other: Any) -> "BigIntVar":
        self._value = self._value + other
        return self

    def __isub__(self, other: Any) -> "BigIntVar":
        self._value = self._value - other
        return self

    def __imul__(self, other: Any) -> "BigIntVar":
        self._value = self._value * other
        return self

    def __repr__(self) -> str:
        return f"BigIntVar({self._value!r})"

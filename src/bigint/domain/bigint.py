"""
BigInt - arbitrary-precision знаковое целое

Immutable value object поверх беззнаковых kernels:
- Sign-dispatch слой отображает +/- с любыми знаками на add/sub kernels
- Comparator задаёт полный порядок NEGATIVE < ZERO < POSITIVE
- Каждый экземпляр владеет собственным списком digits (без aliasing)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (после каждой публичной операции):
1. sign == ZERO тогда и только тогда, когда magnitude пуст
2. Старший digit непустого magnitude не равен нулю
3. 0 <= digit < RADIX
4. Равенство и порядок определяются только (sign, magnitude)

Compound assignment (+=, -=, *=) перепривязывает имя к новому
значению: состояние заменяется целиком, in-place изменений нет.
"""

import sys
from functools import total_ordering
from typing import Any, Iterable, List, Optional, Tuple, Union

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from src.bigint.math.comparator import compare, compare_magnitudes
from src.bigint.math.digits import (
    RADIX,
    magnitude_from_int,
    normalize_magnitude,
    sign_of_int,
    validate_magnitude,
)
from src.bigint.math.kernels import add_magnitudes, sub_magnitudes
from src.bigint.math.multiplication import (
    DEFAULT_MULTIPLICATION_CONFIG,
    MultiplicationConfig,
    multiply_magnitudes,
)
from src.bigint.math.sign import Sign
from src.bigint.math.text import DECIMAL_TEXT_PATTERN, format_decimal, parse_decimal

# Допустимые операнды арифметики и сравнений
Operand = Union["BigInt", int]


@total_ordering
class BigInt:
    """
    Arbitrary-precision signed integer.

    Конструирование:
        BigInt()          → 0
        BigInt(-42)       → из machine integer
        BigInt("-00042")  → из десятичного текста (InvalidFormat при ошибке)
        BigInt(other)     → глубокая копия
    """

    __slots__ = ("_sign", "_digits")

    def __init__(self, value: Union["BigInt", int, str] = 0) -> None:
        if isinstance(value, BigInt):
            self._sign: Sign = value._sign
            self._digits: List[int] = list(value._digits)
        elif isinstance(value, int):
            self._sign = sign_of_int(value)
            self._digits = magnitude_from_int(value)
        elif isinstance(value, str):
            self._sign, self._digits = parse_decimal(value)
        else:
            raise TypeError(
                f"BigInt can be built from int, str or BigInt, got {type(value).__name__}"
            )

    # =========================================================================
    # ФАБРИКИ
    # =========================================================================

    @classmethod
    def _from_parts(cls, sign: Sign, digits: List[int]) -> "BigInt":
        """Сборка из нормализованного magnitude (список передаётся во владение)."""
        result = cls.__new__(cls)
        result._digits = digits
        result._sign = sign if digits else Sign.ZERO
        return result

    @classmethod
    def from_magnitude(cls, negative: bool, digits: Iterable[int]) -> "BigInt":
        """
        Построение из сырых RADIX-digits.

        Args:
            negative: True для отрицательного значения
            digits: Magnitude (LSD first), ведущие нули допустимы

        Returns:
            Нормализованный BigInt

        Raises:
            ValueError: Если digit вне диапазона [0, RADIX)
        """
        magnitude = normalize_magnitude(validate_magnitude(digits))
        return cls._from_parts(Sign.NEGATIVE if negative else Sign.POSITIVE, magnitude)

    def copy(self) -> "BigInt":
        """Глубокая копия"""
        return BigInt(self)

    # =========================================================================
    # ДОСТУП К СОСТОЯНИЮ
    # =========================================================================

    @property
    def sign(self) -> Sign:
        return self._sign

    @property
    def magnitude(self) -> Tuple[int, ...]:
        """Копия magnitude (LSD first)"""
        return tuple(self._digits)

    @property
    def digit_count(self) -> int:
        """Количество RADIX-digits"""
        return len(self._digits)

    def is_zero(self) -> bool:
        return self._sign is Sign.ZERO

    def is_negative(self) -> bool:
        return self._sign is Sign.NEGATIVE

    def is_positive(self) -> bool:
        return self._sign is Sign.POSITIVE

    # =========================================================================
    # SIGN-DISPATCH
    # =========================================================================

    @staticmethod
    def _coerce(value: Any) -> Optional["BigInt"]:
        if isinstance(value, BigInt):
            return value
        if isinstance(value, int):
            return BigInt(value)
        return None

    @classmethod
    def _signed_add(
        cls,
        sign_a: Sign,
        a: List[int],
        sign_b: Sign,
        b: List[int],
    ) -> "BigInt":
        """
        Сложение двух знаковых значений.

        Одинаковые знаки → add_magnitudes, знак сохраняется.
        Разные знаки → больший magnitude минус меньший,
        знак операнда с большим magnitude.
        """
        if sign_b is Sign.ZERO:
            return cls._from_parts(sign_a, list(a))
        if sign_a is Sign.ZERO:
            return cls._from_parts(sign_b, list(b))

        if sign_a is sign_b:
            return cls._from_parts(sign_a, add_magnitudes(a, b))

        order = compare_magnitudes(a, b)
        if order == 0:
            return cls._from_parts(Sign.ZERO, [])
        if order > 0:
            return cls._from_parts(sign_a, sub_magnitudes(a, b))
        return cls._from_parts(sign_b, sub_magnitudes(b, a))

    def add(self, other: Operand) -> "BigInt":
        """self + other"""
        other_value = self._coerce(other)
        if other_value is None:
            raise TypeError(f"unsupported operand type: {type(other).__name__}")
        return self._signed_add(self._sign, self._digits, other_value._sign, other_value._digits)

    def subtract(self, other: Operand) -> "BigInt":
        """self - other, без построения промежуточного -other"""
        other_value = self._coerce(other)
        if other_value is None:
            raise TypeError(f"unsupported operand type: {type(other).__name__}")
        return self._signed_add(
            self._sign, self._digits, other_value._sign.negated(), other_value._digits
        )

    def multiply(
        self,
        other: Operand,
        config: MultiplicationConfig = DEFAULT_MULTIPLICATION_CONFIG,
    ) -> "BigInt":
        """
        self * other.

        Знак: POSITIVE при совпадающих знаках, NEGATIVE при разных,
        ZERO если хотя бы один операнд равен нулю.

        Args:
            other: Множитель
            config: Конфигурация multiplication kernel
        """
        other_value = self._coerce(other)
        if other_value is None:
            raise TypeError(f"unsupported operand type: {type(other).__name__}")

        if self.is_zero() or other_value.is_zero():
            return BigInt()

        sign = Sign.POSITIVE if self._sign is other_value._sign else Sign.NEGATIVE
        return self._from_parts(sign, multiply_magnitudes(self._digits, other_value._digits, config))

    def negate(self) -> "BigInt":
        return self._from_parts(self._sign.negated(), list(self._digits))

    def increment(self) -> "BigInt":
        """self + 1"""
        return self.add(1)

    def decrement(self) -> "BigInt":
        """self - 1"""
        return self.subtract(1)

    # =========================================================================
    # АРИФМЕТИЧЕСКИЕ ОПЕРАТОРЫ
    # =========================================================================

    def __add__(self, other: Any) -> "BigInt":
        if self._coerce(other) is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> "BigInt":
        return self.__add__(other)

    def __sub__(self, other: Any) -> "BigInt":
        if self._coerce(other) is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Any) -> "BigInt":
        other_value = self._coerce(other)
        if other_value is None:
            return NotImplemented
        return other_value.subtract(self)

    def __mul__(self, other: Any) -> "BigInt":
        if self._coerce(other) is None:
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: Any) -> "BigInt":
        return self.__mul__(other)

    def __neg__(self) -> "BigInt":
        return self.negate()

    def __pos__(self) -> "BigInt":
        return self.copy()

    def __abs__(self) -> "BigInt":
        if self._sign is Sign.NEGATIVE:
            return self.negate()
        return self.copy()

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def compare(self, other: Operand) -> int:
        """
        Трёхзначное сравнение: -1 / 0 / 1.

        Raises:
            TypeError: Если other не BigInt/int
        """
        other_value = self._coerce(other)
        if other_value is None:
            raise TypeError(f"cannot compare BigInt with {type(other).__name__}")
        return compare(self._sign, self._digits, other_value._sign, other_value._digits)

    def __eq__(self, other: object) -> bool:
        other_value = self._coerce(other)
        if other_value is None:
            return NotImplemented
        return self._sign is other_value._sign and self._digits == other_value._digits

    def __lt__(self, other: Any) -> bool:
        if self._coerce(other) is None:
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        # Совпадает с hash(int) для того же числа: BigInt(5) == 5
        modulus = sys.hash_info.modulus
        residue = 0
        for digit in reversed(self._digits):
            residue = (residue * RADIX + digit) % modulus
        if self._sign is Sign.NEGATIVE:
            residue = -residue
        return -2 if residue == -1 else residue

    def __bool__(self) -> bool:
        return self._sign is not Sign.ZERO

    # =========================================================================
    # ТЕКСТ
    # =========================================================================

    def to_text(self) -> str:
        """Десятичный текст, обратный конструктору из str"""
        return format_decimal(self._sign, self._digits)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"BigInt('{self.to_text()}')"

    # =========================================================================
    # PYDANTIC
    # =========================================================================

    @classmethod
    def _validate(cls, value: Any) -> "BigInt":
        if isinstance(value, bool):
            raise ValueError("bool is not a valid BigInt input")
        if isinstance(value, (BigInt, int, str)):
            return cls(value)
        raise ValueError(f"expected int, str or BigInt, got {type(value).__name__}")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Поле Pydantic: вход int/str/BigInt, JSON-сериализация в str."""
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.to_text(),
                when_used="json",
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "pattern": f"^{DECIMAL_TEXT_PATTERN}$"}


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def from_text(text: str) -> BigInt:
    """
    Разбор десятичного текста.

    Raises:
        InvalidFormat: Если text не соответствует [+-]?[0-9]+
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text).__name__}")
    return BigInt(text)


def to_text(value: BigInt) -> str:
    """Десятичный текст значения (обратный from_text)"""
    return value.to_text()

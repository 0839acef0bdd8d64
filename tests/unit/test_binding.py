"""
Тесты для BigIntVar - изменяемая привязка

Проверяет:
1. Pre-increment/decrement возвращают обновлённое значение
2. Post-increment/decrement возвращают значение до изменения
3. Compound assignment заменяет значение целиком
4. Ранее выданные значения не изменяются (нет aliasing)
"""

import pytest

from src.bigint.domain import BigInt, BigIntVar


class TestIncrementDecrement:
    """Тесты pre/post increment и decrement"""

    def test_pre_increment(self) -> None:
        var = BigIntVar(9999)
        assert var.pre_increment() == BigInt(10000)
        assert var.value == BigInt(10000)

    def test_post_increment(self) -> None:
        var = BigIntVar(9999)
        assert var.post_increment() == BigInt(9999)
        assert var.value == BigInt(10000)

    def test_pre_decrement(self) -> None:
        var = BigIntVar(0)
        assert var.pre_decrement() == BigInt(-1)
        assert var.value == BigInt(-1)

    def test_post_decrement(self) -> None:
        var = BigIntVar("10000")
        assert var.post_decrement() == BigInt(10000)
        assert var.value == BigInt(9999)

    def test_post_result_not_aliased(self) -> None:
        """Значение, возвращённое post_increment, не меняется дальше"""
        var = BigIntVar(1)
        previous = var.post_increment()
        var.post_increment()
        assert previous == BigInt(1)
        assert var.value == BigInt(3)

    def test_round_trip_through_zero(self) -> None:
        var = BigIntVar(-2)
        for _ in range(4):
            var.pre_increment()
        assert var.value == BigInt(2)
        for _ in range(4):
            var.post_decrement()
        assert var.value == BigInt(-2)


class TestCompoundAssignment:
    """Тесты +=, -=, *="""

    def test_iadd_keeps_binding(self) -> None:
        var = BigIntVar(5)
        same = var
        var += BigInt(10)
        assert var is same
        assert var.value == BigInt(15)

    def test_replaces_value_wholesale(self) -> None:
        var = BigIntVar(5)
        before = var.value
        var -= 8
        assert var.value == BigInt(-3)
        assert before == BigInt(5)

    def test_imul(self) -> None:
        var = BigIntVar("-99999999")
        var *= BigInt("99999999")
        assert var.value == BigInt("-9999999800000001")

    def test_unsupported_operand(self) -> None:
        var = BigIntVar(5)
        with pytest.raises(TypeError):
            var += 1.5
        assert var.value == BigInt(5)


class TestBinding:
    """Тесты set/value/repr"""

    def test_default_zero(self) -> None:
        assert BigIntVar().value == BigInt(0)

    def test_set_copies_input(self) -> None:
        var = BigIntVar()
        source = BigInt(42)
        var.set(source)
        assert var.value == source
        assert var.value is not source

    def test_invalid_text(self) -> None:
        with pytest.raises(ValueError):
            BigIntVar("4x2")

    def test_repr(self) -> None:
        assert repr(BigIntVar(-7)) == "BigIntVar(BigInt('-7'))"

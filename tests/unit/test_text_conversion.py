"""
Тесты для Text Converters

Проверяет:
1. Разбор [+-]?[0-9]+ с группировкой по RADIX_DIGITS справа налево
2. Отказ InvalidFormat на пустом/некорректном вводе (без тихого нуля)
3. Форматирование с дополнением нулями до RADIX_DIGITS
4. Взаимную обратимость parse/format
"""

import logging

import pytest

from src.bigint.math.sign import Sign
from src.bigint.math.text import (
    InvalidFormat,
    format_decimal,
    is_valid_text_input,
    parse_decimal,
)


# =============================================================================
# ТЕСТЫ: Parse
# =============================================================================


class TestParseDecimal:
    """Тесты parse_decimal"""

    def test_positive(self) -> None:
        assert parse_decimal("12345") == (Sign.POSITIVE, [2345, 1])

    def test_negative(self) -> None:
        assert parse_decimal("-123456") == (Sign.NEGATIVE, [3456, 12])

    def test_explicit_plus(self) -> None:
        assert parse_decimal("+42") == (Sign.POSITIVE, [42])

    def test_exact_group_width(self) -> None:
        assert parse_decimal("12345678") == (Sign.POSITIVE, [5678, 1234])

    def test_inner_zero_groups(self) -> None:
        assert parse_decimal("100000001") == (Sign.POSITIVE, [1, 0, 1])

    def test_leading_zeros_removed(self) -> None:
        assert parse_decimal("0100") == (Sign.POSITIVE, [100])
        assert parse_decimal("00000000123") == (Sign.POSITIVE, [123])

    def test_zero_forms(self) -> None:
        """Все формы нуля → ZERO, пустой magnitude"""
        assert parse_decimal("0") == (Sign.ZERO, [])
        assert parse_decimal("-0") == (Sign.ZERO, [])
        assert parse_decimal("+0000") == (Sign.ZERO, [])
        assert parse_decimal("00000000") == (Sign.ZERO, [])


class TestParseDecimalErrors:
    """Тесты отказа parse_decimal"""

    def test_empty_string(self) -> None:
        with pytest.raises(InvalidFormat, match="invalid integer text"):
            parse_decimal("")

    def test_sign_only(self) -> None:
        with pytest.raises(InvalidFormat):
            parse_decimal("-")
        with pytest.raises(InvalidFormat):
            parse_decimal("+")

    def test_interior_non_digit(self) -> None:
        with pytest.raises(InvalidFormat):
            parse_decimal("12a34")
        with pytest.raises(InvalidFormat):
            parse_decimal("1-2")
        with pytest.raises(InvalidFormat):
            parse_decimal("1,000")

    def test_double_sign(self) -> None:
        with pytest.raises(InvalidFormat):
            parse_decimal("--5")
        with pytest.raises(InvalidFormat):
            parse_decimal("+-5")

    def test_whitespace_rejected(self) -> None:
        with pytest.raises(InvalidFormat):
            parse_decimal(" 5")
        with pytest.raises(InvalidFormat):
            parse_decimal("5\n")

    def test_non_ascii_digits_rejected(self) -> None:
        """Unicode-цифры не являются [0-9]"""
        with pytest.raises(InvalidFormat):
            parse_decimal("١٢٣")
        with pytest.raises(InvalidFormat):
            parse_decimal("2²")

    def test_invalid_format_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_decimal("abc")

    def test_non_string_raises_type_error(self) -> None:
        with pytest.raises(TypeError, match="text must be str"):
            parse_decimal(123)  # type: ignore[arg-type]

    def test_rejection_logged(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.bigint.math.text"):
            with pytest.raises(InvalidFormat):
                parse_decimal("x1")
        assert "rejected decimal text: 'x1'" in caplog.text


class TestIsValidTextInput:
    """Тесты is_valid_text_input"""

    def test_valid(self) -> None:
        assert is_valid_text_input("0")
        assert is_valid_text_input("-12")
        assert is_valid_text_input("+007")

    def test_invalid(self) -> None:
        assert not is_valid_text_input("")
        assert not is_valid_text_input("-")
        assert not is_valid_text_input("1e5")
        assert not is_valid_text_input(5)  # type: ignore[arg-type]


# =============================================================================
# ТЕСТЫ: Format
# =============================================================================


class TestFormatDecimal:
    """Тесты format_decimal"""

    def test_zero(self) -> None:
        assert format_decimal(Sign.ZERO, []) == "0"

    def test_single_digit_unpadded(self) -> None:
        assert format_decimal(Sign.POSITIVE, [7]) == "7"

    def test_lower_digits_padded(self) -> None:
        assert format_decimal(Sign.POSITIVE, [1, 0, 1]) == "100000001"
        assert format_decimal(Sign.POSITIVE, [5, 12]) == "120005"

    def test_negative(self) -> None:
        assert format_decimal(Sign.NEGATIVE, [1, 2]) == "-20001"

    def test_accepts_tuple(self) -> None:
        assert format_decimal(Sign.POSITIVE, (9999, 9999)) == "99999999"


class TestRoundTrip:
    """Тесты взаимной обратимости parse/format"""

    def test_format_then_parse(self) -> None:
        cases = [
            (Sign.ZERO, []),
            (Sign.POSITIVE, [1]),
            (Sign.NEGATIVE, [0, 0, 1]),
            (Sign.POSITIVE, [9999, 0, 42]),
            (Sign.NEGATIVE, [1, 2, 3, 4, 5, 6, 7, 8, 9]),
        ]
        for sign, digits in cases:
            assert parse_decimal(format_decimal(sign, digits)) == (sign, digits)

    def test_parse_then_format_normalizes(self) -> None:
        assert format_decimal(*parse_decimal("+000123")) == "123"
        assert format_decimal(*parse_decimal("-0000")) == "0"
        assert format_decimal(*parse_decimal("-00010000")) == "-10000"

    def test_canonical_text_unchanged(self) -> None:
        for text in ["0", "1", "-1", "9999", "10000", "-123456789012345678901234567890"]:
            assert format_decimal(*parse_decimal(text)) == text

"""
Text Converters - decimal text <-> (sign, magnitude)

parse_decimal и format_decimal взаимно обратны:
    parse_decimal(format_decimal(s, m)) == (s, m) для канонических значений
    format_decimal(*parse_decimal(t)) обозначает то же число, что t
    (ведущие нули и избыточный '+' нормализуются)

Допустимый формат ввода: [+-]?[0-9]+ (только ASCII цифры).
"""

import logging
import re
from typing import Final, List, Sequence, Tuple

from src.bigint.math.digits import RADIX_DIGITS, normalize_magnitude
from src.bigint.math.sign import Sign

logger = logging.getLogger(__name__)

# Полное соответствие всей строке, без пробелов и unicode-цифр
DECIMAL_TEXT_PATTERN: Final[str] = r"[+-]?[0-9]+"

_DECIMAL_TEXT_RE = re.compile(DECIMAL_TEXT_PATTERN, re.ASCII)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidFormat(ValueError):
    """
    Некорректный текст целого числа.

    Пустая строка, отсутствие цифр, посторонние символы.
    Никогда не заменяется нулём или усечённым значением.
    """
    pass


# =============================================================================
# PARSE
# =============================================================================


def is_valid_text_input(text: str) -> bool:
    """Проверка соответствия [+-]?[0-9]+ без exception."""
    return isinstance(text, str) and _DECIMAL_TEXT_RE.fullmatch(text) is not None


def parse_decimal(text: str) -> Tuple[Sign, List[int]]:
    """
    Разбор десятичного текста в (sign, magnitude).

    Цифры группируются справа налево по RADIX_DIGITS в RADIX-digits.
    Знак читается из первого символа: '-' → NEGATIVE, иначе POSITIVE;
    ZERO, если после нормализации magnitude пуст.

    Args:
        text: Строка вида [+-]?[0-9]+

    Returns:
        (sign, magnitude LSD first)

    Raises:
        TypeError: Если text не str
        InvalidFormat: Если text не соответствует формату

    Examples:
        >>> parse_decimal("-123456")
        (<Sign.NEGATIVE: '-'>, [3456, 12])
        >>> parse_decimal("+0000")
        (<Sign.ZERO: '0'>, [])
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text).__name__}")

    if _DECIMAL_TEXT_RE.fullmatch(text) is None:
        logger.debug("rejected decimal text: %r", text)
        raise InvalidFormat(f"invalid integer text: {text!r}")

    body = text[1:] if text[0] in "+-" else text

    digits: List[int] = []
    end = len(body)
    while end > 0:
        start = max(0, end - RADIX_DIGITS)
        digits.append(int(body[start:end]))
        end = start

    normalize_magnitude(digits)

    if not digits:
        return Sign.ZERO, digits
    if text[0] == "-":
        return Sign.NEGATIVE, digits
    return Sign.POSITIVE, digits


# =============================================================================
# FORMAT
# =============================================================================


def format_decimal(sign: Sign, digits: Sequence[int]) -> str:
    """
    Форматирование (sign, magnitude) в десятичный текст.

    Старший digit без дополнения, остальные дополнены нулями
    до RADIX_DIGITS. Ноль → "0", знак '+' не выводится.

    Examples:
        >>> format_decimal(Sign.NEGATIVE, [1, 2])
        '-20001'
        >>> format_decimal(Sign.ZERO, [])
        '0'
    """
    if not digits:
        return "0"

    parts = [str(digits[-1])]
    parts.extend(f"{digit:0{RADIX_DIGITS}d}" for digit in reversed(digits[:-1]))
    text = "".join(parts)

    if sign is Sign.NEGATIVE:
        return "-" + text
    return text

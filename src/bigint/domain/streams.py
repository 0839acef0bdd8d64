"""
Stream hooks - ввод/вывод BigInt через текстовые потоки

Внешний I/O слой (файлы, stdin/stdout, io.StringIO) работает только
через to_text / BigInt(text). Токены разделяются whitespace.
"""

from typing import Iterator, TextIO

from src.bigint.domain.bigint import BigInt
from src.bigint.math.text import InvalidFormat


def write_bigint(stream: TextIO, value: BigInt) -> None:
    """Запись десятичного текста значения (без разделителей)"""
    stream.write(value.to_text())


def read_bigint(stream: TextIO) -> BigInt:
    """
    Чтение одного токена, ограниченного whitespace.

    Ведущий whitespace пропускается; символ-разделитель после
    токена поглощается.

    Args:
        stream: Текстовый поток

    Returns:
        Прочитанное значение

    Raises:
        InvalidFormat: Если поток исчерпан или токен некорректен
    """
    char = stream.read(1)
    while char and char.isspace():
        char = stream.read(1)

    chars = []
    while char and not char.isspace():
        chars.append(char)
        char = stream.read(1)

    if not chars:
        raise InvalidFormat("no integer token in stream")

    return BigInt("".join(chars))


def read_bigints(stream: TextIO) -> Iterator[BigInt]:
    """Итератор по всем токенам потока (построчно)"""
    for line in stream:
        for token in line.split():
            yield BigInt(token)

"""
Bit Fields — Разбиение 16-байтового буфера на поля

IEEE 754-2008, 3.5.2

Буфер читается как одно 128-битное big-endian целое:
- sign        = бит 127
- combination = биты 126..110 (17 бит)
- trailing    = биты 109..0 (110 бит)

Здесь проверяется только длина. Некорректные combination обрабатывает
combination.py.
"""

from typing import Final, NamedTuple, Union

from decimal128.core.domain.errors import InvalidLength
from decimal128.core.domain.layout import BUFFER_LENGTH, COMBINATION_BITS, TRAILING_BITS

COMBINATION_MASK: Final[int] = (1 << COMBINATION_BITS) - 1
TRAILING_MASK: Final[int] = (1 << TRAILING_BITS) - 1

SIGN_SHIFT: Final[int] = COMBINATION_BITS + TRAILING_BITS

BufferLike = Union[bytes, bytearray, memoryview]


class BitFields(NamedTuple):
    """Сырые поля interchange формата"""

    sign: bool
    combination: int
    trailing: int


def split_fields(buffer: BufferLike) -> BitFields:
    """
    Разбиение буфера на sign / combination / trailing significand.

    Args:
        buffer: Ровно 16 байт, big-endian (старший байт первым)

    Returns:
        BitFields

    Raises:
        TypeError: Если buffer не bytes-подобный объект
        InvalidLength: Если длина буфера не 16 байт

    Examples:
        >>> split_fields(bytes.fromhex("f8" + "00" * 15))
        BitFields(sign=True, combination=122880, trailing=0)
    """
    if not isinstance(buffer, (bytes, bytearray, memoryview)):
        raise TypeError(f"decimal128 buffer must be bytes-like, got {type(buffer).__name__}")

    raw = bytes(buffer)
    if len(raw) != BUFFER_LENGTH:
        raise InvalidLength(len(raw))

    word = int.from_bytes(raw, "big")

    return BitFields(
        sign=bool(word >> SIGN_SHIFT),
        combination=(word >> TRAILING_BITS) & COMBINATION_MASK,
        trailing=word & TRAILING_MASK,
    )

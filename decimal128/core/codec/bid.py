"""
Binary Integer Decimal — Коэффициент в двоичной кодировке

IEEE 754-2008, 3.5.2 (binary encoding of the significand)

Кодировка, в которой BSON хранит Decimal128. Классификация Infinity/NaN
общая с DPD (combination.py), отличается только раскладка конечных значений:

- G0 G1 != 11: экспонента = 14 бит после знака,
  коэффициент = оставшиеся 113 бит
- G0 G1 == 11: экспонента = 14 бит после префикса 11,
  коэффициент = 100 + оставшиеся 111 бит (всегда > 10**34 - 1)
"""

from typing import Final, Tuple

from decimal128.core.domain.layout import (
    COMBINATION_BITS,
    MAX_PAYLOAD,
    TRAILING_BITS,
)

BIASED_EXPONENT_MASK: Final[int] = (1 << 14) - 1

# Число бит combination, уходящих в коэффициент в каждой из форм
_LOW_FORM_COEFFICIENT_BITS: Final[int] = 3
_HIGH_FORM_COEFFICIENT_BITS: Final[int] = 1

# Неявный префикс 100 перед 111 битами коэффициента
_HIGH_FORM_IMPLICIT: Final[int] = 0b100


def decode_bid_finite(combination: int, trailing: int) -> Tuple[int, int]:
    """
    Biased экспонента и коэффициент конечного BID значения.

    Проверка диапазона коэффициента — в decoder.py.

    Args:
        combination: 17-битное combination поле (не Infinity/NaN)
        trailing: 110-битный trailing significand

    Returns:
        (biased_exponent, coefficient)

    Examples:
        >>> decode_bid_finite(0x181A << 3, 0x4D2)
        (6170, 1234)
    """
    if combination >> (COMBINATION_BITS - 2) != 0b11:
        biased_exponent = combination >> _LOW_FORM_COEFFICIENT_BITS
        low_bits = combination & ((1 << _LOW_FORM_COEFFICIENT_BITS) - 1)
        coefficient = (low_bits << TRAILING_BITS) | trailing
    else:
        biased_exponent = (combination >> _HIGH_FORM_COEFFICIENT_BITS) & BIASED_EXPONENT_MASK
        low_bit = combination & 1
        coefficient = (((_HIGH_FORM_IMPLICIT << 1) | low_bit) << TRAILING_BITS) | trailing

    return biased_exponent, coefficient


def decode_bid_payload(trailing: int) -> int:
    """
    NaN payload в BID: trailing significand как целое.

    Payload больше 10**33 - 1 неканонический и читается как 0.
    """
    if trailing > MAX_PAYLOAD:
        return 0
    return trailing

"""
Densely Packed Decimal — Декодирование trailing significand

IEEE 754-2008, 3.5.2 (таблица 3.3: DPD → BCD)

Declet (10 бит) кодирует три десятичные цифры. Максимум одна из трёх цифр
кодируется "большой" (8 или 9), поэтому 000..999 помещается в 10 бит
вместо 12 бит BCD.

Биты declet: b9 b8 b7 b6 b5 b4 b3 b2 b1 b0

    b6 b5 b4 b3 b2 b1   d2          d1          d0
    .  .  .  0  .  .    b9 b8 b7    b6 b5 b4    b2 b1 b0
    .  .  .  1  0  0    b9 b8 b7    b6 b5 b4    8 + b0
    .  .  .  1  0  1    b9 b8 b7    8 + b4      b6 b5 b0
    .  .  .  1  1  0    8 + b7      b6 b5 b4    b9 b8 b0
    0  0  .  1  1  1    8 + b7      8 + b4      b9 b8 b0
    0  1  .  1  1  1    8 + b7      b9 b8 b4    8 + b0
    1  0  .  1  1  1    b9 b8 b7    8 + b4      8 + b0
    1  1  .  1  1  1    8 + b7      8 + b4      8 + b0   (b9 b8 не важны)

24 кода последней строки с b9 b8 != 00 — неканонические, но валидные
синонимы 888..999.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый из 1024 кодов декодируется в три цифры 0..9
2. 1000 канонических кодов биективно отображаются на 000..999
3. Declet декодируются независимо (нет переносов между declet)
"""

from typing import Final, Iterable, Tuple

from decimal128.core.domain.layout import DECLET_BITS, DECLET_COUNT, TRAILING_BITS

DigitTriple = Tuple[int, int, int]

DECLET_MASK: Final[int] = (1 << DECLET_BITS) - 1
DECLET_VALUES: Final[int] = 1 << DECLET_BITS


# =============================================================================
# DECLET
# =============================================================================


def _decode_declet_bits(declet: int) -> DigitTriple:
    high = (declet >> 7) & 0b111  # b9 b8 b7
    middle = (declet >> 4) & 0b111  # b6 b5 b4
    low = declet & 0b111  # b2 b1 b0

    b0 = declet & 1
    b4 = (declet >> 4) & 1
    b7 = (declet >> 7) & 1
    b98 = (declet >> 8) & 0b11
    b65 = (declet >> 5) & 0b11

    if not (declet >> 3) & 1:
        return high, middle, low

    selector = (declet >> 1) & 0b11  # b2 b1
    if selector == 0b00:
        return high, middle, 8 + b0
    if selector == 0b01:
        return high, 8 + b4, (b65 << 1) | b0
    if selector == 0b10:
        return 8 + b7, middle, (b98 << 1) | b0

    # b3 b2 b1 = 111: две или три большие цифры, выбор по b6 b5
    if b65 == 0b00:
        return 8 + b7, 8 + b4, (b98 << 1) | b0
    if b65 == 0b01:
        return 8 + b7, (b98 << 1) | b4, 8 + b0
    if b65 == 0b10:
        return high, 8 + b4, 8 + b0
    return 8 + b7, 8 + b4, 8 + b0


# Таблица строится один раз при импорте и не изменяется
DPD_TABLE: Final[Tuple[DigitTriple, ...]] = tuple(
    _decode_declet_bits(declet) for declet in range(DECLET_VALUES)
)


def decode_declet(declet: int) -> DigitTriple:
    """
    Декодирование одного declet в три цифры (сотни, десятки, единицы).

    Args:
        declet: 10-битное значение (0..1023)

    Returns:
        (d2, d1, d0), каждая цифра 0..9

    Raises:
        ValueError: Если declet не помещается в 10 бит

    Examples:
        >>> decode_declet(0x0A3)
        (1, 2, 3)
        >>> decode_declet(0x0FF)
        (9, 9, 9)
    """
    if not 0 <= declet < DECLET_VALUES:
        raise ValueError(f"declet must fit in 10 bits, got {declet:#x}")
    return DPD_TABLE[declet]


def is_canonical_declet(declet: int) -> bool:
    """
    Проверка, является ли declet каноническим кодом.

    Неканонические: b3 b2 b1 = 111, b6 b5 = 11, b9 b8 != 00 (24 кода).
    """
    if not 0 <= declet < DECLET_VALUES:
        raise ValueError(f"declet must fit in 10 bits, got {declet:#x}")
    all_large = (declet & 0b1110) == 0b1110 and (declet & 0b1100000) == 0b1100000
    return not (all_large and declet >> 8)


# =============================================================================
# TRAILING SIGNIFICAND
# =============================================================================


def decode_trailing_significand(trailing: int) -> Tuple[int, ...]:
    """
    Декодирование 110-битного trailing significand в 33 цифры.

    Declet читаются от старшего к младшему.

    Args:
        trailing: Значение trailing поля (0 <= trailing < 2**110)

    Returns:
        Кортеж из 33 цифр, старшая первой

    Raises:
        ValueError: Если значение не помещается в 110 бит
    """
    if not 0 <= trailing < (1 << TRAILING_BITS):
        raise ValueError(f"trailing significand must fit in 110 bits, got {trailing:#x}")

    digits = []
    for index in range(DECLET_COUNT - 1, -1, -1):
        declet = (trailing >> (index * DECLET_BITS)) & DECLET_MASK
        digits.extend(DPD_TABLE[declet])
    return tuple(digits)


def digits_to_int(digits: Iterable[int]) -> int:
    """Сборка целого из последовательности десятичных цифр (старшая первой)."""
    value = 0
    for digit in digits:
        value = value * 10 + digit
    return value

"""
Combination Field — Классификация значения по combination полю

IEEE 754-2008, 3.5.2 (G0..G4)

Результат — tagged variant: дальнейшие стадии не анализируют биты заново.

    G0..G4   Класс          Старшие биты экспоненты   Старшая цифра
    00xyz    Finite         00                        xyz (0-7)
    01xyz    Finite         01                        xyz (0-7)
    10xyz    Finite         10                        xyz (0-7)
    1100z    Finite         00                        8 + z
    1101z    Finite         01                        8 + z
    1110z    Finite         10                        8 + z
    11110    Infinity       -                         -
    11111 0  Quiet NaN      -                         -
    11111 1  Signaling NaN  -                         -

Для Infinity/NaN остальные биты игнорируются: ненулевые биты не ошибка.
"""

from dataclasses import dataclass
from typing import Final, Union

from decimal128.core.domain.layout import (
    COMBINATION_BITS,
    EXPONENT_BIAS,
    EXPONENT_CONTINUATION_BITS,
)

CONTINUATION_MASK: Final[int] = (1 << EXPONENT_CONTINUATION_BITS) - 1

# G5: старший бит продолжения, различает quiet/signaling NaN
SIGNALING_BIT: Final[int] = 1 << (EXPONENT_CONTINUATION_BITS - 1)

_SPECIAL_PREFIX: Final[int] = 0b11


# =============================================================================
# VARIANTS
# =============================================================================


@dataclass(frozen=True)
class FiniteCombination:
    """Конечное значение: старшие биты экспоненты + старшая цифра коэффициента."""

    exponent_msbs: int
    leading_digit: int
    exponent_continuation: int

    @property
    def biased_exponent(self) -> int:
        return (self.exponent_msbs << EXPONENT_CONTINUATION_BITS) | self.exponent_continuation

    @property
    def exponent(self) -> int:
        """Несмещённая экспонента (biased - 6176)."""
        return self.biased_exponent - EXPONENT_BIAS


@dataclass(frozen=True)
class InfinityCombination:
    pass


@dataclass(frozen=True)
class QuietNaNCombination:
    pass


@dataclass(frozen=True)
class SignalingNaNCombination:
    pass


CombinationField = Union[
    FiniteCombination,
    InfinityCombination,
    QuietNaNCombination,
    SignalingNaNCombination,
]

INFINITY: Final[InfinityCombination] = InfinityCombination()
QUIET_NAN: Final[QuietNaNCombination] = QuietNaNCombination()
SIGNALING_NAN: Final[SignalingNaNCombination] = SignalingNaNCombination()


# =============================================================================
# DECODER
# =============================================================================


def decode_combination(combination: int) -> CombinationField:
    """
    Классификация 17-битного combination поля.

    Args:
        combination: Значение combination поля (0 <= combination < 2**17)

    Returns:
        FiniteCombination, INFINITY, QUIET_NAN или SIGNALING_NAN

    Raises:
        ValueError: Если значение не помещается в 17 бит

    Examples:
        >>> decode_combination(0b01000_100000100000).exponent
        0
        >>> decode_combination(0b11110_000000000000)
        InfinityCombination()
    """
    if not 0 <= combination < (1 << COMBINATION_BITS):
        raise ValueError(f"combination field must fit in 17 bits, got {combination:#x}")

    g = combination >> EXPONENT_CONTINUATION_BITS
    continuation = combination & CONTINUATION_MASK

    # 00xyz / 01xyz / 10xyz
    if g >> 3 != _SPECIAL_PREFIX:
        return FiniteCombination(
            exponent_msbs=g >> 3,
            leading_digit=g & 0b111,
            exponent_continuation=continuation,
        )

    # 1100z / 1101z / 1110z
    exponent_msbs = (g >> 1) & 0b11
    if exponent_msbs != _SPECIAL_PREFIX:
        return FiniteCombination(
            exponent_msbs=exponent_msbs,
            leading_digit=8 + (g & 1),
            exponent_continuation=continuation,
        )

    if not g & 1:
        return INFINITY

    if continuation & SIGNALING_BIT:
        return SIGNALING_NAN
    return QUIET_NAN

"""
Layout — Параметры формата decimal128

IEEE 754-2008, 3.5.2 (decimal interchange formats, k = 128)

Единственное место, где зафиксированы размеры полей, bias экспоненты и
границы коэффициента. Все остальные модули берут константы отсюда.

Раскладка 128 бит (big-endian, бит 127 — старший бит байта 0):

    [ 1 бит ][   17 бит    ][        110 бит        ]
      sign    combination     trailing significand

combination = G0..G4 (5 бит выбора формата) + 12 бит продолжения экспоненты.
"""

from enum import Enum
from typing import Final


# =============================================================================
# РАЗМЕРЫ ПОЛЕЙ
# =============================================================================

BUFFER_LENGTH: Final[int] = 16

COMBINATION_BITS: Final[int] = 17
TRAILING_BITS: Final[int] = 110
EXPONENT_CONTINUATION_BITS: Final[int] = 12

# 110 бит trailing significand = 11 declet по 10 бит
DECLET_BITS: Final[int] = 10
DECLET_COUNT: Final[int] = 11


# =============================================================================
# ЭКСПОНЕНТА
# =============================================================================

EXPONENT_BIAS: Final[int] = 6176

# Старшие 2 бита biased экспоненты ограничены 00/01/10 → 0..12287
BIASED_EXPONENT_MAX: Final[int] = 12287

EXPONENT_MIN: Final[int] = -EXPONENT_BIAS
EXPONENT_MAX: Final[int] = BIASED_EXPONENT_MAX - EXPONENT_BIAS


# =============================================================================
# КОЭФФИЦИЕНТ
# =============================================================================

MAX_DIGITS: Final[int] = 34
MAX_COEFFICIENT: Final[int] = 10**MAX_DIGITS - 1

# NaN payload занимает только trailing significand (33 цифры)
MAX_PAYLOAD: Final[int] = 10 ** (MAX_DIGITS - 1) - 1


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================

# to-scientific-string: plain нотация пока adjusted exponent >= -6
PLAIN_NOTATION_MIN_ADJUSTED: Final[int] = -6

NAN_TEXT: Final[str] = "NaN"
INFINITY_TEXT: Final[str] = "Infinity"


# =============================================================================
# ENUMS
# =============================================================================


class NumberKind(str, Enum):
    """Классификация декодированного значения"""

    ZERO = "zero"
    FINITE = "finite"
    INFINITY = "infinity"
    QUIET_NAN = "qnan"
    SIGNALING_NAN = "snan"


class CoefficientEncoding(str, Enum):
    """
    Кодировка коэффициента.

    DPD — densely packed decimal (IEEE 754-2008 decimal encoding).
    BID — binary integer decimal (кодировка, которую использует BSON).
    """

    DPD = "dpd"
    BID = "bid"

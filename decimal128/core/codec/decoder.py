"""
Decoder — Конвейер декодирования decimal128

raw bytes → split_fields → decode_combination
         → (DPD | BID коэффициент для конечных значений)
         → проверка 34 цифр → DecodedFields

Модуль stateless: каждый вызов независим и безопасен для параллельного
использования. Ошибки не логируются и не перехватываются, только
пробрасываются вызывающему.
"""

import logging
from dataclasses import dataclass
from typing import Final, NamedTuple, Optional

from decimal128.core.codec.bid import decode_bid_finite, decode_bid_payload
from decimal128.core.codec.bit_fields import BitFields, BufferLike, split_fields
from decimal128.core.codec.combination import (
    FiniteCombination,
    InfinityCombination,
    SignalingNaNCombination,
    decode_combination,
)
from decimal128.core.codec.dpd import decode_trailing_significand, digits_to_int
from decimal128.core.domain.errors import MalformedCoefficient
from decimal128.core.domain.layout import (
    EXPONENT_BIAS,
    MAX_COEFFICIENT,
    CoefficientEncoding,
    NumberKind,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class DecoderConfig:
    """Конфигурация декодера."""

    # Кодировка коэффициента конечных значений и NaN payload
    encoding: CoefficientEncoding = CoefficientEncoding.DPD


DEFAULT_CONFIG: Final[DecoderConfig] = DecoderConfig()


# =============================================================================
# RESULT
# =============================================================================


class DecodedFields(NamedTuple):
    """Поля декодированного значения (до построения Decimal128Value)"""

    kind: NumberKind
    sign: bool
    exponent: int
    coefficient: int
    payload: int


# =============================================================================
# DECODER
# =============================================================================


def decode_fields(buffer: BufferLike, config: Optional[DecoderConfig] = None) -> DecodedFields:
    """
    Декодирование 16-байтового буфера в поля значения.

    Args:
        buffer: Ровно 16 байт в big-endian порядке
        config: Конфигурация (default: DPD)

    Returns:
        DecodedFields

    Raises:
        TypeError: Если buffer не bytes-подобный
        InvalidLength: Если длина буфера не 16 байт
        MalformedCoefficient: Если коэффициент длиннее 34 цифр
    """
    config = config or DEFAULT_CONFIG
    fields = split_fields(buffer)
    combination = decode_combination(fields.combination)

    if isinstance(combination, FiniteCombination):
        result = _decode_finite(fields, combination, config.encoding)
    elif isinstance(combination, InfinityCombination):
        result = DecodedFields(NumberKind.INFINITY, fields.sign, 0, 0, 0)
    else:
        kind = (
            NumberKind.SIGNALING_NAN
            if isinstance(combination, SignalingNaNCombination)
            else NumberKind.QUIET_NAN
        )
        payload = _decode_payload(fields.trailing, config.encoding)
        result = DecodedFields(kind, fields.sign, 0, 0, payload)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "decoded decimal128: kind=%s sign=%s exponent=%d digits=%d encoding=%s",
            result.kind.value,
            result.sign,
            result.exponent,
            len(str(result.coefficient)),
            config.encoding.value,
        )
    return result


def _decode_finite(
    fields: BitFields,
    combination: FiniteCombination,
    encoding: CoefficientEncoding,
) -> DecodedFields:
    if encoding is CoefficientEncoding.BID:
        biased_exponent, coefficient = decode_bid_finite(fields.combination, fields.trailing)
    else:
        biased_exponent = combination.biased_exponent
        trailing_digits = decode_trailing_significand(fields.trailing)
        coefficient = digits_to_int((combination.leading_digit,) + trailing_digits)

    check_coefficient(coefficient)

    kind = NumberKind.ZERO if coefficient == 0 else NumberKind.FINITE
    return DecodedFields(
        kind=kind,
        sign=fields.sign,
        exponent=biased_exponent - EXPONENT_BIAS,
        coefficient=coefficient,
        payload=0,
    )


def _decode_payload(trailing: int, encoding: CoefficientEncoding) -> int:
    if encoding is CoefficientEncoding.BID:
        return decode_bid_payload(trailing)
    return digits_to_int(decode_trailing_significand(trailing))


def check_coefficient(coefficient: int) -> int:
    """
    Проверка инварианта: коэффициент не длиннее 34 цифр.

    Raises:
        MalformedCoefficient: Если coefficient > 10**34 - 1
    """
    if coefficient > MAX_COEFFICIENT:
        raise MalformedCoefficient(coefficient)
    return coefficient

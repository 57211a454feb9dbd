"""
Domain models and value objects.

Contains the decoded Decimal128Value, its classification enums, format
constants and the decode error hierarchy.
"""

from decimal128.core.domain.errors import (
    Decimal128Error,
    InvalidLength,
    MalformedCoefficient,
)
from decimal128.core.domain.layout import (
    BUFFER_LENGTH,
    EXPONENT_BIAS,
    EXPONENT_MAX,
    EXPONENT_MIN,
    MAX_COEFFICIENT,
    MAX_DIGITS,
    MAX_PAYLOAD,
    PLAIN_NOTATION_MIN_ADJUSTED,
    CoefficientEncoding,
    NumberKind,
)
from decimal128.core.domain.value import (
    Decimal128Value,
    decode_decimal128,
    format_decimal128,
)

__all__ = [
    # Errors
    "Decimal128Error",
    "InvalidLength",
    "MalformedCoefficient",
    # Layout constants
    "BUFFER_LENGTH",
    "EXPONENT_BIAS",
    "EXPONENT_MAX",
    "EXPONENT_MIN",
    "MAX_COEFFICIENT",
    "MAX_DIGITS",
    "MAX_PAYLOAD",
    "PLAIN_NOTATION_MIN_ADJUSTED",
    # Enums
    "CoefficientEncoding",
    "NumberKind",
    # Value model
    "Decimal128Value",
    "decode_decimal128",
    "format_decimal128",
]

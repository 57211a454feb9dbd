"""
decimal128 — IEEE 754-2008 decimal128 decoding and canonical formatting.

    >>> from decimal128 import Decimal128Value
    >>> str(Decimal128Value.from_raw_bytes(bytes.fromhex("2208" + "00" * 13 + "01")))
    '1'
"""

# domain до codec: value.py импортирует codec, а codec берёт layout/errors из domain
from decimal128.core.domain import (
    CoefficientEncoding,
    Decimal128Error,
    Decimal128Value,
    InvalidLength,
    MalformedCoefficient,
    NumberKind,
    decode_decimal128,
    format_decimal128,
)
from decimal128.core.codec import DecoderConfig

__all__ = [
    "CoefficientEncoding",
    "Decimal128Error",
    "Decimal128Value",
    "DecoderConfig",
    "InvalidLength",
    "MalformedCoefficient",
    "NumberKind",
    "decode_decimal128",
    "format_decimal128",
]

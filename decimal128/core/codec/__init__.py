"""
Codec modules для decimal128

Разбор битовой раскладки IEEE 754-2008 decimal128 и каноническое
форматирование. Все функции чистые и stateless.
"""

# Bit fields (sign / combination / trailing)
from decimal128.core.codec.bit_fields import BitFields, split_fields

# Combination field
from decimal128.core.codec.combination import (
    INFINITY,
    QUIET_NAN,
    SIGNALING_NAN,
    CombinationField,
    FiniteCombination,
    InfinityCombination,
    QuietNaNCombination,
    SignalingNaNCombination,
    decode_combination,
)

# Densely Packed Decimal
from decimal128.core.codec.dpd import (
    DPD_TABLE,
    decode_declet,
    decode_trailing_significand,
    digits_to_int,
    is_canonical_declet,
)

# Binary Integer Decimal
from decimal128.core.codec.bid import decode_bid_finite, decode_bid_payload

# Decoder pipeline
from decimal128.core.codec.decoder import (
    DEFAULT_CONFIG,
    DecodedFields,
    DecoderConfig,
    check_coefficient,
    decode_fields,
)

# Canonical string
from decimal128.core.codec.formatter import format_finite, to_scientific_string

__all__ = [
    # Bit fields
    "BitFields",
    "split_fields",
    # Combination: Variants
    "CombinationField",
    "FiniteCombination",
    "InfinityCombination",
    "QuietNaNCombination",
    "SignalingNaNCombination",
    "INFINITY",
    "QUIET_NAN",
    "SIGNALING_NAN",
    # Combination: Functions
    "decode_combination",
    # DPD
    "DPD_TABLE",
    "decode_declet",
    "decode_trailing_significand",
    "digits_to_int",
    "is_canonical_declet",
    # BID
    "decode_bid_finite",
    "decode_bid_payload",
    # Decoder
    "DEFAULT_CONFIG",
    "DecodedFields",
    "DecoderConfig",
    "check_coefficient",
    "decode_fields",
    # Formatter
    "format_finite",
    "to_scientific_string",
]

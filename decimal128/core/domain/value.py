"""
Decimal128Value — Декодированное значение decimal128

Immutable Pydantic модель: создаётся один раз из 16 байт и далее только
читается (классификация, форматирование).

ИНВАРИАНТЫ (проверяются валидаторами модели):
1. 0 <= coefficient <= 10**34 - 1
2. EXPONENT_MIN <= exponent <= EXPONENT_MAX
3. kind = ZERO ⟺ coefficient = 0 (для конечных значений)
4. Для Infinity/NaN exponent = coefficient = 0, payload только у NaN
"""

import decimal
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from decimal128.core.codec.bit_fields import BufferLike
from decimal128.core.codec.decoder import DecoderConfig, decode_fields
from decimal128.core.codec.formatter import to_scientific_string
from decimal128.core.domain.layout import (
    BUFFER_LENGTH,
    EXPONENT_MAX,
    EXPONENT_MIN,
    MAX_COEFFICIENT,
    MAX_PAYLOAD,
    NumberKind,
)

_NAN_KINDS = (NumberKind.QUIET_NAN, NumberKind.SIGNALING_NAN)
_NUMERIC_KINDS = (NumberKind.ZERO, NumberKind.FINITE)

# decimal.Decimal tuple exponent для специальных значений
_DECIMAL_SPECIAL_EXPONENT = {
    NumberKind.INFINITY: "F",
    NumberKind.QUIET_NAN: "n",
    NumberKind.SIGNALING_NAN: "N",
}


# =============================================================================
# DECIMAL128 VALUE
# =============================================================================


class Decimal128Value(BaseModel):
    """
    Декодированное значение decimal128.

    Immutable модель (frozen=True). exponent и coefficient имеют смысл только
    для ZERO/FINITE; payload — только для NaN и не выводится в to_string().
    """

    kind: NumberKind = Field(..., description="Классификация значения")
    sign: bool = Field(False, description="True для отрицательных")
    exponent: int = Field(
        0, ge=EXPONENT_MIN, le=EXPONENT_MAX, description="Несмещённая экспонента"
    )
    coefficient: int = Field(0, description="Коэффициент, до 34 цифр")
    payload: int = Field(0, description="Диагностический payload NaN")
    raw: Optional[bytes] = Field(None, description="Исходные 16 байт (big-endian)")

    model_config = {"frozen": True}

    @field_validator("coefficient")
    @classmethod
    def validate_coefficient_range(cls, v: int) -> int:
        if not 0 <= v <= MAX_COEFFICIENT:
            raise ValueError(f"coefficient {v} outside 0..10**34-1")
        return v

    @field_validator("payload")
    @classmethod
    def validate_payload_range(cls, v: int) -> int:
        if not 0 <= v <= MAX_PAYLOAD:
            raise ValueError(f"payload {v} outside 0..10**33-1")
        return v

    @field_validator("raw")
    @classmethod
    def validate_raw_length(cls, v: Optional[bytes]) -> Optional[bytes]:
        if v is not None and len(v) != BUFFER_LENGTH:
            raise ValueError(f"raw must be exactly {BUFFER_LENGTH} bytes, got {len(v)}")
        return v

    @model_validator(mode="after")
    def validate_kind_consistency(self) -> "Decimal128Value":
        """Согласованность kind с числовыми полями."""
        if self.kind is NumberKind.ZERO and self.coefficient != 0:
            raise ValueError(f"ZERO requires coefficient 0, got {self.coefficient}")
        if self.kind is NumberKind.FINITE and self.coefficient == 0:
            raise ValueError("FINITE requires a non-zero coefficient, use ZERO")
        if self.kind not in _NUMERIC_KINDS and (self.exponent != 0 or self.coefficient != 0):
            raise ValueError(f"{self.kind.value} carries no exponent or coefficient")
        if self.kind not in _NAN_KINDS and self.payload != 0:
            raise ValueError(f"{self.kind.value} carries no payload")
        return self

    @classmethod
    def from_raw_bytes(
        cls, buffer: BufferLike, config: Optional[DecoderConfig] = None
    ) -> "Decimal128Value":
        """
        Декодирование значения из 16 байт interchange формата.

        Args:
            buffer: Ровно 16 байт, big-endian
            config: Конфигурация декодера (default: DPD)

        Returns:
            Decimal128Value

        Raises:
            InvalidLength: Если длина буфера не 16 байт
            MalformedCoefficient: Если коэффициент длиннее 34 цифр
        """
        fields = decode_fields(buffer, config)
        return cls(
            kind=fields.kind,
            sign=fields.sign,
            exponent=fields.exponent,
            coefficient=fields.coefficient,
            payload=fields.payload,
            raw=bytes(buffer),
        )

    # -------------------------------------------------------------------------
    # Классификация
    # -------------------------------------------------------------------------

    def is_nan(self) -> bool:
        return self.kind in _NAN_KINDS

    def is_signaling(self) -> bool:
        return self.kind is NumberKind.SIGNALING_NAN

    def is_infinite(self) -> bool:
        return self.kind is NumberKind.INFINITY

    def is_finite(self) -> bool:
        """True для ZERO и FINITE."""
        return self.kind in _NUMERIC_KINDS

    def is_zero(self) -> bool:
        return self.kind is NumberKind.ZERO

    def is_negative(self) -> bool:
        """Знаковый бит (для NaN тоже)."""
        return self.sign

    def is_positive(self) -> bool:
        return not self.sign

    # -------------------------------------------------------------------------
    # Представления
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        """
        Каноническая строка (to-scientific-string).

        NaN всегда "NaN": знак и payload не выводятся.
        """
        return to_scientific_string(self.kind, self.sign, self.exponent, self.coefficient)

    def __str__(self) -> str:
        return self.to_string()

    def to_raw_bytes(self) -> bytes:
        """
        Исходные 16 байт.

        Raises:
            ValueError: Если значение создано не из буфера
        """
        if self.raw is None:
            raise ValueError("value was not decoded from raw bytes")
        return self.raw

    def to_hex(self) -> str:
        """Исходные байты в hex (big-endian, нижний регистр)."""
        return self.to_raw_bytes().hex()

    def to_decimal(self) -> decimal.Decimal:
        """
        Точный эквивалент в decimal.Decimal.

        В отличие от to_string(), сохраняет знак, payload и тип NaN.
        """
        sign = 1 if self.sign else 0
        if self.kind in _DECIMAL_SPECIAL_EXPONENT:
            payload_digits = tuple(int(d) for d in str(self.payload)) if self.payload else ()
            return decimal.Decimal((sign, payload_digits, _DECIMAL_SPECIAL_EXPONENT[self.kind]))

        digits = tuple(int(d) for d in str(self.coefficient))
        return decimal.Decimal((sign, digits, self.exponent))

    def describe(self) -> Dict[str, Any]:
        """
        Диагностическое описание значения.

        Формат соответствует контракту decoded_value.json. Большие целые
        передаются строками.
        """
        return {
            "hex": self.to_hex() if self.raw is not None else None,
            "kind": self.kind.value,
            "sign": self.sign,
            "exponent": self.exponent,
            "coefficient": str(self.coefficient),
            "payload": str(self.payload),
            "text": self.to_string(),
        }


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def decode_decimal128(
    buffer: BufferLike, config: Optional[DecoderConfig] = None
) -> Decimal128Value:
    """Decimal128Value.from_raw_bytes в виде функции."""
    return Decimal128Value.from_raw_bytes(buffer, config)


def format_decimal128(buffer: BufferLike, config: Optional[DecoderConfig] = None) -> str:
    """
    Декодирование и форматирование за один вызов.

    Examples:
        >>> format_decimal128(bytes.fromhex("f8" + "00" * 15))
        '-Infinity'
    """
    return Decimal128Value.from_raw_bytes(buffer, config).to_string()

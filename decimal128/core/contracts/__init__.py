"""
Contract Validation Module

Модуль для валидации JSON контракта декодированных значений decimal128.
"""

from .validators import (
    DecodedValueValidator,
    load_decoded_value_schema,
    validate_decoded_value,
)

__all__ = [
    "DecodedValueValidator",
    "load_decoded_value_schema",
    "validate_decoded_value",
]

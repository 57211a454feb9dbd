"""
Decoded Value Contract

Проверка диагностического описания Decimal128Value.describe():

1. Структура и диапазоны: JSON Schema decoded_value.json (jsonschema)
2. Текст: поле "text" должно совпадать с каноническим форматированием
   полей kind/sign/exponent/coefficient

Схема поставляется в пакете (decimal128/core/contracts/schema/) и читается
через importlib.resources один раз за процесс.
"""

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Dict, Final, Iterator

from jsonschema import Draft202012Validator, ValidationError

from decimal128.core.codec.formatter import to_scientific_string
from decimal128.core.domain.layout import NumberKind

SCHEMA_FILE: Final[str] = "decoded_value.json"


@lru_cache(maxsize=None)
def load_decoded_value_schema() -> Dict[str, Any]:
    """
    Загрузка и meta-валидация decoded_value.json.

    Returns:
        Схема как dict (один и тот же объект при повторных вызовах)

    Raises:
        jsonschema.SchemaError: Если схема не проходит meta-validation
    """
    schema_text = (
        resources.files("decimal128.core.contracts") / "schema" / SCHEMA_FILE
    ).read_text(encoding="utf-8")
    schema = json.loads(schema_text)
    Draft202012Validator.check_schema(schema)
    return schema


# =============================================================================
# DECODED VALUE VALIDATOR
# =============================================================================


class DecodedValueValidator:
    """
    Валидатор описания декодированного значения.

    Сначала проверяет схему; текстовое поле сверяется с форматированием
    только для структурно валидных данных.
    """

    def __init__(self):
        self._schema_validator = Draft202012Validator(load_decoded_value_schema())

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Все нарушения: ошибки схемы либо расхождение текста."""
        schema_errors = list(self._schema_validator.iter_errors(data))
        if schema_errors:
            yield from schema_errors
            return

        expected = to_scientific_string(
            NumberKind(data["kind"]),
            data["sign"],
            data["exponent"],
            int(data["coefficient"]),
        )
        if data["text"] != expected:
            yield ValidationError(
                f"text {data['text']!r} does not match canonical form {expected!r}",
                path=["text"],
                validator="canonical_text",
                instance=data["text"],
            )

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первое найденное нарушение
        """
        for error in self.iter_errors(data):
            raise error

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return next(self.iter_errors(data), None) is None


def validate_decoded_value(data: Dict[str, Any]) -> None:
    """
    Валидация результата Decimal128Value.describe().

    Raises:
        ValidationError: Если данные не соответствуют контракту
    """
    DecodedValueValidator().validate(data)

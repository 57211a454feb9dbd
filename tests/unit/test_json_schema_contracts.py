"""
Tests for JSON Schema Contract Validators

Тестирование контракта decoded_value.json:
- Валидность самой схемы
- Валидация describe() для всех классов значений
- Детекция нарушений required полей и типов
- Детекция нарушений constraints (enum/pattern/min/max)
- Согласованность kind с числовыми полями (if/then)
- Совпадение поля text с каноническим форматированием
"""

import pytest
from jsonschema import ValidationError

from decimal128 import CoefficientEncoding, Decimal128Value, DecoderConfig, NumberKind
from decimal128.core.contracts import (
    DecodedValueValidator,
    load_decoded_value_schema,
    validate_decoded_value,
)


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_decoded_value():
    """Валидное описание конечного значения."""
    return Decimal128Value.from_raw_bytes(
        bytes.fromhex("a208" + "00" * 13 + "05")
    ).describe()


# =============================================================================
# TESTS - SCHEMA LOADING
# =============================================================================


def test_schema_is_packaged_and_valid():
    """Схема читается из пакета и проходит meta-validation."""
    schema = load_decoded_value_schema()

    assert schema["properties"]["exponent"]["minimum"] == -6176
    assert schema["properties"]["exponent"]["maximum"] == 6111


def test_schema_loaded_once():
    """Повторная загрузка возвращает тот же объект."""
    assert load_decoded_value_schema() is load_decoded_value_schema()


# =============================================================================
# TESTS - DECODED VALUE VALIDATION
# =============================================================================


def test_decoded_value_validator_accepts_valid_data(valid_decoded_value):
    """Валидация правильного описания."""
    validator = DecodedValueValidator()
    validator.validate(valid_decoded_value)  # Не должно выбросить исключение
    assert validator.is_valid(valid_decoded_value)


def test_decoded_value_validate_function(valid_decoded_value):
    """Проверка функции validate_decoded_value."""
    validate_decoded_value(valid_decoded_value)


@pytest.mark.parametrize(
    "hex_string",
    [
        "00" * 16,  # ноль
        "a208" + "00" * 14,  # -0
        "77ffcff3fcff3fcff3fcff3fcff3fcff",  # максимум
        "00" * 15 + "01",  # 1E-6176
        "f8" + "00" * 15,  # -Infinity
        "7c" + "00" * 14 + "a3",  # NaN с payload
        "fe" + "00" * 15,  # -sNaN
    ],
)
def test_describe_of_decoded_values_is_valid(hex_string):
    """describe() любого декодированного значения соответствует контракту."""
    validate_decoded_value(Decimal128Value.from_raw_bytes(bytes.fromhex(hex_string)).describe())


def test_describe_of_bid_value_is_valid():
    """describe() значения в BID кодировке соответствует контракту."""
    config = DecoderConfig(encoding=CoefficientEncoding.BID)
    value = Decimal128Value.from_raw_bytes(bytes.fromhex("3034" + "00" * 12 + "04d2"), config)
    validate_decoded_value(value.describe())


def test_decoded_value_accepts_null_hex():
    """Значение, созданное без буфера, описывается с hex = null."""
    value = Decimal128Value(kind=NumberKind.FINITE, exponent=-2, coefficient=12345)
    data = value.describe()
    assert data["hex"] is None
    validate_decoded_value(data)


def test_decoded_value_rejects_missing_required_field(valid_decoded_value):
    """Валидация отклоняет данные без обязательных полей."""
    validator = DecodedValueValidator()

    data = valid_decoded_value.copy()
    del data["text"]

    with pytest.raises(ValidationError) as exc_info:
        validator.validate(data)
    assert "'text' is a required property" in str(exc_info.value)


def test_decoded_value_rejects_wrong_type(valid_decoded_value):
    """Валидация отклоняет неправильный тип данных."""
    validator = DecodedValueValidator()

    # Коэффициент передаётся строкой, а не числом
    data = valid_decoded_value.copy()
    data["coefficient"] = 5

    with pytest.raises(ValidationError) as exc_info:
        validator.validate(data)
    assert "is not of type 'string'" in str(exc_info.value)


def test_decoded_value_rejects_invalid_kind(valid_decoded_value):
    """Валидация отклоняет неизвестный kind."""
    data = valid_decoded_value.copy()
    data["kind"] = "subnormal"

    with pytest.raises(ValidationError):
        validate_decoded_value(data)


def test_decoded_value_rejects_exponent_out_of_range(valid_decoded_value):
    """Валидация отклоняет экспоненту вне -6176..6111."""
    data = valid_decoded_value.copy()
    data["exponent"] = 6112

    with pytest.raises(ValidationError):
        validate_decoded_value(data)


def test_decoded_value_rejects_35_digit_coefficient(valid_decoded_value):
    """Коэффициент длиннее 34 цифр нарушает pattern."""
    data = valid_decoded_value.copy()
    data["coefficient"] = "1" + "0" * 34

    with pytest.raises(ValidationError):
        validate_decoded_value(data)


def test_decoded_value_rejects_uppercase_hex(valid_decoded_value):
    """hex только в нижнем регистре."""
    data = valid_decoded_value.copy()
    data["hex"] = data["hex"].upper()

    with pytest.raises(ValidationError):
        validate_decoded_value(data)


def test_decoded_value_rejects_extra_field(valid_decoded_value):
    """Дополнительные поля запрещены."""
    data = valid_decoded_value.copy()
    data["digits"] = 1

    with pytest.raises(ValidationError):
        validate_decoded_value(data)


# =============================================================================
# TESTS - KIND CONSISTENCY
# =============================================================================


def test_infinity_with_coefficient_rejected():
    """Infinity с ненулевым коэффициентом нарушает контракт."""
    data = Decimal128Value.from_raw_bytes(bytes.fromhex("78" + "00" * 15)).describe()
    data["coefficient"] = "7"

    with pytest.raises(ValidationError):
        validate_decoded_value(data)


def test_zero_with_coefficient_rejected():
    """ZERO с ненулевым коэффициентом нарушает контракт."""
    data = Decimal128Value.from_raw_bytes(bytes(16)).describe()
    data["coefficient"] = "1"

    with pytest.raises(ValidationError):
        validate_decoded_value(data)


def test_finite_with_zero_coefficient_rejected(valid_decoded_value):
    """FINITE с нулевым коэффициентом нарушает контракт."""
    data = valid_decoded_value.copy()
    data["coefficient"] = "0"

    with pytest.raises(ValidationError):
        validate_decoded_value(data)


def test_iter_errors_returns_all_errors(valid_decoded_value):
    """Проверка, что iter_errors возвращает все ошибки валидации."""
    validator = DecodedValueValidator()

    invalid_data = valid_decoded_value.copy()
    invalid_data["kind"] = "INVALID"  # enum violation - НАРУШЕНИЕ
    invalid_data["sign"] = "yes"  # type violation - НАРУШЕНИЕ
    invalid_data["exponent"] = -7000  # minimum - НАРУШЕНИЕ
    invalid_data["payload"] = "-1"  # pattern - НАРУШЕНИЕ

    errors = list(validator.iter_errors(invalid_data))
    assert len(errors) >= 4


# =============================================================================
# TESTS - CANONICAL TEXT
# =============================================================================


def test_text_must_match_canonical_form(valid_decoded_value):
    """Текст, не совпадающий с форматированием полей, отклоняется."""
    data = valid_decoded_value.copy()
    data["text"] = "-5.0"  # проходит pattern схемы, но не каноничен

    validator = DecodedValueValidator()
    assert not validator.is_valid(data)
    with pytest.raises(ValidationError) as exc_info:
        validator.validate(data)
    assert "canonical form '-5'" in str(exc_info.value)
    assert list(exc_info.value.path) == ["text"]


def test_text_checked_against_exponent(valid_decoded_value):
    """Изменение экспоненты без изменения текста обнаруживается."""
    data = valid_decoded_value.copy()
    data["exponent"] = -7

    errors = list(DecodedValueValidator().iter_errors(data))
    assert len(errors) == 1
    assert "'-5E-7'" in errors[0].message


def test_text_of_all_zero_buffer_is_canonical():
    """Нулевой буфер описывается текстом "0"."""
    data = Decimal128Value.from_raw_bytes(bytes(16)).describe()
    assert data["text"] == "0"
    validate_decoded_value(data)


def test_text_check_skipped_on_schema_errors(valid_decoded_value):
    """При ошибках схемы сверка текста не выполняется."""
    data = valid_decoded_value.copy()
    data["kind"] = "subnormal"
    data["text"] = "garbage"

    errors = list(DecodedValueValidator().iter_errors(data))
    assert errors
    assert all(error.validator != "canonical_text" for error in errors)

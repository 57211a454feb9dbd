"""
Canonical String — Преобразование в to-scientific-string

IEEE 754-2008, 5.12.2; General Decimal Arithmetic, "to-scientific-string"

Правила:
- NaN (quiet и signaling) → "NaN" без знака и payload
- Infinity → "Infinity" / "-Infinity"
- Конечное значение: digits = коэффициент без ведущих нулей, n = len(digits),
  adjusted = exponent + n - 1
  - exponent <= 0 и adjusted >= -6 → plain нотация ("123.45", "0.00012")
  - иначе → экспоненциальная ("1.2345E+7", "1E-7")
- Знак "-" ставится перед любым отрицательным конечным значением, включая 0

Особый случай: ноль с минимальной экспонентой (все биты экспоненты и
коэффициента нулевые) выводится как "0" / "-0".
"""

from decimal128.core.domain.layout import (
    EXPONENT_MIN,
    INFINITY_TEXT,
    NAN_TEXT,
    PLAIN_NOTATION_MIN_ADJUSTED,
    NumberKind,
)


def to_scientific_string(kind: NumberKind, sign: bool, exponent: int, coefficient: int) -> str:
    """
    Каноническое текстовое представление значения.

    Для Infinity/NaN exponent и coefficient не читаются.

    Args:
        kind: Классификация значения
        sign: True для отрицательных
        exponent: Несмещённая экспонента
        coefficient: Коэффициент (0 <= coefficient)

    Returns:
        Строка в канонической форме

    Examples:
        >>> to_scientific_string(NumberKind.FINITE, False, -6, 1234)
        '0.001234'
        >>> to_scientific_string(NumberKind.ZERO, True, 3, 0)
        '-0E+3'
        >>> to_scientific_string(NumberKind.SIGNALING_NAN, True, 0, 0)
        'NaN'
    """
    if kind in (NumberKind.QUIET_NAN, NumberKind.SIGNALING_NAN):
        return NAN_TEXT

    prefix = "-" if sign else ""

    if kind is NumberKind.INFINITY:
        return prefix + INFINITY_TEXT

    if kind is NumberKind.ZERO and exponent == EXPONENT_MIN:
        return prefix + "0"

    return prefix + format_finite(coefficient, exponent)


def format_finite(coefficient: int, exponent: int) -> str:
    """
    Модуль конечного значения coefficient × 10**exponent без знака.

    Raises:
        ValueError: Если coefficient отрицательный
    """
    if coefficient < 0:
        raise ValueError(f"coefficient must be non-negative, got {coefficient}")

    digits = str(coefficient)
    adjusted = exponent + len(digits) - 1

    if exponent <= 0 and adjusted >= PLAIN_NOTATION_MIN_ADJUSTED:
        return _plain_notation(digits, exponent)
    return _exponential_notation(digits, adjusted)


def _plain_notation(digits: str, exponent: int) -> str:
    if exponent == 0:
        return digits

    # Цифр слева от десятичной точки
    integer_length = len(digits) + exponent
    if integer_length > 0:
        return f"{digits[:integer_length]}.{digits[integer_length:]}"
    return "0." + "0" * -integer_length + digits


def _exponential_notation(digits: str, adjusted: int) -> str:
    if len(digits) > 1:
        mantissa = f"{digits[0]}.{digits[1:]}"
    else:
        mantissa = digits
    return f"{mantissa}E{adjusted:+d}"

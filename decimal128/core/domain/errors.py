"""
Ошибки декодирования decimal128.

Декодирование — чистая детерминированная функция входа: повтор с тем же
буфером упадёт так же, поэтому ошибки только пробрасываются вызывающему.
"""


class Decimal128Error(ValueError):
    """Базовая ошибка декодирования decimal128."""

    pass


class InvalidLength(Decimal128Error):
    """
    Буфер не равен 16 байтам.

    Декодирование прерывается, частичный результат не возвращается.
    """

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"decimal128 buffer must be exactly 16 bytes, got {length}")


class MalformedCoefficient(Decimal128Error):
    """
    Коэффициент превышает 34 десятичные цифры.

    Из корректно закодированного буфера такое не возникает. Значение не
    усекается: ошибка указывает на повреждение данных выше по потоку.
    """

    def __init__(self, coefficient: int):
        self.coefficient = coefficient
        super().__init__(
            f"decimal128 coefficient {coefficient} exceeds 34 digits "
            f"({len(str(coefficient))} digits)"
        )

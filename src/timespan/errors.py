"""
Timespan Errors — Таксономия исключений

Все ошибки локальные и синхронные: операции чистые и детерминированные,
повтор вызова результат не меняет.

- NullArgumentError: отсутствующий операнд в строгом сравнении
- TypeMismatchError: операнд без millisecond-length capability
- FieldOverflowError: поле периода не помещается в допустимый диапазон
"""


class TimespanError(Exception):
    """Базовое исключение пакета timespan."""

    pass


class NullArgumentError(TimespanError, ValueError):
    """
    Операнд строгого сравнения отсутствует (None).

    Null-safe предикаты (is_equal_length, is_longer, is_shorter) это
    исключение никогда не поднимают: None для них означает нулевую длину.
    """

    pass


class TypeMismatchError(TimespanError, TypeError):
    """Операнд не предоставляет get_millis() (не ReadableDuration)."""

    def __init__(self, operand: object):
        self.operand_type = type(operand)
        super().__init__(
            f"Expected a ReadableDuration, got {self.operand_type.__qualname__}"
        )


class FieldOverflowError(TimespanError, OverflowError):
    """
    Значение поля периода превышает представимый диапазон.

    Attributes:
        field: Поле, на котором произошло переполнение
        value: Вычисленное значение поля
        max_value: Допустимый максимум
    """

    def __init__(self, field: str, value: int, max_value: int):
        self.field = field
        self.value = value
        self.max_value = max_value
        super().__init__(
            f"Period field '{field}' overflow: {value} > {max_value} "
            f"(no partial period returned)"
        )

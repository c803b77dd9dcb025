"""
Integer Safeguards — Примитивы фиксированной разрядности

Python int не ограничен по размеру, поэтому семантика 64-битных и
32-битных целых задаётся здесь явно:
- Границы int32/int64
- Валидация диапазона с понятным сообщением об ошибке
- Логический сдвиг вправо (>>>) для 64-битного дополнительного кода
- Усечение до знакового int32

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Значения за пределами int64 отклоняются, а не усекаются
2. Все операции детерминированы и не зависят от платформы
"""

from typing import Final

# =============================================================================
# ГРАНИЦЫ
# =============================================================================

INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

# Маски для двоичного дополнения
_MASK32: Final[int] = 0xFFFF_FFFF
_MASK64: Final[int] = 0xFFFF_FFFF_FFFF_FFFF


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_int_range(
    value: int,
    name: str,
    min_value: int | None = None,
    max_value: int | None = None,
) -> None:
    """
    Валидация, что целое значение в заданном диапазоне.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Raises:
        TypeError: Если value не int (bool тоже отклоняется)
        ValueError: Если value вне диапазона
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")


# =============================================================================
# БИТОВЫЕ ОПЕРАЦИИ
# =============================================================================


def unsigned_shift_right64(value: int, bits: int) -> int:
    """
    Логический сдвиг вправо 64-битного значения (аналог >>>).

    Отрицательные значения интерпретируются как двоичное дополнение,
    старшие биты заполняются нулями.

    Examples:
        >>> unsigned_shift_right64(-1, 32)
        4294967295
        >>> unsigned_shift_right64(1 << 40, 32)
        256
    """
    return (value & _MASK64) >> bits


def to_int32(value: int) -> int:
    """
    Усечение до знакового int32 (младшие 32 бита, двоичное дополнение).

    Examples:
        >>> to_int32(0xFFFF_FFFF)
        -1
        >>> to_int32(2**31)
        -2147483648
        >>> to_int32(42)
        42
    """
    low = value & _MASK32
    if low > INT32_MAX:
        return low - (1 << 32)
    return low

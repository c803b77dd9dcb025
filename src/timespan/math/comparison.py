"""
Comparison — Сравнение и равенство длительностей

Два контракта, которые намеренно не смешиваются:
- Null-safe предикаты (is_equal_length, is_longer, is_shorter):
  отсутствующий операнд (None) трактуется как длительность 0 мс
- Строгое сравнение (compare_strict): None → NullArgumentError,
  операнд без get_millis() → TypeMismatchError

Равенство и хеш определены над извлечённой длиной (capability
ReadableDuration), поэтому разные реализации с равной длиной равны
и имеют одинаковый хеш.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сравнение прямое (<, >), без вычитания двух int64
2. value_equals(a, b) ⇒ value_hash(a) == value_hash(b)
3. hash = (int32)(millis ^ (millis >>> 32))
"""

import logging
from typing import Any, Optional

from src.timespan.domain.readable import ReadableDuration
from src.timespan.errors import NullArgumentError, TypeMismatchError
from src.timespan.math.int_safeguards import to_int32, unsigned_shift_right64

log = logging.getLogger(__name__)


# =============================================================================
# ПОЛНЫЙ ПОРЯДОК
# =============================================================================


def compare_length(a: ReadableDuration, b: ReadableDuration) -> int:
    """
    Сравнение длительностей по длине.

    Returns:
        -1 если a короче b, 0 если равны, 1 если a длиннее b
    """
    a_millis = a.get_millis()
    b_millis = b.get_millis()
    if a_millis < b_millis:
        return -1
    if a_millis > b_millis:
        return 1
    return 0


def compare_strict(a: ReadableDuration, b: Any) -> int:
    """
    Строгое сравнение с проверкой операнда.

    Args:
        a: Длительность
        b: Произвольный объект, ожидается ReadableDuration

    Returns:
        Результат compare_length(a, b)

    Raises:
        NullArgumentError: Если b is None
        TypeMismatchError: Если b не предоставляет get_millis()
    """
    if b is None:
        raise NullArgumentError("Cannot compare a duration with None")
    if not isinstance(b, ReadableDuration):
        log.debug("Rejected comparison with %s", type(b).__qualname__)
        raise TypeMismatchError(b)
    return compare_length(a, b)


# =============================================================================
# NULL-SAFE ПРЕДИКАТЫ
# =============================================================================


def _millis_or_zero(duration: Optional[ReadableDuration]) -> int:
    if duration is None:
        return 0
    return duration.get_millis()


def is_equal_length(a: ReadableDuration, b: Optional[ReadableDuration] = None) -> bool:
    """Длина a равна длине b (None означает 0 мс)."""
    return a.get_millis() == _millis_or_zero(b)


def is_longer(a: ReadableDuration, b: Optional[ReadableDuration] = None) -> bool:
    """a строго длиннее b (None означает 0 мс)."""
    return a.get_millis() > _millis_or_zero(b)


def is_shorter(a: ReadableDuration, b: Optional[ReadableDuration] = None) -> bool:
    """a строго короче b (None означает 0 мс)."""
    return a.get_millis() < _millis_or_zero(b)


# =============================================================================
# РАВЕНСТВО И ХЕШ
# =============================================================================


def value_equals(a: ReadableDuration, b: Any) -> bool:
    """
    Равенство по длине для любой реализации ReadableDuration.

    Returns:
        True если b — ReadableDuration той же длины, иначе False
    """
    if not isinstance(b, ReadableDuration):
        return False
    return a.get_millis() == b.get_millis()


def value_hash(a: ReadableDuration) -> int:
    """
    Хеш, совместимый с value_equals.

    Формула фиксирована для всех реализаций:
        hash = (int32)(millis ^ (millis >>> 32))

    Например, для millis = -1 и millis = 0 хеш равен 0, для 2**32 + 5 равен 4.
    """
    millis = a.get_millis()
    return to_int32(millis ^ unsigned_shift_right64(millis, 32))

"""
Duration — Точная длительность в миллисекундах

Immutable Pydantic модель со знаковой 64-битной длиной. Равенство,
хеш и порядок зависят только от millis и совместимы с любой другой
реализацией ReadableDuration.

Для преобразований с учётом часового пояса или реального календаря
длительность нужно привязать к фиксированному моменту (интервал);
здесь все единицы фиксированной длины (UTC).
"""

from datetime import timedelta
from typing import Any, Optional

from pydantic import BaseModel, Field

from src.timespan.domain.fields import (
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
)
from src.timespan.domain.period import Period
from src.timespan.domain.period_type import DEFAULT_PERIOD_TYPE, PeriodType
from src.timespan.domain.readable import ReadableDuration
from src.timespan.format.canonical import to_canonical_text
from src.timespan.math.apportion import apportion
from src.timespan.math.comparison import (
    compare_strict,
    is_equal_length,
    is_longer,
    is_shorter,
    value_equals,
    value_hash,
)
from src.timespan.math.int_safeguards import INT64_MAX, INT64_MIN

_ONE_MILLISECOND = timedelta(milliseconds=1)


# =============================================================================
# DURATION MODEL
# =============================================================================


class Duration(BaseModel):
    """
    Точная, не зависящая от календаря длительность.

    Immutable модель (frozen=True). Может быть отрицательной.
    """

    millis: int = Field(
        ..., ge=INT64_MIN, le=INT64_MAX, description="Длина в миллисекундах (int64)"
    )

    model_config = {"frozen": True, "strict": True}

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def of_seconds(cls, seconds: int) -> "Duration":
        return cls(millis=seconds * MILLIS_PER_SECOND)

    @classmethod
    def of_minutes(cls, minutes: int) -> "Duration":
        return cls(millis=minutes * MILLIS_PER_MINUTE)

    @classmethod
    def of_hours(cls, hours: int) -> "Duration":
        return cls(millis=hours * MILLIS_PER_HOUR)

    @classmethod
    def of_days(cls, days: int) -> "Duration":
        """Стандартные дни по 24 часа (без учёта DST)."""
        return cls(millis=days * MILLIS_PER_DAY)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "Duration":
        """
        Конверсия timedelta → Duration.

        Доли миллисекунды отбрасываются округлением вниз (floor).
        """
        return cls(millis=delta // _ONE_MILLISECOND)

    @classmethod
    def from_readable(cls, duration: ReadableDuration) -> "Duration":
        """
        Нормализация любой реализации ReadableDuration в Duration.

        Полезно, если реализации нельзя доверять или нужен гарантированно
        immutable объект.
        """
        if isinstance(duration, Duration):
            return duration
        return cls(millis=duration.get_millis())

    @classmethod
    def from_period(cls, period: Period) -> "Duration":
        """Обратная сборка длительности из периода (со знаком)."""
        return cls(millis=period.to_millis())

    # -------------------------------------------------------------------------
    # ReadableDuration
    # -------------------------------------------------------------------------

    def get_millis(self) -> int:
        return self.millis

    def to_duration(self) -> "Duration":
        """Гарантированно immutable Duration (для Duration возвращает self)."""
        return self

    def to_period(self, period_type: PeriodType = DEFAULT_PERIOD_TYPE) -> Period:
        """
        Разбиение на поля периода.

        По умолчанию используется PeriodType.ALL: годы и месяцы остаются 0,
        крупные длительности уходят в недели. Например, (365 + 60 + 5) дней
        дают 61 неделю и 3 дня, а с PeriodType.PRECISE_ALL — 1 год,
        2 месяца и 5 дней.

        Raises:
            FieldOverflowError: Если значение поля не помещается в int32
        """
        return apportion(self.millis, period_type)

    def to_timedelta(self) -> timedelta:
        """
        Raises:
            OverflowError: Если длина вне диапазона timedelta (±999999999 дней)
        """
        return timedelta(milliseconds=self.millis)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare_to(self, other: Any) -> int:
        """
        Строгое сравнение по длине.

        Raises:
            NullArgumentError: Если other is None
            TypeMismatchError: Если other не ReadableDuration
        """
        return compare_strict(self, other)

    def is_equal(self, other: Optional[ReadableDuration] = None) -> bool:
        return is_equal_length(self, other)

    def is_longer_than(self, other: Optional[ReadableDuration] = None) -> bool:
        return is_longer(self, other)

    def is_shorter_than(self, other: Optional[ReadableDuration] = None) -> bool:
        return is_shorter(self, other)

    def value_hash(self) -> int:
        """Хеш int32 по формуле (int32)(millis ^ (millis >>> 32))."""
        return value_hash(self)

    def __eq__(self, other: object) -> bool:
        return value_equals(self, other)

    def __hash__(self) -> int:
        return value_hash(self)

    def __lt__(self, other: Any) -> bool:
        return compare_strict(self, other) < 0

    def __le__(self, other: Any) -> bool:
        return compare_strict(self, other) <= 0

    def __gt__(self, other: Any) -> bool:
        return compare_strict(self, other) > 0

    def __ge__(self, other: Any) -> bool:
        return compare_strict(self, other) >= 0

    # -------------------------------------------------------------------------
    # Текст
    # -------------------------------------------------------------------------

    def to_canonical_text(self) -> str:
        return to_canonical_text(self)

    def __str__(self) -> str:
        return to_canonical_text(self)

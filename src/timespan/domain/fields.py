"""
Duration Fields — Виды полей периода и их фиксированные длины

Восемь видов полей, от крупного к мелкому. В precise-режиме (UTC, без
календаря) каждое поле имеет фиксированную длину в миллисекундах:
- Year = 365 дней, Month = 30 дней, Week = 7 дней
- Day = 24 часа, Hour = 60 минут, Minute = 60 секунд
- Second = 1000 мс, Millis = 1

Високосные годы, месяцы переменной длины и переходы DST здесь не
моделируются: для них нужна хронология, а не фиксированные единицы.
"""

from enum import Enum
from typing import Final


# =============================================================================
# ДЛИНЫ ЕДИНИЦ (мс)
# =============================================================================

MILLIS_PER_SECOND: Final[int] = 1000
MILLIS_PER_MINUTE: Final[int] = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR: Final[int] = 60 * MILLIS_PER_MINUTE
MILLIS_PER_DAY: Final[int] = 24 * MILLIS_PER_HOUR
MILLIS_PER_WEEK: Final[int] = 7 * MILLIS_PER_DAY
MILLIS_PER_MONTH: Final[int] = 30 * MILLIS_PER_DAY
MILLIS_PER_YEAR: Final[int] = 365 * MILLIS_PER_DAY


# =============================================================================
# ENUMS
# =============================================================================


class DurationFieldType(str, Enum):
    """Вид поля периода (порядок объявления: от крупного к мелкому)"""

    YEARS = "years"
    MONTHS = "months"
    WEEKS = "weeks"
    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    MILLIS = "millis"

    @property
    def unit_millis(self) -> int:
        """Фиксированная длина единицы поля в миллисекундах."""
        return UNIT_MILLIS[self]


UNIT_MILLIS: Final[dict[DurationFieldType, int]] = {
    DurationFieldType.YEARS: MILLIS_PER_YEAR,
    DurationFieldType.MONTHS: MILLIS_PER_MONTH,
    DurationFieldType.WEEKS: MILLIS_PER_WEEK,
    DurationFieldType.DAYS: MILLIS_PER_DAY,
    DurationFieldType.HOURS: MILLIS_PER_HOUR,
    DurationFieldType.MINUTES: MILLIS_PER_MINUTE,
    DurationFieldType.SECONDS: MILLIS_PER_SECOND,
    DurationFieldType.MILLIS: 1,
}

# Все поля от крупного к мелкому
FIELD_ORDER: Final[tuple[DurationFieldType, ...]] = tuple(DurationFieldType)

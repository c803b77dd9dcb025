"""
PeriodType — Описатель набора поддерживаемых полей периода

PeriodType — статическая перечислимая конфигурация, клиенты её не
конструируют. Каждый тип объявляет, какие из восьми полей участвуют в
разбиении длительности. Неподдерживаемые поля всегда равны 0, их
диапазон поглощается соседними поддерживаемыми полями.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Поддерживаемые поля упорядочены от крупного к мелкому
2. Каждый тип поддерживает MILLIS → разбиение без потерь
"""

from enum import Enum
from typing import Final

from src.timespan.domain.fields import FIELD_ORDER, DurationFieldType


_Y = DurationFieldType.YEARS
_MO = DurationFieldType.MONTHS
_W = DurationFieldType.WEEKS
_D = DurationFieldType.DAYS
_TIME = (
    DurationFieldType.HOURS,
    DurationFieldType.MINUTES,
    DurationFieldType.SECONDS,
    DurationFieldType.MILLIS,
)


# =============================================================================
# ENUMS
# =============================================================================


class PeriodType(str, Enum):
    """
    Именованный набор полей для разбиения длительности.

    ALL: недели, дни и время; годы и месяцы всегда 0.
    PRECISE_ALL: годы, месяцы, дни и время; недели всегда 0.
    """

    ALL = "All"
    PRECISE_ALL = "PreciseAll"
    YEAR_WEEK_DAY_TIME = "YearWeekDayTime"
    DAY_TIME = "DayTime"
    TIME = "Time"
    MILLIS = "Millis"

    @property
    def supported_fields(self) -> tuple[DurationFieldType, ...]:
        """Поддерживаемые поля, от крупного к мелкому."""
        return _SUPPORTED_FIELDS[self]

    def is_supported(self, field: DurationFieldType) -> bool:
        return field in _SUPPORTED_FIELDS[self]


def _ordered(*fields: DurationFieldType) -> tuple[DurationFieldType, ...]:
    return tuple(f for f in FIELD_ORDER if f in fields)


_SUPPORTED_FIELDS: Final[dict[PeriodType, tuple[DurationFieldType, ...]]] = {
    PeriodType.ALL: _ordered(_W, _D, *_TIME),
    PeriodType.PRECISE_ALL: _ordered(_Y, _MO, _D, *_TIME),
    PeriodType.YEAR_WEEK_DAY_TIME: _ordered(_Y, _W, _D, *_TIME),
    PeriodType.DAY_TIME: _ordered(_D, *_TIME),
    PeriodType.TIME: _ordered(*_TIME),
    PeriodType.MILLIS: _ordered(DurationFieldType.MILLIS),
}

# Тип по умолчанию для Duration.to_period()
DEFAULT_PERIOD_TYPE: Final[PeriodType] = PeriodType.ALL

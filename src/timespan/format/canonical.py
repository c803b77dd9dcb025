"""
Canonical Text — Компактное текстовое представление длительности

Длительность разбивается по PeriodType.PRECISE_ALL и выводится как
    P<Y>Y<M>M<D>D<H>H<M>M<S>S
Выводятся только ненулевые поля. Разделителя T между датой и временем
нет, поэтому месяцы и минуты различаются только позицией: P2M — два
месяца, P1H2M — час и две минуты.

Правила:
- Все поля нулевые → "P0S"
- Ненулевые миллисекунды → дробная часть секунд из трёх цифр ("P1.500S")
- Отрицательная длительность → префикс "-" ("-P6H3M7S")

Examples:
    21_787_000 мс → "P6H3M7S"
    0 мс          → "P0S"
"""

from typing import Final

from src.timespan.domain.fields import DurationFieldType
from src.timespan.domain.period_type import PeriodType
from src.timespan.domain.readable import ReadableDuration
from src.timespan.math.apportion import apportion

# =============================================================================
# КОНСТАНТЫ ФОРМАТА
# =============================================================================

CANONICAL_PERIOD_TYPE: Final[PeriodType] = PeriodType.PRECISE_ALL

PERIOD_PREFIX: Final[str] = "P"
NEGATIVE_SIGN: Final[str] = "-"
ZERO_TEXT: Final[str] = "P0S"

# Поля с буквенным обозначением; секунды и миллисекунды выводятся вместе
DESIGNATORS: Final[tuple[tuple[DurationFieldType, str], ...]] = (
    (DurationFieldType.YEARS, "Y"),
    (DurationFieldType.MONTHS, "M"),
    (DurationFieldType.DAYS, "D"),
    (DurationFieldType.HOURS, "H"),
    (DurationFieldType.MINUTES, "M"),
)
SECONDS_DESIGNATOR: Final[str] = "S"


def to_canonical_text(duration: ReadableDuration) -> str:
    """
    Каноническая строка длительности.

    Args:
        duration: Любая реализация ReadableDuration

    Returns:
        Строка вида "P6H3M7S"
    """
    period = apportion(duration.get_millis(), CANONICAL_PERIOD_TYPE)
    if period.is_zero():
        return ZERO_TEXT

    parts = [NEGATIVE_SIGN if period.negative else "", PERIOD_PREFIX]
    for field, designator in DESIGNATORS:
        value = period.get(field)
        if value:
            parts.append(f"{value}{designator}")

    if period.millis:
        parts.append(f"{period.seconds}.{period.millis:03d}{SECONDS_DESIGNATOR}")
    elif period.seconds:
        parts.append(f"{period.seconds}{SECONDS_DESIGNATOR}")

    return "".join(parts)

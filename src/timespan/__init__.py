"""
timespan — точные длительности и их календарное разбиение.

Длительность (Duration) хранит длину в миллисекундах, разбивается на
поля периода (Period) по выбранному PeriodType, сравнивается по длине
и выводится в компактном каноническом виде ("P6H3M7S").
"""

from src.timespan.errors import (
    FieldOverflowError,
    NullArgumentError,
    TimespanError,
    TypeMismatchError,
)
from src.timespan.domain.fields import (
    FIELD_ORDER,
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_MONTH,
    MILLIS_PER_SECOND,
    MILLIS_PER_WEEK,
    MILLIS_PER_YEAR,
    DurationFieldType,
)
from src.timespan.domain.period_type import DEFAULT_PERIOD_TYPE, PeriodType
from src.timespan.domain.period import Period
from src.timespan.domain.readable import ReadableDuration
from src.timespan.math.apportion import apportion
from src.timespan.math.comparison import (
    compare_length,
    compare_strict,
    is_equal_length,
    is_longer,
    is_shorter,
    value_equals,
    value_hash,
)
from src.timespan.format.canonical import to_canonical_text
from src.timespan.domain.duration import Duration

__all__ = [
    # Errors
    "TimespanError",
    "NullArgumentError",
    "TypeMismatchError",
    "FieldOverflowError",
    # Fields
    "DurationFieldType",
    "FIELD_ORDER",
    "MILLIS_PER_SECOND",
    "MILLIS_PER_MINUTE",
    "MILLIS_PER_HOUR",
    "MILLIS_PER_DAY",
    "MILLIS_PER_WEEK",
    "MILLIS_PER_MONTH",
    "MILLIS_PER_YEAR",
    # Period types
    "PeriodType",
    "DEFAULT_PERIOD_TYPE",
    # Models
    "Period",
    "ReadableDuration",
    "Duration",
    # Converter
    "apportion",
    # Comparison
    "compare_length",
    "compare_strict",
    "is_equal_length",
    "is_longer",
    "is_shorter",
    "value_equals",
    "value_hash",
    # Format
    "to_canonical_text",
]

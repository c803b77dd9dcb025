"""
Apportion — Разбиение длительности на поля периода

Жадное разбиение сверху вниз: для каждого поддерживаемого поля
    quantity  = remaining // unit_millis
    remaining = remaining %  unit_millis
Неподдерживаемые поля равны 0 и остаток не расходуют.

Жадное деление корректно, потому что в precise/UTC режиме каждая
единица — фиксированное целое кратное миллисекунды, а поля обходятся
строго по убыванию длины единицы.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Σ quantity_i × unit_millis_i == abs(millis) (MILLIS всегда поддерживается)
2. Неподдерживаемые поля всегда 0
3. Переполнение поля → FieldOverflowError, частичный Period не возвращается
4. Знак хранится в Period.negative, величины разбиваются по модулю
"""

import logging

from src.timespan.domain.period import Period
from src.timespan.domain.period_type import PeriodType
from src.timespan.errors import FieldOverflowError
from src.timespan.math.int_safeguards import (
    INT32_MAX,
    INT64_MAX,
    INT64_MIN,
    validate_int_range,
)

log = logging.getLogger(__name__)


def apportion(
    millis: int,
    period_type: PeriodType,
    max_field_value: int = INT32_MAX,
) -> Period:
    """
    Разбиение длительности в миллисекундах на поля периода.

    Args:
        millis: Длительность в мс (знаковый int64)
        period_type: Набор поддерживаемых полей
        max_field_value: Максимум для значения одного поля (default: INT32_MAX)

    Returns:
        Period с разбиением abs(millis) и флагом negative

    Raises:
        ValueError: Если millis вне int64 или max_field_value вне [0, INT32_MAX]
        FieldOverflowError: Если значение поля превышает max_field_value

    Examples:
        >>> p = apportion(430 * 86_400_000, PeriodType.ALL)
        >>> (p.weeks, p.days)
        (61, 3)
        >>> p = apportion(430 * 86_400_000, PeriodType.PRECISE_ALL)
        >>> (p.years, p.months, p.days)
        (1, 2, 5)
    """
    validate_int_range(millis, "millis", INT64_MIN, INT64_MAX)
    validate_int_range(max_field_value, "max_field_value", 0, INT32_MAX)

    # abs(INT64_MIN) не помещается в int64, но Python int не переполняется
    remaining = abs(millis)
    quantities: dict[str, int] = {}

    for field in period_type.supported_fields:
        quantity, remaining = divmod(remaining, field.unit_millis)
        if quantity > max_field_value:
            log.debug(
                "Apportion overflow: %d ms under %s, %s=%d",
                millis,
                period_type.value,
                field.value,
                quantity,
            )
            raise FieldOverflowError(field.value, quantity, max_field_value)
        quantities[field.value] = quantity

    period = Period(period_type=period_type, negative=millis < 0, **quantities)
    log.debug("Apportioned %d ms under %s: %s", millis, period_type.value, period.values())
    return period

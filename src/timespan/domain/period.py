"""
Period — Модель календарного разбиения длительности

Immutable Pydantic модель: восемь неотрицательных величин (по одной на
вид поля) плюс PeriodType, определяющий набор поддерживаемых полей.
Знак исходной длительности хранится отдельно в флаге negative.

Инвариант (разбиение без потерь):
    Σ value_i × unit_millis_i == abs(duration.millis)
"""

from pydantic import BaseModel, Field, model_validator

from src.timespan.domain.fields import FIELD_ORDER, DurationFieldType
from src.timespan.domain.period_type import PeriodType
from src.timespan.math.int_safeguards import INT32_MAX


# =============================================================================
# PERIOD MODEL
# =============================================================================


class Period(BaseModel):
    """
    Разбиение длительности на поля years … millis.

    Создаётся конвертером apportion(); неподдерживаемые поля всегда 0.
    Immutable модель (frozen=True).
    """

    period_type: PeriodType = Field(..., description="Набор поддерживаемых полей")

    years: int = Field(0, ge=0, le=INT32_MAX, description="Годы (365 дней)")
    months: int = Field(0, ge=0, le=INT32_MAX, description="Месяцы (30 дней)")
    weeks: int = Field(0, ge=0, le=INT32_MAX, description="Недели (7 дней)")
    days: int = Field(0, ge=0, le=INT32_MAX, description="Дни (24 часа)")
    hours: int = Field(0, ge=0, le=INT32_MAX, description="Часы")
    minutes: int = Field(0, ge=0, le=INT32_MAX, description="Минуты")
    seconds: int = Field(0, ge=0, le=INT32_MAX, description="Секунды")
    millis: int = Field(0, ge=0, le=INT32_MAX, description="Миллисекунды")

    negative: bool = Field(False, description="Исходная длительность отрицательна")

    model_config = {"frozen": True, "strict": True}

    @model_validator(mode="after")
    def validate_unsupported_fields_zero(self) -> "Period":
        """Неподдерживаемые поля типа обязаны быть равны 0."""
        for field in FIELD_ORDER:
            if not self.period_type.is_supported(field) and self.get(field) != 0:
                raise ValueError(
                    f"Field '{field.value}' is not supported by "
                    f"{self.period_type.value} and must be 0"
                )
        return self

    def get(self, field: DurationFieldType) -> int:
        """Значение поля по его виду."""
        return getattr(self, field.value)

    def values(self) -> tuple[int, ...]:
        """Значения всех восьми полей, от крупного к мелкому."""
        return tuple(self.get(field) for field in FIELD_ORDER)

    def to_millis(self) -> int:
        """
        Обратная сборка длительности в миллисекундах (со знаком).

        Returns:
            Σ value_i × unit_millis_i, со знаком negative
        """
        total = sum(self.get(field) * field.unit_millis for field in FIELD_ORDER)
        return -total if self.negative else total

    def is_zero(self) -> bool:
        return not any(self.values())

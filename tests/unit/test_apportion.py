"""
Тесты для Apportion и модели Period

Проверяет:
1. Разобранные примеры (430 дней под ALL и PRECISE_ALL)
2. Инвариант разбиения без потерь для всех PeriodType
3. Неподдерживаемые поля всегда 0
4. Знак длительности (negative)
5. Переполнение поля → FieldOverflowError
6. Валидацию Period (frozen, диапазоны, неподдерживаемые поля)
"""

import logging

import pytest
from pydantic import ValidationError

from src.timespan.domain.fields import FIELD_ORDER, MILLIS_PER_DAY, DurationFieldType
from src.timespan.domain.period import Period
from src.timespan.domain.period_type import PeriodType
from src.timespan.errors import FieldOverflowError
from src.timespan.math.apportion import apportion
from src.timespan.math.int_safeguards import INT32_MAX, INT64_MAX, INT64_MIN

DAYS_430_MS = 37_152_000_000

# Длительности, которые не переполняют ни один PeriodType (включая MILLIS)
SMALL_SAMPLES = [
    0,
    1,
    999,
    1000,
    59_999,
    3_600_000,
    21_787_000,
    86_399_999,
    MILLIS_PER_DAY,
    INT32_MAX,
    -1,
    -21_787_000,
]

# Крупные длительности: годы или недели несут основной диапазон
LARGE_SAMPLES = [
    DAYS_430_MS,
    10**15 + 123,
    -(10**15),
    INT64_MAX,
    INT64_MIN,
]


def _reconstruct(period: Period) -> int:
    return sum(
        period.get(field) * field.unit_millis
        for field in period.period_type.supported_fields
    )


# =============================================================================
# РАЗОБРАННЫЕ ПРИМЕРЫ
# =============================================================================


class TestWorkedExamples:
    """Тесты на 430 днях = (365 + 60 + 5) дней"""

    def test_430_days_under_all(self) -> None:
        """ALL: 61 неделя и 3 дня, годы и месяцы 0"""
        p = apportion(DAYS_430_MS, PeriodType.ALL)
        assert p.weeks == 61
        assert p.days == 3
        assert p.years == 0
        assert p.months == 0
        assert (p.hours, p.minutes, p.seconds, p.millis) == (0, 0, 0, 0)

    def test_430_days_under_precise_all(self) -> None:
        """PRECISE_ALL: 1 год, 2 месяца и 5 дней, недели 0"""
        p = apportion(DAYS_430_MS, PeriodType.PRECISE_ALL)
        assert p.years == 1
        assert p.months == 2
        assert p.days == 5
        assert p.weeks == 0
        assert (p.hours, p.minutes, p.seconds, p.millis) == (0, 0, 0, 0)

    def test_small_duration_split_evenly(self) -> None:
        """Меньше суток: обычное разбиение на часы/минуты/секунды"""
        p = apportion(21_787_000, PeriodType.ALL)
        assert (p.hours, p.minutes, p.seconds, p.millis) == (6, 3, 7, 0)

    def test_time_type_puts_days_into_hours(self) -> None:
        """TIME: дни не поддерживаются, их диапазон уходит в часы"""
        p = apportion(2 * MILLIS_PER_DAY + 1, PeriodType.TIME)
        assert p.days == 0
        assert p.hours == 48
        assert p.millis == 1

    def test_year_week_day_time(self) -> None:
        """Месяцы не поддерживаются → остаток года уходит в недели"""
        p = apportion(DAYS_430_MS, PeriodType.YEAR_WEEK_DAY_TIME)
        assert p.years == 1
        assert p.months == 0
        assert p.weeks == 9
        assert p.days == 2

    @pytest.mark.parametrize("period_type", list(PeriodType))
    def test_zero_is_all_zero(self, period_type: PeriodType) -> None:
        p = apportion(0, period_type)
        assert p.is_zero()
        assert p.values() == (0,) * 8
        assert p.negative is False


# =============================================================================
# ИНВАРИАНТЫ
# =============================================================================


class TestLosslessApportionment:
    """Σ value_i × unit_i == abs(millis)"""

    @pytest.mark.parametrize("period_type", list(PeriodType))
    @pytest.mark.parametrize("millis", SMALL_SAMPLES)
    def test_small_samples_all_types(self, millis: int, period_type: PeriodType) -> None:
        p = apportion(millis, period_type)
        assert _reconstruct(p) == abs(millis)
        assert p.to_millis() == millis

    @pytest.mark.parametrize(
        "period_type", [PeriodType.PRECISE_ALL, PeriodType.YEAR_WEEK_DAY_TIME]
    )
    @pytest.mark.parametrize("millis", LARGE_SAMPLES)
    def test_large_samples_year_types(self, millis: int, period_type: PeriodType) -> None:
        p = apportion(millis, period_type)
        assert _reconstruct(p) == abs(millis)
        assert p.to_millis() == millis

    @pytest.mark.parametrize("period_type", list(PeriodType))
    @pytest.mark.parametrize("millis", SMALL_SAMPLES)
    def test_unsupported_fields_zero(self, millis: int, period_type: PeriodType) -> None:
        p = apportion(millis, period_type)
        for field in FIELD_ORDER:
            if not period_type.is_supported(field):
                assert p.get(field) == 0

    @pytest.mark.parametrize("millis", SMALL_SAMPLES + [DAYS_430_MS, 10**15])
    def test_remainders_below_next_unit(self, millis: int) -> None:
        """Каждое поле меньше отношения своей единицы к предыдущей"""
        p = apportion(millis, PeriodType.PRECISE_ALL)
        assert p.months < 13  # 365 // 30 = 12
        assert p.days < 30
        assert p.hours < 24
        assert p.minutes < 60
        assert p.seconds < 60
        assert p.millis < 1000

    def test_int64_min_magnitude(self) -> None:
        """abs(INT64_MIN) не помещается в int64, но разбивается точно"""
        p = apportion(INT64_MIN, PeriodType.PRECISE_ALL)
        assert p.negative is True
        assert _reconstruct(p) == 2**63
        assert p.years == 2**63 // (365 * MILLIS_PER_DAY)


class TestSign:
    """Знак хранится отдельно от величин"""

    def test_negative_magnitudes_match_positive(self) -> None:
        pos = apportion(DAYS_430_MS + 1234, PeriodType.PRECISE_ALL)
        neg = apportion(-(DAYS_430_MS + 1234), PeriodType.PRECISE_ALL)
        assert neg.negative is True
        assert pos.negative is False
        assert neg.values() == pos.values()

    def test_negative_to_millis(self) -> None:
        assert apportion(-5000, PeriodType.ALL).to_millis() == -5000


# =============================================================================
# ПЕРЕПОЛНЕНИЕ И ВАЛИДАЦИЯ ВХОДА
# =============================================================================


class TestOverflow:
    """Переполнение поля → FieldOverflowError без частичного результата"""

    def test_weeks_overflow_under_all(self) -> None:
        with pytest.raises(FieldOverflowError) as exc_info:
            apportion(INT64_MAX, PeriodType.ALL)
        assert exc_info.value.field == "weeks"
        assert exc_info.value.value > INT32_MAX
        assert exc_info.value.max_value == INT32_MAX

    def test_hours_overflow_under_time(self) -> None:
        with pytest.raises(FieldOverflowError, match="hours"):
            apportion(INT64_MIN, PeriodType.TIME)

    def test_millis_overflow_under_millis(self) -> None:
        apportion(INT32_MAX, PeriodType.MILLIS)
        with pytest.raises(FieldOverflowError, match="millis"):
            apportion(INT32_MAX + 1, PeriodType.MILLIS)

    def test_overflow_is_builtin_overflow_error(self) -> None:
        with pytest.raises(OverflowError):
            apportion(INT64_MAX, PeriodType.DAY_TIME)

    def test_precise_all_never_overflows(self) -> None:
        """Годы для INT64_MAX ≈ 2.9e8 < INT32_MAX"""
        p = apportion(INT64_MAX, PeriodType.PRECISE_ALL)
        assert p.years == 292_471_208

    def test_custom_field_ceiling(self) -> None:
        with pytest.raises(FieldOverflowError) as exc_info:
            apportion(10_000, PeriodType.TIME, max_field_value=9)
        assert exc_info.value.field == "seconds"
        assert exc_info.value.value == 10
        assert exc_info.value.max_value == 9

    def test_overflow_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="src.timespan.math.apportion")
        with pytest.raises(FieldOverflowError):
            apportion(INT64_MAX, PeriodType.ALL)
        assert "Apportion overflow" in caplog.text


class TestInputValidation:
    """Вход apportion: знаковый int64"""

    def test_above_int64_rejected(self) -> None:
        with pytest.raises(ValueError, match="millis must be <="):
            apportion(INT64_MAX + 1, PeriodType.ALL)

    def test_below_int64_rejected(self) -> None:
        with pytest.raises(ValueError, match="millis must be >="):
            apportion(INT64_MIN - 1, PeriodType.ALL)

    def test_non_int_rejected(self) -> None:
        with pytest.raises(TypeError):
            apportion(1.5, PeriodType.ALL)  # type: ignore[arg-type]

    def test_field_ceiling_above_int32_rejected(self) -> None:
        with pytest.raises(ValueError, match="max_field_value"):
            apportion(0, PeriodType.ALL, max_field_value=INT32_MAX + 1)


# =============================================================================
# PERIOD MODEL
# =============================================================================


class TestPeriodModel:
    """Валидация модели Period"""

    def test_period_immutable(self) -> None:
        p = apportion(DAYS_430_MS, PeriodType.ALL)
        with pytest.raises(ValidationError):
            p.weeks = 1  # type: ignore

    def test_unsupported_field_rejected(self) -> None:
        with pytest.raises(ValidationError, match="years"):
            Period(period_type=PeriodType.ALL, years=1)

    def test_negative_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Period(period_type=PeriodType.ALL, weeks=-1)

    def test_field_above_int32_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Period(period_type=PeriodType.MILLIS, millis=INT32_MAX + 1)

    def test_get_by_field(self) -> None:
        p = apportion(DAYS_430_MS, PeriodType.PRECISE_ALL)
        assert p.get(DurationFieldType.YEARS) == 1
        assert p.get(DurationFieldType.MONTHS) == 2
        assert p.get(DurationFieldType.DAYS) == 5

    def test_equal_periods(self) -> None:
        assert apportion(1234, PeriodType.TIME) == apportion(1234, PeriodType.TIME)
        assert apportion(1234, PeriodType.TIME) != apportion(1234, PeriodType.DAY_TIME)

    def test_model_dump(self) -> None:
        p = apportion(-DAYS_430_MS, PeriodType.PRECISE_ALL)
        data = p.model_dump()
        assert data["years"] == 1
        assert data["negative"] is True
        assert data["period_type"] == PeriodType.PRECISE_ALL

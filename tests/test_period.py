"""Tests for the Period class."""

from __future__ import annotations

import pytest

from calendrical.core.period import ZERO, Period


class TestPeriodConstruction:
    """Tests for Period construction."""

    def test_default_is_zero(self) -> None:
        """Test that a default Period is zero."""
        p = Period()
        assert p.is_zero
        assert p == ZERO
        assert Period.zero() is ZERO
        assert not p

    def test_components_are_not_normalized(self) -> None:
        """Test that components are stored as given."""
        p = Period(months=14, minutes=90)
        assert p.months == 14
        assert p.years == 0
        assert p.minutes == 90

    def test_factories(self) -> None:
        """Test the single-component factories."""
        assert Period.of_years(2).years == 2
        assert Period.of_months(3).months == 3
        assert Period.of_weeks(2) == Period(days=14)
        assert Period.of_days(-1).days == -1
        assert Period.of_hours(5).hours == 5
        assert Period.of_minutes(6).minutes == 6
        assert Period.of_seconds(7).seconds == 7
        assert Period.of_nanos(8).nanos == 8

    def test_field_group_factories(self) -> None:
        """Test the date and time field factories."""
        assert Period.of_date_fields(1, 2, 3) == Period(years=1, months=2, days=3)
        assert Period.of_time_fields(4, 5, 6, 7) == Period(hours=4, minutes=5, seconds=6, nanos=7)


class TestPeriodParts:
    """Tests for totals and parts."""

    def test_total_months(self) -> None:
        assert Period(years=1, months=2).total_months == 14
        assert Period(years=-1, months=3).total_months == -9

    def test_total_nanos_of_time(self) -> None:
        """Days are not part of the time total."""
        p = Period(days=1, hours=1, seconds=1, nanos=1)
        assert p.total_nanos_of_time == 3_601_000_000_001

    def test_date_and_time_parts(self) -> None:
        """Test splitting a period into date and time parts."""
        p = Period(years=1, days=2, hours=3, nanos=4)
        assert p.has_date_part
        assert p.has_time_part
        assert p.date_part() == Period(years=1, days=2)
        assert p.time_part() == Period(hours=3, nanos=4)
        assert not p.date_part().has_time_part
        assert not p.time_part().has_date_part


class TestPeriodArithmetic:
    """Tests for Period arithmetic."""

    def test_plus_and_minus(self) -> None:
        """Test component-wise addition and subtraction."""
        a = Period(years=1, hours=2)
        b = Period(months=3, hours=-5)
        assert a + b == Period(years=1, months=3, hours=-3)
        assert a - b == Period(years=1, months=-3, hours=7)
        assert a.plus(b) == a + b
        assert a.minus(b) == a - b

    def test_negated(self) -> None:
        assert -Period(days=3, nanos=-1) == Period(days=-3, nanos=1)

    def test_multiplied_by(self) -> None:
        assert Period(months=2, seconds=5) * 3 == Period(months=6, seconds=15)
        assert 3 * Period(days=1) == Period(days=3)

    def test_sum(self) -> None:
        """Test that sum() works with periods."""
        total = sum([Period(days=1), Period(days=2), Period(hours=1)])
        assert total == Period(days=3, hours=1)

    def test_add_non_period(self) -> None:
        with pytest.raises(TypeError):
            Period(days=1) + 1  # type: ignore[operator]


class TestPeriodNormalized:
    """Tests for normalized()."""

    def test_months_roll_into_years(self) -> None:
        assert Period(months=14).normalized() == Period(years=1, months=2)
        assert Period(years=1, months=-14).normalized() == Period(months=-2)

    def test_time_rolls_into_hours(self) -> None:
        """Nanos, seconds and minutes roll up, days stay."""
        p = Period(days=1, hours=25, minutes=61, seconds=61, nanos=1_000_000_001)
        assert p.normalized() == Period(days=1, hours=26, minutes=2, seconds=2, nanos=1)

    def test_negative_keeps_one_sign(self) -> None:
        assert Period(minutes=-90).normalized() == Period(hours=-1, minutes=-30)

    def test_equality_is_component_wise(self) -> None:
        """Test that equal lengths in different units are not equal."""
        assert Period(months=12) != Period(years=1)
        assert Period(months=12).normalized() == Period(years=1)


class TestPeriodFormatting:
    """Tests for repr and str."""

    def test_repr(self) -> None:
        assert repr(Period(days=7)) == "Period(days=7)"
        assert repr(Period()) == "Period()"
        assert repr(Period(years=1, nanos=5)) == "Period(years=1, nanos=5)"

    @pytest.mark.parametrize(
        "period,text",
        [
            (Period(), "PT0S"),
            (Period(years=1, months=2), "P1Y2M"),
            (Period(days=3), "P3D"),
            (Period(hours=4, minutes=5), "PT4H5M"),
            (Period(days=1, hours=2, nanos=500_000_000), "P1DT2H0.5S"),
            (Period(seconds=-1, nanos=-500_000_000), "PT-1.5S"),
            (Period(seconds=6), "PT6S"),
        ],
    )
    def test_str(self, period: Period, text: str) -> None:
        """Test the ISO-8601 duration form."""
        assert str(period) == text

    def test_hashable(self) -> None:
        assert len({Period(days=1), Period(days=1), Period(hours=24)}) == 2

"""Tests for the epoch conversion functions."""

from __future__ import annotations

import pytest

from calendrical._internal.constants import MAX_YEAR, MIN_YEAR
from calendrical.convert import (
    date_from_epoch_day,
    date_from_modified_julian_day,
    date_from_year_day,
    date_from_year_zero_day,
    day_of_week,
    day_of_year,
    epoch_day_from_date,
    is_leap_year,
    length_of_month,
    length_of_year,
    modified_julian_day_from_date,
    week_based_year,
    week_of_week_based_year,
    year_zero_day_from_date,
)
from calendrical.core.date import Date
from calendrical.errors import InvalidFieldCombinationError, RangeError
from calendrical.units.dayofweek import DayOfWeek


class TestEpochDay:
    """Tests for epoch-day conversion."""

    def test_epoch_day_zero(self) -> None:
        """Day 0 is 1970-01-01."""
        assert date_from_epoch_day(0) == Date(1970, 1, 1)
        assert epoch_day_from_date(Date(1970, 1, 1)) == 0

    def test_leap_day(self) -> None:
        """2008-02-29 is epoch day 13938."""
        assert epoch_day_from_date(Date(2008, 2, 29)) == 13938
        assert date_from_epoch_day(13938) == Date(2008, 2, 29)

    def test_consecutive_days(self) -> None:
        """Adjacent epoch days are adjacent dates across a year end."""
        day = epoch_day_from_date(Date(2008, 12, 31))
        assert date_from_epoch_day(day + 1) == Date(2009, 1, 1)

    def test_minimum_and_maximum(self) -> None:
        """The supported range ends at MIN_YEAR-01-01 and MAX_YEAR-12-31."""
        low = epoch_day_from_date(Date(MIN_YEAR, 1, 1))
        high = epoch_day_from_date(Date(MAX_YEAR, 12, 31))
        assert date_from_epoch_day(low) == Date(MIN_YEAR, 1, 1)
        assert date_from_epoch_day(high) == Date(MAX_YEAR, 12, 31)

    def test_beyond_range(self) -> None:
        """A day past the maximum date raises RangeError."""
        high = epoch_day_from_date(Date(MAX_YEAR, 12, 31))
        with pytest.raises(RangeError):
            date_from_epoch_day(high + 1)
        low = epoch_day_from_date(Date(MIN_YEAR, 1, 1))
        with pytest.raises(RangeError):
            date_from_epoch_day(low - 1)


class TestOtherEpochs:
    """Tests for Modified Julian Day and year-zero day conversion."""

    def test_modified_julian_day(self) -> None:
        """MJD 0 is 1858-11-17 and the Unix epoch is MJD 40587."""
        assert date_from_modified_julian_day(0) == Date(1858, 11, 17)
        assert modified_julian_day_from_date(Date(1970, 1, 1)) == 40587

    def test_year_zero_day(self) -> None:
        """Day 0 is 0000-01-01 and the Unix epoch is day 719528."""
        assert date_from_year_zero_day(0) == Date(0, 1, 1)
        assert year_zero_day_from_date(Date(1970, 1, 1)) == 719528

    def test_year_zero_day_negative(self) -> None:
        """Negative counts give negative years."""
        assert date_from_year_zero_day(-365) == Date(-1, 1, 1)


class TestYearFacts:
    """Tests for leap years, lengths and day-of-year."""

    def test_date_from_year_day(self) -> None:
        """Day 60 is February 29th in a leap year."""
        assert date_from_year_day(2008, 60) == Date(2008, 2, 29)
        assert date_from_year_day(2009, 60) == Date(2009, 3, 1)

    def test_date_from_year_day_366_common_year(self) -> None:
        """Day 366 of a common year is an invalid combination."""
        with pytest.raises(InvalidFieldCombinationError):
            date_from_year_day(2009, 366)

    def test_date_from_year_day_out_of_range(self) -> None:
        """Day 0 and day 367 are out of range."""
        with pytest.raises(RangeError):
            date_from_year_day(2008, 0)
        with pytest.raises(RangeError):
            date_from_year_day(2008, 367)

    def test_is_leap_year(self) -> None:
        """Proleptic rule applies to every year."""
        assert is_leap_year(2000)
        assert not is_leap_year(1900)
        assert is_leap_year(-4)

    def test_is_leap_year_out_of_range(self) -> None:
        """Years beyond the range raise RangeError."""
        with pytest.raises(RangeError):
            is_leap_year(MAX_YEAR + 1)

    def test_lengths(self) -> None:
        """Month and year lengths."""
        assert length_of_month(2009, 2) == 28
        assert length_of_month(2008, 2) == 29
        assert length_of_month(2008, 4) == 30
        assert length_of_year(2000) == 366
        assert length_of_year(2100) == 365

    def test_length_of_month_invalid_month(self) -> None:
        """Month 13 raises RangeError."""
        with pytest.raises(RangeError):
            length_of_month(2008, 13)

    def test_day_of_year_and_week(self) -> None:
        """Derived facts of a date."""
        assert day_of_year(Date(2008, 12, 31)) == 366
        assert day_of_week(Date(1970, 1, 1)) is DayOfWeek.THURSDAY

    def test_week_based_year(self) -> None:
        """2008-12-29 is in week 1 of week-based-year 2009."""
        assert week_based_year(Date(2008, 12, 29)) == 2009
        assert week_of_week_based_year(Date(2008, 12, 29)) == 1
        assert week_based_year(Date(2010, 1, 3)) == 2009
        assert week_of_week_based_year(Date(2010, 1, 3)) == 53

"""Epoch conversion utilities for dates.

This module converts between Date values and the day counts of three
epochs, and derives the calendar facts that follow from a date.

Functions:
    date_from_epoch_day: Create a Date from days since 1970-01-01.
    epoch_day_from_date: Days since 1970-01-01 of a Date.
    date_from_modified_julian_day: Create a Date from a Modified Julian Day.
    modified_julian_day_from_date: Modified Julian Day of a Date.
    date_from_year_zero_day: Create a Date from days since 0000-01-01.
    year_zero_day_from_date: Days since 0000-01-01 of a Date.
    date_from_year_day: Create a Date from a year and day-of-year.
    is_leap_year: Proleptic Gregorian leap-year test.
    day_of_year: One-based day-of-year of a Date.
    day_of_week: ISO day-of-week of a Date.

The Unix epoch day 0 is MJD 40587 and year-zero day 719528.

Examples:
    >>> from calendrical.convert import date_from_epoch_day, epoch_day_from_date
    >>> date_from_epoch_day(0)
    Date(1970, 1, 1)
    >>> epoch_day_from_date(Date(2008, 2, 29))
    13938
"""

from __future__ import annotations

from calendrical._internal import calendar
from calendrical._internal.validation import validate_month, validate_year
from calendrical.core.date import Date
from calendrical.units.dayofweek import DayOfWeek


def date_from_epoch_day(epoch_day: int) -> Date:
    """Create a Date from a count of days since 1970-01-01.

    Args:
        epoch_day: Days since the Unix epoch, negative before it.

    Returns:
        The Date at that day.

    Raises:
        RangeError: If the year of the result is outside the supported range.

    Examples:
        >>> date_from_epoch_day(-1)
        Date(1969, 12, 31)
    """
    return Date.of_epoch_day(epoch_day)


def epoch_day_from_date(date: Date) -> int:
    """Return the count of days from 1970-01-01 to a Date."""
    return date.to_epoch_day()


def date_from_modified_julian_day(mjd: int) -> Date:
    """Create a Date from a Modified Julian Day, day 0 being 1858-11-17.

    Raises:
        RangeError: If the year of the result is outside the supported range.
    """
    return Date.of_modified_julian_day(mjd)


def modified_julian_day_from_date(date: Date) -> int:
    return date.to_modified_julian_day()


def date_from_year_zero_day(days: int) -> Date:
    """Create a Date from a count of days since 0000-01-01.

    Raises:
        RangeError: If the year of the result is outside the supported range.
    """
    year, month, day = calendar.ymd_from_year_zero_day(days)
    validate_year(year, "YearZeroDay")
    return Date._create(year, month, day)


def year_zero_day_from_date(date: Date) -> int:
    return date.to_year_zero_day()


def date_from_year_day(year: int, day_of_year: int) -> Date:
    """Create a Date from a year and a one-based day-of-year.

    Raises:
        RangeError: If the year or day-of-year is outside its range.
        InvalidFieldCombinationError: For day 366 of a common year.
    """
    return Date.of_year_day(year, day_of_year)


def is_leap_year(year: int) -> bool:
    """Return True if the year is a leap year in the proleptic calendar.

    Raises:
        RangeError: If the year is outside the supported range.

    Examples:
        >>> is_leap_year(1900), is_leap_year(2000)
        (False, True)
    """
    validate_year(year)
    return calendar.is_leap_year(year)


def length_of_month(year: int, month: int) -> int:
    validate_year(year)
    validate_month(month)
    return calendar.days_in_month(year, month)


def length_of_year(year: int) -> int:
    validate_year(year)
    return calendar.days_in_year(year)


def day_of_year(date: Date) -> int:
    return date.day_of_year


def day_of_week(date: Date) -> DayOfWeek:
    return date.day_of_week


def week_based_year(date: Date) -> int:
    """Return the ISO week-based-year of a Date.

    Examples:
        >>> week_based_year(Date(2008, 12, 29))
        2009
    """
    return calendar.week_based_year(date.year, date.month, date.day)


def week_of_week_based_year(date: Date) -> int:
    return calendar.week_of_week_based_year(date.year, date.month, date.day)


__all__ = [
    "date_from_epoch_day",
    "epoch_day_from_date",
    "date_from_modified_julian_day",
    "modified_julian_day_from_date",
    "date_from_year_zero_day",
    "year_zero_day_from_date",
    "date_from_year_day",
    "is_leap_year",
    "length_of_month",
    "length_of_year",
    "day_of_year",
    "day_of_week",
    "week_based_year",
    "week_of_week_based_year",
]

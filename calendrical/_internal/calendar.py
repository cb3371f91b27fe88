"""Calendar algorithms for calendrical.

This module holds the day-count conversions that every date computation
rests on. Three epochs are supported:

- year-zero day: day 0 is 0000-01-01, the pivot for the cycle algorithm
- epoch day: day 0 is 1970-01-01
- Modified Julian Day: day 0 is 1858-11-17

All functions work on plain integers and apply the proleptic Gregorian
leap-year rule to every year. This module is not part of the public API.
"""

from __future__ import annotations

from calendrical._internal.constants import (
    DAYS_0000_TO_1970,
    DAYS_0000_TO_MJD_EPOCH,
    DAYS_IN_MONTH,
    DAYS_PER_CYCLE,
    LEAP_MONTH_START,
    MJD_UNIX_EPOCH,
    STANDARD_MONTH_START,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be zero or negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(1904)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a month of a year.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.
    """
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def month_start(month: int, leap: bool) -> int:
    """Return the zero-based day-of-year on which a month starts."""
    table = LEAP_MONTH_START if leap else STANDARD_MONTH_START
    return table[month - 1]


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the one-based day-of-year of a date.

    Examples:
        >>> day_of_year(2008, 3, 1)
        61
    """
    return month_start(month, is_leap_year(year)) + day


def month_day_from_day_of_year(year: int, doy: int) -> tuple[int, int]:
    """Split a one-based day-of-year into (month, day).

    The caller guarantees ``1 <= doy <= days_in_year(year)``.
    """
    table = LEAP_MONTH_START if is_leap_year(year) else STANDARD_MONTH_START
    month = 12
    while table[month - 1] >= doy:
        month -= 1
    return month, doy - table[month - 1]


def year_zero_day_from_ymd(year: int, month: int, day: int) -> int:
    """Convert a date to the count of days since 0000-01-01.

    Args:
        year: The proleptic year.
        month: The month (1-12).
        day: The day of month, already validated for the month.

    Returns:
        Days since 0000-01-01; negative before year zero.
    """
    total = 365 * year
    if year >= 0:
        total += (year + 3) // 4 - (year + 99) // 100 + (year + 399) // 400
    else:
        total -= (-year) // 4 - (-year) // 100 + (-year) // 400
    total += (367 * month - 362) // 12
    total += day - 1
    if month > 2:
        total -= 1
        if not is_leap_year(year):
            total -= 1
    return total


def ymd_from_year_zero_day(days: int) -> tuple[int, int, int]:
    """Convert a count of days since 0000-01-01 to (year, month, day).

    The count is shifted so that day 0 is 0000-03-01, putting the leap day
    at the very end of each 400-year cycle. Months are then numbered from
    March, which keeps month lengths regular until February.

    Args:
        days: Days since 0000-01-01.

    Returns:
        Tuple of (year, month, day).
    """
    zero_day = days - 60
    cycles, zero_day = divmod(zero_day, DAYS_PER_CYCLE)

    year_est = (400 * zero_day + 591) // DAYS_PER_CYCLE
    doy_est = zero_day - (365 * year_est + year_est // 4 - year_est // 100 + year_est // 400)
    if doy_est < 0:
        year_est -= 1
        doy_est = zero_day - (365 * year_est + year_est // 4 - year_est // 100 + year_est // 400)

    # March-based month and day
    march_month0 = (doy_est * 5 + 2) // 153
    month = (march_month0 + 2) % 12 + 1
    day = doy_est - (march_month0 * 306 + 5) // 10 + 1
    year = year_est + cycles * 400 + march_month0 // 10
    return year, month, day


def epoch_day_from_ymd(year: int, month: int, day: int) -> int:
    """Convert a date to days since 1970-01-01."""
    return year_zero_day_from_ymd(year, month, day) - DAYS_0000_TO_1970


def ymd_from_epoch_day(epoch_day: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to (year, month, day)."""
    return ymd_from_year_zero_day(epoch_day + DAYS_0000_TO_1970)


def mjd_from_ymd(year: int, month: int, day: int) -> int:
    """Convert a date to its Modified Julian Day number."""
    return year_zero_day_from_ymd(year, month, day) - DAYS_0000_TO_MJD_EPOCH


def ymd_from_mjd(mjd: int) -> tuple[int, int, int]:
    """Convert a Modified Julian Day number to (year, month, day)."""
    return ymd_from_year_zero_day(mjd + DAYS_0000_TO_MJD_EPOCH)


def day_of_week_from_mjd(mjd: int) -> int:
    """Return the ISO day-of-week (Monday=1, Sunday=7) of an MJD.

    MJD 0 (1858-11-17) was a Wednesday. Python's modulo is never
    negative, so no correction is needed for days before the epoch.
    """
    return (mjd + 2) % 7 + 1


def day_of_week(year: int, month: int, day: int) -> int:
    """Return the ISO day-of-week (Monday=1, Sunday=7) of a date."""
    return day_of_week_from_mjd(mjd_from_ymd(year, month, day))


def day_of_week_from_epoch_day(epoch_day: int) -> int:
    """Return the ISO day-of-week (Monday=1, Sunday=7) of an epoch day."""
    return day_of_week_from_mjd(epoch_day + MJD_UNIX_EPOCH)


def week_based_year(year: int, month: int, day: int) -> int:
    """Return the ISO week-based-year containing a date.

    The first days of January can belong to the last week of the previous
    year and the last days of December to week 1 of the next year.
    """
    dow = day_of_week(year, month, day)
    if month == 1 and day < 4 and dow > day + 3:
        return year - 1
    if month == 12 and day > 28 and dow <= day % 7:
        return year + 1
    return year


def week_of_week_based_year(year: int, month: int, day: int) -> int:
    """Return the ISO week number (1-53) of a date."""
    wby = week_based_year(year, month, day)
    jan4 = mjd_from_ymd(wby, 1, 4)
    dow_jan4 = day_of_week_from_mjd(jan4)
    return (mjd_from_ymd(year, month, day) - jan4 + dow_jan4 - 1) // 7 + 1


def weeks_in_week_based_year(wby: int) -> int:
    """Return 53 if the week-based-year has 53 weeks, otherwise 52.

    A week-based-year is long when January 1st is a Thursday, or a
    Wednesday in a leap year.
    """
    dow = day_of_week(wby, 1, 1)
    if dow == 4 or (dow == 3 and is_leap_year(wby)):
        return 53
    return 52


def epoch_day_from_week_date(wby: int, week: int, dow: int) -> int:
    """Return the epoch day of an ISO week date.

    Week 1 is the week holding January 4th. Week and day-of-week are not
    range checked; values outside their ranges roll arithmetically.
    """
    jan4 = epoch_day_from_ymd(wby, 1, 4)
    monday = jan4 - (day_of_week_from_epoch_day(jan4) - 1)
    return monday + (week - 1) * 7 + (dow - 1)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "month_start",
    "day_of_year",
    "month_day_from_day_of_year",
    "year_zero_day_from_ymd",
    "ymd_from_year_zero_day",
    "epoch_day_from_ymd",
    "ymd_from_epoch_day",
    "mjd_from_ymd",
    "ymd_from_mjd",
    "day_of_week_from_mjd",
    "day_of_week",
    "day_of_week_from_epoch_day",
    "week_based_year",
    "week_of_week_based_year",
    "weeks_in_week_based_year",
    "epoch_day_from_week_date",
]

"""Day-count conversion utilities.

This module converts dates to and from three day-count epochs:
    - Unix epoch day (1970-01-01)
    - Modified Julian Day (1858-11-17)
    - Year-zero day (0000-01-01)

Examples:
    >>> from calendrical.convert import date_from_epoch_day, day_of_week
    >>> day_of_week(date_from_epoch_day(0))
    <DayOfWeek.THURSDAY: 4>
"""

from __future__ import annotations

from calendrical.convert.epoch import (
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

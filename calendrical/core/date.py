"""Date class representing a calendar date.

This module provides the Date class for representing calendar dates
in the proleptic ISO-8601 calendar.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from calendrical._internal.calendar import (
    day_of_week,
    day_of_year,
    days_in_month,
    days_in_year,
    epoch_day_from_ymd,
    is_leap_year,
    mjd_from_ymd,
    month_day_from_day_of_year,
    year_zero_day_from_ymd,
    ymd_from_epoch_day,
    ymd_from_mjd,
)
from calendrical._internal.constants import MAX_YEAR, MIN_YEAR
from calendrical._internal.validation import validate_date, validate_year
from calendrical.errors import InvalidFieldCombinationError, OverflowError, RangeError
from calendrical.units.dayofweek import DayOfWeek
from calendrical.units.monthofyear import MonthOfYear

if TYPE_CHECKING:
    from calendrical.core.datetime import DateTime
    from calendrical.core.period import Period
    from calendrical.core.time import Time
    from calendrical.zone.offset import Offset
    from calendrical.core.offsetdate import OffsetDate

Resolver = Callable[[int, int, int], "Date"]


def _default_resolver() -> Resolver:
    from calendrical.resolvers import PREVIOUS_VALID

    return PREVIOUS_VALID


def _check_computed_year(year: int) -> None:
    if year < MIN_YEAR or year > MAX_YEAR:
        raise OverflowError(
            f"Result year {year} exceeds the supported range {MIN_YEAR} to {MAX_YEAR}"
        )


class Date:
    """A date without a time-of-day in the proleptic ISO-8601 calendar.

    The leap-year rule of the Gregorian calendar is applied to every year,
    including those before its historical adoption. Year 0 exists and
    negative years count backwards from it.

    Attributes:
        year: The year, -999,999,999 to 999,999,999.
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = Date(2024, 1, 15)
        >>> d.day_of_week
        <DayOfWeek.MONDAY: 1>

        >>> Date(2008, 2, 29).plus_years(1)
        Date(2009, 2, 28)

        >>> Date.of_epoch_day(0)
        Date(1970, 1, 1)
    """

    __slots__ = ("_year", "_month", "_day")

    def __init__(self, year: int, month: int | MonthOfYear, day: int) -> None:
        """Create a Date from year, month, and day.

        Args:
            year: The year.
            month: The month (1-12) or a MonthOfYear.
            day: The day of the month.

        Raises:
            RangeError: If a component is outside its own range.
            InvalidFieldCombinationError: If the day does not exist in that
                month, such as February 30th.
        """
        if isinstance(month, MonthOfYear):
            month = month.value
        validate_date(year, month, day)
        self._year = year
        self._month = month
        self._day = day

    @classmethod
    def _create(cls, year: int, month: int, day: int) -> Date:
        """Create a Date from components already known to be valid."""
        result = object.__new__(cls)
        result._year = year
        result._month = month
        result._day = day
        return result

    @classmethod
    def of(cls, year: int, month: int | MonthOfYear, day: int) -> Date:
        """Create a Date, validating every field."""
        return cls(year, month, day)

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> Date:
        """Create a Date from a count of days since 1970-01-01.

        Raises:
            RangeError: If the result is outside the supported year range.

        Examples:
            >>> Date.of_epoch_day(-1)
            Date(1969, 12, 31)
        """
        year, month, day = ymd_from_epoch_day(epoch_day)
        validate_year(year, "EpochDay")
        return cls._create(year, month, day)

    @classmethod
    def of_modified_julian_day(cls, mjd: int) -> Date:
        """Create a Date from a Modified Julian Day number.

        Examples:
            >>> Date.of_modified_julian_day(0)
            Date(1858, 11, 17)
        """
        year, month, day = ymd_from_mjd(mjd)
        validate_year(year, "ModifiedJulianDay")
        return cls._create(year, month, day)

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> Date:
        """Create a Date from a year and a one-based day-of-year.

        Raises:
            RangeError: If day_of_year is outside 1-366.
            InvalidFieldCombinationError: For day 366 of a non-leap year.

        Examples:
            >>> Date.of_year_day(2008, 60)
            Date(2008, 2, 29)
        """
        validate_year(year)
        if day_of_year < 1 or day_of_year > 366:
            raise RangeError("DayOfYear", day_of_year, 1, 366)
        if day_of_year > days_in_year(year):
            raise InvalidFieldCombinationError(
                f"Invalid date 'DayOfYear 366' as '{year}' is not a leap year",
                ("Year", "DayOfYear"),
            )
        month, day = month_day_from_day_of_year(year, day_of_year)
        return cls._create(year, month, day)

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        """Return the month as a number (1-12)."""
        return self._month

    @property
    def month_of_year(self) -> MonthOfYear:
        return MonthOfYear.of(self._month)

    @property
    def day(self) -> int:
        """Return the day of the month (1-31)."""
        return self._day

    @property
    def day_of_week(self) -> DayOfWeek:
        return DayOfWeek.of(day_of_week(self._year, self._month, self._day))

    @property
    def day_of_year(self) -> int:
        return day_of_year(self._year, self._month, self._day)

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self._year)

    @property
    def length_of_month(self) -> int:
        return days_in_month(self._year, self._month)

    @property
    def length_of_year(self) -> int:
        return days_in_year(self._year)

    def to_epoch_day(self) -> int:
        """Return the count of days since 1970-01-01."""
        return epoch_day_from_ymd(self._year, self._month, self._day)

    def to_modified_julian_day(self) -> int:
        return mjd_from_ymd(self._year, self._month, self._day)

    def to_year_zero_day(self) -> int:
        return year_zero_day_from_ymd(self._year, self._month, self._day)

    def with_year(self, year: int, resolver: Resolver | None = None) -> Date:
        """Return a copy with the year changed.

        Args:
            year: The new year.
            resolver: Resolves February 29th in a non-leap year;
                defaults to PREVIOUS_VALID.
        """
        if year == self._year:
            return self
        validate_year(year)
        return (resolver or _default_resolver())(year, self._month, self._day)

    def with_month(self, month: int | MonthOfYear, resolver: Resolver | None = None) -> Date:
        """Return a copy with the month changed.

        Args:
            month: The new month.
            resolver: Resolves a day past the end of the new month;
                defaults to PREVIOUS_VALID.
        """
        if isinstance(month, MonthOfYear):
            month = month.value
        if month == self._month:
            return self
        return (resolver or _default_resolver())(self._year, month, self._day)

    def with_day_of_month(self, day: int) -> Date:
        if day == self._day:
            return self
        return Date(self._year, self._month, day)

    def with_day_of_year(self, day_of_year: int) -> Date:
        if day_of_year == self.day_of_year:
            return self
        return Date.of_year_day(self._year, day_of_year)

    def plus_years(self, years: int, resolver: Resolver | None = None) -> Date:
        """Return a copy with a number of years added.

        When the result would be February 29th of a non-leap year the
        resolver decides the outcome.

        Args:
            years: Years to add, may be negative.
            resolver: Date resolver; defaults to PREVIOUS_VALID.

        Raises:
            OverflowError: If the result year is out of range.
            InvalidFieldCombinationError: If the STRICT resolver rejects
                the result.

        Examples:
            >>> from calendrical.resolvers import STRICT
            >>> Date(2008, 2, 29).plus_years(1, STRICT)
            Traceback (most recent call last):
            ...
            InvalidFieldCombinationError: Invalid date 2009-02-29: ...
        """
        if years == 0:
            return self
        new_year = self._year + years
        _check_computed_year(new_year)
        return (resolver or _default_resolver())(new_year, self._month, self._day)

    def plus_months(self, months: int, resolver: Resolver | None = None) -> Date:
        """Return a copy with a number of months added.

        The month count is floor-divided back into a year and a month so
        that negative amounts behave symmetrically.

        Examples:
            >>> Date(2024, 1, 31).plus_months(1)
            Date(2024, 2, 29)

            >>> Date(2024, 1, 15).plus_months(-13)
            Date(2022, 12, 15)
        """
        if months == 0:
            return self
        total_months = self._year * 12 + (self._month - 1) + months
        new_year, month_index = divmod(total_months, 12)
        _check_computed_year(new_year)
        return (resolver or _default_resolver())(new_year, month_index + 1, self._day)

    def plus_weeks(self, weeks: int) -> Date:
        return self.plus_days(weeks * 7)

    def plus_days(self, days: int) -> Date:
        """Return a copy with a number of days added.

        Raises:
            OverflowError: If the result is outside the supported range.
        """
        if days == 0:
            return self
        year, month, day = ymd_from_epoch_day(self.to_epoch_day() + days)
        _check_computed_year(year)
        return Date._create(year, month, day)

    def minus_years(self, years: int, resolver: Resolver | None = None) -> Date:
        return self.plus_years(-years, resolver)

    def minus_months(self, months: int, resolver: Resolver | None = None) -> Date:
        return self.plus_months(-months, resolver)

    def minus_weeks(self, weeks: int) -> Date:
        return self.plus_weeks(-weeks)

    def minus_days(self, days: int) -> Date:
        return self.plus_days(-days)

    def plus(self, period: Period, resolver: Resolver | None = None) -> Date:
        """Return a copy with the date part of a period added.

        Years and months are added together first, then days. Time
        components of the period are ignored; add it to a DateTime to
        apply them.
        """
        return self.plus_months(period.total_months, resolver).plus_days(period.days)

    def minus(self, period: Period, resolver: Resolver | None = None) -> Date:
        """Return a copy with the date part of a period subtracted.

        Days are removed before months, reversing the order used by
        ``plus``.
        """
        return self.plus_days(-period.days).plus_months(-period.total_months, resolver)

    def next_or_current(self, dow: DayOfWeek) -> Date:
        """Return this date if it falls on ``dow``, otherwise the next such date."""
        return self.plus_days((dow.value - self.day_of_week.value) % 7)

    def at_time(self, time: Time) -> DateTime:
        from calendrical.core.datetime import DateTime

        return DateTime(self, time)

    def at_midnight(self) -> DateTime:
        from calendrical.core.time import Time

        return self.at_time(Time.MIDNIGHT)

    def at_offset(self, offset: Offset) -> OffsetDate:
        from calendrical.core.offsetdate import OffsetDate

        return OffsetDate(self, offset)

    def get(self, rule: Any) -> Any:
        """Return the value of a rule for this date, or None if unavailable."""
        return rule.value_from(self)

    def to_iso_format(self) -> str:
        """Return the ISO-8601 representation.

        Years beyond 9999 carry a ``+`` sign and negative years a ``-``.

        Examples:
            >>> Date(2024, 1, 5).to_iso_format()
            '2024-01-05'
            >>> Date(-1, 1, 1).to_iso_format()
            '-0001-01-01'
            >>> Date(12345, 1, 1).to_iso_format()
            '+12345-01-01'
        """
        year = self._year
        if abs(year) < 1000:
            year_text = f"-{abs(year):04d}" if year < 0 else f"{year:04d}"
        elif year > 9999:
            year_text = f"+{year}"
        else:
            year_text = str(year)
        return f"{year_text}-{self._month:02d}-{self._day:02d}"

    def _key(self) -> tuple[int, int, int]:
        return (self._year, self._month, self._day)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Date({self._year}, {self._month}, {self._day})"

    def __str__(self) -> str:
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """Dates are always truthy."""
        return True


__all__ = ["Date"]

"""MonthOfYear enumeration.

Months are numbered from January (1) to December (12). The month knows
its own length and its offset within the year, so callers never index
the month tables directly.
"""

from __future__ import annotations

from enum import Enum

from calendrical._internal.calendar import month_start
from calendrical._internal.constants import DAYS_IN_MONTH
from calendrical.errors import RangeError
from calendrical.units.quarterofyear import QuarterOfYear


class MonthOfYear(Enum):
    """A month of the year.

    Examples:
        >>> MonthOfYear.FEBRUARY.length_in_days(leap=True)
        29

        >>> MonthOfYear.DECEMBER.plus(1)
        <MonthOfYear.JANUARY: 1>

        >>> MonthOfYear.MAY.quarter_of_year
        <QuarterOfYear.Q2: 2>
    """

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def of(cls, value: int) -> MonthOfYear:
        """Return the month for a number 1-12.

        Raises:
            RangeError: If value is outside 1-12.
        """
        if value < 1 or value > 12:
            raise RangeError("MonthOfYear", value, 1, 12)
        return _MONTHS[value - 1]

    def plus(self, months: int) -> MonthOfYear:
        """Return the month ``months`` later, wrapping around the year."""
        return _MONTHS[(self.value - 1 + months) % 12]

    def minus(self, months: int) -> MonthOfYear:
        return self.plus(-months)

    def next(self) -> MonthOfYear:
        return self.plus(1)

    def previous(self) -> MonthOfYear:
        return self.plus(-1)

    def length_in_days(self, leap: bool) -> int:
        """Return the number of days in this month.

        Args:
            leap: Whether the month lies in a leap year.
        """
        if self is MonthOfYear.FEBRUARY and leap:
            return 29
        return DAYS_IN_MONTH[self.value]

    @property
    def min_length_in_days(self) -> int:
        return DAYS_IN_MONTH[self.value]

    @property
    def max_length_in_days(self) -> int:
        return 29 if self is MonthOfYear.FEBRUARY else DAYS_IN_MONTH[self.value]

    def first_day_of_year(self, leap: bool) -> int:
        """Return the one-based day-of-year of the first of this month."""
        return month_start(self.value, leap) + 1

    @property
    def quarter_of_year(self) -> QuarterOfYear:
        return QuarterOfYear.of((self.value - 1) // 3 + 1)

    @property
    def month_of_quarter(self) -> int:
        """Return the position of this month within its quarter, 1-3."""
        return (self.value - 1) % 3 + 1


_MONTHS: tuple[MonthOfYear, ...] = tuple(MonthOfYear)


__all__ = ["MonthOfYear"]

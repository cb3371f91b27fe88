"""PeriodUnit enumeration for calendrical units.

This module provides the PeriodUnit enum naming the units that field
rules are measured in, from nanoseconds up to eras.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from calendrical.errors import CalendricalError

if TYPE_CHECKING:
    from calendrical.core.period import Period

_NANOS_PER_SECOND = 1_000_000_000
_SECONDS_PER_DAY = 86_400
# Average Gregorian year: 146097 days / 400 years
_SECONDS_PER_YEAR = 31_556_952


class PeriodUnit(Enum):
    """Units of calendrical measurement.

    Each unit knows an estimated duration in nanoseconds. The estimate is
    exact for units up to DAYS and an average for longer units, which
    makes it suitable for ordering units, not for arithmetic.

    Examples:
        >>> PeriodUnit.HOURS.estimated_nanos
        3600000000000

        >>> PeriodUnit.MONTHS > PeriodUnit.WEEKS
        True
    """

    NANOS = "Nanos"
    MICROS = "Micros"
    MILLIS = "Millis"
    SECONDS = "Seconds"
    MINUTES = "Minutes"
    HOURS = "Hours"
    TWELVE_HOURS = "12Hours"
    DAYS = "Days"
    WEEKS = "Weeks"
    MONTHS = "Months"
    QUARTERS = "Quarters"
    WEEK_BASED_YEARS = "WeekBasedYears"
    YEARS = "Years"
    DECADES = "Decades"
    CENTURIES = "Centuries"
    MILLENNIA = "Millennia"
    ERAS = "Eras"

    @property
    def estimated_nanos(self) -> int:
        """Return the estimated length of one unit in nanoseconds."""
        if self in _SUB_SECOND:
            return _SUB_SECOND[self]
        return _ESTIMATED_SECONDS[self] * _NANOS_PER_SECOND

    def to_period(self, amount: int) -> Period:
        """Return a Period of ``amount`` of this unit.

        Only units with an exact Period representation are supported.

        Raises:
            CalendricalError: For units without a Period component (eras).
        """
        from calendrical.core.period import Period

        if self not in _PERIOD_COMPONENTS:
            raise CalendricalError(f"{self.value} cannot be expressed as a Period")
        component, multiple = _PERIOD_COMPONENTS[self]
        return Period(**{component: amount * multiple})

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PeriodUnit):
            return NotImplemented
        return self.estimated_nanos < other.estimated_nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, PeriodUnit):
            return NotImplemented
        return self.estimated_nanos <= other.estimated_nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, PeriodUnit):
            return NotImplemented
        return self.estimated_nanos > other.estimated_nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, PeriodUnit):
            return NotImplemented
        return self.estimated_nanos >= other.estimated_nanos


_SUB_SECOND: dict[PeriodUnit, int] = {
    PeriodUnit.NANOS: 1,
    PeriodUnit.MICROS: 1_000,
    PeriodUnit.MILLIS: 1_000_000,
}

_ESTIMATED_SECONDS: dict[PeriodUnit, int] = {
    PeriodUnit.SECONDS: 1,
    PeriodUnit.MINUTES: 60,
    PeriodUnit.HOURS: 3_600,
    PeriodUnit.TWELVE_HOURS: 43_200,
    PeriodUnit.DAYS: _SECONDS_PER_DAY,
    PeriodUnit.WEEKS: 7 * _SECONDS_PER_DAY,
    PeriodUnit.MONTHS: _SECONDS_PER_YEAR // 12,
    PeriodUnit.QUARTERS: _SECONDS_PER_YEAR // 4,
    PeriodUnit.WEEK_BASED_YEARS: _SECONDS_PER_YEAR,
    PeriodUnit.YEARS: _SECONDS_PER_YEAR,
    PeriodUnit.DECADES: 10 * _SECONDS_PER_YEAR,
    PeriodUnit.CENTURIES: 100 * _SECONDS_PER_YEAR,
    PeriodUnit.MILLENNIA: 1_000 * _SECONDS_PER_YEAR,
    PeriodUnit.ERAS: 1_000_000_000 * _SECONDS_PER_YEAR,
}

_PERIOD_COMPONENTS: dict[PeriodUnit, tuple[str, int]] = {
    PeriodUnit.NANOS: ("nanos", 1),
    PeriodUnit.MICROS: ("nanos", 1_000),
    PeriodUnit.MILLIS: ("nanos", 1_000_000),
    PeriodUnit.SECONDS: ("seconds", 1),
    PeriodUnit.MINUTES: ("minutes", 1),
    PeriodUnit.HOURS: ("hours", 1),
    PeriodUnit.TWELVE_HOURS: ("hours", 12),
    PeriodUnit.DAYS: ("days", 1),
    PeriodUnit.WEEKS: ("days", 7),
    PeriodUnit.MONTHS: ("months", 1),
    PeriodUnit.QUARTERS: ("months", 3),
    PeriodUnit.WEEK_BASED_YEARS: ("years", 1),
    PeriodUnit.YEARS: ("years", 1),
    PeriodUnit.DECADES: ("years", 10),
    PeriodUnit.CENTURIES: ("years", 100),
    PeriodUnit.MILLENNIA: ("years", 1_000),
}


__all__ = ["PeriodUnit"]

"""Period class representing an amount of calendrical time.

A Period holds years, months, days, hours, minutes, seconds and nanos as
independent components. It is the unit of exchange between arithmetic
methods and the merger, which collects out-of-range input as a Period of
overflow to be added to the merged result.
"""

from __future__ import annotations

from calendrical._internal.constants import (
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)

_FIELDS = ("years", "months", "days", "hours", "minutes", "seconds", "nanos")


def _split(total: int, unit: int) -> tuple[int, int]:
    """Divide keeping both parts on the sign of ``total``."""
    quotient, remainder = divmod(abs(total), unit)
    if total < 0:
        return -quotient, -remainder
    return quotient, remainder


class Period:
    """An immutable amount of time in calendrical units.

    The components are stored as-is without normalization. For example,
    Period(months=14) stays 14 months rather than 1 year and 2 months.
    Use normalized() for the normalized form.

    Attributes:
        years: Number of years (can be negative).
        months: Number of months (can be negative).
        days: Number of days (can be negative).
        hours: Number of hours (can be negative).
        minutes: Number of minutes (can be negative).
        seconds: Number of seconds (can be negative).
        nanos: Number of nanoseconds (can be negative).

    Examples:
        >>> p = Period(years=1, months=2)
        >>> str(p)
        'P1Y2M'

        >>> Period.of_hours(25).normalized()
        Period(hours=25)

        >>> str(Period(days=1, hours=2, nanos=500_000_000))
        'P1DT2H0.5S'
    """

    __slots__ = ("_years", "_months", "_days", "_hours", "_minutes", "_seconds", "_nanos")

    def __init__(
        self,
        years: int = 0,
        months: int = 0,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        nanos: int = 0,
    ) -> None:
        """Create a Period from component parts.

        All parameters can be positive, negative, or zero.
        """
        self._years = years
        self._months = months
        self._days = days
        self._hours = hours
        self._minutes = minutes
        self._seconds = seconds
        self._nanos = nanos

    @classmethod
    def of_years(cls, years: int) -> Period:
        return cls(years=years)

    @classmethod
    def of_months(cls, months: int) -> Period:
        return cls(months=months)

    @classmethod
    def of_weeks(cls, weeks: int) -> Period:
        """Create a Period of a number of weeks, stored as days."""
        return cls(days=weeks * 7)

    @classmethod
    def of_days(cls, days: int) -> Period:
        return cls(days=days)

    @classmethod
    def of_hours(cls, hours: int) -> Period:
        return cls(hours=hours)

    @classmethod
    def of_minutes(cls, minutes: int) -> Period:
        return cls(minutes=minutes)

    @classmethod
    def of_seconds(cls, seconds: int) -> Period:
        return cls(seconds=seconds)

    @classmethod
    def of_nanos(cls, nanos: int) -> Period:
        return cls(nanos=nanos)

    @classmethod
    def of_date_fields(cls, years: int = 0, months: int = 0, days: int = 0) -> Period:
        return cls(years=years, months=months, days=days)

    @classmethod
    def of_time_fields(
        cls, hours: int = 0, minutes: int = 0, seconds: int = 0, nanos: int = 0
    ) -> Period:
        return cls(hours=hours, minutes=minutes, seconds=seconds, nanos=nanos)

    @classmethod
    def zero(cls) -> Period:
        """Return the zero-length period."""
        return ZERO

    @property
    def years(self) -> int:
        return self._years

    @property
    def months(self) -> int:
        return self._months

    @property
    def days(self) -> int:
        return self._days

    @property
    def hours(self) -> int:
        return self._hours

    @property
    def minutes(self) -> int:
        return self._minutes

    @property
    def seconds(self) -> int:
        return self._seconds

    @property
    def nanos(self) -> int:
        return self._nanos

    @property
    def total_months(self) -> int:
        """Return the total months (years * 12 + months).

        Examples:
            >>> Period(years=-1, months=3).total_months
            -9
        """
        return self._years * 12 + self._months

    @property
    def total_nanos_of_time(self) -> int:
        """Return hours, minutes, seconds and nanos as one nanosecond count.

        Examples:
            >>> Period(minutes=1, nanos=5).total_nanos_of_time
            60000000005
        """
        return (
            self._hours * NANOS_PER_HOUR
            + self._minutes * NANOS_PER_MINUTE
            + self._seconds * NANOS_PER_SECOND
            + self._nanos
        )

    @property
    def is_zero(self) -> bool:
        """Return True if every component is zero."""
        return not any(self._components())

    @property
    def has_time_part(self) -> bool:
        return bool(self._hours or self._minutes or self._seconds or self._nanos)

    @property
    def has_date_part(self) -> bool:
        return bool(self._years or self._months or self._days)

    def date_part(self) -> Period:
        return Period(years=self._years, months=self._months, days=self._days)

    def time_part(self) -> Period:
        return Period(hours=self._hours, minutes=self._minutes, seconds=self._seconds, nanos=self._nanos)

    def plus(self, other: Period) -> Period:
        """Return the component-wise sum of two periods."""
        return Period(*(a + b for a, b in zip(self._components(), other._components())))

    def minus(self, other: Period) -> Period:
        """Return the component-wise difference of two periods."""
        return Period(*(a - b for a, b in zip(self._components(), other._components())))

    def negated(self) -> Period:
        return Period(*(-a for a in self._components()))

    def multiplied_by(self, scalar: int) -> Period:
        return Period(*(a * scalar for a in self._components()))

    def normalized(self) -> Period:
        """Return a Period with months below 12 and time fields in range.

        Months roll into years, and nanos, seconds and minutes roll up into
        hours. Days are left alone since a day is not always 24 hours once
        zones are involved. Each rolled pair keeps a single sign.

        Examples:
            >>> Period(months=14).normalized()
            Period(years=1, months=2)

            >>> Period(minutes=-90).normalized()
            Period(hours=-1, minutes=-30)
        """
        years, months = _split(self.total_months, 12)
        hours, rest = _split(self.total_nanos_of_time, NANOS_PER_HOUR)
        minutes, rest = _split(rest, NANOS_PER_MINUTE)
        seconds, nanos = _split(rest, NANOS_PER_SECOND)
        return Period(years, months, self._days, hours, minutes, seconds, nanos)

    def _components(self) -> tuple[int, ...]:
        return (
            self._years,
            self._months,
            self._days,
            self._hours,
            self._minutes,
            self._seconds,
            self._nanos,
        )

    def __add__(self, other: object) -> Period:
        if not isinstance(other, Period):
            return NotImplemented
        return self.plus(other)

    def __radd__(self, other: object) -> Period:
        """Support sum() by handling 0 + Period."""
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Period:
        if not isinstance(other, Period):
            return NotImplemented
        return self.minus(other)

    def __neg__(self) -> Period:
        return self.negated()

    def __mul__(self, other: object) -> Period:
        if not isinstance(other, int):
            return NotImplemented
        return self.multiplied_by(other)

    def __rmul__(self, other: object) -> Period:
        return self.__mul__(other)

    def __eq__(self, other: object) -> bool:
        """Check equality with another period.

        Components are compared directly, so Period(months=12) is not equal
        to Period(years=1). Use normalized() for semantic comparison.
        """
        if not isinstance(other, Period):
            return NotImplemented
        return self._components() == other._components()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash(self._components())

    def __repr__(self) -> str:
        parts = [
            f"{name}={value}"
            for name, value in zip(_FIELDS, self._components())
            if value != 0
        ]
        return f"Period({', '.join(parts)})"

    def __str__(self) -> str:
        """Return the ISO-8601 form, such as ``P1Y2M3DT4H5M6.5S``."""
        if self.is_zero:
            return "PT0S"

        parts = ["P"]
        if self._years != 0:
            parts.append(f"{self._years}Y")
        if self._months != 0:
            parts.append(f"{self._months}M")
        if self._days != 0:
            parts.append(f"{self._days}D")

        if self.has_time_part:
            parts.append("T")
            if self._hours != 0:
                parts.append(f"{self._hours}H")
            if self._minutes != 0:
                parts.append(f"{self._minutes}M")
            total = self._seconds * NANOS_PER_SECOND + self._nanos
            if total != 0:
                sign = "-" if total < 0 else ""
                secs, frac = divmod(abs(total), NANOS_PER_SECOND)
                if frac:
                    parts.append(f"{sign}{secs}.{frac:09d}".rstrip("0") + "S")
                else:
                    parts.append(f"{sign}{secs}S")
        return "".join(parts)

    def __bool__(self) -> bool:
        """Return True if this is a non-zero period."""
        return not self.is_zero


ZERO = Period()


__all__ = ["Period"]

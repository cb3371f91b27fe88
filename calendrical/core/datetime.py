"""DateTime class combining a Date and a Time.

This module provides the DateTime class, a local date-time without an
offset or zone.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from calendrical.core.date import Date
from calendrical.core.time import Overflow, Time
from calendrical.errors import CalendricalError

if TYPE_CHECKING:
    from calendrical.core.offsetdatetime import OffsetDateTime
    from calendrical.core.period import Period
    from calendrical.core.zoneddatetime import ZonedDateTime
    from calendrical.zone.offset import Offset
    from calendrical.zone.resolvers import ZoneResolver
    from calendrical.zone.zone import Zone

Resolver = Callable[[int, int, int], Date]


class DateTime:
    """A date and time of day without offset or zone.

    DateTime is a plain pair of a Date and a Time. Arithmetic on the time
    part is done with overflow, and the day carry is folded into the date.

    Examples:
        >>> dt = DateTime.of(2024, 1, 15, 23, 30)
        >>> str(dt)
        '2024-01-15T23:30'

        >>> dt.plus_hours(1)
        DateTime(Date(2024, 1, 16), Time(0, 30, 0, 0))
    """

    __slots__ = ("_date", "_time")

    def __init__(self, date: Date, time: Time) -> None:
        """Create a DateTime from a date and a time.

        Raises:
            CalendricalError: If date or time is not of the right type.
        """
        if not isinstance(date, Date):
            raise CalendricalError(f"date must be a Date, got {type(date).__name__}")
        if not isinstance(time, Time):
            raise CalendricalError(f"time must be a Time, got {type(time).__name__}")
        self._date = date
        self._time = time

    @classmethod
    def of(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nano: int = 0,
    ) -> DateTime:
        """Create a DateTime from its fields, validating each one."""
        return cls(Date(year, month, day), Time.of(hour, minute, second, nano))

    @classmethod
    def of_date_time(cls, date: Date, time: Time) -> DateTime:
        return cls(date, time)

    @classmethod
    def of_midnight(cls, date: Date) -> DateTime:
        return cls(date, Time.MIDNIGHT)

    @property
    def date(self) -> Date:
        return self._date

    @property
    def time(self) -> Time:
        return self._time

    @property
    def year(self) -> int:
        return self._date.year

    @property
    def month(self) -> int:
        return self._date.month

    @property
    def day(self) -> int:
        return self._date.day

    @property
    def hour(self) -> int:
        return self._time.hour

    @property
    def minute(self) -> int:
        return self._time.minute

    @property
    def second(self) -> int:
        return self._time.second

    @property
    def nano(self) -> int:
        return self._time.nano

    def _with(self, date: Date, time: Time) -> DateTime:
        if date is self._date and time is self._time:
            return self
        return DateTime(date, time)

    def with_date(self, date: Date) -> DateTime:
        return self._with(date, self._time)

    def with_time(self, time: Time) -> DateTime:
        return self._with(self._date, time)

    def with_year(self, year: int, resolver: Resolver | None = None) -> DateTime:
        return self._with(self._date.with_year(year, resolver), self._time)

    def with_month(self, month: int, resolver: Resolver | None = None) -> DateTime:
        return self._with(self._date.with_month(month, resolver), self._time)

    def with_day_of_month(self, day: int) -> DateTime:
        return self._with(self._date.with_day_of_month(day), self._time)

    def with_hour(self, hour: int) -> DateTime:
        return self._with(self._date, self._time.with_hour(hour))

    def with_minute(self, minute: int) -> DateTime:
        return self._with(self._date, self._time.with_minute(minute))

    def with_second(self, second: int) -> DateTime:
        return self._with(self._date, self._time.with_second(second))

    def with_nano(self, nano: int) -> DateTime:
        return self._with(self._date, self._time.with_nano(nano))

    def _plus_overflow(self, overflow: Overflow) -> DateTime:
        return self._with(self._date.plus_days(overflow.days), overflow.time)

    def plus_years(self, years: int, resolver: Resolver | None = None) -> DateTime:
        return self._with(self._date.plus_years(years, resolver), self._time)

    def plus_months(self, months: int, resolver: Resolver | None = None) -> DateTime:
        return self._with(self._date.plus_months(months, resolver), self._time)

    def plus_weeks(self, weeks: int) -> DateTime:
        return self._with(self._date.plus_weeks(weeks), self._time)

    def plus_days(self, days: int) -> DateTime:
        return self._with(self._date.plus_days(days), self._time)

    def plus_hours(self, hours: int) -> DateTime:
        return self._plus_overflow(self._time.plus_with_overflow(hours=hours))

    def plus_minutes(self, minutes: int) -> DateTime:
        return self._plus_overflow(self._time.plus_with_overflow(minutes=minutes))

    def plus_seconds(self, seconds: int) -> DateTime:
        return self._plus_overflow(self._time.plus_with_overflow(seconds=seconds))

    def plus_nanos(self, nanos: int) -> DateTime:
        return self._plus_overflow(self._time.plus_with_overflow(nanos=nanos))

    def minus_years(self, years: int, resolver: Resolver | None = None) -> DateTime:
        return self.plus_years(-years, resolver)

    def minus_months(self, months: int, resolver: Resolver | None = None) -> DateTime:
        return self.plus_months(-months, resolver)

    def minus_weeks(self, weeks: int) -> DateTime:
        return self.plus_weeks(-weeks)

    def minus_days(self, days: int) -> DateTime:
        return self.plus_days(-days)

    def minus_hours(self, hours: int) -> DateTime:
        return self.plus_hours(-hours)

    def minus_minutes(self, minutes: int) -> DateTime:
        return self.plus_minutes(-minutes)

    def minus_seconds(self, seconds: int) -> DateTime:
        return self.plus_seconds(-seconds)

    def minus_nanos(self, nanos: int) -> DateTime:
        return self.plus_nanos(-nanos)

    def plus(self, period: Period, resolver: Resolver | None = None) -> DateTime:
        """Return a copy with a period added.

        The date part is applied first (months then days), then the time
        part with its day carry folded into the date.

        Examples:
            >>> from calendrical.core.period import Period
            >>> DateTime.of(2024, 1, 31, 22).plus(Period(months=1, hours=3))
            DateTime(Date(2024, 3, 1), Time(1, 0, 0, 0))
        """
        date = self._date.plus(period, resolver)
        overflow = self._time.plus_with_overflow(nanos=period.total_nanos_of_time)
        return self._with(date.plus_days(overflow.days), overflow.time)

    def minus(self, period: Period, resolver: Resolver | None = None) -> DateTime:
        """Return a copy with a period subtracted.

        The time part is removed first and the date part after, mirroring
        ``plus`` so that subtracting a period undoes adding it whenever no
        day-of-month had to be resolved.
        """
        overflow = self._time.plus_with_overflow(nanos=-period.total_nanos_of_time)
        date = self._date.plus_days(overflow.days).minus(period, resolver)
        return self._with(date, overflow.time)

    def at_offset(self, offset: Offset) -> OffsetDateTime:
        from calendrical.core.offsetdatetime import OffsetDateTime

        return OffsetDateTime(self, offset)

    def at_zone(self, zone: Zone, resolver: ZoneResolver | None = None) -> ZonedDateTime:
        """Attach a zone, resolving gaps and overlaps with ``resolver``.

        The resolver defaults to the strict zone resolver.
        """
        from calendrical.core.zoneddatetime import ZonedDateTime

        return ZonedDateTime.of(self, zone, resolver)

    def get(self, rule: Any) -> Any:
        """Return the value of a rule for this date-time, or None if unavailable."""
        return rule.value_from(self)

    def to_iso_format(self, *, precision: str = "auto") -> str:
        """Return the ISO-8601 form, such as ``2024-01-15T10:30``."""
        return f"{self._date.to_iso_format()}T{self._time.to_iso_format(precision=precision)}"

    def _key(self) -> tuple[Date, Time]:
        return (self._date, self._time)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"DateTime({self._date!r}, {self._time!r})"

    def __str__(self) -> str:
        return self.to_iso_format()

    def __bool__(self) -> bool:
        return True


__all__ = ["DateTime"]

"""Time class representing a time of day.

This module provides the Time class for time-of-day values with
nanosecond precision, and the Overflow carrier returned by arithmetic
that crosses midnight.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from calendrical._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
)
from calendrical._internal.validation import validate_range
from calendrical.errors import RangeError

if TYPE_CHECKING:
    from calendrical.core.date import Date
    from calendrical.core.datetime import DateTime
    from calendrical.core.offsettime import OffsetTime
    from calendrical.core.period import Period
    from calendrical.zone.offset import Offset


class Time:
    """A time of day with nanosecond precision.

    Time covers midnight (00:00) to just before the next midnight
    (23:59:59.999999999). It holds no date, offset or zone.

    The value is stored as nanoseconds since midnight in a single
    ``_nanos`` slot. The 24 whole-hour values are shared instances
    when created through ``Time.of``.

    Attributes:
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component (0-59).
        nano: The nanosecond component (0-999999999).

    Examples:
        >>> t = Time(14, 30, 45)
        >>> str(t)
        '14:30:45'

        >>> Time.of(12) is Time.of(12)
        True

        >>> Time(23, 59, 59, 999_999_999).plus_with_overflow(nanos=1)
        Overflow(time=Time(0, 0, 0, 0), days=1)
    """

    __slots__ = ("_nanos",)

    MIDNIGHT: ClassVar[Time]
    MIDDAY: ClassVar[Time]
    MIN: ClassVar[Time]
    MAX: ClassVar[Time]

    def __init__(self, hour: int = 0, minute: int = 0, second: int = 0, nano: int = 0) -> None:
        """Create a Time from component parts.

        Args:
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            nano: The nanosecond (0-999999999).

        Raises:
            RangeError: If any component is out of range.
        """
        _check_fields(hour, minute, second, nano)
        self._nanos: int = (
            hour * NANOS_PER_HOUR
            + minute * NANOS_PER_MINUTE
            + second * NANOS_PER_SECOND
            + nano
        )

    @classmethod
    def _from_nanos(cls, nanos: int) -> Time:
        """Create a Time from nanoseconds since midnight.

        Bypasses validation; whole hours come from the shared table.
        """
        if nanos % NANOS_PER_HOUR == 0 and _HOURS:
            return _HOURS[nanos // NANOS_PER_HOUR]
        instance = object.__new__(cls)
        instance._nanos = nanos
        return instance

    @classmethod
    def of(cls, hour: int, minute: int = 0, second: int = 0, nano: int = 0) -> Time:
        """Create a Time, returning the shared instance for whole hours.

        Raises:
            RangeError: If any component is out of range.
        """
        _check_fields(hour, minute, second, nano)
        return cls._from_nanos(
            hour * NANOS_PER_HOUR + minute * NANOS_PER_MINUTE + second * NANOS_PER_SECOND + nano
        )

    @classmethod
    def of_second_of_day(cls, second_of_day: int, nano: int = 0) -> Time:
        """Create a Time from a second-of-day and a nanosecond.

        Raises:
            RangeError: If either value is out of range.

        Examples:
            >>> Time.of_second_of_day(3661)
            Time(1, 1, 1, 0)
        """
        if second_of_day < 0 or second_of_day >= SECONDS_PER_DAY:
            raise RangeError("SecondOfDay", second_of_day, 0, SECONDS_PER_DAY - 1)
        if nano < 0 or nano >= NANOS_PER_SECOND:
            raise RangeError("NanoOfSecond", nano, 0, NANOS_PER_SECOND - 1)
        return cls._from_nanos(second_of_day * NANOS_PER_SECOND + nano)

    @classmethod
    def of_nano_of_day(cls, nano_of_day: int) -> Time:
        """Create a Time from nanoseconds since midnight.

        Raises:
            RangeError: If the value is outside one day.
        """
        if nano_of_day < 0 or nano_of_day >= NANOS_PER_DAY:
            raise RangeError("NanoOfDay", nano_of_day, 0, NANOS_PER_DAY - 1)
        return cls._from_nanos(nano_of_day)

    @property
    def hour(self) -> int:
        return self._nanos // NANOS_PER_HOUR

    @property
    def minute(self) -> int:
        return (self._nanos // NANOS_PER_MINUTE) % 60

    @property
    def second(self) -> int:
        return (self._nanos // NANOS_PER_SECOND) % 60

    @property
    def nano(self) -> int:
        return self._nanos % NANOS_PER_SECOND

    def to_second_of_day(self) -> int:
        return self._nanos // NANOS_PER_SECOND

    def to_nano_of_day(self) -> int:
        return self._nanos

    def with_hour(self, hour: int) -> Time:
        return Time.of(hour, self.minute, self.second, self.nano)

    def with_minute(self, minute: int) -> Time:
        return Time.of(self.hour, minute, self.second, self.nano)

    def with_second(self, second: int) -> Time:
        return Time.of(self.hour, self.minute, second, self.nano)

    def with_nano(self, nano: int) -> Time:
        return Time.of(self.hour, self.minute, self.second, nano)

    def plus_with_overflow(
        self, hours: int = 0, minutes: int = 0, seconds: int = 0, nanos: int = 0
    ) -> Overflow:
        """Add an amount of time and report the whole days crossed.

        The delta is converted to nanoseconds and combined with the
        current nanosecond-of-day. Floor division splits the total into a
        signed day carry and a non-negative remainder, so adding an
        amount and then subtracting it always returns the original time.

        Args:
            hours: Hours to add, may be negative.
            minutes: Minutes to add, may be negative.
            seconds: Seconds to add, may be negative.
            nanos: Nanoseconds to add, may be negative.

        Returns:
            The resulting time together with the signed day carry.

        Examples:
            >>> Time(22).plus_with_overflow(hours=5)
            Overflow(time=Time(3, 0, 0, 0), days=1)

            >>> Time(1).plus_with_overflow(hours=-2)
            Overflow(time=Time(23, 0, 0, 0), days=-1)
        """
        delta = (
            hours * NANOS_PER_HOUR
            + minutes * NANOS_PER_MINUTE
            + seconds * NANOS_PER_SECOND
            + nanos
        )
        days, nano_of_day = divmod(self._nanos + delta, NANOS_PER_DAY)
        time = self if nano_of_day == self._nanos else Time._from_nanos(nano_of_day)
        return Overflow(time, days)

    def minus_with_overflow(
        self, hours: int = 0, minutes: int = 0, seconds: int = 0, nanos: int = 0
    ) -> Overflow:
        """Subtract an amount of time and report the whole days crossed."""
        return self.plus_with_overflow(-hours, -minutes, -seconds, -nanos)

    def plus_hours(self, hours: int) -> Time:
        """Return a copy with hours added, wrapping around midnight."""
        return self.plus_with_overflow(hours=hours).time

    def plus_minutes(self, minutes: int) -> Time:
        return self.plus_with_overflow(minutes=minutes).time

    def plus_seconds(self, seconds: int) -> Time:
        return self.plus_with_overflow(seconds=seconds).time

    def plus_nanos(self, nanos: int) -> Time:
        return self.plus_with_overflow(nanos=nanos).time

    def minus_hours(self, hours: int) -> Time:
        return self.plus_hours(-hours)

    def minus_minutes(self, minutes: int) -> Time:
        return self.plus_minutes(-minutes)

    def minus_seconds(self, seconds: int) -> Time:
        return self.plus_seconds(-seconds)

    def minus_nanos(self, nanos: int) -> Time:
        return self.plus_nanos(-nanos)

    def plus(self, period: Period) -> Time:
        """Return a copy with the time part of a period added, wrapping.

        Years, months and days of the period are ignored.
        """
        return self.plus_with_overflow(nanos=period.total_nanos_of_time).time

    def minus(self, period: Period) -> Time:
        return self.plus_with_overflow(nanos=-period.total_nanos_of_time).time

    def at_date(self, date: Date) -> DateTime:
        from calendrical.core.datetime import DateTime

        return DateTime(date, self)

    def at_offset(self, offset: Offset) -> OffsetTime:
        from calendrical.core.offsettime import OffsetTime

        return OffsetTime(self, offset)

    def get(self, rule: Any) -> Any:
        """Return the value of a rule for this time, or None if unavailable."""
        return rule.value_from(self)

    def to_iso_format(self, *, precision: str = "auto") -> str:
        """Return the time as an ISO-8601 string.

        Args:
            precision: Output precision:
                - "auto": ``HH:MM``, adding seconds only when seconds or
                  nanoseconds are non-zero, and the fraction in groups of
                  3 digits
                - "seconds": Always ``HH:MM:SS``, no fraction
                - "nanos": Always 9 decimal places

        Examples:
            >>> Time(14, 30).to_iso_format()
            '14:30'

            >>> Time(14, 30, 45, 120_000_000).to_iso_format()
            '14:30:45.120'

            >>> Time(14, 30, 45, 1_000).to_iso_format()
            '14:30:45.000001'
        """
        base = f"{self.hour:02d}:{self.minute:02d}"
        second = self.second
        nano = self.nano

        if precision == "seconds":
            return f"{base}:{second:02d}"
        if precision == "nanos":
            return f"{base}:{second:02d}.{nano:09d}"

        if second == 0 and nano == 0:
            return base
        if nano == 0:
            return f"{base}:{second:02d}"
        if nano % 1_000_000 == 0:
            return f"{base}:{second:02d}.{nano // 1_000_000:03d}"
        if nano % 1_000 == 0:
            return f"{base}:{second:02d}.{nano // 1_000:06d}"
        return f"{base}:{second:02d}.{nano:09d}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos == other._nanos

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos < other._nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos <= other._nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos > other._nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos >= other._nanos

    def __hash__(self) -> int:
        return hash(self._nanos)

    def __repr__(self) -> str:
        return f"Time({self.hour}, {self.minute}, {self.second}, {self.nano})"

    def __str__(self) -> str:
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """Times are always truthy, including midnight."""
        return True


@validate_range(
    hour=("HourOfDay", 0, 23),
    minute=("MinuteOfHour", 0, 59),
    second=("SecondOfMinute", 0, 59),
    nano=("NanoOfSecond", 0, NANOS_PER_SECOND - 1),
)
def _check_fields(hour: int, minute: int, second: int, nano: int) -> None:
    pass


_HOURS: tuple[Time, ...] = ()
_HOURS = tuple(Time._from_nanos(h * NANOS_PER_HOUR) for h in range(24))

Time.MIDNIGHT = _HOURS[0]
Time.MIN = _HOURS[0]
Time.MIDDAY = _HOURS[12]
Time.MAX = Time._from_nanos(NANOS_PER_DAY - 1)


@dataclass(frozen=True)
class Overflow:
    """A Time together with the whole days crossed to reach it.

    Produced only by time arithmetic. The day carry is signed and must be
    added to a date by the caller, which ``to_datetime`` does.

    Attributes:
        time: The resulting time of day.
        days: Whole days crossed, negative when going backwards.
    """

    time: Time
    days: int

    def to_datetime(self, date: Date) -> DateTime:
        """Return ``date`` plus the day carry, at the overflowed time."""
        from calendrical.core.datetime import DateTime

        return DateTime(date.plus_days(self.days), self.time)

    def to_date(self, date: Date) -> Date:
        return date.plus_days(self.days)


__all__ = ["Time", "Overflow"]

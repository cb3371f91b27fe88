"""OffsetTime class: a Time with an Offset from UTC."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from calendrical._internal.constants import NANOS_PER_SECOND
from calendrical.core.time import Time
from calendrical.zone.offset import Offset

if TYPE_CHECKING:
    from calendrical.core.date import Date
    from calendrical.core.offsetdatetime import OffsetDateTime
    from calendrical.core.period import Period


class OffsetTime:
    """A time of day with an offset, such as ``10:15+01:00``.

    Ordering compares the UTC-equivalent time first and the local time
    second, so it agrees with equality.

    Examples:
        >>> t = OffsetTime(Time(10, 15), Offset.of_hours(1))
        >>> t.with_offset_same_instant(Offset.of_hours(3))
        OffsetTime(Time(12, 15, 0, 0), Offset('+03:00'))
    """

    __slots__ = ("_time", "_offset")

    def __init__(self, time: Time, offset: Offset) -> None:
        self._time = time
        self._offset = offset

    @classmethod
    def of(cls, hour: int, minute: int, second: int, nano: int, offset: Offset) -> OffsetTime:
        return cls(Time.of(hour, minute, second, nano), offset)

    @property
    def time(self) -> Time:
        return self._time

    @property
    def offset(self) -> Offset:
        return self._offset

    def with_offset_same_local(self, offset: Offset) -> OffsetTime:
        if offset == self._offset:
            return self
        return OffsetTime(self._time, offset)

    def with_offset_same_instant(self, offset: Offset) -> OffsetTime:
        """Return the same instant expressed at another offset.

        The local time moves by the difference between the offsets,
        wrapping around midnight; any day carry is discarded.
        """
        if offset == self._offset:
            return self
        difference = offset.total_seconds - self._offset.total_seconds
        return OffsetTime(self._time.plus_seconds(difference), offset)

    def adjust_local_time(self, offset: Offset) -> Time:
        """Return the local time this instant shows at ``offset``."""
        return self.with_offset_same_instant(offset).time

    def plus(self, period: Period) -> OffsetTime:
        return OffsetTime(self._time.plus(period), self._offset)

    def minus(self, period: Period) -> OffsetTime:
        return OffsetTime(self._time.minus(period), self._offset)

    def at_date(self, date: Date) -> OffsetDateTime:
        from calendrical.core.offsetdatetime import OffsetDateTime

        return OffsetDateTime(date.at_time(self._time), self._offset)

    def get(self, rule: Any) -> Any:
        return rule.value_from(self)

    def _utc_nanos(self) -> int:
        return self._time.to_nano_of_day() - self._offset.total_seconds * NANOS_PER_SECOND

    def _key(self) -> tuple[int, Time]:
        return (self._utc_nanos(), self._time)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OffsetTime):
            return NotImplemented
        return self._time == other._time and self._offset == other._offset

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, OffsetTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, OffsetTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, OffsetTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, OffsetTime):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash((self._time, self._offset))

    def __repr__(self) -> str:
        return f"OffsetTime({self._time!r}, {self._offset!r})"

    def __str__(self) -> str:
        return f"{self._time}{self._offset}"

    def __bool__(self) -> bool:
        return True


__all__ = ["OffsetTime"]

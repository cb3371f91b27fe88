"""OffsetDateTime class: a DateTime with an Offset from UTC.

An OffsetDateTime pins a local date-time to one instant. It is the
result of resolving a DateTime against a zone, and the input from which
zone rules are looked up.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from calendrical._internal.constants import SECONDS_PER_DAY
from calendrical.core.date import Date
from calendrical.core.datetime import DateTime
from calendrical.core.offsetdate import OffsetDate
from calendrical.core.offsettime import OffsetTime
from calendrical.core.time import Time
from calendrical.zone.offset import Offset

if TYPE_CHECKING:
    from calendrical.core.period import Period
    from calendrical.core.zoneddatetime import ZonedDateTime
    from calendrical.zone.resolvers import ZoneResolver
    from calendrical.zone.zone import Zone

Resolver = Callable[[int, int, int], Date]


class OffsetDateTime:
    """A date-time with an offset, such as ``2008-06-30T11:30+02:00``.

    Equality compares the local date-time and the offset. Use
    ``equal_instant`` to compare only the instant. Ordering is by instant,
    then by local date-time.

    Examples:
        >>> odt = OffsetDateTime.of(2008, 6, 30, 11, 30, offset=Offset.of_hours(2))
        >>> odt.to_epoch_second()
        1214818200

        >>> odt.with_offset_same_instant(Offset.UTC)
        OffsetDateTime(DateTime(Date(2008, 6, 30), Time(9, 30, 0, 0)), Offset('Z'))
    """

    __slots__ = ("_datetime", "_offset")

    def __init__(self, datetime: DateTime, offset: Offset) -> None:
        self._datetime = datetime
        self._offset = offset

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
        *,
        offset: Offset,
    ) -> OffsetDateTime:
        return cls(DateTime.of(year, month, day, hour, minute, second, nano), offset)

    @classmethod
    def of_epoch_second(cls, epoch_second: int, offset: Offset, nano: int = 0) -> OffsetDateTime:
        """Create the date-time at an instant, seen at ``offset``.

        Args:
            epoch_second: Seconds since 1970-01-01T00:00Z.
            offset: The offset to express the instant at.
            nano: Nanosecond within the second, 0-999999999.
        """
        local_seconds = epoch_second + offset.total_seconds
        epoch_day, second_of_day = divmod(local_seconds, SECONDS_PER_DAY)
        date = Date.of_epoch_day(epoch_day)
        time = Time.of_second_of_day(second_of_day, nano)
        return cls(DateTime(date, time), offset)

    @property
    def datetime(self) -> DateTime:
        return self._datetime

    @property
    def date(self) -> Date:
        return self._datetime.date

    @property
    def time(self) -> Time:
        return self._datetime.time

    @property
    def offset(self) -> Offset:
        return self._offset

    def to_epoch_second(self) -> int:
        """Return the seconds since 1970-01-01T00:00Z of this instant."""
        return (
            self._datetime.date.to_epoch_day() * SECONDS_PER_DAY
            + self._datetime.time.to_second_of_day()
            - self._offset.total_seconds
        )

    def to_offset_date(self) -> OffsetDate:
        return OffsetDate(self._datetime.date, self._offset)

    def to_offset_time(self) -> OffsetTime:
        return OffsetTime(self._datetime.time, self._offset)

    def with_datetime(self, datetime: DateTime) -> OffsetDateTime:
        if datetime == self._datetime:
            return self
        return OffsetDateTime(datetime, self._offset)

    def with_offset_same_local(self, offset: Offset) -> OffsetDateTime:
        if offset == self._offset:
            return self
        return OffsetDateTime(self._datetime, offset)

    def with_offset_same_instant(self, offset: Offset) -> OffsetDateTime:
        """Return the same instant expressed at another offset."""
        if offset == self._offset:
            return self
        difference = offset.total_seconds - self._offset.total_seconds
        return OffsetDateTime(self._datetime.plus_seconds(difference), offset)

    def plus(self, period: Period, resolver: Resolver | None = None) -> OffsetDateTime:
        return self.with_datetime(self._datetime.plus(period, resolver))

    def minus(self, period: Period, resolver: Resolver | None = None) -> OffsetDateTime:
        return self.with_datetime(self._datetime.minus(period, resolver))

    def at_zone_same_instant(self, zone: Zone) -> ZonedDateTime:
        from calendrical.core.zoneddatetime import ZonedDateTime

        return ZonedDateTime.of_instant(self, zone)

    def at_zone_similar_local(self, zone: Zone, resolver: ZoneResolver | None = None) -> ZonedDateTime:
        from calendrical.core.zoneddatetime import ZonedDateTime

        return ZonedDateTime.of(self._datetime, zone, resolver)

    def get(self, rule: Any) -> Any:
        return rule.value_from(self)

    def _instant(self) -> tuple[int, int]:
        return (self.to_epoch_second(), self._datetime.time.nano)

    def equal_instant(self, other: OffsetDateTime) -> bool:
        return self._instant() == other._instant()

    def is_before(self, other: OffsetDateTime) -> bool:
        return self._instant() < other._instant()

    def is_after(self, other: OffsetDateTime) -> bool:
        return self._instant() > other._instant()

    def _key(self) -> tuple[tuple[int, int], DateTime]:
        return (self._instant(), self._datetime)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._datetime == other._datetime and self._offset == other._offset

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash((self._datetime, self._offset))

    def __repr__(self) -> str:
        return f"OffsetDateTime({self._datetime!r}, {self._offset!r})"

    def __str__(self) -> str:
        return f"{self._datetime}{self._offset}"

    def __bool__(self) -> bool:
        return True


__all__ = ["OffsetDateTime"]

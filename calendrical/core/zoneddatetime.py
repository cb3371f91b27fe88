"""ZonedDateTime class: an OffsetDateTime bound to a Zone.

The offset of a ZonedDateTime is always one the zone's rules allow for
its local date-time. Gaps and overlaps in the local time-line are
settled by a ZoneResolver when the value is created.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from calendrical.core.date import Date
from calendrical.core.datetime import DateTime
from calendrical.core.offsetdatetime import OffsetDateTime
from calendrical.core.time import Time
from calendrical.zone.offset import Offset
from calendrical.zone.resolvers import RETAIN_OFFSET, STRICT, ZoneResolver
from calendrical.zone.zone import Zone

if TYPE_CHECKING:
    from calendrical.core.period import Period

Resolver = Callable[[int, int, int], Date]


class ZonedDateTime:
    """A date-time with an offset and the zone that chose it.

    Examples:
        >>> zdt = ZonedDateTime.of(DateTime.of(2008, 6, 30, 11, 30), Zone.fixed(Offset.of_hours(2)))
        >>> str(zdt)
        '2008-06-30T11:30+02:00[UTC+02:00]'
    """

    __slots__ = ("_odt", "_zone")

    def __init__(self, odt: OffsetDateTime, zone: Zone) -> None:
        """Bind an offset date-time to a zone without checking the offset.

        Use the factories, which validate the offset against the rules.
        """
        self._odt = odt
        self._zone = zone

    @classmethod
    def of(
        cls,
        datetime: DateTime,
        zone: Zone,
        resolver: ZoneResolver | None = None,
        old: OffsetDateTime | None = None,
    ) -> ZonedDateTime:
        """Resolve a local date-time in a zone.

        Args:
            datetime: The local date-time.
            zone: The zone to resolve it in.
            resolver: Decides gaps and overlaps; STRICT by default.
            old: A previous value whose offset some resolvers keep.

        Raises:
            ZoneRulesError: If the rules are unavailable, or the resolver
                rejects a gap or overlap.
        """
        odt = (resolver or STRICT).resolve(zone, datetime, old)
        return cls(odt, zone)

    @classmethod
    def of_offset(cls, odt: OffsetDateTime, zone: Zone) -> ZonedDateTime:
        """Bind an offset date-time to a zone, requiring its offset to be valid.

        Raises:
            ZoneRulesError: If the offset is not valid in the zone at that
                local date-time.
        """
        zone.rules_valid_for(odt)
        return cls(odt, zone)

    @classmethod
    def of_instant(cls, odt: OffsetDateTime, zone: Zone) -> ZonedDateTime:
        """Return the zoned date-time at the same instant as ``odt``.

        The zone's rules choose the offset; the local date-time follows.
        """
        offset = zone.rules().offset_for(odt)
        return cls(odt.with_offset_same_instant(offset), zone)

    @classmethod
    def of_epoch_second(cls, epoch_second: int, zone: Zone, nano: int = 0) -> ZonedDateTime:
        offset = zone.rules().offset_at(epoch_second)
        return cls(OffsetDateTime.of_epoch_second(epoch_second, offset, nano), zone)

    @property
    def offset_datetime(self) -> OffsetDateTime:
        return self._odt

    @property
    def datetime(self) -> DateTime:
        return self._odt.datetime

    @property
    def date(self) -> Date:
        return self._odt.date

    @property
    def time(self) -> Time:
        return self._odt.time

    @property
    def offset(self) -> Offset:
        return self._odt.offset

    @property
    def zone(self) -> Zone:
        return self._zone

    def to_epoch_second(self) -> int:
        return self._odt.to_epoch_second()

    def with_zone_same_instant(self, zone: Zone) -> ZonedDateTime:
        if zone == self._zone:
            return self
        return ZonedDateTime.of_instant(self._odt, zone)

    def with_datetime(self, datetime: DateTime, resolver: ZoneResolver | None = None) -> ZonedDateTime:
        """Return a copy at another local date-time in the same zone.

        The resolver defaults to RETAIN_OFFSET, which keeps the current
        offset inside an overlap.
        """
        if datetime == self._odt.datetime:
            return self
        return ZonedDateTime.of(datetime, self._zone, resolver or RETAIN_OFFSET, self._odt)

    def plus(
        self,
        period: Period,
        resolver: ZoneResolver | None = None,
        date_resolver: Resolver | None = None,
    ) -> ZonedDateTime:
        return self.with_datetime(self._odt.datetime.plus(period, date_resolver), resolver)

    def minus(
        self,
        period: Period,
        resolver: ZoneResolver | None = None,
        date_resolver: Resolver | None = None,
    ) -> ZonedDateTime:
        return self.with_datetime(self._odt.datetime.minus(period, date_resolver), resolver)

    def get(self, rule: Any) -> Any:
        return rule.value_from(self)

    def _key(self) -> tuple[tuple[int, int], DateTime, str]:
        return ((self._odt.to_epoch_second(), self._odt.time.nano), self._odt.datetime, self._zone.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self._odt == other._odt and self._zone == other._zone

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash((self._odt, self._zone))

    def __repr__(self) -> str:
        return f"ZonedDateTime({self._odt!r}, {self._zone!r})"

    def __str__(self) -> str:
        return f"{self._odt}[{self._zone.id}]"

    def __bool__(self) -> bool:
        return True


__all__ = ["ZonedDateTime"]

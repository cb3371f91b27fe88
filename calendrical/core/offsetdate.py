"""OffsetDate class: a Date with an Offset from UTC."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from calendrical.core.date import Date
from calendrical.zone.offset import Offset

if TYPE_CHECKING:
    from calendrical.core.offsetdatetime import OffsetDateTime
    from calendrical.core.period import Period
    from calendrical.core.time import Time


class OffsetDate:
    """A date with an offset, such as ``2008-06-30+02:00``.

    Examples:
        >>> str(OffsetDate(Date(2008, 6, 30), Offset.of_hours(2)))
        '2008-06-30+02:00'
    """

    __slots__ = ("_date", "_offset")

    def __init__(self, date: Date, offset: Offset) -> None:
        self._date = date
        self._offset = offset

    @classmethod
    def of(cls, year: int, month: int, day: int, offset: Offset) -> OffsetDate:
        return cls(Date(year, month, day), offset)

    @property
    def date(self) -> Date:
        return self._date

    @property
    def offset(self) -> Offset:
        return self._offset

    def with_offset_same_local(self, offset: Offset) -> OffsetDate:
        if offset == self._offset:
            return self
        return OffsetDate(self._date, offset)

    def plus(self, period: Period) -> OffsetDate:
        return OffsetDate(self._date.plus(period), self._offset)

    def minus(self, period: Period) -> OffsetDate:
        return OffsetDate(self._date.minus(period), self._offset)

    def at_time(self, time: Time) -> OffsetDateTime:
        from calendrical.core.offsetdatetime import OffsetDateTime

        return OffsetDateTime(self._date.at_time(time), self._offset)

    def get(self, rule: Any) -> Any:
        return rule.value_from(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OffsetDate):
            return NotImplemented
        return self._date == other._date and self._offset == other._offset

    def __hash__(self) -> int:
        return hash((self._date, self._offset))

    def __repr__(self) -> str:
        return f"OffsetDate({self._date!r}, {self._offset!r})"

    def __str__(self) -> str:
        return f"{self._date}{self._offset}"

    def __bool__(self) -> bool:
        return True


__all__ = ["OffsetDate"]

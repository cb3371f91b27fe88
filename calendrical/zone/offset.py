"""Offset class representing a fixed amount of time from UTC.

Offsets that are whole multiples of 15 minutes are shared instances,
held in a process-wide cache. The cache is read without a lock; a miss
takes the lock, checks again for a racing insert and only then stores
the new instance.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any, ClassVar

from calendrical._internal.constants import (
    MAX_OFFSET_HOURS,
    MAX_OFFSET_SECONDS,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from calendrical.config import OFFSET_CACHE_GRANULARITY
from calendrical.errors import CalendricalError, ParseError, RangeError

if TYPE_CHECKING:
    from calendrical.core.period import Period

logger = logging.getLogger(__name__)

_cache: dict[int, Offset] = {}
_cache_lock = threading.Lock()


def _validate(hours: int, minutes: int, seconds: int) -> None:
    """Check the component ranges and that all components share a sign."""
    if hours < -MAX_OFFSET_HOURS or hours > MAX_OFFSET_HOURS:
        raise RangeError("OffsetHours", hours, -MAX_OFFSET_HOURS, MAX_OFFSET_HOURS)
    if hours > 0:
        if minutes < 0 or seconds < 0:
            raise RangeError("Offset", (hours, minutes, seconds))
    elif hours < 0:
        if minutes > 0 or seconds > 0:
            raise RangeError("Offset", (hours, minutes, seconds))
    elif (minutes > 0 and seconds < 0) or (minutes < 0 and seconds > 0):
        raise RangeError("Offset", (hours, minutes, seconds))
    if abs(minutes) > 59:
        raise RangeError("OffsetMinutes", minutes, -59, 59)
    if abs(seconds) > 59:
        raise RangeError("OffsetSeconds", seconds, -59, 59)
    if abs(hours) == MAX_OFFSET_HOURS and (minutes != 0 or seconds != 0):
        raise RangeError("Offset", (hours, minutes, seconds), "-18:00", "+18:00")


def _build_id(total_seconds: int) -> str:
    if total_seconds == 0:
        return "Z"
    sign = "-" if total_seconds < 0 else "+"
    absolute = abs(total_seconds)
    hours = absolute // SECONDS_PER_HOUR
    minutes = (absolute // SECONDS_PER_MINUTE) % 60
    seconds = absolute % 60
    text = f"{sign}{hours:02d}:{minutes:02d}"
    if seconds:
        text += f":{seconds:02d}"
    return text


class Offset:
    """A fixed offset from UTC, such as ``+02:00``.

    Offsets range from -18:00 to +18:00 and are measured in whole
    seconds. Equality and hashing use the total seconds only.

    Ordering follows the time-line: the same local time happens earlier
    at a larger offset, so larger offsets sort first.

    Examples:
        >>> Offset.parse("+02:30").total_seconds
        9000

        >>> str(Offset.of_total_seconds(9000))
        '+02:30'

        >>> Offset.of_hours(1) is Offset.of_hours_minutes(1, 0)
        True
    """

    __slots__ = ("_total_seconds", "_id")

    UTC: ClassVar[Offset]
    MIN: ClassVar[Offset]
    MAX: ClassVar[Offset]

    def __init__(self, total_seconds: int) -> None:
        """Create an offset without consulting the cache.

        Prefer ``Offset.of_total_seconds``, which shares instances.

        Raises:
            RangeError: If the offset is beyond +/-18:00.
        """
        if not isinstance(total_seconds, int):
            raise CalendricalError(
                f"total_seconds must be an integer, got {type(total_seconds).__name__}"
            )
        if abs(total_seconds) > MAX_OFFSET_SECONDS:
            raise RangeError("OffsetSeconds", total_seconds, -MAX_OFFSET_SECONDS, MAX_OFFSET_SECONDS)
        self._total_seconds = total_seconds
        self._id = _build_id(total_seconds)

    @classmethod
    def of_total_seconds(cls, total_seconds: int) -> Offset:
        """Return the offset of a number of seconds from UTC.

        Multiples of 15 minutes return a shared instance.

        Raises:
            RangeError: If the offset is beyond +/-18:00.
        """
        if total_seconds % OFFSET_CACHE_GRANULARITY != 0:
            return cls(total_seconds)
        cached = _cache.get(total_seconds)
        if cached is not None:
            return cached
        offset = cls(total_seconds)
        with _cache_lock:
            cached = _cache.get(total_seconds)
            if cached is None:
                logger.debug("Caching offset %s", offset._id)
                _cache[total_seconds] = offset
                cached = offset
        return cached

    @classmethod
    def of_hours(cls, hours: int) -> Offset:
        return cls.of_hours_minutes_seconds(hours, 0, 0)

    @classmethod
    def of_hours_minutes(cls, hours: int, minutes: int) -> Offset:
        return cls.of_hours_minutes_seconds(hours, minutes, 0)

    @classmethod
    def of_hours_minutes_seconds(cls, hours: int, minutes: int, seconds: int) -> Offset:
        """Return the offset of hours, minutes and seconds.

        All non-zero components must share one sign, so -01:30 is
        ``of_hours_minutes(-1, -30)``.

        Raises:
            RangeError: If a component is out of range or signs differ.
        """
        _validate(hours, minutes, seconds)
        return cls.of_total_seconds(
            hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds
        )

    @classmethod
    def parse(cls, text: str) -> Offset:
        """Parse an offset id.

        Accepted forms are ``Z``, ``+hh``, ``+hhmm``, ``+hh:mm``,
        ``+hhmmss`` and ``+hh:mm:ss``, with ``-`` allowed in place of ``+``.

        Raises:
            ParseError: If the text is not an offset id.
            RangeError: If the offset is out of range.

        Examples:
            >>> Offset.parse("-0830").total_seconds
            -30600
        """
        if not isinstance(text, str):
            raise ParseError(f"Expected string, got {type(text).__name__}")
        if text == "Z":
            return cls.UTC
        if len(text) in (3, 5, 6, 7, 9) and text[0] in "+-":
            body = text[1:]
            if len(body) == 2:
                parts = [body]
            elif len(body) == 4:
                parts = [body[0:2], body[2:4]]
            elif len(body) == 5 and body[2] == ":":
                parts = [body[0:2], body[3:5]]
            elif len(body) == 6:
                parts = [body[0:2], body[2:4], body[4:6]]
            elif len(body) == 8 and body[2] == ":" and body[5] == ":":
                parts = [body[0:2], body[3:5], body[6:8]]
            else:
                parts = []
            if parts and all(len(p) == 2 and p.isdigit() and p.isascii() for p in parts):
                values = [int(p) for p in parts] + [0, 0]
                sign = -1 if text[0] == "-" else 1
                return cls.of_hours_minutes_seconds(
                    sign * values[0], sign * values[1], sign * values[2]
                )
        raise ParseError(f"Invalid offset id: {text!r}", text)

    @property
    def total_seconds(self) -> int:
        return self._total_seconds

    @property
    def id(self) -> str:
        """Return the normalized id, ``Z`` for UTC."""
        return self._id

    @property
    def hours(self) -> int:
        """Return the signed hours component."""
        return _truncate(self._total_seconds, SECONDS_PER_HOUR)

    @property
    def minutes(self) -> int:
        """Return the signed minutes component (-59 to 59)."""
        return (abs(self._total_seconds) // SECONDS_PER_MINUTE) % 60 * _sign(self._total_seconds)

    @property
    def seconds(self) -> int:
        """Return the signed seconds component (-59 to 59)."""
        return abs(self._total_seconds) % 60 * _sign(self._total_seconds)

    def plus(self, period: Period) -> Offset:
        """Return this offset adjusted by the hours, minutes and seconds of a period.

        Raises:
            CalendricalError: If the period has a date part or nanoseconds.
            RangeError: If the result is beyond +/-18:00.
        """
        if period.has_date_part or period.nanos != 0:
            raise CalendricalError(f"Period {period} cannot be added to an offset")
        delta = period.hours * SECONDS_PER_HOUR + period.minutes * SECONDS_PER_MINUTE + period.seconds
        return Offset.of_total_seconds(self._total_seconds + delta)

    def to_period(self) -> Period:
        from calendrical.core.period import Period

        return Period(hours=self.hours, minutes=self.minutes, seconds=self.seconds)

    def get(self, rule: Any) -> Any:
        return rule.value_from(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Offset):
            return NotImplemented
        return self._total_seconds == other._total_seconds

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Offset):
            return NotImplemented
        return self._total_seconds > other._total_seconds

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Offset):
            return NotImplemented
        return self._total_seconds >= other._total_seconds

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Offset):
            return NotImplemented
        return self._total_seconds < other._total_seconds

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Offset):
            return NotImplemented
        return self._total_seconds <= other._total_seconds

    def __hash__(self) -> int:
        return hash(self._total_seconds)

    def __repr__(self) -> str:
        return f"Offset({self._id!r})"

    def __str__(self) -> str:
        return self._id

    def __bool__(self) -> bool:
        return True


def _sign(value: int) -> int:
    return -1 if value < 0 else 1


def _truncate(value: int, unit: int) -> int:
    """Divide rounding towards zero."""
    return _sign(value) * (abs(value) // unit)


Offset.UTC = Offset.of_total_seconds(0)
Offset.MIN = Offset.of_total_seconds(-MAX_OFFSET_SECONDS)
Offset.MAX = Offset.of_total_seconds(MAX_OFFSET_SECONDS)


__all__ = ["Offset"]

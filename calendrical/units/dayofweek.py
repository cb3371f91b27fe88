"""DayOfWeek enumeration.

ISO-8601 numbers the days of the week from Monday (1) to Sunday (7).
"""

from __future__ import annotations

from enum import Enum

from calendrical.errors import RangeError


class DayOfWeek(Enum):
    """A day of the week, Monday=1 through Sunday=7.

    Examples:
        >>> DayOfWeek.of(4)
        <DayOfWeek.THURSDAY: 4>

        >>> DayOfWeek.SUNDAY.plus(1)
        <DayOfWeek.MONDAY: 1>
    """

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def of(cls, value: int) -> DayOfWeek:
        """Return the day for an ISO number.

        Raises:
            RangeError: If value is outside 1-7.
        """
        if value < 1 or value > 7:
            raise RangeError("DayOfWeek", value, 1, 7)
        return _DAYS[value - 1]

    def plus(self, days: int) -> DayOfWeek:
        """Return the day that is ``days`` later, wrapping around the week."""
        return _DAYS[(self.value - 1 + days) % 7]

    def minus(self, days: int) -> DayOfWeek:
        """Return the day that is ``days`` earlier, wrapping around the week."""
        return self.plus(-days)

    def next(self) -> DayOfWeek:
        return self.plus(1)

    def previous(self) -> DayOfWeek:
        return self.plus(-1)

    @property
    def is_weekend(self) -> bool:
        return self in (DayOfWeek.SATURDAY, DayOfWeek.SUNDAY)


_DAYS: tuple[DayOfWeek, ...] = tuple(DayOfWeek)


__all__ = ["DayOfWeek"]

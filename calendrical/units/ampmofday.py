"""AmPmOfDay enumeration for the half of the day."""

from __future__ import annotations

from enum import Enum

from calendrical.errors import RangeError


class AmPmOfDay(Enum):
    """Before or after midday.

    AM covers hours 0-11 and PM covers hours 12-23.

    Examples:
        >>> AmPmOfDay.of_hour_of_day(13)
        <AmPmOfDay.PM: 1>
    """

    AM = 0
    PM = 1

    @classmethod
    def of(cls, value: int) -> AmPmOfDay:
        """Return AM for 0 and PM for 1.

        Raises:
            RangeError: If value is neither 0 nor 1.
        """
        if value == 0:
            return cls.AM
        if value == 1:
            return cls.PM
        raise RangeError("AmPmOfDay", value, 0, 1)

    @classmethod
    def of_hour_of_day(cls, hour: int) -> AmPmOfDay:
        """Return the half of the day holding an hour (0-23)."""
        return cls.of((hour % 24) // 12)


__all__ = ["AmPmOfDay"]

"""QuarterOfYear enumeration."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from calendrical.errors import RangeError

if TYPE_CHECKING:
    from calendrical.units.monthofyear import MonthOfYear


class QuarterOfYear(Enum):
    """A quarter of the year, Q1 (January-March) to Q4 (October-December)."""

    Q1 = 1
    Q2 = 2
    Q3 = 3
    Q4 = 4

    @classmethod
    def of(cls, value: int) -> QuarterOfYear:
        """Return the quarter for a number 1-4.

        Raises:
            RangeError: If value is outside 1-4.
        """
        if value < 1 or value > 4:
            raise RangeError("QuarterOfYear", value, 1, 4)
        return _QUARTERS[value - 1]

    @property
    def first_month(self) -> MonthOfYear:
        """Return the first month of this quarter."""
        from calendrical.units.monthofyear import MonthOfYear

        return MonthOfYear.of(self.value * 3 - 2)

    def plus(self, quarters: int) -> QuarterOfYear:
        return _QUARTERS[(self.value - 1 + quarters) % 4]


_QUARTERS: tuple[QuarterOfYear, ...] = tuple(QuarterOfYear)


__all__ = ["QuarterOfYear"]

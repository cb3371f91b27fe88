"""Date resolvers.

A date resolver decides what happens when a (year, month, day) triple
names a day past the end of its month, such as February 30th. Each
resolver is a stateless callable ``resolver(year, month, day) -> Date``.
Any callable with that signature may be used where a resolver is
accepted; the four standard policies are provided here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from calendrical._internal.calendar import days_in_month
from calendrical._internal.validation import validate_day_of_month, validate_month, validate_year
from calendrical.core.date import Date

ResolverFunc = Callable[[int, int, int], Date]


class DateResolver(ABC):
    """Base class for the standard date resolvers.

    Subclasses implement ``resolve``. The year, month and day are range
    checked against their own fields before ``resolve`` sees them, so a
    resolver only ever decides on a day that is too large for its month.
    """

    name = "DateResolver"

    def __call__(self, year: int, month: int, day: int) -> Date:
        validate_year(year)
        validate_month(month)
        validate_day_of_month(day)
        return self.resolve(year, month, day)

    @abstractmethod
    def resolve(self, year: int, month: int, day: int) -> Date:
        """Return the date for an in-range year, month and day."""

    def __repr__(self) -> str:
        return f"DateResolvers.{self.name}"


class _Strict(DateResolver):
    """Reject invalid dates."""

    name = "STRICT"

    def resolve(self, year: int, month: int, day: int) -> Date:
        return Date(year, month, day)


class _PreviousValid(DateResolver):
    """Clamp the day to the last valid day of the month.

    Examples:
        >>> PREVIOUS_VALID(2009, 2, 29)
        Date(2009, 2, 28)
    """

    name = "PREVIOUS_VALID"

    def resolve(self, year: int, month: int, day: int) -> Date:
        return Date._create(year, month, min(day, days_in_month(year, month)))


class _NextValid(DateResolver):
    """Move an invalid day to the first day of the next month.

    Examples:
        >>> NEXT_VALID(2009, 2, 30)
        Date(2009, 3, 1)
    """

    name = "NEXT_VALID"

    def resolve(self, year: int, month: int, day: int) -> Date:
        if day <= days_in_month(year, month):
            return Date._create(year, month, day)
        return Date._create(year, month + 1, 1)


class _PartLenient(DateResolver):
    """Roll the excess days of an invalid day into the next month.

    Examples:
        >>> PART_LENIENT(2009, 2, 30)
        Date(2009, 3, 2)
    """

    name = "PART_LENIENT"

    def resolve(self, year: int, month: int, day: int) -> Date:
        length = days_in_month(year, month)
        if day <= length:
            return Date._create(year, month, day)
        return Date._create(year, month + 1, day - length)


STRICT = _Strict()
PREVIOUS_VALID = _PreviousValid()
NEXT_VALID = _NextValid()
PART_LENIENT = _PartLenient()


class DateResolvers:
    """Namespace of the standard date resolvers."""

    STRICT = STRICT
    PREVIOUS_VALID = PREVIOUS_VALID
    NEXT_VALID = NEXT_VALID
    PART_LENIENT = PART_LENIENT

    @staticmethod
    def strict() -> DateResolver:
        return STRICT

    @staticmethod
    def previous_valid() -> DateResolver:
        return PREVIOUS_VALID

    @staticmethod
    def next_valid() -> DateResolver:
        return NEXT_VALID

    @staticmethod
    def part_lenient() -> DateResolver:
        return PART_LENIENT


__all__ = [
    "ResolverFunc",
    "DateResolver",
    "DateResolvers",
    "STRICT",
    "PREVIOUS_VALID",
    "NEXT_VALID",
    "PART_LENIENT",
]

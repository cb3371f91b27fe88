"""Validation utilities for calendrical.

This module provides the range checks shared by the value factories.
Out-of-range values raise RangeError; in-range values that do not fit
together raise InvalidFieldCombinationError.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable, ParamSpec, TypeVar

from calendrical._internal.calendar import days_in_month
from calendrical._internal.constants import MAX_YEAR, MIN_YEAR
from calendrical.errors import InvalidFieldCombinationError, RangeError

P = ParamSpec("P")
T = TypeVar("T")


def validate_range(
    **limits: tuple[str, int, int],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that parameters are within specified ranges.

    Each keyword names a parameter of the decorated function and maps it
    to ``(field_name, min, max)``. Both bounds are inclusive.

    Args:
        **limits: Mapping of parameter names to (field, min, max) tuples.

    Returns:
        A decorator function.

    Examples:
        >>> @validate_range(month=("MonthOfYear", 1, 12))
        ... def first_of(year: int, month: int) -> None:
        ...     pass

        >>> first_of(2024, 13)  # Raises RangeError
        Traceback (most recent call last):
        ...
        RangeError: MonthOfYear must be between 1 and 12, got 13
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        param_names = list(inspect.signature(func).parameters.keys())

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            all_args = dict(zip(param_names, args))
            all_args.update(kwargs)

            for param_name, (field, min_val, max_val) in limits.items():
                value = all_args.get(param_name)
                if value is not None and (value < min_val or value > max_val):
                    raise RangeError(field, value, min_val, max_val)

            return func(*args, **kwargs)

        return wrapper

    return decorator


def validate_year(year: int, field: str = "Year") -> None:
    """Validate that a year is within the supported range.

    Raises:
        RangeError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise RangeError(field, year, MIN_YEAR, MAX_YEAR)


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        RangeError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise RangeError("MonthOfYear", month, 1, 12)


def validate_day_of_month(day: int) -> None:
    """Validate that a day-of-month is within 1-31.

    Raises:
        RangeError: If day is outside 1-31.
    """
    if day < 1 or day > 31:
        raise RangeError("DayOfMonth", day, 1, 31)


def validate_date(year: int, month: int, day: int) -> None:
    """Validate that year, month and day form a valid date.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day of month.

    Raises:
        RangeError: If a value is outside its own field range.
        InvalidFieldCombinationError: If the day does not exist in the month.
    """
    validate_year(year)
    validate_month(month)
    validate_day_of_month(day)
    max_day = days_in_month(year, month)
    if day > max_day:
        raise InvalidFieldCombinationError(
            f"Invalid date {year}-{month:02d}-{day:02d}: "
            f"day must be between 1 and {max_day} for that month",
            ("Year", "MonthOfYear", "DayOfMonth"),
        )


__all__ = [
    "validate_range",
    "validate_year",
    "validate_month",
    "validate_day_of_month",
    "validate_date",
]

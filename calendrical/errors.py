"""Calendrical exception hierarchy.

All calendrical exceptions inherit from CalendricalError. Each error keeps
the offending field names and values as attributes for diagnostics.
"""

from __future__ import annotations

from typing import Any, Sequence


class CalendricalError(Exception):
    """Base exception for all calendrical errors."""

    pass


class RangeError(CalendricalError, ValueError):
    """A value lies outside the static range of its field.

    Examples:
        - Month value 13
        - Hour value 24
        - Offset beyond +18:00
    """

    def __init__(self, field: str, value: Any, minimum: Any = None, maximum: Any = None) -> None:
        self.field = field
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        if minimum is None or maximum is None:
            msg = f"{field} value {value!r} is out of range"
        else:
            msg = f"{field} must be between {minimum} and {maximum}, got {value!r}"
        super().__init__(msg)


class InvalidFieldCombinationError(CalendricalError):
    """Values valid on their own form an invalid combination.

    Recoverable by supplying a lenient date resolver.

    Examples:
        - 2009-02-29
        - 2008-04-31
    """

    def __init__(self, message: str, fields: Sequence[str] = ()) -> None:
        self.fields = tuple(fields)
        super().__init__(message)


class ConflictError(CalendricalError):
    """Two independently derived values for the same quantity disagree."""

    def __init__(self, field: str, other: str, value: Any, other_value: Any) -> None:
        self.field = field
        self.other = other
        self.value = value
        self.other_value = other_value
        super().__init__(
            f"Merge resulted in two different values, {value!r} and {other_value!r}, "
            f"for {field} given the fields {field} and {other}"
        )


class OverflowError(CalendricalError):
    """A computed result exceeded the representable year range.

    Examples:
        - Adding one year to 999999999-06-01
        - Adding days past the maximum date
    """

    pass


class ParseError(CalendricalError):
    """Text could not be parsed into calendrical fields."""

    def __init__(self, message: str, text: str = "", index: int = 0) -> None:
        self.text = text
        self.index = index
        super().__init__(message)


class ZoneRulesError(CalendricalError):
    """Zone group, region, version or rules are unavailable or unusable."""

    pass


class UnsupportedRuleError(CalendricalError):
    """A value cannot supply the requested rule."""

    def __init__(self, rule: Any, source: Any = None) -> None:
        self.rule = rule
        self.source = source
        name = getattr(rule, "id", rule)
        if source is None:
            msg = f"Rule {name} is not available"
        else:
            msg = f"Rule {name} is not available from {type(source).__name__}"
        super().__init__(msg)


__all__ = [
    "CalendricalError",
    "RangeError",
    "InvalidFieldCombinationError",
    "ConflictError",
    "OverflowError",
    "ParseError",
    "ZoneRulesError",
    "UnsupportedRuleError",
]

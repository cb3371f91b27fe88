"""Field rules: the closed table of calendrical fields.

A rule names one quantity that can be read from a calendrical value,
such as the year, the hour-of-day or the whole Date. Rules for numeric
fields carry their units and range and know how to interpret raw input
for the merger.

Every rule derives its value from a *lookup*: any object with a
``get(rule)`` method. Date, Time and the other value types route
``get`` back to ``rule.value_from(self)``, and the merger answers from
its bag first. Derivation only ever walks from a field to the canonical
value holding it (YEAR from DATE, DATE from DATETIME, and so on), so it
always terminates.

Examples:
    >>> from calendrical.fields import YEAR, DAY_OF_WEEK, rule_for
    >>> Date(2008, 2, 29).get(YEAR)
    2008
    >>> Date(2008, 2, 29).get(DAY_OF_WEEK)
    <DayOfWeek.FRIDAY: 5>
    >>> rule_for("month_of_year") is rule_for("MonthOfYear")
    True
"""

from __future__ import annotations

import decimal
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Iterator

from calendrical._internal import calendar
from calendrical._internal.constants import (
    MAX_YEAR,
    MIN_YEAR,
    NANOS_PER_DAY,
    NANOS_PER_MILLISECOND,
)
from calendrical.core.date import Date
from calendrical.core.datetime import DateTime
from calendrical.core.offsetdate import OffsetDate
from calendrical.core.offsetdatetime import OffsetDateTime
from calendrical.core.offsettime import OffsetTime
from calendrical.core.period import ZERO, Period
from calendrical.core.time import Time
from calendrical.core.zoneddatetime import ZonedDateTime
from calendrical.errors import CalendricalError, RangeError, UnsupportedRuleError
from calendrical.units.ampmofday import AmPmOfDay
from calendrical.units.dayofweek import DayOfWeek
from calendrical.units.monthofyear import MonthOfYear
from calendrical.units.periodunit import PeriodUnit
from calendrical.units.quarterofyear import QuarterOfYear
from calendrical.zone.offset import Offset
from calendrical.zone.zone import Zone

Lookup = Callable[["CalendricalRule"], Any]
Deriver = Callable[[Lookup], Any]

_FRACTION_CONTEXT = decimal.Context(prec=9, rounding=decimal.ROUND_FLOOR)
_UNBOUNDED = float("inf")


class Interpretation(Enum):
    """How a field treats raw integers when merging leniently.

    Strict merging range-checks every field regardless.
    """

    CHECK = "check"  # always range-checked
    CARRY = "carry"  # excess carried into the overflow period
    RAW = "raw"  # kept as given, rolled when the date is resolved


@dataclass(frozen=True, eq=False)
class CalendricalRule:
    """A rule naming one quantity of a calendrical value.

    Attributes:
        id: The rule id, such as ``"Date"``.
        name: The Python name, such as ``"date"``.
        value_type: The type of the values of this rule.
        base_unit: The unit the value is measured in, None for values
            without a single unit.
        range_unit: The unit the value cycles within, None if unbounded.
    """

    id: str
    name: str
    value_type: type
    base_unit: PeriodUnit | None
    range_unit: PeriodUnit | None
    deriver: Deriver = field(repr=False)

    @property
    def is_field(self) -> bool:
        return False

    def value_from(self, calendrical: Any) -> Any:
        """Return the value of this rule derived from a calendrical.

        Returns None if the calendrical does not hold enough information,
        such as asking a Date for its hour-of-day.
        """
        lookup = getattr(calendrical, "get", None)
        if lookup is None:
            return None
        return self.deriver(lookup)

    def get_or_raise(self, calendrical: Any) -> Any:
        """Return the value of this rule from a calendrical.

        Raises:
            UnsupportedRuleError: If the calendrical cannot supply it.
        """
        value = calendrical.get(self)
        if value is None:
            raise UnsupportedRuleError(self, calendrical)
        return value

    def interpret(self, raw: Any, strict: bool = True) -> tuple[Any, Period]:
        """Interpret a raw input value for merging.

        Returns the value and the overflow period it carries.

        Raises:
            CalendricalError: If the value has the wrong type.
        """
        if not isinstance(raw, self.value_type):
            raise CalendricalError(
                f"Unable to merge {type(raw).__name__} value {raw!r} for rule {self.id}"
            )
        return raw, ZERO

    def _sort_key(self) -> tuple[float, float, str]:
        range_nanos = self.range_unit.estimated_nanos if self.range_unit else _UNBOUNDED
        base_nanos = self.base_unit.estimated_nanos if self.base_unit else _UNBOUNDED
        return (-range_nanos, -base_nanos, self.id)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CalendricalRule):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CalendricalRule):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CalendricalRule):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CalendricalRule):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def __str__(self) -> str:
        return self.id


@dataclass(frozen=True, eq=False)
class ValueRule(CalendricalRule):
    """A rule whose values are whole calendrical values, such as Date."""

    def value_from(self, calendrical: Any) -> Any:
        if isinstance(calendrical, self.value_type):
            return calendrical
        return super().value_from(calendrical)


@dataclass(frozen=True, eq=False)
class DateTimeFieldRule(CalendricalRule):
    """A numeric field with a fixed outer range.

    Attributes:
        minimum: The smallest valid value.
        maximum: The largest valid value in any context.
        smallest_maximum: The largest value valid in every context, such
            as 28 for day-of-month.
        interpretation: Lenient handling of raw integers.
        contextual_maximum: Optional function returning the maximum given
            a lookup of other fields.
    """

    minimum: int = 0
    maximum: int = 0
    smallest_maximum: int = 0
    interpretation: Interpretation = Interpretation.CHECK
    contextual_maximum: Callable[[Lookup], int] | None = field(default=None, repr=False)

    @property
    def is_field(self) -> bool:
        return True

    @property
    def is_fixed_value_set(self) -> bool:
        """Return True if the maximum never depends on context."""
        return self.maximum == self.smallest_maximum

    def is_valid_value(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum

    def check_value(self, value: Any) -> int:
        """Check a value lies in the outer range and return it as an int.

        Raises:
            RangeError: If the value is outside minimum to maximum.
        """
        number = self.to_int(value)
        if not self.is_valid_value(number):
            raise RangeError(self.id, number, self.minimum, self.maximum)
        return number

    def maximum_for(self, calendrical: Any) -> int:
        """Return the maximum given other fields of a calendrical.

        Examples:
            >>> DAY_OF_MONTH.maximum_for(Date(2009, 2, 1))
            28
        """
        if self.contextual_maximum is None:
            return self.maximum
        lookup = getattr(calendrical, "get", None)
        if lookup is None:
            return self.maximum
        return self.contextual_maximum(lookup)

    def to_int(self, value: Any) -> int:
        if isinstance(value, Enum):
            return value.value
        return value

    def to_value(self, number: int) -> Any:
        if issubclass(self.value_type, Enum):
            return self.value_type.of(number)
        return number

    def interpret(self, raw: Any, strict: bool = True) -> tuple[Any, Period]:
        """Interpret a raw input value for merging.

        Enum members are taken as they are. Integers are range-checked
        when strict; when lenient a CARRY field reduces the value into
        its range and returns the excess as a period of its range unit.

        Examples:
            >>> DAY_OF_WEEK.interpret(9, strict=False)
            (<DayOfWeek.TUESDAY: 2>, Period(days=7))

        Raises:
            RangeError: If a checked value is out of range.
            CalendricalError: If the value has the wrong type.
        """
        if isinstance(raw, Enum):
            if not isinstance(raw, self.value_type):
                raise CalendricalError(
                    f"Unable to merge {type(raw).__name__} value {raw!r} for rule {self.id}"
                )
            return raw, ZERO
        if not isinstance(raw, int) or isinstance(raw, bool):
            raise CalendricalError(
                f"Unable to merge {type(raw).__name__} value {raw!r} for rule {self.id}"
            )

        if strict or self.interpretation is Interpretation.CHECK:
            return self.to_value(self.check_value(raw)), ZERO
        if self.interpretation is Interpretation.RAW:
            return raw, ZERO
        if self.is_valid_value(raw):
            return self.to_value(raw), ZERO

        span = self.maximum - self.minimum + 1
        carry, index = divmod(raw - self.minimum, span)
        return self.to_value(self.minimum + index), self.range_unit.to_period(carry)

    def convert_int_to_fraction(self, value: int) -> Decimal:
        """Return the value as a fraction of its range, from 0 up to 1.

        Only fields with a fixed range starting at zero support this.

        Examples:
            >>> NANO_OF_SECOND.convert_int_to_fraction(500_000_000)
            Decimal('0.5')

        Raises:
            UnsupportedRuleError: If the range is not fixed or not zero-based.
            RangeError: If the value is out of range.
        """
        self._check_fraction_support()
        self.check_value(value)
        return _FRACTION_CONTEXT.divide(Decimal(value), Decimal(self.maximum + 1))

    def convert_fraction_to_int(self, fraction: Decimal) -> int:
        """Return the field value for a fraction of its range.

        Raises:
            UnsupportedRuleError: If the range is not fixed or not zero-based.
            RangeError: If the fraction does not map to a whole value in range.
        """
        self._check_fraction_support()
        scaled = Decimal(fraction) * (self.maximum + 1)
        if scaled != scaled.to_integral_value():
            raise RangeError(self.id, fraction, 0, 1)
        value = int(scaled)
        if not self.is_valid_value(value):
            raise RangeError(self.id, fraction, 0, 1)
        return value

    def _check_fraction_support(self) -> None:
        if not self.is_fixed_value_set or self.minimum != 0:
            raise UnsupportedRuleError(self)


def _via(source: CalendricalRule, extract: Callable[[Any], Any]) -> Deriver:
    """Return a deriver reading ``source`` and applying ``extract``."""

    def derive(lookup: Lookup) -> Any:
        value = lookup(source)
        if value is None:
            return None
        return extract(value)

    return derive


def _first(*sources: tuple[str, Callable[[Any], Any]]) -> Deriver:
    """Return a deriver trying several canonical rules in turn.

    Sources are named by module global so that rules can refer to those
    defined after them.
    """

    def derive(lookup: Lookup) -> Any:
        for name, extract in sources:
            value = lookup(globals()[name])
            if value is not None:
                return extract(value)
        return None

    return derive


def _underivable(lookup: Lookup) -> Any:
    return None


# ============================================================================
# Canonical value rules
# ============================================================================

ZONED_DATETIME = ValueRule(
    "ZonedDateTime", "zoned_datetime", ZonedDateTime, None, None, _underivable
)
OFFSET_DATETIME = ValueRule(
    "OffsetDateTime",
    "offset_datetime",
    OffsetDateTime,
    None,
    None,
    _first(("ZONED_DATETIME", lambda zdt: zdt.offset_datetime)),
)
OFFSET_DATE = ValueRule(
    "OffsetDate",
    "offset_date",
    OffsetDate,
    None,
    None,
    _first(("OFFSET_DATETIME", lambda odt: odt.to_offset_date())),
)
OFFSET_TIME = ValueRule(
    "OffsetTime",
    "offset_time",
    OffsetTime,
    None,
    None,
    _first(("OFFSET_DATETIME", lambda odt: odt.to_offset_time())),
)
DATETIME = ValueRule(
    "DateTime",
    "datetime",
    DateTime,
    None,
    None,
    _first(("OFFSET_DATETIME", lambda odt: odt.datetime)),
)
DATE = ValueRule(
    "Date",
    "date",
    Date,
    None,
    None,
    _first(("DATETIME", lambda dt: dt.date), ("OFFSET_DATE", lambda od: od.date)),
)
TIME = ValueRule(
    "Time",
    "time",
    Time,
    None,
    None,
    _first(("DATETIME", lambda dt: dt.time), ("OFFSET_TIME", lambda ot: ot.time)),
)
OFFSET = ValueRule(
    "Offset",
    "offset",
    Offset,
    None,
    None,
    _first(("OFFSET_DATE", lambda od: od.offset), ("OFFSET_TIME", lambda ot: ot.offset)),
)
ZONE = ValueRule(
    "Zone", "zone", Zone, None, None, _first(("ZONED_DATETIME", lambda zdt: zdt.zone))
)


# ============================================================================
# Contextual maxima
# ============================================================================


def _day_of_month_maximum(lookup: Lookup) -> int:
    moy = lookup(MONTH_OF_YEAR)
    if moy is None:
        return 31
    year = lookup(YEAR)
    if year is None:
        return moy.max_length_in_days
    return moy.length_in_days(calendar.is_leap_year(year))


def _day_of_year_maximum(lookup: Lookup) -> int:
    year = lookup(YEAR)
    if year is None:
        return 366
    return calendar.days_in_year(year)


def _week_of_month_maximum(lookup: Lookup) -> int:
    year = lookup(YEAR)
    moy = lookup(MONTH_OF_YEAR)
    if year is None or moy is None:
        return 5
    if moy is MonthOfYear.FEBRUARY:
        return 5 if calendar.is_leap_year(year) else 4
    return 5


def _week_of_week_based_year_maximum(lookup: Lookup) -> int:
    wby = lookup(WEEK_BASED_YEAR)
    if wby is None:
        return 53
    return calendar.weeks_in_week_based_year(wby)


# ============================================================================
# Field rules
# ============================================================================

_CARRY = Interpretation.CARRY
_RAW = Interpretation.RAW


def _field(
    rule_id: str,
    name: str,
    base: PeriodUnit,
    range_: PeriodUnit | None,
    minimum: int,
    maximum: int,
    smallest_maximum: int,
    deriver: Deriver,
    *,
    value_type: type = int,
    interpretation: Interpretation = Interpretation.CHECK,
    contextual_maximum: Callable[[Lookup], int] | None = None,
) -> DateTimeFieldRule:
    return DateTimeFieldRule(
        rule_id,
        name,
        value_type,
        base,
        range_,
        deriver,
        minimum,
        maximum,
        smallest_maximum,
        interpretation,
        contextual_maximum,
    )


NANO_OF_SECOND = _field(
    "NanoOfSecond", "nano_of_second", PeriodUnit.NANOS, PeriodUnit.SECONDS,
    0, 999_999_999, 999_999_999, _via(TIME, lambda t: t.nano), interpretation=_CARRY,
)
NANO_OF_DAY = _field(
    "NanoOfDay", "nano_of_day", PeriodUnit.NANOS, PeriodUnit.DAYS,
    0, NANOS_PER_DAY - 1, NANOS_PER_DAY - 1,
    _via(TIME, lambda t: t.to_nano_of_day()), interpretation=_CARRY,
)
MILLI_OF_SECOND = _field(
    "MilliOfSecond", "milli_of_second", PeriodUnit.MILLIS, PeriodUnit.SECONDS,
    0, 999, 999, _via(TIME, lambda t: t.nano // NANOS_PER_MILLISECOND), interpretation=_CARRY,
)
MILLI_OF_DAY = _field(
    "MilliOfDay", "milli_of_day", PeriodUnit.MILLIS, PeriodUnit.DAYS,
    0, 86_399_999, 86_399_999,
    _via(TIME, lambda t: t.to_nano_of_day() // NANOS_PER_MILLISECOND), interpretation=_CARRY,
)
SECOND_OF_MINUTE = _field(
    "SecondOfMinute", "second_of_minute", PeriodUnit.SECONDS, PeriodUnit.MINUTES,
    0, 59, 59, _via(TIME, lambda t: t.second), interpretation=_CARRY,
)
SECOND_OF_DAY = _field(
    "SecondOfDay", "second_of_day", PeriodUnit.SECONDS, PeriodUnit.DAYS,
    0, 86_399, 86_399, _via(TIME, lambda t: t.to_second_of_day()), interpretation=_CARRY,
)
MINUTE_OF_HOUR = _field(
    "MinuteOfHour", "minute_of_hour", PeriodUnit.MINUTES, PeriodUnit.HOURS,
    0, 59, 59, _via(TIME, lambda t: t.minute), interpretation=_CARRY,
)
HOUR_OF_DAY = _field(
    "HourOfDay", "hour_of_day", PeriodUnit.HOURS, PeriodUnit.DAYS,
    0, 23, 23, _via(TIME, lambda t: t.hour), interpretation=_CARRY,
)
CLOCK_HOUR_OF_DAY = _field(
    "ClockHourOfDay", "clock_hour_of_day", PeriodUnit.HOURS, PeriodUnit.DAYS,
    1, 24, 24, _via(HOUR_OF_DAY, lambda hour: (hour + 23) % 24 + 1), interpretation=_CARRY,
)
HOUR_OF_AMPM = _field(
    "HourOfAmPm", "hour_of_ampm", PeriodUnit.HOURS, PeriodUnit.TWELVE_HOURS,
    0, 11, 11, _via(HOUR_OF_DAY, lambda hour: hour % 12), interpretation=_CARRY,
)
CLOCK_HOUR_OF_AMPM = _field(
    "ClockHourOfAmPm", "clock_hour_of_ampm", PeriodUnit.HOURS, PeriodUnit.TWELVE_HOURS,
    1, 12, 12, _via(HOUR_OF_AMPM, lambda hour: (hour + 11) % 12 + 1), interpretation=_CARRY,
)
AMPM_OF_DAY = _field(
    "AmPmOfDay", "ampm_of_day", PeriodUnit.TWELVE_HOURS, PeriodUnit.DAYS,
    0, 1, 1, _via(HOUR_OF_DAY, AmPmOfDay.of_hour_of_day),
    value_type=AmPmOfDay, interpretation=_CARRY,
)
DAY_OF_WEEK = _field(
    "DayOfWeek", "day_of_week", PeriodUnit.DAYS, PeriodUnit.WEEKS,
    1, 7, 7, _via(DATE, lambda d: d.day_of_week),
    value_type=DayOfWeek, interpretation=_CARRY,
)
DAY_OF_MONTH = _field(
    "DayOfMonth", "day_of_month", PeriodUnit.DAYS, PeriodUnit.MONTHS,
    1, 31, 28, _via(DATE, lambda d: d.day),
    interpretation=_RAW, contextual_maximum=_day_of_month_maximum,
)
DAY_OF_YEAR = _field(
    "DayOfYear", "day_of_year", PeriodUnit.DAYS, PeriodUnit.YEARS,
    1, 366, 365, _via(DATE, lambda d: d.day_of_year),
    interpretation=_RAW, contextual_maximum=_day_of_year_maximum,
)
EPOCH_DAY = _field(
    "EpochDay", "epoch_day", PeriodUnit.DAYS, None,
    calendar.epoch_day_from_ymd(MIN_YEAR, 1, 1),
    calendar.epoch_day_from_ymd(MAX_YEAR, 12, 31),
    calendar.epoch_day_from_ymd(MAX_YEAR, 12, 31),
    _via(DATE, lambda d: d.to_epoch_day()),
)
WEEK_OF_MONTH = _field(
    "WeekOfMonth", "week_of_month", PeriodUnit.WEEKS, PeriodUnit.MONTHS,
    1, 5, 4, _via(DAY_OF_MONTH, lambda dom: (dom + 6) // 7),
    interpretation=_RAW, contextual_maximum=_week_of_month_maximum,
)
WEEK_OF_WEEK_BASED_YEAR = _field(
    "WeekOfWeekBasedYear", "week_of_week_based_year", PeriodUnit.WEEKS,
    PeriodUnit.WEEK_BASED_YEARS, 1, 53, 52,
    _via(DATE, lambda d: calendar.week_of_week_based_year(d.year, d.month, d.day)),
    interpretation=_RAW, contextual_maximum=_week_of_week_based_year_maximum,
)
WEEK_OF_YEAR = _field(
    "WeekOfYear", "week_of_year", PeriodUnit.WEEKS, PeriodUnit.YEARS,
    1, 53, 53, _via(DAY_OF_YEAR, lambda doy: (doy + 6) // 7), interpretation=_RAW,
)
MONTH_OF_YEAR = _field(
    "MonthOfYear", "month_of_year", PeriodUnit.MONTHS, PeriodUnit.YEARS,
    1, 12, 12, _via(DATE, lambda d: d.month_of_year),
    value_type=MonthOfYear, interpretation=_CARRY,
)
MONTH_OF_QUARTER = _field(
    "MonthOfQuarter", "month_of_quarter", PeriodUnit.MONTHS, PeriodUnit.QUARTERS,
    1, 3, 3, _via(MONTH_OF_YEAR, lambda moy: moy.month_of_quarter), interpretation=_CARRY,
)
QUARTER_OF_YEAR = _field(
    "QuarterOfYear", "quarter_of_year", PeriodUnit.QUARTERS, PeriodUnit.YEARS,
    1, 4, 4, _via(MONTH_OF_YEAR, lambda moy: moy.quarter_of_year),
    value_type=QuarterOfYear, interpretation=_CARRY,
)
WEEK_BASED_YEAR = _field(
    "WeekBasedYear", "week_based_year", PeriodUnit.WEEK_BASED_YEARS, None,
    MIN_YEAR, MAX_YEAR, MAX_YEAR,
    _via(DATE, lambda d: calendar.week_based_year(d.year, d.month, d.day)),
)
YEAR = _field(
    "Year", "year", PeriodUnit.YEARS, None,
    MIN_YEAR, MAX_YEAR, MAX_YEAR, _via(DATE, lambda d: d.year),
)


# ============================================================================
# Registry
# ============================================================================

VALUE_RULES: tuple[ValueRule, ...] = (
    ZONED_DATETIME,
    OFFSET_DATETIME,
    OFFSET_DATE,
    OFFSET_TIME,
    DATETIME,
    DATE,
    TIME,
    OFFSET,
    ZONE,
)

FIELD_RULES: tuple[DateTimeFieldRule, ...] = (
    NANO_OF_SECOND,
    MILLI_OF_SECOND,
    MILLI_OF_DAY,
    SECOND_OF_MINUTE,
    SECOND_OF_DAY,
    MINUTE_OF_HOUR,
    CLOCK_HOUR_OF_AMPM,
    HOUR_OF_AMPM,
    CLOCK_HOUR_OF_DAY,
    HOUR_OF_DAY,
    AMPM_OF_DAY,
    DAY_OF_WEEK,
    DAY_OF_MONTH,
    DAY_OF_YEAR,
    WEEK_OF_MONTH,
    WEEK_OF_WEEK_BASED_YEAR,
    WEEK_OF_YEAR,
    MONTH_OF_QUARTER,
    MONTH_OF_YEAR,
    QUARTER_OF_YEAR,
    WEEK_BASED_YEAR,
    YEAR,
)

# Day and nano counts are ranged like fields but stand in for whole values.
COUNT_RULES: tuple[DateTimeFieldRule, ...] = (EPOCH_DAY, NANO_OF_DAY)

_BY_NAME: dict[str, CalendricalRule] = {}
for _rule in VALUE_RULES + FIELD_RULES + COUNT_RULES:
    _BY_NAME[_rule.id] = _rule
    _BY_NAME[_rule.name] = _rule
del _rule


def rule_for(name: str) -> CalendricalRule:
    """Return the rule with a rule id or Python name.

    Raises:
        UnsupportedRuleError: If no rule has that name.

    Examples:
        >>> rule_for("HourOfDay") is HOUR_OF_DAY
        True
    """
    try:
        return _BY_NAME[name]
    except KeyError:
        raise UnsupportedRuleError(name) from None


def all_rules() -> Iterator[CalendricalRule]:
    """Iterate over every registered rule, largest range first."""
    return iter(sorted(VALUE_RULES + FIELD_RULES + COUNT_RULES))


__all__ = [
    "CalendricalRule",
    "ValueRule",
    "DateTimeFieldRule",
    "Interpretation",
    "Lookup",
    "rule_for",
    "all_rules",
    "VALUE_RULES",
    "FIELD_RULES",
    "COUNT_RULES",
    # Value rules
    "ZONED_DATETIME",
    "OFFSET_DATETIME",
    "OFFSET_DATE",
    "OFFSET_TIME",
    "DATETIME",
    "DATE",
    "TIME",
    "OFFSET",
    "ZONE",
    # Field rules
    "NANO_OF_SECOND",
    "NANO_OF_DAY",
    "MILLI_OF_SECOND",
    "MILLI_OF_DAY",
    "SECOND_OF_MINUTE",
    "SECOND_OF_DAY",
    "MINUTE_OF_HOUR",
    "CLOCK_HOUR_OF_AMPM",
    "HOUR_OF_AMPM",
    "CLOCK_HOUR_OF_DAY",
    "HOUR_OF_DAY",
    "AMPM_OF_DAY",
    "DAY_OF_WEEK",
    "DAY_OF_MONTH",
    "DAY_OF_YEAR",
    "EPOCH_DAY",
    "WEEK_OF_MONTH",
    "WEEK_OF_WEEK_BASED_YEAR",
    "WEEK_OF_YEAR",
    "MONTH_OF_QUARTER",
    "MONTH_OF_YEAR",
    "QUARTER_OF_YEAR",
    "WEEK_BASED_YEAR",
    "YEAR",
]

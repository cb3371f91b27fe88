"""Merging a bag of fields into calendrical values.

The merger takes a mapping of rules to raw values of mixed granularity,
such as ``{YEAR: 2008, MONTH_OF_YEAR: 2, DAY_OF_MONTH: 29}``, and
combines compatible groups into whole values until nothing more can be
combined. Each combination consumes its inputs. Out-of-range input
accepted by lenient merging is kept as an overflow period, which
``merge_fields`` adds to the result.

Examples:
    >>> from calendrical.fields import DATE, merge_fields
    >>> merge_fields({"year": 2008, "month_of_year": 2, "day_of_month": 29}, DATE)
    Date(2008, 2, 29)
    >>> merge_fields({"year": 2009, "month_of_year": 2, "day_of_month": 29}, DATE, strict=False)
    Date(2009, 3, 1)
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Mapping

from calendrical._internal import calendar
from calendrical._internal.validation import validate_day_of_month, validate_year
from calendrical.config import MERGE_ITERATION_LIMIT
from calendrical.core.date import Date
from calendrical.core.datetime import DateTime
from calendrical.core.offsetdate import OffsetDate
from calendrical.core.offsetdatetime import OffsetDateTime
from calendrical.core.offsettime import OffsetTime
from calendrical.core.period import ZERO, Period
from calendrical.core.time import Time
from calendrical.core.zoneddatetime import ZonedDateTime
from calendrical.errors import CalendricalError, ConflictError, InvalidFieldCombinationError
from calendrical.fields.registry import (
    AMPM_OF_DAY,
    CLOCK_HOUR_OF_AMPM,
    CLOCK_HOUR_OF_DAY,
    DATE,
    DATETIME,
    DAY_OF_MONTH,
    DAY_OF_WEEK,
    DAY_OF_YEAR,
    EPOCH_DAY,
    HOUR_OF_AMPM,
    HOUR_OF_DAY,
    MILLI_OF_DAY,
    MILLI_OF_SECOND,
    MINUTE_OF_HOUR,
    MONTH_OF_QUARTER,
    MONTH_OF_YEAR,
    NANO_OF_DAY,
    NANO_OF_SECOND,
    OFFSET,
    OFFSET_DATE,
    OFFSET_DATETIME,
    OFFSET_TIME,
    QUARTER_OF_YEAR,
    SECOND_OF_DAY,
    SECOND_OF_MINUTE,
    TIME,
    WEEK_BASED_YEAR,
    WEEK_OF_MONTH,
    WEEK_OF_WEEK_BASED_YEAR,
    WEEK_OF_YEAR,
    YEAR,
    ZONE,
    ZONED_DATETIME,
    CalendricalRule,
    rule_for,
)
from calendrical.units.monthofyear import MonthOfYear
from calendrical.zone import resolvers as zone_resolvers
from calendrical.zone.resolvers import ZoneResolver

logger = logging.getLogger(__name__)

DateResolverFunc = Callable[[int, int, int], Date]

_NANOS_PER_MILLI = 1_000_000
_PERIOD_COMPONENTS = ("years", "months", "days", "hours", "minutes", "seconds", "nanos")


class CalendricalContext:
    """Settings for one merge.

    Args:
        strict: Range-check every input and reject conflicts.
        date_resolver: Resolver used when a year, month and day do not
            form a valid date. When None, strict merging rejects such a
            date and lenient merging rolls it forward.
        zone_resolver: Resolver used to place a local date-time in a zone
            without an offset. Defaults to STRICT when strict and
            POST_GAP_PRE_OVERLAP when lenient.
    """

    __slots__ = ("_strict", "_date_resolver", "_zone_resolver")

    def __init__(
        self,
        strict: bool = True,
        date_resolver: DateResolverFunc | None = None,
        zone_resolver: ZoneResolver | None = None,
    ) -> None:
        self._strict = strict
        self._date_resolver = date_resolver
        if zone_resolver is None:
            zone_resolver = (
                zone_resolvers.STRICT if strict else zone_resolvers.POST_GAP_PRE_OVERLAP
            )
        self._zone_resolver = zone_resolver

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def date_resolver(self) -> DateResolverFunc | None:
        return self._date_resolver

    @property
    def zone_resolver(self) -> ZoneResolver:
        return self._zone_resolver

    def resolve_date(self, year: int, month: int, day: int) -> Date:
        """Build a Date from fields, applying the date resolver.

        Raises:
            RangeError: If the year or day is outside its outer range.
            InvalidFieldCombinationError: If strict without a resolver and
                the day does not exist in the month.
        """
        if self._date_resolver is not None:
            validate_year(year)
            validate_day_of_month(day)
            return self._date_resolver(year, month, day)
        if self._strict:
            return Date.of(year, month, day)
        return Date.of(year, month, 1).plus_days(day - 1)

    def __repr__(self) -> str:
        return (
            f"CalendricalContext(strict={self._strict}, "
            f"date_resolver={self._date_resolver!r}, zone_resolver={self._zone_resolver!r})"
        )


class _SingleValue:
    """A lookup holding one rule and its value."""

    __slots__ = ("_rule", "_value")

    def __init__(self, rule: CalendricalRule, value: Any) -> None:
        self._rule = rule
        self._value = value

    def get(self, rule: CalendricalRule) -> Any:
        if rule is self._rule:
            return self._value
        return rule.value_from(self)


class CalendricalMerger:
    """Combines a bag of fields into calendrical values.

    A merger is built for one merge and must not be shared between
    threads. Keys of ``fields`` may be rules or rule names.

    Examples:
        >>> merger = CalendricalMerger({HOUR_OF_DAY: 14, MINUTE_OF_HOUR: 30}).merge()
        >>> merger.get(TIME)
        Time(14, 30, 0, 0)
    """

    def __init__(
        self,
        fields: Mapping[CalendricalRule | str, Any],
        context: CalendricalContext | None = None,
    ) -> None:
        self._input: dict[CalendricalRule, Any] = {}
        for key, value in fields.items():
            rule = rule_for(key) if isinstance(key, str) else key
            if value is None:
                raise CalendricalError(f"Value for rule {rule.id} must not be None")
            self._input[rule] = value
        self._context = context or CalendricalContext()
        self._processing: dict[CalendricalRule, Any] = {}
        self._overflow: Period = ZERO

    @property
    def context(self) -> CalendricalContext:
        return self._context

    @property
    def input_fields(self) -> Mapping[CalendricalRule, Any]:
        return MappingProxyType(self._input)

    @property
    def fields(self) -> Mapping[CalendricalRule, Any]:
        """Return the merged fields, keyed by rule."""
        return MappingProxyType(self._processing)

    @property
    def overflow(self) -> Period:
        """Return the period carried from out-of-range lenient input."""
        return self._overflow

    def get_value(self, rule: CalendricalRule) -> Any:
        """Return the value stored for a rule, without deriving."""
        return self._processing.get(rule)

    def get(self, rule: CalendricalRule) -> Any:
        """Return the value of a rule, stored or derived from merged values."""
        value = self._processing.get(rule)
        if value is not None:
            return value
        return rule.value_from(self)

    def add_to_overflow(self, period: Period) -> None:
        """Add to the overflow period.

        Raises:
            CalendricalError: If two inputs overflow into the same component.
        """
        for name in _PERIOD_COMPONENTS:
            if getattr(self._overflow, name) != 0 and getattr(period, name) != 0:
                raise CalendricalError(
                    "Unable to complete merge as input contains two conflicting "
                    "out of range values"
                )
        self._overflow = self._overflow.plus(period)

    def store_merged(self, rule: CalendricalRule, value: Any, *consumed: CalendricalRule) -> None:
        """Store a merged value and remove the fields it was built from.

        Raises:
            ConflictError: If a different value is already stored.
        """
        old = self._processing.get(rule)
        if old is not None and old != value:
            sources = ", ".join(source.id for source in consumed) or rule.id
            raise ConflictError(rule.id, sources, old, value)
        logger.debug("Merged %s=%s from %s", rule.id, value, [r.id for r in consumed])
        self._processing[rule] = value
        for source in consumed:
            self._processing.pop(source, None)

    def merge(self) -> CalendricalMerger:
        """Run the merge and return self.

        Raises:
            RangeError: If strict and an input is out of range.
            ConflictError: If strict and two inputs disagree.
            InvalidFieldCombinationError: If strict and fields combine into
                a date that does not exist.
            CalendricalError: If the merge does not settle.
        """
        self._processing.clear()
        self._overflow = ZERO
        if not self._input:
            return self
        self._interpret()
        self._merge_loop()
        if len(self._processing) > 1:
            self._remove_derivable()
        logger.debug("Merge of %s gave %s overflow %s", self._input, self._processing, self._overflow)
        return self

    def apply_overflow(self) -> None:
        """Add the overflow period to every merged value that accepts one."""
        if self._overflow.is_zero:
            return
        resolver = self._context.date_resolver
        for rule, value in list(self._processing.items()):
            self._processing[rule] = _plus_period(value, self._overflow, resolver)
        self._overflow = ZERO

    # ------------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------------

    def _interpret(self) -> None:
        strict = self._context.strict
        for rule, raw in self._input.items():
            value, overflow = rule.interpret(raw, strict)
            self._processing[rule] = value
            if not overflow.is_zero:
                self.add_to_overflow(overflow)

    def _merge_loop(self) -> None:
        steps = (
            self._merge_day_counts,
            self._merge_am_pm,
            self._merge_time,
            self._merge_quarter,
            self._merge_date,
            self._merge_week_based_date,
            self._merge_local,
            self._merge_offset,
            self._merge_zone,
        )
        for _ in range(MERGE_ITERATION_LIMIT):
            changed = False
            for step in steps:
                if step():
                    changed = True
            if not changed:
                return
        raise CalendricalError("Merge did not converge, infinite loop blocked")

    def _remove_derivable(self) -> None:
        strict = self._context.strict
        for rule in sorted(self._processing):
            if rule not in self._processing:
                continue
            value = self._processing[rule]
            for source, source_value in list(self._processing.items()):
                if source is rule:
                    continue
                derived = rule.value_from(_SingleValue(source, source_value))
                if derived is None:
                    continue
                if derived != value:
                    if strict:
                        raise ConflictError(rule.id, source.id, value, derived)
                    logger.debug(
                        "Dropped %s=%s which disagrees with %s from %s",
                        rule.id, value, derived, source.id,
                    )
                del self._processing[rule]
                break

    # ------------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------------

    def _has(self, *rules: CalendricalRule) -> bool:
        return all(rule in self._processing for rule in rules)

    def _value(self, rule: CalendricalRule) -> Any:
        return self._processing[rule]

    def _merge_day_counts(self) -> bool:
        if self._has(EPOCH_DAY):
            self.store_merged(DATE, Date.of_epoch_day(self._value(EPOCH_DAY)), EPOCH_DAY)
            return True
        if self._has(NANO_OF_DAY):
            self.store_merged(TIME, Time.of_nano_of_day(self._value(NANO_OF_DAY)), NANO_OF_DAY)
            return True
        if self._has(MILLI_OF_DAY):
            nod = self._value(MILLI_OF_DAY) * _NANOS_PER_MILLI
            self.store_merged(TIME, Time.of_nano_of_day(nod), MILLI_OF_DAY)
            return True
        if self._has(SECOND_OF_DAY):
            sod = self._value(SECOND_OF_DAY)
            if self._has(NANO_OF_SECOND):
                time = Time.of_second_of_day(sod, self._value(NANO_OF_SECOND))
                self.store_merged(TIME, time, SECOND_OF_DAY, NANO_OF_SECOND)
            elif self._has(MILLI_OF_SECOND):
                time = Time.of_second_of_day(sod, self._value(MILLI_OF_SECOND) * _NANOS_PER_MILLI)
                self.store_merged(TIME, time, SECOND_OF_DAY, MILLI_OF_SECOND)
            else:
                self.store_merged(TIME, Time.of_second_of_day(sod), SECOND_OF_DAY)
            return True
        return False

    def _merge_am_pm(self) -> bool:
        changed = False
        if self._has(CLOCK_HOUR_OF_AMPM):
            chap = self._value(CLOCK_HOUR_OF_AMPM)
            self.store_merged(HOUR_OF_AMPM, chap % 12, CLOCK_HOUR_OF_AMPM)
            changed = True
        if self._has(AMPM_OF_DAY, HOUR_OF_AMPM):
            hour = self._value(AMPM_OF_DAY).value * 12 + self._value(HOUR_OF_AMPM)
            self.store_merged(HOUR_OF_DAY, hour, AMPM_OF_DAY, HOUR_OF_AMPM)
            changed = True
        if self._has(CLOCK_HOUR_OF_DAY):
            cod = self._value(CLOCK_HOUR_OF_DAY)
            # 24 is the first hour of the same day, as derived for 00:xx
            self.store_merged(HOUR_OF_DAY, cod % 24, CLOCK_HOUR_OF_DAY)
            changed = True
        return changed

    def _merge_time(self) -> bool:
        if not self._has(HOUR_OF_DAY):
            return False
        hour = self._value(HOUR_OF_DAY)
        if self._has(MINUTE_OF_HOUR, SECOND_OF_MINUTE, NANO_OF_SECOND):
            consumed = (HOUR_OF_DAY, MINUTE_OF_HOUR, SECOND_OF_MINUTE, NANO_OF_SECOND)
            nano = self._value(NANO_OF_SECOND)
        elif self._has(MINUTE_OF_HOUR, SECOND_OF_MINUTE, MILLI_OF_SECOND):
            consumed = (HOUR_OF_DAY, MINUTE_OF_HOUR, SECOND_OF_MINUTE, MILLI_OF_SECOND)
            nano = self._value(MILLI_OF_SECOND) * _NANOS_PER_MILLI
        elif self._has(MINUTE_OF_HOUR, SECOND_OF_MINUTE):
            consumed = (HOUR_OF_DAY, MINUTE_OF_HOUR, SECOND_OF_MINUTE)
            nano = 0
        elif self._has(MINUTE_OF_HOUR):
            consumed = (HOUR_OF_DAY, MINUTE_OF_HOUR)
            nano = 0
        else:
            consumed = (HOUR_OF_DAY,)
            nano = 0
        minute = self._value(MINUTE_OF_HOUR) if MINUTE_OF_HOUR in consumed else 0
        second = self._value(SECOND_OF_MINUTE) if SECOND_OF_MINUTE in consumed else 0
        self.store_merged(TIME, Time.of(hour, minute, second, nano), *consumed)
        return True

    def _merge_quarter(self) -> bool:
        if not self._has(QUARTER_OF_YEAR, MONTH_OF_QUARTER):
            return False
        quarter = self._value(QUARTER_OF_YEAR)
        month = quarter.first_month.value + self._value(MONTH_OF_QUARTER) - 1
        self.store_merged(MONTH_OF_YEAR, MonthOfYear.of(month), QUARTER_OF_YEAR, MONTH_OF_QUARTER)
        return True

    def _merge_date(self) -> bool:
        if not self._has(YEAR):
            return False
        year = self._value(YEAR)
        strict = self._context.strict

        if self._has(MONTH_OF_YEAR, DAY_OF_MONTH):
            moy = self._value(MONTH_OF_YEAR)
            date = self._context.resolve_date(year, moy.value, self._value(DAY_OF_MONTH))
            self.store_merged(DATE, date, YEAR, MONTH_OF_YEAR, DAY_OF_MONTH)
            return True

        if self._has(DAY_OF_YEAR):
            doy = self._value(DAY_OF_YEAR)
            if strict:
                date = Date.of_year_day(year, doy)
            else:
                date = Date.of(year, 1, 1).plus_days(doy - 1)
            self.store_merged(DATE, date, YEAR, DAY_OF_YEAR)
            return True

        if self._has(WEEK_OF_YEAR, DAY_OF_WEEK):
            woy = self._value(WEEK_OF_YEAR)
            date = Date.of(year, 1, 1).plus_weeks(woy - 1).next_or_current(self._value(DAY_OF_WEEK))
            if strict and date.year != year:
                raise InvalidFieldCombinationError(
                    f"Week {woy} of {year} has no {self._value(DAY_OF_WEEK).name.title()}",
                    (YEAR.id, WEEK_OF_YEAR.id, DAY_OF_WEEK.id),
                )
            self.store_merged(DATE, date, YEAR, WEEK_OF_YEAR, DAY_OF_WEEK)
            return True

        if self._has(MONTH_OF_YEAR, WEEK_OF_MONTH, DAY_OF_WEEK):
            moy = self._value(MONTH_OF_YEAR)
            wom = self._value(WEEK_OF_MONTH)
            date = Date.of(year, moy, 1).plus_weeks(wom - 1).next_or_current(self._value(DAY_OF_WEEK))
            if strict and date.month != moy.value:
                raise InvalidFieldCombinationError(
                    f"Week {wom} of {moy.name.title()} {year} has no "
                    f"{self._value(DAY_OF_WEEK).name.title()}",
                    (YEAR.id, MONTH_OF_YEAR.id, WEEK_OF_MONTH.id, DAY_OF_WEEK.id),
                )
            self.store_merged(DATE, date, YEAR, MONTH_OF_YEAR, WEEK_OF_MONTH, DAY_OF_WEEK)
            return True
        return False

    def _merge_week_based_date(self) -> bool:
        if not self._has(WEEK_BASED_YEAR, WEEK_OF_WEEK_BASED_YEAR, DAY_OF_WEEK):
            return False
        wby = self._value(WEEK_BASED_YEAR)
        week = self._value(WEEK_OF_WEEK_BASED_YEAR)
        if self._context.strict and week > calendar.weeks_in_week_based_year(wby):
            raise InvalidFieldCombinationError(
                f"Week-based-year {wby} does not have week {week}",
                (WEEK_BASED_YEAR.id, WEEK_OF_WEEK_BASED_YEAR.id),
            )
        epoch_day = calendar.epoch_day_from_week_date(wby, week, self._value(DAY_OF_WEEK).value)
        self.store_merged(
            DATE, Date.of_epoch_day(epoch_day), WEEK_BASED_YEAR, WEEK_OF_WEEK_BASED_YEAR, DAY_OF_WEEK
        )
        return True

    def _merge_local(self) -> bool:
        if self._has(DATE, TIME):
            datetime = DateTime(self._value(DATE), self._value(TIME))
            self.store_merged(DATETIME, datetime, DATE, TIME)
            return True
        if self._has(DATE, OFFSET):
            self.store_merged(OFFSET_DATE, OffsetDate(self._value(DATE), self._value(OFFSET)), DATE, OFFSET)
            return True
        if self._has(TIME, OFFSET):
            self.store_merged(OFFSET_TIME, OffsetTime(self._value(TIME), self._value(OFFSET)), TIME, OFFSET)
            return True
        return False

    def _merge_offset(self) -> bool:
        if self._has(DATETIME, OFFSET):
            odt = OffsetDateTime(self._value(DATETIME), self._value(OFFSET))
            self.store_merged(OFFSET_DATETIME, odt, DATETIME, OFFSET)
            return True
        if self._has(OFFSET_DATE, OFFSET_TIME):
            od = self._value(OFFSET_DATE)
            ot = self._value(OFFSET_TIME)
            if od.offset != ot.offset:
                if self._context.strict:
                    raise ConflictError(OFFSET_DATE.id, OFFSET_TIME.id, od.offset, ot.offset)
                ot = ot.with_offset_same_instant(od.offset)
            odt = OffsetDateTime(DateTime(od.date, ot.time), od.offset)
            self.store_merged(OFFSET_DATETIME, odt, OFFSET_DATE, OFFSET_TIME)
            return True
        if self._has(OFFSET_DATE, TIME):
            od = self._value(OFFSET_DATE)
            odt = OffsetDateTime(DateTime(od.date, self._value(TIME)), od.offset)
            self.store_merged(OFFSET_DATETIME, odt, OFFSET_DATE, TIME)
            return True
        if self._has(DATE, OFFSET_TIME):
            ot = self._value(OFFSET_TIME)
            odt = OffsetDateTime(DateTime(self._value(DATE), ot.time), ot.offset)
            self.store_merged(OFFSET_DATETIME, odt, DATE, OFFSET_TIME)
            return True
        return False

    def _merge_zone(self) -> bool:
        if self._has(OFFSET_DATETIME, ZONE):
            odt = self._value(OFFSET_DATETIME)
            zone = self._value(ZONE)
            if self._context.strict:
                zdt = ZonedDateTime.of_offset(odt, zone)
            else:
                zdt = ZonedDateTime.of_instant(odt, zone)
            self.store_merged(ZONED_DATETIME, zdt, OFFSET_DATETIME, ZONE)
            return True
        if self._has(DATETIME, ZONE) and not self._has(OFFSET):
            zdt = ZonedDateTime.of(self._value(DATETIME), self._value(ZONE), self._context.zone_resolver)
            self.store_merged(ZONED_DATETIME, zdt, DATETIME, ZONE)
            return True
        return False

    def __repr__(self) -> str:
        text = repr(self._processing if self._processing else self._input)
        if not self._overflow.is_zero:
            text += f"+{self._overflow}"
        return f"CalendricalMerger({text})"


def _plus_period(value: Any, period: Period, resolver: DateResolverFunc | None) -> Any:
    if isinstance(value, (Date, DateTime, OffsetDateTime)):
        return value.plus(period, resolver)
    if isinstance(value, ZonedDateTime):
        return value.plus(period, date_resolver=resolver)
    if isinstance(value, (Time, OffsetDate, OffsetTime)):
        return value.plus(period)
    return value


def merge_fields(
    fields: Mapping[CalendricalRule | str, Any],
    rule: CalendricalRule | None = None,
    *,
    strict: bool = True,
    date_resolver: DateResolverFunc | None = None,
) -> Any:
    """Merge a bag of fields and return the result.

    Args:
        fields: Raw values keyed by rule or rule name.
        rule: The rule to return. When None, every merged field is
            returned as a dict keyed by rule.
        strict: Range-check every input and reject conflicts.
        date_resolver: Resolver for dates whose day does not exist in the
            month, such as ``DateResolvers.PART_LENIENT``.

    Returns:
        The value of ``rule``, or the dict of merged fields. Any overflow
        from lenient input has been added.

    Raises:
        UnsupportedRuleError: If the merged fields cannot supply ``rule``.

    Examples:
        >>> from calendrical.resolvers import PART_LENIENT
        >>> merge_fields({YEAR: 2009, MONTH_OF_YEAR: 2, DAY_OF_MONTH: 29}, DATE,
        ...              date_resolver=PART_LENIENT)
        Date(2009, 3, 1)
        >>> merge_fields({HOUR_OF_DAY: 9, MINUTE_OF_HOUR: 5}, TIME)
        Time(9, 5, 0, 0)
    """
    merger = CalendricalMerger(fields, CalendricalContext(strict, date_resolver)).merge()
    merger.apply_overflow()
    if rule is None:
        return dict(merger.fields)
    return rule.get_or_raise(merger)


__all__ = [
    "CalendricalContext",
    "CalendricalMerger",
    "DateResolverFunc",
    "merge_fields",
]

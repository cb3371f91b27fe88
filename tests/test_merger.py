"""Tests for merging bags of fields into calendrical values."""

from __future__ import annotations

import logging

import pytest

from calendrical.core.date import Date
from calendrical.core.datetime import DateTime
from calendrical.core.offsetdate import OffsetDate
from calendrical.core.offsetdatetime import OffsetDateTime
from calendrical.core.offsettime import OffsetTime
from calendrical.core.period import ZERO, Period
from calendrical.core.time import Time
from calendrical.errors import (
    CalendricalError,
    ConflictError,
    InvalidFieldCombinationError,
    RangeError,
    UnsupportedRuleError,
    ZoneRulesError,
)
from calendrical.fields import merger as merger_module
from calendrical.fields.merger import CalendricalContext, CalendricalMerger, merge_fields
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
)
from calendrical.resolvers import NEXT_VALID, PART_LENIENT, PREVIOUS_VALID
from calendrical.units.ampmofday import AmPmOfDay
from calendrical.units.dayofweek import DayOfWeek
from calendrical.units.monthofyear import MonthOfYear
from calendrical.units.quarterofyear import QuarterOfYear
from calendrical.zone import resolvers as zone_resolvers
from calendrical.zone.offset import Offset
from calendrical.zone.zone import Zone

PLUS_TWO = Offset.of_hours(2)


def lenient(fields, rule=None, **kwargs):
    return merge_fields(fields, rule, strict=False, **kwargs)


# =============================================================================
# Context
# =============================================================================


class TestCalendricalContext:
    """Tests for merge settings."""

    def test_defaults(self) -> None:
        context = CalendricalContext()
        assert context.strict
        assert context.date_resolver is None
        assert context.zone_resolver is zone_resolvers.STRICT

    def test_lenient_zone_resolver(self) -> None:
        context = CalendricalContext(strict=False)
        assert context.zone_resolver is zone_resolvers.POST_GAP_PRE_OVERLAP

    def test_explicit_resolvers(self) -> None:
        context = CalendricalContext(True, PREVIOUS_VALID, zone_resolvers.PRE_TRANSITION)
        assert context.date_resolver is PREVIOUS_VALID
        assert context.zone_resolver is zone_resolvers.PRE_TRANSITION

    def test_resolve_date(self) -> None:
        assert CalendricalContext().resolve_date(2008, 2, 29) == Date(2008, 2, 29)
        with pytest.raises(InvalidFieldCombinationError):
            CalendricalContext().resolve_date(2009, 2, 29)
        assert CalendricalContext(False).resolve_date(2009, 2, 29) == Date(2009, 3, 1)
        assert CalendricalContext(True, NEXT_VALID).resolve_date(2009, 2, 30) == Date(2009, 3, 1)

    def test_resolver_still_checks_day(self) -> None:
        with pytest.raises(RangeError):
            CalendricalContext(True, PREVIOUS_VALID).resolve_date(2009, 2, 32)

    def test_repr(self) -> None:
        assert repr(CalendricalContext()).startswith("CalendricalContext(strict=True,")


# =============================================================================
# Merger basics
# =============================================================================


class TestMergerBasics:
    """Tests for construction, accessors and the merge result."""

    def test_empty(self) -> None:
        merger = CalendricalMerger({}).merge()
        assert dict(merger.fields) == {}
        assert merger.overflow == ZERO

    def test_string_keys(self) -> None:
        merger = CalendricalMerger({"year": 2008, "MonthOfYear": 2})
        assert dict(merger.input_fields) == {YEAR: 2008, MONTH_OF_YEAR: 2}

    def test_unknown_string_key(self) -> None:
        with pytest.raises(UnsupportedRuleError):
            CalendricalMerger({"fortnight": 2})

    def test_none_value(self) -> None:
        with pytest.raises(CalendricalError, match="Value for rule Year must not be None"):
            CalendricalMerger({YEAR: None})

    def test_fields_read_only(self) -> None:
        merger = CalendricalMerger({YEAR: 2008}).merge()
        with pytest.raises(TypeError):
            merger.fields[YEAR] = 2009  # type: ignore[index]

    def test_merge_returns_self(self) -> None:
        merger = CalendricalMerger({HOUR_OF_DAY: 14, MINUTE_OF_HOUR: 30})
        assert merger.merge() is merger
        assert merger.get(TIME) == Time(14, 30)
        assert merger.get_value(HOUR_OF_DAY) is None
        assert merger.get(HOUR_OF_DAY) == 14

    def test_merge_is_repeatable(self) -> None:
        merger = CalendricalMerger({YEAR: 2008, MONTH_OF_YEAR: 2, DAY_OF_MONTH: 29})
        merger.merge()
        merger.merge()
        assert dict(merger.fields) == {DATE: Date(2008, 2, 29)}

    def test_unmergeable_fields_kept(self) -> None:
        fields = merge_fields({YEAR: 2008, HOUR_OF_DAY: 9})
        assert fields == {YEAR: 2008, TIME: Time(9, 0)}

    def test_rule_not_available(self) -> None:
        with pytest.raises(UnsupportedRuleError, match="Rule Date is not available"):
            merge_fields({HOUR_OF_DAY: 9}, DATE)

    def test_rule_derived_from_merged(self) -> None:
        fields = {YEAR: 2008, MONTH_OF_YEAR: 2, DAY_OF_MONTH: 29}
        assert merge_fields(fields, DAY_OF_WEEK) is DayOfWeek.FRIDAY
        assert merge_fields(fields, YEAR) == 2008

    def test_repr(self) -> None:
        merger = CalendricalMerger({YEAR: 2008})
        assert repr(merger).startswith("CalendricalMerger(")

    def test_debug_logging(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="calendrical.fields.merger"):
            merge_fields({YEAR: 2008, MONTH_OF_YEAR: 2, DAY_OF_MONTH: 29})
        assert "Merged Date=2008-02-29" in caplog.text

    def test_iteration_limit(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(merger_module, "MERGE_ITERATION_LIMIT", 0)
        with pytest.raises(CalendricalError, match="did not converge"):
            merge_fields({YEAR: 2008})


# =============================================================================
# Time merging
# =============================================================================


class TestTimeMerge:
    """Tests for combining time fields."""

    @pytest.mark.parametrize(
        "fields,expected",
        [
            ({HOUR_OF_DAY: 9}, Time(9, 0)),
            ({HOUR_OF_DAY: 9, MINUTE_OF_HOUR: 5}, Time(9, 5)),
            ({HOUR_OF_DAY: 9, MINUTE_OF_HOUR: 5, SECOND_OF_MINUTE: 7}, Time(9, 5, 7)),
            (
                {HOUR_OF_DAY: 9, MINUTE_OF_HOUR: 5, SECOND_OF_MINUTE: 7, NANO_OF_SECOND: 8},
                Time(9, 5, 7, 8),
            ),
            (
                {HOUR_OF_DAY: 9, MINUTE_OF_HOUR: 5, SECOND_OF_MINUTE: 7, MILLI_OF_SECOND: 8},
                Time(9, 5, 7, 8_000_000),
            ),
            ({SECOND_OF_DAY: 3661}, Time(1, 1, 1)),
            ({SECOND_OF_DAY: 3661, NANO_OF_SECOND: 5}, Time(1, 1, 1, 5)),
            ({SECOND_OF_DAY: 3661, MILLI_OF_SECOND: 5}, Time(1, 1, 1, 5_000_000)),
            ({MILLI_OF_DAY: 3_600_001}, Time(1, 0, 0, 1_000_000)),
            ({NANO_OF_DAY: 3_600_000_000_001}, Time(1, 0, 0, 1)),
        ],
    )
    def test_time(self, fields, expected: Time) -> None:
        assert merge_fields(fields, TIME) == expected

    def test_minute_without_hour_kept(self) -> None:
        assert merge_fields({MINUTE_OF_HOUR: 5}) == {MINUTE_OF_HOUR: 5}

    @pytest.mark.parametrize(
        "ampm,hour,expected",
        [
            (AmPmOfDay.AM, 0, 0),
            (AmPmOfDay.AM, 11, 11),
            (AmPmOfDay.PM, 0, 12),
            (AmPmOfDay.PM, 11, 23),
        ],
    )
    def test_am_pm(self, ampm: AmPmOfDay, hour: int, expected: int) -> None:
        fields = {AMPM_OF_DAY: ampm, HOUR_OF_AMPM: hour}
        assert merge_fields(fields, HOUR_OF_DAY) == expected

    @pytest.mark.parametrize(
        "ampm,clock_hour,expected",
        [
            (AmPmOfDay.AM, 12, Time(0, 0)),
            (AmPmOfDay.AM, 1, Time(1, 0)),
            (AmPmOfDay.PM, 12, Time(12, 0)),
            (AmPmOfDay.PM, 11, Time(23, 0)),
        ],
    )
    def test_clock_hour_of_ampm(self, ampm: AmPmOfDay, clock_hour: int, expected: Time) -> None:
        fields = {AMPM_OF_DAY: ampm, CLOCK_HOUR_OF_AMPM: clock_hour}
        assert merge_fields(fields, TIME) == expected

    def test_clock_hour_of_day(self) -> None:
        assert merge_fields({CLOCK_HOUR_OF_DAY: 13}, TIME) == Time(13, 0)

    def test_clock_hour_24_is_start_of_same_day(self) -> None:
        """Test that clock-hour 24 is the first hour of the day it is given with."""
        fields = {YEAR: 2008, MONTH_OF_YEAR: 12, DAY_OF_MONTH: 31, CLOCK_HOUR_OF_DAY: 24}
        assert merge_fields(fields, DATETIME) == DateTime.of(2008, 12, 31, 0, 0)
        assert lenient(fields, DATETIME) == DateTime.of(2008, 12, 31, 0, 0)
        merger = CalendricalMerger(fields).merge()
        assert merger.overflow == ZERO

    @pytest.mark.parametrize(
        "value",
        [
            DateTime.of(2008, 6, 30, 0, 30),
            DateTime.of(2008, 12, 31, 0, 0),
            DateTime.of(2008, 12, 31, 12, 0),
            DateTime.of(2008, 12, 31, 23, 59, 59, 999_999_999),
        ],
    )
    def test_derived_hour_fields_merge_back(self, value: DateTime) -> None:
        """Test that every hour field read from a date-time merges back into it."""
        rules = (
            YEAR,
            MONTH_OF_YEAR,
            DAY_OF_MONTH,
            HOUR_OF_DAY,
            CLOCK_HOUR_OF_DAY,
            AMPM_OF_DAY,
            HOUR_OF_AMPM,
            CLOCK_HOUR_OF_AMPM,
            MINUTE_OF_HOUR,
            SECOND_OF_MINUTE,
            NANO_OF_SECOND,
        )
        fields = {rule: value.get(rule) for rule in rules}
        assert merge_fields(fields, DATETIME) == value

    def test_clock_hour_fields_of_midnight_hour_merge_back(self) -> None:
        value = DateTime.of(2008, 6, 30, 0, 30)
        rules = (YEAR, MONTH_OF_YEAR, DAY_OF_MONTH, CLOCK_HOUR_OF_DAY, MINUTE_OF_HOUR)
        fields = {rule: value.get(rule) for rule in rules}
        assert fields[CLOCK_HOUR_OF_DAY] == 24
        assert merge_fields(fields, DATETIME) == value

    def test_matching_am_pm_dropped(self) -> None:
        fields = merge_fields({HOUR_OF_DAY: 14, AMPM_OF_DAY: AmPmOfDay.PM})
        assert fields == {TIME: Time(14, 0)}

    def test_conflicting_am_pm(self) -> None:
        with pytest.raises(ConflictError):
            merge_fields({HOUR_OF_DAY: 14, AMPM_OF_DAY: AmPmOfDay.AM})

    def test_conflicting_am_pm_lenient(self) -> None:
        assert lenient({HOUR_OF_DAY: 14, AMPM_OF_DAY: AmPmOfDay.AM}) == {TIME: Time(14, 0)}


# =============================================================================
# Date merging
# =============================================================================


class TestDateMerge:
    """Tests for combining date fields."""

    def test_year_month_day(self) -> None:
        fields = {YEAR: 2008, MONTH_OF_YEAR: MonthOfYear.FEBRUARY, DAY_OF_MONTH: 29}
        assert merge_fields(fields, DATE) == Date(2008, 2, 29)

    def test_invalid_day_strict(self) -> None:
        with pytest.raises(InvalidFieldCombinationError):
            merge_fields({YEAR: 2009, MONTH_OF_YEAR: 2, DAY_OF_MONTH: 29}, DATE)

    def test_invalid_day_lenient(self) -> None:
        assert lenient({YEAR: 2009, MONTH_OF_YEAR: 2, DAY_OF_MONTH: 29}, DATE) == Date(2009, 3, 1)
        assert lenient({YEAR: 2009, MONTH_OF_YEAR: 1, DAY_OF_MONTH: 35}, DATE) == Date(2009, 2, 4)

    @pytest.mark.parametrize(
        "resolver,expected",
        [
            (PREVIOUS_VALID, Date(2009, 2, 28)),
            (NEXT_VALID, Date(2009, 3, 1)),
            (PART_LENIENT, Date(2009, 3, 2)),
        ],
    )
    def test_date_resolver(self, resolver, expected: Date) -> None:
        fields = {YEAR: 2009, MONTH_OF_YEAR: 2, DAY_OF_MONTH: 30}
        assert merge_fields(fields, DATE, date_resolver=resolver) == expected

    def test_day_of_year(self) -> None:
        assert merge_fields({"year": 2024, "day_of_year": 60}, DATE) == Date(2024, 2, 29)

    def test_day_of_year_366_strict(self) -> None:
        with pytest.raises(InvalidFieldCombinationError):
            merge_fields({YEAR: 2009, DAY_OF_YEAR: 366}, DATE)

    def test_day_of_year_lenient(self) -> None:
        assert lenient({YEAR: 2009, DAY_OF_YEAR: 366}, DATE) == Date(2010, 1, 1)
        assert lenient({YEAR: 2009, DAY_OF_YEAR: 0}, DATE) == Date(2008, 12, 31)

    def test_week_of_year(self) -> None:
        fields = {YEAR: 2024, WEEK_OF_YEAR: 3, DAY_OF_WEEK: DayOfWeek.MONDAY}
        assert merge_fields(fields, DATE) == Date(2024, 1, 15)

    def test_week_of_year_outside_year(self) -> None:
        # 2009-12-31 is a Thursday, so week 53 has no Friday in 2009
        fields = {YEAR: 2009, WEEK_OF_YEAR: 53, DAY_OF_WEEK: DayOfWeek.FRIDAY}
        with pytest.raises(InvalidFieldCombinationError):
            merge_fields(fields, DATE)
        assert lenient(fields, DATE) == Date(2010, 1, 1)

    def test_week_of_month(self) -> None:
        fields = {YEAR: 2024, MONTH_OF_YEAR: 2, WEEK_OF_MONTH: 2, DAY_OF_WEEK: DayOfWeek.FRIDAY}
        assert merge_fields(fields, DATE) == Date(2024, 2, 9)

    def test_week_of_month_outside_month(self) -> None:
        fields = {YEAR: 2023, MONTH_OF_YEAR: 2, WEEK_OF_MONTH: 5, DAY_OF_WEEK: DayOfWeek.WEDNESDAY}
        with pytest.raises(InvalidFieldCombinationError):
            merge_fields(fields, DATE)

    def test_week_based_date(self) -> None:
        fields = {WEEK_BASED_YEAR: 2009, WEEK_OF_WEEK_BASED_YEAR: 53, DAY_OF_WEEK: 4}
        assert merge_fields(fields, DATE) == Date(2009, 12, 31)

    def test_week_based_date_week_53(self) -> None:
        fields = {WEEK_BASED_YEAR: 2008, WEEK_OF_WEEK_BASED_YEAR: 53, DAY_OF_WEEK: 1}
        with pytest.raises(InvalidFieldCombinationError):
            merge_fields(fields, DATE)
        assert lenient(fields, DATE) == Date(2008, 12, 29)

    def test_quarter(self) -> None:
        fields = {YEAR: 2024, QUARTER_OF_YEAR: QuarterOfYear.Q2, MONTH_OF_QUARTER: 2, DAY_OF_MONTH: 10}
        assert merge_fields(fields, DATE) == Date(2024, 5, 10)

    def test_epoch_day(self) -> None:
        assert merge_fields({EPOCH_DAY: 13938}, DATE) == Date(2008, 2, 29)

    def test_matching_day_of_week_dropped(self) -> None:
        fields = {YEAR: 2008, MONTH_OF_YEAR: 2, DAY_OF_MONTH: 29, DAY_OF_WEEK: DayOfWeek.FRIDAY}
        assert merge_fields(fields) == {DATE: Date(2008, 2, 29)}

    def test_conflicting_day_of_week(self) -> None:
        fields = {YEAR: 2008, MONTH_OF_YEAR: 2, DAY_OF_MONTH: 29, DAY_OF_WEEK: DayOfWeek.MONDAY}
        with pytest.raises(ConflictError, match="Merge resulted in two different values"):
            merge_fields(fields)
        assert lenient(fields) == {DATE: Date(2008, 2, 29)}

    def test_conflicting_stored_value(self) -> None:
        with pytest.raises(ConflictError):
            merge_fields({EPOCH_DAY: 0, DATE: Date(2008, 2, 29)})

    def test_value_and_field(self) -> None:
        assert merge_fields({DATE: Date(2008, 2, 29), YEAR: 2008}) == {DATE: Date(2008, 2, 29)}
        with pytest.raises(ConflictError):
            merge_fields({DATE: Date(2008, 2, 29), YEAR: 2009})


# =============================================================================
# Lenient overflow
# =============================================================================


class TestOverflow:
    """Tests for out-of-range values carried as an overflow period."""

    def test_month_13(self) -> None:
        fields = {YEAR: 2008, MONTH_OF_YEAR: 13, DAY_OF_MONTH: 15}
        assert lenient(fields, DATE) == Date(2009, 1, 15)
        with pytest.raises(RangeError):
            merge_fields(fields, DATE)

    def test_hour_24(self) -> None:
        fields = {YEAR: 2008, MONTH_OF_YEAR: 12, DAY_OF_MONTH: 31, HOUR_OF_DAY: 24, MINUTE_OF_HOUR: 0}
        assert lenient(fields, DATETIME) == DateTime.of(2009, 1, 1, 0, 0)

    def test_overflow_kept_until_applied(self) -> None:
        merger = CalendricalMerger(
            {YEAR: 2008, MONTH_OF_YEAR: 13, DAY_OF_MONTH: 15}, CalendricalContext(strict=False)
        ).merge()
        assert merger.overflow == Period(years=1)
        assert merger.get(DATE) == Date(2008, 1, 15)
        merger.apply_overflow()
        assert merger.overflow == ZERO
        assert merger.get(DATE) == Date(2009, 1, 15)

    def test_overflow_on_time_only(self) -> None:
        merger = CalendricalMerger(
            {HOUR_OF_DAY: 25, MINUTE_OF_HOUR: 30}, CalendricalContext(strict=False)
        ).merge()
        assert merger.get(TIME) == Time(1, 30)
        assert merger.overflow == Period(days=1)

    def test_two_overflows_in_same_component(self) -> None:
        with pytest.raises(CalendricalError, match="conflicting out of range values"):
            lenient({HOUR_OF_DAY: 25, DAY_OF_WEEK: 9})

    def test_add_to_overflow(self) -> None:
        merger = CalendricalMerger({})
        merger.add_to_overflow(Period(days=1))
        merger.add_to_overflow(Period(years=1))
        assert merger.overflow == Period(years=1, days=1)


# =============================================================================
# Offsets and zones
# =============================================================================


class TestOffsetMerge:
    """Tests for combining local values with offsets."""

    def test_date_and_offset(self) -> None:
        fields = {DATE: Date(2008, 6, 30), OFFSET: PLUS_TWO}
        assert merge_fields(fields, OFFSET_DATE) == OffsetDate(Date(2008, 6, 30), PLUS_TWO)

    def test_time_and_offset(self) -> None:
        fields = {HOUR_OF_DAY: 11, MINUTE_OF_HOUR: 30, OFFSET: PLUS_TWO}
        assert merge_fields(fields, OFFSET_TIME) == OffsetTime(Time(11, 30), PLUS_TWO)

    def test_fields_and_offset(self) -> None:
        fields = {
            YEAR: 2008, MONTH_OF_YEAR: 6, DAY_OF_MONTH: 30,
            HOUR_OF_DAY: 11, MINUTE_OF_HOUR: 30, OFFSET: PLUS_TWO,
        }
        expected = OffsetDateTime(DateTime.of(2008, 6, 30, 11, 30), PLUS_TWO)
        assert merge_fields(fields) == {OFFSET_DATETIME: expected}

    def test_offset_date_and_time(self) -> None:
        fields = {OFFSET_DATE: OffsetDate(Date(2008, 6, 30), PLUS_TWO), TIME: Time(11, 30)}
        expected = OffsetDateTime(DateTime.of(2008, 6, 30, 11, 30), PLUS_TWO)
        assert merge_fields(fields, OFFSET_DATETIME) == expected

    def test_date_and_offset_time(self) -> None:
        fields = {DATE: Date(2008, 6, 30), OFFSET_TIME: OffsetTime(Time(11, 30), PLUS_TWO)}
        expected = OffsetDateTime(DateTime.of(2008, 6, 30, 11, 30), PLUS_TWO)
        assert merge_fields(fields, OFFSET_DATETIME) == expected

    def test_offset_date_and_offset_time_conflict(self) -> None:
        fields = {
            OFFSET_DATE: OffsetDate(Date(2008, 6, 30), PLUS_TWO),
            OFFSET_TIME: OffsetTime(Time(11, 30), Offset.UTC),
        }
        with pytest.raises(ConflictError):
            merge_fields(fields)
        expected = OffsetDateTime(DateTime.of(2008, 6, 30, 13, 30), PLUS_TWO)
        assert lenient(fields, OFFSET_DATETIME) == expected


class TestZoneMerge:
    """Tests for placing merged values in a zone."""

    def test_local_in_zone(self, paris: Zone) -> None:
        fields = {DATETIME: DateTime.of(2008, 6, 30, 11, 30), ZONE: paris}
        zdt = merge_fields(fields, ZONED_DATETIME)
        assert zdt.offset == PLUS_TWO
        assert zdt.zone == paris

    def test_gap_strict(self, paris: Zone) -> None:
        fields = {DATETIME: DateTime.of(2008, 3, 30, 2, 30), ZONE: paris}
        with pytest.raises(ZoneRulesError):
            merge_fields(fields)

    def test_gap_lenient(self, paris: Zone) -> None:
        fields = {DATETIME: DateTime.of(2008, 3, 30, 2, 30), ZONE: paris}
        zdt = lenient(fields, ZONED_DATETIME)
        assert zdt.datetime == DateTime.of(2008, 3, 30, 3, 0)
        assert zdt.offset == PLUS_TWO

    def test_offset_datetime_in_zone(self, paris: Zone) -> None:
        odt = OffsetDateTime(DateTime.of(2008, 6, 30, 11, 30), PLUS_TWO)
        zdt = merge_fields({OFFSET_DATETIME: odt, ZONE: paris}, ZONED_DATETIME)
        assert zdt.offset_datetime == odt

    def test_invalid_offset_in_zone(self, paris: Zone) -> None:
        odt = OffsetDateTime(DateTime.of(2008, 6, 30, 11, 30), Offset.of_hours(1))
        fields = {OFFSET_DATETIME: odt, ZONE: paris}
        with pytest.raises(ZoneRulesError):
            merge_fields(fields)
        zdt = lenient(fields, ZONED_DATETIME)
        assert zdt.offset_datetime == OffsetDateTime(DateTime.of(2008, 6, 30, 12, 30), PLUS_TWO)

    def test_fields_in_zone(self, paris: Zone) -> None:
        fields = {
            YEAR: 2008, MONTH_OF_YEAR: 6, DAY_OF_MONTH: 30,
            HOUR_OF_DAY: 11, MINUTE_OF_HOUR: 30, ZONE: paris,
        }
        assert merge_fields(fields, OFFSET) == PLUS_TWO

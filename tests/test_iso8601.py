"""Tests for ISO 8601 parsing and formatting."""

from __future__ import annotations

import pytest

from calendrical.core.date import Date
from calendrical.core.datetime import DateTime
from calendrical.core.offsetdate import OffsetDate
from calendrical.core.offsetdatetime import OffsetDateTime
from calendrical.core.offsettime import OffsetTime
from calendrical.core.period import Period
from calendrical.core.time import Time
from calendrical.core.zoneddatetime import ZonedDateTime
from calendrical.errors import CalendricalError, InvalidFieldCombinationError, ParseError
from calendrical.fields.registry import (
    DATE,
    DAY_OF_MONTH,
    DAY_OF_WEEK,
    DAY_OF_YEAR,
    HOUR_OF_DAY,
    MINUTE_OF_HOUR,
    MONTH_OF_YEAR,
    NANO_OF_SECOND,
    OFFSET,
    SECOND_OF_MINUTE,
    WEEK_BASED_YEAR,
    WEEK_OF_WEEK_BASED_YEAR,
    YEAR,
    ZONE,
)
from calendrical.format import format_value, parse, parse_fields
from calendrical.units.dayofweek import DayOfWeek
from calendrical.zone.offset import Offset
from calendrical.zone.zone import Zone


# =============================================================================
# parse_fields
# =============================================================================


class TestParseFields:
    """Tests for splitting text into raw fields."""

    def test_calendar_date(self) -> None:
        assert parse_fields("2024-01-15") == {YEAR: 2024, MONTH_OF_YEAR: 1, DAY_OF_MONTH: 15}

    def test_ordinal_date(self) -> None:
        assert parse_fields("2024-060") == {YEAR: 2024, DAY_OF_YEAR: 60}

    def test_week_date(self) -> None:
        assert parse_fields("2024-W03-1") == {
            WEEK_BASED_YEAR: 2024,
            WEEK_OF_WEEK_BASED_YEAR: 3,
            DAY_OF_WEEK: 1,
        }

    def test_values_left_raw(self) -> None:
        assert parse_fields("2024-13-45") == {YEAR: 2024, MONTH_OF_YEAR: 13, DAY_OF_MONTH: 45}

    @pytest.mark.parametrize(
        "text,year",
        [
            ("+12345-01-01", 12345),
            ("-0001-01-01", -1),
            ("+0000-01-01", 0),
        ],
    )
    def test_signed_years(self, text: str, year: int) -> None:
        assert parse_fields(text)[YEAR] == year

    def test_long_year_needs_sign(self) -> None:
        with pytest.raises(ParseError, match="must have a sign") as exc_info:
            parse_fields("12345-01-01")
        assert exc_info.value.index == 0

    def test_time(self) -> None:
        assert parse_fields("14:30") == {HOUR_OF_DAY: 14, MINUTE_OF_HOUR: 30}
        assert parse_fields("14:30:15") == {HOUR_OF_DAY: 14, MINUTE_OF_HOUR: 30, SECOND_OF_MINUTE: 15}

    @pytest.mark.parametrize(
        "text,nano",
        [
            ("14:30:15.5", 500_000_000),
            ("14:30:15,25", 250_000_000),
            ("14:30:15.000000001", 1),
            ("14:30:15.123456", 123_456_000),
        ],
    )
    def test_fraction(self, text: str, nano: int) -> None:
        assert parse_fields(text)[NANO_OF_SECOND] == nano

    def test_date_time(self) -> None:
        fields = parse_fields("2024-01-15T14:30")
        assert fields[YEAR] == 2024
        assert fields[HOUR_OF_DAY] == 14
        assert parse_fields("2024-01-15t14:30") == fields

    def test_offset(self) -> None:
        assert parse_fields("2024-01-15T14:30Z")[OFFSET] == Offset.UTC
        assert parse_fields("2024-01-15T14:30+05:30")[OFFSET] == Offset.of_hours_minutes(5, 30)
        assert parse_fields("14:30-08:00")[OFFSET] == Offset.of_hours(-8)

    def test_zone(self, paris: Zone) -> None:
        fields = parse_fields("2008-06-30T11:30+02:00[TEST:Test/Paris#2008a]")
        assert fields[ZONE] == paris
        assert parse_fields("2008-06-30T11:30[UTC]")[ZONE] is Zone.UTC


class TestParseFieldsErrors:
    """Tests for rejected text."""

    def test_not_a_string(self) -> None:
        with pytest.raises(ParseError, match="Expected string, got int"):
            parse_fields(20240115)  # type: ignore[arg-type]

    def test_empty(self) -> None:
        with pytest.raises(ParseError, match="Empty string"):
            parse_fields("")

    @pytest.mark.parametrize(
        "text,index",
        [
            ("2024-01-15X14:30", 10),
            ("2024-01-15T", 11),
            ("2024-01-15T1430", 11),
            ("2024-01-15T14:30junk", 16),
            ("2024-01-15T14:30+5", 16),
            ("2024-01-15T14:30Z[", 17),
            ("hello", 0),
            ("2024/01/15", 0),
        ],
    )
    def test_error_index(self, text: str, index: int) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_fields(text)
        assert exc_info.value.index == index
        assert exc_info.value.text == text

    def test_offset_out_of_range(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_fields("2024-01-15T14:30+19:00")
        assert exc_info.value.index == 16

    def test_invalid_zone_id(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_fields("2024-01-15T14:30Z[not a zone]")
        assert exc_info.value.index == 18


# =============================================================================
# parse
# =============================================================================


class TestParse:
    """Tests for parsing into values."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("2024-02-29", Date(2024, 2, 29)),
            ("2024-060", Date(2024, 2, 29)),
            ("2024-W03-1", Date(2024, 1, 15)),
            ("14:30", Time(14, 30)),
            ("2024-02-29T10:15:30.5", DateTime.of(2024, 2, 29, 10, 15, 30, 500_000_000)),
            ("14:30+01:00", OffsetTime(Time(14, 30), Offset.of_hours(1))),
            (
                "2024-01-15T14:30Z",
                OffsetDateTime(DateTime.of(2024, 1, 15, 14, 30), Offset.UTC),
            ),
        ],
    )
    def test_single_value(self, text: str, expected) -> None:
        assert parse(text) == expected

    def test_zoned(self, paris: Zone) -> None:
        zdt = parse("2008-06-30T11:30[TEST:Test/Paris#2008a]")
        assert isinstance(zdt, ZonedDateTime)
        assert zdt.offset == Offset.of_hours(2)
        assert zdt.zone == paris

    def test_with_rule(self) -> None:
        assert parse("2024-02-29", DAY_OF_WEEK) is DayOfWeek.THURSDAY
        assert parse("2024-02-29T10:15", DATE) == Date(2024, 2, 29)

    def test_strict_rejects_invalid_date(self) -> None:
        with pytest.raises(InvalidFieldCombinationError):
            parse("2009-02-29")

    def test_lenient_rolls_over(self) -> None:
        assert parse("2009-02-29", strict=False) == Date(2009, 3, 1)
        assert parse("2008-12-31T24:00", strict=False) == DateTime.of(2009, 1, 1)

    def test_week_53_strict(self) -> None:
        with pytest.raises(InvalidFieldCombinationError):
            parse("2008-W53-1")

    def test_parse_error_propagates(self) -> None:
        with pytest.raises(ParseError):
            parse("2024-01-15 14:30")


# =============================================================================
# format_value
# =============================================================================


class TestFormatValue:
    """Tests for printing values."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (Date(2024, 1, 15), "2024-01-15"),
            (Time(14, 30), "14:30"),
            (Time(14, 30, 45, 120_000_000), "14:30:45.120"),
            (DateTime.of(2024, 1, 15, 14, 30), "2024-01-15T14:30"),
            (OffsetTime(Time(14, 30), Offset.of_hours(1)), "14:30+01:00"),
            (
                OffsetDateTime(DateTime.of(2024, 1, 15, 14, 30), Offset.UTC),
                "2024-01-15T14:30Z",
            ),
            (OffsetDate(Date(2024, 1, 15), Offset.of_hours(-5)), "2024-01-15-05:00"),
            (Offset.of_hours_minutes(5, 30), "+05:30"),
            (Zone.UTC, "UTC"),
            (Period(years=1, days=2), "P1Y2D"),
        ],
    )
    def test_values(self, value, expected: str) -> None:
        assert format_value(value) == expected

    def test_precision(self) -> None:
        assert format_value(Time(14, 30), precision="seconds") == "14:30:00"
        assert format_value(Time(14, 30), precision="nanos") == "14:30:00.000000000"
        odt = OffsetDateTime(DateTime.of(2024, 1, 15, 14, 30), Offset.UTC)
        assert format_value(odt, precision="seconds") == "2024-01-15T14:30:00Z"

    def test_zoned(self, paris: Zone) -> None:
        zdt = ZonedDateTime.of(DateTime.of(2008, 6, 30, 11, 30), paris)
        assert format_value(zdt) == "2008-06-30T11:30+02:00[TEST:Test/Paris#2008a]"

    def test_not_calendrical(self) -> None:
        with pytest.raises(TypeError, match="Expected a calendrical value, got str"):
            format_value("2024-01-15")

    @pytest.mark.parametrize(
        "text",
        ["2024-01-15", "2024-01-15T14:30:45.120", "2024-01-15T14:30+05:30", "23:59:59.999999999"],
    )
    def test_parse_then_format(self, text: str) -> None:
        assert format_value(parse(text)) == text


def test_merge_failure_reports_fields() -> None:
    with pytest.raises(CalendricalError, match="did not merge into a single value: Time, Zone"):
        parse("14:30[UTC]")

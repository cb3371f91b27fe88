"""Tests for the Offset class."""

from __future__ import annotations

import pytest

from calendrical.core.period import Period
from calendrical.errors import CalendricalError, ParseError, RangeError
from calendrical.zone.offset import Offset


class TestOffsetConstruction:
    """Tests for Offset factories."""

    def test_of_hours(self) -> None:
        assert Offset.of_hours(2).total_seconds == 7200
        assert Offset.of_hours(-5).total_seconds == -18000

    def test_of_hours_minutes_seconds(self) -> None:
        offset = Offset.of_hours_minutes_seconds(-1, -30, -15)
        assert offset.total_seconds == -5415
        assert (offset.hours, offset.minutes, offset.seconds) == (-1, -30, -15)

    def test_negative_minutes_only(self) -> None:
        offset = Offset.of_hours_minutes(0, -30)
        assert offset.id == "-00:30"
        assert (offset.hours, offset.minutes) == (0, -30)

    def test_mixed_signs_rejected(self) -> None:
        """Test that all non-zero components must share a sign."""
        with pytest.raises(RangeError):
            Offset.of_hours_minutes(1, -30)
        with pytest.raises(RangeError):
            Offset.of_hours_minutes(-1, 30)
        with pytest.raises(RangeError):
            Offset.of_hours_minutes_seconds(0, 1, -1)

    def test_limits(self) -> None:
        """Test the +/-18:00 bounds."""
        assert Offset.of_hours(18) == Offset.MAX
        assert Offset.of_hours(-18) == Offset.MIN
        with pytest.raises(RangeError):
            Offset.of_hours(19)
        with pytest.raises(RangeError):
            Offset.of_hours_minutes(18, 1)
        with pytest.raises(RangeError):
            Offset.of_total_seconds(64_801)

    def test_component_ranges(self) -> None:
        with pytest.raises(RangeError, match="OffsetMinutes"):
            Offset.of_hours_minutes(1, 60)
        with pytest.raises(RangeError, match="OffsetSeconds"):
            Offset.of_hours_minutes_seconds(1, 0, 60)

    def test_cache_shares_quarter_hours(self) -> None:
        """Test that multiples of 15 minutes are shared instances."""
        assert Offset.of_hours(1) is Offset.of_hours_minutes(1, 0)
        assert Offset.of_total_seconds(0) is Offset.UTC
        assert Offset.of_hours_minutes(5, 45) is Offset.of_total_seconds(20_700)

    def test_uncached_still_equal(self) -> None:
        a = Offset.of_total_seconds(3601)
        b = Offset.of_total_seconds(3601)
        assert a == b
        assert hash(a) == hash(b)

    def test_non_integer_seconds(self) -> None:
        with pytest.raises(CalendricalError):
            Offset(1.5)  # type: ignore[arg-type]


class TestOffsetParse:
    """Tests for Offset.parse."""

    @pytest.mark.parametrize(
        "text,seconds",
        [
            ("Z", 0),
            ("+02", 7200),
            ("-0830", -30600),
            ("+02:30", 9000),
            ("+023045", 9045),
            ("-02:30:45", -9045),
            ("+00:00", 0),
        ],
    )
    def test_valid(self, text: str, seconds: int) -> None:
        assert Offset.parse(text).total_seconds == seconds

    @pytest.mark.parametrize(
        "text", ["", "z", "+2", "02:00", "+02:0", "+0230:45", "+ab:cd", "+02-30", "UTC"]
    )
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ParseError):
            Offset.parse(text)

    def test_out_of_range(self) -> None:
        with pytest.raises(RangeError):
            Offset.parse("+19:00")

    def test_not_a_string(self) -> None:
        with pytest.raises(ParseError, match="Expected string"):
            Offset.parse(2)  # type: ignore[arg-type]


class TestOffsetIds:
    """Tests for the normalized id."""

    @pytest.mark.parametrize(
        "offset,text",
        [
            (Offset.UTC, "Z"),
            (Offset.of_hours(2), "+02:00"),
            (Offset.of_hours_minutes(-5, -30), "-05:30"),
            (Offset.of_hours_minutes_seconds(1, 2, 3), "+01:02:03"),
        ],
    )
    def test_id(self, offset: Offset, text: str) -> None:
        assert offset.id == text
        assert str(offset) == text

    def test_repr(self) -> None:
        assert repr(Offset.of_hours(2)) == "Offset('+02:00')"
        assert repr(Offset.UTC) == "Offset('Z')"


class TestOffsetArithmetic:
    """Tests for plus and to_period."""

    def test_plus(self) -> None:
        assert Offset.of_hours(1).plus(Period(minutes=30)) == Offset.of_hours_minutes(1, 30)
        assert Offset.of_hours(1).plus(Period(hours=-2)) == Offset.of_hours(-1)

    def test_plus_date_part_rejected(self) -> None:
        with pytest.raises(CalendricalError):
            Offset.of_hours(1).plus(Period(days=1))
        with pytest.raises(CalendricalError):
            Offset.of_hours(1).plus(Period(nanos=1))

    def test_plus_out_of_range(self) -> None:
        with pytest.raises(RangeError):
            Offset.MAX.plus(Period(seconds=1))

    def test_to_period(self) -> None:
        offset = Offset.of_hours_minutes_seconds(-1, -2, -3)
        assert offset.to_period() == Period(hours=-1, minutes=-2, seconds=-3)


class TestOffsetOrdering:
    """Tests for time-line ordering."""

    def test_larger_offset_sorts_first(self) -> None:
        assert Offset.of_hours(2) < Offset.of_hours(1)
        assert Offset.UTC > Offset.of_hours(1)
        assert Offset.MAX <= Offset.MIN
        assert sorted([Offset.UTC, Offset.MAX, Offset.MIN]) == [Offset.MAX, Offset.UTC, Offset.MIN]

    def test_other_types(self) -> None:
        assert Offset.UTC != 0
        with pytest.raises(TypeError):
            Offset.UTC < 0  # noqa: B015

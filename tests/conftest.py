"""Pytest configuration and fixtures for calendrical tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so calendrical can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from calendrical.core.datetime import DateTime  # noqa: E402
from calendrical.zone.groups import StaticZoneRulesDataProvider, ZoneRulesGroup  # noqa: E402
from calendrical.zone.offset import Offset  # noqa: E402
from calendrical.zone.rules import FixedZoneRules, Transition, TransitionZoneRules  # noqa: E402
from calendrical.zone.zone import Zone  # noqa: E402

TEST_GROUP = "TEST"

PLUS_ONE = Offset.of_hours(1)
PLUS_TWO = Offset.of_hours(2)

# 2008-03-30: 02:00 jumps to 03:00 (gap). 2008-10-26: 03:00 falls back to 02:00 (overlap).
SPRING_GAP = Transition(DateTime.of(2008, 3, 30, 2), PLUS_ONE, PLUS_TWO)
AUTUMN_OVERLAP = Transition(DateTime.of(2008, 10, 26, 3), PLUS_TWO, PLUS_ONE)

SUMMER_TIME_RULES = TransitionZoneRules(PLUS_ONE, [SPRING_GAP, AUTUMN_OVERLAP])
STANDARD_TIME_RULES = FixedZoneRules(PLUS_ONE)
INDIA_RULES = FixedZoneRules(Offset.of_hours_minutes(5, 30))


def _register_test_group() -> ZoneRulesGroup:
    if ZoneRulesGroup.is_valid_group_id(TEST_GROUP):
        return ZoneRulesGroup.group(TEST_GROUP)
    provider = StaticZoneRulesDataProvider(
        TEST_GROUP,
        {
            "2008a": {"Test/Paris": SUMMER_TIME_RULES, "Test/Kolkata": INDIA_RULES},
            "2009a": {"Test/Paris": STANDARD_TIME_RULES},
        },
    )
    return ZoneRulesGroup.register_provider(provider)


@pytest.fixture(scope="session", autouse=True)
def test_group() -> ZoneRulesGroup:
    """Register the TEST zone rules group once per session.

    Versions:
        2008a: Test/Paris with a spring gap and an autumn overlap, and
            Test/Kolkata fixed at +05:30.
        2009a: Test/Paris fixed at +01:00 all year.
    """
    return _register_test_group()


@pytest.fixture
def paris() -> Zone:
    """Test/Paris pinned to the 2008a rules, which have a gap and an overlap."""
    return Zone.of("TEST:Test/Paris#2008a")


@pytest.fixture
def paris_floating() -> Zone:
    return Zone.of("TEST:Test/Paris")

"""Calendrical: proleptic ISO 8601 dates, times, offsets and zones.

Calendrical represents calendrical values as immutable objects, does exact
arithmetic on them, and merges partial field data such as a year and a
day-of-year into whole values.

Core Types:
    Date: Date in the proleptic ISO calendar
    Time: Time of day with nanosecond precision
    DateTime: Local date and time
    OffsetDate, OffsetTime, OffsetDateTime: Values with a UTC offset
    ZonedDateTime: Offset date-time within a zone
    Period: Amount of years, months, days and time

Zones:
    Offset: Fixed offset from UTC
    Zone: Fixed-offset or group:region#version identity
    ZoneRulesGroup: Registry of zone rules providers
    ZoneResolvers: Policies for local times in gaps and overlaps

Fields:
    CalendricalRule: A quantity any value can be asked for
    merge_fields: Merge a bag of fields into a value

Format Functions:
    parse: Parse ISO 8601 text into a value
    format_value: Format a value as ISO 8601 text

Exceptions:
    CalendricalError: Base exception
    RangeError: Field value out of range
    InvalidFieldCombinationError: Valid fields that do not combine
    ConflictError: Two fields give different values
    OverflowError: Result outside the year range
    ParseError: Failed to parse text
    ZoneRulesError: Zone rules unavailable or rejecting a time
    UnsupportedRuleError: Value cannot supply a rule

Example:
    >>> from calendrical import Date, merge_fields, DATE
    >>> merge_fields({"year": 2024, "month_of_year": 2, "day_of_month": 29}, DATE)
    Date(2024, 2, 29)
    >>> Date(2024, 1, 31).plus_months(1)
    Date(2024, 2, 29)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from calendrical.core import (
    ZERO,
    Date,
    DateTime,
    OffsetDate,
    OffsetDateTime,
    OffsetTime,
    Period,
    Time,
    ZonedDateTime,
)

# Units
from calendrical.units import AmPmOfDay, DayOfWeek, MonthOfYear, PeriodUnit, QuarterOfYear

# Exceptions
from calendrical.errors import (
    CalendricalError,
    ConflictError,
    InvalidFieldCombinationError,
    OverflowError,
    ParseError,
    RangeError,
    UnsupportedRuleError,
    ZoneRulesError,
)

# Resolvers
from calendrical.resolvers import DateResolvers

# Zones
from calendrical.zone import (
    FixedZone,
    FixedZoneRules,
    Offset,
    OffsetInfo,
    RegionZone,
    StaticZoneRulesDataProvider,
    Transition,
    TransitionZoneRules,
    Zone,
    ZoneResolvers,
    ZoneRules,
    ZoneRulesDataProvider,
    ZoneRulesGroup,
)

# Fields
from calendrical.fields import (
    DATE,
    DATETIME,
    OFFSET_DATETIME,
    TIME,
    ZONED_DATETIME,
    CalendricalContext,
    CalendricalMerger,
    CalendricalRule,
    DateTimeFieldRule,
    merge_fields,
    rule_for,
)

# Format functions
from calendrical.format import format_value, parse

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "Time",
    "Period",
    "ZERO",
    "DateTime",
    "OffsetDate",
    "OffsetTime",
    "OffsetDateTime",
    "ZonedDateTime",
    # Units
    "AmPmOfDay",
    "DayOfWeek",
    "MonthOfYear",
    "PeriodUnit",
    "QuarterOfYear",
    # Exceptions
    "CalendricalError",
    "RangeError",
    "InvalidFieldCombinationError",
    "ConflictError",
    "OverflowError",
    "ParseError",
    "ZoneRulesError",
    "UnsupportedRuleError",
    # Resolvers
    "DateResolvers",
    # Zones
    "Offset",
    "Zone",
    "FixedZone",
    "RegionZone",
    "ZoneRules",
    "FixedZoneRules",
    "TransitionZoneRules",
    "OffsetInfo",
    "Transition",
    "ZoneRulesGroup",
    "ZoneRulesDataProvider",
    "StaticZoneRulesDataProvider",
    "ZoneResolvers",
    # Fields
    "CalendricalRule",
    "DateTimeFieldRule",
    "CalendricalContext",
    "CalendricalMerger",
    "merge_fields",
    "rule_for",
    "DATE",
    "TIME",
    "DATETIME",
    "OFFSET_DATETIME",
    "ZONED_DATETIME",
    # Format functions
    "parse",
    "format_value",
]

"""Internal constants for calendrical.

These constants define the limits and magic numbers used by the
conversion algorithms. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000

MILLIS_PER_SECOND: int = 1_000
MILLIS_PER_DAY: int = 86_400_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

MINUTES_PER_HOUR: int = 60
HOURS_PER_DAY: int = 24
DAYS_PER_WEEK: int = 7
MONTHS_PER_YEAR: int = 12

# Year limits of the proleptic calendar
MIN_YEAR: int = -999_999_999
MAX_YEAR: int = 999_999_999

# Gregorian 400-year cycle
DAYS_PER_CYCLE: int = 146_097

# Day counts between reference epochs
DAYS_0000_TO_1970: int = 719_528  # 0000-01-01 to 1970-01-01
DAYS_0000_TO_MJD_EPOCH: int = 678_941  # 0000-01-01 to 1858-11-17
MJD_UNIX_EPOCH: int = DAYS_0000_TO_1970 - DAYS_0000_TO_MJD_EPOCH  # 40_587

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Zero-based day-of-year of the first of each month
STANDARD_MONTH_START: tuple[int, ...] = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)
LEAP_MONTH_START: tuple[int, ...] = (0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335)

# Offset limits (in seconds)
MAX_OFFSET_HOURS: int = 18
MAX_OFFSET_SECONDS: int = MAX_OFFSET_HOURS * SECONDS_PER_HOUR  # 64_800


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "MILLIS_PER_SECOND",
    "MILLIS_PER_DAY",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MINUTES_PER_HOUR",
    "HOURS_PER_DAY",
    "DAYS_PER_WEEK",
    "MONTHS_PER_YEAR",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_PER_CYCLE",
    "DAYS_0000_TO_1970",
    "DAYS_0000_TO_MJD_EPOCH",
    "MJD_UNIX_EPOCH",
    "DAYS_IN_MONTH",
    "STANDARD_MONTH_START",
    "LEAP_MONTH_START",
    "MAX_OFFSET_HOURS",
    "MAX_OFFSET_SECONDS",
]

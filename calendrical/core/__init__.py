"""Core calendrical values.

This module provides the immutable value types:
    - Date: Date in the proleptic ISO calendar
    - Time: Time of day with nanosecond precision
    - Period: Years, months, days and time-of-day amounts
    - DateTime: Local date and time
    - OffsetDate, OffsetTime, OffsetDateTime: Values with a UTC offset
    - ZonedDateTime: Offset date-time within a zone
"""

from __future__ import annotations

from calendrical.core.date import Date
from calendrical.core.time import Time
from calendrical.core.period import ZERO, Period
from calendrical.core.datetime import DateTime
from calendrical.core.offsetdate import OffsetDate
from calendrical.core.offsettime import OffsetTime
from calendrical.core.offsetdatetime import OffsetDateTime
from calendrical.core.zoneddatetime import ZonedDateTime

__all__: list[str] = [
    "Date",
    "Time",
    "Period",
    "ZERO",
    "DateTime",
    "OffsetDate",
    "OffsetTime",
    "OffsetDateTime",
    "ZonedDateTime",
]

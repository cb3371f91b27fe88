"""Calendrical units and enumerations.

This module provides:
    - PeriodUnit: Units fields are measured in (NANOS ... ERAS)
    - DayOfWeek: Monday=1 through Sunday=7
    - MonthOfYear: January=1 through December=12
    - QuarterOfYear: Q1 through Q4
    - AmPmOfDay: AM or PM
"""

from __future__ import annotations

from calendrical.units.ampmofday import AmPmOfDay
from calendrical.units.dayofweek import DayOfWeek
from calendrical.units.monthofyear import MonthOfYear
from calendrical.units.periodunit import PeriodUnit
from calendrical.units.quarterofyear import QuarterOfYear

__all__: list[str] = [
    "AmPmOfDay",
    "DayOfWeek",
    "MonthOfYear",
    "PeriodUnit",
    "QuarterOfYear",
]

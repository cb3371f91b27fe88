"""Field rules and the field merger.

This module provides:
    - CalendricalRule: A named quantity that any value can be asked for
    - DateTimeFieldRule: An integer field with a range, such as YEAR
    - CalendricalMerger: Combines a bag of fields into whole values
    - merge_fields: One-call merge returning a rule's value

Examples:
    >>> from calendrical.fields import DATE, DAY_OF_WEEK, merge_fields
    >>> date = merge_fields({"year": 2024, "day_of_year": 60}, DATE)
    >>> date
    Date(2024, 2, 29)
    >>> date.get(DAY_OF_WEEK)
    <DayOfWeek.THURSDAY: 4>
"""

from __future__ import annotations

from calendrical.fields.registry import (
    AMPM_OF_DAY,
    CLOCK_HOUR_OF_AMPM,
    CLOCK_HOUR_OF_DAY,
    COUNT_RULES,
    DATE,
    DATETIME,
    DAY_OF_MONTH,
    DAY_OF_WEEK,
    DAY_OF_YEAR,
    EPOCH_DAY,
    FIELD_RULES,
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
    VALUE_RULES,
    WEEK_BASED_YEAR,
    WEEK_OF_MONTH,
    WEEK_OF_WEEK_BASED_YEAR,
    WEEK_OF_YEAR,
    YEAR,
    ZONE,
    ZONED_DATETIME,
    CalendricalRule,
    DateTimeFieldRule,
    Interpretation,
    ValueRule,
    all_rules,
    rule_for,
)
from calendrical.fields.merger import (
    CalendricalContext,
    CalendricalMerger,
    merge_fields,
)

__all__: list[str] = [
    "CalendricalRule",
    "ValueRule",
    "DateTimeFieldRule",
    "Interpretation",
    "CalendricalContext",
    "CalendricalMerger",
    "merge_fields",
    "rule_for",
    "all_rules",
    "VALUE_RULES",
    "FIELD_RULES",
    "COUNT_RULES",
    "ZONED_DATETIME",
    "OFFSET_DATETIME",
    "OFFSET_DATE",
    "OFFSET_TIME",
    "DATETIME",
    "DATE",
    "TIME",
    "OFFSET",
    "ZONE",
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

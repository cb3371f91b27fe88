"""Internal utilities for calendrical.

This module contains private implementation details:
    - Day-count conversion algorithms
    - Constants and magic numbers
    - Validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from calendrical._internal.validation import (
    validate_date,
    validate_day_of_month,
    validate_month,
    validate_range,
    validate_year,
)

__all__: list[str] = [
    "validate_date",
    "validate_day_of_month",
    "validate_month",
    "validate_range",
    "validate_year",
]

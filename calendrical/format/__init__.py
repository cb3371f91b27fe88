"""Text parsing and formatting.

This module provides the ISO 8601 boundary:
    - parse_fields: Parse text into a bag of fields
    - parse: Parse text and merge it into a value
    - format_value: Format a value as ISO 8601 text

Examples:
    >>> from calendrical.format import parse, format_value
    >>> format_value(parse("2024-060"))
    '2024-02-29'
"""

from __future__ import annotations

from calendrical.format.iso8601 import format_value, parse, parse_fields

__all__: list[str] = [
    "parse_fields",
    "parse",
    "format_value",
]

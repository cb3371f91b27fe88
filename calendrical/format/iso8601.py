"""ISO 8601 parsing into fields, and formatting.

This module turns ISO 8601 text into a bag of calendrical fields for the
merger, and prints calendrical values back as text.

Functions:
    parse_fields: Parse text into a field bag.
    parse: Parse text and merge the fields into a value.
    format_value: Format a calendrical value as ISO 8601 text.

Supported forms:

Dates:
    - YYYY-MM-DD (calendar date)
    - YYYY-DDD (ordinal date)
    - YYYY-Www-D (week date)
    - +YYYYY-MM-DD and -YYYY-MM-DD (expanded years)

Times:
    - HH:MM
    - HH:MM:SS
    - HH:MM:SS.f (fraction of 1-9 digits, ``.`` or ``,``)

Date-times join a date and a time with ``T``, and may be followed by an
offset (``Z``, ``+HH:MM``, ``+HH:MM:SS``) and a zone id in brackets.

Examples:
    >>> from calendrical.format import parse, format_value
    >>> parse("2024-01-15T14:30Z")
    OffsetDateTime(DateTime(Date(2024, 1, 15), Time(14, 30, 0, 0)), Offset('Z'))

    >>> format_value(parse("2024-W03-1"))
    '2024-01-15'
"""

from __future__ import annotations

import re
from typing import Any

from calendrical.errors import CalendricalError, ParseError

_YEAR = r"(?P<year>[+-]?\d{4,10})"
_CALENDAR_DATE = re.compile(_YEAR + r"-(?P<month>\d{2})-(?P<day>\d{2})")
_WEEK_DATE = re.compile(_YEAR + r"-W(?P<week>\d{2})-(?P<dow>\d)")
_ORDINAL_DATE = re.compile(_YEAR + r"-(?P<doy>\d{3})")
_TIME = re.compile(
    r"(?P<hour>\d{2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:[.,](?P<fraction>\d{1,9}))?)?"
)
_OFFSET = re.compile(r"Z|[+-]\d{2}:\d{2}(?::\d{2})?")
_ZONE = re.compile(r"\[(?P<zone>[^\[\]]+)\]")


def _parse_year(text: str, match: re.Match[str]) -> int:
    year_text = match.group("year")
    digits = year_text.lstrip("+-")
    if len(digits) > 4 and year_text[0] not in "+-":
        raise ParseError(
            f"Year with more than 4 digits must have a sign: {text!r}", text, match.start("year")
        )
    return int(year_text)


def parse_fields(text: str) -> dict[Any, Any]:
    """Parse ISO 8601 text into a bag of fields.

    The values are left raw: range checks and combination happen in the
    merger. A date-time with an offset gives an OFFSET field and a
    bracketed zone id gives a ZONE field.

    Args:
        text: The text to parse.

    Returns:
        A dict of field rule to raw value.

    Raises:
        ParseError: If the text is not one of the supported forms. The
            error index points at the first character not understood.

    Examples:
        >>> from calendrical.fields import YEAR, DAY_OF_YEAR
        >>> fields = parse_fields("2024-060")
        >>> fields[YEAR], fields[DAY_OF_YEAR]
        (2024, 60)
    """
    # Import here to avoid circular imports
    from calendrical.fields import registry as rules
    from calendrical.zone.offset import Offset
    from calendrical.zone.zone import Zone

    if not isinstance(text, str):
        raise ParseError(f"Expected string, got {type(text).__name__}")
    if not text:
        raise ParseError("Empty string", text, 0)

    fields: dict[Any, Any] = {}
    pos = 0

    match = _CALENDAR_DATE.match(text, pos)
    if match is not None:
        fields[rules.YEAR] = _parse_year(text, match)
        fields[rules.MONTH_OF_YEAR] = int(match.group("month"))
        fields[rules.DAY_OF_MONTH] = int(match.group("day"))
    else:
        match = _WEEK_DATE.match(text, pos)
        if match is not None:
            fields[rules.WEEK_BASED_YEAR] = _parse_year(text, match)
            fields[rules.WEEK_OF_WEEK_BASED_YEAR] = int(match.group("week"))
            fields[rules.DAY_OF_WEEK] = int(match.group("dow"))
        else:
            match = _ORDINAL_DATE.match(text, pos)
            if match is not None:
                fields[rules.YEAR] = _parse_year(text, match)
                fields[rules.DAY_OF_YEAR] = int(match.group("doy"))

    has_date = match is not None
    if has_date:
        pos = match.end()
        if pos < len(text):
            if text[pos] not in "Tt":
                raise ParseError(f"Expected 'T' after date in {text!r}", text, pos)
            pos += 1
            if pos == len(text):
                raise ParseError(f"Expected time after 'T' in {text!r}", text, pos)

    if pos < len(text):
        match = _TIME.match(text, pos)
        if match is None:
            raise ParseError(f"Invalid date or time in {text!r}", text, pos)
        fields[rules.HOUR_OF_DAY] = int(match.group("hour"))
        fields[rules.MINUTE_OF_HOUR] = int(match.group("minute"))
        if match.group("second") is not None:
            fields[rules.SECOND_OF_MINUTE] = int(match.group("second"))
        fraction = match.group("fraction")
        if fraction is not None:
            fields[rules.NANO_OF_SECOND] = int(fraction.ljust(9, "0"))
        pos = match.end()

        match = _OFFSET.match(text, pos)
        if match is not None:
            try:
                fields[rules.OFFSET] = Offset.parse(match.group())
            except CalendricalError as exc:
                raise ParseError(str(exc), text, pos) from exc
            pos = match.end()

        match = _ZONE.match(text, pos)
        if match is not None:
            try:
                fields[rules.ZONE] = Zone.of(match.group("zone"))
            except ParseError as exc:
                raise ParseError(str(exc), text, match.start("zone")) from exc
            pos = match.end()

    if pos != len(text):
        raise ParseError(f"Unexpected text at index {pos} in {text!r}", text, pos)
    return fields


def parse(text: str, rule: Any = None, *, strict: bool = True) -> Any:
    """Parse ISO 8601 text into a calendrical value.

    Args:
        text: The text to parse.
        rule: The rule to return, such as ``DATE``. When None, the most
            complete value the text describes is returned.
        strict: Range-check the parsed fields. Lenient parsing rolls
            out-of-range values over, so ``2009-02-29`` becomes March 1.

    Raises:
        ParseError: If the text is not ISO 8601.
        CalendricalError: If the fields do not merge into a value.

    Examples:
        >>> parse("2024-02-29")
        Date(2024, 2, 29)

        >>> parse("2024-02-29T10:15:30.5")
        DateTime(Date(2024, 2, 29), Time(10, 15, 30, 500000000))

        >>> from calendrical.fields import DAY_OF_WEEK
        >>> parse("2024-02-29", DAY_OF_WEEK)
        <DayOfWeek.THURSDAY: 4>
    """
    from calendrical.fields.merger import merge_fields

    fields = parse_fields(text)
    if rule is not None:
        return merge_fields(fields, rule, strict=strict)
    merged = merge_fields(fields, strict=strict)
    if len(merged) != 1:
        names = ", ".join(sorted(r.id for r in merged))
        raise CalendricalError(f"Text {text!r} did not merge into a single value: {names}")
    (value,) = merged.values()
    return value


def format_value(value: Any, *, precision: str = "auto") -> str:
    """Format a calendrical value as ISO 8601 text.

    Args:
        value: A Date, Time, DateTime, offset or zoned value, Offset,
            Zone or Period.
        precision: Subsecond precision for values with a time, one of
            "auto", "seconds" or "nanos".

    Raises:
        TypeError: If the value is not a calendrical value.

    Examples:
        >>> from calendrical import Date, Time
        >>> format_value(Date(2024, 1, 15))
        '2024-01-15'
        >>> format_value(Time(14, 30, 45), precision="nanos")
        '14:30:45.000000000'
    """
    # Import here to avoid circular imports
    from calendrical.core.date import Date
    from calendrical.core.datetime import DateTime
    from calendrical.core.offsetdate import OffsetDate
    from calendrical.core.offsetdatetime import OffsetDateTime
    from calendrical.core.offsettime import OffsetTime
    from calendrical.core.period import Period
    from calendrical.core.time import Time
    from calendrical.core.zoneddatetime import ZonedDateTime
    from calendrical.zone.offset import Offset
    from calendrical.zone.zone import Zone

    if isinstance(value, (DateTime, Time)):
        return value.to_iso_format(precision=precision)
    if isinstance(value, Date):
        return value.to_iso_format()
    if isinstance(value, OffsetTime):
        return f"{value.time.to_iso_format(precision=precision)}{value.offset}"
    if isinstance(value, OffsetDateTime):
        return f"{value.datetime.to_iso_format(precision=precision)}{value.offset}"
    if isinstance(value, ZonedDateTime):
        odt = value.offset_datetime
        return f"{format_value(odt, precision=precision)}[{value.zone.id}]"
    if isinstance(value, (OffsetDate, Offset, Zone, Period)):
        return str(value)
    raise TypeError(f"Expected a calendrical value, got {type(value).__name__}")


__all__ = ["parse_fields", "parse", "format_value"]

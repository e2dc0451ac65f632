"""Parsing of raw numeric form fields.

Counts and unit times travel between the UI and the core as strings.
Only an optional sign followed by ASCII digits counts as an integer;
everything else (blank, padded, decimal, words) is not one.
"""

import re

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def is_integer_text(value: str) -> bool:
    """Return True if value is an integer literal with no padding."""
    return _INTEGER_RE.fullmatch(value) is not None


def parse_count(value: str | int | None) -> int:
    """Parse a raw count field, treating anything unparsable as 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, str) and is_integer_text(value):
        return int(value)
    return 0

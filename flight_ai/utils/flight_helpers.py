"""
Flight Helper Utilities
Parsing and formatting helpers for provider flight data
"""

import re
from typing import Any, Optional, Union

ISO8601_DURATION_RE = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?")
NUMERIC_PREFIX_RE = re.compile(r"\s*((?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")

DURATION_FORMATS = ("legacy", "decimal")


def parse_price(value: Any) -> float:
    """
    Read a price the way a JavaScript parseFloat would.

    Uses the leading numeric part of the value; anything without one
    (None, "", "N/A", negative amounts) becomes 0.

    Example:
        >>> parse_price("245.50")
        245.5
        >>> parse_price("245 USD")
        245.0
        >>> parse_price(None)
        0.0
    """
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, (int, float)):
        return float(value) if value > 0 else 0.0

    match = NUMERIC_PREFIX_RE.match(str(value))
    if not match:
        return 0.0
    return float(match.group(1))


def iso8601_to_minutes(duration: str) -> int:
    """Convert an ISO 8601 duration (PT2H5M) to whole minutes, 0 if unparseable"""
    match = ISO8601_DURATION_RE.match(duration or "")
    if not match:
        return 0
    return int(match.group(1) or 0) * 60 + int(match.group(2) or 0)


def duration_to_minutes(value: Any) -> int:
    """
    Normalise a leg duration to whole minutes.

    Providers send minutes as a number; ISO 8601 strings and numeric
    strings are accepted too.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return max(int(value), 0)

    text = str(value).strip()
    if text.isdigit():
        return int(text)
    return iso8601_to_minutes(text)


def format_duration(minutes: int, style: str = "legacy") -> Union[str, float]:
    """
    Format a duration for the UI.

    legacy: "<hours>.<minutes>" with the minutes concatenated as-is,
            so 125 minutes is "2.5" (2h05m). Kept for UI compatibility.
    decimal: true decimal hours, so 125 minutes is 2.08.
    """
    if style == "decimal":
        return round(minutes / 60, 2)
    if style != "legacy":
        raise ValueError(f"Unknown duration format: {style}")

    hours, mins = divmod(minutes, 60)
    return f"{hours}.{mins}"


def first_or_none(items: Any) -> Optional[Any]:
    """First element of a non-empty list, else None"""
    if isinstance(items, list) and items:
        return items[0]
    return None

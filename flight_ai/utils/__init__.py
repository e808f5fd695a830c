"""
Utilities Module
Helper functions for flight data
"""

from .flight_helpers import (
    parse_price,
    iso8601_to_minutes,
    duration_to_minutes,
    format_duration,
    first_or_none,
    DURATION_FORMATS
)

__all__ = [
    "parse_price",
    "iso8601_to_minutes",
    "duration_to_minutes",
    "format_duration",
    "first_or_none",
    "DURATION_FORMATS"
]

# providers/__init__.py
"""
Flight Data Providers Package

Contains outbound integrations with third-party flight APIs:
- flight_search: SerpApi Google Flights search and normalization
"""

from .flight_search import (
    FlightSearchNormalizer,
    FlightSearchConfig,
    ErrorKind,
    Ok,
    Err,
    flight_search,
    search_flights
)

__all__ = [
    "FlightSearchNormalizer",
    "FlightSearchConfig",
    "ErrorKind",
    "Ok",
    "Err",
    "flight_search",
    "search_flights"
]

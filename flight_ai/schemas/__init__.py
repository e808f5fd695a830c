# schemas/__init__.py
"""
Pydantic Schemas Package

Contains all Pydantic v2 models for:
- Flight search requests/results
- Generated flight status and seat maps
- Reservation pricing
"""

from .flight_schemas import (
    # Search
    SearchRequest, AirportInfo, NormalizedFlight, SearchResult,
    # Flight status
    FlightEndpoint, FlightStatus, FlightStatusRequest,
    # Seats
    Seat, SeatMap, SeatMapRequest,
    # Reservations
    ReservationEndpoint, ReservationRequest, ReservationPrice
)

__all__ = [
    # Search
    "SearchRequest", "AirportInfo", "NormalizedFlight", "SearchResult",
    # Flight status
    "FlightEndpoint", "FlightStatus", "FlightStatusRequest",
    # Seats
    "Seat", "SeatMap", "SeatMapRequest",
    # Reservations
    "ReservationEndpoint", "ReservationRequest", "ReservationPrice"
]

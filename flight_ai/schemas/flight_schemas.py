# schemas/flight_schemas.py
"""
Pydantic v2 schemas for the flight actions
Field names are snake_case in Python and camelCase on the wire,
matching the JSON consumed by the booking UI.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import List, Optional, Union


class CamelModel(BaseModel):
    """Base model serialising to camelCase"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================
# Flight Search
# ============================================

class SearchRequest(CamelModel):
    """Flight search input"""
    model_config = ConfigDict(frozen=True)

    origin: str = Field(..., min_length=1, description="IATA code of the origin")
    destination: str = Field(..., min_length=1, description="IATA code of the destination")
    departure_date: Optional[str] = Field(None, description="Outbound date, YYYY-MM-DD")

    @field_validator("origin", "destination", mode="before")
    @classmethod
    def normalize_code(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value


class AirportInfo(CamelModel):
    """One end of a searched flight"""
    airport_name: str = "Unknown"
    airport_code: str = "Unknown"
    timestamp: str = "Unknown"


class NormalizedFlight(CamelModel):
    """Provider offer mapped to the UI schema"""
    id: Optional[str] = None  # provider booking token
    departure: AirportInfo
    arrival: AirportInfo
    airlines: List[str]
    price_in_usd: float = Field(0, ge=0, alias="priceInUSD")
    travel_class: str = "Unknown"
    flight_number: str = "Unknown"
    overnight: bool = False
    # "2.5" in legacy format, 2.08 in decimal format
    duration_hours: Union[str, float]


class SearchResult(CamelModel):
    """Search output, at most four flights"""
    flights: List[NormalizedFlight] = Field(default_factory=list, max_length=4)


# ============================================
# Flight Status (generated)
# ============================================

class FlightEndpoint(CamelModel):
    city_name: str = Field(..., description="Name of the city")
    airport_code: str = Field(..., description="IATA code of the airport")
    airport_name: str = Field(..., description="Full name of the airport")
    timestamp: str = Field(..., description="ISO 8601 date and time")
    terminal: str = Field(..., description="Terminal")
    gate: str = Field(..., description="Gate")


class FlightStatus(CamelModel):
    """Status of a single flight"""
    flight_number: str = Field(..., description="Flight number, e.g., BA123, AA31")
    departure: FlightEndpoint
    arrival: FlightEndpoint
    total_distance_in_miles: float = Field(..., description="Total flight distance in miles")


class FlightStatusRequest(CamelModel):
    flight_number: str = Field(..., min_length=2)
    date: str


# ============================================
# Seat Map (generated)
# ============================================

class Seat(CamelModel):
    seat_number: str = Field(..., description="Seat identifier, e.g., 12A, 15C")
    price_in_usd: float = Field(..., alias="priceInUSD", description="Seat price in US dollars, less than $99")
    is_available: bool = Field(..., description="Whether the seat is available for booking")


class SeatMap(CamelModel):
    seats: List[Seat]


class SeatMapRequest(CamelModel):
    flight_number: str = Field(..., min_length=2)


# ============================================
# Reservation Pricing (generated)
# ============================================

class ReservationEndpoint(CamelModel):
    city_name: str
    airport_code: str
    timestamp: str
    gate: str
    terminal: str


class ReservationRequest(CamelModel):
    """Reservation to be priced"""
    seats: List[str]
    flight_number: str
    departure: ReservationEndpoint
    arrival: ReservationEndpoint
    passenger_name: str


class ReservationPrice(CamelModel):
    total_price_in_usd: float = Field(..., alias="totalPriceInUSD", description="Total reservation price in US dollars")

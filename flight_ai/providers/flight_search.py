# providers/flight_search.py
"""
Flight Search Normalizer
Fetches flight offers from SerpApi (Google Flights engine) and maps them
into the fixed SearchResult schema used by the booking UI.

Contract: search() never raises. Any network, parse or mapping failure
is reported internally as an Err and presented as {"flights": []}.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar, Union

import httpx
from loguru import logger
from pydantic import ValidationError

from ..config import Settings, settings
from ..schemas.flight_schemas import AirportInfo, NormalizedFlight, SearchRequest, SearchResult
from ..utils.flight_helpers import (
    DURATION_FORMATS,
    duration_to_minutes,
    first_or_none,
    format_duration,
    parse_price,
)

MAX_FLIGHTS = 4
UNKNOWN = "Unknown"

T = TypeVar("T")


# ============================================
# Result Type
# ============================================

class ErrorKind(str, Enum):
    REQUEST = "request"   # search input rejected before any fetch
    NETWORK = "network"   # transport error or non-2xx status
    PARSE = "parse"       # malformed JSON or missing best_flights
    MAPPING = "mapping"   # offer shape not as expected


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    detail: str = ""

    @property
    def ok(self) -> bool:
        return False


SearchOutcome = Union[Ok[SearchResult], Err]


class OfferMappingError(ValueError):
    """Raised when a provider offer cannot be mapped"""


# ============================================
# Configuration
# ============================================

@dataclass(frozen=True)
class FlightSearchConfig:
    """Explicit configuration for the normalizer"""
    api_key: str
    base_url: str = "https://serpapi.com/search"
    timeout: float = 10.0
    duration_format: str = "legacy"

    # Fixed provider defaults
    engine: str = "google_flights"
    adults: int = 1
    travel_class: int = 1  # economy
    result_type: str = "2"  # one-way
    currency: str = "USD"
    language: str = "en"

    def __post_init__(self):
        if self.duration_format not in DURATION_FORMATS:
            raise ValueError(f"duration_format must be one of {DURATION_FORMATS}")

    @classmethod
    def from_settings(cls, source: Settings) -> "FlightSearchConfig":
        return cls(
            api_key=source.SERPAPI_API_KEY,
            base_url=source.SERPAPI_BASE_URL,
            timeout=source.FLIGHT_SEARCH_TIMEOUT,
            duration_format=source.DURATION_FORMAT,
        )


# ============================================
# Normalizer
# ============================================

class FlightSearchNormalizer:
    """
    One search = one GET to the provider, then a field remap of the
    first MAX_FLIGHTS offers in provider order.
    """

    def __init__(self, config: FlightSearchConfig, client: Optional[httpx.AsyncClient] = None):
        self.config = config
        # Injected client is reused; otherwise one client per call
        self._client = client

    def build_params(self, request: SearchRequest) -> Dict[str, Any]:
        """Provider query parameters for a search"""
        params = {
            "api_key": self.config.api_key,
            "engine": self.config.engine,
            "departure_id": request.origin,
            "arrival_id": request.destination,
            "adults": self.config.adults,
            "travel_class": self.config.travel_class,
            "type": self.config.result_type,
            "currency": self.config.currency,
            "hl": self.config.language,
        }
        if request.departure_date:
            params["outbound_date"] = request.departure_date
        return params

    async def search(
        self,
        origin: str,
        destination: str,
        departure_date: Optional[str] = None
    ) -> SearchResult:
        """
        Search flights and return at most four normalized flights.

        Args:
            origin: IATA code of the departure airport
            destination: IATA code of the arrival airport
            departure_date: Optional outbound date (YYYY-MM-DD)

        Returns:
            SearchResult, empty on any failure
        """
        logger.info(f"Searching flights: {origin} -> {destination} on {departure_date or 'any date'}")

        try:
            outcome = await self.fetch(origin, destination, departure_date)
        except Exception as e:
            # Message may embed the request URL (and api_key); log the type only
            logger.error(f"Unexpected flight search error: {type(e).__name__}")
            outcome = Err(ErrorKind.MAPPING, type(e).__name__)

        if isinstance(outcome, Err):
            logger.warning(f"Flight search failed ({outcome.kind.value}): {outcome.detail}")
            return SearchResult(flights=[])

        logger.info(f"Flight search returned {len(outcome.value.flights)} flights")
        return outcome.value

    async def fetch(
        self,
        origin: str,
        destination: str,
        departure_date: Optional[str] = None
    ) -> SearchOutcome:
        """Run the fetch/parse/map pipeline and report the outcome"""
        try:
            request = SearchRequest(origin=origin, destination=destination, departure_date=departure_date)
        except ValidationError as e:
            return Err(ErrorKind.REQUEST, str(e))

        try:
            response = await self._get(self.build_params(request))
        except Exception as e:
            # Transport errors carry the full URL, api_key included
            return Err(ErrorKind.NETWORK, type(e).__name__)

        logger.debug(f"Provider responded with status {response.status_code}")
        if not response.is_success:
            return Err(ErrorKind.NETWORK, f"HTTP {response.status_code}")

        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return Err(ErrorKind.PARSE, f"invalid JSON: {e}")

        offers = payload.get("best_flights") if isinstance(payload, dict) else None
        if not isinstance(offers, list):
            return Err(ErrorKind.PARSE, "response has no best_flights list")

        try:
            flights = [self.normalize_offer(offer) for offer in offers[:MAX_FLIGHTS]]
            return Ok(SearchResult(flights=flights))
        except (OfferMappingError, ValidationError, TypeError, ValueError) as e:
            return Err(ErrorKind.MAPPING, str(e))

    async def _get(self, params: Dict[str, Any]) -> httpx.Response:
        if self._client is not None:
            return await self._client.get(self.config.base_url, params=params, timeout=self.config.timeout)

        async with httpx.AsyncClient(timeout=self.config.timeout) as client:
            return await client.get(self.config.base_url, params=params)

    def normalize_offer(self, offer: Dict[str, Any]) -> NormalizedFlight:
        """Map one provider offer (its first leg) to a NormalizedFlight"""
        if not isinstance(offer, dict):
            raise OfferMappingError(f"offer is {type(offer).__name__}, expected object")

        leg = first_or_none(offer.get("flights"))
        if not isinstance(leg, dict):
            raise OfferMappingError("offer has no flight legs")

        minutes = duration_to_minutes(leg.get("duration"))

        return NormalizedFlight(
            id=offer.get("booking_token"),
            departure=_airport(leg.get("departure_airport")),
            arrival=_airport(leg.get("arrival_airport")),
            airlines=[leg.get("airline") or UNKNOWN],
            price_in_usd=parse_price(offer.get("price")),
            travel_class=leg.get("travel_class") or UNKNOWN,
            flight_number=leg.get("flight_number") or UNKNOWN,
            overnight=leg.get("overnight") is True,
            duration_hours=format_duration(minutes, self.config.duration_format),
        )


def _airport(raw: Any) -> AirportInfo:
    """Airport block with "Unknown" for every missing value"""
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise OfferMappingError(f"airport is {type(raw).__name__}, expected object")

    return AirportInfo(
        airport_name=raw.get("name") or UNKNOWN,
        airport_code=raw.get("id") or UNKNOWN,
        timestamp=raw.get("time") or UNKNOWN,
    )


# ============================================
# Global Instance
# ============================================

flight_search = FlightSearchNormalizer(FlightSearchConfig.from_settings(settings))


# ============================================
# Convenience Function
# ============================================

async def search_flights(origin: str, destination: str, departure_date: Optional[str] = None) -> Dict[str, Any]:
    """Search flights and return the UI dict"""
    result = await flight_search.search(origin, destination, departure_date)
    return result.model_dump(by_alias=True)

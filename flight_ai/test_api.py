"""
API Tests
Runs the FastAPI app with the search normalizer and LLM actions stubbed out.
"""

from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from flight_ai.api import flights as flights_api
from flight_ai.llm.structured import GenerationError
from flight_ai.main import app
from flight_ai.schemas.flight_schemas import (
    AirportInfo,
    NormalizedFlight,
    ReservationPrice,
    SearchResult,
)

client = TestClient(app)


def sample_result():
    return SearchResult(flights=[
        NormalizedFlight(
            id="token-0",
            departure=AirportInfo(airport_name="JFK Airport", airport_code="JFK", timestamp="2025-03-01 08:00"),
            arrival=AirportInfo(airport_name="LAX Airport", airport_code="LAX", timestamp="2025-03-01 11:05"),
            airlines=["Delta"],
            price_in_usd=245.5,
            travel_class="Economy",
            flight_number="DL 100",
            overnight=False,
            duration_hours="6.5",
        )
    ])


@pytest.fixture
def search_stub(monkeypatch):
    stub = Mock()
    stub.search = AsyncMock(return_value=sample_result())
    monkeypatch.setattr(flights_api, "flight_search", stub)
    return stub


@pytest.fixture
def actions_stub(monkeypatch):
    stub = Mock()
    monkeypatch.setattr(flights_api, "flight_actions", stub)
    return stub


def test_root_lists_endpoints():
    response = client.get("/")
    assert response.status_code == 200
    assert "/api/ai/flights/search" in response.json()["endpoints"]


def test_health():
    response = client.get("/api/ai/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_search_returns_camel_case_flights(search_stub):
    response = client.post(
        "/api/ai/flights/search",
        json={"origin": "jfk", "destination": "LAX", "departureDate": "2025-03-01"},
    )

    assert response.status_code == 200
    flight = response.json()["flights"][0]
    assert flight["priceInUSD"] == 245.5
    assert flight["departure"]["airportCode"] == "JFK"
    assert flight["durationHours"] == "6.5"
    search_stub.search.assert_awaited_once_with("JFK", "LAX", "2025-03-01")


def test_search_without_date(search_stub):
    response = client.post("/api/ai/flights/search", json={"origin": "JFK", "destination": "LAX"})

    assert response.status_code == 200
    search_stub.search.assert_awaited_once_with("JFK", "LAX", None)


def test_search_empty_result_is_still_200(search_stub):
    search_stub.search.return_value = SearchResult(flights=[])

    response = client.post("/api/ai/flights/search", json={"origin": "JFK", "destination": "LAX"})

    assert response.status_code == 200
    assert response.json() == {"flights": []}


def test_search_rejects_missing_destination(search_stub):
    response = client.post("/api/ai/flights/search", json={"origin": "JFK"})
    assert response.status_code == 422


def test_reservation_price(actions_stub):
    actions_stub.reservation_price.return_value = ReservationPrice(total_price_in_usd=512.4)
    leg = {"cityName": "New York", "airportCode": "JFK", "timestamp": "2025-03-01T08:00:00Z", "gate": "B22", "terminal": "4"}

    response = client.post("/api/ai/flights/reservations/price", json={
        "seats": ["12A"],
        "flightNumber": "AA31",
        "departure": leg,
        "arrival": {**leg, "cityName": "Los Angeles", "airportCode": "LAX"},
        "passengerName": "Sam Rivera",
    })

    assert response.status_code == 200
    assert response.json() == {"totalPriceInUSD": 512.4}
    request = actions_stub.reservation_price.call_args.args[0]
    assert request.arrival.airport_code == "LAX"


def test_generation_failure_maps_to_502(actions_stub):
    actions_stub.seat_map.side_effect = GenerationError("LLM output does not match SeatMap")

    response = client.post("/api/ai/flights/seats", json={"flightNumber": "AA31"})

    assert response.status_code == 502
    assert "SeatMap" in response.json()["detail"]


def test_flight_status_generation_failure_maps_to_502(actions_stub):
    actions_stub.flight_status.side_effect = GenerationError("OPENAI_API_KEY is not configured")

    response = client.post("/api/ai/flights/status", json={"flightNumber": "AA31", "date": "2025-03-01"})

    assert response.status_code == 502

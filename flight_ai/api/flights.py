# api/flights.py
"""
Flights API
Exposes the four flight actions to the booking UI.

Search never fails from the caller's point of view: provider problems
come back as an empty flight list. Generated actions surface LLM failures
as 502 Bad Gateway.
"""

from fastapi import APIRouter, HTTPException
from fastapi.concurrency import run_in_threadpool
from loguru import logger

from ..llm.flight_actions import flight_actions
from ..llm.structured import GenerationError
from ..providers.flight_search import flight_search
from ..schemas.flight_schemas import (
    FlightStatus,
    FlightStatusRequest,
    ReservationPrice,
    ReservationRequest,
    SearchRequest,
    SearchResult,
    SeatMap,
    SeatMapRequest,
)

router = APIRouter(prefix="/api/ai/flights", tags=["flights"])


@router.post("/search", response_model=SearchResult)
async def search_flights(request: SearchRequest):
    """
    Search flights between two airports.

    Returns at most four flights in provider order.
    """
    return await flight_search.search(request.origin, request.destination, request.departure_date)


@router.post("/status", response_model=FlightStatus)
async def flight_status(request: FlightStatusRequest):
    """Generated status for a flight on a date"""
    try:
        return await run_in_threadpool(flight_actions.flight_status, request.flight_number, request.date)
    except GenerationError as e:
        logger.error(f"Flight status generation failed: {e}")
        raise HTTPException(status_code=502, detail=str(e))


@router.post("/seats", response_model=SeatMap)
async def seat_map(request: SeatMapRequest):
    """Generated seat map for a flight"""
    try:
        return await run_in_threadpool(flight_actions.seat_map, request.flight_number)
    except GenerationError as e:
        logger.error(f"Seat map generation failed: {e}")
        raise HTTPException(status_code=502, detail=str(e))


@router.post("/reservations/price", response_model=ReservationPrice)
async def reservation_price(request: ReservationRequest):
    """Generated total price for a reservation"""
    try:
        return await run_in_threadpool(flight_actions.reservation_price, request)
    except GenerationError as e:
        logger.error(f"Reservation pricing failed: {e}")
        raise HTTPException(status_code=502, detail=str(e))

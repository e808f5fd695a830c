# llm/flight_actions.py
"""
Generated Flight Actions
Flight status, seat map and reservation pricing are produced by the LLM
against fixed schemas and returned unchanged.
"""

from typing import Any, Dict, Optional

from loguru import logger

from ..schemas.flight_schemas import (
    FlightStatus,
    ReservationPrice,
    ReservationRequest,
    SeatMap,
)
from .prompts import FLIGHT_STATUS_PROMPT, RESERVATION_PRICE_PROMPT, SEAT_MAP_PROMPT
from .structured import StructuredGenerator, structured_generator


class FlightActions:
    """Pass-through actions backed by a StructuredGenerator"""

    def __init__(self, generator: Optional[StructuredGenerator] = None):
        self.generator = generator or structured_generator

    def flight_status(self, flight_number: str, date: str) -> FlightStatus:
        logger.info(f"Generating flight status: {flight_number} on {date}")
        prompt = FLIGHT_STATUS_PROMPT.format(flight_number=flight_number, date=date)
        return self.generator.generate(prompt, FlightStatus)

    def seat_map(self, flight_number: str) -> SeatMap:
        logger.info(f"Generating seat map: {flight_number}")
        prompt = SEAT_MAP_PROMPT.format(flight_number=flight_number)
        return self.generator.generate(prompt, SeatMap)

    def reservation_price(self, reservation: ReservationRequest) -> ReservationPrice:
        logger.info(f"Pricing reservation: {reservation.flight_number}, {len(reservation.seats)} seat(s)")
        prompt = RESERVATION_PRICE_PROMPT.format(
            reservation=reservation.model_dump_json(by_alias=True, indent=2)
        )
        return self.generator.generate(prompt, ReservationPrice)


# ============================================
# Global Instance
# ============================================

flight_actions = FlightActions()


# ============================================
# Convenience Functions
# ============================================

def generate_flight_status(flight_number: str, date: str) -> Dict[str, Any]:
    """Generate a flight status and return dict"""
    return flight_actions.flight_status(flight_number, date).model_dump(by_alias=True)


def generate_seat_map(flight_number: str) -> Dict[str, Any]:
    """Generate a seat map and return dict"""
    return flight_actions.seat_map(flight_number).model_dump(by_alias=True)


def price_reservation(reservation: Dict[str, Any]) -> Dict[str, Any]:
    """Price a reservation given as a camelCase dict"""
    request = ReservationRequest.model_validate(reservation)
    return flight_actions.reservation_price(request).model_dump(by_alias=True)

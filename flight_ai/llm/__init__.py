# llm/__init__.py
"""
LLM Components Package

Contains LLM-powered components:
- structured: Prompt + schema in, validated object out
- flight_actions: Flight status, seat map and reservation pricing
- prompts: Prompt templates
"""

from .structured import StructuredGenerator, GenerationError, structured_generator
from .flight_actions import (
    FlightActions,
    flight_actions,
    generate_flight_status,
    generate_seat_map,
    price_reservation
)

__all__ = [
    "StructuredGenerator",
    "GenerationError",
    "structured_generator",
    "FlightActions",
    "flight_actions",
    "generate_flight_status",
    "generate_seat_map",
    "price_reservation"
]

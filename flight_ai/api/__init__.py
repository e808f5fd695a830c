# api/__init__.py
"""
API Endpoints Package

Contains the FastAPI routers for the flight AI service:
- flights: search, status, seat map and reservation pricing
"""

from .flights import router as flights_router

__all__ = ["flights_router"]

# flight_ai/__init__.py
"""
Flight AI Service Package

Server-side actions behind the flight booking UI:
- Flight search (SerpApi Google Flights, normalized)
- Flight status (generated)
- Seat maps (generated)
- Reservation pricing (generated)
"""

__version__ = "1.0.0"

# Package structure:
# flight_ai/
# ├── __init__.py           <- This file
# ├── main.py               <- FastAPI application entry
# ├── config.py             <- Configuration settings
# │
# ├── api/                  <- FastAPI Routers
# │   └── flights.py        <- /api/ai/flights
# │
# ├── providers/            <- Third-party flight APIs
# │   └── flight_search.py  <- Search + normalization
# │
# ├── llm/                  <- LLM Components
# │   ├── prompts.py        <- Prompt templates
# │   ├── structured.py     <- Prompt + schema -> validated object
# │   └── flight_actions.py <- Status, seats, reservation price
# │
# ├── schemas/              <- Pydantic Models
# │   └── flight_schemas.py
# │
# └── utils/                <- Parsing / formatting helpers
#     └── flight_helpers.py

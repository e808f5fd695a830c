"""
Flight AI Service - FastAPI Application
Flight search via SerpApi (Google Flights); flight status, seat maps and
reservation pricing via OpenAI structured generation.
"""

import sys
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from . import __version__
from .api.flights import router as flights_router
from .config import settings

# Configure logging
logger.remove()
logger.add(
    sys.stderr,
    level=settings.LOG_LEVEL.upper(),
    format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
    diagnose=False
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting Flight AI Service ({settings.API_ENV})")
    if not settings.SERPAPI_API_KEY:
        logger.warning("SERPAPI_API_KEY not set: flight search will return no results")
    if not settings.use_openai:
        logger.warning("OPENAI_API_KEY not set: generated actions will fail with 502")
    yield
    logger.info("Flight AI Service stopped")


app = FastAPI(
    title="Flight AI Service",
    description="Flight search normalization and LLM-generated flight data for the booking UI.",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(flights_router)


# ============================================
# REST Endpoints
# ============================================

@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": "Flight AI Service",
        "version": __version__,
        "status": "running",
        "docs": "/docs",
        "endpoints": [
            "/api/ai/health",
            "/api/ai/flights/search",
            "/api/ai/flights/status",
            "/api/ai/flights/seats",
            "/api/ai/flights/reservations/price"
        ]
    }


@app.get("/api/ai/health")
async def health_check():
    """Configuration-level health check"""
    return {
        "status": "healthy",
        "service": "flight-ai-service",
        "version": __version__,
        "components": {
            "flight_search": "configured" if settings.SERPAPI_API_KEY else "missing api key",
            "llm": settings.OPENAI_MODEL if settings.use_openai else "missing api key"
        },
        "timestamp": datetime.now().isoformat()
    }


# ============================================
# Main
# ============================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "flight_ai.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_ENV == "development"
    )

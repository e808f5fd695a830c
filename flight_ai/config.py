"""
Flight AI Service Configuration
Loads settings from environment variables
"""

import os
from typing import List
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Settings:
    """Application settings loaded from environment"""

    # SerpApi (Google Flights) Configuration
    SERPAPI_API_KEY: str = os.getenv("SERPAPI_API_KEY", os.getenv("SERP_API_KEY", ""))
    SERPAPI_BASE_URL: str = os.getenv("SERPAPI_BASE_URL", "https://serpapi.com/search")

    # Flight search behaviour
    FLIGHT_SEARCH_TIMEOUT: float = float(os.getenv("FLIGHT_SEARCH_TIMEOUT", "10"))
    DURATION_FORMAT: str = os.getenv("DURATION_FORMAT", "legacy")  # legacy | decimal

    # OpenAI Configuration
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
    OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
    OPENAI_TEMPERATURE: float = float(os.getenv("OPENAI_TEMPERATURE", "0.2"))

    # API Configuration
    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: int = int(os.getenv("API_PORT", "8000"))
    API_ENV: str = os.getenv("API_ENV", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS Configuration
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:3001")

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list"""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def use_openai(self) -> bool:
        """True when a usable OpenAI key is configured"""
        return bool(self.OPENAI_API_KEY) and not self.OPENAI_API_KEY.startswith("sk-your")


# Global settings instance
settings = Settings()

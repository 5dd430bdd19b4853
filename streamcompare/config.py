"""
Recommendation Service Configuration
Loads settings from environment variables
"""

import os
from typing import List
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def weight_from_env(name: str, default: int) -> int:
    """
    Read a default preference weight, rejecting values outside 1-10

    Raises:
        ValueError: If the variable is not an integer in range
    """
    value = int(os.getenv(name, str(default)))
    if not 1 <= value <= 10:
        raise ValueError(f"{name} must be between 1 and 10, got {value}")
    return value


class Settings:
    """Application settings loaded from environment"""

    # API Configuration
    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: int = int(os.getenv("API_PORT", "8000"))
    API_ENV: str = os.getenv("API_ENV", "development")

    # CORS Configuration
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:3001")

    # Catalog snapshot (services, channels, service_channels)
    CATALOG_PATH: str = os.getenv("CATALOG_PATH", "data/catalog.json")

    # Default preference weights (1-10), used when a request omits them
    DEFAULT_PRICE_WEIGHT: int = weight_from_env("DEFAULT_PRICE_WEIGHT", 5)
    DEFAULT_COVERAGE_WEIGHT: int = weight_from_env("DEFAULT_COVERAGE_WEIGHT", 8)
    DEFAULT_FEATURES_WEIGHT: int = weight_from_env("DEFAULT_FEATURES_WEIGHT", 3)

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list"""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


# Global settings instance
settings = Settings()

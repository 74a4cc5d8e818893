"""Configuration loader for the eBay importer.

Values come from environment variables; a local `.env` file is loaded first
so development setups do not need to export anything.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def get_env_var(key: str, default: Optional[str] = None) -> str:
    """Get environment variable with fallback to default"""
    return os.getenv(key, default)


def get_env_float(key: str, default: float = 0.0) -> float:
    """Get float environment variable with fallback to default"""
    value = get_env_var(key, str(default))
    try:
        return float(value)
    except ValueError:
        return default


@dataclass
class EbayImporterConfig:
    """Configuration for the eBay importer."""

    # RapidAPI configuration
    RAPIDAPI_KEY: str = field(default_factory=lambda: get_env_var("RAPIDAPI_KEY", ""))
    RAPIDAPI_HOST: str = field(
        default_factory=lambda: get_env_var(
            "RAPIDAPI_HOST", "real-time-ebay-data.p.rapidapi.com"
        )
    )
    RAPIDAPI_PRODUCT_PATH: str = field(
        default_factory=lambda: get_env_var("RAPIDAPI_PRODUCT_PATH", "/product.php")
    )
    TIMEOUT_SECS_SCRAPER: float = field(
        default_factory=lambda: get_env_float("SCRAPER_TIMEOUT_SECS", 30.0)
    )

    # Normalization defaults
    DEFAULT_CURRENCY: str = field(
        default_factory=lambda: get_env_var("DEFAULT_CURRENCY", "USD")
    )

    # Default pricing rule applied by the import workflow
    PRICING_MODE: str = field(
        default_factory=lambda: get_env_var("PRICING_MODE", "MULTIPLIER").upper()
    )
    PRICING_VALUE: float = field(
        default_factory=lambda: get_env_float("PRICING_VALUE", 1.0)
    )

    # Logging
    LOG_LEVEL: str = field(default_factory=lambda: get_env_var("LOG_LEVEL", "INFO"))
    LOG_FORMAT: str = field(default_factory=lambda: get_env_var("LOG_FORMAT", ""))

    @property
    def RAPIDAPI_PRODUCT_URL(self) -> str:
        """Full URL of the RapidAPI product endpoint"""
        path = self.RAPIDAPI_PRODUCT_PATH
        if not path.startswith("/"):
            path = f"/{path}"
        return f"https://{self.RAPIDAPI_HOST}{path}"


# Create config instance
config = EbayImporterConfig()

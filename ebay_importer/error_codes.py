"""
Error codes raised by the eBay scraping pipeline
"""
from enum import Enum
from typing import Optional


class ScraperErrorCode(Enum):
    """Closed set of scraper failure kinds"""

    # Malformed or unsupported input URL
    INVALID_URL = "INVALID_URL"
    # No RapidAPI credential from the caller or the environment
    API_KEY_MISSING = "API_KEY_MISSING"
    # Upstream failure: bad status, empty body or missing essential fields
    API_ERROR = "API_ERROR"

    @property
    def is_retryable(self) -> bool:
        """Check if the caller may retry the same request"""
        return self is ScraperErrorCode.API_ERROR


class ScraperError(Exception):
    """Pipeline exception carrying a typed error code"""

    def __init__(
        self, error_code: ScraperErrorCode, message: str, details: Optional[dict] = None
    ):
        self.error_code = error_code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to dictionary for logging/serialization"""
        return {
            "error_code": self.error_code.value,
            "message": self.message,
            "details": self.details,
            "retryable": self.error_code.is_retryable,
        }


def create_error(
    error_code: ScraperErrorCode, message: str, details: Optional[dict] = None
) -> ScraperError:
    """Create a scraper error for the given code"""
    return ScraperError(error_code, message, details)

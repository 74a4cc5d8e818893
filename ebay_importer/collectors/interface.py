from abc import ABC, abstractmethod
from typing import Optional

from ebay_importer.models import ScrapeResult


class IProductScraper(ABC):
    """Interface for marketplace product scrapers"""

    @abstractmethod
    async def scrape(self, url: str, api_key: Optional[str] = None) -> ScrapeResult:
        """Scrape one product URL; return a tagged success or error result."""
        raise NotImplementedError

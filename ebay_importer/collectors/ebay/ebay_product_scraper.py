from typing import Any, Optional

import httpx

from ebay_importer.config_loader import config as default_config
from ebay_importer.error_codes import ScraperError, ScraperErrorCode, create_error
from ebay_importer.logging_config import configure_logging
from ebay_importer.models import ScrapeResult
from ebay_importer.services.rapidapi_client import RapidApiEbayClient
from ..interface import IProductScraper
from .ebay_product_mapper import EbayProductMapper
from .ebay_response_validator import validate_response
from .ebay_url_parser import extract_item_id

logger = configure_logging(
    "ebay-importer:ebay_product_scraper", default_config.LOG_LEVEL, default_config.LOG_FORMAT
)

API_KEY_MISSING_MESSAGE = (
    "RapidAPI key is required. Please add it in Settings or set RAPIDAPI_KEY "
    "environment variable."
)
GENERIC_FAILURE_MESSAGE = "Failed to fetch eBay product data"


def _transport_error_detail(error: httpx.HTTPError) -> str:
    """Prefer the upstream `message` field, fall back to the httpx error text"""
    if isinstance(error, httpx.HTTPStatusError):
        try:
            payload = error.response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict) and payload.get("message"):
            return str(payload["message"])
    return str(error) or type(error).__name__


class EbayProductScraper(IProductScraper):
    """Scrapes one eBay listing through RapidAPI into a ScrapedProduct.

    Pipeline: URL check -> credential check -> fetch -> response validation
    -> normalization (including variant expansion). Failures never escape
    `scrape`; they come back as `ScrapeResult(success=False, ...)`.
    """

    def __init__(
        self,
        config: Optional[Any] = None,
        api_client: Optional[RapidApiEbayClient] = None,
        mapper: Optional[EbayProductMapper] = None,
    ):
        self.config = config or default_config
        self.api_client = api_client or RapidApiEbayClient(self.config)
        self.mapper = mapper or EbayProductMapper(
            default_currency=self.config.DEFAULT_CURRENCY
        )

    def _resolve_api_key(self, api_key: Optional[str]) -> str:
        resolved = api_key or self.config.RAPIDAPI_KEY
        if not resolved:
            raise create_error(ScraperErrorCode.API_KEY_MISSING, API_KEY_MISSING_MESSAGE)
        return resolved

    async def scrape(self, url: str, api_key: Optional[str] = None) -> ScrapeResult:
        try:
            item_id = extract_item_id(url)
            resolved_key = self._resolve_api_key(api_key)

            logger.info("Scraping eBay product", url=url, item_id=item_id)

            payload = await self.api_client.fetch_product(url, resolved_key)
            body = validate_response(payload)
            product = self.mapper.normalize(item_id, body, url)

            logger.info(
                "Scraped eBay product",
                item_id=item_id,
                price=product.price,
                images=len(product.images),
                options=len(product.options),
                variants=len(product.variants),
            )
            return ScrapeResult.ok(product)

        except ScraperError as e:
            logger.warning(
                "eBay scrape rejected",
                error_code=e.error_code.value,
                error=e.message,
                url=url,
            )
            return ScrapeResult.fail(e.message, e.error_code.value)

        except httpx.HTTPError as e:
            detail = _transport_error_detail(e)
            logger.error("eBay scrape transport failure", error=detail, url=url)
            return ScrapeResult.fail(f"Failed to fetch eBay product: {detail}")

        except Exception as e:
            logger.exception("Unexpected eBay scrape failure", error=str(e), url=url)
            return ScrapeResult.fail(str(e) or GENERIC_FAILURE_MESSAGE)


async def scrape_ebay_product(
    url: str,
    api_key: Optional[str] = None,
    httpx_client: Optional[Any] = None,
) -> ScrapeResult:
    """Scrape an eBay product URL with the default configuration"""
    scraper = EbayProductScraper(
        api_client=RapidApiEbayClient(default_config, httpx_client=httpx_client)
    )
    return await scraper.scrape(url, api_key)

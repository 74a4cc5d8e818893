import time
from typing import Any, Dict, Optional

import httpx

from ebay_importer.config_loader import config as default_config
from ebay_importer.logging_config import configure_logging

logger = configure_logging(
    "ebay-importer:rapidapi_client", default_config.LOG_LEVEL, default_config.LOG_FORMAT
)


class RapidApiEbayClient:
    """Client for the RapidAPI real-time eBay data product endpoint.

    Sends exactly one POST per call; there is no retry. Transport failures
    (timeouts, connection errors, non-2xx responses) propagate as httpx
    exceptions so the caller can report them.
    """

    def __init__(self, config: Optional[Any] = None, httpx_client: Optional[Any] = None):
        self.config = config or default_config
        self.httpx_client = httpx_client

    def _build_headers(self, api_key: str) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "x-rapidapi-host": self.config.RAPIDAPI_HOST,
            "x-rapidapi-key": api_key,
        }

    async def fetch_product(self, url: str, api_key: str) -> Optional[Dict[str, Any]]:
        """Fetch the raw response envelope for an eBay product URL.

        Returns None when the response body is not JSON.
        """
        endpoint = self.config.RAPIDAPI_PRODUCT_URL
        headers = self._build_headers(api_key)

        logger.info("RapidAPI product request", endpoint=endpoint, url=url)

        start_time = time.time()
        if self.httpx_client is not None:
            response = await self.httpx_client.post(
                endpoint,
                json={"url": url},
                headers=headers,
                timeout=self.config.TIMEOUT_SECS_SCRAPER,
            )
        else:
            async with httpx.AsyncClient(timeout=self.config.TIMEOUT_SECS_SCRAPER) as client:
                response = await client.post(endpoint, json={"url": url}, headers=headers)

        response.raise_for_status()
        try:
            payload = response.json()
        except ValueError:
            logger.warning(
                "RapidAPI returned a non-JSON body",
                status_code=response.status_code,
                content_type=response.headers.get("content-type"),
            )
            return None

        logger.info(
            "RapidAPI product request completed",
            status_code=response.status_code,
            latency=round(time.time() - start_time, 3),
        )
        return payload

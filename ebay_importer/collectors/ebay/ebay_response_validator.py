from typing import Any, Dict

from pydantic import ValidationError

from ebay_importer.config_loader import config
from ebay_importer.error_codes import ScraperErrorCode, create_error
from ebay_importer.logging_config import configure_logging
from .ebay_data_models import EbayApiResponse, EbayProductBody

logger = configure_logging(
    "ebay-importer:ebay_response_validator", config.LOG_LEVEL, config.LOG_FORMAT
)

SUCCESS_STATUS = 200

FETCH_FAILED_MESSAGE = (
    "Failed to fetch product data from eBay. Please check if the URL is valid "
    "and the product is available."
)
PRODUCT_NOT_FOUND_MESSAGE = (
    "Product not found. This could mean: 1) The item doesn't exist or is no "
    "longer available on eBay, 2) Your RapidAPI key has reached its request "
    "limit. Please check your RapidAPI dashboard at https://rapidapi.com/hub "
    "and verify your subscription status."
)
INCOMPLETE_PRODUCT_MESSAGE = (
    "Incomplete product data received from eBay. The product may not be "
    "available for sale. Please try a different product URL."
)


def _has_price_value(body: Dict[str, Any]) -> bool:
    price = body.get("price")
    return isinstance(price, dict) and price.get("value") is not None


def validate_response(payload: Any) -> EbayProductBody:
    """Check a raw RapidAPI envelope and decode its body.

    Checks run in order and each failure is terminal:
    both status codes must be 200, the body must be non-empty, and the body
    must carry a title and a price value (an explicit 0 counts as present).

    Raises:
        ScraperError: API_ERROR for any failed check.
    """
    if not isinstance(payload, dict):
        raise create_error(ScraperErrorCode.API_ERROR, FETCH_FAILED_MESSAGE)

    try:
        envelope = EbayApiResponse.model_validate(payload)
    except ValidationError as e:
        logger.warning("Malformed RapidAPI envelope", error=str(e))
        raise create_error(ScraperErrorCode.API_ERROR, FETCH_FAILED_MESSAGE) from e

    logger.debug(
        "RapidAPI envelope statuses",
        original_status=envelope.original_status,
        pc_status=envelope.pc_status,
    )

    if envelope.original_status != SUCCESS_STATUS or envelope.pc_status != SUCCESS_STATUS:
        raise create_error(
            ScraperErrorCode.API_ERROR,
            FETCH_FAILED_MESSAGE,
            {
                "original_status": envelope.original_status,
                "pc_status": envelope.pc_status,
            },
        )

    body = envelope.body
    if not body:
        raise create_error(ScraperErrorCode.API_ERROR, PRODUCT_NOT_FOUND_MESSAGE)

    if not body.get("title") or not _has_price_value(body):
        raise create_error(
            ScraperErrorCode.API_ERROR,
            INCOMPLETE_PRODUCT_MESSAGE,
            {"has_title": bool(body.get("title")), "has_price": _has_price_value(body)},
        )

    try:
        return EbayProductBody.model_validate(body)
    except ValidationError as e:
        logger.warning("Malformed product body", error=str(e))
        raise create_error(ScraperErrorCode.API_ERROR, INCOMPLETE_PRODUCT_MESSAGE) from e

import re

from ebay_importer.error_codes import ScraperErrorCode, create_error

EBAY_DOMAIN_MARKER = "ebay."

# eBay item IDs live in the path as /itm/<digits>
_ITEM_ID_PATTERN = re.compile(r"/itm/(\d+)", re.IGNORECASE)


def is_ebay_url(url: str) -> bool:
    """Check whether the string carries the eBay domain marker"""
    return isinstance(url, str) and EBAY_DOMAIN_MARKER in url.lower()


def extract_item_id(url: str) -> str:
    """Validate an eBay product URL and return its numeric item ID.

    Raises:
        ScraperError: INVALID_URL when the URL is not an eBay URL or has no
            /itm/<digits> segment.
    """
    if not is_ebay_url(url):
        raise create_error(ScraperErrorCode.INVALID_URL, "Invalid eBay URL")

    match = _ITEM_ID_PATTERN.search(url)
    if not match:
        raise create_error(
            ScraperErrorCode.INVALID_URL,
            "Could not extract Item ID from URL",
            {"url": url},
        )
    return match.group(1)

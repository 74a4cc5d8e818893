from .ebay_product_mapper import EbayProductMapper
from .ebay_product_scraper import EbayProductScraper, scrape_ebay_product
from .ebay_response_validator import validate_response
from .ebay_url_parser import extract_item_id
from .ebay_variant_expander import expand_variants

__all__ = [
    "EbayProductMapper",
    "EbayProductScraper",
    "scrape_ebay_product",
    "validate_response",
    "extract_item_id",
    "expand_variants",
]

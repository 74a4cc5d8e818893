"""
Import eBay product listings into a Shopify store.

The package scrapes one eBay listing through RapidAPI and normalizes it into
a ScrapedProduct (options, cartesian variants, images, specifications).
"""

from .collectors.ebay.ebay_product_scraper import EbayProductScraper, scrape_ebay_product
from .error_codes import ScraperError, ScraperErrorCode
from .models import ProductOption, ProductVariant, ScrapedProduct, ScrapeResult
from .pricing import PricingMode, PricingRule

__all__ = [
    "EbayProductScraper",
    "scrape_ebay_product",
    "ScraperError",
    "ScraperErrorCode",
    "ProductOption",
    "ProductVariant",
    "ScrapedProduct",
    "ScrapeResult",
    "PricingMode",
    "PricingRule",
]

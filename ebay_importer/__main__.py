"""
Command-line entry point for scraping a single eBay listing.

Usage:
    python -m ebay_importer scrape https://www.ebay.com/itm/123456789
    python -m ebay_importer scrape URL --api-key KEY --pricing-mode FIXED --pricing-value 5
"""
import argparse
import asyncio
import json
import sys
from typing import List, Optional

from ebay_importer.collectors.ebay.ebay_product_scraper import EbayProductScraper
from ebay_importer.config_loader import config
from ebay_importer.logging_config import configure_logging, reconfigure_service_loggers
from ebay_importer.models import ScrapeResult
from ebay_importer.pricing import PricingMode, PricingRule

logger = configure_logging("ebay-importer:main", config.LOG_LEVEL, config.LOG_FORMAT)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ebay-importer",
        description="Import eBay product listings for a Shopify store",
    )
    subparsers = parser.add_subparsers(dest="command")

    scrape_parser = subparsers.add_parser("scrape", help="Scrape one eBay product URL")
    scrape_parser.add_argument("url", help="eBay product URL (https://www.ebay.com/itm/...)")
    scrape_parser.add_argument(
        "--api-key",
        default=None,
        help="RapidAPI key (defaults to RAPIDAPI_KEY)",
    )
    scrape_parser.add_argument(
        "--pricing-mode",
        choices=[mode.value for mode in PricingMode],
        default=None,
        help="Markup rule applied to scraped prices (defaults to PRICING_MODE)",
    )
    scrape_parser.add_argument(
        "--pricing-value",
        type=float,
        default=None,
        help="Multiplier or fixed amount (defaults to PRICING_VALUE)",
    )
    scrape_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def resolve_pricing_rule(args: argparse.Namespace) -> PricingRule:
    """CLI flags win; the configured rule is only read for what they leave out"""
    if args.pricing_mode is None:
        default_rule = PricingRule.from_config(config)
        mode = default_rule.mode
        value = default_rule.value if args.pricing_value is None else args.pricing_value
    else:
        mode = PricingMode(args.pricing_mode)
        value = config.PRICING_VALUE if args.pricing_value is None else args.pricing_value
    return PricingRule(mode=mode, value=value)


async def run_scrape(args: argparse.Namespace) -> ScrapeResult:
    rule = resolve_pricing_rule(args)
    result = await EbayProductScraper(config).scrape(args.url, args.api_key)
    if result.success and result.data is not None:
        result = ScrapeResult.ok(rule.apply_to_product(result.data))
        logger.info("Applied pricing rule", mode=rule.mode.value, value=rule.value)
    return result


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command != "scrape":
        parser.print_help()
        return 1

    reconfigure_service_loggers(
        "DEBUG" if args.verbose else config.LOG_LEVEL, config.LOG_FORMAT
    )

    try:
        result = asyncio.run(run_scrape(args))
    except ValueError as e:
        logger.error("Invalid pricing configuration", error=str(e))
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 1

    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())

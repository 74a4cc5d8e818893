from itertools import product
from typing import Dict, List, Sequence, Tuple

from ebay_importer.config_loader import config
from ebay_importer.logging_config import configure_logging
from ebay_importer.models import ProductOption, ProductVariant
from .ebay_data_models import EbayOptionDescriptor

logger = configure_logging(
    "ebay-importer:ebay_variant_expander", config.LOG_LEVEL, config.LOG_FORMAT
)

OUT_OF_STOCK_MARKER = "out of stock"


def _available_values(raw_values: Sequence[str]) -> List[str]:
    """Trimmed, distinct values with empties and out-of-stock entries removed"""
    values: List[str] = []
    for raw in raw_values:
        value = raw.strip()
        if not value or OUT_OF_STOCK_MARKER in value.lower() or value in values:
            continue
        values.append(value)
    return values


def build_options(
    raw_options: Sequence[Dict[str, EbayOptionDescriptor]],
) -> List[ProductOption]:
    """Flatten eBay's `[{name: {values, selectedValue}}]` list into options.

    Options left without values are dropped. A name seen twice keeps its
    first occurrence so each variant gets one value per option name.
    """
    options: List[ProductOption] = []
    seen_names = set()
    for entry in raw_options:
        for name, descriptor in entry.items():
            values = _available_values(descriptor.values)
            if not values:
                logger.debug("Dropping option without available values", option=name)
                continue
            if name in seen_names:
                logger.warning("Skipping duplicate option", option=name)
                continue
            seen_names.add(name)
            options.append(ProductOption(name=name, values=values))
    return options


def expand_variants(
    raw_options: Sequence[Dict[str, EbayOptionDescriptor]],
) -> Tuple[List[ProductOption], List[ProductVariant]]:
    """Build options and the cartesian product of their values.

    Variants are ordered by option index, then value index, so the same
    input always yields the same list. No surviving options means a
    single-SKU product: both lists are empty.
    """
    options = build_options(raw_options)
    if not options:
        return [], []

    names = [option.name for option in options]
    variants = [
        ProductVariant(item_id="", options=dict(zip(names, combination)), available=True)
        for combination in product(*(option.values for option in options))
    ]

    logger.info(
        f"Generated {len(variants)} variants from {len(options)} options",
        options=names,
    )
    return options, variants

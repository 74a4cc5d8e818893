import re
from typing import List, Optional

from ebay_importer.config_loader import config
from ebay_importer.logging_config import configure_logging
from ebay_importer.models import ProductVariant, ScrapedProduct
from .ebay_data_models import EbayProductBody, EbayProductInfo
from .ebay_variant_expander import expand_variants

logger = configure_logging(
    "ebay-importer:ebay_product_mapper", config.LOG_LEVEL, config.LOG_FORMAT
)

NO_DESCRIPTION = "No description available"
DEFAULT_AVAILABILITY = "Available"
HIGH_RES_SIZE = "1600"

# eBay thumbnails look like .../s-l500.jpg; the size suffix selects resolution
_THUMBNAIL_SIZE = re.compile(r"/s-l\d+\.")


class EbayProductMapper:
    """Maps a decoded RapidAPI product body to the ScrapedProduct model."""

    def __init__(self, default_currency: str = "USD"):
        self.default_currency = default_currency

    def normalize(
        self, item_id: str, body: EbayProductBody, source_url: str
    ) -> ScrapedProduct:
        """Normalize a decoded product body. Pure and deterministic."""
        base_price = self._extract_price(body)
        options, variants = expand_variants(body.options)
        info = body.product_information

        product = ScrapedProduct(
            item_id=item_id,
            title=body.title or "",
            description=self._build_description(body),
            price=base_price,
            currency=(body.price.currency if body.price else None) or self.default_currency,
            images=self._extract_images(body),
            options=options,
            variants=self._price_variants(variants, base_price),
            source_url=body.url or source_url,
            specifications={i.name: i.value for i in info} if info is not None else None,
            bullet_points=[self._format_info(i) for i in info] if info is not None else None,
            rating=body.ratings,
            ratings_total=self._extract_ratings_total(body),
            categories=[crumb.name for crumb in body.bread_crumbs or []],
            availability=self._build_availability(body),
        )

        logger.debug(
            "Normalized eBay product",
            item_id=item_id,
            price=product.price,
            images=len(product.images),
            options=len(product.options),
            variants=len(product.variants),
        )
        return product

    def _extract_price(self, body: EbayProductBody) -> float:
        if body.price is None or not body.price.value:
            return 0.0
        return max(body.price.value, 0.0)

    def _extract_images(self, body: EbayProductBody) -> List[str]:
        if body.images is not None:
            return [
                self._to_high_resolution(image)
                for image in body.images
                if self._is_absolute(image)
            ]
        if body.main_image and self._is_absolute(body.main_image):
            return [body.main_image]
        return []

    @staticmethod
    def _is_absolute(url: str) -> bool:
        return url.startswith(("http://", "https://"))

    @staticmethod
    def _to_high_resolution(url: str) -> str:
        if ".jpg" not in url:
            return url
        return _THUMBNAIL_SIZE.sub(f"/s-l{HIGH_RES_SIZE}.", url, count=1)

    @staticmethod
    def _format_info(info: EbayProductInfo) -> str:
        return f"{info.name}: {info.value}"

    def _build_description(self, body: EbayProductBody) -> str:
        if body.description:
            return body.description
        if body.product_information:
            return "\n".join(self._format_info(i) for i in body.product_information)
        return NO_DESCRIPTION

    @staticmethod
    def _extract_ratings_total(body: EbayProductBody) -> Optional[int]:
        # Totals are never negative
        if body.reviews_count is None or body.reviews_count < 0:
            return None
        return body.reviews_count

    @staticmethod
    def _build_availability(body: EbayProductBody) -> str:
        if body.available_quantity:
            return f"{body.available_quantity} available"
        return body.condition or DEFAULT_AVAILABILITY

    @staticmethod
    def _price_variants(
        variants: List[ProductVariant], base_price: float
    ) -> List[ProductVariant]:
        return [
            variant.model_copy(update={"price": variant.price or base_price})
            for variant in variants
        ]

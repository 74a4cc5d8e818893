"""
Pricing rules applied to scraped eBay prices before import.

A merchant picks one rule for the store: multiply the eBay price
(1.5 = 50% markup) or add a fixed amount to it.
"""
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from ebay_importer.models import ScrapedProduct


class PricingMode(str, Enum):
    MULTIPLIER = "MULTIPLIER"
    FIXED = "FIXED"


class PricingRule(BaseModel):
    """Store-wide markup rule"""
    mode: PricingMode = PricingMode.MULTIPLIER
    value: float = Field(1.0, ge=0)

    @classmethod
    def from_config(cls, config: Any) -> "PricingRule":
        """Build the default rule from configuration.

        Raises:
            ValueError: if the configured mode is unknown or the value negative.
        """
        try:
            mode = PricingMode(str(config.PRICING_MODE).upper())
        except ValueError:
            raise ValueError(f"Unknown pricing mode: {config.PRICING_MODE}")
        return cls(mode=mode, value=config.PRICING_VALUE)

    def apply(self, price: float) -> float:
        """Return the store price for an eBay price, rounded to cents"""
        if self.mode is PricingMode.MULTIPLIER:
            adjusted = price * self.value
        else:
            adjusted = price + self.value
        return round(max(adjusted, 0.0), 2)

    def apply_to_product(self, product: ScrapedProduct) -> ScrapedProduct:
        """Copy of the product with base and variant prices marked up"""
        variants = [
            variant.model_copy(
                update={"price": self.apply(variant.price if variant.price is not None else product.price)}
            )
            for variant in product.variants
        ]
        return product.model_copy(
            update={"price": self.apply(product.price), "variants": variants}
        )

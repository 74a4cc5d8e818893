from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _ImporterModel(BaseModel):
    # Serialized with the camelCase keys the import workflow expects
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with camelCase keys, leaving out absent optional fields"""
        return self.model_dump(by_alias=True, exclude_none=True)


class ProductOption(_ImporterModel):
    """A configurable product dimension such as Color or Size"""
    name: str
    values: List[str] = Field(default_factory=list)


class ProductVariant(_ImporterModel):
    """One purchasable combination of option values"""
    item_id: str = ""
    options: Dict[str, str] = Field(default_factory=dict)
    available: bool = True
    price: Optional[float] = Field(None, ge=0)


class ScrapedProduct(_ImporterModel):
    """Normalized eBay listing handed to the import workflow"""
    item_id: str = Field(..., min_length=1)
    title: str
    description: str
    price: float = Field(0.0, ge=0)
    currency: str = "USD"
    images: List[str] = Field(default_factory=list)
    options: List[ProductOption] = Field(default_factory=list)
    variants: List[ProductVariant] = Field(default_factory=list)
    source_url: str
    specifications: Optional[Dict[str, str]] = None
    bullet_points: Optional[List[str]] = None
    rating: Optional[float] = None
    ratings_total: Optional[int] = Field(None, ge=0)
    categories: List[str] = Field(default_factory=list)
    availability: str = "Available"


class ScrapeResult(_ImporterModel):
    """Tagged outcome of a scrape: either data or an error message"""
    success: bool
    data: Optional[ScrapedProduct] = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    @classmethod
    def ok(cls, product: ScrapedProduct) -> "ScrapeResult":
        return cls(success=True, data=product)

    @classmethod
    def fail(cls, error: str, error_code: Optional[str] = None) -> "ScrapeResult":
        return cls(success=False, error=error, error_code=error_code)

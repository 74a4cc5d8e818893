"""
Typed schema of the RapidAPI "real-time-ebay-data" product response.

The upstream payload is loosely typed: fields come and go, numbers arrive as
display strings and nested lists may contain nulls. Everything is decoded
here, once, so the mapper only deals with plain Python values.
"""
import math
import re
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .utils.price_parser import parse_price

_LEADING_NUMBER = re.compile(r"^\s*[+-]?\d+(?:\.\d+)?")
MAX_RATING = 5.0


def _text_or_none(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


class _EbayModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )


class EbayApiResponse(BaseModel):
    """Outer envelope returned by the scraping service"""
    model_config = ConfigDict(extra="ignore")

    original_status: Optional[int] = None
    pc_status: Optional[int] = None
    body: Optional[Dict[str, Any]] = None


class EbayPrice(_EbayModel):
    value: Optional[float] = None
    currency: Optional[str] = None

    @field_validator("value", mode="before")
    @classmethod
    def _parse_value(cls, value: Any) -> Optional[float]:
        if value is None:
            return None
        return parse_price(value)

    @field_validator("currency", mode="before")
    @classmethod
    def _currency_text(cls, value: Any) -> Optional[str]:
        return _text_or_none(value)


class EbayBreadCrumb(_EbayModel):
    name: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> str:
        return _text_or_none(value) or ""


class EbayProductInfo(_EbayModel):
    name: str = ""
    value: str = ""

    @field_validator("name", "value", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> str:
        return _text_or_none(value) or ""


class EbayOptionDescriptor(_EbayModel):
    """One entry of eBay's options list: raw values plus the selected one"""
    values: List[str] = Field(default_factory=list)
    selected_value: Optional[str] = None

    @field_validator("values", mode="before")
    @classmethod
    def _only_strings(cls, value: Any) -> List[str]:
        if not isinstance(value, list):
            return []
        return [v for v in value if isinstance(v, str)]

    @field_validator("selected_value", mode="before")
    @classmethod
    def _selected_text(cls, value: Any) -> Optional[str]:
        return _text_or_none(value)


class EbayProductBody(_EbayModel):
    """Product page data inside the envelope's `body`"""

    title: Optional[str] = None
    price: Optional[EbayPrice] = None
    url: Optional[str] = None
    condition: Optional[str] = None
    main_image: Optional[str] = None
    images: Optional[List[str]] = None
    ratings: Optional[float] = None
    reviews_count: Optional[int] = None
    options: List[Dict[str, EbayOptionDescriptor]] = Field(default_factory=list)
    available_quantity: Optional[int] = None
    description: Optional[str] = None
    bread_crumbs: Optional[List[EbayBreadCrumb]] = None
    product_information: Optional[List[EbayProductInfo]] = None

    @field_validator("title", "url", "condition", "main_image", "description", mode="before")
    @classmethod
    def _optional_text(cls, value: Any) -> Optional[str]:
        return _text_or_none(value)

    @field_validator("images", mode="before")
    @classmethod
    def _image_strings(cls, value: Any) -> Optional[List[str]]:
        if value is None:
            return None
        if not isinstance(value, list):
            return []
        return [v for v in value if isinstance(v, str)]

    @field_validator("ratings", mode="before")
    @classmethod
    def _parse_rating(cls, value: Any) -> Optional[float]:
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            rating = float(value)
        else:
            match = _LEADING_NUMBER.match(str(value))
            if not match:
                return None
            rating = float(match.group())
        if not math.isfinite(rating) or not 0 <= rating <= MAX_RATING:
            return None
        return rating

    @field_validator("reviews_count", "available_quantity", mode="before")
    @classmethod
    def _parse_count(cls, value: Any) -> Optional[int]:
        if value is None or value == "" or isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return int(value) if math.isfinite(value) else None
        # "1,234 product ratings" -> 1234
        match = _LEADING_NUMBER.match(str(value).replace(",", ""))
        return int(float(match.group())) if match else None

    @field_validator("options", mode="before")
    @classmethod
    def _well_formed_options(cls, value: Any) -> List[Dict[str, Any]]:
        if not isinstance(value, list):
            return []
        options = []
        for entry in value:
            if not isinstance(entry, dict):
                continue
            descriptors = {
                name: data
                for name, data in entry.items()
                if isinstance(data, dict) and isinstance(data.get("values"), list)
            }
            if descriptors:
                options.append(descriptors)
        return options

    @field_validator("bread_crumbs", "product_information", mode="before")
    @classmethod
    def _drop_malformed_entries(cls, value: Any) -> Optional[List[Any]]:
        if value is None:
            return None
        if not isinstance(value, list):
            return []
        return [entry for entry in value if isinstance(entry, dict)]

    @field_validator("price", mode="before")
    @classmethod
    def _price_object(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else None

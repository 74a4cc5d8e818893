"""Shared fixtures for the eBay importer unit tests."""
import copy
import sys
from pathlib import Path

import pytest

# Make the package importable when running from a source checkout
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ebay_importer.config_loader import EbayImporterConfig  # noqa: E402

PRODUCT_URL = "https://www.ebay.com/itm/256123456789?hash=item3ba1"

SAMPLE_BODY = {
    "title": "Wireless Earbuds Bluetooth 5.3",
    "price": {"value": 24.99, "currency": "USD"},
    "url": "https://www.ebay.com/itm/256123456789",
    "condition": "Brand New",
    "mainImage": "https://i.ebayimg.com/images/g/abc/s-l500.jpg",
    "images": [
        "https://i.ebayimg.com/images/g/abc/s-l500.jpg",
        "https://i.ebayimg.com/images/g/def/s-l140.png",
        "//i.ebayimg.com/images/g/ghi/s-l64.jpg",
    ],
    "ratings": "4.7",
    "reviewsCount": "1,234",
    "options": [
        {"Color": {"values": ["Black", "Pink", "Out of Stock"], "selectedValue": ""}},
        {"Size": {"values": ["S", "M"], "selectedValue": "S"}},
    ],
    "availableQuantity": 12,
    "description": "",
    "breadCrumbs": [
        {"name": "Electronics", "link": "https://www.ebay.com/b/Electronics/bn_7000259124"},
        {"name": "Headphones", "link": "https://www.ebay.com/b/Headphones/112529"},
    ],
    "productInformation": [
        {"name": "Brand", "value": "Acme"},
        {"name": "Connectivity", "value": "Bluetooth"},
    ],
}


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without network access")


def make_envelope(body=None, original_status=200, pc_status=200):
    """Build a RapidAPI response envelope around a product body."""
    return {
        "original_status": original_status,
        "pc_status": pc_status,
        "url": PRODUCT_URL,
        "domain_complexity": "standard",
        "body": copy.deepcopy(SAMPLE_BODY) if body is None else body,
    }


@pytest.fixture
def sample_body():
    return copy.deepcopy(SAMPLE_BODY)


@pytest.fixture
def sample_envelope():
    return make_envelope()


@pytest.fixture
def importer_config(monkeypatch):
    """Config built from a controlled environment."""
    monkeypatch.setenv("RAPIDAPI_KEY", "env-key")
    monkeypatch.delenv("RAPIDAPI_HOST", raising=False)
    monkeypatch.delenv("RAPIDAPI_PRODUCT_PATH", raising=False)
    monkeypatch.delenv("SCRAPER_TIMEOUT_SECS", raising=False)
    monkeypatch.delenv("DEFAULT_CURRENCY", raising=False)
    monkeypatch.delenv("PRICING_MODE", raising=False)
    monkeypatch.delenv("PRICING_VALUE", raising=False)
    return EbayImporterConfig()


@pytest.fixture
def envelope_factory():
    return make_envelope

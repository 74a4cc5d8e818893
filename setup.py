from setuptools import setup, find_packages

setup(
    name="shopify-ebay-importer",
    version="0.1.0",
    description="Scrape eBay listings into normalized products for Shopify import",
    packages=find_packages(include=["ebay_importer", "ebay_importer.*"]),
    install_requires=[
        "httpx>=0.25.0",
        "pydantic>=2.5.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "ebay-importer=ebay_importer.__main__:main",
        ],
    },
    python_requires=">=3.9",
)

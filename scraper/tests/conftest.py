"""
Pytest fixtures for crawl tests: config and an in-memory catalog.

No network or real browser required.
"""

from __future__ import annotations

import pytest

from scraper.tests.fakes import (
    FakeBrowserType,
    FakeSite,
    catalog_page,
    category_page,
    product_page,
    subcategory_page,
)
from shared.config import AppConfig

ROOT = "https://shop.test/allinone"
CATEGORY_A = "https://shop.test/allinone/computers"
CATEGORY_B = "https://shop.test/allinone/phones"
SUBCATEGORY_A = "https://shop.test/allinone/computers/laptops"
SUBCATEGORY_B = "https://shop.test/allinone/phones/touch"
SWATCH_PRODUCT = "https://shop.test/allinone/product/1"
DROPDOWN_PRODUCT = "https://shop.test/allinone/product/2"
PLAIN_PRODUCT = "https://shop.test/allinone/product/3"


def make_config(**overrides) -> AppConfig:
    values = {
        "environment": "local",
        "log_level": "INFO",
        "log_file": None,
        "log_stdout": True,
        "catalog_url": ROOT,
        "output_path": "result.json",
        "headless": True,
        "nav_timeout_ms": 1000,
        "field_timeout_ms": 100,
        "max_concurrent_subcategories": 0,
    }
    values.update(overrides)
    return AppConfig(**values)


@pytest.fixture
def config() -> AppConfig:
    return make_config()


@pytest.fixture
def catalog_site() -> FakeSite:
    """
    Two categories: A has one subcategory with a swatch product and a
    dropdown product; B has one subcategory with a plain product.
    """
    return FakeSite(
        pages={
            ROOT: catalog_page([CATEGORY_A, CATEGORY_B]),
            CATEGORY_A: category_page([SUBCATEGORY_A]),
            CATEGORY_B: category_page([SUBCATEGORY_B]),
            SUBCATEGORY_A: subcategory_page([SWATCH_PRODUCT, DROPDOWN_PRODUCT]),
            SUBCATEGORY_B: subcategory_page([PLAIN_PRODUCT]),
            SWATCH_PRODUCT: product_page(
                "Asus VivoBook", price="$295.99", swatches=["128", "256", "512"]
            ),
            DROPDOWN_PRODUCT: product_page(
                "Nokia 123", price="$24.99", colors=["Red", "Blue"], ratings_text="7 reviews"
            ),
            PLAIN_PRODUCT: product_page("Iphone", price="$899.99", stars=4),
        }
    )


@pytest.fixture
def browser_type(catalog_site: FakeSite) -> FakeBrowserType:
    return FakeBrowserType(catalog_site)

"""
Playwright-based crawl helpers for the catalog scraper.

This package implements navigation, field extraction, product extraction
and the subcategory/category fan-out.

Public API: re-exports the symbols used by the driver and tests so that
`from scraper.crawl import ...` stays valid.
"""

from __future__ import annotations

from scraper.crawl.browser import create_browser_context, launch_browser, open_page
from scraper.crawl.category import scrape_category
from scraper.crawl.errors import FieldNotFoundError, NavigationError, ScraperError
from scraper.crawl.fields import (
    extract_color,
    extract_links,
    extract_number_of_ratings,
    extract_number_of_stars,
    extract_option_with_price_for_swatch,
    extract_price,
    extract_product_info,
    parse_number_of_ratings,
)
from scraper.crawl.navigation import navigate
from scraper.crawl.product import detect_variant_mode, extract_product
from scraper.crawl.subcategory import scrape_subcategory

__all__ = [
    # errors
    "ScraperError",
    "NavigationError",
    "FieldNotFoundError",
    # browser
    "launch_browser",
    "create_browser_context",
    "open_page",
    # navigation
    "navigate",
    # fields
    "extract_links",
    "extract_product_info",
    "extract_price",
    "extract_option_with_price_for_swatch",
    "extract_color",
    "parse_number_of_ratings",
    "extract_number_of_ratings",
    "extract_number_of_stars",
    # product
    "detect_variant_mode",
    "extract_product",
    # orchestration
    "scrape_subcategory",
    "scrape_category",
]

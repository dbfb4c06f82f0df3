"""
Field extractors: one coroutine per product attribute.

Each extractor reads a single value from a rendered page (or a narrower
element handle) and either returns it or raises. None of them navigate.
"""

from __future__ import annotations

import math
import re
from typing import Union

from playwright.async_api import ElementHandle, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from scraper.constants import (
    COUNT_JS,
    DROPDOWN_OPTION_SELECTOR,
    HREFS_JS,
    INNER_TEXTS_JS,
    PRODUCT_DESCRIPTION_SELECTOR,
    PRODUCT_NAME_SELECTOR,
    PRODUCT_PRICE_SELECTOR,
    RATINGS_COUNT_SELECTOR,
    RATINGS_SELECTOR,
    RATINGS_SUFFIX,
    STAR_SELECTOR,
    SWATCH_SELECTOR,
)
from scraper.crawl.errors import FieldNotFoundError
from scraper.models import ProductInfo

Scope = Union[Page, ElementHandle]

FIELD_TIMEOUT_MS = 5_000

# Leading decimal literal, same prefix rule as JavaScript parseFloat
_LEADING_FLOAT = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


async def _inner_text(scope: Scope, selector: str) -> str:
    element = await scope.query_selector(selector)
    if element is None:
        raise FieldNotFoundError(selector)
    return await element.inner_text()


async def _text_content(page: Page, selector: str, timeout_ms: int) -> str:
    try:
        text = await page.text_content(selector, timeout=timeout_ms)
    except PlaywrightTimeoutError as e:
        raise FieldNotFoundError(selector) from e
    if text is None:
        raise FieldNotFoundError(selector)
    return text


async def extract_links(scope: Scope, selector: str) -> list[str]:
    """Return the href of every element matching selector, in document order."""
    return await scope.eval_on_selector_all(selector, HREFS_JS)


async def extract_product_info(page: Page, *, timeout_ms: int = FIELD_TIMEOUT_MS) -> ProductInfo:
    """
    Read name, description and the current URL of a product page.

    The name is the second h4 of the caption; the first one holds the price.
    """
    name = await _inner_text(page, PRODUCT_NAME_SELECTOR)
    description = await _text_content(page, PRODUCT_DESCRIPTION_SELECTOR, timeout_ms)
    return ProductInfo(name=name, description=description, url=page.url)


async def extract_price(page: Page, *, timeout_ms: int = FIELD_TIMEOUT_MS) -> str:
    """Caption price text, verbatim (currency symbol included)."""
    return await _text_content(page, PRODUCT_PRICE_SELECTOR, timeout_ms)


async def extract_option_with_price_for_swatch(
    page: Page, *, timeout_ms: int = FIELD_TIMEOUT_MS
) -> dict[str, str]:
    """
    Map each swatch label to a price.

    The price is the caption price as currently displayed; swatches are not
    clicked, so every label is paired with the same page price.
    """
    option_prices: dict[str, str] = {}
    for swatch in await page.query_selector_all(SWATCH_SELECTOR):
        option = (await swatch.inner_text()).strip()
        option_prices[option] = await extract_price(page, timeout_ms=timeout_ms)
    return option_prices


async def extract_color(dropdown: ElementHandle) -> list[str]:
    """Option labels of the color dropdown, minus the "Select color" placeholder."""
    labels = await dropdown.eval_on_selector_all(DROPDOWN_OPTION_SELECTOR, INNER_TEXTS_JS)
    return labels[1:]


def parse_number_of_ratings(text: str) -> float:
    """
    Parse a ratings label such as "14 reviews".

    Returns NaN when no leading number is present; never raises.
    """
    cleaned = text.replace(RATINGS_SUFFIX, "", 1).strip()
    match = _LEADING_FLOAT.match(cleaned)
    if match is None:
        return math.nan
    return float(match.group(0).replace("Infinity", "inf"))


async def extract_number_of_ratings(scope: Scope) -> float:
    text = await _inner_text(scope, RATINGS_COUNT_SELECTOR)
    return parse_number_of_ratings(text)


async def extract_number_of_stars(scope: Scope) -> int:
    """Count star icons inside the ratings block."""
    ratings = await scope.query_selector(RATINGS_SELECTOR)
    if ratings is None:
        raise FieldNotFoundError(RATINGS_SELECTOR)
    return await ratings.eval_on_selector_all(STAR_SELECTOR, COUNT_JS)

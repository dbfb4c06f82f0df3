"""
Product extraction: navigate to one product URL and build a Product.

A product page presents variants as swatches, as a color dropdown, or not
at all. Both variant probes run independently; ratings come from the common
info column regardless of the variant mode.

Every failure is contained here: the product is logged and skipped.
"""

from __future__ import annotations

import math
from typing import Optional

from playwright.async_api import Page

from scraper.constants import (
    COLOR_DROPDOWN_SELECTOR,
    COMMON_INFO_SELECTOR,
    SWATCH_CONTAINER_SELECTOR,
    SWATCH_SELECTOR,
    UNSET_PRICE,
)
from scraper.crawl.fields import (
    FIELD_TIMEOUT_MS,
    extract_color,
    extract_number_of_ratings,
    extract_number_of_stars,
    extract_option_with_price_for_swatch,
    extract_price,
    extract_product_info,
)
from scraper.crawl.navigation import NAV_TIMEOUT_MS, navigate
from scraper.models import Price, Product, VariantMode
from shared.logging import get_logger

logger = get_logger(__name__)


def detect_variant_mode(swatch_count: int, has_dropdown: bool) -> VariantMode:
    """Swatches win over a dropdown; a page with neither has no variants."""
    if swatch_count > 0:
        return VariantMode.SWATCH
    if has_dropdown:
        return VariantMode.DROPDOWN
    return VariantMode.NONE


async def extract_product(
    page: Page,
    product_url: str,
    *,
    nav_timeout_ms: int = NAV_TIMEOUT_MS,
    field_timeout_ms: int = FIELD_TIMEOUT_MS,
) -> Optional[Product]:
    """
    Extract one product, or return None when anything on the page fails.

    default_price stays UNSET_PRICE unless a color dropdown is present;
    options stays empty unless a swatch container is present.
    """
    default_price: Price = UNSET_PRICE
    options: dict[str, str] = {}
    colors: list[str] = []
    number_of_ratings = math.nan
    number_of_stars = 0

    try:
        await navigate(page, product_url, timeout_ms=nav_timeout_ms)

        swatch_container = await page.query_selector(SWATCH_CONTAINER_SELECTOR)
        common_element = await page.query_selector(COMMON_INFO_SELECTOR)

        info = await extract_product_info(page, timeout_ms=field_timeout_ms)

        if common_element is not None:
            number_of_ratings = await extract_number_of_ratings(common_element)
            number_of_stars = await extract_number_of_stars(common_element)

        swatch_count = 0
        if swatch_container is not None:
            swatch_count = len(await page.query_selector_all(SWATCH_SELECTOR))
            options = await extract_option_with_price_for_swatch(
                page, timeout_ms=field_timeout_ms
            )

        dropdown = await page.query_selector(COLOR_DROPDOWN_SELECTOR)
        if dropdown is not None:
            colors = await extract_color(dropdown)
            default_price = await extract_price(page, timeout_ms=field_timeout_ms)
    except Exception as e:
        logger.warning(
            "product_extraction_failed",
            url=product_url,
            error=str(e),
            error_type=type(e).__name__,
        )
        return None

    logger.debug(
        "product_extracted",
        url=product_url,
        variant_mode=detect_variant_mode(swatch_count, dropdown is not None).value,
        options=len(options),
        colors=len(colors),
    )
    return Product(
        info=info,
        options=options,
        default_price=default_price,
        colors=tuple(colors),
        number_of_ratings=number_of_ratings,
        number_of_stars=number_of_stars,
    )

"""
Unit tests for field extractors and ratings parsing.

Element handles are AsyncMocks or in-memory fakes; no browser required.
"""

from __future__ import annotations

import math
from unittest.mock import AsyncMock

import pytest

from scraper.constants import (
    CATEGORY_LINK_SELECTOR,
    HREFS_JS,
    PRODUCT_DESCRIPTION_SELECTOR,
    SWATCH_SELECTOR,
)
from scraper.crawl import (
    FieldNotFoundError,
    extract_color,
    extract_links,
    extract_number_of_ratings,
    extract_number_of_stars,
    extract_option_with_price_for_swatch,
    extract_price,
    extract_product_info,
    parse_number_of_ratings,
)
from scraper.tests.fakes import FakeElement, FakePage, FakeSite, common_info, product_page

URL = "https://shop.test/product/1"


async def _loaded_page(doc: dict) -> FakePage:
    page = FakePage(FakeSite(pages={URL: doc}))
    await page.goto(URL)
    return page


# --- Ratings parsing ---


def test_parse_number_of_ratings_well_formed():
    assert parse_number_of_ratings("123 reviews") == 123.0


def test_parse_number_of_ratings_surrounding_whitespace():
    assert parse_number_of_ratings("  7 reviews  ") == 7.0


def test_parse_number_of_ratings_decimal():
    assert parse_number_of_ratings("12.5 reviews") == 12.5


def test_parse_number_of_ratings_leading_number_prefix():
    """Trailing garbage after the number is ignored, like parseFloat."""
    assert parse_number_of_ratings("3 ratings") == 3.0


def test_parse_number_of_ratings_malformed_is_nan():
    assert math.isnan(parse_number_of_ratings("N/A"))
    assert math.isnan(parse_number_of_ratings(""))
    assert math.isnan(parse_number_of_ratings(" reviews"))


# --- Links ---


@pytest.mark.asyncio
async def test_extract_links_preserves_document_order():
    page = AsyncMock()
    page.eval_on_selector_all = AsyncMock(return_value=["https://a/1", "https://a/2"])

    links = await extract_links(page, CATEGORY_LINK_SELECTOR)

    assert links == ["https://a/1", "https://a/2"]
    page.eval_on_selector_all.assert_awaited_once_with(CATEGORY_LINK_SELECTOR, HREFS_JS)


@pytest.mark.asyncio
async def test_extract_links_no_match_is_empty():
    page = AsyncMock()
    page.eval_on_selector_all = AsyncMock(return_value=[])

    assert await extract_links(page, ".missing") == []


# --- Product info and price ---


@pytest.mark.asyncio
async def test_extract_product_info_reads_title_description_and_url():
    page = await _loaded_page(product_page("Lenovo ThinkPad", description="14 inch, 8GB"))

    info = await extract_product_info(page)

    assert info.name == "Lenovo ThinkPad"
    assert info.description == "14 inch, 8GB"
    assert info.url == URL


@pytest.mark.asyncio
async def test_extract_product_info_missing_description_raises():
    doc = product_page("Lenovo ThinkPad")
    del doc[PRODUCT_DESCRIPTION_SELECTOR]
    page = await _loaded_page(doc)

    with pytest.raises(FieldNotFoundError):
        await extract_product_info(page, timeout_ms=10)


@pytest.mark.asyncio
async def test_extract_product_info_missing_title_raises():
    page = await _loaded_page({PRODUCT_DESCRIPTION_SELECTOR: "desc"})

    with pytest.raises(FieldNotFoundError):
        await extract_product_info(page)


@pytest.mark.asyncio
async def test_extract_price_verbatim():
    page = await _loaded_page(product_page("X", price="$1,099.00"))

    assert await extract_price(page) == "$1,099.00"


# --- Swatches ---


@pytest.mark.asyncio
async def test_extract_option_with_price_for_swatch_pairs_page_price():
    """Every swatch label maps to the same current page price."""
    page = await _loaded_page(product_page("X", price="$295.99", swatches=[" 128 ", "256"]))

    options = await extract_option_with_price_for_swatch(page)

    assert options == {"128": "$295.99", "256": "$295.99"}


@pytest.mark.asyncio
async def test_extract_option_with_price_for_swatch_no_swatches():
    page = await _loaded_page(product_page("X", swatches=[]))

    assert await extract_option_with_price_for_swatch(page) == {}


@pytest.mark.asyncio
async def test_extract_option_with_price_for_swatch_queries_swatch_elements():
    swatch = AsyncMock()
    swatch.inner_text = AsyncMock(return_value="HDD 512\n")
    page = AsyncMock()
    page.query_selector_all = AsyncMock(return_value=[swatch])
    page.text_content = AsyncMock(return_value="$500")

    options = await extract_option_with_price_for_swatch(page)

    assert options == {"HDD 512": "$500"}
    page.query_selector_all.assert_awaited_once_with(SWATCH_SELECTOR)


# --- Colors ---


@pytest.mark.asyncio
async def test_extract_color_skips_placeholder():
    dropdown = AsyncMock()
    dropdown.eval_on_selector_all = AsyncMock(return_value=["Select Color", "Red", "Blue"])

    assert await extract_color(dropdown) == ["Red", "Blue"]
    assert dropdown.eval_on_selector_all.call_args[0][0] == "option"


@pytest.mark.asyncio
async def test_extract_color_placeholder_only():
    dropdown = FakeElement(children={"option": ["Select color"]})

    assert await extract_color(dropdown) == []


# --- Ratings and stars ---


@pytest.mark.asyncio
async def test_extract_number_of_ratings_from_common_scope():
    assert await extract_number_of_ratings(common_info("8 reviews")) == 8.0


@pytest.mark.asyncio
async def test_extract_number_of_ratings_unparsable_is_nan():
    assert math.isnan(await extract_number_of_ratings(common_info("N/A")))


@pytest.mark.asyncio
async def test_extract_number_of_stars_counts_spans():
    assert await extract_number_of_stars(common_info(stars=4)) == 4


@pytest.mark.asyncio
async def test_extract_number_of_stars_missing_ratings_block_raises():
    with pytest.raises(FieldNotFoundError):
        await extract_number_of_stars(FakeElement())

"""
Catalog selectors and crawl constants.

Selectors target the webscraper.io e-commerce test site templates.
"""

from __future__ import annotations

from typing import Final

# Link discovery, one selector per catalog level
CATEGORY_LINK_SELECTOR: Final = ".category-link"
SUBCATEGORY_LINK_SELECTOR: Final = ".subcategory-link"
PRODUCT_LINK_SELECTOR: Final = ".title"

# Product caption block. The first h4 is the price heading; the title is the second.
PRODUCT_NAME_SELECTOR: Final = ".caption > h4 >> nth=1"
PRODUCT_DESCRIPTION_SELECTOR: Final = ".caption > .description"
PRODUCT_PRICE_SELECTOR: Final = ".caption > .price"

# Variant presentation
SWATCH_CONTAINER_SELECTOR: Final = ".swatches"
SWATCH_SELECTOR: Final = ".swatches > .swatch"
COLOR_DROPDOWN_SELECTOR: Final = '[aria-label="color"]'
DROPDOWN_OPTION_SELECTOR: Final = "option"

# Ratings live in the common info column, shared by all variant modes
COMMON_INFO_SELECTOR: Final = ".col-lg-10"
RATINGS_SELECTOR: Final = ".ratings"
RATINGS_COUNT_SELECTOR: Final = ".ratings > p"
STAR_SELECTOR: Final = "span"
RATINGS_SUFFIX: Final = " reviews"

# default_price when no dropdown branch ran
UNSET_PRICE: Final = 0

# Playwright goto readiness
NAV_WAIT_UNTIL: Final = "load"

# JS snippets evaluated against matched elements
HREFS_JS: Final = "elements => elements.map(e => e.href)"
INNER_TEXT_JS: Final = "e => e.innerText"
INNER_TEXTS_JS: Final = "elements => elements.map(e => e.innerText)"
COUNT_JS: Final = "elements => elements.length"

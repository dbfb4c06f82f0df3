"""
Subcategory worker: one browser, every product of one subcategory, in order.

Runs concurrently with its sibling subcategories, so it launches its own
browser instead of sharing the driver's page.
"""

from __future__ import annotations

from playwright.async_api import BrowserType

from scraper.constants import PRODUCT_LINK_SELECTOR
from scraper.crawl.browser import launch_browser, open_page
from scraper.crawl.fields import extract_links
from scraper.crawl.navigation import navigate
from scraper.crawl.product import extract_product
from scraper.models import SubcategoryResult
from shared.config import AppConfig
from shared.logging import bind_request_context, get_logger

logger = get_logger(__name__)


async def scrape_subcategory(
    browser_type: BrowserType,
    subcategory_url: str,
    *,
    config: AppConfig,
) -> SubcategoryResult:
    """
    Scrape every product linked from subcategory_url.

    Products are visited sequentially on a single page. A product that fails
    is recorded in failed_urls; launch or subcategory navigation failures
    propagate to the caller.
    """
    bind_request_context(subcategory=subcategory_url)
    result = SubcategoryResult(url=subcategory_url)

    browser = await launch_browser(browser_type, headless=config.headless)
    try:
        page = await open_page(browser)
        await navigate(page, subcategory_url, timeout_ms=config.nav_timeout_ms)
        product_links = await extract_links(page, PRODUCT_LINK_SELECTOR)
        logger.info("subcategory_started", products_found=len(product_links))

        for product_link in product_links:
            product = await extract_product(
                page,
                product_link,
                nav_timeout_ms=config.nav_timeout_ms,
                field_timeout_ms=config.field_timeout_ms,
            )
            if product is None:
                result.failed_urls.append(product_link)
            else:
                result.products.append(product)
    finally:
        await browser.close()

    logger.info(
        "subcategory_scraped",
        url=subcategory_url,
        products=len(result.products),
        failed=len(result.failed_urls),
    )
    return result

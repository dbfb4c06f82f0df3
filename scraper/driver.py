"""
Crawl driver: catalog root → categories, one category at a time.

A single long-lived browser page discovers categories and subcategories;
subcategory workers launch their own browsers.
"""

from __future__ import annotations

from pathlib import Path

from playwright.async_api import BrowserType, async_playwright

from scraper.constants import CATEGORY_LINK_SELECTOR
from scraper.crawl import extract_links, launch_browser, navigate, open_page, scrape_category
from scraper.models import ResultCollection
from scraper.output import save_results
from shared.config import AppConfig
from shared.logging import get_logger

logger = get_logger(__name__)


async def run_crawl(browser_type: BrowserType, config: AppConfig) -> ResultCollection:
    """
    Crawl the whole catalog and return every extracted product.

    Categories run sequentially: category N+1 starts only after all of
    category N's subcategory workers have joined.
    """
    results = ResultCollection()
    logger.info("crawl_started", catalog_url=config.catalog_url)

    browser = await launch_browser(browser_type, headless=config.headless)
    try:
        page = await open_page(browser)
        await navigate(page, config.catalog_url, timeout_ms=config.nav_timeout_ms)
        category_links = await extract_links(page, CATEGORY_LINK_SELECTOR)
        logger.info("categories_found", count=len(category_links))

        for category_link in category_links:
            await scrape_category(page, category_link, browser_type, results, config=config)
    finally:
        await browser.close()

    logger.info(
        "crawl_completed",
        products=len(results),
        failed=len(results.failed_urls),
        subcategories=len(results.subcategories),
    )
    return results


async def crawl_catalog(config: AppConfig) -> tuple[ResultCollection, bool]:
    """
    Run the crawl on chromium and write the result file.

    Returns (results, written) where written is False if the output could
    not be saved.
    """
    async with async_playwright() as pw:
        results = await run_crawl(pw.chromium, config)

    written = save_results(Path(config.output_path), results)
    return results, written

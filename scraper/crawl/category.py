"""
Category orchestrator: fan out one worker per subcategory, then join.

The caller's page is used only for subcategory discovery; every worker
brings its own browser. The join is fail-fast: the first worker exception
cancels the remaining workers and propagates out of scrape_category.
"""

from __future__ import annotations

import asyncio
from typing import Optional

from playwright.async_api import BrowserType, Page

from scraper.constants import SUBCATEGORY_LINK_SELECTOR
from scraper.crawl.fields import extract_links
from scraper.crawl.navigation import navigate
from scraper.crawl.subcategory import scrape_subcategory
from scraper.models import ResultCollection, SubcategoryResult
from shared.config import AppConfig
from shared.logging import bind_request_context, get_logger, unbind_request_context

logger = get_logger(__name__)


async def _scrape_bounded(
    semaphore: Optional[asyncio.Semaphore],
    browser_type: BrowserType,
    subcategory_url: str,
    config: AppConfig,
) -> SubcategoryResult:
    if semaphore is None:
        return await scrape_subcategory(browser_type, subcategory_url, config=config)
    async with semaphore:
        return await scrape_subcategory(browser_type, subcategory_url, config=config)


async def _join_all(tasks: list[asyncio.Future]) -> list[SubcategoryResult]:
    """
    Wait for every worker; on the first failure cancel the rest and wait for
    their teardown before re-raising.
    """
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


async def scrape_category(
    page: Page,
    category_url: str,
    browser_type: BrowserType,
    results: ResultCollection,
    *,
    config: AppConfig,
) -> list[SubcategoryResult]:
    """
    Scrape every subcategory of category_url concurrently.

    Returns once all workers have finished. Batches are merged into results
    in subcategory discovery order after the join. If a worker fails, its
    siblings are cancelled and their browsers closed before the error
    propagates.
    """
    bind_request_context(category=category_url)
    try:
        await navigate(page, category_url, timeout_ms=config.nav_timeout_ms)
        subcategory_links = await extract_links(page, SUBCATEGORY_LINK_SELECTOR)
        logger.info("category_started", subcategories_found=len(subcategory_links))

        semaphore = None
        if config.max_concurrent_subcategories > 0:
            semaphore = asyncio.Semaphore(config.max_concurrent_subcategories)

        tasks = [
            asyncio.ensure_future(_scrape_bounded(semaphore, browser_type, link, config))
            for link in subcategory_links
        ]
        batches = await _join_all(tasks)

        for batch in batches:
            results.extend(batch)

        logger.info(
            "category_scraped",
            url=category_url,
            subcategories=len(batches),
            products=sum(len(batch.products) for batch in batches),
        )
    finally:
        unbind_request_context("category")
    return list(batches)

"""
Browser session creation for crawl workers (launch, context, page).
"""

from __future__ import annotations

from playwright.async_api import Browser, BrowserContext, BrowserType, Page

DESKTOP_VIEWPORT = {"width": 1920, "height": 1080}


async def launch_browser(browser_type: BrowserType, *, headless: bool = True) -> Browser:
    """Launch an isolated browser process; the caller owns and closes it."""
    return await browser_type.launch(headless=headless)


async def create_browser_context(browser: Browser) -> BrowserContext:
    """
    Create a desktop browser context.

    Uses stable UA, viewport, and timezone so pages render the same layout
    in every worker.
    """
    context = await browser.new_context(
        viewport=DESKTOP_VIEWPORT,
        user_agent=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/120.0.0.0 Safari/537.36"
        ),
        timezone_id="America/New_York",
        locale="en-US",
    )

    return context


async def open_page(browser: Browser) -> Page:
    """Open a page in a fresh desktop context on browser."""
    context = await create_browser_context(browser)
    return await context.new_page()

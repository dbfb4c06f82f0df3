"""
Page navigation: load a URL and fail loudly when the page is not usable.

No retries; a failed navigation raises NavigationError and the caller
decides whether that skips one product or aborts the subcategory.
"""

from __future__ import annotations

from typing import Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page, Response
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from scraper.constants import NAV_WAIT_UNTIL
from scraper.crawl.errors import NavigationError
from shared.logging import get_logger

logger = get_logger(__name__)

NAV_TIMEOUT_MS = 30_000


def _classify_failure(exc: BaseException) -> str:
    """Short reason for logging: navigation_timeout, net_err or navigation_error."""
    if isinstance(exc, PlaywrightTimeoutError):
        return "navigation_timeout"
    msg = (getattr(exc, "message", None) or str(exc)).lower()
    if "net::err_" in msg:
        return "net_err"
    return "navigation_error"


async def navigate(
    page: Page,
    url: str,
    *,
    timeout_ms: int = NAV_TIMEOUT_MS,
) -> Optional[Response]:
    """
    Navigate page to url and wait for the load event.

    Raises NavigationError on Playwright failures and on HTTP status >= 400.
    A None response (e.g. same-document navigation) counts as success.
    """
    try:
        response = await page.goto(url, wait_until=NAV_WAIT_UNTIL, timeout=timeout_ms)
    except PlaywrightError as e:
        reason = _classify_failure(e)
        logger.warning("navigation.failed", url=url, reason=reason, error=str(e))
        raise NavigationError(url, reason) from e

    if response is not None and response.status >= 400:
        reason = f"status_{response.status}"
        logger.warning("navigation.failed", url=url, reason=reason, status=response.status)
        raise NavigationError(url, reason)

    return response

"""
Crawl exceptions.

NavigationError above the product level is infrastructural and propagates;
inside the product extractor every error is caught and the product skipped.
"""

from __future__ import annotations


class ScraperError(Exception):
    """Base class for crawl failures."""


class NavigationError(ScraperError):
    """Raised when a page could not be loaded."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Navigation to {url} failed: {reason}")
        self.url = url
        self.reason = reason


class FieldNotFoundError(ScraperError):
    """Raised when a required product field is missing from the page."""

    def __init__(self, selector: str) -> None:
        super().__init__(f"No element matches {selector!r}")
        self.selector = selector

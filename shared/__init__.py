"""
Shared infrastructure for the catalog scraper.

- `shared.config` for environment-based configuration
- `shared.logging` for structlog-based structured logging

Crawl code should treat `shared/` as infrastructure and avoid introducing
scraping logic here.
"""

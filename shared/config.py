"""
Environment-based configuration for the catalog scraper.

This module exposes a small, typed configuration surface for the crawl
process. All values are sourced from environment variables with sensible
defaults that point at the public webscraper.io test catalog.

Local development can provide overrides through a `.env` file, which the
entry point loads with python-dotenv before reading this config.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal, Optional

Environment = Literal["local", "dev", "staging", "prod"]

DEFAULT_CATALOG_URL = "https://webscraper.io/test-sites/e-commerce/allinone"
DEFAULT_OUTPUT_PATH = "result.json"


@dataclass(frozen=True)
class AppConfig:
    """
    Top-level application configuration.

    Cross-cutting settings (logging) plus the crawl knobs: where to start,
    where to write, and how long Playwright may wait per call.
    """

    environment: Environment
    log_level: str

    # Optional file path for structured JSON logs; when set, logs are written
    # to file (and stdout if log_stdout).
    log_file: Optional[str]
    # When True, logs go to stdout. When False, only file (if LOG_FILE set). Default True.
    log_stdout: bool

    # Crawl target and output artifact
    catalog_url: str
    output_path: str

    # Browser behavior
    headless: bool
    nav_timeout_ms: int
    field_timeout_ms: int

    # 0 means one browser per subcategory with no cap
    max_concurrent_subcategories: int

    @classmethod
    def from_env(cls) -> "AppConfig":
        """
        Construct configuration from environment variables.

        All fields have defaults suitable for crawling the public test catalog.
        """

        environment = os.getenv("APP_ENV", "local")

        if environment not in {"local", "dev", "staging", "prod"}:
            raise ValueError(f"Unsupported APP_ENV value: {environment!r}")

        def _bool_env(name: str, default: bool) -> bool:
            raw = (os.getenv(name) or str(default)).strip().lower()
            return raw in ("true", "1", "yes")

        def _int_env(name: str, default: int) -> int:
            raw = (os.getenv(name) or "").strip()
            if not raw:
                return default
            try:
                return int(raw)
            except ValueError:
                return default

        return cls(
            environment=environment,  # type: ignore[arg-type]
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE") or None,
            log_stdout=_bool_env("LOG_STDOUT", True),
            catalog_url=os.getenv("CATALOG_URL") or DEFAULT_CATALOG_URL,
            output_path=os.getenv("OUTPUT_PATH") or DEFAULT_OUTPUT_PATH,
            headless=_bool_env("HEADLESS", True),
            nav_timeout_ms=_int_env("NAV_TIMEOUT_MS", 30_000),
            field_timeout_ms=_int_env("FIELD_TIMEOUT_MS", 5_000),
            max_concurrent_subcategories=max(0, _int_env("MAX_CONCURRENT_SUBCATEGORIES", 0)),
        )


def get_config() -> AppConfig:
    """
    Helper to obtain the current configuration.

    The entry point builds one instance at startup and passes it explicitly
    through the crawl; tests construct their own.
    """

    return AppConfig.from_env()

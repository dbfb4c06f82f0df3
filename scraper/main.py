"""
Entry point: crawl the catalog and export the products to a JSON file.

Usage: python -m scraper.main [--url <catalog_url>] [--output result.json] [--no-headless]
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import logging
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from scraper.driver import crawl_catalog
from shared.config import AppConfig, get_config
from shared.logging import configure_logging, get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Scrape the e-commerce test catalog")
    parser.add_argument("--url", help="Catalog root URL (overrides CATALOG_URL)")
    parser.add_argument("--output", help="Output JSON path (overrides OUTPUT_PATH)")
    parser.add_argument(
        "--no-headless",
        action="store_true",
        help="Show browser windows. Use for local debugging.",
    )
    parser.add_argument(
        "--max-concurrency",
        type=int,
        help="Cap on concurrent subcategory browsers (0 = unbounded)",
    )
    return parser


def apply_cli_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Return config with any CLI flags applied on top of the environment."""
    overrides = {}
    if args.url:
        overrides["catalog_url"] = args.url
    if args.output:
        overrides["output_path"] = args.output
    if args.no_headless:
        overrides["headless"] = False
    if args.max_concurrency is not None:
        overrides["max_concurrent_subcategories"] = max(0, args.max_concurrency)
    return dataclasses.replace(config, **overrides)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main CLI entry point."""
    load_dotenv()
    args = build_parser().parse_args(argv)
    config = apply_cli_overrides(get_config(), args)

    configure_logging(
        level=logging.getLevelName(config.log_level.upper()),
        log_file=config.log_file,
        log_stdout=config.log_stdout,
    )
    logger = get_logger(__name__)

    try:
        results, written = asyncio.run(crawl_catalog(config))
    except Exception as e:
        logger.error("crawl_failed", error=str(e), error_type=type(e).__name__)
        raise

    print("-" * 53)
    print(f"Done parsing: {len(results)} products, {len(results.failed_urls)} skipped")
    if not written:
        print(f"ERROR: could not write {config.output_path}", file=sys.stderr)
        sys.exit(1)
    print(f"Exported the products to {config.output_path}")


if __name__ == "__main__":
    main()

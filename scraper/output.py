"""
Result output: serialize the collected products and write them to disk.

The whole collection is written once, at the end of the crawl.
"""

from __future__ import annotations

import hashlib
import json
import math
from pathlib import Path
from typing import Any, Iterable

from scraper.models import Product, ResultCollection
from shared.logging import get_logger

logger = get_logger(__name__)


def _json_safe(value: Any) -> Any:
    """NaN/inf are not valid JSON; write them as null."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def serialize_products(products: Iterable[Product]) -> str:
    """Serialize products as a JSON array, one object per product."""
    rows = []
    for product in products:
        row = product.to_dict()
        row["number_of_ratings"] = _json_safe(row["number_of_ratings"])
        rows.append(row)
    return json.dumps(rows, ensure_ascii=False, allow_nan=False)


def write_results(path: Path, products: Iterable[Product]) -> tuple[int, str]:
    """
    Write products as a JSON array (UTF-8).

    Returns (size_bytes, checksum). May raise OSError on write failure.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    content = serialize_products(products).encode("utf-8")
    path.write_bytes(content)
    return len(content), hashlib.md5(content).hexdigest()


def save_results(path: Path, collection: ResultCollection) -> bool:
    """
    Write the collection to path; log and return False when the write fails.

    The in-memory collection is never modified.
    """
    try:
        size, checksum = write_results(path, collection)
    except OSError as e:
        logger.error(
            "results_write_failed",
            path=str(path),
            error=str(e),
            error_type=type(e).__name__,
        )
        return False

    logger.info(
        "results_written",
        path=str(path),
        products=len(collection),
        size_bytes=size,
        checksum=checksum,
    )
    return True

"""
Crawl records: products, per-subcategory batches, and the result collection.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Union

Price = Union[str, int]


class VariantMode(str, Enum):
    """How a product page presents purchasable variants."""

    NONE = "none"
    SWATCH = "swatch"
    DROPDOWN = "dropdown"


@dataclass(frozen=True)
class ProductInfo:
    name: str
    description: str
    url: str


@dataclass(frozen=True)
class Product:
    """
    One extracted product page.

    options maps swatch label to price; default_price is the dropdown-page
    price or UNSET_PRICE (0) when the page had no color dropdown.
    number_of_ratings may be NaN when the ratings label is not numeric.
    """

    info: ProductInfo
    options: Mapping[str, str] = field(default_factory=dict, hash=False)
    default_price: Price = 0
    colors: tuple[str, ...] = ()
    number_of_ratings: float = math.nan
    number_of_stars: int = 0

    def __post_init__(self) -> None:
        # read-only copy; the caller's dict stays independent
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))
        object.__setattr__(self, "colors", tuple(self.colors))

    def to_dict(self) -> dict[str, Any]:
        return {
            "info": {
                "name": self.info.name,
                "description": self.info.description,
                "url": self.info.url,
            },
            "options": dict(self.options),
            "default_price": self.default_price,
            "colors": list(self.colors),
            "number_of_ratings": self.number_of_ratings,
            "number_of_stars": self.number_of_stars,
        }


@dataclass
class SubcategoryResult:
    """Batch produced by one subcategory worker, in product visit order."""

    url: str
    products: list[Product] = field(default_factory=list)
    failed_urls: list[str] = field(default_factory=list)

    @property
    def discovered(self) -> int:
        return len(self.products) + len(self.failed_urls)


class ResultCollection:
    """
    Append-only collection of every product scraped during one crawl.

    Batches are merged whole, so products from one subcategory stay
    contiguous and in visit order.
    """

    def __init__(self) -> None:
        self._products: list[Product] = []
        self._failed_urls: list[str] = []
        self._subcategories: list[str] = []

    def extend(self, batch: SubcategoryResult) -> None:
        self._products.extend(batch.products)
        self._failed_urls.extend(batch.failed_urls)
        self._subcategories.append(batch.url)

    @property
    def products(self) -> list[Product]:
        return list(self._products)

    @property
    def failed_urls(self) -> list[str]:
        return list(self._failed_urls)

    @property
    def subcategories(self) -> list[str]:
        return list(self._subcategories)

    def to_list(self) -> list[dict[str, Any]]:
        return [product.to_dict() for product in self._products]

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

"""Application service: storefront product listings (query).

Reads go through a tag-keyed cache.  Every product mutation invalidates
both tags used here, so listings are recomputed on the next read.
"""

from __future__ import annotations

from storefront.application.dto import ProductGridSection
from storefront.application.ports import HOME_TAG, PRODUCTS_TAG, ReadThroughCache
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import (
    ORDER_BY_NAME,
    ORDER_BY_NEWEST,
    ProductRepository,
)

NEWEST_LIMIT = 6


class BrowseProductsHandler:

    def __init__(self, product_repo: ProductRepository, cache: ReadThroughCache) -> None:
        self._product_repo = product_repo
        self._cache = cache

    def catalog(self) -> list[Product]:
        """Every product available for purchase, by name."""
        return self._cache.get_or_load(
            PRODUCTS_TAG,
            "catalog",
            lambda: self._product_repo.list_all(
                available_only=True, order_by=ORDER_BY_NAME
            ),
        )

    def newest(self, limit: int = NEWEST_LIMIT) -> list[Product]:
        return self._cache.get_or_load(
            HOME_TAG,
            f"newest:{limit}",
            lambda: self._product_repo.list_all(
                available_only=True, order_by=ORDER_BY_NEWEST
            )[:limit],
        )

    def home(self) -> list[ProductGridSection]:
        return [
            ProductGridSection(title="Newest", products=self.newest()),
            ProductGridSection(title="All Products", products=self.catalog()),
        ]

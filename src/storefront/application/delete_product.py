"""Application service: Delete Product use case.

Removes the record first, then both of its assets.  A failed unlink
propagates; the record is already gone by then.
"""

from __future__ import annotations

import logging

from storefront.application.dto import MutationResult, NotFound, Success
from storefront.application.ports import CacheInvalidator, invalidate_product_views
from storefront.domain.repository.asset_store import AssetArea, AssetStore
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        asset_store: AssetStore,
        cache: CacheInvalidator,
    ) -> None:
        self._product_repo = product_repo
        self._asset_store = asset_store
        self._cache = cache

    def handle(self, product_id: str) -> MutationResult:
        product = self._product_repo.delete(product_id)
        if product is None:
            return NotFound(product_id)

        self._asset_store.delete(product.file_path, AssetArea.PRIVATE)
        self._asset_store.delete(product.image_path, AssetArea.PUBLIC)
        logger.info("Deleted product %s", product_id)

        invalidate_product_views(self._cache)
        return Success(product_id)

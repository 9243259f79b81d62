"""Application service: Toggle Availability use case."""

from __future__ import annotations

import logging

from storefront.application.dto import MutationResult, NotFound, Success
from storefront.application.ports import CacheInvalidator, invalidate_product_views
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ToggleAvailabilityHandler:

    def __init__(self, product_repo: ProductRepository, cache: CacheInvalidator) -> None:
        self._product_repo = product_repo
        self._cache = cache

    def handle(self, product_id: str, is_available: bool) -> MutationResult:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            return NotFound(product_id)

        product.set_availability(is_available)
        self._product_repo.save(product)
        logger.info("Product %s available for purchase: %s", product_id, is_available)

        invalidate_product_views(self._cache)
        return Success(product_id)

"""Application service: Update Product use case."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from storefront.application.dto import (
    ADMIN_PRODUCTS_PATH,
    MutationResult,
    NotFound,
    Success,
    Unauthenticated,
    ValidationFailed,
)
from storefront.application.ports import (
    CacheInvalidator,
    SessionProvider,
    invalidate_product_views,
)
from storefront.application.schemas import ProductUpdateForm, parse_form
from storefront.domain.model.value_objects import Upload
from storefront.domain.repository.asset_store import AssetArea, AssetStore
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        asset_store: AssetStore,
        session: SessionProvider,
        cache: CacheInvalidator,
    ) -> None:
        self._product_repo = product_repo
        self._asset_store = asset_store
        self._session = session
        self._cache = cache

    def handle(self, product_id: str, form: Mapping[str, Any]) -> MutationResult:
        """Apply an edit form to an existing product.

        A submitted asset replaces the current one: the old blob is
        deleted before the new one is written.  Omitted or empty assets
        keep their current paths.
        """
        result = parse_form(ProductUpdateForm, form)
        if not result.ok:
            return ValidationFailed(result.errors)
        data = result.data

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            return NotFound(product_id)

        if self._session.current_user() is None:
            return Unauthenticated()

        file_path = self._replace(product.file_path, data.new_file, AssetArea.PRIVATE)
        image_path = self._replace(product.image_path, data.new_image, AssetArea.PUBLIC)

        product.update_details(
            name=data.name,
            description=data.description,
            price_in_cents=data.price_in_cents,
            category=data.category,
        )
        product.replace_assets(file_path=file_path, image_path=image_path)
        self._product_repo.save(product)
        logger.info("Updated product %s", product.id)

        invalidate_product_views(self._cache)
        return Success(product.id, redirect_to=ADMIN_PRODUCTS_PATH)

    def _replace(self, current: str, upload: Upload | None, area: AssetArea) -> str:
        if upload is None:
            return current
        self._asset_store.delete(current, area)
        return self._asset_store.save(upload, area)

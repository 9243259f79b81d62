"""Application service: Add Product use case."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from storefront.application.dto import (
    ADMIN_PRODUCTS_PATH,
    MutationResult,
    Success,
    Unauthenticated,
    ValidationFailed,
)
from storefront.application.ports import (
    CacheInvalidator,
    SessionProvider,
    invalidate_product_views,
)
from storefront.application.schemas import ProductForm, parse_form
from storefront.domain.model.product import Product
from storefront.domain.repository.asset_store import AssetArea, AssetStore
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

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

    def handle(self, form: Mapping[str, Any]) -> MutationResult:
        """Create a product owned by the signed-in admin.

        Nothing touches disk or the repository until the form is valid
        and a user is signed in.  If saving the record fails after the
        assets were written, the assets are left behind.
        """
        result = parse_form(ProductForm, form)
        if not result.ok:
            return ValidationFailed(result.errors)
        data = result.data

        user = self._session.current_user()
        if user is None:
            return Unauthenticated()

        file_path = self._asset_store.save(data.file, AssetArea.PRIVATE)
        image_path = self._asset_store.save(data.image, AssetArea.PUBLIC)

        product = Product.create(
            name=data.name,
            description=data.description,
            price_in_cents=data.price_in_cents,
            category=data.category,
            file_path=file_path,
            image_path=image_path,
            user_id=user.user_id,
        )
        self._product_repo.add(product)
        logger.info("Created product %s (%r) for user %s",
                    product.id, product.name, user.user_id)

        invalidate_product_views(self._cache)
        return Success(product.id, redirect_to=ADMIN_PRODUCTS_PATH)

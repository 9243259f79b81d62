"""Product aggregate.

A product pairs a purchasable file with a public preview image. New
products are never purchasable or approved until an admin says so.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import ValidationError


@dataclass
class Product:
    """A product in the catalog.

    Use ``Product.create()`` for new products — it assigns the id and
    the lifecycle defaults.  The ``__init__`` stays simple so the
    repository can reconstitute persisted products without re-validating.
    """

    id: str
    name: str
    description: str
    price_in_cents: int
    category: str
    file_path: str
    image_path: str
    user_id: str
    is_available_for_purchase: bool = False
    is_approved_by_admin: bool = False
    created_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    # --- Factory --------------------------------------------------------------

    @classmethod
    def create(
        cls,
        *,
        name: str,
        description: str,
        price_in_cents: int,
        category: str,
        file_path: str,
        image_path: str,
        user_id: str,
    ) -> Product:
        product = cls(
            id=uuid.uuid4().hex,
            name=name,
            description=description,
            price_in_cents=price_in_cents,
            category=category,
            file_path=file_path,
            image_path=image_path,
            user_id=user_id,
        )
        product.update_details(
            name=name,
            description=description,
            price_in_cents=price_in_cents,
            category=category,
        )
        return product

    # --- Mutations ------------------------------------------------------------

    def update_details(
        self,
        *,
        name: str,
        description: str,
        price_in_cents: int,
        category: str,
    ) -> None:
        if not name:
            raise ValidationError("Product name is required")
        if not description:
            raise ValidationError("Product description is required")
        if not category:
            raise ValidationError("Product category is required")
        if price_in_cents < 1:
            raise ValidationError("Product price must be at least 1 cent")

        self.name = name
        self.description = description
        self.price_in_cents = price_in_cents
        self.category = category.lower()

    def replace_assets(self, *, file_path: str, image_path: str) -> None:
        self.file_path = file_path
        self.image_path = image_path

    def set_availability(self, is_available: bool) -> None:
        self.is_available_for_purchase = is_available

    def approve(self) -> None:
        """Mark the product as approved. There is no way to un-approve."""
        self.is_approved_by_admin = True

    # --- Display --------------------------------------------------------------

    @property
    def price_display(self) -> str:
        dollars, cents = divmod(self.price_in_cents, 100)
        return f"${dollars}.{cents:02d}"

"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import (
    ORDER_BY_NAME,
    ProductRepository,
    sort_products,
)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def add(self, product: Product) -> None:
        products = self._load()
        if product.id in products:
            raise ValueError(f"Product '{product.id}' already exists")
        products[product.id] = product
        self._persist(products)

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def list_all(
        self, *, available_only: bool = False, order_by: str = ORDER_BY_NAME
    ) -> list[Product]:
        products = [
            p for p in self._load().values()
            if p.is_available_for_purchase or not available_only
        ]
        return sort_products(products, order_by)

    def save(self, product: Product) -> None:
        products = self._load()
        if product.id not in products:
            raise KeyError(product.id)
        products[product.id] = product
        self._persist(products)

    def delete(self, product_id: str) -> Product | None:
        products = self._load()
        product = products.pop(product_id, None)
        if product is not None:
            self._persist(products)
        return product

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "price_in_cents": product.price_in_cents,
            "category": product.category,
            "file_path": product.file_path,
            "image_path": product.image_path,
            "user_id": product.user_id,
            "is_available_for_purchase": product.is_available_for_purchase,
            "is_approved_by_admin": product.is_approved_by_admin,
            "created_at": product.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            description=raw["description"],
            price_in_cents=raw["price_in_cents"],
            category=raw["category"],
            file_path=raw["file_path"],
            image_path=raw["image_path"],
            user_id=raw["user_id"],
            is_available_for_purchase=raw.get("is_available_for_purchase", False),
            is_approved_by_admin=raw.get("is_approved_by_admin", False),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict[str, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {item["id"]: self._to_domain(item) for item in raw}

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [self._to_raw(p) for p in products.values()]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")

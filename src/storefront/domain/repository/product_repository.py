"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory)
live in the infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product

# Orderings accepted by ``ProductRepository.list_all``.
ORDER_BY_NAME = "name"
ORDER_BY_NEWEST = "-created_at"


class ProductRepository(ABC):

    @abstractmethod
    def add(self, product: Product) -> None:
        """Persist a new product."""

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(
        self, *, available_only: bool = False, order_by: str = ORDER_BY_NAME
    ) -> list[Product]:
        """Return products, optionally only those available for purchase."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist changes to an existing product."""

    @abstractmethod
    def delete(self, product_id: str) -> Product | None:
        """Remove a product and return it, or None if it did not exist."""


def sort_products(products: list[Product], order_by: str) -> list[Product]:
    """Apply one of the supported orderings to *products*."""
    if order_by == ORDER_BY_NAME:
        return sorted(products, key=lambda p: p.name)
    if order_by == ORDER_BY_NEWEST:
        return sorted(products, key=lambda p: p.created_at, reverse=True)
    raise ValueError(f"Unsupported ordering: {order_by!r}")

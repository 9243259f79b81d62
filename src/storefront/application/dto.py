"""Data Transfer Objects — plain containers that cross layer boundaries.

Every mutating use case returns one of the ``MutationResult`` variants
so callers branch on the outcome instead of catching navigation signals.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from storefront.domain.model.product import Product

ADMIN_PRODUCTS_PATH = "/admin/products"
SIGN_IN_PATH = "/sign-in"


@dataclass(frozen=True)
class Success:
    product_id: str
    redirect_to: str | None = None


@dataclass(frozen=True)
class ValidationFailed:
    """Per-field messages, keyed by submitted form field name."""

    errors: dict[str, list[str]] = field(default_factory=dict)


@dataclass(frozen=True)
class NotFound:
    product_id: str


@dataclass(frozen=True)
class Unauthenticated:
    redirect_to: str = SIGN_IN_PATH


MutationResult = Union[Success, ValidationFailed, NotFound, Unauthenticated]


@dataclass(frozen=True)
class ProductGridSection:
    """Output: a titled grid of products on the storefront home page."""

    title: str
    products: list[Product]

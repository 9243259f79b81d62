"""Collaborators the use cases depend on, other than repositories."""

from __future__ import annotations

from typing import Callable, Protocol, TypeVar

from storefront.domain.model.value_objects import SessionUser

T = TypeVar("T")

# Cache tags touched by every product mutation.
PRODUCTS_TAG = "/products"
HOME_TAG = "/"


class SessionProvider(Protocol):
    def current_user(self) -> SessionUser | None:
        """Return the signed-in user, or None."""
        ...


class CacheInvalidator(Protocol):
    def invalidate(self, tag: str) -> None:
        """Mark everything cached under *tag* as stale."""
        ...


def invalidate_product_views(cache: CacheInvalidator) -> None:
    cache.invalidate(PRODUCTS_TAG)
    cache.invalidate(HOME_TAG)


class ReadThroughCache(CacheInvalidator, Protocol):
    def get_or_load(self, tag: str, key: str, loader: Callable[[], T]) -> T:
        """Return the value cached under (*tag*, *key*), loading it on a miss."""
        ...

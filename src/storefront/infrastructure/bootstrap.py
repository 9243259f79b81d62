"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from storefront.infrastructure.cache import TaggedCache
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_session_store import (
    JsonSessionStore,
)
from storefront.infrastructure.storage.local_asset_store import LocalAssetStore


@lru_cache(maxsize=None)
def settings() -> Settings:
    return Settings.from_env()


@lru_cache(maxsize=None)
def cache() -> TaggedCache:
    # One cache per process; product commands invalidate it on every write.
    return TaggedCache()


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().products_file)


def asset_store() -> LocalAssetStore:
    cfg = settings()
    return LocalAssetStore(storage_root=cfg.storage_root, public_root=cfg.public_dir)


def session_store() -> JsonSessionStore:
    return JsonSessionStore(settings().session_file)

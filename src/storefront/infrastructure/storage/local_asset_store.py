"""Local-filesystem implementation of AssetStore.

Private assets live under ``<storage_root>/products`` and are recorded
as ``products/<name>``.  Public assets live under
``<public_root>/products`` and are recorded as ``/products/<name>`` so
the recorded path doubles as the URL path.
"""

from __future__ import annotations

import logging
import uuid
from pathlib import Path, PurePosixPath

from storefront.domain.model.value_objects import Upload
from storefront.domain.repository.asset_store import AssetArea, AssetStore

logger = logging.getLogger(__name__)

ASSET_DIR = "products"


class LocalAssetStore(AssetStore):

    def __init__(self, storage_root: Path, public_root: Path) -> None:
        self._storage_root = storage_root
        self._public_root = public_root

    # --- AssetStore interface -------------------------------------------------

    def save(self, upload: Upload, area: AssetArea) -> str:
        directory = self._root(area) / ASSET_DIR
        directory.mkdir(parents=True, exist_ok=True)

        name = f"{uuid.uuid4()}-{_basename(upload.filename)}"
        (directory / name).write_bytes(upload.data)

        recorded = f"{ASSET_DIR}/{name}"
        if area is AssetArea.PUBLIC:
            recorded = "/" + recorded
        logger.debug("Stored %d bytes at %s (%s)", upload.size, recorded, area.value)
        return recorded

    def delete(self, path: str, area: AssetArea) -> None:
        self.resolve(path, area).unlink()
        logger.debug("Removed %s (%s)", path, area.value)

    # --- Helpers --------------------------------------------------------------

    def resolve(self, path: str, area: AssetArea) -> Path:
        """Map a recorded path to its location on disk."""
        return self._root(area) / path.lstrip("/")

    def _root(self, area: AssetArea) -> Path:
        if area is AssetArea.PUBLIC:
            return self._public_root
        return self._storage_root


def _basename(filename: str) -> str:
    # Browsers may send a full client-side path; keep only the last part.
    name = PurePosixPath(filename.replace("\\", "/")).name
    return name or "upload"

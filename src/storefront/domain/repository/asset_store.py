"""Abstract storage for product assets.

Purchasable files go to a private area; preview images go to a public
area that is served as-is. Recorded paths are relative to those areas.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from storefront.domain.model.value_objects import Upload


class AssetArea(Enum):
    PRIVATE = "private"
    PUBLIC = "public"


class AssetStore(ABC):

    @abstractmethod
    def save(self, upload: Upload, area: AssetArea) -> str:
        """Write *upload* under a freshly generated name and return its path."""

    @abstractmethod
    def delete(self, path: str, area: AssetArea) -> None:
        """Remove a previously saved asset.

        Raises FileNotFoundError if nothing is stored at *path*.
        """

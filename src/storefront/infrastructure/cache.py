"""In-process read-through cache keyed by tag.

A tag names a logical view (``"/products"``, ``"/"``).  Several entries
can live under one tag; invalidating the tag drops all of them.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TaggedCache:

    def __init__(self) -> None:
        self._entries: dict[str, dict[str, Any]] = {}

    def get_or_load(self, tag: str, key: str, loader: Callable[[], T]) -> T:
        entries = self._entries.setdefault(tag, {})
        if key not in entries:
            logger.debug("Cache miss %s[%s]", tag, key)
            entries[key] = loader()
        return entries[key]

    def invalidate(self, tag: str) -> None:
        if self._entries.pop(tag, None) is not None:
            logger.debug("Invalidated cache tag %s", tag)

    def is_cached(self, tag: str, key: str) -> bool:
        return key in self._entries.get(tag, {})

"""Bounded LRU cache of catalog messages.

The cache is a recency index over part of the catalog, not a copy of it:
values are the catalog's own Message objects and the catalog stays the
source of truth.

Architecture:
    - LRU order kept by an OrderedDict (end = most recently used)
    - Eviction loops while over capacity, so shrinking below the current
      size is safe
    - No internal locking; Bundle serializes access under its write lock

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .message import Message

__all__ = ["LRUCache"]

logger = logging.getLogger(__name__)


class LRUCache:
    """LRU cache mapping catalog keys to Message objects.

    Invariant: ``len(cache) <= cache.capacity`` after every operation.

    Example:
        >>> cache = LRUCache(2)
        >>> cache.put("a", Message("a", "A"))
        >>> cache.put("b", Message("b", "B"))
        >>> cache.get("a").value
        'A'
        >>> cache.put("c", Message("c", "C"))  # evicts "b"
        >>> cache.get("b") is None
        True
    """

    __slots__ = ("_capacity", "_entries", "_hits", "_misses")

    def __init__(self, capacity: int) -> None:
        """Initialize an empty cache.

        Raises:
            ValueError: If capacity is not positive
        """
        if capacity <= 0:
            msg = "capacity must be positive"
            raise ValueError(msg)
        self._entries: OrderedDict[str, Message] = OrderedDict()
        self._capacity = capacity
        self._hits = 0
        self._misses = 0

    def get(self, key: str) -> Message | None:
        """Return the cached message and mark it most recently used.

        A miss returns None and leaves the order unchanged.
        """
        message = self._entries.get(key)
        if message is None:
            self._misses += 1
            return None
        self._entries.move_to_end(key)
        self._hits += 1
        return message

    def put(self, key: str, message: Message) -> None:
        """Insert or replace an entry as most recently used, then evict."""
        if key in self._entries:
            self._entries.move_to_end(key)
        self._entries[key] = message
        self._evict(self._capacity)

    def remove(self, key: str) -> bool:
        """Drop an entry. Returns True if it was present."""
        return self._entries.pop(key, None) is not None

    def resize(self, capacity: int) -> None:
        """Change capacity, evicting least recently used entries to fit.

        Raises:
            ValueError: If capacity is not positive
        """
        if capacity <= 0:
            msg = "capacity must be positive"
            raise ValueError(msg)
        self._evict(capacity)
        if capacity != self._capacity:
            logger.debug("Cache resized: %d -> %d", self._capacity, capacity)
        self._capacity = capacity

    def clear(self) -> None:
        """Remove all entries and reset statistics."""
        self._entries.clear()
        self._hits = 0
        self._misses = 0

    def _evict(self, capacity: int) -> None:
        while len(self._entries) > capacity:
            self._entries.popitem(last=False)

    def keys(self) -> list[str]:
        """Cached keys from least to most recently used."""
        return list(self._entries)

    def get_stats(self) -> dict[str, int | float]:
        """Get cache statistics.

        Returns:
            Dict with keys size, capacity, hits, misses and hit_rate
            (percentage, 0.0-100.0)
        """
        total = self._hits + self._misses
        hit_rate = (self._hits / total * 100) if total > 0 else 0.0
        return {
            "size": len(self._entries),
            "capacity": self._capacity,
            "hits": self._hits,
            "misses": self._misses,
            "hit_rate": round(hit_rate, 2),
        }

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    @property
    def capacity(self) -> int:
        """Maximum number of entries."""
        return self._capacity

"""Cache configuration for Bundle.

A single frozen dataclass holding the message-cache sizing policy.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from flati18n.constants import (
    INITIAL_CACHE_CAPACITY,
    LARGE_CATALOG_DIVISOR,
    MIN_RESIZED_CAPACITY,
    SMALL_CATALOG_DIVISOR,
    SMALL_CATALOG_LIMIT,
)

__all__ = ["CacheConfig"]


@dataclass(frozen=True, slots=True)
class CacheConfig:
    """Immutable sizing policy for a Bundle's message cache.

    The cache starts at ``initial_capacity``. After every resolution that
    follows a load, capacity is recomputed from the catalog size ``T``:

        T <= small_catalog_limit: T // small_divisor, but only if that is
            at least min_capacity (otherwise capacity is left alone)
        T >  small_catalog_limit: T // large_divisor

    Attributes:
        initial_capacity: Capacity of a new bundle's cache (default: 64)
        small_catalog_limit: Largest catalog using small_divisor (default: 1024)
        small_divisor: Divisor for small catalogs (default: 3)
        large_divisor: Divisor for large catalogs (default: 4)
        min_capacity: Smallest capacity a small catalog may resize to (default: 64)

    Example:
        >>> CacheConfig().capacity_for(300)
        100
        >>> CacheConfig().capacity_for(100) is None
        True
        >>> CacheConfig().capacity_for(2000)
        500
    """

    initial_capacity: int = INITIAL_CACHE_CAPACITY
    small_catalog_limit: int = SMALL_CATALOG_LIMIT
    small_divisor: int = SMALL_CATALOG_DIVISOR
    large_divisor: int = LARGE_CATALOG_DIVISOR
    min_capacity: int = MIN_RESIZED_CAPACITY

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If any field is not positive
        """
        for name in (
            "initial_capacity",
            "small_catalog_limit",
            "small_divisor",
            "large_divisor",
            "min_capacity",
        ):
            if getattr(self, name) <= 0:
                msg = f"{name} must be positive"
                raise ValueError(msg)

    def capacity_for(self, total: int) -> int | None:
        """New cache capacity for a catalog of ``total`` messages.

        Returns:
            Capacity to resize to, or None to keep the current capacity
        """
        if total <= self.small_catalog_limit:
            capacity = total // self.small_divisor
            return capacity if capacity >= self.min_capacity else None
        return max(total // self.large_divisor, 1)

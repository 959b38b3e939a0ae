"""Shared constants for flati18n.

Centralized configuration constants used across the loading, template and
runtime packages. Placing constants here avoids circular imports.

Constants are grouped by domain:
- Depth limits: Recursion protection for decoded data conversion
- Cache policy: Defaults for the adaptive LRU message cache
- Formats: File extensions the loader recognizes
- Template output: Placeholder text for missing values

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Cache policy
    "INITIAL_CACHE_CAPACITY",
    "SMALL_CATALOG_LIMIT",
    "SMALL_CATALOG_DIVISOR",
    "LARGE_CATALOG_DIVISOR",
    "MIN_RESIZED_CAPACITY",
    # Formats
    "RECOGNIZED_EXTENSIONS",
    # Template output
    "NO_VALUE",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting depth accepted when converting decoder output into Values.
# Real translation files nest a handful of levels; 100 keeps recursion far
# below the interpreter limit.
MAX_DEPTH: int = 100

# ============================================================================
# CACHE POLICY
# ============================================================================

# Capacity of the message cache when a Bundle is created.
INITIAL_CACHE_CAPACITY: int = 64

# Catalogs at or below this size use SMALL_CATALOG_DIVISOR, larger ones
# use LARGE_CATALOG_DIVISOR.
SMALL_CATALOG_LIMIT: int = 1024
SMALL_CATALOG_DIVISOR: int = 3
LARGE_CATALOG_DIVISOR: int = 4

# Small catalogs never shrink the cache below this many entries.
MIN_RESIZED_CAPACITY: int = 64

# ============================================================================
# FORMATS
# ============================================================================

RECOGNIZED_EXTENSIONS: tuple[str, ...] = ("yaml", "yml", "json", "toml")

# ============================================================================
# TEMPLATE OUTPUT
# ============================================================================

# Rendered in place of a field that is missing from the parameters.
NO_VALUE: str = "<no value>"

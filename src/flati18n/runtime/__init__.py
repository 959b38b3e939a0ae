"""Catalog runtime package.

Provides the Bundle API, the LRU message cache and lazy message compilation.
Depends on the loading and template packages.

Python 3.13+.
"""

from .bundle import Bundle, NotFoundHandler
from .cache import LRUCache
from .cache_config import CacheConfig
from .message import Compiled, CompileState, Message, Stale, Uncompiled
from .resolver import Params, SupportsWrite, merge_params, render
from .rwlock import RWLock

__all__ = [
    "Bundle",
    "CacheConfig",
    "CompileState",
    "Compiled",
    "LRUCache",
    "Message",
    "NotFoundHandler",
    "Params",
    "RWLock",
    "Stale",
    "SupportsWrite",
    "Uncompiled",
    "merge_params",
    "render",
]

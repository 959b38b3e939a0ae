"""Key flattening for decoded translation data.

Nested data becomes flat catalog keys:
    map entry  -> "<prefix>.<key>" (or "<key>" at the root)
    list item  -> "<prefix>[<index>]"

Example:
    >>> dict(flatten("", to_value({"a": {"b": ["x", 2]}})))
    {'a.b[0]': 'x', 'a.b[1]': '2'}

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from flati18n.core.value import Bool, List, Map, Null, Number, String, Value

if TYPE_CHECKING:
    from collections.abc import Iterator

__all__ = ["flatten", "join_key"]


def join_key(prefix: str, key: str) -> str:
    """Join a map key onto a prefix with a dot (no dot for an empty prefix)."""
    return f"{prefix}.{key}" if prefix else key


def flatten(prefix: str, value: Value) -> Iterator[tuple[str, str]]:
    """Yield (key, text) pairs for every string or numeric leaf.

    Pairs are produced in traversal order: list indices ascending, map
    entries in decoder order. Null and Bool leaves are skipped.

    Args:
        prefix: Key of ``value`` itself ("" for a document root)
        value: Decoded value to flatten

    Yields:
        Flat key and its catalog text
    """
    match value:
        case String(text):
            yield prefix, text
        case Number():
            yield prefix, value.text()
        case List(items):
            for index, item in enumerate(items):
                yield from flatten(f"{prefix}[{index}]", item)
        case Map(entries):
            for key, item in entries:
                yield from flatten(join_key(prefix, key), item)
        case Null() | Bool():
            return
        case _:
            assert_never(value)

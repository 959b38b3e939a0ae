"""Tagged-variant model for decoded translation data.

Decoders (PyYAML, tomllib, json) return plain Python objects of arbitrary
shape. ``to_value()`` converts them once, at the loading boundary, into the
closed ``Value`` union so that the flattener can match exhaustively.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime, time

from flati18n.constants import MAX_DEPTH
from flati18n.diagnostics import ErrorTemplate, NestingDepthError

__all__ = [
    "Bool",
    "List",
    "Map",
    "Null",
    "Number",
    "String",
    "Value",
    "format_number",
    "is_container",
    "to_value",
]


@dataclass(frozen=True, slots=True)
class Null:
    """Absent value (YAML ``~``, JSON ``null``) or an unsupported scalar."""


@dataclass(frozen=True, slots=True)
class Bool:
    """Boolean scalar. Never flattened into the catalog."""

    value: bool


@dataclass(frozen=True, slots=True)
class Number:
    """Numeric scalar, stringified with format_number() when flattened."""

    value: int | float

    def text(self) -> str:
        """Catalog representation of the number."""
        return format_number(self.value)


@dataclass(frozen=True, slots=True)
class String:
    """String scalar."""

    value: str


@dataclass(frozen=True, slots=True)
class List:
    """Ordered sequence. Element order becomes the [i] index order."""

    items: tuple[Value, ...]


@dataclass(frozen=True, slots=True)
class Map:
    """Associative mapping with string keys, in decoder order."""

    entries: tuple[tuple[str, Value], ...]


type Value = Null | Bool | Number | String | List | Map


def format_number(number: int | float) -> str:
    """Render a number the way catalog values store it.

    Integral values render without a decimal point; fractional values use
    the shortest representation that round-trips.

    Example:
        >>> format_number(3)
        '3'
        >>> format_number(3.0)
        '3'
        >>> format_number(0.25)
        '0.25'
    """
    if isinstance(number, float):
        if math.isfinite(number) and number.is_integer():
            return str(int(number))
        return repr(number)
    return str(number)


def is_container(value: Value) -> bool:
    """True for the variants accepted as a decoded document root."""
    return isinstance(value, List | Map)


def _key_text(key: object) -> str:
    match key:
        case bool():
            return "true" if key else "false"
        case int() | float():
            return format_number(key)
        case None:
            return "null"
        case _:
            return str(key)


def to_value(obj: object, *, max_depth: int = MAX_DEPTH) -> Value:
    """Convert decoder output into a Value.

    Args:
        obj: Object produced by a decoder or supplied by the caller
        max_depth: Maximum container nesting accepted

    Returns:
        Equivalent Value. Dates and times become ISO 8601 strings; objects
        of any other unsupported type become Null.

    Raises:
        NestingDepthError: If containers nest deeper than max_depth
    """
    return _convert(obj, 0, max_depth)


def _convert(obj: object, depth: int, max_depth: int) -> Value:
    if depth > max_depth:
        raise NestingDepthError(ErrorTemplate.nesting_depth_exceeded(max_depth))

    # bool is an int subclass, so it is matched first
    match obj:
        case Null() | Bool() | Number() | String() | List() | Map():
            return obj
        case None:
            return Null()
        case bool():
            return Bool(obj)
        case int() | float():
            return Number(obj)
        case str():
            return String(obj)
        case datetime() | date() | time():
            return String(obj.isoformat())
        case Mapping():
            return Map(
                tuple(
                    (_key_text(k), _convert(v, depth + 1, max_depth))
                    for k, v in obj.items()
                )
            )
        case list() | tuple():
            return List(tuple(_convert(v, depth + 1, max_depth) for v in obj))
        case _:
            return Null()

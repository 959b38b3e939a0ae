"""Core data model shared across loading and runtime layers.

    core <- loading <- runtime

Exports:
    Value and its variants: Tagged union for decoded translation data
    to_value: Convert decoder output into a Value
    format_number: Numeric rendering shared by the flattener and templates

Python 3.13+.
"""

from .value import (
    Bool,
    List,
    Map,
    Null,
    Number,
    String,
    Value,
    format_number,
    is_container,
    to_value,
)

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

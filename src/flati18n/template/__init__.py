"""Message template engine.

Implements the ``{{ .field }}`` substitution syntax used by catalog values.

Submodules:
    nodes    - Template, Text and Field node types
    parser   - parse_template (source -> Template)
    executor - render_template (Template + parameters -> text)

Python 3.13+. Zero external dependencies.
"""

from .executor import render_template, stringify
from .nodes import Field, Node, Template, Text
from .parser import parse_template

__all__ = [
    "Field",
    "Node",
    "Template",
    "Text",
    "parse_template",
    "render_template",
    "stringify",
]

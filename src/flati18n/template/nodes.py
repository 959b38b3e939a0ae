"""Template node types.

A compiled template is an immutable sequence of text runs and field
references.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

__all__ = ["Field", "Node", "Template", "Text"]


@dataclass(frozen=True, slots=True)
class Text:
    """Literal text copied to the output unchanged."""

    value: str


@dataclass(frozen=True, slots=True)
class Field:
    """Parameter reference such as ``{{ .user.name }}``.

    Attributes:
        path: Field names after the leading dot. Empty for ``{{ . }}``,
            which renders the whole parameter mapping.
        offset: Character offset of the action in the template source
    """

    path: tuple[str, ...]
    offset: int = 0

    def __str__(self) -> str:
        return "." + ".".join(self.path) if self.path else "."


type Node = Text | Field


@dataclass(frozen=True, slots=True)
class Template:
    """Parsed template.

    Attributes:
        name: Template name, the catalog key the source came from
        source: Original template text
        nodes: Text and Field nodes in output order
    """

    name: str
    source: str
    nodes: tuple[Node, ...]

    @property
    def fields(self) -> tuple[Field, ...]:
        """Field references in source order."""
        return tuple(node for node in self.nodes if isinstance(node, Field))

    @property
    def is_static(self) -> bool:
        """True if the template contains no field references."""
        return not self.fields

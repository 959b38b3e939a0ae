"""Catalog message with lazily compiled template.

A message moves through three compile states:

    Uncompiled --compile()--> Compiled(template)
    Compiled   --mark_dirty()--> Stale --compile()--> Compiled(template)

New messages start Uncompiled, so nothing is parsed until first use.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from flati18n.template import Template, parse_template

__all__ = ["Compiled", "CompileState", "Message", "Stale", "Uncompiled"]


@dataclass(frozen=True, slots=True)
class Uncompiled:
    """Never compiled."""


@dataclass(frozen=True, slots=True)
class Compiled:
    """Compiled template ready for rendering."""

    template: Template


@dataclass(frozen=True, slots=True)
class Stale:
    """Previously compiled; the template was dropped and must be rebuilt."""


type CompileState = Uncompiled | Compiled | Stale


class Message:
    """Raw catalog value plus its compile state.

    Messages are owned by a Bundle's catalog and mutated only under the
    bundle's write lock.

    Attributes:
        key: Flat catalog key, also the template name
        value: Raw template source
    """

    __slots__ = ("_state", "key", "value")

    def __init__(self, key: str, value: str) -> None:
        self.key = key
        self.value = value
        self._state: CompileState = Uncompiled()

    @property
    def state(self) -> CompileState:
        """Current compile state."""
        return self._state

    @property
    def is_dirty(self) -> bool:
        """True if the next compile() must parse the raw value."""
        return not isinstance(self._state, Compiled)

    def compile(self) -> Template:
        """Return the compiled template, parsing the raw value if needed.

        Raises:
            TemplateParseError: If the raw value is not a valid template.
                The state is left unchanged.
        """
        match self._state:
            case Compiled(template):
                return template
            case Uncompiled() | Stale():
                template = parse_template(self.value, self.key)
                self._state = Compiled(template)
                return template

    def mark_dirty(self) -> None:
        """Drop any compiled template. Idempotent."""
        if isinstance(self._state, Compiled):
            self._state = Stale()

    def __repr__(self) -> str:
        state = type(self._state).__name__
        return f"Message(key={self.key!r}, value={self.value!r}, state={state})"

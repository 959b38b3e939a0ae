"""Message rendering: compile on demand, merge parameters, execute.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from flati18n.template import render_template

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .message import Message

__all__ = ["Params", "SupportsWrite", "merge_params", "render"]

type Params = Mapping[str, object] | None
"""One parameter mapping; None entries are skipped when merging."""


class SupportsWrite(Protocol):
    """Text sink such as io.StringIO, sys.stdout or an open text file."""

    def write(self, s: str, /) -> object:
        """Write text to the sink."""
        ...


def merge_params(*params: Params) -> dict[str, object]:
    """Merge parameter mappings left to right.

    Later mappings override earlier keys; None entries are skipped. The
    caller's mappings are never modified.

    Example:
        >>> merge_params({"a": 1}, None, {"a": 2, "b": 3})
        {'a': 2, 'b': 3}
        >>> merge_params(None, None)
        {}
    """
    merged: dict[str, object] = {}
    for mapping in params:
        if mapping is not None:
            merged.update(mapping)
    return merged


def render(message: Message, sink: SupportsWrite, *params: Params) -> None:
    """Render a message into a sink.

    The message is compiled if it is not already. Output reaches the sink
    only after the whole template executed successfully.

    Raises:
        TemplateParseError: If the raw value is not a valid template
        TemplateExecutionError: If execution fails
    """
    template = message.compile()
    sink.write(render_template(template, merge_params(*params)))

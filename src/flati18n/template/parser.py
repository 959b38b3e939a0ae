"""Parser for the message template syntax.

Grammar (informal):
    template := (text | action)*
    action   := "{{" "-"? ws* body ws* "-"? "}}"
    body     := field | comment
    field    := "." | ("." identifier)+
    comment  := "/*" any* "*/"

A "-" directly after "{{" or directly before "}}" must be separated from the
body by whitespace; it trims all whitespace from the adjacent text.

Python 3.13+. Zero external dependencies.
"""

import logging
import re

from flati18n.diagnostics import ErrorTemplate, SourceSpan, TemplateParseError

from .nodes import Field, Node, Template, Text

__all__ = ["parse_template"]

logger = logging.getLogger(__name__)

LEFT_DELIM = "{{"
RIGHT_DELIM = "}}"
_COMMENT_OPEN = "/*"
_COMMENT_CLOSE = "*/"
_TRIM_MARKER = "-"
_SPACE = " \t\r\n"

_FIELD_PATTERN = re.compile(r"\.(?:[^\W\d]\w*(?:\.[^\W\d]\w*)*)?")
_IDENTIFIER_PATTERN = re.compile(r"[^\W\d]\w*")


def _fail(name: str, source: str, start: int, end: int, reason: str) -> TemplateParseError:
    span = SourceSpan.at(source, start, end)
    return TemplateParseError(ErrorTemplate.template_parse_failed(name, reason, span))


def _append_text(nodes: list[Node], text: str) -> None:
    if not text:
        return
    if nodes and isinstance(nodes[-1], Text):
        nodes[-1] = Text(nodes[-1].value + text)
    else:
        nodes.append(Text(text))


def _has_left_trim(source: str, pos: int) -> bool:
    return (
        source.startswith(_TRIM_MARKER, pos)
        and pos + 1 < len(source)
        and source[pos + 1] in _SPACE
    )


def _parse_body(name: str, source: str, start: int, body: str, offset: int) -> Field:
    stripped = body.strip(_SPACE)
    if not stripped:
        raise _fail(name, source, start, offset, "missing value for command")
    if _FIELD_PATTERN.fullmatch(stripped):
        path = tuple(part for part in stripped.split(".") if part)
        return Field(path=path, offset=start)
    if _IDENTIFIER_PATTERN.fullmatch(stripped):
        reason = f'function "{stripped}" not defined'
    else:
        reason = f"unexpected {stripped!r} in command"
    raise _fail(name, source, start, offset, reason)


def parse_template(source: str, name: str = "") -> Template:
    """Parse template source into a Template.

    Args:
        source: Raw message value
        name: Template name used in error messages (the message key)

    Returns:
        Parsed Template

    Raises:
        TemplateParseError: On an unclosed action or comment, an empty
            action, or an action that is not a field reference

    Example:
        >>> parse_template("Hello, {{ .name }}!", "greet").fields
        (Field(path=('name',), offset=7),)
    """
    nodes: list[Node] = []
    pos = 0
    length = len(source)

    while pos < length:
        start = source.find(LEFT_DELIM, pos)
        if start == -1:
            _append_text(nodes, source[pos:])
            break

        text = source[pos:start]
        inner = start + len(LEFT_DELIM)
        if _has_left_trim(source, inner):
            text = text.rstrip(_SPACE)
            inner += len(_TRIM_MARKER)
        _append_text(nodes, text)

        body_start = inner
        while body_start < length and source[body_start] in _SPACE:
            body_start += 1

        is_comment = source.startswith(_COMMENT_OPEN, body_start)
        if is_comment:
            close = source.find(_COMMENT_CLOSE, body_start + len(_COMMENT_OPEN))
            if close == -1:
                raise _fail(name, source, start, length, "unclosed comment")
            end = source.find(RIGHT_DELIM, close + len(_COMMENT_CLOSE))
            body = source[close + len(_COMMENT_CLOSE) : end] if end != -1 else ""
            if end == -1 or body.strip(_SPACE) not in ("", _TRIM_MARKER):
                raise _fail(
                    name, source, start, length, "comment ends before closing delimiter"
                )
        else:
            end = source.find(RIGHT_DELIM, inner)
            if end == -1:
                raise _fail(name, source, start, length, "unclosed action")
            body = source[inner:end]

        trim_right = (
            len(body) >= 2 and body[-1] == _TRIM_MARKER and body[-2] in _SPACE
        )
        if trim_right:
            body = body[:-1]

        if not is_comment:
            nodes.append(_parse_body(name, source, start, body, end + len(RIGHT_DELIM)))

        pos = end + len(RIGHT_DELIM)
        if trim_right:
            while pos < length and source[pos] in _SPACE:
                pos += 1

    template = Template(name=name, source=source, nodes=tuple(nodes))
    logger.debug("Parsed template %r: %d nodes", name, len(template.nodes))
    return template

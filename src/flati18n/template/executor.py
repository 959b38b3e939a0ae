"""Template execution against a parameter mapping.

Field lookup walks mappings by key and other objects by public attribute.
A key missing from a mapping renders NO_VALUE instead of failing, so a
message stays readable when a caller forgets a parameter.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

from flati18n.constants import NO_VALUE
from flati18n.core.value import format_number
from flati18n.diagnostics import ErrorTemplate, TemplateExecutionError

from .nodes import Field, Template, Text

__all__ = ["render_template", "stringify"]

_MISSING = object()


def stringify(value: object) -> str:
    """Render a parameter value for template output.

    Example:
        >>> stringify(True), stringify(2.0), stringify(None)
        ('true', '2', '<no value>')
    """
    match value:
        case None:
            return NO_VALUE
        case bool():
            return "true" if value else "false"
        case int() | float():
            return format_number(value)
        case str():
            return value
        case _:
            return str(value)


def _lookup(template: Template, field: Field, params: Mapping[str, object]) -> object:
    value: object = params
    for name in field.path:
        if value is None:
            return _MISSING
        if isinstance(value, Mapping):
            if name not in value:
                return _MISSING
            value = value[name]
            continue
        if name.startswith("_") or not hasattr(value, name):
            reason = f"can't evaluate field {name} in type {type(value).__name__}"
            raise TemplateExecutionError(
                ErrorTemplate.template_execution_failed(template.name, reason)
            )
        value = getattr(value, name)
    return value


def render_template(template: Template, params: Mapping[str, object]) -> str:
    """Execute a template and return the rendered text.

    Args:
        template: Parsed template
        params: Merged parameters; ``{{ . }}`` refers to this mapping

    Returns:
        Rendered output

    Raises:
        TemplateExecutionError: If a field is read from a value that is
            neither a mapping nor has that public attribute
    """
    parts: list[str] = []
    for node in template.nodes:
        match node:
            case Text():
                parts.append(node.value)
            case Field():
                value = _lookup(template, node, params)
                parts.append(NO_VALUE if value is _MISSING else stringify(value))
    return "".join(parts)

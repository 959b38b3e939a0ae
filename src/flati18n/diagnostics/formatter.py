"""Diagnostic formatting service.

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Compiler-style multi-line output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Render Diagnostic objects as text or JSON.

    Control characters in messages are escaped so that keys and paths taken
    from untrusted sources cannot inject terminal sequences into logs.

    Attributes:
        output_format: Output style (rust, simple, json)
        max_content_length: Maximum message length; 0 disables truncation

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.empty_source()))
        SOURCE_EMPTY: Source is empty
    """

    output_format: OutputFormat = OutputFormat.RUST
    max_content_length: int = 0

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic."""
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        parts = [
            f"{diagnostic.severity}[{diagnostic.code.name}]: "
            f"{self._clean(diagnostic.message)}"
        ]

        if diagnostic.span is not None:
            location = f"line {diagnostic.span.line}, column {diagnostic.span.column}"
            if diagnostic.source:
                location = f"{self._clean(diagnostic.source)}:{location}"
            parts.append(f"  --> {location}")
        elif diagnostic.source:
            parts.append(f"  --> {self._clean(diagnostic.source)}")

        if diagnostic.locale:
            parts.append(f"  = locale: {diagnostic.locale}")
        if diagnostic.key is not None:
            parts.append(f"  = key: {self._clean(diagnostic.key)}")
        if diagnostic.hint:
            parts.append(f"  = help: {self._clean(diagnostic.hint)}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        return f"{diagnostic.code.name}: {self._clean(diagnostic.message)}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._clean(diagnostic.message),
            "severity": diagnostic.severity,
        }
        if diagnostic.span is not None:
            data["line"] = diagnostic.span.line
            data["column"] = diagnostic.span.column
        for name in ("source", "locale", "key", "hint"):
            value = getattr(diagnostic, name)
            if value is not None:
                data[name] = value
        return json.dumps(data, ensure_ascii=False)

    def _clean(self, text: str) -> str:
        # repr() escapes control characters; strip the surrounding quotes
        escaped = text if text.isprintable() else repr(text)[1:-1]
        if self.max_content_length and len(escaped) > self.max_content_length:
            return escaped[: self.max_content_length] + "..."
        return escaped

"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Reference errors (missing messages)
        2000-2999: Template errors (parse and execution failures)
        3000-3999: Source errors (files, directories, remote endpoints)
        4000-4999: Format and decoding errors
    """

    # Reference errors (1000-1999)
    MESSAGE_NOT_FOUND = 1001

    # Template errors (2000-2999)
    TEMPLATE_PARSE_FAILED = 2001
    TEMPLATE_EXECUTION_FAILED = 2002

    # Source errors (3000-3999)
    SOURCE_EMPTY = 3001
    SOURCE_NOT_FOUND = 3002
    TARGET_IS_DIRECTORY = 3003
    TARGET_IS_REGULAR_FILE = 3004
    INCORRECT_PROTOCOL = 3005
    REMOTE_SOURCE_FAILED = 3006

    # Format and decoding errors (4000-4999)
    UNSUPPORTED_FORMAT = 4001
    UNKNOWN_FORMAT = 4002
    DECODE_FAILED = 4003
    INCORRECT_DECODED_SHAPE = 4004
    NESTING_DEPTH_EXCEEDED = 4005


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source location for template parse errors.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)

    @classmethod
    def at(cls, source: str, start: int, end: int | None = None) -> "SourceSpan":
        """Build a span for an offset range, computing line and column.

        Args:
            source: Full source text the offsets refer to
            start: Starting character offset
            end: Ending offset (defaults to start)

        Returns:
            SourceSpan with 1-indexed line and column of ``start``
        """
        line = source.count("\n", 0, start) + 1
        line_start = source.rfind("\n", 0, start) + 1
        return cls(
            start=start,
            end=start if end is None else end,
            line=line,
            column=start - line_start + 1,
        )


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (template parse errors only)
        hint: Suggestion for fixing the error
        source: File path, URL or template name the error relates to
        locale: Locale tag of the bundle involved, when relevant
        key: Catalog key involved, when relevant
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    source: str | None = None
    locale: str | None = None
    key: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[MESSAGE_NOT_FOUND]: Message 'hello' not found for locale 'en'
              = key: hello
              = help: Check that the key is present in the loaded sources

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)

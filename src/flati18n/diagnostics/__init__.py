"""Diagnostic system for flati18n errors.

Provides structured error diagnostics with codes, spans and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    CatalogError,
    DecodeError,
    EmptySourceError,
    FormatError,
    IncorrectDecodedShapeError,
    IncorrectProtocolError,
    MessageNotFoundError,
    NestingDepthError,
    RemoteSourceError,
    SourceError,
    SourceNotFoundError,
    TargetIsDirectoryError,
    TargetIsRegularFileError,
    TemplateError,
    TemplateExecutionError,
    TemplateParseError,
    UnknownFormatError,
    UnsupportedFormatError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CatalogError",
    "DecodeError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "EmptySourceError",
    "ErrorTemplate",
    "FormatError",
    "IncorrectDecodedShapeError",
    "IncorrectProtocolError",
    "MessageNotFoundError",
    "NestingDepthError",
    "OutputFormat",
    "RemoteSourceError",
    "SourceError",
    "SourceNotFoundError",
    "SourceSpan",
    "TargetIsDirectoryError",
    "TargetIsRegularFileError",
    "TemplateError",
    "TemplateExecutionError",
    "TemplateParseError",
    "UnknownFormatError",
    "UnsupportedFormatError",
]

"""Catalog exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "CatalogError",
    "DecodeError",
    "EmptySourceError",
    "FormatError",
    "IncorrectDecodedShapeError",
    "IncorrectProtocolError",
    "MessageNotFoundError",
    "NestingDepthError",
    "RemoteSourceError",
    "SourceError",
    "SourceNotFoundError",
    "TargetIsDirectoryError",
    "TargetIsRegularFileError",
    "TemplateError",
    "TemplateExecutionError",
    "TemplateParseError",
    "UnknownFormatError",
    "UnsupportedFormatError",
]


class CatalogError(Exception):
    """Base exception for all flati18n errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CatalogError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class MessageNotFoundError(CatalogError):
    """Key is absent from the catalog.

    Routed to the bundle's not-found handler by the try_* variants.
    """

    @property
    def key(self) -> str | None:
        """Requested key."""
        return self.diagnostic.key if self.diagnostic else None

    @property
    def locale(self) -> str | None:
        """Locale tag of the bundle that was searched."""
        return self.diagnostic.locale if self.diagnostic else None


class TemplateError(CatalogError):
    """Base for failures of the template engine."""


class TemplateParseError(TemplateError):
    """Raw message value is not a valid template."""


class TemplateExecutionError(TemplateError):
    """Compiled template could not be rendered with the given parameters."""


class SourceError(CatalogError):
    """Base for failures to obtain source bytes."""


class EmptySourceError(SourceError):
    """Input buffer has zero length."""


class SourceNotFoundError(SourceError):
    """File or directory does not exist."""


class TargetIsDirectoryError(SourceError):
    """A file was expected but the path is a directory."""


class TargetIsRegularFileError(SourceError):
    """A directory was expected but the path is a regular file."""


class IncorrectProtocolError(SourceError):
    """URL scheme is neither http nor https."""


class RemoteSourceError(SourceError):
    """HTTP transport failure or error status."""


class FormatError(CatalogError):
    """Base for format routing and decoding failures."""


class UnsupportedFormatError(FormatError):
    """Format hint is not recognized."""


class UnknownFormatError(FormatError):
    """No format hint could be derived from a name or URL."""


class DecodeError(FormatError):
    """Decoder rejected the input bytes.

    The decoder's own exception is available as ``__cause__``.
    """


class IncorrectDecodedShapeError(FormatError):
    """Decoded root is neither a list nor a map."""


class NestingDepthError(FormatError):
    """Decoded data nests deeper than MAX_DEPTH."""

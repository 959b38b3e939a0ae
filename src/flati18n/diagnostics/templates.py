"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics are created here so that raise sites never build
    message strings themselves.
    """

    @staticmethod
    def message_not_found(key: str, locale: str) -> Diagnostic:
        """Key absent from the catalog.

        Args:
            key: The catalog key that was requested
            locale: Locale tag of the bundle

        Returns:
            Diagnostic for MESSAGE_NOT_FOUND
        """
        msg = f"Message '{key}' not found for locale '{locale}'"
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_NOT_FOUND,
            message=msg,
            hint="Check that the key is present in the loaded sources",
            locale=locale,
            key=key,
        )

    @staticmethod
    def template_parse_failed(
        name: str, reason: str, span: SourceSpan | None = None
    ) -> Diagnostic:
        """Raw message value is not a valid template.

        Args:
            name: Template name (the message key)
            reason: What the parser rejected
            span: Location of the offending action

        Returns:
            Diagnostic for TEMPLATE_PARSE_FAILED
        """
        if span is not None:
            msg = f"template: {name}:{span.line}:{span.column}: {reason}"
        else:
            msg = f"template: {name}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_PARSE_FAILED,
            message=msg,
            span=span,
            hint="Actions must look like {{ .field }} and be closed with }}",
            source=name,
            key=name,
        )

    @staticmethod
    def template_execution_failed(name: str, reason: str) -> Diagnostic:
        """Template could not be executed against the parameters.

        Args:
            name: Template name (the message key)
            reason: What went wrong during execution

        Returns:
            Diagnostic for TEMPLATE_EXECUTION_FAILED
        """
        msg = f"template: {name}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_EXECUTION_FAILED,
            message=msg,
            hint="Pass mappings (or objects with matching attributes) as parameters",
            source=name,
            key=name,
        )

    @staticmethod
    def empty_source(source: str | None = None) -> Diagnostic:
        """Zero-length input buffer.

        Returns:
            Diagnostic for SOURCE_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.SOURCE_EMPTY,
            message="Source is empty",
            hint="Provide at least one byte of encoded translations",
            source=source,
        )

    @staticmethod
    def source_not_found(path: str) -> Diagnostic:
        """Path does not exist.

        Args:
            path: The missing file or directory

        Returns:
            Diagnostic for SOURCE_NOT_FOUND
        """
        msg = f"No such file or directory: '{path}'"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_NOT_FOUND,
            message=msg,
            source=path,
        )

    @staticmethod
    def target_is_directory(path: str) -> Diagnostic:
        """A file was expected but the path names a directory.

        Returns:
            Diagnostic for TARGET_IS_DIRECTORY
        """
        msg = f"Target path is a directory: '{path}'"
        return Diagnostic(
            code=DiagnosticCode.TARGET_IS_DIRECTORY,
            message=msg,
            hint="Use load_dir() to load a directory of translation files",
            source=path,
        )

    @staticmethod
    def target_is_regular_file(path: str) -> Diagnostic:
        """A directory was expected but the path names a regular file.

        Returns:
            Diagnostic for TARGET_IS_REGULAR_FILE
        """
        msg = f"Target path is a regular file: '{path}'"
        return Diagnostic(
            code=DiagnosticCode.TARGET_IS_REGULAR_FILE,
            message=msg,
            hint="Use load_file() to load a single translation file",
            source=path,
        )

    @staticmethod
    def incorrect_protocol(scheme: str, url: str) -> Diagnostic:
        """URL scheme is neither http nor https.

        Returns:
            Diagnostic for INCORRECT_PROTOCOL
        """
        msg = f"Incorrect remote protocol '{scheme}', expected http or https"
        return Diagnostic(
            code=DiagnosticCode.INCORRECT_PROTOCOL,
            message=msg,
            source=url,
        )

    @staticmethod
    def remote_source_failed(url: str, reason: str) -> Diagnostic:
        """HTTP request failed or returned an error status.

        Returns:
            Diagnostic for REMOTE_SOURCE_FAILED
        """
        msg = f"GET {url} failed: {reason}"
        return Diagnostic(
            code=DiagnosticCode.REMOTE_SOURCE_FAILED,
            message=msg,
            source=url,
        )

    @staticmethod
    def unsupported_format(hint: str, supported: Iterable[str]) -> Diagnostic:
        """Format hint is not one of the recognized formats.

        Args:
            hint: The rejected hint
            supported: Recognized format names

        Returns:
            Diagnostic for UNSUPPORTED_FORMAT
        """
        msg = f"Unsupported format '{hint}'"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_FORMAT,
            message=msg,
            hint=f"Supported formats: {', '.join(supported)}",
        )

    @staticmethod
    def unknown_format(name: str) -> Diagnostic:
        """No format hint could be derived (name without an extension).

        Args:
            name: File name or URL path that lacks an extension

        Returns:
            Diagnostic for UNKNOWN_FORMAT
        """
        msg = f"Unknown format: '{name}' has no file extension"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_FORMAT,
            message=msg,
            hint="Pass the format explicitly",
            source=name,
        )

    @staticmethod
    def decode_failed(format_name: str, reason: str) -> Diagnostic:
        """Decoder rejected the input bytes.

        Returns:
            Diagnostic for DECODE_FAILED
        """
        msg = f"Cannot decode {format_name}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.DECODE_FAILED,
            message=msg,
        )

    @staticmethod
    def incorrect_decoded_shape(type_name: str) -> Diagnostic:
        """Decoded root is neither a list nor a map.

        Args:
            type_name: Name of the decoded root's variant

        Returns:
            Diagnostic for INCORRECT_DECODED_SHAPE
        """
        msg = f"Decoded root must be a list or a map, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.INCORRECT_DECODED_SHAPE,
            message=msg,
            hint="Translation sources must decode to a mapping or a sequence",
        )

    @staticmethod
    def nesting_depth_exceeded(max_depth: int) -> Diagnostic:
        """Decoded data nests deeper than allowed.

        Returns:
            Diagnostic for NESTING_DEPTH_EXCEEDED
        """
        msg = f"Decoded data exceeds maximum nesting depth ({max_depth})"
        return Diagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=msg,
        )

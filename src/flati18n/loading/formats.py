"""Format routing: hint -> Format -> decoder.

Decoders turn raw bytes into plain Python objects:
    yaml, yml -> PyYAML safe_load
    toml      -> tomllib (UTF-8 text)
    json      -> json

Hints are matched exactly and case-sensitively. resolve_format() is the only
way to obtain a Format, so an unrecognized hint can never reach decoder_for().

Python 3.13+. External dependency: PyYAML.
"""

from __future__ import annotations

import json
import tomllib
from collections.abc import Callable
from enum import StrEnum

import yaml

from flati18n.core.value import Value, is_container, to_value
from flati18n.diagnostics import (
    CatalogError,
    DecodeError,
    EmptySourceError,
    ErrorTemplate,
    IncorrectDecodedShapeError,
    UnknownFormatError,
    UnsupportedFormatError,
)

__all__ = [
    "Decoder",
    "Format",
    "decode_document",
    "decoder_for",
    "format_from_name",
    "resolve_format",
]

type Decoder = Callable[[bytes], object]
"""Decode a whole source buffer into a generic value; raise on bad input."""


class Format(StrEnum):
    """Recognized source formats, named by their file extension."""

    YAML = "yaml"
    YML = "yml"
    TOML = "toml"
    JSON = "json"


def resolve_format(hint: str) -> Format:
    """Map a format hint to a Format.

    Args:
        hint: Format name or file extension, without the dot

    Returns:
        Matching Format

    Raises:
        UnsupportedFormatError: If hint is not exactly one of the
            recognized names

    Example:
        >>> resolve_format("yml")
        <Format.YML: 'yml'>
    """
    try:
        return Format(hint)
    except ValueError:
        raise UnsupportedFormatError(
            ErrorTemplate.unsupported_format(hint, (f.value for f in Format))
        ) from None


def format_from_name(name: str) -> Format:
    """Derive a Format from the text after the last dot of a file name.

    Raises:
        UnknownFormatError: If name has no extension
        UnsupportedFormatError: If the extension is not recognized
    """
    _, dot, extension = name.rpartition(".")
    if not dot:
        raise UnknownFormatError(ErrorTemplate.unknown_format(name))
    return resolve_format(extension)


def _decode_yaml(data: bytes) -> object:
    try:
        return yaml.safe_load(data)
    except yaml.YAMLError as e:
        raise DecodeError(ErrorTemplate.decode_failed("yaml", str(e))) from e


def _decode_toml(data: bytes) -> object:
    try:
        return tomllib.loads(data.decode("utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(ErrorTemplate.decode_failed("toml", str(e))) from e


def _decode_json(data: bytes) -> object:
    try:
        return json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(ErrorTemplate.decode_failed("json", str(e))) from e


_DECODERS: dict[Format, Decoder] = {
    Format.YAML: _decode_yaml,
    Format.YML: _decode_yaml,
    Format.TOML: _decode_toml,
    Format.JSON: _decode_json,
}


def decoder_for(fmt: Format) -> Decoder:
    """Return the decoder for a recognized Format."""
    return _DECODERS[fmt]


def decode_document(data: bytes, decoder: Decoder) -> Value:
    """Decode a whole source buffer into a list or map Value.

    Args:
        data: Raw source bytes
        decoder: Decoder from decoder_for() or a caller-supplied function

    Returns:
        Decoded root, guaranteed to be a List or Map

    Raises:
        EmptySourceError: If data is empty
        DecodeError: If the decoder rejects the data; exceptions raised by a
            caller-supplied decoder are wrapped and chained
        IncorrectDecodedShapeError: If the root is not a list or map
        NestingDepthError: If the data nests deeper than MAX_DEPTH
    """
    if len(data) == 0:
        raise EmptySourceError(ErrorTemplate.empty_source())
    try:
        decoded = decoder(data)
    except CatalogError:
        raise
    except Exception as e:  # pylint: disable=broad-exception-caught
        name = getattr(decoder, "__name__", type(decoder).__name__)
        raise DecodeError(ErrorTemplate.decode_failed(name, f"{type(e).__name__}: {e}")) from e
    value = to_value(decoded)
    if not is_container(value):
        raise IncorrectDecodedShapeError(
            ErrorTemplate.incorrect_decoded_shape(type(value).__name__)
        )
    return value

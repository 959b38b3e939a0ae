"""Loading pipeline: read sources, route formats, flatten keys.

Submodules:
    formats - Format, resolve_format, decoder_for, decode_document
    flatten - flatten (Value -> flat key/text pairs)
    sources - SourceData and the file/directory/HTTP/resource-tree readers

Python 3.13+. External dependencies: PyYAML, httpx.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from .flatten import flatten, join_key
from .formats import (
    Decoder,
    Format,
    decode_document,
    decoder_for,
    format_from_name,
    resolve_format,
)
from .sources import (
    SourceData,
    fetch_http,
    iter_dir,
    iter_traversable,
    normalize_url,
    read_file,
)

__all__ = [
    # Format routing
    "Decoder",
    "Format",
    "decode_document",
    "decoder_for",
    "format_from_name",
    "resolve_format",
    # Flattening
    "flatten",
    "join_key",
    # Source readers
    "SourceData",
    "fetch_http",
    "iter_dir",
    "iter_traversable",
    "normalize_url",
    "read_file",
]

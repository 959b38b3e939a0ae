"""Source readers: files, directories, HTTP endpoints, resource trees.

Readers only perform I/O and format detection. They never touch a Bundle,
so callers can read before taking the bundle's write lock.

Directory and resource-tree walks skip files whose extension is missing or
unrecognized. Explicitly named files and URLs fail instead.

Python 3.13+. External dependency: httpx.
"""

from __future__ import annotations

import logging
import posixpath
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

import httpx

from flati18n.constants import RECOGNIZED_EXTENSIONS
from flati18n.diagnostics import (
    ErrorTemplate,
    FormatError,
    IncorrectProtocolError,
    RemoteSourceError,
    SourceNotFoundError,
    TargetIsDirectoryError,
    TargetIsRegularFileError,
    UnknownFormatError,
)

from .formats import Format, format_from_name, resolve_format

if TYPE_CHECKING:
    import os
    from collections.abc import Iterator
    from importlib.resources.abc import Traversable

__all__ = [
    "SourceData",
    "fetch_http",
    "iter_dir",
    "iter_traversable",
    "normalize_url",
    "read_file",
]

logger = logging.getLogger(__name__)

_ALLOWED_SCHEMES = ("http", "https")


@dataclass(frozen=True, slots=True)
class SourceData:
    """Bytes read from one source, with the format they are encoded in.

    Attributes:
        name: Path, URL or resource name, for diagnostics
        data: Raw contents
        fmt: Format derived from the name or given explicitly
    """

    name: str
    data: bytes
    fmt: Format


def read_file(path: str | os.PathLike[str]) -> SourceData:
    """Read a single translation file.

    Raises:
        SourceNotFoundError: If path does not exist
        TargetIsDirectoryError: If path is a directory
        UnknownFormatError: If the file name has no extension
        UnsupportedFormatError: If the extension is not recognized
        OSError: If the file cannot be read
    """
    file_path = Path(path)
    if not file_path.exists():
        raise SourceNotFoundError(ErrorTemplate.source_not_found(str(file_path)))
    if file_path.is_dir():
        raise TargetIsDirectoryError(ErrorTemplate.target_is_directory(str(file_path)))
    fmt = format_from_name(file_path.name)
    return SourceData(name=str(file_path), data=file_path.read_bytes(), fmt=fmt)


def _recognized(name: str) -> Format | None:
    try:
        return format_from_name(name)
    except FormatError:
        logger.debug("Skipping %r: unrecognized format", name)
        return None


def iter_dir(path: str | os.PathLike[str], locale: str) -> Iterator[SourceData]:
    """Read the translation files a directory holds for a locale.

    If ``<path>/<locale>/`` exists, every recognized file below it is read,
    recursively, in sorted path order. Otherwise only the immediate files
    named ``<locale>.<ext>`` (ext in yaml, yml, json, toml) are read.

    Args:
        path: Root directory
        locale: Locale tag naming the subdirectory or file stem

    Yields:
        SourceData for each file, read lazily

    Raises:
        SourceNotFoundError: If path does not exist
        TargetIsRegularFileError: If path is not a directory
    """
    root = Path(path)
    if not root.exists():
        raise SourceNotFoundError(ErrorTemplate.source_not_found(str(root)))
    if not root.is_dir():
        raise TargetIsRegularFileError(ErrorTemplate.target_is_regular_file(str(root)))

    locale_dir = root / locale
    if locale_dir.is_dir():
        logger.debug("Walking locale directory %s", locale_dir)
        for file_path in sorted(p for p in locale_dir.rglob("*") if p.is_file()):
            fmt = _recognized(file_path.name)
            if fmt is not None:
                yield SourceData(name=str(file_path), data=file_path.read_bytes(), fmt=fmt)
        return

    wanted = {f"{locale}.{ext}" for ext in RECOGNIZED_EXTENSIONS}
    for child in sorted(root.iterdir()):
        if child.is_file() and child.name in wanted:
            yield read_file(child)


def iter_traversable(root: Traversable, locale: str) -> Iterator[SourceData]:
    """Read translation files from a read-only resource tree.

    Works with ``importlib.resources.files(...)``, ``zipfile.Path`` and
    ``pathlib.Path``. Uses the locale-named subdirectory when present,
    otherwise the whole tree.

    Yields:
        SourceData for each recognized file, in sorted name order
    """
    candidate = root.joinpath(locale)
    base = candidate if candidate.is_dir() else root
    yield from _walk(base)


def _walk(directory: Traversable) -> Iterator[SourceData]:
    for entry in sorted(directory.iterdir(), key=lambda e: e.name):
        if entry.is_dir():
            yield from _walk(entry)
            continue
        if not entry.is_file():
            continue
        fmt = _recognized(entry.name)
        if fmt is not None:
            yield SourceData(name=str(entry), data=entry.read_bytes(), fmt=fmt)


def normalize_url(url: str) -> str:
    """Default the scheme to http and reject anything but http/https.

    Example:
        >>> normalize_url("example.com/i18n/en.yaml")
        'http://example.com/i18n/en.yaml'

    Raises:
        IncorrectProtocolError: If the scheme is not http or https
    """
    if "://" not in url:
        url = f"http://{url}"
    scheme = urlsplit(url).scheme
    if scheme not in _ALLOWED_SCHEMES:
        raise IncorrectProtocolError(ErrorTemplate.incorrect_protocol(scheme, url))
    return url


def fetch_http(
    url: str,
    fmt: str | Format | None = None,
    *,
    client: httpx.Client | None = None,
) -> SourceData:
    """GET a translation document.

    Args:
        url: Document URL; "http://" is assumed when no scheme is given
        fmt: Format hint; derived from the URL path extension when omitted
        client: Optional httpx client (connection reuse, custom transport)

    Raises:
        IncorrectProtocolError: If the scheme is not http or https
        UnknownFormatError: If fmt is omitted and the path has no extension
        UnsupportedFormatError: If the format is not recognized
        RemoteSourceError: On transport failure or a non-2xx response
    """
    url = normalize_url(url)
    if fmt is None:
        base = posixpath.basename(urlsplit(url).path)
        if "." not in base:
            raise UnknownFormatError(ErrorTemplate.unknown_format(url))
        resolved = format_from_name(base)
    else:
        resolved = resolve_format(fmt)

    try:
        if client is not None:
            response = client.get(url, follow_redirects=True)
        else:
            response = httpx.get(url, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPError as e:
        raise RemoteSourceError(ErrorTemplate.remote_source_failed(url, str(e))) from e

    logger.debug("Fetched %s: %d bytes", url, len(response.content))
    return SourceData(name=url, data=response.content, fmt=resolved)

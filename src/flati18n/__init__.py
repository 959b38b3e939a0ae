"""flati18n - flat-key translation catalogs with templated messages.

Loads nested YAML, TOML or JSON translation data from files, directories,
byte buffers, HTTP endpoints or package resources, flattens it into dotted
keys (``menu.file.open``, ``items[0]``) and renders values as
``{{ .field }}`` templates through a bounded LRU cache.

Public API:
    Bundle - Single-locale translation catalog
    CacheConfig - Cache sizing policy
    Format - Recognized source formats

Exceptions:
    CatalogError - Base exception class
    MessageNotFoundError - Key absent from the catalog
    SourceError - File, directory or network source problems
    FormatError - Format routing and decoding problems
    TemplateError - Template parse and execution failures

Submodules:
    flati18n.core - Value tagged union for decoded data
    flati18n.loading - Format routing, flattening and source readers
    flati18n.template - ``{{ .field }}`` template engine
    flati18n.diagnostics - Error types, codes and formatting
    flati18n.locale_utils - Babel-backed locale tag handling
"""

from .diagnostics import (
    CatalogError,
    FormatError,
    MessageNotFoundError,
    SourceError,
    TemplateError,
)
from .loading import Format
from .locale_utils import get_system_locale
from .runtime import Bundle, CacheConfig

# Version information - Auto-populated from package metadata
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("flati18n")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Bundle",
    "CacheConfig",
    "CatalogError",
    "Format",
    "FormatError",
    "MessageNotFoundError",
    "SourceError",
    "TemplateError",
    "__version__",
    "get_system_locale",
]

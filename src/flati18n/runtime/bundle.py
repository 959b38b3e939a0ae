"""Bundle - main API for loading and resolving translations.

Python 3.13+. External dependencies: Babel, PyYAML, httpx.
"""

from __future__ import annotations

import io
import logging
from typing import TYPE_CHECKING, BinaryIO

from flati18n.core.value import is_container, to_value
from flati18n.diagnostics import (
    CatalogError,
    ErrorTemplate,
    IncorrectDecodedShapeError,
    MessageNotFoundError,
)
from flati18n.loading import (
    Decoder,
    Format,
    SourceData,
    decode_document,
    decoder_for,
    fetch_http,
    flatten,
    iter_dir,
    iter_traversable,
    read_file,
    resolve_format,
)
from flati18n.locale_utils import canonical_tag, get_babel_locale, get_system_locale

from .cache import LRUCache
from .cache_config import CacheConfig
from .message import Message
from .resolver import Params, SupportsWrite, render
from .rwlock import RWLock

if TYPE_CHECKING:
    import os
    from collections.abc import Callable, Iterable, Iterator
    from importlib.resources.abc import Traversable

    import httpx
    from babel import Locale

    from flati18n.core.value import Value

__all__ = ["Bundle", "NotFoundHandler"]

logger = logging.getLogger(__name__)

type NotFoundHandler = Callable[..., None]
"""Called as ``handler(key, sink, *params)`` when a try_* lookup misses."""

# Keys and values from loaded files are logged truncated.
_LOG_TRUNCATE: int = 80


def _write_nothing(key: str, sink: SupportsWrite, *params: Params) -> None:
    sink.write("")


def _note(error: BaseException, operation: str, target: object) -> None:
    error.add_note(f"{operation}: {target}")


def _report(error: BaseException, operation: str, target: object) -> None:
    """Annotate a failed load with its operation and log it. Caller re-raises."""
    _note(error, operation, target)
    logger.error("%s failed for %s: %s", operation, target, error)


class Bundle:
    """Translation catalog for one locale.

    Sources are flattened into dotted keys; values are templates rendered
    on demand with ``{{ .field }}`` substitution.

    Thread Safety:
        All methods are thread-safe. Loads read and decode their sources
        before taking the write lock, which is then held only while the
        catalog is updated. Resolution takes the write lock because every
        lookup reorders the cache.

    Examples:
        >>> bundle = Bundle("en")
        >>> bundle.load_bytes(b"greet: Hello, {{ .name }}!", "yaml")
        >>> bundle.must_format("greet", {"name": "world"})
        'Hello, world!'
        >>> bundle.format_pattern("missing")
        ('', (MessageNotFoundError("Message 'missing' not found for locale 'en'"),))
        >>> bundle.try_format("missing")
        ''
    """

    __slots__ = (
        "_babel_locale",
        "_cache",
        "_cache_config",
        "_catalog",
        "_locale",
        "_lock",
        "_not_found_handler",
        "_pending",
    )

    def __init__(self, locale: str | Locale, /, *, cache: CacheConfig | None = None) -> None:
        """Initialize an empty bundle.

        Args:
            locale: BCP-47 locale tag (``zh-Hans``, ``en-US``) or Babel
                Locale [positional-only]
            cache: Cache sizing policy (default: CacheConfig())

        Raises:
            ValueError: If the locale tag is malformed or unknown to CLDR
        """
        self._locale = canonical_tag(locale)
        self._babel_locale = get_babel_locale(self._locale)
        self._cache_config = cache if cache is not None else CacheConfig()
        self._cache = LRUCache(self._cache_config.initial_capacity)
        self._catalog: dict[str, Message] = {}
        self._pending: list[str] = []
        self._not_found_handler: NotFoundHandler = _write_nothing
        self._lock = RWLock()

        logger.info(
            "Bundle initialized for locale: %s (cache capacity=%d)",
            self._locale,
            self._cache.capacity,
        )

    @classmethod
    def for_system_locale(cls, *, cache: CacheConfig | None = None) -> Bundle:
        """Create a Bundle for the locale detected from the environment.

        Raises:
            RuntimeError: If the system locale cannot be determined
        """
        return cls(get_system_locale(raise_on_failure=True), cache=cache)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def locale(self) -> str:
        """Canonical BCP-47 locale tag (read-only).

        Example:
            >>> Bundle("zh_Hans").locale
            'zh-Hans'
        """
        return self._locale

    @property
    def babel_locale(self) -> Locale:
        """Babel Locale for this bundle's tag (read-only)."""
        return self._babel_locale

    @property
    def cache_config(self) -> CacheConfig:
        """Cache sizing policy (read-only)."""
        return self._cache_config

    @property
    def cache_capacity(self) -> int:
        """Current capacity of the message cache."""
        with self._lock.read():
            return self._cache.capacity

    @property
    def not_found_handler(self) -> NotFoundHandler:
        """Handler the try_* variants call when a key is missing.

        Called as ``handler(key, sink, *params)`` with the arguments of the
        failed lookup. The default writes nothing. May be replaced at any
        time.
        """
        return self._not_found_handler

    @not_found_handler.setter
    def not_found_handler(self, handler: NotFoundHandler) -> None:
        self._not_found_handler = handler

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def _store(self, pairs: Iterable[tuple[str, str]]) -> int:
        """Write flattened pairs into the catalog. Caller holds the write lock."""
        count = 0
        for key, text in pairs:
            self._catalog[key] = Message(key, text)
            self._pending.append(key)
            count += 1
        return count

    def _ingest(self, value: Value, source: str, prefix: str = "") -> None:
        with self._lock.write():
            count = self._store(flatten(prefix, value))
            total = len(self._catalog)
        logger.debug("Ingested %s: %d keys (catalog size %d)", source, count, total)

    def _ingest_source(self, source: SourceData) -> None:
        value = decode_document(source.data, decoder_for(source.fmt))
        self._ingest(value, source.name)

    def _ingest_all(self, operation: str, target: object, sources: Iterator[SourceData]) -> None:
        loaded = 0
        try:
            for source in sources:
                try:
                    self._ingest_source(source)
                except CatalogError as e:
                    _note(e, "file", source.name)
                    raise
                loaded += 1
        except (CatalogError, OSError) as e:
            _report(e, operation, target)
            raise
        logger.info("%s %s: %d files loaded for %s", operation, target, loaded, self._locale)

    def load_file(self, path: str | os.PathLike[str]) -> None:
        """Load one translation file; the format comes from its extension.

        Raises:
            SourceNotFoundError: If path does not exist
            TargetIsDirectoryError: If path is a directory
            UnknownFormatError: If the file name has no extension
            UnsupportedFormatError: If the extension is not recognized
            DecodeError: If the contents cannot be decoded
            IncorrectDecodedShapeError: If the document root is a scalar
        """
        self._ingest_all("load_file", path, (read_file(p) for p in (path,)))

    def load_dir(self, path: str | os.PathLike[str]) -> None:
        """Load this bundle's translations from a directory.

        Loads every recognized file under ``<path>/<locale>/`` if that
        directory exists, otherwise the files ``<path>/<locale>.<ext>``.

        Raises:
            SourceNotFoundError: If path does not exist
            TargetIsRegularFileError: If path is not a directory
            CatalogError: If a recognized file fails to decode
        """
        self._ingest_all("load_dir", path, iter_dir(path, self._locale))

    def load_fs(self, root: Traversable) -> None:
        """Load translations from a read-only resource tree.

        Example:
            >>> from importlib.resources import files
            >>> bundle.load_fs(files("myapp") / "i18n")

        Args:
            root: ``importlib.resources`` Traversable, ``zipfile.Path`` or
                ``pathlib.Path``. Its ``<locale>`` subdirectory is used when
                present, otherwise the whole tree.
        """
        self._ingest_all("load_fs", root, iter_traversable(root, self._locale))

    def load_bytes(self, data: bytes, format: str | Format | Decoder) -> None:  # noqa: A002
        """Load an encoded document held in memory.

        Args:
            data: Encoded document
            format: Format hint (``yaml``, ``yml``, ``toml``, ``json``) or a
                decoder function ``bytes -> object``

        Raises:
            EmptySourceError: If data is empty
            UnsupportedFormatError: If the hint is not recognized
            DecodeError: If the decoder rejects the data
            IncorrectDecodedShapeError: If the document root is a scalar
        """
        self._load_encoded("load_bytes", data, format)

    def load_reader(
        self,
        reader: BinaryIO | io.BufferedIOBase,
        format: str | Format | Decoder,  # noqa: A002
    ) -> None:
        """Read a binary stream to the end and load it like load_bytes()."""
        self._load_encoded("load_reader", reader.read(), format)

    def _load_encoded(
        self,
        operation: str,
        data: bytes,
        format: str | Format | Decoder,  # noqa: A002
    ) -> None:
        try:
            decoder = format if callable(format) else decoder_for(resolve_format(format))
            value = decode_document(data, decoder)
        except CatalogError as e:
            _report(e, operation, f"{len(data)} bytes")
            raise
        self._ingest(value, f"<{operation}>")

    def load_http(
        self,
        url: str,
        format: str | Format | None = None,  # noqa: A002
        *,
        client: httpx.Client | None = None,
    ) -> None:
        """Fetch a document over HTTP(S) and load it.

        Args:
            url: Document URL; ``http://`` is assumed when no scheme is given
            format: Format hint; derived from the URL path when omitted
            client: httpx client to send the request with (default: a
                one-off request with httpx's default timeout)

        Raises:
            IncorrectProtocolError: If the scheme is not http or https
            UnknownFormatError: If format is omitted and the path has no
                extension
            RemoteSourceError: On transport failure or non-2xx status
            CatalogError: If the body cannot be decoded
        """
        try:
            source = fetch_http(url, format, client=client)
        except CatalogError as e:
            _report(e, "load_http", url)
            raise
        self._ingest_all("load_http", url, iter((source,)))

    def load_mapping(self, value: object, prefix: str = "") -> None:
        """Load already-decoded data, skipping format routing.

        Args:
            value: Mapping or sequence (or a Value) of translations
            prefix: Key prefix; ``{"b": "x"}`` with prefix ``"a"`` stores
                key ``a.b``

        Raises:
            IncorrectDecodedShapeError: If value is not a mapping or sequence
            NestingDepthError: If value nests deeper than MAX_DEPTH
        """
        target = f"<{type(value).__name__}>"
        try:
            converted = to_value(value)
        except CatalogError as e:
            _report(e, "load_mapping", target)
            raise
        if not is_container(converted):
            error = IncorrectDecodedShapeError(
                ErrorTemplate.incorrect_decoded_shape(type(converted).__name__)
            )
            _report(error, "load_mapping", target)
            raise error
        self._ingest(converted, "<mapping>", prefix)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def _sweep(self) -> None:
        """Invalidate keys written since the last resolution. Caller holds the write lock."""
        if not self._pending:
            return
        for key in self._pending:
            self._catalog[key].mark_dirty()
            self._cache.remove(key)
        capacity = self._cache_config.capacity_for(len(self._catalog))
        if capacity is not None:
            self._cache.resize(capacity)
        self._pending = []

    def _lookup(self, key: str) -> Message:
        """Find a message, warming the cache. Caller holds the write lock."""
        message = self._cache.get(key)
        if message is None:
            message = self._catalog.get(key)
            if message is None:
                logger.warning(
                    "Message %r not found for locale %s", key[:_LOG_TRUNCATE], self._locale
                )
                raise MessageNotFoundError(ErrorTemplate.message_not_found(key, self._locale))
            self._cache.put(key, message)
        return message

    def resolve(self, key: str, sink: SupportsWrite, /, *params: Params) -> None:
        """Render a message into a sink.

        Args:
            key: Flat catalog key [positional-only]
            sink: Object with a ``write(str)`` method [positional-only]
            *params: Parameter mappings, merged left to right; None skipped

        Raises:
            MessageNotFoundError: If key is not in the catalog
            TemplateParseError: If the message is not a valid template
            TemplateExecutionError: If rendering fails
        """
        with self._lock.write():
            self._sweep()
            message = self._lookup(key)
            render(message, sink, *params)

    def format_to(
        self, key: str, sink: SupportsWrite, /, *params: Params
    ) -> tuple[CatalogError, ...]:
        """Render into a sink, returning failures instead of raising.

        Returns:
            Empty tuple on success, otherwise a one-element tuple holding
            the error. Nothing is written on failure.
        """
        try:
            self.resolve(key, sink, *params)
        except CatalogError as e:
            return (e,)
        return ()

    def format_pattern(self, key: str, /, *params: Params) -> tuple[str, tuple[CatalogError, ...]]:
        """Render a message, returning (text, errors) instead of raising.

        Example:
            >>> result, errors = bundle.format_pattern("greet", {"name": "Ann"})
            >>> if errors:
            ...     logger.warning("translation failed: %s", errors[0])
        """
        buffer = io.StringIO()
        errors = self.format_to(key, buffer, *params)
        return buffer.getvalue(), errors

    def try_format_to(self, key: str, sink: SupportsWrite, /, *params: Params) -> None:
        """Render into a sink, never raising for catalog errors.

        A missing key is passed to the not-found handler; any other
        CatalogError is dropped.
        """
        try:
            self.resolve(key, sink, *params)
        except MessageNotFoundError:
            self._not_found_handler(key, sink, *params)
        except CatalogError as e:
            logger.debug("Ignoring failure for %r: %s", key[:_LOG_TRUNCATE], e)

    def try_format(self, key: str, /, *params: Params) -> str:
        """Render a message, never raising for catalog errors.

        Returns:
            Rendered text, or whatever the not-found handler wrote
            (nothing by default)
        """
        buffer = io.StringIO()
        self.try_format_to(key, buffer, *params)
        return buffer.getvalue()

    def must_format_to(self, key: str, sink: SupportsWrite, /, *params: Params) -> None:
        """Render into a sink; the key is asserted to exist.

        Raises:
            CatalogError: Any failure, unchanged
        """
        self.resolve(key, sink, *params)

    def must_format(self, key: str, /, *params: Params) -> str:
        """Render a message; the key is asserted to exist.

        Raises:
            CatalogError: Any failure, unchanged
        """
        buffer = io.StringIO()
        self.resolve(key, buffer, *params)
        return buffer.getvalue()

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def has_message(self, key: str) -> bool:
        """Check if a key is in the catalog."""
        with self._lock.read():
            return key in self._catalog

    def get_messages(self) -> dict[str, str]:
        """Snapshot of the catalog as key -> raw value."""
        with self._lock.read():
            return {key: message.value for key, message in self._catalog.items()}

    def get_cache_stats(self) -> dict[str, int | float]:
        """Cache statistics: size, capacity, hits, misses, hit_rate."""
        with self._lock.read():
            return self._cache.get_stats()

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._catalog)

    def __contains__(self, key: object) -> bool:
        with self._lock.read():
            return key in self._catalog

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> Bundle("zh-Hans")
            Bundle(locale='zh-Hans', messages=0, cache_capacity=64)
        """
        return (
            f"Bundle(locale={self._locale!r}, "
            f"messages={len(self._catalog)}, "
            f"cache_capacity={self._cache.capacity})"
        )

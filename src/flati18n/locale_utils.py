"""Locale tag handling backed by Babel.

Bundles identify their language with a BCP-47 tag (``zh-Hans``, ``en-US``).
The tag names locale directories and ``<tag>.<ext>`` files, so it is
validated once, at the boundary, against Babel's CLDR data and normalized
without adding subtags.

Python 3.13+. External dependency: Babel.
"""

from __future__ import annotations

import functools
import locale as locale_module
import os

from babel import Locale, UnknownLocaleError
from babel.core import get_locale_identifier

__all__ = [
    "DEFAULT_LOCALE",
    "canonical_tag",
    "get_babel_locale",
    "get_system_locale",
]

DEFAULT_LOCALE = "en"


def _identifier(locale: Locale) -> str:
    return get_locale_identifier(
        (locale.language, locale.territory, locale.script, locale.variant),
        sep="-",
    )


def _normalize_subtag(index: int, subtag: str) -> str:
    if index == 0:
        return subtag.lower()
    if len(subtag) == 4 and subtag.isalpha():
        return subtag.title()
    if (len(subtag) == 2 and subtag.isalpha()) or (len(subtag) == 3 and subtag.isdigit()):
        return subtag.upper()
    return subtag.lower()


@functools.lru_cache(maxsize=128)
def get_babel_locale(tag: str) -> Locale:
    """Parse a BCP-47 or POSIX locale tag into a Babel Locale (cached).

    Raises:
        ValueError: If the tag is malformed or unknown to CLDR
    """
    try:
        return Locale.parse(tag.replace("_", "-"), sep="-")
    except (UnknownLocaleError, ValueError, TypeError) as e:
        msg = f"Invalid locale tag: {tag!r}"
        raise ValueError(msg) from e


def canonical_tag(locale: str | Locale) -> str:
    """Return the canonical BCP-47 form of a locale.

    The tag is validated against CLDR but keeps exactly the subtags it was
    given: only separators and case are normalized. Likely subtags are not
    added, so ``zh-CN`` stays ``zh-CN`` and still matches a ``zh-CN/``
    directory.

    Example:
        >>> canonical_tag("zh_Hans")
        'zh-Hans'
        >>> canonical_tag("en-us")
        'en-US'
        >>> canonical_tag("zh-cn")
        'zh-CN'

    Raises:
        ValueError: If the tag is malformed or unknown to CLDR
    """
    if isinstance(locale, Locale):
        return _identifier(locale)
    if not locale:
        msg = "Locale tag cannot be empty"
        raise ValueError(msg)
    get_babel_locale(locale)
    subtags = locale.replace("_", "-").split("-")
    return "-".join(_normalize_subtag(i, subtag) for i, subtag in enumerate(subtags))


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect the system locale as a canonical BCP-47 tag.

    Detection order:
    1. locale.getlocale()
    2. LC_ALL, LC_MESSAGES, LANG environment variables

    Encoding suffixes (``.UTF-8``) and modifiers (``@euro``) are stripped;
    the ``C`` and ``POSIX`` pseudo-locales and tags unknown to CLDR are
    ignored.

    Args:
        raise_on_failure: Raise instead of returning DEFAULT_LOCALE

    Raises:
        RuntimeError: If raise_on_failure is True and no locale is found
    """
    candidates: list[str] = []
    try:
        system_locale, _ = locale_module.getlocale()
    except ValueError:
        system_locale = None
    if system_locale:
        candidates.append(system_locale)
    candidates.extend(
        value
        for var in ("LC_ALL", "LC_MESSAGES", "LANG")
        if (value := os.environ.get(var))
    )

    for candidate in candidates:
        code = candidate.split(".")[0].split("@")[0]
        if code in ("", "C", "POSIX"):
            continue
        try:
            return canonical_tag(code)
        except ValueError:
            continue

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)
    return DEFAULT_LOCALE

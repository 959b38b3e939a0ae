"""Hypothesis strategies for translation data and templates.

Provides custom strategies for property-based testing of the flattener,
the template engine, the LRU cache and the Bundle.
"""

from __future__ import annotations

import string

from hypothesis import strategies as st
from hypothesis.strategies import composite

# Characters allowed in generated map keys. Dots and brackets are excluded so
# that a generated flat key maps back to exactly one path.
KEY_ALPHABET = string.ascii_letters + string.digits + "_-"


@composite
def identifiers(draw: st.DrawFn) -> str:
    """Generate template field identifiers (letter, then letters/digits/_)."""
    first = draw(st.sampled_from(string.ascii_letters))
    rest = draw(st.text(alphabet=string.ascii_letters + string.digits + "_", max_size=12))
    return first + rest


def map_keys() -> st.SearchStrategy[str]:
    """Generate non-empty map keys safe to flatten."""
    return st.text(alphabet=KEY_ALPHABET, min_size=1, max_size=10)


def scalars() -> st.SearchStrategy[str | int | float]:
    """Generate leaves that the flattener stores (strings and numbers)."""
    return st.one_of(
        st.text(max_size=30),
        st.integers(min_value=-(10**12), max_value=10**12),
        st.floats(allow_nan=False, allow_infinity=False),
    )


def skipped_leaves() -> st.SearchStrategy[bool | None]:
    """Generate leaves that the flattener skips."""
    return st.one_of(st.none(), st.booleans())


def translation_trees(max_leaves: int = 30) -> st.SearchStrategy[object]:
    """Generate nested dict/list trees as a YAML or JSON decoder returns them."""
    return st.recursive(
        st.one_of(scalars(), skipped_leaves()),
        lambda children: st.one_of(
            st.lists(children, max_size=4),
            st.dictionaries(map_keys(), children, max_size=4),
        ),
        max_leaves=max_leaves,
    )


def translation_documents(max_leaves: int = 30) -> st.SearchStrategy[dict[str, object]]:
    """Generate document roots (always a mapping)."""
    return st.dictionaries(map_keys(), translation_trees(max_leaves), max_size=6)


@composite
def plain_text(draw: st.DrawFn) -> str:
    """Generate template text containing no action delimiters."""
    alphabet = st.characters(codec="utf-8", exclude_characters="{")
    return draw(st.text(alphabet=alphabet, max_size=40))


@composite
def template_sources(draw: st.DrawFn) -> tuple[str, dict[str, str], str]:
    """Generate a template, matching parameters and the expected output.

    Returns:
        (source, params, expected)
    """
    parts = draw(st.lists(st.tuples(plain_text(), identifiers()), max_size=5))
    tail = draw(plain_text())
    params: dict[str, str] = {}
    source: list[str] = []
    expected: list[str] = []
    for text, name in parts:
        value = params.setdefault(name, draw(plain_text()))
        source.append(f"{text}{{{{ .{name} }}}}")
        expected.append(f"{text}{value}")
    source.append(tail)
    expected.append(tail)
    return "".join(source), params, "".join(expected)


def cache_operations() -> st.SearchStrategy[list[tuple[str, object]]]:
    """Generate sequences of LRU cache operations.

    Each operation is ("put", key), ("get", key), ("remove", key) or
    ("resize", capacity).
    """
    keys = st.sampled_from([f"k{i}" for i in range(20)])
    return st.lists(
        st.one_of(
            st.tuples(st.just("put"), keys),
            st.tuples(st.just("get"), keys),
            st.tuples(st.just("remove"), keys),
            st.tuples(st.just("resize"), st.integers(min_value=1, max_value=25)),
        ),
        max_size=60,
    )

"""Quickstart example for flati18n.

This example demonstrates loading translations and rendering messages.

Note: Most examples use must_format() for brevity. In production, prefer
format_pattern() and log the returned errors, or try_format() with a
not-found handler.
"""

import io
import tempfile
from pathlib import Path

from flati18n import Bundle, CacheConfig

# Example 1: Simple messages
print("=" * 50)
print("Example 1: Simple Messages")
print("=" * 50)

bundle = Bundle("en")
bundle.load_bytes(
    b"""
hello: Hello, World!
welcome: Welcome to flati18n!
""",
    "yaml",
)

print(bundle.must_format("hello"))
# Output: Hello, World!

print(bundle.must_format("welcome"))
# Output: Welcome to flati18n!

# Example 2: Nested keys and lists
print("\n" + "=" * 50)
print("Example 2: Nested Keys")
print("=" * 50)

bundle.load_bytes(
    b"""
menu:
  file:
    open: Open
    recent: [Report.pdf, Notes.txt]
""",
    "yaml",
)

print(bundle.must_format("menu.file.open"))
# Output: Open
print(bundle.must_format("menu.file.recent[1]"))
# Output: Notes.txt

# Example 3: Template fields
print("\n" + "=" * 50)
print("Example 3: Template Fields")
print("=" * 50)

bundle.load_bytes(
    b'{"greeting": "Hello, {{ .name }}!", "profile": "{{ .user.first }} ({{ .user.age }})"}',
    "json",
)

print(bundle.must_format("greeting", {"name": "Alice"}))
# Output: Hello, Alice!

# Later mappings override earlier ones
defaults = {"user": {"first": "Guest", "age": "?"}}
print(bundle.must_format("profile", defaults, {"user": {"first": "Bob", "age": 30}}))
# Output: Bob (30)

# Example 4: Handling missing messages
print("\n" + "=" * 50)
print("Example 4: Missing Messages")
print("=" * 50)

result, errors = bundle.format_pattern("does.not.exist")
print(f"result={result!r} errors={[str(e) for e in errors]}")
# Output: result='' errors=["Message 'does.not.exist' not found for locale 'en'"]

bundle.not_found_handler = lambda key, sink, *params: sink.write(f"[{key}]")
print(bundle.try_format("does.not.exist"))
# Output: [does.not.exist]

# Example 5: Loading a directory
print("\n" + "=" * 50)
print("Example 5: Directory Layout")
print("=" * 50)

with tempfile.TemporaryDirectory() as tmp:
    root = Path(tmp)
    (root / "de").mkdir()
    (root / "de" / "app.toml").write_text('[app]\ntitle = "Beispiel"\n', encoding="utf-8")
    (root / "fr.yaml").write_text("app:\n  title: Exemple\n", encoding="utf-8")

    german = Bundle("de")
    german.load_dir(root)  # loads de/**
    french = Bundle("fr")
    french.load_dir(root)  # loads fr.yaml

    print(german.must_format("app.title"), french.must_format("app.title"))
    # Output: Beispiel Exemple

# Example 6: Writing into a stream and cache sizing
print("\n" + "=" * 50)
print("Example 6: Streams and Cache")
print("=" * 50)

big = Bundle("en", cache=CacheConfig(initial_capacity=32))
big.load_mapping({f"item{i}": f"Item #{i}" for i in range(3000)}, prefix="catalog")

out = io.StringIO()
big.must_format_to("catalog.item42", out)
print(out.getvalue())
# Output: Item #42
print(big.get_cache_stats())
# Output: {'size': 1, 'capacity': 750, 'hits': 0, 'misses': 1, 'hit_rate': 0.0}

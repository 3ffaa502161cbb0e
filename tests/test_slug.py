# tests/test_slug.py
from geomark.utils.slug import alnum_prefix, safe_slug


def test_safe_slug_basic():
    assert safe_slug("Acme Corp") == "acme-corp"
    assert safe_slug("  BIG_launch!! 2024 ") == "big-launch-2024"
    assert safe_slug("a -- b") == "a-b"


def test_safe_slug_fallback_and_limit():
    assert safe_slug("") == "unnamed"
    assert safe_slug("!!!") == "unnamed"
    assert safe_slug("abcdef-ghij", limit=7) == "abcdef"


def test_alnum_prefix():
    assert alnum_prefix("Acme & Co", 6) == "AcmeCo"
    assert alnum_prefix("Ösel", 6) == "sel"
    assert alnum_prefix("", 6) == ""

"""
Test configuration and fixtures for the geomark engine.
"""

import os
import sys

import pytest

# Ensure repo root is on sys.path
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from geomark.engine.qa import check_logo


SAMPLE_BRANDS = ["Acme", "Northwind", "zephyr labs", "Ösel", "ßeta", "9Lives", "!!!", ""]


@pytest.fixture(params=SAMPLE_BRANDS, ids=lambda b: repr(b))
def brand(request):
    """Brand names covering ASCII, non-ASCII, digits, symbols and empty."""
    return request.param


@pytest.fixture
def assert_clean():
    """Assert an SVG document passes every QA gate, showing the failures otherwise."""
    def _check(svg, allow_emphasis=False):
        result = check_logo(svg, allow_emphasis=allow_emphasis)
        assert result.ok, result.fails
        return result
    return _check


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep a developer's GEOMARK_CONFIG out of test runs."""
    monkeypatch.delenv("GEOMARK_CONFIG", raising=False)

# tests/test_methods.py
import re

import pytest

from geomark.core import sha1_text
from geomark.engine.industries import get_industry_shapes
from geomark.engine.methods import METHOD_GENERATORS
from geomark.engine.methods.letterform import initial_letter, letter_angle
from geomark.engine.methods.negative_space import mask_id
from geomark.engine.methods.patterns import ring_stroke
from geomark.engine.rng import SeededRng, create_rng
from geomark.engine.sdk import Aesthetic, GeometricMethod, Industry
from geomark.engine.svg import svg_wrap


def _run(method, brand, industry, aesthetic, seed):
    return METHOD_GENERATORS[method](brand, industry, aesthetic, create_rng(seed))


def test_registry_covers_all_methods():
    assert set(METHOD_GENERATORS) == set(GeometricMethod)


@pytest.mark.parametrize("method", list(GeometricMethod))
@pytest.mark.parametrize("aesthetic", list(Aesthetic))
def test_methods_produce_clean_marks(method, aesthetic, assert_clean):
    for i in range(12):
        body = _run(method, "Acme", Industry.GENERAL, aesthetic, f"seed-{i}")
        assert body
        assert not body.startswith("<svg")
        assert_clean(svg_wrap(body), allow_emphasis=method is GeometricMethod.CONSTRUCTED_LETTERFORM)


@pytest.mark.parametrize("method", list(GeometricMethod))
def test_methods_handle_odd_brands(method, brand, assert_clean):
    for aesthetic in Aesthetic:
        assert_clean(svg_wrap(_run(method, brand, Industry.CREATIVE, aesthetic, f"{brand}-odd")),
                     allow_emphasis=method is GeometricMethod.CONSTRUCTED_LETTERFORM)


@pytest.mark.parametrize("method", [m for m in GeometricMethod if m is not GeometricMethod.CONSTRUCTED_LETTERFORM])
@pytest.mark.parametrize("industry", list(Industry))
def test_non_letterform_strokes_use_base_palette(method, industry):
    for aesthetic in Aesthetic:
        for i in range(8):
            body = _run(method, "Acme", industry, aesthetic, f"palette-{i}")
            widths = {float(w) for w in re.findall(r'stroke-width="([^"]+)"', body)}
            assert widths <= {2.0, 4.0, 6.0, 8.0}, (aesthetic, i, widths)


@pytest.mark.parametrize("method", list(GeometricMethod))
def test_methods_are_deterministic(method):
    a = _run(method, "Northwind", Industry.FOOD, Aesthetic.NATURE, "fixed")
    b = _run(method, "Northwind", Industry.FOOD, Aesthetic.NATURE, "fixed")
    assert a == b


def test_methods_accept_plain_strings():
    body = _run(GeometricMethod.RADIAL_CONSTRUCT, "Acme", Industry.GENERAL, "bold", "s")
    assert body == _run(GeometricMethod.RADIAL_CONSTRUCT, "Acme", Industry.GENERAL, Aesthetic.BOLD, "s")


def test_radial_fold_counts():
    for i in range(30):
        body = _run(GeometricMethod.RADIAL_CONSTRUCT, "Acme", Industry.GENERAL, Aesthetic.MINIMALIST, f"r{i}")
        assert body.count('<g transform="rotate(') in (3, 4)
        body = _run(GeometricMethod.RADIAL_CONSTRUCT, "Acme", Industry.GENERAL, Aesthetic.BOLD, f"r{i}")
        assert body.count('<g transform="rotate(') in (3, 4, 5, 6, 8)


def test_mask_ids_are_seed_derived():
    assert mask_id("cl", SeededRng("x")) == "cl-" + sha1_text("x")[:8]
    assert mask_id("ns", SeededRng("x"), "Acme") == "ns-Acme-" + sha1_text("x")[:8]


@pytest.mark.parametrize("industry", list(Industry))
def test_negative_space_cuts_industry_shape(industry):
    keys = {s.key for s in get_industry_shapes(industry)}
    for i in range(8):
        body = _run(GeometricMethod.NEGATIVE_SPACE, "Acme", industry, Aesthetic.BOLD, f"ns{i}")
        assert '<mask id="ns-Acme-' in body
        shape_key = re.search(r'data-shape="([^"]+)"', body).group(1)
        assert shape_key in keys


def test_negative_space_tech_containers_are_square():
    for i in range(20):
        body = _run(GeometricMethod.NEGATIVE_SPACE, "Acme", Industry.TECHNOLOGY, Aesthetic.TECH, f"t{i}")
        container = body.split("</defs>", 1)[1]
        assert container.startswith('<g mask="url(#ns-Acme-')
        assert "<rect" in container
        assert "<circle" not in container and "<polygon" not in container


def test_ring_stroke_stays_on_palette():
    assert [ring_stroke(sw) for sw in (2, 4, 6, 8)] == [2, 2, 2, 4]


def test_initial_letter():
    assert initial_letter("acme") == "A"
    assert initial_letter("ßeta") == "S"
    assert initial_letter("9lives") == "9"
    assert initial_letter("") == ""


def test_letter_angle():
    assert letter_angle("A") == 0
    assert letter_angle("N") == 180


def test_letterform_empty_brand_still_draws():
    for aesthetic in Aesthetic:
        for i in range(10):
            body = _run(GeometricMethod.CONSTRUCTED_LETTERFORM, "", Industry.GENERAL, aesthetic, f"e{i}")
            assert "<" in body

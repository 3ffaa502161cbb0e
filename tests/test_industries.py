# tests/test_industries.py
import re

import pytest

from geomark.engine.industries import INDUSTRY_SHAPES, get_industry_shapes, resolve_industry
from geomark.engine.sdk import STROKES, Industry
from geomark.engine.svg import svg_wrap


@pytest.mark.parametrize("text,expected", [
    ("", Industry.GENERAL),
    (None, Industry.GENERAL),
    ("xyzzy", Industry.GENERAL),
    ("FinTech", Industry.FINANCE),
    ("legal", Industry.FINANCE),
    ("Insurance", Industry.FINANCE),
    ("  Health  ", Industry.HEALTH),
    ("Coffee shop", Industry.FOOD),
    ("B2B SaaS", Industry.TECHNOLOGY),
    ("ecommerce", Industry.RETAIL),
    ("music", Industry.CREATIVE),
    (Industry.NATURE, Industry.NATURE),
])
def test_resolve_industry(text, expected):
    assert resolve_industry(text) is expected


def test_every_industry_has_shapes():
    for industry in Industry:
        shapes = get_industry_shapes(industry)
        assert len(shapes) >= 3
        assert all(s.industry is industry for s in shapes)


def test_shape_keys_unique():
    keys = [s.key for shapes in INDUSTRY_SHAPES.values() for s in shapes]
    assert len(keys) == len(set(keys))
    assert "finance.shield" in keys


@pytest.mark.parametrize("industry", list(Industry))
def test_shapes_render_clean(industry, assert_clean):
    for shape in get_industry_shapes(industry):
        markup = shape(256, 256, 120, 4)
        assert "currentColor" in markup
        assert_clean(svg_wrap(markup))


@pytest.mark.parametrize("sw", STROKES)
def test_shape_strokes_stay_on_palette(sw):
    for shapes in INDUSTRY_SHAPES.values():
        for shape in shapes:
            for color in ("currentColor", "black"):
                markup = shape(256, 256, 100, sw, color=color)
                widths = {float(w) for w in re.findall(r'stroke-width="([^"]+)"', markup)}
                assert widths <= set(STROKES), (shape.key, widths)


def test_brush_stroke_steps_up_one_weight():
    brush = next(s for s in get_industry_shapes(Industry.CREATIVE) if s.name == "brush-stroke")
    assert 'stroke-width="6"' in brush(256, 256, 100, 4)
    assert 'stroke-width="8"' in brush(256, 256, 100, 8)


def test_shapes_honor_paint_color():
    for shapes in INDUSTRY_SHAPES.values():
        for shape in shapes:
            markup = shape(256, 256, 100, 6, color="black")
            assert "currentColor" not in markup
            assert "black" in markup


def test_shape_table_is_read_only():
    with pytest.raises(TypeError):
        INDUSTRY_SHAPES[Industry.GENERAL] = ()

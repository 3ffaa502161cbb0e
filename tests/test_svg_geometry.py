# tests/test_svg_geometry.py
from geomark.engine.geometry import arc_path, hex_points, ngon_points, points, polar, snap_angle
from geomark.engine.svg import attrs, el, fmt, group, rotate, svg_wrap


def test_fmt_numbers():
    assert fmt(256) == "256"
    assert fmt(2.0) == "2"
    assert fmt(12.5) == "12.5"
    assert fmt(-3.25) == "-3.25"
    assert fmt(0.1 + 0.2) == "0.3"
    assert fmt(-0.001) == "0"


def test_attrs_order_and_names():
    assert attrs(cx=1, cy=2, stroke_width=4, fill=None) == 'cx="1" cy="2" stroke-width="4"'
    assert attrs(class_="x") == 'class="x"'


def test_el_self_closing_and_children():
    assert el("circle", cx=256, cy=256, r=10) == '<circle cx="256" cy="256" r="10"/>'
    assert el("g", "<x/>", transform="t") == '<g transform="t"><x/></g>'
    assert group("<a/>", "<b/>") == "<g><a/><b/></g>"


def test_rotate_and_wrap():
    assert rotate(45, 256, 256) == "rotate(45 256 256)"
    assert svg_wrap("") == '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 512 512"></svg>'


def test_polar_zero_is_up_and_clockwise():
    assert polar(256, 256, 100, 0) == (256, 156)
    assert polar(256, 256, 100, 90) == (356, 256)
    assert polar(256, 256, 100, 180) == (256, 356)


def test_arc_path_small_arc():
    assert arc_path(256, 256, 100, -45, 45) == "M 326.71 185.29 A 100 100 0 0 0 185.29 185.29"


def test_arc_path_large_and_full_turn():
    assert " 0 1 0 " in arc_path(256, 256, 50, 0, 270)
    full = arc_path(256, 256, 50, 0, 360)
    assert " 0 1 0 " in full
    # full turns are clamped so the endpoints differ
    start = full.split(" A ")[0]
    end = full.split(" 0 1 0 ")[1]
    assert start[2:] != end


def test_polygon_points():
    assert len(hex_points(256, 256, 100).split()) == 6
    assert len(ngon_points(256, 256, 100, 5).split()) == 5
    assert points(1, 2, 3.5, 4) == "1,2 3.5,4"


def test_snap_angle():
    assert snap_angle(50, 45) == 45
    assert snap_angle(70, 45) == 90
    assert snap_angle(33.3, 0) == 33.3

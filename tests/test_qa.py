# tests/test_qa.py
import json

from geomark.engine.qa import QAResult, check_logo, check_results, qa_result_to_json
from geomark.engine.svg import el, svg_wrap


def _doc(*children):
    return svg_wrap("".join(children))


def test_clean_document_passes():
    result = check_logo(_doc(el("circle", cx=256, cy=256, r=100, fill="currentColor")))
    assert result.ok
    assert result.fails == []
    assert result.details["bounds"]["elements"] == 1


def test_malformed_xml():
    result = check_logo("<svg")
    assert not result.ok
    assert "Malformed XML" in result.fails[0]


def test_wrong_viewbox():
    svg = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100"></svg>'
    assert not check_logo(svg).ok


def test_stroke_palette():
    ok = _doc(el("line", x1=10, y1=10, x2=20, y2=20, stroke="currentColor", stroke_width=8))
    bad = _doc(el("line", x1=10, y1=10, x2=20, y2=20, stroke="currentColor", stroke_width=5))
    assert check_logo(ok).ok
    result = check_logo(bad)
    assert not result.ok
    assert "stroke-width 5" in result.fails[0]


def test_emphasis_weights_need_allowance():
    heavy = _doc(el("line", x1=10, y1=10, x2=20, y2=20, stroke="currentColor", stroke_width=9))
    assert not check_logo(heavy).ok
    assert check_logo(heavy, allow_emphasis=True).ok
    odd = _doc(el("line", x1=10, y1=10, x2=20, y2=20, stroke="currentColor", stroke_width=5))
    assert not check_logo(odd, allow_emphasis=True).ok


def test_check_results_allows_emphasis_for_letterform_only():
    class Fake:
        def __init__(self, method):
            self.svg = _doc(el("line", x1=10, y1=10, x2=20, y2=20, stroke="currentColor", stroke_width=12))
            self.seed = method
            self.method = type("M", (), {"value": method})()

    assert check_results([Fake("constructed-letterform")]).ok
    result = check_results([Fake("negative-space")])
    assert not result.ok
    assert "stroke-width 12" in result.fails[0]


def test_paints():
    assert not check_logo(_doc(el("rect", width=10, height=10, fill="red"))).ok
    assert not check_logo(_doc(el("rect", width=10, height=10, fill="white"))).ok
    masked = (
        el("defs", el("mask", el("rect", width=512, height=512, fill="white"),
                      el("circle", cx=256, cy=256, r=40, fill="black"), id="m1"))
        + el("circle", cx=256, cy=256, r=100, fill="currentColor", mask="url(#m1)")
    )
    assert check_logo(_doc(masked)).ok


def test_mask_references():
    result = check_logo(_doc(el("circle", cx=256, cy=256, r=10, fill="currentColor", mask="url(#nope)")))
    assert not result.ok
    assert "#nope" in result.fails[0]

    unused = el("defs", el("mask", el("rect", width=512, height=512, fill="white"), id="m2"))
    result = check_logo(_doc(unused))
    assert result.ok
    assert result.warnings


def test_non_finite_numbers():
    result = check_logo(_doc('<circle cx="nan" cy="256" r="10" fill="currentColor"/>'))
    assert not result.ok
    assert any("nan" in f for f in result.fails)


def test_brand_text_in_ids_is_not_a_number():
    masked = (
        el("defs", el("mask", el("rect", width=512, height=512, fill="white"), id="ns-Infini-1a2b3c4d"))
        + el("circle", cx=256, cy=256, r=100, fill="currentColor", mask="url(#ns-Infini-1a2b3c4d)")
    )
    assert check_logo(_doc(masked)).ok


def test_bounds():
    assert not check_logo(_doc(el("circle", cx=500, cy=256, r=60, fill="currentColor"))).ok
    assert not check_logo(_doc(el("path", d="M 0 0 L 600 10", stroke="currentColor", stroke_width=2))).ok
    assert check_logo(_doc(el("path", d="M 10 10 Q 256 100 500 500", fill="currentColor"))).ok


def test_check_results_prefixes_failures():
    class Fake:
        def __init__(self, svg, seed):
            self.svg = svg
            self.seed = seed
            self.method = type("M", (), {"value": "radial-construct"})()

    good = Fake(_doc(el("circle", cx=256, cy=256, r=10, fill="currentColor")), "a")
    bad = Fake(_doc(el("circle", cx=256, cy=256, r=10, fill="red")), "a")
    result = check_results([good, bad])
    assert not result.ok
    assert result.fails[0].startswith("[1:radial-construct]")
    assert any("repeats" in w for w in result.warnings)


def test_json_roundtrip_shape():
    data = json.loads(qa_result_to_json(QAResult(ok=True, fails=[], warnings=["w"], details={})))
    assert data == {"ok": True, "fails": [], "warnings": ["w"], "details": {}}

"""
Industry-aware abstract shape library.

These are abstract geometric primitives, never literal icons. They serve as
base shapes for the construction methods (the negative-space cutout draws
from here). Every primitive renders around (cx, cy) within radius r using
stroke width sw and a single paint colour.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, List, Tuple, Union

from .geometry import arc_path, points, polar
from .sdk import CURRENT_COLOR, STROKES, Industry
from .svg import el, fmt, rotate

ShapeRenderer = Callable[[float, float, float, float, str], str]


@dataclass(frozen=True)
class ShapeDef:
    industry: Industry
    name: str
    render: ShapeRenderer

    @property
    def key(self) -> str:
        return f"{self.industry.value}.{self.name}"

    def __call__(self, cx: float, cy: float, r: float, sw: float, color: str = CURRENT_COLOR) -> str:
        return self.render(cx, cy, r, sw, color)


_REGISTRY: Dict[Industry, List[ShapeDef]] = {industry: [] for industry in Industry}


def _shape(industry: Industry, name: str):
    def register(fn: ShapeRenderer) -> ShapeRenderer:
        _REGISTRY[industry].append(ShapeDef(industry, name, fn))
        return fn
    return register


def _line(x1, y1, x2, y2, sw, color):
    return el("line", x1=x1, y1=y1, x2=x2, y2=y2, stroke=color, stroke_width=sw, stroke_linecap="round")


def _stroked(sw, color, **extra):
    return dict(fill="none", stroke=color, stroke_width=sw, **extra)


def _heavier(sw):
    """Next palette weight above ``sw``, capped at the heaviest."""
    return next((s for s in STROKES if s > sw), STROKES[-1])


# ============================================================================
# TECHNOLOGY
# ============================================================================

@_shape(Industry.TECHNOLOGY, "circuit-node")
def _circuit_node(cx, cy, r, sw, color):
    ir = r * 0.3
    outer = r * 0.85
    out = el("circle", cx=cx, cy=cy, r=ir, fill=color)
    for a in (0, 90, 180, 270):
        s = polar(cx, cy, ir, a)
        e = polar(cx, cy, outer, a)
        out += _line(s.x, s.y, e.x, e.y, sw, color)
    return out


@_shape(Industry.TECHNOLOGY, "bracket-pair")
def _bracket_pair(cx, cy, r, sw, color):
    h = r * 0.7
    w = r * 0.4
    paint = _stroked(sw, color, stroke_linecap="round", stroke_linejoin="round")
    left = points(cx - w * 0.2, cy - h, cx - w, cy, cx - w * 0.2, cy + h)
    right = points(cx + w * 0.2, cy - h, cx + w, cy, cx + w * 0.2, cy + h)
    return el("polyline", points=left, **paint) + el("polyline", points=right, **paint)


@_shape(Industry.TECHNOLOGY, "pixel-grid")
def _pixel_grid(cx, cy, r, sw, color):
    s = r * 0.35
    g = r * 0.1
    out = ""
    for x in (cx - s - g / 2, cx + g / 2):
        for y in (cy - s - g / 2, cy + g / 2):
            out += el("rect", x=x, y=y, width=s, height=s, fill=color)
    return out


@_shape(Industry.TECHNOLOGY, "data-stream")
def _data_stream(cx, cy, r, sw, color):
    sp = r * 0.35
    out = ""
    for idx, i in enumerate((-1, 0, 1)):
        w = r * (0.9 if idx == 1 else 0.6)
        y = cy + i * sp
        out += _line(cx - w / 2, y, cx + w / 2, y, sw, color)
    return out


# ============================================================================
# FINANCE
# ============================================================================

@_shape(Industry.FINANCE, "shield")
def _shield(cx, cy, r, sw, color):
    w = r * 0.75
    h = r
    d = (
        f"M {fmt(cx - w)} {fmt(cy - h * 0.5)} L {fmt(cx - w)} {fmt(cy + h * 0.15)} "
        f"L {fmt(cx)} {fmt(cy + h * 0.65)} L {fmt(cx + w)} {fmt(cy + h * 0.15)} "
        f"L {fmt(cx + w)} {fmt(cy - h * 0.5)} Z"
    )
    return el("path", d=d, **_stroked(sw, color, stroke_linejoin="round"))


@_shape(Industry.FINANCE, "ascending-bars")
def _ascending_bars(cx, cy, r, sw, color):
    bw = r * 0.2
    gap = r * 0.08
    out = ""
    for i in range(3):
        h = r * (0.5 + i * 0.25)
        x = cx - bw * 1.5 - gap + i * (bw + gap)
        out += el("rect", x=x, y=cy + r * 0.5 - h, width=bw, height=h, rx=bw * 0.15, fill=color)
    return out


@_shape(Industry.FINANCE, "rising-trapezoid")
def _rising_trapezoid(cx, cy, r, sw, color):
    bw = r * 0.9
    tw = r * 0.35
    h = r * 0.8
    d = (
        f"M {fmt(cx - bw / 2)} {fmt(cy + h / 2)} L {fmt(cx - tw / 2)} {fmt(cy - h / 2)} "
        f"L {fmt(cx + tw / 2)} {fmt(cy - h / 2)} L {fmt(cx + bw / 2)} {fmt(cy + h / 2)} Z"
    )
    return el("path", d=d, **_stroked(sw, color, stroke_linejoin="round"))


# ============================================================================
# HEALTH
# ============================================================================

@_shape(Industry.HEALTH, "rounded-cross")
def _rounded_cross(cx, cy, r, sw, color):
    w = r * 0.3
    length = r * 0.75
    rx = w * 0.4
    return (
        el("rect", x=cx - w / 2, y=cy - length, width=w, height=length * 2, rx=rx, fill=color)
        + el("rect", x=cx - length, y=cy - w / 2, width=length * 2, height=w, rx=rx, fill=color)
    )


@_shape(Industry.HEALTH, "pulse-line")
def _pulse_line(cx, cy, r, sw, color):
    w = r * 0.9
    h = r * 0.45
    pts = points(
        cx - w, cy,
        cx - w * 0.5, cy,
        cx - w * 0.3, cy - h,
        cx - w * 0.1, cy + h * 0.7,
        cx + w * 0.1, cy - h * 0.5,
        cx + w * 0.3, cy + h * 0.3,
        cx + w * 0.5, cy,
        cx + w, cy,
    )
    return el("polyline", points=pts, **_stroked(sw, color, stroke_linecap="round", stroke_linejoin="round"))


@_shape(Industry.HEALTH, "growth-spiral")
def _growth_spiral(cx, cy, r, sw, color):
    pts = []
    for i in range(61):
        t = i / 60
        p = polar(cx, cy, r * 0.15 + r * 0.7 * t, t * 720)
        pts.append(f"{fmt(p.x)},{fmt(p.y)}")
    return el("polyline", points=" ".join(pts), **_stroked(sw, color, stroke_linecap="round"))


# ============================================================================
# FOOD
# ============================================================================

@_shape(Industry.FOOD, "flame")
def _flame(cx, cy, r, sw, color):
    h = r * 0.9
    w = r * 0.55
    d = (
        f"M {fmt(cx)} {fmt(cy + h * 0.5)} Q {fmt(cx - w)} {fmt(cy)} {fmt(cx)} {fmt(cy - h * 0.5)} "
        f"Q {fmt(cx + w * 0.3)} {fmt(cy - h * 0.1)} {fmt(cx)} {fmt(cy + h * 0.5)} Z"
    )
    return el("path", d=d, fill=color)


@_shape(Industry.FOOD, "notched-ring")
def _notched_ring(cx, cy, r, sw, color):
    return el("path", d=arc_path(cx, cy, r * 0.85, 30, 330), **_stroked(sw, color, stroke_linecap="round"))


@_shape(Industry.FOOD, "leaf")
def _food_leaf(cx, cy, r, sw, color):
    h = r * 0.9
    w = r * 0.5
    d = (
        f"M {fmt(cx)} {fmt(cy - h / 2)} Q {fmt(cx + w)} {fmt(cy)} {fmt(cx)} {fmt(cy + h / 2)} "
        f"Q {fmt(cx - w * 0.4)} {fmt(cy)} {fmt(cx)} {fmt(cy - h / 2)} Z"
    )
    return el("path", d=d, fill=color)


# ============================================================================
# EDUCATION
# ============================================================================

@_shape(Industry.EDUCATION, "open-book")
def _open_book(cx, cy, r, sw, color):
    w = r * 0.8
    h = r * 0.6
    spine = f"{fmt(cx)} {fmt(cy + h * 0.3)}"
    pages = f"M {spine} L {fmt(cx - w)} {fmt(cy - h)} M {spine} L {fmt(cx + w)} {fmt(cy - h)}"
    stem = f"M {spine} L {fmt(cx)} {fmt(cy + h)}"
    paint = _stroked(sw, color, stroke_linecap="round")
    return el("path", d=pages, **paint) + el("path", d=stem, **paint)


@_shape(Industry.EDUCATION, "beacon")
def _beacon(cx, cy, r, sw, color):
    by = cy + r * 0.3
    out = el("circle", cx=cx, cy=by, r=r * 0.12, fill=color)
    for i in range(1, 4):
        half = 30 + i * 10
        out += el("path", d=arc_path(cx, by, r * 0.2 * i, -half, half), **_stroked(sw, color, stroke_linecap="round"))
    return out


@_shape(Industry.EDUCATION, "steps")
def _steps(cx, cy, r, sw, color):
    steps = 4
    step_w = r * 1.4 / steps
    step_h = r * 1.2 / steps
    x0 = cx - r * 0.7
    y0 = cy + r * 0.6
    d = f"M {fmt(x0)} {fmt(y0)}"
    for i in range(steps):
        d += f" L {fmt(x0 + i * step_w)} {fmt(y0 - i * step_h)}"
        d += f" L {fmt(x0 + (i + 1) * step_w)} {fmt(y0 - i * step_h)}"
    d += f" L {fmt(cx + r * 0.7)} {fmt(cy - r * 0.6)}"
    return el("path", d=d, **_stroked(sw, color, stroke_linecap="round", stroke_linejoin="round"))


# ============================================================================
# CREATIVE
# ============================================================================

@_shape(Industry.CREATIVE, "brush-stroke")
def _brush_stroke(cx, cy, r, sw, color):
    d = (
        f"M {fmt(cx - r * 0.8)} {fmt(cy + r * 0.3)} "
        f"C {fmt(cx - r * 0.3)} {fmt(cy - r * 0.8)}, {fmt(cx + r * 0.3)} {fmt(cy + r * 0.8)}, "
        f"{fmt(cx + r * 0.8)} {fmt(cy - r * 0.3)}"
    )
    return el("path", d=d, **_stroked(_heavier(sw), color, stroke_linecap="round"))


@_shape(Industry.CREATIVE, "spiral")
def _spiral(cx, cy, r, sw, color):
    cmds = []
    for i in range(81):
        t = i / 80
        p = polar(cx, cy, r * 0.1 + r * 0.65 * t, t * 1080)
        cmds.append(f"{'M' if i == 0 else 'L'} {fmt(p.x)} {fmt(p.y)}")
    return el("path", d=" ".join(cmds), **_stroked(sw, color, stroke_linecap="round"))


@_shape(Industry.CREATIVE, "eye")
def _eye(cx, cy, r, sw, color):
    w = r * 0.9
    h = r * 0.45
    d = (
        f"M {fmt(cx - w)} {fmt(cy)} Q {fmt(cx)} {fmt(cy - h * 2)}, {fmt(cx + w)} {fmt(cy)} "
        f"Q {fmt(cx)} {fmt(cy + h * 2)}, {fmt(cx - w)} {fmt(cy)} Z"
    )
    return el("path", d=d, **_stroked(sw, color)) + el("circle", cx=cx, cy=cy, r=r * 0.18, fill=color)


# ============================================================================
# NATURE
# ============================================================================

@_shape(Industry.NATURE, "leaf")
def _nature_leaf(cx, cy, r, sw, color):
    w = r * 0.55
    h = r * 0.9
    d = (
        f"M {fmt(cx)} {fmt(cy - h)} Q {fmt(cx + w)} {fmt(cy - h * 0.2)}, {fmt(cx)} {fmt(cy + h * 0.6)} "
        f"Q {fmt(cx - w)} {fmt(cy - h * 0.2)}, {fmt(cx)} {fmt(cy - h)} Z"
    )
    return el("path", d=d, fill=color, transform=rotate(-15, cx, cy))


@_shape(Industry.NATURE, "ripples")
def _ripples(cx, cy, r, sw, color):
    return "".join(
        el("path", d=arc_path(cx, cy, r * f, 30, 330), **_stroked(sw, color, stroke_linecap="round"))
        for f in (0.3, 0.55, 0.8)
    )


@_shape(Industry.NATURE, "sun")
def _sun(cx, cy, r, sw, color):
    ir = r * 0.3
    outer = r * 0.75
    out = el("circle", cx=cx, cy=cy, r=ir, fill=color)
    for i in range(8):
        s = polar(cx, cy, ir + sw, i * 45)
        e = polar(cx, cy, outer, i * 45)
        out += _line(s.x, s.y, e.x, e.y, sw, color)
    return out


@_shape(Industry.NATURE, "seed")
def _seed(cx, cy, r, sw, color):
    d = (
        f"M {fmt(cx)} {fmt(cy - r * 0.8)} Q {fmt(cx + r * 0.45)} {fmt(cy + r * 0.1)}, {fmt(cx)} {fmt(cy + r * 0.8)} "
        f"Q {fmt(cx - r * 0.45)} {fmt(cy + r * 0.1)}, {fmt(cx)} {fmt(cy - r * 0.8)} Z"
    )
    return el("path", d=d, fill=color)


# ============================================================================
# RETAIL
# ============================================================================

@_shape(Industry.RETAIL, "bag")
def _bag(cx, cy, r, sw, color):
    w = r * 0.7
    h = r * 0.8
    top = cy - h * 0.2
    return (
        el("rect", x=cx - w / 2, y=top, width=w, height=h, rx=w * 0.08, **_stroked(sw, color))
        + el("path", d=arc_path(cx, top, w * 0.3, -90, 90), **_stroked(sw, color, stroke_linecap="round"))
    )


@_shape(Industry.RETAIL, "tag")
def _tag(cx, cy, r, sw, color):
    w = r * 0.7
    h = r * 0.9
    d = (
        f"M {fmt(cx - w / 2)} {fmt(cy - h / 2)} L {fmt(cx + w / 2)} {fmt(cy - h / 2)} "
        f"L {fmt(cx + w / 2)} {fmt(cy + h * 0.2)} L {fmt(cx)} {fmt(cy + h / 2)} "
        f"L {fmt(cx - w / 2)} {fmt(cy + h * 0.2)} Z"
    )
    return (
        el("path", d=d, **_stroked(sw, color, stroke_linejoin="round"))
        + el("circle", cx=cx, cy=cy - h * 0.2, r=r * 0.08, fill=color)
    )


@_shape(Industry.RETAIL, "forward-arrow")
def _forward_arrow(cx, cy, r, sw, color):
    w = r * 0.7
    h = r * 0.5
    head = points(cx - w, cy - h, cx + w * 0.3, cy, cx - w, cy + h)
    return (
        el("polyline", points=head, **_stroked(sw, color, stroke_linecap="round", stroke_linejoin="round"))
        + _line(cx - w * 0.7, cy, cx + w * 0.3, cy, sw, color)
    )


# ============================================================================
# GENERAL
# ============================================================================

@_shape(Industry.GENERAL, "diamond")
def _diamond(cx, cy, r, sw, color):
    pts = points(cx, cy - r, cx + r * 0.65, cy, cx, cy + r, cx - r * 0.65, cy)
    return el("polygon", points=pts, **_stroked(sw, color, stroke_linejoin="round"))


@_shape(Industry.GENERAL, "concentric")
def _concentric(cx, cy, r, sw, color):
    return (
        el("circle", cx=cx, cy=cy, r=r * 0.9, **_stroked(sw, color))
        + el("circle", cx=cx, cy=cy, r=r * 0.5, **_stroked(sw, color))
        + el("circle", cx=cx, cy=cy, r=r * 0.15, fill=color)
    )


@_shape(Industry.GENERAL, "asterisk")
def _asterisk(cx, cy, r, sw, color):
    out = ""
    for a in (0, 60, 120):
        s = polar(cx, cy, r * 0.85, a)
        e = polar(cx, cy, r * 0.85, a + 180)
        out += _line(s.x, s.y, e.x, e.y, sw, color)
    return out


INDUSTRY_SHAPES = MappingProxyType({k: tuple(v) for k, v in _REGISTRY.items()})
del _REGISTRY


# ============================================================================
# RESOLUTION
# ============================================================================

_SYNONYMS: Dict[str, Industry] = {}
for _industry, _words in (
    (Industry.TECHNOLOGY, ("technology", "tech", "saas", "software", "ai", "cloud",
                           "cybersecurity", "security", "data", "hardware", "robotics", "devtools")),
    (Industry.FINANCE, ("finance", "fintech", "banking", "bank", "crypto", "legal", "law",
                        "insurance", "accounting", "investment", "investing", "wealth", "trading")),
    (Industry.HEALTH, ("health", "healthcare", "medical", "wellness", "fitness", "pharma",
                       "clinic", "dental", "biotech")),
    (Industry.FOOD, ("food", "restaurant", "beverage", "cafe", "coffee", "bakery", "catering",
                     "brewery")),
    (Industry.EDUCATION, ("education", "learning", "academy", "edtech", "school", "university",
                          "tutoring")),
    (Industry.CREATIVE, ("creative", "design", "art", "studio", "media", "music", "agency",
                         "photography", "film", "gaming")),
    (Industry.NATURE, ("nature", "sustainability", "eco", "green", "environment", "agriculture",
                       "outdoor", "energy")),
    (Industry.RETAIL, ("retail", "ecommerce", "commerce", "shopping", "fashion", "store",
                       "boutique", "apparel")),
):
    for _word in _words:
        _SYNONYMS[_word] = _industry


def resolve_industry(text: Union[str, Industry, None]) -> Industry:
    """Map free text to a canonical Industry; unrecognized input is ``general``."""
    if isinstance(text, Industry):
        return text
    if not text:
        return Industry.GENERAL
    key = text.strip().lower()
    if key in _SYNONYMS:
        return _SYNONYMS[key]
    for token in re.findall(r"[a-z0-9]+", key):
        if token in _SYNONYMS:
            return _SYNONYMS[token]
    return Industry.GENERAL


def get_industry_shapes(industry: Industry) -> Tuple[ShapeDef, ...]:
    return INDUSTRY_SHAPES.get(industry) or INDUSTRY_SHAPES[Industry.GENERAL]

"""
Dynamic pattern: many small repeated elements arranged by a layout rule.
"""

import math
from enum import Enum

from geomark.core import get_logger

from ..aesthetics import get_aesthetic_config
from ..geometry import arc_path, polar, snap_angle
from ..rng import SeededRng, pick, ri, rr
from ..sdk import CURRENT_COLOR, CX, CY, SIZE, STROKES, Aesthetic, Industry
from ..svg import el, fmt, rotate

log = get_logger("patterns")


class Layout(str, Enum):
    SPIRAL = "spiral"
    WAVE = "wave"
    GRID = "grid"
    CLUSTER = "cluster"
    ORBIT = "orbit"


class Element(str, Enum):
    DOT = "dot"
    DASH = "dash"
    SQUARE = "square"
    LEAF = "leaf"
    ARC = "arc"
    DIAMOND = "diamond"


LAYOUTS = {
    Aesthetic.TECH: (Layout.GRID, Layout.ORBIT),
    Aesthetic.NATURE: (Layout.SPIRAL, Layout.WAVE, Layout.CLUSTER),
}
DEFAULT_LAYOUTS = tuple(Layout)

ELEMENTS = {
    Aesthetic.NATURE: (Element.DOT, Element.LEAF, Element.ARC),
    Aesthetic.TECH: (Element.DOT, Element.SQUARE, Element.DASH),
    Aesthetic.BOLD: (Element.DOT, Element.DIAMOND, Element.SQUARE),
    Aesthetic.MINIMALIST: (Element.DOT, Element.DASH, Element.ARC),
}

MAX_R = SIZE * 0.38


def ring_stroke(sw: int) -> int:
    """Largest palette weight at or below half of ``sw``, never under 2."""
    fitting = [s for s in STROKES if s <= sw / 2]
    return max(fitting) if fitting else STROKES[0]


def _element(kind: Element, x: float, y: float, scale: float, angle: float, sw: int, snap: int) -> str:
    s = max(0.3, scale)
    spin = rotate(angle, x, y)

    if kind is Element.DOT:
        return el("circle", cx=x, cy=y, r=6 * s + sw * 0.3, fill=CURRENT_COLOR)
    if kind is Element.DASH:
        half = 14 * s
        return el("line", x1=x - half, y1=y, x2=x + half, y2=y, stroke=CURRENT_COLOR, stroke_width=sw,
                  stroke_linecap="round", transform=spin)
    if kind is Element.SQUARE:
        sz = 10 * s
        return el("rect", x=x - sz / 2, y=y - sz / 2, width=sz, height=sz, fill=CURRENT_COLOR,
                  transform=rotate(snap_angle(angle, snap), x, y))
    if kind is Element.LEAF:
        lw = 8 * s
        lh = 16 * s
        d = (
            f"M {fmt(x)} {fmt(y - lh / 2)} Q {fmt(x + lw)} {fmt(y)} {fmt(x)} {fmt(y + lh / 2)} "
            f"Q {fmt(x - lw * 0.5)} {fmt(y)} {fmt(x)} {fmt(y - lh / 2)} Z"
        )
        return el("path", d=d, fill=CURRENT_COLOR, transform=spin)
    if kind is Element.ARC:
        return el("path", d=arc_path(x, y, 12 * s, -45, 45), fill="none", stroke=CURRENT_COLOR,
                  stroke_width=sw, stroke_linecap="round", transform=spin)
    if kind is Element.DIAMOND:
        dh = 12 * s
        dw = 7 * s
        d = (
            f"M {fmt(x)} {fmt(y - dh / 2)} L {fmt(x + dw / 2)} {fmt(y)} "
            f"L {fmt(x)} {fmt(y + dh / 2)} L {fmt(x - dw / 2)} {fmt(y)} Z"
        )
        return el("path", d=d, fill=CURRENT_COLOR)
    raise ValueError(f"Unknown pattern element: {kind!r}")


def generate_dynamic_pattern(brand_name: str, industry: Industry, aesthetic: Aesthetic, rng: SeededRng) -> str:
    aesthetic = Aesthetic(aesthetic)
    cfg = get_aesthetic_config(aesthetic, rng)
    sw = cfg.stroke_weight
    layout = pick(rng, LAYOUTS.get(aesthetic, DEFAULT_LAYOUTS))
    count = ri(rng, 8, min(24, cfg.max_elements * 4))
    kind = pick(rng, ELEMENTS[aesthetic])
    log.debug(f"pattern: {count} x {kind.value} on {layout.value}")

    def draw(x, y, scale, angle):
        return _element(kind, x, y, scale, angle, sw, cfg.angle_snap)

    out = []

    if layout is Layout.SPIRAL:
        turns = rr(rng, 1.5, 3)
        inner = 15
        for i in range(count):
            t = i / max(1, count - 1)
            angle = t * turns * 360
            p = polar(CX, CY, inner + (MAX_R - inner) * t, angle)
            out.append(draw(p.x, p.y, 0.4 + t * 0.8, angle))

    elif layout is Layout.WAVE:
        amp = rr(rng, 40, 80)
        periods = rr(rng, 1, 2.5)
        start_x = CX - MAX_R
        total_w = MAX_R * 2
        for i in range(count):
            t = i / max(1, count - 1)
            phase = t * periods * math.pi * 2
            x = start_x + total_w * t
            y = CY + math.sin(phase) * amp
            slope = math.cos(phase) * amp * periods * math.pi * 2 / total_w
            tangent = math.degrees(math.atan2(slope, 1))
            out.append(draw(x, y, 0.5 + 0.6 * (0.5 + 0.5 * math.sin(t * math.pi)), tangent))

    elif layout is Layout.GRID:
        cols = pick(rng, (4, 5, 6))
        rows = pick(rng, (4, 5, 6))
        extent = MAX_R * 1.6
        cw = extent / cols
        ch = extent / rows
        ox = CX - extent / 2
        oy = CY - extent / 2
        placed = 0
        for r in range(rows):
            for c in range(cols):
                if placed >= count:
                    break
                if rng.next() > 0.3:
                    scale = rr(rng, 0.5, 1.0)
                    angle = snap_angle(rng.next() * 360, cfg.angle_snap)
                    out.append(draw(ox + c * cw + cw / 2, oy + r * ch + ch / 2, scale, angle))
                    placed += 1
        # every cell skipped: keep the mark non-empty
        if not placed:
            out.append(draw(CX, CY, 1.0, 0))

    elif layout is Layout.CLUSTER:
        cluster_r = MAX_R * 0.85
        for _ in range(count):
            angle = rng.next() * 360
            dist = cluster_r * math.sqrt(rng.next()) * 0.85
            p = polar(CX, CY, dist, angle)
            scale = 0.35 + rng.next() * 0.8
            out.append(draw(p.x, p.y, scale, angle + rng.next() * 45))

    elif layout is Layout.ORBIT:
        orbits = pick(rng, (2, 3))
        items = count // orbits
        for o in range(orbits):
            orbit_r = 40 + (MAX_R - 50) * ((o + 1) / orbits)
            offset = rr(rng, 0, 360)
            out.append(el("circle", cx=CX, cy=CY, r=orbit_r, fill="none", stroke=CURRENT_COLOR,
                          stroke_width=ring_stroke(sw), opacity=0.2))
            for i in range(items):
                angle = offset + (i / items) * 360
                p = polar(CX, CY, orbit_r, angle)
                out.append(draw(p.x, p.y, 0.5 + 0.4 * ((o + 1) / orbits), angle))
        out.append(el("circle", cx=CX, cy=CY, r=rr(rng, 10, 18), fill=CURRENT_COLOR))

    return "".join(out)

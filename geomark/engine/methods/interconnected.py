"""
Interconnected geometry: two or three shapes that overlap or interlock into
one unified mark.
"""

from enum import Enum

from geomark.core import get_logger

from ..aesthetics import get_aesthetic_config
from ..geometry import points, polar, snap_angle
from ..rng import SeededRng, pick, rr
from ..sdk import CURRENT_COLOR, CX, CY, SIZE, Aesthetic, Industry
from ..svg import el, fmt, group, rotate

log = get_logger("interconnected")


class Style(str, Enum):
    OVERLAP_CIRCLES = "overlap-circles"
    OVERLAP_SQUARES = "overlap-squares"
    FLOWING_CURVES = "flowing-curves"
    BRACKET_PAIR = "bracket-pair"
    LINKED_ANGLES = "linked-angles"
    INTERLOCKING_RINGS = "interlocking-rings"
    PETAL_MERGE = "petal-merge"


STYLES = {
    Aesthetic.TECH: (Style.OVERLAP_SQUARES, Style.BRACKET_PAIR, Style.LINKED_ANGLES),
    Aesthetic.NATURE: (Style.OVERLAP_CIRCLES, Style.FLOWING_CURVES, Style.PETAL_MERGE),
    Aesthetic.BOLD: (Style.OVERLAP_CIRCLES, Style.OVERLAP_SQUARES, Style.INTERLOCKING_RINGS),
    Aesthetic.MINIMALIST: (Style.OVERLAP_CIRCLES, Style.OVERLAP_SQUARES, Style.FLOWING_CURVES, Style.LINKED_ANGLES),
}

MAX_R = SIZE * 0.36


def _s_curve_d(w: float, amp: float) -> str:
    return (
        f"M {fmt(CX - w)} {fmt(CY)} C {fmt(CX - w * 0.3)} {fmt(CY - amp)}, "
        f"{fmt(CX + w * 0.3)} {fmt(CY + amp)}, {fmt(CX + w)} {fmt(CY)}"
    )


def generate_interconnected(brand_name: str, industry: Industry, aesthetic: Aesthetic, rng: SeededRng) -> str:
    aesthetic = Aesthetic(aesthetic)
    cfg = get_aesthetic_config(aesthetic, rng)
    sw = cfg.stroke_weight
    style = pick(rng, STYLES[aesthetic])
    log.debug(f"interconnected: {style.value}")

    stroke = dict(fill="none", stroke=CURRENT_COLOR, stroke_width=sw)
    out = []

    if style is Style.OVERLAP_CIRCLES:
        n = pick(rng, (2, 3))
        cr = MAX_R * rr(rng, 0.4, 0.6)
        spread = cr * rr(rng, 0.5, 0.9)
        for i in range(n):
            p = polar(CX, CY, spread, (i / n) * 360 + rr(rng, 0, 30))
            if cfg.prefer_fill:
                out.append(el("circle", cx=p.x, cy=p.y, r=cr, fill=CURRENT_COLOR, opacity=1 / n + 0.3))
            else:
                out.append(el("circle", cx=p.x, cy=p.y, r=cr, **stroke))

    elif style is Style.OVERLAP_SQUARES:
        n = pick(rng, (2, 3))
        sz = MAX_R * rr(rng, 0.6, 0.9)
        spread = sz * rr(rng, 0.15, 0.35)
        rx = cfg.corner_radius * sz * 0.15
        for i in range(n):
            angle = snap_angle((i / n) * 360, cfg.angle_snap) + rr(rng, 0, 20)
            p = polar(CX, CY, spread, angle)
            rot = snap_angle(rr(rng, 0, 45), cfg.angle_snap)
            paint = dict(fill=CURRENT_COLOR, opacity=1 / n + 0.3) if cfg.prefer_fill else stroke
            out.append(el("rect", x=p.x - sz / 2, y=p.y - sz / 2, width=sz, height=sz, rx=rx,
                          **paint, transform=rotate(rot, p.x, p.y)))

    elif style is Style.FLOWING_CURVES:
        # two crossing S-curves
        amp = MAX_R * rr(rng, 0.4, 0.7)
        w = MAX_R * rr(rng, 0.7, 1.0)
        d = _s_curve_d(w, amp)
        out.append(el("path", d=d, **stroke, stroke_linecap="round"))
        out.append(el("path", d=d, **stroke, stroke_linecap="round", transform=rotate(rr(rng, 60, 120), CX, CY)))

    elif style is Style.BRACKET_PAIR:
        bh = MAX_R * rr(rng, 0.5, 0.8)
        bw = bh * rr(rng, 0.3, 0.5)
        gap = rr(rng, 10, 30)
        lx = CX - gap / 2
        rx_ = CX + gap / 2
        for pts in (
            points(lx + bw, CY - bh, lx - bw, CY, lx + bw, CY + bh),
            points(rx_ - bw, CY - bh, rx_ + bw, CY, rx_ - bw, CY + bh),
        ):
            out.append(el("polyline", points=pts, **stroke, stroke_linecap="round", stroke_linejoin="round"))

    elif style is Style.LINKED_ANGLES:
        n = pick(rng, (2, 3))
        link_w = MAX_R * rr(rng, 0.35, 0.5)
        link_h = link_w * rr(rng, 0.6, 1.0)
        overlap = link_w * rr(rng, 0.3, 0.6)
        pitch = link_w - overlap
        for i in range(n):
            ox = CX - (n - 1) * pitch / 2 + i * pitch
            rot = snap_angle(0 if i % 2 == 0 else rr(rng, 30, 60), cfg.angle_snap)
            out.append(el("rect", x=ox - link_w / 2, y=CY - link_h / 2, width=link_w, height=link_h,
                          rx=cfg.corner_radius * link_w * 0.2, **stroke, transform=rotate(rot, ox, CY)))

    elif style is Style.INTERLOCKING_RINGS:
        r1 = MAX_R * rr(rng, 0.35, 0.45)
        offset = r1 * rr(rng, 0.5, 0.8)
        out.append(el("circle", cx=CX - offset / 2, cy=CY, r=r1, **stroke))
        out.append(el("circle", cx=CX + offset / 2, cy=CY, r=r1, **stroke))

    elif style is Style.PETAL_MERGE:
        n = pick(rng, (2, 3))
        petal_r = MAX_R * rr(rng, 0.5, 0.75)
        petal_w = petal_r * rr(rng, 0.3, 0.5)
        d = (
            f"M {fmt(CX)} {fmt(CY)} Q {fmt(CX + petal_w)} {fmt(CY - petal_r * 0.5)} {fmt(CX)} {fmt(CY - petal_r)} "
            f"Q {fmt(CX - petal_w)} {fmt(CY - petal_r * 0.5)} {fmt(CX)} {fmt(CY)} Z"
        )
        for i in range(n):
            petal = el("path", d=d, fill=CURRENT_COLOR, opacity=0.7 + 0.3 / n)
            out.append(group(petal, transform=rotate((i / n) * 360, CX, CY)))

    return "".join(out)

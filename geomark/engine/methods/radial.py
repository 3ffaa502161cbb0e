"""
Radial construct.

One small primitive rendered once, then repeated 3-8 times around the center
with perfect rotational symmetry, plus an optional concentric accent.
"""

from enum import Enum

from geomark.core import get_logger

from ..aesthetics import get_aesthetic_config
from ..geometry import arc_path, points, polar, snap_angle
from ..rng import SeededRng, pick, rr
from ..sdk import CURRENT_COLOR, CX, CY, SIZE, Aesthetic, AestheticConfig, Industry
from ..svg import el, fmt, group, rotate

log = get_logger("radial")


class Primitive(str, Enum):
    TRIANGLE = "triangle"
    ARC = "arc"
    TEARDROP = "teardrop"
    DIAMOND = "diamond"
    PETAL = "petal"
    LEAF = "leaf"
    BAR = "bar"
    BRACKET = "bracket"


PRIMITIVES = {
    Aesthetic.NATURE: (Primitive.PETAL, Primitive.TEARDROP, Primitive.ARC, Primitive.LEAF),
    Aesthetic.TECH: (Primitive.TRIANGLE, Primitive.DIAMOND, Primitive.BAR, Primitive.BRACKET),
}
DEFAULT_PRIMITIVES = (Primitive.TRIANGLE, Primitive.ARC, Primitive.TEARDROP, Primitive.DIAMOND, Primitive.PETAL)


def _teardrop_d(outer_r, inner_r, w, bulge):
    return (
        f"M {fmt(CX)} {fmt(CY - outer_r)} Q {fmt(CX + w)} {fmt(CY - inner_r - bulge)} {fmt(CX)} {fmt(CY - inner_r)} "
        f"Q {fmt(CX - w)} {fmt(CY - inner_r - bulge)} {fmt(CX)} {fmt(CY - outer_r)} Z"
    )


def _render_primitive(kind: Primitive, rng: SeededRng, cfg: AestheticConfig, paint: dict,
                      angle_step: float, outer_r: float, inner_r: float) -> str:
    """Render one primitive pointing straight up from the center."""
    sw = cfg.stroke_weight
    mid_r = (inner_r + outer_r) / 2

    if kind is Primitive.TRIANGLE:
        half_a = rr(rng, 8, angle_step * 0.3)
        tip = polar(CX, CY, outer_r, 0)
        bl = polar(CX, CY, inner_r, -half_a)
        br = polar(CX, CY, inner_r, half_a)
        d = f"M {fmt(tip.x)} {fmt(tip.y)} L {fmt(bl.x)} {fmt(bl.y)} L {fmt(br.x)} {fmt(br.y)} Z"
        return el("path", d=d, **paint)

    if kind is Primitive.ARC:
        span = rr(rng, 25, angle_step * 0.65)
        r = rr(rng, inner_r + 20, outer_r)
        return el("path", d=arc_path(CX, CY, r, -span / 2, span / 2), fill="none",
                  stroke=CURRENT_COLOR, stroke_width=sw, stroke_linecap="round")

    if kind is Primitive.TEARDROP:
        h = outer_r - inner_r
        w = h * rr(rng, 0.3, 0.55)
        return el("path", d=_teardrop_d(outer_r, inner_r, w, h * 0.3), **paint)

    if kind is Primitive.DIAMOND:
        h = rr(rng, 30, 60)
        w = rr(rng, 14, 28)
        d = (
            f"M {fmt(CX)} {fmt(CY - mid_r - h / 2)} L {fmt(CX + w / 2)} {fmt(CY - mid_r)} "
            f"L {fmt(CX)} {fmt(CY - mid_r + h / 2)} L {fmt(CX - w / 2)} {fmt(CY - mid_r)} Z"
        )
        return el("path", d=d, **paint)

    if kind is Primitive.PETAL:
        h = outer_r - inner_r
        w = h * rr(rng, 0.35, 0.6)
        mid = CY - inner_r - h / 2
        d = (
            f"M {fmt(CX)} {fmt(CY - inner_r)} Q {fmt(CX + w)} {fmt(mid)} {fmt(CX)} {fmt(CY - outer_r)} "
            f"Q {fmt(CX - w)} {fmt(mid)} {fmt(CX)} {fmt(CY - inner_r)} Z"
        )
        return el("path", d=d, fill=CURRENT_COLOR)

    if kind is Primitive.LEAF:
        h = outer_r - inner_r
        w = h * rr(rng, 0.3, 0.5)
        d = (
            f"M {fmt(CX)} {fmt(CY - outer_r)} Q {fmt(CX + w)} {fmt(CY - inner_r - h * 0.4)} {fmt(CX)} {fmt(CY - inner_r)} "
            f"Q {fmt(CX - w * 0.5)} {fmt(CY - inner_r - h * 0.6)} {fmt(CX)} {fmt(CY - outer_r)} Z"
        )
        return el("path", d=d, fill=CURRENT_COLOR)

    if kind is Primitive.BAR:
        bh = rr(rng, 30, 60)
        bw = sw * 2
        return el("rect", x=CX - bw / 2, y=CY - mid_r - bh / 2, width=bw, height=bh, fill=CURRENT_COLOR)

    if kind is Primitive.BRACKET:
        bh = rr(rng, 25, 50)
        bw = bh * 0.35
        by = CY - mid_r
        pts = points(CX + bw, by - bh / 2, CX - bw, by - bh / 2, CX - bw, by + bh / 2, CX + bw, by + bh / 2)
        return el("polyline", points=pts, fill="none", stroke=CURRENT_COLOR, stroke_width=sw,
                  stroke_linecap="round", stroke_linejoin="round")

    raise ValueError(f"Unknown radial primitive: {kind!r}")


def generate_radial_construct(brand_name: str, industry: Industry, aesthetic: Aesthetic, rng: SeededRng) -> str:
    aesthetic = Aesthetic(aesthetic)
    cfg = get_aesthetic_config(aesthetic, rng)
    sw = cfg.stroke_weight
    folds = pick(rng, (3, 4) if aesthetic is Aesthetic.MINIMALIST else (3, 4, 5, 6, 8))
    angle_step = 360 / folds
    outer_r = SIZE * (0.38 - cfg.whitespace * 0.08)
    inner_r = outer_r * rr(rng, 0.15, 0.4)
    rot_offset = snap_angle(rr(rng, 0, angle_step), cfg.angle_snap)

    kind = pick(rng, PRIMITIVES.get(aesthetic, DEFAULT_PRIMITIVES))
    use_fill = cfg.prefer_fill or rng.next() > 0.5
    if use_fill:
        paint = dict(fill=CURRENT_COLOR)
    else:
        paint = dict(fill="none", stroke=CURRENT_COLOR, stroke_width=sw,
                     stroke_linecap="round", stroke_linejoin="round")

    shape = _render_primitive(kind, rng, cfg, paint, angle_step, outer_r, inner_r)
    log.debug(f"radial: {folds} folds of {kind.value}")

    out = "".join(
        group(shape, transform=rotate(i * angle_step + rot_offset, CX, CY))
        for i in range(folds)
    )

    # Optional center accent
    if rng.next() > 0.45:
        cr = rr(rng, 8, inner_r * 0.65)
        if cfg.prefer_fill:
            out += el("circle", cx=CX, cy=CY, r=cr, fill=CURRENT_COLOR)
        else:
            out += el("circle", cx=CX, cy=CY, r=cr, fill="none", stroke=CURRENT_COLOR, stroke_width=sw)
    return out

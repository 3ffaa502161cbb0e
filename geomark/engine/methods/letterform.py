"""
Constructed letterform.

The brand initial is never drawn as type. Its anatomy (verticals, diagonals,
bowls) is read from fixed membership sets and rebuilt from primitives using
one of five treatments.
"""

import string
from enum import Enum

from geomark.core import get_logger

from ..aesthetics import get_aesthetic_config
from ..geometry import arc_path, polar, snap_angle
from ..rng import SeededRng, pick, ri, rr
from ..sdk import CURRENT_COLOR, CX, CY, SIZE, Aesthetic, Industry
from ..svg import el, group, rotate
from .negative_space import luminance_mask, mask_id

log = get_logger("letterform")


class Treatment(str, Enum):
    GEOMETRIC_DECONSTRUCT = "geometric-deconstruct"
    NEGATIVE_CUT = "negative-cut"
    ARC_REDUCTION = "arc-reduction"
    FRAGMENTED = "fragmented"
    ROTATED_PARTIAL = "rotated-partial"


class Piece(str, Enum):
    LINE = "line"
    ARC = "arc"
    DOT = "dot"


VERTICAL = frozenset("BDEFHIJKLMNPRTUY")
DIAGONAL = frozenset("AKMVWXYZ")
CURVE = frozenset("BCDGJOPQRSU")
SYMMETRIC = frozenset("AHIMOTUVWXY")

EMPHASIS = 1.5


def initial_letter(brand_name: str) -> str:
    """First character, upper-cased; '' for an empty name."""
    if not brand_name:
        return ""
    return brand_name[0].upper()[0]


def letter_angle(letter: str) -> float:
    return ((ord(letter) - 65) / 26) * 360


def _line(x1, y1, x2, y2, sw, color=CURRENT_COLOR):
    return el("line", x1=x1, y1=y1, x2=x2, y2=y2, stroke=color, stroke_width=sw, stroke_linecap="round")


def _arc(cx, cy, r, start, end, sw):
    return el("path", d=arc_path(cx, cy, r, start, end), fill="none", stroke=CURRENT_COLOR,
              stroke_width=sw, stroke_linecap="round")


def _deconstruct(rng, letter, angle, max_r, sw, snap):
    heavy = sw * EMPHASIS
    curve, vertical, diagonal = letter in CURVE, letter in VERTICAL, letter in DIAGONAL
    out = []
    if curve:
        arc_r = max_r * rr(rng, 0.6, 0.9)
        out.append(_arc(CX, CY, arc_r, angle, angle + rr(rng, 120, 270), heavy))
    if vertical:
        h = max_r * rr(rng, 0.8, 1.3)
        x = CX if letter in SYMMETRIC else CX + rr(rng, -max_r * 0.3, max_r * 0.3)
        out.append(_line(x, CY - h / 2, x, CY + h / 2, heavy))
    if diagonal:
        d_len = max_r * rr(rng, 0.6, 1.0)
        d_angle = snap_angle(angle + rr(rng, 20, 70), snap)
        s = polar(CX, CY, d_len / 2, d_angle)
        e = polar(CX, CY, d_len / 2, d_angle + 180)
        out.append(_line(s.x, s.y, e.x, e.y, heavy))
    if not out:
        # abstract cross
        arm = max_r * 0.6
        out.append(_line(CX - arm, CY, CX + arm, CY, heavy))
        out.append(_line(CX, CY - arm, CX, CY + arm, heavy))
    return out


def _negative_cut(rng, letter, angle, max_r, cfg):
    sw = cfg.stroke_weight
    mid = mask_id("cl", rng)
    cuts = []
    if letter in CURVE:
        cr = max_r * rr(rng, 0.3, 0.5)
        cx = CX + rr(rng, -max_r * 0.2, max_r * 0.2)
        cy = CY + rr(rng, -max_r * 0.2, max_r * 0.2)
        cuts.append(el("circle", cx=cx, cy=cy, r=cr, fill="black"))
    if letter in VERTICAL:
        slit_w = sw * 2
        slit_h = max_r * rr(rng, 0.6, 1.2)
        sx = CX + rr(rng, -max_r * 0.15, max_r * 0.15)
        cuts.append(el("rect", x=sx - slit_w / 2, y=CY - slit_h / 2, width=slit_w, height=slit_h, fill="black"))
    if letter in DIAGONAL:
        d_len = max_r * rr(rng, 0.5, 0.9)
        d_angle = angle + rr(rng, -30, 30)
        slit_w = sw * 2.5
        cuts.append(el("rect", x=CX - d_len / 2, y=CY - slit_w / 2, width=d_len, height=slit_w, fill="black",
                       transform=rotate(d_angle - 90, CX, CY)))
    if not cuts:
        # glyph with no mapped anatomy: small round counter
        cuts.append(el("circle", cx=CX, cy=CY, r=max_r * 0.3, fill="black"))

    out = [luminance_mask(mid, *cuts)]
    if pick(rng, ("circle", "rounded-rect")) == "circle":
        out.append(el("circle", cx=CX, cy=CY, r=max_r, fill=CURRENT_COLOR, mask=f"url(#{mid})"))
    else:
        out.append(el("rect", x=CX - max_r, y=CY - max_r, width=max_r * 2, height=max_r * 2,
                      rx=max_r * cfg.corner_radius * 0.2, fill=CURRENT_COLOR, mask=f"url(#{mid})"))
    return out


def _arc_reduction(rng, letter, angle, max_r, sw):
    segments = ri(rng, 2, 4)
    base_r = max_r * rr(rng, 0.5, 0.85)
    out = []
    for i in range(segments):
        span = rr(rng, 40, 120)
        offset = (i / segments) * 360 + angle
        seg_r = base_r * rr(rng, 0.7, 1.0)
        out.append(_arc(CX, CY, seg_r, offset, offset + span, sw))
    if letter in VERTICAL and rng.next() > 0.4:
        y = CY + rr(rng, -base_r * 0.3, base_r * 0.3)
        hw = base_r * rr(rng, 0.3, 0.6)
        out.append(_line(CX - hw, y, CX + hw, y, sw))
    return out


def _fragmented(rng, angle, max_r, sw, snap):
    pieces = ri(rng, 3, 5)
    out = []
    for i in range(pieces):
        a = angle + (i / pieces) * 360
        p = polar(CX, CY, max_r * rr(rng, 0.3, 0.8) * 0.3, a)
        kind = pick(rng, tuple(Piece))
        if kind is Piece.LINE:
            length = max_r * rr(rng, 0.2, 0.5)
            la = snap_angle(a + rr(rng, -40, 40), snap)
            s = polar(p.x, p.y, length / 2, la)
            e = polar(p.x, p.y, length / 2, la + 180)
            out.append(_line(s.x, s.y, e.x, e.y, sw))
        elif kind is Piece.ARC:
            ar = max_r * rr(rng, 0.15, 0.35)
            out.append(_arc(p.x, p.y, ar, a, a + rr(rng, 60, 150), sw))
        else:
            out.append(el("circle", cx=p.x, cy=p.y, r=rr(rng, 6, 14), fill=CURRENT_COLOR))
    return out


def _rotated_partial(rng, letter, angle, max_r, sw, snap):
    heavy = sw * EMPHASIS
    base_r = max_r * rr(rng, 0.5, 0.8)
    rotation = snap_angle(rr(rng, 15, 75), snap or 15)

    scaffold = []
    if letter in CURVE:
        scaffold.append(_arc(CX, CY, base_r, angle, angle + 210, heavy))
    if letter in VERTICAL or letter in DIAGONAL:
        length = base_r * 1.2
        scaffold.append(_line(CX, CY - length / 2, CX, CY + length / 2, heavy))
    if not scaffold:
        scaffold.append(_line(CX - base_r, CY, CX + base_r, CY, heavy))

    # unrotated accent dot for contrast
    dot_r = rr(rng, 8, 16)
    dot = polar(CX, CY, base_r * rr(rng, 0.3, 0.6), angle + 90)
    return [
        group(*scaffold, transform=rotate(rotation, CX, CY)),
        el("circle", cx=dot.x, cy=dot.y, r=dot_r, fill=CURRENT_COLOR),
    ]


def generate_constructed_letterform(brand_name: str, industry: Industry, aesthetic: Aesthetic,
                                    rng: SeededRng) -> str:
    aesthetic = Aesthetic(aesthetic)
    cfg = get_aesthetic_config(aesthetic, rng)
    sw = cfg.stroke_weight
    max_r = SIZE * (0.33 - cfg.whitespace * 0.05)
    treatment = pick(rng, tuple(Treatment))

    letter = initial_letter(brand_name)
    if not letter:
        letter = pick(rng, string.ascii_uppercase)
    angle = letter_angle(letter)
    log.debug(f"letterform: {letter!r} via {treatment.value}")

    if treatment is Treatment.GEOMETRIC_DECONSTRUCT:
        out = _deconstruct(rng, letter, angle, max_r, sw, cfg.angle_snap)
    elif treatment is Treatment.NEGATIVE_CUT:
        out = _negative_cut(rng, letter, angle, max_r, cfg)
    elif treatment is Treatment.ARC_REDUCTION:
        out = _arc_reduction(rng, letter, angle, max_r, sw)
    elif treatment is Treatment.FRAGMENTED:
        out = _fragmented(rng, angle, max_r, sw, cfg.angle_snap)
    else:
        out = _rotated_partial(rng, letter, angle, max_r, sw, cfg.angle_snap)
    return "".join(out)

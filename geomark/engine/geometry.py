"""
Polar geometry helpers shared by the construction methods.

Angles are in degrees with 0 pointing straight up and increasing clockwise.
Coordinates are rounded to 2 decimals so the serialized markup is stable.
"""

import math
from typing import NamedTuple

from .svg import fmt


class Point(NamedTuple):
    x: float
    y: float


def R(n: float) -> float:
    return round(n * 100) / 100


def polar(cx: float, cy: float, r: float, deg: float) -> Point:
    rad = math.radians(deg - 90)
    return Point(R(cx + r * math.cos(rad)), R(cy + r * math.sin(rad)))


def arc_path(cx: float, cy: float, r: float, start_deg: float, end_deg: float) -> str:
    """Path data for a circular arc; spans are kept short of a full turn."""
    span = end_deg - start_deg
    if span >= 360:
        end_deg = start_deg + 359
        span = 359
    s = polar(cx, cy, r, end_deg)
    e = polar(cx, cy, r, start_deg)
    large = 0 if span <= 180 else 1
    return f"M {fmt(s.x)} {fmt(s.y)} A {fmt(r)} {fmt(r)} 0 {large} 0 {fmt(e.x)} {fmt(e.y)}"


def ngon_points(cx: float, cy: float, r: float, sides: int, rot_deg: float = 0) -> str:
    step = 360 / sides
    pts = []
    for i in range(sides):
        p = polar(cx, cy, r, i * step + rot_deg)
        pts.append(f"{fmt(p.x)},{fmt(p.y)}")
    return " ".join(pts)


def hex_points(cx: float, cy: float, r: float, rot_deg: float = 0) -> str:
    return ngon_points(cx, cy, r, 6, rot_deg)


def points(*xy: float) -> str:
    """Format a flat x, y, x, y... sequence as a ``points`` attribute."""
    return " ".join(f"{fmt(xy[i])},{fmt(xy[i + 1])}" for i in range(0, len(xy), 2))


def snap_angle(angle: float, snap: float) -> float:
    if snap == 0:
        return angle
    return round(angle / snap) * snap

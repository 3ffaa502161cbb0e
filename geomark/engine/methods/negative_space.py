"""
Negative space mark.

A solid container with an industry primitive carved out of it. The boolean
subtraction is an SVG luminance mask: white keeps, black removes.
"""

from enum import Enum

from geomark.core import get_logger, sha1_text
from geomark.utils.slug import alnum_prefix

from ..aesthetics import get_aesthetic_config
from ..geometry import hex_points
from ..industries import get_industry_shapes
from ..rng import SeededRng, pick, rr
from ..sdk import CURRENT_COLOR, CX, CY, SIZE, Aesthetic, Industry
from ..svg import el, group

log = get_logger("negative_space")


class Container(str, Enum):
    CIRCLE = "circle"
    SQUARE = "square"
    ROUNDED_SQUARE = "rounded-square"
    HEXAGON = "hexagon"


CONTAINERS = {
    Aesthetic.TECH: (Container.SQUARE, Container.ROUNDED_SQUARE),
    Aesthetic.NATURE: (Container.CIRCLE, Container.ROUNDED_SQUARE),
}
DEFAULT_CONTAINERS = (Container.CIRCLE, Container.SQUARE, Container.ROUNDED_SQUARE, Container.HEXAGON)


def mask_id(prefix: str, rng: SeededRng, label: str = "") -> str:
    """Seed-derived mask id so several marks can share one document."""
    parts = [prefix]
    if label:
        parts.append(label)
    parts.append(sha1_text(rng.seed)[:8])
    return "-".join(parts)


def luminance_mask(mid: str, *cutouts: str) -> str:
    """White canvas with black cutouts, wrapped in ``<defs>``."""
    return el("defs", el("mask", el("rect", width=SIZE, height=SIZE, fill="white"), *cutouts, id=mid))


def _container(kind: Container, r: float) -> str:
    if kind is Container.CIRCLE:
        return el("circle", cx=CX, cy=CY, r=r, fill=CURRENT_COLOR)
    if kind is Container.SQUARE:
        return el("rect", x=CX - r, y=CY - r, width=r * 2, height=r * 2, fill=CURRENT_COLOR)
    if kind is Container.ROUNDED_SQUARE:
        return el("rect", x=CX - r, y=CY - r, width=r * 2, height=r * 2, rx=r * 0.18, fill=CURRENT_COLOR)
    if kind is Container.HEXAGON:
        return el("polygon", points=hex_points(CX, CY, r), fill=CURRENT_COLOR)
    raise ValueError(f"Unknown container: {kind!r}")


def generate_negative_space(brand_name: str, industry: Industry, aesthetic: Aesthetic, rng: SeededRng) -> str:
    aesthetic = Aesthetic(aesthetic)
    cfg = get_aesthetic_config(aesthetic, rng)
    kind = pick(rng, CONTAINERS.get(aesthetic, DEFAULT_CONTAINERS))
    container_r = SIZE * (0.4 - cfg.whitespace * 0.05)
    mid = mask_id("ns", rng, alnum_prefix(brand_name, 6))

    shape = pick(rng, get_industry_shapes(industry))
    cutout_r = container_r * rr(rng, 0.45, 0.7)
    cutout = shape(CX, CY, cutout_r, cfg.stroke_weight, color="black")
    log.debug(f"negative-space: {kind.value} minus {shape.key}")

    mask = luminance_mask(
        mid,
        group(cutout, fill="black", stroke="black", stroke_width=cfg.stroke_weight, data_shape=shape.key),
    )
    return mask + group(_container(kind, container_r), mask=f"url(#{mid})")

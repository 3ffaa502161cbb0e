"""
Aesthetic modifiers.

Each aesthetic changes the geometry itself (stroke weight, rounding, density,
angle quantization), not only the styling.
"""

from typing import Optional, Union

from .rng import SeededRng, pick
from .sdk import Aesthetic, AestheticConfig

# Brand-style labels used by the generator front end
STYLE_ALIASES = {
    "minimal": Aesthetic.MINIMALIST,
    "geometric": Aesthetic.TECH,
    "abstract": Aesthetic.NATURE,
    "organic": Aesthetic.NATURE,
}


def resolve_aesthetic(value: Union[str, Aesthetic, None]) -> Optional[Aesthetic]:
    """Map an aesthetic name or style alias to an Aesthetic; None when unknown."""
    if value is None:
        return None
    if isinstance(value, Aesthetic):
        return value
    key = value.strip().lower()
    try:
        return Aesthetic(key)
    except ValueError:
        return STYLE_ALIASES.get(key)


def get_aesthetic_config(aesthetic: Aesthetic, rng: SeededRng) -> AestheticConfig:
    aesthetic = Aesthetic(aesthetic)
    if aesthetic is Aesthetic.MINIMALIST:
        return AestheticConfig(
            stroke_weight=pick(rng, (2, 4)),
            corner_radius=0.2,
            max_elements=3,
            prefer_fill=False,
            angle_snap=0,
            organic_curve=0.3,
            whitespace=0.8,
        )
    if aesthetic is Aesthetic.TECH:
        return AestheticConfig(
            stroke_weight=pick(rng, (4, 6)),
            corner_radius=0,
            max_elements=6,
            prefer_fill=rng.next() > 0.5,
            angle_snap=45,
            organic_curve=0,
            whitespace=0.4,
        )
    if aesthetic is Aesthetic.NATURE:
        return AestheticConfig(
            stroke_weight=pick(rng, (4, 6)),
            corner_radius=0.9,
            max_elements=6,
            prefer_fill=True,
            angle_snap=0,
            organic_curve=1.0,
            whitespace=0.5,
        )
    if aesthetic is Aesthetic.BOLD:
        return AestheticConfig(
            stroke_weight=pick(rng, (6, 8)),
            corner_radius=0.3,
            max_elements=4,
            prefer_fill=True,
            angle_snap=0,
            organic_curve=0.2,
            whitespace=0.25,
        )
    raise ValueError(f"Unknown aesthetic: {aesthetic!r}")

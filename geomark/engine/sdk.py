"""
Core SDK for the geometric logo engine

Single source of truth for canvas constants, enums and the result model.
All engine modules import from this file to avoid drift.
"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ============================================================================
# CONSTANTS
# ============================================================================

SIZE = 512
CX = 256
CY = 256
STROKES = (2, 4, 6, 8)
PHI = 1.618033988749895
SVG_NS = "http://www.w3.org/2000/svg"
VIEWBOX = f"0 0 {SIZE} {SIZE}"
CURRENT_COLOR = "currentColor"


# ============================================================================
# ENUMS
# ============================================================================

class Aesthetic(str, Enum):
    MINIMALIST = "minimalist"
    TECH = "tech"
    NATURE = "nature"
    BOLD = "bold"


class Industry(str, Enum):
    TECHNOLOGY = "technology"
    FINANCE = "finance"
    HEALTH = "health"
    FOOD = "food"
    EDUCATION = "education"
    CREATIVE = "creative"
    NATURE = "nature"
    RETAIL = "retail"
    GENERAL = "general"


class GeometricMethod(str, Enum):
    RADIAL_CONSTRUCT = "radial-construct"
    NEGATIVE_SPACE = "negative-space"
    DYNAMIC_PATTERN = "dynamic-pattern"
    INTERCONNECTED_GEOMETRY = "interconnected-geometry"
    CONSTRUCTED_LETTERFORM = "constructed-letterform"


AESTHETICS = tuple(Aesthetic)

ORDERED_METHODS = (
    GeometricMethod.RADIAL_CONSTRUCT,
    GeometricMethod.NEGATIVE_SPACE,
    GeometricMethod.DYNAMIC_PATTERN,
    GeometricMethod.INTERCONNECTED_GEOMETRY,
    GeometricMethod.CONSTRUCTED_LETTERFORM,
)


# ============================================================================
# MODELS
# ============================================================================

@dataclass(frozen=True)
class AestheticConfig:
    """Numeric steering for one logo; built once per construction call."""
    stroke_weight: int
    corner_radius: float
    max_elements: int
    prefer_fill: bool
    angle_snap: int
    organic_curve: float
    whitespace: float


class GeometricLogoResult(BaseModel):
    """One generated mark. Immutable; the caller owns it."""

    model_config = ConfigDict(frozen=True)

    svg: str = Field(..., description="Complete SVG document")
    method: GeometricMethod = Field(..., description="Construction algorithm used")
    aesthetic: Aesthetic = Field(..., description="Aesthetic the mark was built with")
    seed: str = Field(..., description="Seed that reproduces this mark")

    @field_validator("svg")
    @classmethod
    def validate_svg(cls, v):
        if not v.startswith("<svg") or f'viewBox="{VIEWBOX}"' not in v:
            raise ValueError(f"svg must be a document with viewBox {VIEWBOX}")
        return v

    # Seeds come from brand text and may hold lone surrogates (undecodable argv
    # bytes); a plain validator keeps them as-is.
    @field_validator("seed", mode="plain")
    @classmethod
    def validate_seed(cls, v):
        if not isinstance(v, str):
            raise ValueError("seed must be a string")
        return v

    def to_dict(self) -> dict:
        return {
            "svg": self.svg,
            "method": self.method.value,
            "aesthetic": self.aesthetic.value,
            "seed": self.seed,
        }

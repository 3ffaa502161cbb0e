"""
Geomark Engine

Seeded, dependency-light generator for abstract geometric logo marks.
"""

from .aesthetics import get_aesthetic_config, resolve_aesthetic
from .industries import INDUSTRY_SHAPES, ShapeDef, get_industry_shapes, resolve_industry
from .orchestrator import generate_geometric_logos, generate_single_geometric_logo
from .qa import QAResult, check_logo, check_results
from .rng import SeededRng, create_rng, pick, pick_stroke, ri, rr
from .sdk import (  # Constants; Enums; Models
    AESTHETICS,
    CX,
    CY,
    ORDERED_METHODS,
    SIZE,
    STROKES,
    Aesthetic,
    AestheticConfig,
    GeometricLogoResult,
    GeometricMethod,
    Industry,
)
from .svg import svg_wrap

__version__ = "0.1.0"
__all__ = [
    "SIZE",
    "CX",
    "CY",
    "STROKES",
    "AESTHETICS",
    "ORDERED_METHODS",
    "Aesthetic",
    "Industry",
    "GeometricMethod",
    "AestheticConfig",
    "GeometricLogoResult",
    "SeededRng",
    "create_rng",
    "pick",
    "rr",
    "ri",
    "pick_stroke",
    "get_aesthetic_config",
    "resolve_aesthetic",
    "ShapeDef",
    "INDUSTRY_SHAPES",
    "get_industry_shapes",
    "resolve_industry",
    "svg_wrap",
    "generate_geometric_logos",
    "generate_single_geometric_logo",
    "QAResult",
    "check_logo",
    "check_results",
]

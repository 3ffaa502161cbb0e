"""Construction methods, keyed by GeometricMethod.

Every generator takes ``(brand_name, industry, aesthetic, rng)`` and returns
body markup for a 512x512 canvas; the orchestrator wraps it.
"""

from ..sdk import GeometricMethod
from .interconnected import generate_interconnected
from .letterform import generate_constructed_letterform
from .negative_space import generate_negative_space
from .patterns import generate_dynamic_pattern
from .radial import generate_radial_construct

METHOD_GENERATORS = {
    GeometricMethod.RADIAL_CONSTRUCT: generate_radial_construct,
    GeometricMethod.NEGATIVE_SPACE: generate_negative_space,
    GeometricMethod.DYNAMIC_PATTERN: generate_dynamic_pattern,
    GeometricMethod.INTERCONNECTED_GEOMETRY: generate_interconnected,
    GeometricMethod.CONSTRUCTED_LETTERFORM: generate_constructed_letterform,
}

__all__ = [
    "METHOD_GENERATORS",
    "generate_constructed_letterform",
    "generate_dynamic_pattern",
    "generate_interconnected",
    "generate_negative_space",
    "generate_radial_construct",
]

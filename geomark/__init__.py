"""Geomark: procedural geometric logo marks as SVG."""

from .engine import (
    Aesthetic,
    GeometricLogoResult,
    GeometricMethod,
    Industry,
    generate_geometric_logos,
    generate_single_geometric_logo,
)

__version__ = "0.1.0"
__all__ = [
    "Aesthetic",
    "Industry",
    "GeometricMethod",
    "GeometricLogoResult",
    "generate_geometric_logos",
    "generate_single_geometric_logo",
]

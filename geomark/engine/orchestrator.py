"""
Logo generation entry points.

``generate_geometric_logos`` produces one mark per construction method in a
fixed order; ``generate_single_geometric_logo`` runs one named method. Both
are pure: the same inputs give byte-identical documents.
"""

from typing import List, Optional, Union

from geomark.core import get_logger

from .aesthetics import resolve_aesthetic
from .industries import resolve_industry
from .methods import METHOD_GENERATORS
from .rng import create_rng, pick
from .sdk import AESTHETICS, ORDERED_METHODS, Aesthetic, GeometricLogoResult, GeometricMethod
from .svg import svg_wrap

log = get_logger("orchestrator")

# Variants from this index on are drawn in a different aesthetic
ALT_AESTHETIC_FROM = 3


def generate_geometric_logos(
    brand_name: str,
    aesthetic: Union[str, Aesthetic, None] = None,
    industry: Optional[str] = None,
    seed: Optional[str] = None,
) -> List[GeometricLogoResult]:
    """Generate five marks for a brand, one per construction method.

    Args:
        brand_name: Brand text; its initial drives the letterform variant.
        aesthetic: Aesthetic or style alias. Unknown or missing values are
            chosen from the seed.
        industry: Free-text industry; resolved against the synonym table.
        seed: Base seed. Defaults to the brand name.

    Returns:
        Results ordered radial, negative-space, pattern, interconnected,
        letterform.
    """
    base_seed = seed or brand_name
    master = create_rng(base_seed)
    primary = resolve_aesthetic(aesthetic) or pick(master, AESTHETICS)
    resolved = resolve_industry(industry or "general")

    results = []
    for i, method in enumerate(ORDERED_METHODS):
        variant_seed = f"{base_seed}__v{i}_{method.value}_{primary.value}"
        rng = create_rng(variant_seed)

        var_aesthetic = primary
        if i >= ALT_AESTHETIC_FROM:
            var_aesthetic = pick(rng, [a for a in AESTHETICS if a is not primary])

        body = METHOD_GENERATORS[method](brand_name, resolved, var_aesthetic, rng)
        results.append(GeometricLogoResult(
            svg=svg_wrap(body),
            method=method,
            aesthetic=var_aesthetic,
            seed=variant_seed,
        ))
        log.debug(f"variant {i}: {method.value}/{var_aesthetic.value}")

    log.info(f"Generated {len(results)} marks for {brand_name!r} ({resolved.value}, {primary.value})")
    return results


def generate_single_geometric_logo(
    brand_name: str,
    method: Union[str, GeometricMethod],
    aesthetic: Union[str, Aesthetic, None] = None,
    industry: Optional[str] = None,
    seed: Optional[str] = None,
) -> GeometricLogoResult:
    """Generate one mark with a named construction method."""
    method = GeometricMethod(method)
    base_seed = seed or f"{brand_name}__{method.value}"
    rng = create_rng(base_seed)
    chosen = resolve_aesthetic(aesthetic) or pick(rng, AESTHETICS)
    resolved = resolve_industry(industry or "general")

    body = METHOD_GENERATORS[method](brand_name, resolved, chosen, rng)
    log.info(f"Generated {method.value} mark for {brand_name!r} ({resolved.value}, {chosen.value})")
    return GeometricLogoResult(svg=svg_wrap(body), method=method, aesthetic=chosen, seed=base_seed)

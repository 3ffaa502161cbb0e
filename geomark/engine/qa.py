#!/usr/bin/env python3
"""
QA Gates for generated marks

Structural checks run over a finished SVG document before it is exported.
All functions are side-effect free and return structured results.
"""

import json
import math
import re
import xml.etree.ElementTree as ET
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

import svgelements

from .sdk import CURRENT_COLOR, SIZE, STROKES, SVG_NS, VIEWBOX, GeometricMethod

PALETTE_STROKES = frozenset(STROKES)
# Letterform strokes may also use the 1.5x emphasis weights
EMPHASIS_STROKES = PALETTE_STROKES | frozenset(s * 1.5 for s in STROKES)
EMPHASIS_METHODS = frozenset({GeometricMethod.CONSTRUCTED_LETTERFORM.value})
SURFACE_PAINTS = frozenset({CURRENT_COLOR, "none"})
MASK_PAINTS = frozenset({"black", "white", "none"})

# Stroke caps and antialiasing may overhang the canvas slightly
BOUNDS_TOLERANCE = 8.0

_NUMBER = re.compile(r"-?(?:\d+\.?\d*|\.\d+)(?:e-?\d+)?|nan|inf", re.IGNORECASE)
_MASK_REF = re.compile(r"url\(#([^)]+)\)")
# Identifier-bearing attributes; brand text may spell "nan" or "inf"
_TEXT_ATTRS = frozenset({"id", "mask", "xmlns"})


@dataclass
class QAResult:
    """Structured result from QA checks"""
    ok: bool
    fails: List[str]
    warnings: List[str]
    details: Dict[str, Any]


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _walk(node: ET.Element, in_mask: bool = False) -> Iterable[Tuple[ET.Element, bool]]:
    """Yield every element with a flag telling whether it sits inside a <mask>."""
    yield node, in_mask
    for child in node:
        yield from _walk(child, in_mask or _local(node.tag) == "mask")


def _float(node: ET.Element, name: str, default: float = 0.0) -> float:
    return float(node.get(name, default))


def _element_bounds(node: ET.Element) -> Optional[Tuple[float, float, float, float]]:
    """Untransformed bounding box of a drawable element, or None."""
    tag = _local(node.tag)
    if tag == "circle":
        cx, cy, r = _float(node, "cx"), _float(node, "cy"), _float(node, "r")
        return cx - r, cy - r, cx + r, cy + r
    if tag == "rect":
        x, y = _float(node, "x"), _float(node, "y")
        return x, y, x + _float(node, "width"), y + _float(node, "height")
    if tag == "line":
        xs = (_float(node, "x1"), _float(node, "x2"))
        ys = (_float(node, "y1"), _float(node, "y2"))
        return min(xs), min(ys), max(xs), max(ys)
    if tag in ("polyline", "polygon"):
        nums = [float(n) for n in re.split(r"[\s,]+", node.get("points", "").strip()) if n]
        if not nums:
            return None
        xs, ys = nums[0::2], nums[1::2]
        return min(xs), min(ys), max(xs), max(ys)
    if tag == "path":
        bbox = svgelements.Path(node.get("d", "")).bbox()
        if bbox is None:
            return None
        return tuple(bbox)
    return None


def check_document(root: ET.Element) -> QAResult:
    """Root element and viewBox."""
    fails = []
    details = {"tag": root.tag, "viewBox": root.get("viewBox")}
    if root.tag != f"{{{SVG_NS}}}svg":
        fails.append(f"Root element is {root.tag}, expected svg in the SVG namespace")
    if root.get("viewBox") != VIEWBOX:
        fails.append(f"viewBox is {root.get('viewBox')!r}, expected {VIEWBOX!r}")
    return QAResult(ok=not fails, fails=fails, warnings=[], details=details)


def check_strokes(root: ET.Element, allow_emphasis: bool = False) -> QAResult:
    """Every stroke-width must come from the weight palette."""
    allowed = EMPHASIS_STROKES if allow_emphasis else PALETTE_STROKES
    fails = []
    used = set()
    for node, _ in _walk(root):
        raw = node.get("stroke-width")
        if raw is None:
            continue
        width = float(raw)
        used.add(width)
        if width not in allowed:
            fails.append(f"{_local(node.tag)} uses stroke-width {raw} outside the palette")
    return QAResult(ok=not fails, fails=fails, warnings=[], details={"stroke_widths": sorted(used)})


def check_paints(root: ET.Element) -> QAResult:
    """Marks paint with currentColor only; masks paint black and white only."""
    fails = []
    for node, in_mask in _walk(root):
        allowed = MASK_PAINTS if in_mask else SURFACE_PAINTS
        for attr in ("fill", "stroke"):
            value = node.get(attr)
            if value is not None and value not in allowed:
                where = "mask" if in_mask else "mark"
                fails.append(f"{_local(node.tag)} {attr}={value!r} not allowed in {where}")
    return QAResult(ok=not fails, fails=fails, warnings=[], details={})


def check_numbers(root: ET.Element) -> QAResult:
    """No NaN or infinite values in any attribute."""
    fails = []
    for node, _ in _walk(root):
        for name, value in node.attrib.items():
            if name in _TEXT_ATTRS or name.startswith("data-"):
                continue
            for token in _NUMBER.findall(value):
                if not math.isfinite(float(token)):
                    fails.append(f"{_local(node.tag)} {name} contains {token}")
    return QAResult(ok=not fails, fails=fails, warnings=[], details={})


def check_masks(root: ET.Element) -> QAResult:
    """Every url(#id) reference resolves to a mask defined in the document."""
    fails = []
    warnings = []
    defined = [node.get("id") for node, _ in _walk(root) if _local(node.tag) == "mask"]
    referenced = []
    for node, _ in _walk(root):
        ref = node.get("mask")
        if ref is None:
            continue
        m = _MASK_REF.fullmatch(ref)
        if not m:
            fails.append(f"Malformed mask reference {ref!r}")
            continue
        referenced.append(m.group(1))
        if m.group(1) not in defined:
            fails.append(f"Mask reference #{m.group(1)} has no definition")
    if len(set(defined)) != len(defined):
        fails.append("Duplicate mask ids")
    unused = set(defined) - set(referenced)
    if unused:
        warnings.append(f"Unused masks: {sorted(unused)}")
    return QAResult(ok=not fails, fails=fails, warnings=warnings,
                    details={"defined": defined, "referenced": referenced})


def check_bounds(root: ET.Element, tolerance: float = BOUNDS_TOLERANCE) -> QAResult:
    """Drawable geometry stays on the canvas (coordinates before transforms)."""
    fails = []
    warnings = []
    measured = 0
    lo, hi = -tolerance, SIZE + tolerance
    for node, _ in _walk(root):
        try:
            box = _element_bounds(node)
        except ValueError as e:
            fails.append(f"{_local(node.tag)} geometry could not be parsed: {e}")
            continue
        if box is None:
            continue
        measured += 1
        x0, y0, x1, y1 = box
        if x0 < lo or y0 < lo or x1 > hi or y1 > hi:
            fails.append(f"{_local(node.tag)} bbox {tuple(round(v, 2) for v in box)} leaves the canvas")
        elif x1 - x0 == 0 and y1 - y0 == 0:
            warnings.append(f"{_local(node.tag)} has zero extent")
    return QAResult(ok=not fails, fails=fails, warnings=warnings, details={"elements": measured})


def check_logo(svg: str, allow_emphasis: bool = False) -> QAResult:
    """
    Run every structural check on one SVG document.

    Args:
        svg: Complete SVG document string
        allow_emphasis: Accept the 1.5x stroke weights (letterform marks)

    Returns:
        QAResult with combined fails and per-check details
    """
    try:
        root = ET.fromstring(svg)
    except ET.ParseError as e:
        return QAResult(ok=False, fails=[f"Malformed XML: {e}"], warnings=[], details={})

    all_fails = []
    all_warnings = []
    all_details = {}
    for name, check in (
        ("document", check_document),
        ("strokes", lambda r: check_strokes(r, allow_emphasis)),
        ("paints", check_paints),
        ("numbers", check_numbers),
        ("masks", check_masks),
        ("bounds", check_bounds),
    ):
        result = check(root)
        all_fails.extend(result.fails)
        all_warnings.extend(result.warnings)
        all_details[name] = result.details

    return QAResult(ok=not all_fails, fails=all_fails, warnings=all_warnings, details=all_details)


def check_results(results) -> QAResult:
    """Check a batch of GeometricLogoResult objects; fails are prefixed by method."""
    all_fails = []
    all_warnings = []
    all_details = {}
    seeds = set()
    for i, result in enumerate(results):
        label = f"{i}:{result.method.value}"
        qa = check_logo(result.svg, allow_emphasis=result.method.value in EMPHASIS_METHODS)
        all_fails.extend(f"[{label}] {f}" for f in qa.fails)
        all_warnings.extend(f"[{label}] {w}" for w in qa.warnings)
        all_details[label] = qa.details
        if result.seed in seeds:
            all_warnings.append(f"[{label}] seed {result.seed!r} repeats an earlier variant")
        seeds.add(result.seed)
    return QAResult(ok=not all_fails, fails=all_fails, warnings=all_warnings, details=all_details)


def qa_result_to_dict(result: QAResult) -> Dict[str, Any]:
    return asdict(result)


def qa_result_to_json(result: QAResult) -> str:
    return json.dumps(qa_result_to_dict(result), indent=2)

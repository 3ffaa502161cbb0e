"""
SVG markup building and document assembly.

Attributes are emitted in the order given so output stays byte-stable.
Keyword names map to SVG attributes by turning underscores into hyphens
(``stroke_width`` -> ``stroke-width``).
"""

from typing import Union

from .sdk import SVG_NS, VIEWBOX

Number = Union[int, float]


def fmt(value: Number) -> str:
    """Round to 2 decimals and drop trailing zeros (``256``, ``12.5``, ``-3.25``)."""
    v = round(float(value), 2)
    if v == int(v):
        return str(int(v))
    return f"{v:.2f}".rstrip("0").rstrip(".")


def _attr_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return fmt(value)
    return str(value)


def attrs(**kwargs) -> str:
    parts = []
    for key, value in kwargs.items():
        if value is None:
            continue
        name = key.rstrip("_").replace("_", "-")
        parts.append(f'{name}="{_attr_value(value)}"')
    return " ".join(parts)


def el(tag: str, *children: str, **kwargs) -> str:
    """Serialize one element; self-closing when it has no children."""
    a = attrs(**kwargs)
    head = f"<{tag} {a}" if a else f"<{tag}"
    if not children:
        return f"{head}/>"
    return f"{head}>{''.join(children)}</{tag}>"


def group(*children: str, **kwargs) -> str:
    return el("g", *children, **kwargs)


def rotate(angle: Number, cx: Number, cy: Number) -> str:
    return f"rotate({fmt(angle)} {fmt(cx)} {fmt(cy)})"


def svg_wrap(inner: str) -> str:
    """Wrap body markup in the canonical square document."""
    return f'<svg xmlns="{SVG_NS}" viewBox="{VIEWBOX}">{inner}</svg>'

"""Scene graph output helpers: JSON-ready dicts and SVG markup."""

from __future__ import annotations

import re
from collections import Counter
from typing import Any
from xml.sax.saxutils import escape, quoteattr

from svg_scene.baseline import format_number, parse_number
from svg_scene.builder import SceneNode
from svg_scene.schema import ShapeKind

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# Attribute names that are camel-case in SVG itself
_NATIVE_CAMEL = frozenset({"viewBox", "gradientUnits"})
_UPPER = re.compile(r"([A-Z])")


def kebab_case(name: str) -> str:
    """``strokeWidth`` -> ``stroke-width``; SVG-native names are kept."""
    if name in _NATIVE_CAMEL:
        return name
    return _UPPER.sub(lambda m: "-" + m.group(1).lower(), name)


def scene_to_dict(node: SceneNode) -> dict[str, Any]:
    return {
        "kind": node.kind.value,
        "attributes": dict(node.attributes),
        "children": [
            scene_to_dict(child) if isinstance(child, SceneNode) else child
            for child in node.children
        ],
    }


def _unshifted_y(y: str, font_size: str | None) -> str:
    # Inverse of the tspan baseline shift applied while building
    y_number = parse_number(y)
    size_number = parse_number(font_size)
    if y_number is None or size_number is None:
        return y
    return format_number(y_number + size_number)


def scene_to_markup(
    node: SceneNode,
    _root: bool = True,
    _font_size: str | None = None,
) -> str:
    """Serialize a scene graph back to SVG markup.

    The root ``svg`` gets the SVG namespace declaration so the output is a
    standalone document. Tspan ``y`` values are written before the baseline
    shift, so converting the markup again gives back the same scene.
    """
    font_size = node.attributes.get("fontSize", _font_size)
    parts = [f"<{node.kind.value}"]
    if _root and node.kind is ShapeKind.SVG:
        parts.append(f' xmlns="{SVG_NAMESPACE}"')
    for name, value in node.attributes.items():
        if name == "y" and node.kind is ShapeKind.TSPAN:
            value = _unshifted_y(value, font_size)
        parts.append(f" {kebab_case(name)}={quoteattr(value)}")

    if not node.children:
        parts.append("/>")
        return "".join(parts)

    parts.append(">")
    for child in node.children:
        if isinstance(child, SceneNode):
            parts.append(scene_to_markup(child, _root=False, _font_size=font_size))
        else:
            parts.append(escape(child))
    parts.append(f"</{node.kind.value}>")
    return "".join(parts)


def count_nodes(node: SceneNode) -> Counter[str]:
    """Histogram of element kinds in the scene."""
    return Counter(n.kind.value for n in node.walk())

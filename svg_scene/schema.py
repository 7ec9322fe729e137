"""Whitelisted shape kinds and the attributes each one may carry.

Attribute names are camel-cased (``fillRule``, not ``fill-rule``). Every
kind accepts COMMON_ATTRIBUTES in addition to its own table.
"""

from __future__ import annotations

from enum import Enum


class ShapeKind(str, Enum):
    """SVG elements the scene graph can represent."""

    SVG = "svg"
    G = "g"
    PATH = "path"
    CIRCLE = "circle"
    RECT = "rect"
    LINE = "line"
    LINEAR_GRADIENT = "linearGradient"
    RADIAL_GRADIENT = "radialGradient"
    STOP = "stop"
    ELLIPSE = "ellipse"
    POLYGON = "polygon"
    POLYLINE = "polyline"
    TEXT = "text"
    TSPAN = "tspan"
    USE = "use"
    DEFS = "defs"

    @classmethod
    def from_tag(cls, tag: str | None) -> ShapeKind | None:
        """Return the kind for a local tag name, or None if not whitelisted."""
        if not tag:
            return None
        try:
            return cls(tag)
        except ValueError:
            return None


SWITCH_TAG = "switch"

COMMON_ATTRIBUTES: frozenset[str] = frozenset(
    {
        "id",
        "fill",
        "fillOpacity",
        "stroke",
        "strokeWidth",
        "strokeOpacity",
        "opacity",
        "strokeLinecap",
        "strokeLinejoin",
        "strokeDasharray",
        "strokeDashoffset",
        "x",
        "y",
        "rotate",
        "scale",
        "origin",
        "originX",
        "originY",
        "transform",
        "clipPath",
    }
)

_LINE = frozenset({"x1", "y1", "x2", "y2"})
_CIRCLE = frozenset({"cx", "cy", "r"})
_TEXT = frozenset({"fontFamily", "fontSize", "fontWeight", "textAnchor"})
_POINTS = frozenset({"points"})

KIND_ATTRIBUTES: dict[ShapeKind, frozenset[str]] = {
    ShapeKind.SVG: frozenset({"viewBox", "width", "height"}),
    ShapeKind.G: frozenset({"id", "display"}),
    ShapeKind.PATH: frozenset({"d", "fillRule", "clipRule"}),
    ShapeKind.CIRCLE: _CIRCLE,
    ShapeKind.RECT: frozenset({"width", "height"}),
    ShapeKind.LINE: _LINE,
    ShapeKind.LINEAR_GRADIENT: _LINE | {"id", "gradientUnits"},
    ShapeKind.RADIAL_GRADIENT: _CIRCLE | {"id", "gradientUnits"},
    ShapeKind.STOP: frozenset({"offset"}),
    ShapeKind.ELLIPSE: frozenset({"cx", "cy", "rx", "ry"}),
    ShapeKind.POLYGON: _POINTS,
    ShapeKind.POLYLINE: _POINTS,
    ShapeKind.TEXT: _TEXT,
    ShapeKind.TSPAN: _TEXT,
    ShapeKind.USE: frozenset({"href", "x", "y"}),
    ShapeKind.DEFS: frozenset(),
}

# Precomputed union with the common set, one entry per kind
_PERMITTED: dict[ShapeKind, frozenset[str]] = {
    kind: attrs | COMMON_ATTRIBUTES for kind, attrs in KIND_ATTRIBUTES.items()
}


def permitted_attributes(kind: ShapeKind) -> frozenset[str]:
    """Return the camel-cased attribute names legal on ``kind``."""
    return _PERMITTED[kind]


def is_admissible(tag: str | None) -> bool:
    """Check a local tag name against the whitelist."""
    return ShapeKind.from_tag(tag) is not None

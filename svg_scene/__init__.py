"""svg-scene: Convert SVG markup into a renderer-ready scene graph.

This library turns arbitrary SVG into a restricted, typed tree of shapes:
- Whitelisted elements only; everything else is dropped
- Per-element attribute schemas with camel-cased names
- Inline style merging and document-wide fill override
- <switch> fallback and tspan baseline correction

Example:
    >>> from svg_scene import SceneConverter
    >>> converter = SceneConverter()
    >>> result = converter.convert_file("icon.svg")
"""

from svg_scene.__about__ import __version__
from svg_scene.api import ConversionResult, SceneConverter
from svg_scene.builder import SceneNode, build_scene
from svg_scene.config import Config, SceneOptions
from svg_scene.exceptions import (
    ConfigError,
    RemoteResourceError,
    SceneError,
    SVGParseError,
)
from svg_scene.schema import ShapeKind, permitted_attributes

__all__ = [
    # Main API
    "SceneConverter",
    "ConversionResult",
    "SceneNode",
    "ShapeKind",
    "build_scene",
    "permitted_attributes",
    "Config",
    "SceneOptions",
    # Exceptions
    "SceneError",
    "SVGParseError",
    "RemoteResourceError",
    "ConfigError",
    # Metadata
    "__version__",
]

"""SVG parsing for svg-scene.

This subpackage provides:
- Safe SVG parsing with XXE protection (defusedxml)
- Extraction of the <svg> fragment from surrounding markup
- The generic RawNode tree handed to the scene builder
"""

from svg_scene.svg.nodes import RawNode, from_element, local_name
from svg_scene.svg.parser import extract_svg_fragment, parse_svg_file, parse_svg_string

__all__ = [
    "RawNode",
    "from_element",
    "local_name",
    "extract_svg_fragment",
    "parse_svg_file",
    "parse_svg_string",
]

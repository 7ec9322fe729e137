"""Text span vertical position correction."""

from __future__ import annotations

import logging
import re

from svg_scene.svg.nodes import RawNode

logger = logging.getLogger(__name__)

FONT_SIZE_ATTRIBUTE = "font-size"

_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_number(value: str | None) -> float | None:
    """Parse the leading number of ``value`` (``"12px"`` -> 12.0)."""
    if value is None:
        return None
    match = _LEADING_NUMBER.match(value)
    if match is None:
        return None
    return float(match.group(1))


def format_number(value: float) -> str:
    """Render a float without a trailing ``.0`` for whole numbers."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def nearest_font_size(node: RawNode) -> str | None:
    """Return the ``font-size`` of ``node`` or its closest ancestor declaring one."""
    for ancestor in node.ancestors():
        font_size = ancestor.get(FONT_SIZE_ATTRIBUTE)
        if font_size is not None:
            return font_size
    return None


def fix_baseline(y: str, node: RawNode) -> str:
    """Shift a tspan's ``y`` up by the nearest declared font size.

    The search starts at ``node`` itself and stops at the first font size
    found; sizes of further ancestors are never accumulated. Without any
    font size, or when either value is not numeric, ``y`` is returned
    unchanged.
    """
    font_size = nearest_font_size(node)
    if font_size is None:
        return y

    y_number = parse_number(y)
    size_number = parse_number(font_size)
    if y_number is None or size_number is None:
        logger.debug("Cannot shift baseline y=%r by font-size=%r", y, font_size)
        return y
    return format_number(y_number - size_number)

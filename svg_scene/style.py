"""Attribute name and inline ``style`` normalization."""

from __future__ import annotations

import re

from svg_scene.fill import resolve_fill

_HYPHEN_LOWER = re.compile(r"-([a-z])")
# A "px" unit directly after a number: "10px", "1.5px 2px"
_PX_UNIT = re.compile(r"(?<=[\d.])px\b")


def camel_case(name: str) -> str:
    """``font-size`` -> ``fontSize``. Names without hyphens pass through."""
    return _HYPHEN_LOWER.sub(lambda m: m.group(1).upper(), name)


def strip_px(value: str) -> str:
    """Drop ``px`` units from numeric values; no other unit is touched."""
    return _PX_UNIT.sub("", value)


def parse_style(style: str | None, fill_override: str | None = None) -> dict[str, str]:
    """Split an inline ``style`` attribute into camel-cased properties.

    Empty segments and segments without a colon are skipped. When
    ``fill_override`` is set, a declared ``fill`` is replaced by it unless
    the declared value is ``none``.

    >>> parse_style("fill:red; stroke-width:2px", "#00f")
    {'fill': '#00f', 'strokeWidth': '2'}
    """
    if not style:
        return {}

    result: dict[str, str] = {}
    for declaration in style.split(";"):
        prop, sep, value = declaration.partition(":")
        prop = prop.strip()
        if not prop or not sep:
            continue
        value = strip_px(value.strip())
        if prop == "fill":
            value = resolve_fill(value, fill_override)
        result[camel_case(prop)] = value
    return result

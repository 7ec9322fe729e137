"""RawNode tree -> typed scene graph.

The build is a post-order walk: children are built first, blank text is
trimmed, then the node's attributes are resolved against its schema.
Nothing below the root ever raises; unsupported nodes simply contribute
nothing to their parent.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Union

from svg_scene.baseline import fix_baseline
from svg_scene.config import SceneOptions
from svg_scene.exceptions import SVGParseError
from svg_scene.fill import forced_fill, resolve_fill
from svg_scene.filter import (
    Admission,
    classify,
    shape_kind,
    switch_candidates,
    trim_whitespace_children,
)
from svg_scene.schema import ShapeKind, permitted_attributes
from svg_scene.style import camel_case, parse_style, strip_px
from svg_scene.svg.nodes import RawNode

logger = logging.getLogger(__name__)

STYLE_ATTRIBUTE = "style"

SceneChild = Union["SceneNode", str]


@dataclass(frozen=True)
class SceneNode:
    """A renderer-ready element: kind, resolved attributes, children.

    Children are SceneNodes or literal text strings. Attributes are a
    read-only mapping holding only names permitted for ``kind``.
    """

    kind: ShapeKind
    attributes: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    children: tuple[SceneChild, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.attributes, MappingProxyType):
            object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    @property
    def element_children(self) -> tuple[SceneNode, ...]:
        return tuple(c for c in self.children if isinstance(c, SceneNode))

    @property
    def text(self) -> str:
        """Concatenated direct text children."""
        return "".join(c for c in self.children if isinstance(c, str))

    def walk(self) -> Iterator[SceneNode]:
        """Yield this node and every descendant element, depth-first."""
        yield self
        for child in self.element_children:
            yield from child.walk()


def build_attributes(
    node: RawNode,
    kind: ShapeKind,
    options: SceneOptions,
    is_root: bool = False,
) -> dict[str, str]:
    """Resolve the attribute mapping for an admitted node.

    Precedence, lowest first: forced fill, declared presentation
    attributes, inline style properties. Everything is filtered through
    the kind's permitted set.
    """
    permitted = permitted_attributes(kind)
    attributes = forced_fill(options)

    for name, raw_value in node.attributes.items():
        if name == STYLE_ATTRIBUTE:
            continue
        key = camel_case(name)
        if key not in permitted:
            logger.debug("Dropping %r on <%s>", name, kind.value)
            continue
        value = strip_px(raw_value)
        if key == "fill":
            value = resolve_fill(value, options.fill)
        attributes[key] = value

    style = node.get(STYLE_ATTRIBUTE)
    if style:
        for key, value in parse_style(style, options.fill).items():
            if key in permitted:
                attributes[key] = value
            else:
                logger.debug("Dropping style property %r on <%s>", key, kind.value)

    if kind is ShapeKind.TSPAN and attributes.get("y"):
        attributes["y"] = fix_baseline(attributes["y"], node)

    if is_root and kind is ShapeKind.SVG:
        if options.override_width:
            attributes["width"] = str(options.override_width)
        if options.override_height:
            attributes["height"] = str(options.override_height)

    return attributes


def _build_children(node: RawNode, options: SceneOptions) -> list[SceneChild]:
    children: list[SceneChild] = []
    for child in node.children:
        if child.is_text:
            if child.value:
                children.append(child.value)
            continue
        built = _build_node(child, options)
        if built is not None:
            children.append(built)
    return trim_whitespace_children(children)


def _select_switch_child(node: RawNode, options: SceneOptions) -> SceneNode | None:
    # Feature tests (requiredFeatures, systemLanguage, ...) are not evaluated;
    # the first candidate that builds is taken.
    for candidate in switch_candidates(node):
        built = _build_node(candidate, options)
        if built is not None:
            logger.debug("<switch> resolved to <%s>", candidate.tag_name)
            return built
    logger.debug("<switch> has no renderable candidate")
    return None


def _build_node(
    node: RawNode, options: SceneOptions, is_root: bool = False
) -> SceneNode | None:
    admission = classify(node)
    if admission is Admission.IGNORED:
        logger.debug("Ignoring unsupported <%s>", node.tag_name or "#text")
        return None
    if admission is Admission.SWITCH:
        return _select_switch_child(node, options)

    kind = shape_kind(node)
    children = _build_children(node, options)
    attributes = build_attributes(node, kind, options, is_root=is_root)
    return SceneNode(kind=kind, attributes=attributes, children=tuple(children))


def build_scene(root: RawNode | None, options: SceneOptions | None = None) -> SceneNode | None:
    """Build the scene graph for a document root.

    Returns None for an empty document or a root that is not renderable.

    Raises:
        SVGParseError: If the document is nested too deeply to walk.
    """
    if root is None:
        return None
    options = options or SceneOptions()
    try:
        return _build_node(root, options, is_root=True)
    except RecursionError as e:
        raise SVGParseError("SVG document is nested too deeply") from e

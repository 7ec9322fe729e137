"""Generic XML node tree consumed by the scene builder.

Parents own their children. The parent link is a weak reference used only
to walk upward (text baseline lookup); it never keeps a node alive.
"""

from __future__ import annotations

import weakref
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element


def local_name(name: str) -> str:
    """Strip an ElementTree ``{namespace}`` prefix."""
    if "}" in name:
        return name.rsplit("}", 1)[1]
    return name


@dataclass(eq=False)
class RawNode:
    """One node of the parsed document.

    Element nodes have a non-empty ``tag_name``. Text nodes have an empty
    ``tag_name`` and carry their character data in ``value``.
    """

    tag_name: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[RawNode] = field(default_factory=list)
    value: str | None = None
    _parent: weakref.ReferenceType[RawNode] | None = field(
        default=None, repr=False
    )

    @classmethod
    def text(cls, value: str) -> RawNode:
        return cls(tag_name="", value=value)

    @property
    def is_text(self) -> bool:
        return not self.tag_name

    @property
    def parent(self) -> RawNode | None:
        return self._parent() if self._parent is not None else None

    def append(self, child: RawNode) -> RawNode:
        """Attach ``child`` as the last child and return it."""
        child._parent = weakref.ref(self)
        self.children.append(child)
        return child

    def ancestors(self) -> Iterator[RawNode]:
        """Yield this node, then each parent up to the document root."""
        node: RawNode | None = self
        while node is not None:
            yield node
            node = node.parent

    def get(self, name: str, default: str | None = None) -> str | None:
        return self.attributes.get(name, default)


def _element_node(element: Element) -> RawNode:
    node = RawNode(
        tag_name=local_name(element.tag) if isinstance(element.tag, str) else "",
        attributes={local_name(k): v for k, v in element.attrib.items()},
    )
    if element.text:
        node.append(RawNode.text(element.text))
    return node


def from_element(element: Element) -> RawNode:
    """Convert an ElementTree element (and its subtree) into RawNodes.

    Element text and child tails become text nodes in document order, so
    whitespace between elements is kept for the builder to trim. The walk
    keeps its own stack, so nesting depth is not limited by recursion.
    """
    root = _element_node(element)
    stack = [(root, iter(element))]
    while stack:
        parent, pending = stack[-1]
        child = next(pending, None)
        if child is None:
            stack.pop()
            continue
        # Comments and processing instructions have a callable tag
        if isinstance(child.tag, str):
            node = parent.append(_element_node(child))
            stack.append((node, iter(child)))
        if child.tail:
            parent.append(RawNode.text(child.tail))
    return root

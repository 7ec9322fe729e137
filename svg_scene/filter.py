"""Node admission rules: whitelist, switch candidates, whitespace trimming."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from svg_scene.schema import SWITCH_TAG, ShapeKind, is_admissible
from svg_scene.svg.nodes import RawNode


class Admission(Enum):
    """How the builder must treat a raw node."""

    SHAPE = "shape"
    SWITCH = "switch"
    IGNORED = "ignored"


def classify(node: RawNode) -> Admission:
    if is_admissible(node.tag_name):
        return Admission.SHAPE
    if node.tag_name == SWITCH_TAG:
        return Admission.SWITCH
    return Admission.IGNORED


def switch_candidates(node: RawNode) -> list[RawNode]:
    """Whitelisted element children of a ``switch``, in source order.

    Unsupported children are never candidates, not even as a last resort.
    """
    return [child for child in node.children if is_admissible(child.tag_name)]


def is_blank_text(child: object) -> bool:
    return isinstance(child, str) and not child.strip()


def trim_whitespace_children(children: Sequence[object]) -> list[object]:
    """Drop text entries that are empty after stripping; keep everything else."""
    return [child for child in children if not is_blank_text(child)]


def shape_kind(node: RawNode) -> ShapeKind:
    """Kind of an admitted node. Only call after classify() returned SHAPE."""
    kind = ShapeKind.from_tag(node.tag_name)
    if kind is None:
        raise ValueError(f"<{node.tag_name}> is not a whitelisted element")
    return kind

"""SVG markup to RawNode tree.

Parsing goes through defusedxml so external entities and DTD tricks in
untrusted markup are rejected rather than expanded.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from svg_scene.exceptions import SVGParseError
from svg_scene.svg.nodes import RawNode, from_element

logger = logging.getLogger(__name__)

_SVG_OPEN = re.compile(r"<svg[\s>/]")
_SVG_CLOSE = "</svg>"
_COMMENT = re.compile(r"<!-.*?->", re.DOTALL)


def extract_svg_fragment(markup: str) -> str:
    """Cut the first ``<svg>...</svg>`` fragment out of ``markup``.

    Anything before the opening tag (XML declaration, doctype, HTML
    wrapper) and after the first closing tag is discarded, and comment-like
    ``<!- ... ->`` sequences are removed.

    Raises:
        SVGParseError: If there is no opening or closing svg tag.
    """
    match = _SVG_OPEN.search(markup)
    if match is None:
        raise SVGParseError("No <svg> element found in markup")

    start = match.start()
    end = markup.find(_SVG_CLOSE, start)
    if end != -1:
        fragment = markup[start : end + len(_SVG_CLOSE)]
    else:
        # Self-closing root: <svg ... />
        tag_end = markup.find(">", start)
        if tag_end == -1 or markup[tag_end - 1] != "/":
            raise SVGParseError("No closing </svg> tag found in markup")
        fragment = markup[start : tag_end + 1]

    return _COMMENT.sub("", fragment)


def parse_svg_string(markup: str) -> RawNode:
    """Parse SVG markup into a RawNode tree rooted at the ``svg`` element.

    Raises:
        SVGParseError: If the fragment cannot be located or parsed.
    """
    fragment = extract_svg_fragment(markup)
    try:
        root = ET.fromstring(fragment)
    except ET.ParseError as e:
        raise SVGParseError(f"Failed to parse SVG: {e}") from e
    except DefusedXmlException as e:
        raise SVGParseError(f"Rejected unsafe SVG markup: {e}") from e

    node = from_element(root)
    logger.debug("Parsed <%s> root with %d children", node.tag_name, len(node.children))
    return node


def parse_svg_file(path: Path) -> RawNode:
    """Read ``path`` as UTF-8 and parse it.

    Raises:
        SVGParseError: If the file cannot be read or parsed.
    """
    try:
        markup = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SVGParseError(f"Cannot read {path}: {e}", details={"path": str(path)}) from e
    return parse_svg_string(markup)

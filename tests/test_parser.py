"""Unit tests for svg_scene.svg (fragment extraction, parsing, RawNode).

Tests use real parsing with defusedxml, no mocking of core logic.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from svg_scene.exceptions import SVGParseError
from svg_scene.svg import RawNode, extract_svg_fragment, parse_svg_file, parse_svg_string


class TestExtractFragment:
    """Tests for extract_svg_fragment()."""

    def test_cuts_svg_out_of_html(self) -> None:
        """The first svg fragment is cut out of surrounding HTML."""
        markup = (
            "<html><body><p>before</p>"
            '<svg width="1"><rect/></svg>'
            "<svg><circle/></svg></body></html>"
        )
        assert extract_svg_fragment(markup) == '<svg width="1"><rect/></svg>'

    def test_drops_xml_declaration_and_doctype(self) -> None:
        """XML declaration and doctype are discarded."""
        markup = (
            '<?xml version="1.0"?>\n'
            '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" '
            '"http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">\n'
            "<svg><g/></svg>\n"
        )
        assert extract_svg_fragment(markup) == "<svg><g/></svg>"

    def test_strips_comments(self) -> None:
        """Comments are removed from the fragment."""
        fragment = extract_svg_fragment("<svg><!-- note --><rect/><!-- two\nlines --></svg>")
        assert fragment == "<svg><rect/></svg>"

    def test_missing_svg_raises(self) -> None:
        """Markup without svg raises SVGParseError."""
        with pytest.raises(SVGParseError, match="No <svg> element"):
            extract_svg_fragment("<html><body>nothing here</body></html>")

    def test_similar_tag_names_do_not_match(self) -> None:
        """Tags that merely start with svg are not matched."""
        with pytest.raises(SVGParseError):
            extract_svg_fragment("<svgfoo></svgfoo>")

    def test_missing_close_raises(self) -> None:
        """An unclosed svg raises SVGParseError."""
        with pytest.raises(SVGParseError, match="closing"):
            extract_svg_fragment('<svg width="1"><rect/>')

    def test_self_closing_root(self) -> None:
        """A self-closing svg root is accepted."""
        assert extract_svg_fragment('<svg width="1"/>') == '<svg width="1"/>'


class TestParseSvgString:
    """Tests for parse_svg_string() and the RawNode tree it produces."""

    def test_namespaces_are_stripped(self) -> None:
        """Namespace prefixes are removed from tags and attributes."""
        root = parse_svg_string(
            '<svg xmlns="http://www.w3.org/2000/svg" '
            'xmlns:xlink="http://www.w3.org/1999/xlink">'
            '<use xlink:href="#a"/></svg>'
        )
        assert root.tag_name == "svg"
        use = root.children[0]
        assert use.tag_name == "use"
        assert use.attributes == {"href": "#a"}

    def test_text_and_tails_are_kept_in_order(self) -> None:
        """Text and tails become text nodes in document order."""
        root = parse_svg_string("<svg>lead<rect/>middle<circle/>tail</svg>")
        kinds = [(c.tag_name, c.value) for c in root.children]
        assert kinds == [
            ("", "lead"),
            ("rect", None),
            ("", "middle"),
            ("circle", None),
            ("", "tail"),
        ]

    def test_parent_links(self) -> None:
        """Nodes link to their parents up to the root."""
        root = parse_svg_string("<svg><g><rect/></g></svg>")
        rect = root.children[0].children[0]
        assert rect.parent is root.children[0]
        assert [n.tag_name for n in rect.ancestors()] == ["rect", "g", "svg"]
        assert root.parent is None

    def test_attribute_order_preserved(self) -> None:
        """Attributes keep their source order."""
        root = parse_svg_string('<svg><rect y="2" x="1" width="3"/></svg>')
        assert list(root.children[0].attributes) == ["y", "x", "width"]

    def test_malformed_markup_raises_parse_error(self, malformed_svg_content: str) -> None:
        """Low-level parser errors are wrapped, never leaked."""
        with pytest.raises(SVGParseError, match="Failed to parse SVG"):
            parse_svg_string(malformed_svg_content)

    def test_undefined_entity_raises_parse_error(self) -> None:
        """Undefined entities raise SVGParseError."""
        with pytest.raises(SVGParseError):
            parse_svg_string("<svg>&xxe;</svg>")

    def test_no_svg_raises_parse_error(self) -> None:
        """Plain text raises SVGParseError."""
        with pytest.raises(SVGParseError):
            parse_svg_string("just some text")

    def test_deeply_nested_markup_parses(self) -> None:
        """Nesting far past the recursion limit still yields a full RawNode tree."""
        depth = 3000
        markup = "<svg>" + "<g>" * depth + "<rect/>" + "</g>" * depth + "</svg>"
        root = parse_svg_string(markup)
        node = root
        for _ in range(depth):
            node = node.children[0]
            assert node.tag_name == "g"
        assert node.children[0].tag_name == "rect"
        assert node.children[0].parent is node


class TestParseSvgFile:
    """Tests for parse_svg_file()."""

    def test_parse_file(self, temp_svg: Path) -> None:
        """parse_svg_file reads and parses a file."""
        root = parse_svg_file(temp_svg)
        assert root.tag_name == "svg"
        assert [c.tag_name for c in root.children if not c.is_text] == ["rect", "circle"]

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """A missing file raises SVGParseError."""
        with pytest.raises(SVGParseError, match="Cannot read"):
            parse_svg_file(tmp_path / "missing.svg")


class TestRawNode:
    """Tests for RawNode helpers."""

    def test_text_node(self) -> None:
        """RawNode.text builds a text node."""
        node = RawNode.text("hello")
        assert node.is_text
        assert node.value == "hello"

    def test_append_sets_parent(self) -> None:
        """append links the child to its parent."""
        parent = RawNode("g")
        child = parent.append(RawNode("rect"))
        assert child.parent is parent
        assert parent.children == [child]

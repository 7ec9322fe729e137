"""Pytest configuration and shared fixtures for svg-scene tests."""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from svg_scene import SceneNode, SceneOptions, build_scene
from svg_scene.svg import parse_svg_string


@pytest.fixture
def simple_svg_content() -> str:
    """Return a simple SVG string with a few basic shapes."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="200" height="100" viewBox="0 0 200 100">
  <rect x="10" y="10" width="80px" height="80" fill="blue"/>
  <circle cx="50" cy="50" r="30" fill="none" stroke="black" stroke-width="2px"/>
</svg>"""


@pytest.fixture
def temp_svg(tmp_path: Path, simple_svg_content: str) -> Generator[Path, None, None]:
    """Create a temporary SVG file for testing."""
    svg_path = tmp_path / "test.svg"
    svg_path.write_text(simple_svg_content, encoding="utf-8")
    yield svg_path


@pytest.fixture
def tspan_svg_content() -> str:
    """Return SVG with nested tspans carrying their own font sizes."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="300" height="100" viewBox="0 0 300 100">
  <text x="10" y="50" font-family="Arial" font-size="8">
    <tspan font-size="12" y="20">Hello</tspan>
    <tspan y="30">World</tspan>
  </text>
</svg>"""


@pytest.fixture
def gradient_svg_content() -> str:
    """Return SVG using defs, gradients and use references."""
    return (
        '<svg xmlns="http://www.w3.org/2000/svg" '
        'xmlns:xlink="http://www.w3.org/1999/xlink" width="64" height="64">\n'
        "  <defs>\n"
        '    <linearGradient id="grad" x1="0" y1="0" x2="1" y2="1" '
        'gradientUnits="objectBoundingBox">\n'
        '      <stop offset="0" style="stop-color:#fff"/>\n'
        '      <stop offset="1" stop-color="#000"/>\n'
        "    </linearGradient>\n"
        '    <path id="shape" d="M0 0 L10 10 Z" fill-rule="evenodd"/>\n'
        "  </defs>\n"
        '  <use xlink:href="#shape" x="5" y="5"/>\n'
        "</svg>"
    )


@pytest.fixture
def malformed_svg_content() -> str:
    """Return malformed SVG for error testing."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg">
  <text x="10" y="50">Unclosed text
</svg>"""


@pytest.fixture
def isolated_config(tmp_path: Path) -> Path:
    """Write a config file that keeps the source cache inside tmp_path."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        f"source:\n  cache_dir: {tmp_path / 'cache'}\n", encoding="utf-8"
    )
    return config_path


@pytest.fixture
def build() -> Callable[..., SceneNode | None]:
    """Return a helper that parses markup and builds it with SceneOptions(**kwargs)."""

    def _build(markup: str, **options: object) -> SceneNode | None:
        return build_scene(parse_svg_string(markup), SceneOptions(**options))

    return _build

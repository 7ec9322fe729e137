"""Command-line interface for svg-scene."""

from svg_scene.cli.main import cli

__all__ = ["cli"]

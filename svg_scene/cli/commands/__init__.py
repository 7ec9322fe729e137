"""CLI commands for svg-scene."""

from svg_scene.cli.commands.cache import cache
from svg_scene.cli.commands.convert import convert

__all__ = ["convert", "cache"]

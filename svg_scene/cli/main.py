"""svg-scene CLI entry point."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from svg_scene.__about__ import __version__
from svg_scene.cli.commands import cache, convert
from svg_scene.config import Config
from svg_scene.exceptions import ConfigError

console = Console(stderr=True)


def setup_logging(level: str) -> None:
    """Route svg_scene logs through rich on stderr."""
    logger = logging.getLogger("svg_scene")
    logger.setLevel(level.upper())
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=console, show_path=False))


@click.group()
@click.version_option(__version__, prog_name="svg-scene")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging verbosity (default from config, else WARNING)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML configuration file",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, config_path: Path | None) -> None:
    """Convert SVG documents into renderer-ready scene graphs."""
    try:
        config = Config.load(config_path)
    except ConfigError as e:
        console.print(f"[red]Config error:[/red] {e}")
        raise SystemExit(1) from e

    level = (log_level or config.log_level).upper()
    setup_logging(level)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["log_level"] = level


cli.add_command(convert)
cli.add_command(cache)


if __name__ == "__main__":
    cli()

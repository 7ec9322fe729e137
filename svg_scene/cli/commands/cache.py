"""Cache command - inspect or clear fetched SVG sources."""

from __future__ import annotations

import click
from rich.console import Console

from svg_scene.config import Config
from svg_scene.sources import FileCache

console = Console()


def _file_cache(ctx: click.Context) -> FileCache:
    config: Config = (ctx.obj or {}).get("config") or Config.load()
    return FileCache(config.cache_dir)


@click.group()
def cache() -> None:
    """Source cache commands."""
    pass


@cache.command("info")
@click.pass_context
def cache_info(ctx: click.Context) -> None:
    """Show cache location and size."""
    file_cache = _file_cache(ctx)
    entries = file_cache.entries()
    if not entries:
        console.print(f"[yellow]No cached sources in[/yellow] {file_cache.cache_dir}")
        return
    console.print(f"[bold]Cache location:[/bold] {file_cache.cache_dir}")
    console.print(f"[bold]Entries:[/bold] {len(entries)}")
    console.print(f"[bold]Cache size:[/bold] {file_cache.size() / 1024:.1f} KB")


@cache.command("clear")
@click.pass_context
def cache_clear(ctx: click.Context) -> None:
    """Delete every cached source."""
    removed = _file_cache(ctx).clear()
    if removed:
        console.print(f"[green]Cache cleared:[/green] {removed} entries removed")
    else:
        console.print("[yellow]No cache to clear[/yellow]")

"""Convert command - build the scene graph for one SVG."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from svg_scene import SceneConverter, SceneNode
from svg_scene.config import Config
from svg_scene.serialize import count_nodes, scene_to_dict, scene_to_markup
from svg_scene.sources import FileCache, RemoteSource

console = Console()
err_console = Console(stderr=True)


def scene_tree(node: SceneNode, tree: Tree | None = None) -> Tree:
    """Build a rich Tree mirroring the scene graph."""
    attrs = " ".join(f"[dim]{k}=[/dim]{escape(repr(v))}" for k, v in node.attributes.items())
    label = f"[cyan]{node.kind.value}[/cyan] {attrs}".rstrip()
    branch = Tree(label) if tree is None else tree.add(label)
    for child in node.children:
        if isinstance(child, SceneNode):
            scene_tree(child, branch)
        else:
            branch.add(f"[green]{escape(repr(child.strip()))}[/green]")
    return branch


@click.command()
@click.argument("source")
@click.option("--fill", help="Fill color forced onto shapes (except fill=none)")
@click.option("--fill-all", is_flag=True, help="Also add the fill where none is declared")
@click.option("--width", help="Override the root svg width")
@click.option("--height", help="Override the root svg height")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["tree", "json", "svg"]),
    default="tree",
    show_default=True,
    help="Output format",
)
@click.option("-o", "--output", type=click.Path(path_type=Path), help="Write output to file")
@click.option("--no-cache", is_flag=True, help="Do not store fetched SVGs in the cache")
@click.pass_context
def convert(
    ctx: click.Context,
    source: str,
    fill: str | None,
    fill_all: bool,
    width: str | None,
    height: str | None,
    output_format: str,
    output: Path | None,
    no_cache: bool,
) -> None:
    """Convert SOURCE to a scene graph.

    SOURCE: SVG file path, http(s) URL, or '-' to read from stdin.
    """
    obj = ctx.obj or {}
    config: Config = obj.get("config") or Config.load()

    options = config.options.with_overrides(
        fill=fill,
        apply_fill_to_all=fill_all or None,
        override_width=width,
        override_height=height,
    )
    remote = RemoteSource(
        cache=FileCache(config.cache_dir),
        timeout=config.timeout,
        max_size=config.max_size,
        no_cache=no_cache or config.no_cache,
    )
    converter = SceneConverter(options=options, config=config, source=remote)

    if source == "-":
        result = converter.convert_string(sys.stdin.read(), source="<stdin>")
    else:
        result = converter.convert(source)

    if not result.success or result.scene is None:
        reason = "; ".join(result.errors) or "document has no renderable content"
        err_console.print(f"[red]No scene produced from {escape(source)}:[/red] {escape(reason)}")
        raise SystemExit(1)

    scene = result.scene
    if output_format == "json":
        text = json.dumps(scene_to_dict(scene), indent=2)
    elif output_format == "svg":
        text = scene_to_markup(scene)
    else:
        text = None

    if output:
        if text is None:
            text = json.dumps(scene_to_dict(scene), indent=2)
        output.write_text(text + "\n", encoding="utf-8")
        counts = count_nodes(scene)
        summary = ", ".join(f"{kind}: {n}" for kind, n in sorted(counts.items()))
        console.print(f"[green]Wrote[/green] {escape(str(output))} [dim]({summary})[/dim]")
    elif text is None:
        console.print(scene_tree(scene))
    else:
        click.echo(text)

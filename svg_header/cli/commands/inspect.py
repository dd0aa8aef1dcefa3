"""Inspect command - show what the model sees in an SVG file."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from svg_header.config import Config
from svg_header.exceptions import SVGHeaderError
from svg_header.svg.model import SVGHeader

console = Console()
err_console = Console(stderr=True)


@click.command()
@click.argument("svg_file", type=click.Path(path_type=Path))
@click.pass_context
def inspect(ctx: click.Context, svg_file: Path) -> None:
    """Print root attributes, child tags and tag attributes of an SVG file."""
    config: Config = (ctx.obj or {}).get("config") or Config()

    try:
        svg = SVGHeader.from_file(svg_file, content_mode=config.content_mode)
    except SVGHeaderError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    svg.debug(console=console)
    console.print(f"\n[bold]Inner content:[/bold] {len(svg.content)} characters")

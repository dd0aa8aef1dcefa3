"""Human-readable dump of an SVGHeader's maps."""

from __future__ import annotations

from collections.abc import Mapping

from rich.console import Console
from rich.table import Table
from rich.text import Text


def _table(title: str, data: Mapping[str, str], value_label: str = "Value") -> Table:
    table = Table(title=title, title_justify="left")
    table.add_column("Name", style="cyan")
    table.add_column(value_label, style="green")
    for key, value in data.items():
        shown = value if len(value) <= 60 else value[:57] + "..."
        table.add_row(Text(key), Text(shown))
    return table


def debug_dump(
    attributes: Mapping[str, str],
    tags: Mapping[str, str],
    tag_attributes: Mapping[str, str],
    console: Console | None = None,
) -> None:
    """Print root attributes, tag bodies and tag attributes as tables."""
    console = console or Console()
    console.print(_table("Root attributes", attributes))
    console.print(_table("Tags", tags, value_label="Text"))
    console.print(_table("Tag attributes", tag_attributes))

"""Transform command - apply root-element changes to one SVG file."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from svg_header.config import Config
from svg_header.exceptions import SVGHeaderError
from svg_header.svg.model import SVGHeader

console = Console(stderr=True)


@click.command()
@click.argument("input_path", metavar="INPUT", type=click.Path(path_type=Path))
@click.option("--clean", is_flag=True, help="Remove every root attribute except viewBox")
@click.option("--class", "set_class", help="Replace the class attribute")
@click.option("--add-class", "add_classes", multiple=True, help="Append a class (repeatable)")
@click.option("--id", "svg_id", help="Set the id attribute")
@click.option("--color", help="Set fill to a #RGB or #RRGGBB color")
@click.option("--size", nargs=2, metavar="WIDTH HEIGHT", help="Set width and height")
@click.option("--title", help="Insert a <title> element")
@click.option("--link", "link_text", help="Wrap the SVG in a link showing this text")
@click.option("--href", help="Link target (required with --link)")
@click.option("--link-class", help="Class of the link text <span>")
@click.option("--anchored", is_flag=True, help="Cut inner content at the real root tags")
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(path_type=Path),
    help="Directory to save a timestamped copy into",
)
@click.option("--stdout", "to_stdout", is_flag=True, help="Write the result to stdout")
@click.pass_context
def transform(
    ctx: click.Context,
    input_path: Path,
    clean: bool,
    set_class: str | None,
    add_classes: tuple[str, ...],
    svg_id: str | None,
    color: str | None,
    size: tuple[str, str] | None,
    title: str | None,
    link_text: str | None,
    href: str | None,
    link_class: str | None,
    anchored: bool,
    output_dir: Path | None,
    to_stdout: bool,
) -> None:
    """Apply header changes to an SVG file.

    INPUT: Path to an SVG file.

    Changes are applied in a fixed order: clean, class, added classes,
    id, color, size, title, link.
    """
    obj = ctx.obj or {}
    config: Config = obj.get("config") or Config()

    if link_text is not None and href is None:
        raise click.UsageError("--link requires --href")
    if href is not None and link_text is None:
        raise click.UsageError("--href requires --link")
    if to_stdout and output_dir:
        raise click.UsageError("--stdout and --output-dir are mutually exclusive")

    content_mode = "anchored" if anchored else config.content_mode

    try:
        svg = SVGHeader.from_file(input_path, content_mode=content_mode)
    except SVGHeaderError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    if clean:
        svg.clean_header()
    if set_class is not None:
        svg.set_class(set_class)
    for cls in add_classes:
        svg.add_class(cls)
    if svg_id is not None:
        svg.set_id(svg_id)
    if color is not None:
        svg.set_color(color)
        if svg.get_attribute("fill") != color:
            console.print(f"[yellow]Warning:[/yellow] ignored invalid color {color!r}")
    if size is not None:
        svg.resize(*size)
    if title is not None:
        svg.set_title(title)
    if link_text is not None and href is not None:
        svg.set_link(link_text, href, link_class)

    target_dir = None if to_stdout else (output_dir or config.output_dir)
    if target_dir is None:
        click.echo(svg.render())
        return

    try:
        saved = svg.save(
            target_dir, strict=config.strict_save, prefix=config.save_prefix
        )
    except SVGHeaderError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    if saved is None:
        console.print(
            f"[yellow]Warning:[/yellow] nothing saved, {target_dir} is not a writable directory"
        )
        return
    click.echo(f"Wrote {saved}")

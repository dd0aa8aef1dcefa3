"""Entry point for the svg-header command line."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from svg_header import __version__
from svg_header.cli.commands import inspect, transform
from svg_header.config import Config
from svg_header.exceptions import ConfigError
from svg_header.log import LOG_LEVELS, setup_logging

console = Console(stderr=True)


@click.group()
@click.version_option(__version__, prog_name="svg-header")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML config file",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Override the configured log level",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, log_level: str | None) -> None:
    """Adjust the root element of SVG files."""
    ctx.ensure_object(dict)
    try:
        config = Config.load(config_path)
    except (ConfigError, FileNotFoundError) as e:
        console.print(f"[red]Config error:[/red] {e}")
        raise SystemExit(1) from e

    level = (log_level or config.log_level).upper()
    setup_logging(level, console=console)

    ctx.obj["config"] = config
    ctx.obj["log_level"] = level


cli.add_command(transform)
cli.add_command(inspect)


if __name__ == "__main__":
    cli()

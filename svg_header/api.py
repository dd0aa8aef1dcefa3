"""High-level entry points for svg-header.

Example:
    >>> from svg_header import process
    >>> markup = process("logo.svg", [("clean_header", ()), ("add_class", ("icon",))])
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

from svg_header.config import Config
from svg_header.svg.model import SVGHeader

# Public mutators that process() may call by name.
OPERATIONS = frozenset(
    {
        "set_attribute",
        "remove_attribute",
        "clean_header",
        "set_class",
        "add_class",
        "set_id",
        "set_color",
        "resize",
        "set_title",
        "set_link",
    }
)


def load(path: str | Path, *, config: Config | None = None) -> SVGHeader:
    """Validate and parse an SVG file."""
    config = config or Config()
    return SVGHeader.from_file(path, content_mode=config.content_mode)


def load_string(markup: str, *, config: Config | None = None) -> SVGHeader:
    """Parse SVG markup held in memory."""
    config = config or Config()
    return SVGHeader(markup, content_mode=config.content_mode)


def apply_operations(
    svg: SVGHeader, operations: Iterable[tuple[str, Sequence[Any]]]
) -> SVGHeader:
    """Call each (method_name, args) pair on svg, in order.

    Raises:
        ValueError: If a name is not one of OPERATIONS.
    """
    for name, args in operations:
        if name not in OPERATIONS:
            raise ValueError(f"Unknown operation: {name!r}")
        getattr(svg, name)(*args)
    return svg


def process(
    path: str | Path,
    operations: Iterable[tuple[str, Sequence[Any]]],
    *,
    config: Config | None = None,
) -> str:
    """Load path, apply operations and return the rendered markup."""
    svg = load(path, config=config)
    return apply_operations(svg, operations).render()

"""CLI commands for svg-header."""

from svg_header.cli.commands.inspect import inspect
from svg_header.cli.commands.transform import transform

__all__ = ["transform", "inspect"]

"""Command-line interface for svg-header."""

from svg_header.cli.main import cli

__all__ = ["cli"]

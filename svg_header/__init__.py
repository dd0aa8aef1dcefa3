"""svg-header: Adjust the root element of SVG files.

This library loads an SVG document and offers a small set of cosmetic
changes before writing it back out:
- Root attribute edits (class, id, fill color, width/height, cleanup)
- Title injection
- Wrapping the image in a link
- Safe parsing with defusedxml

Example:
    >>> from svg_header import SVGHeader
    >>> svg = SVGHeader.from_file("logo.svg")
    >>> svg.clean_header()
    >>> svg.set_title("Logo")
    >>> markup = svg.render()
"""

from svg_header.api import apply_operations, load, load_string, process
from svg_header.config import Config
from svg_header.exceptions import (
    ConfigError,
    NotSVGError,
    SaveError,
    SVGHeaderError,
    SVGNotFoundError,
    SVGParseError,
)
from svg_header.svg.model import SVGHeader

__version__ = "0.1.0"

__all__ = [
    # Main API
    "SVGHeader",
    "load",
    "load_string",
    "process",
    "apply_operations",
    "Config",
    # Exceptions
    "SVGHeaderError",
    "SVGNotFoundError",
    "NotSVGError",
    "SVGParseError",
    "SaveError",
    "ConfigError",
    # Metadata
    "__version__",
]

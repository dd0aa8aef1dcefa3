"""SVG parsing and rendering for svg-header.

This subpackage provides:
- Safe SVG parsing with XXE protection (defusedxml)
- The SVGHeader root-element model
- Inner-content extraction strategies
"""

from svg_header.svg.content import (
    CONTENT_MODES,
    anchored_inner_content,
    extract_inner_content,
    legacy_inner_content,
)
from svg_header.svg.model import SVGHeader

__all__ = [
    "SVGHeader",
    "CONTENT_MODES",
    "extract_inner_content",
    "legacy_inner_content",
    "anchored_inner_content",
]

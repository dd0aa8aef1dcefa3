"""Inner-content extraction for SVG markup.

The inner content is the raw markup between the root start tag and the
root end tag, kept as an opaque string. Two strategies are provided:

- legacy: strip every ``</svg>`` (any case) and keep everything after
  the first ``>``. An XML declaration or comment before the root moves
  that ``>`` into the prolog, and nested ``<svg>`` elements lose their
  end tags. Kept for byte-for-byte compatibility.
- anchored: find the root start tag itself and cut at the last root
  end tag only.
"""

from __future__ import annotations

import re

CONTENT_MODES = ("legacy", "anchored")

_CLOSE_TAG_RE = re.compile(r"</svg>", re.IGNORECASE)

# Optional BOM, XML declaration, then comments, DOCTYPE and PIs.
PROLOG_PATTERN = r"""(?:\ufeff)?\s*
    (?:<\?xml[^>]*\?>\s*)?
    (?:(?:<!--(?:(?!-->).)*-->
        |<!DOCTYPE[^\[>]*(?:\[.*?\])?\s*>
        |<\?(?:(?!\?>).)*\?>)\s*)*"""

# Root start tag right after the prolog, quote-aware so ">" inside
# attribute values is fine.
_ROOT_START_RE = re.compile(
    r"\A" + PROLOG_PATTERN
    + r"""<(?:[A-Za-z_][\w.-]*:)?svg
        (?:\s+[^\s=/>]+\s*=\s*(?:"[^"]*"|'[^']*'))*
        \s*(/?)>""",
    re.VERBOSE | re.DOTALL,
)
_ROOT_END_RE = re.compile(r"</(?:[A-Za-z_][\w.-]*:)?svg\s*>\Z")
# Whitespace, comments and PIs allowed after the root element.
_TRAILING_MISC_RE = re.compile(
    r"(?:\s|<!--(?:(?!-->).)*-->|<\?(?:(?!\?>).)*\?>)*\Z",
    re.DOTALL,
)


def legacy_inner_content(markup: str) -> str:
    """Return inner content using the blunt strip-and-cut rule."""
    stripped = _CLOSE_TAG_RE.sub("", markup)
    return stripped[stripped.find(">") + 1 :]


def anchored_inner_content(markup: str) -> str:
    """Return the markup between the root start tag and its end tag.

    The start tag must follow the prolog directly and the end tag may only
    be followed by whitespace, comments or processing instructions, so
    ``<svg`` text inside those never moves the cut.

    Falls back to the legacy rule if the root start tag cannot be located,
    which only happens for markup the XML parser would reject anyway.
    """
    start = _ROOT_START_RE.match(markup)
    if start is None:
        return legacy_inner_content(markup)
    if start.group(1):
        # self-closing root
        return ""

    body = markup[start.end() :]
    body = body[: _TRAILING_MISC_RE.search(body).start()]
    end = _ROOT_END_RE.search(body)
    if end is None:
        return body
    return body[: end.start()]


def extract_inner_content(markup: str, mode: str = "legacy") -> str:
    """Dispatch to the extraction strategy named by mode."""
    if mode == "legacy":
        return legacy_inner_content(markup)
    if mode == "anchored":
        return anchored_inner_content(markup)
    raise ValueError(
        f"Unknown content mode: {mode!r} (expected one of {', '.join(CONTENT_MODES)})"
    )

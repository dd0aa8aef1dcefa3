"""In-memory model of an SVG root element.

SVGHeader keeps three small maps built once from the parsed markup:

- attributes: the root element's attributes, in document order
- tags: direct child local name -> direct text, plus the virtual
  ``title`` and ``a`` tags set by set_title() / set_link()
- tag_attributes: one flat map shared by every child tag

The markup nested inside the root is kept verbatim as ``content`` and
re-emitted by render(). Nothing below the first level of children is
modelled.
"""

from __future__ import annotations

import io
import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING

import defusedxml
import defusedxml.ElementTree as ET

from svg_header.exceptions import SVGParseError
from svg_header.svg.content import extract_inner_content

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from rich.console import Console

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
XML_NS = "http://www.w3.org/XML/1998/namespace"

HEX_COLOR_RE = re.compile(r"#([0-9a-f]{3}){1,2}", re.IGNORECASE)


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[1] if tag.startswith("{") else tag


def _direct_text(elem: Element) -> str:
    """Text owned by elem itself: leading text plus the tails of its children."""
    parts = [elem.text or ""]
    parts.extend(child.tail or "" for child in elem)
    return "".join(parts)


class SVGHeader:
    """Parse, adjust and re-render the root of an SVG document.

    Example:
        >>> svg = SVGHeader('<svg viewBox="0 0 10 10"><rect/></svg>')
        >>> svg.add_class("icon")
        >>> svg.render()
        '<svg viewBox="0 0 10 10" class="icon" xmlns="http://www.w3.org/2000/svg"><rect/></svg>'
    """

    def __init__(self, markup: str, *, content_mode: str = "legacy") -> None:
        """Build the model from raw SVG markup.

        Args:
            markup: Complete SVG document text.
            content_mode: "legacy" or "anchored", see svg_header.svg.content.

        Raises:
            SVGParseError: If the markup is not well-formed XML or uses
                constructs rejected by defusedxml (entity expansion etc).
            ValueError: If content_mode is unknown.
        """
        root, declared, prefixes = self._parse(markup)
        content = extract_inner_content(markup, content_mode)

        attributes: dict[str, str] = {}
        for prefix, uri in declared.items():
            if prefix:
                attributes[f"xmlns:{prefix}"] = uri
        for key, value in root.attrib.items():
            attributes[self._qualify(key, prefixes)] = str(value)

        tags: dict[str, str] = {}
        flat: dict[str, str] = {}
        scoped: dict[str, dict[str, str]] = {}
        for child in root:
            if not isinstance(child.tag, str):
                continue
            name = _local_name(child.tag)
            tags[name] = _direct_text(child)
            for key, value in child.attrib.items():
                qualified = self._qualify(key, prefixes)
                flat[qualified] = str(value)
                scoped.setdefault(name, {})[qualified] = str(value)

        self._attributes = attributes
        self._tags = tags
        self._tag_attributes = flat
        self._scoped_tag_attributes = scoped
        self._content = content

        logger.debug(
            "Parsed SVG: %d root attributes, %d child tags, %d chars of content",
            len(attributes),
            len(tags),
            len(content),
        )

    @classmethod
    def from_file(cls, path: str | Path, *, content_mode: str = "legacy") -> SVGHeader:
        """Validate an SVG file on disk and build a model from it.

        Raises:
            SVGNotFoundError: If the path does not exist.
            NotSVGError: If the file is not detected as SVG.
            SVGParseError: If the file is not well-formed XML.
        """
        from svg_header.files import read_raw

        return cls(read_raw(path), content_mode=content_mode)

    @staticmethod
    def _parse(markup: str) -> tuple[Element, dict[str, str], dict[str, str]]:
        """Parse markup and collect namespace declarations.

        Returns:
            (root, declared, prefixes) where declared maps prefix -> uri for
            the root's own declarations, in source order, and prefixes maps
            uri -> first prefix seen anywhere, for qualifying names.
        """
        declared: dict[str, str] = {}
        prefixes: dict[str, str] = {XML_NS: "xml"}
        try:
            events = ET.iterparse(io.StringIO(markup), events=("start-ns", "start"))
            seen_root = False
            for event, item in events:
                if event == "start":
                    seen_root = True
                    continue
                prefix, uri = item
                prefixes.setdefault(uri, prefix)
                if not seen_root:
                    declared[prefix] = uri
            root = events.root
        except ET.ParseError as e:
            line, column = getattr(e, "position", (None, None))
            raise SVGParseError(f"Failed to parse SVG: {e}", line, column) from e
        except defusedxml.DefusedXmlException as e:
            raise SVGParseError(
                "Refused to parse SVG: entity and external references are "
                f"disabled for security, not a syntax error ({e})"
            ) from e

        if root is None:
            raise SVGParseError("Failed to parse SVG: no root element")
        return root, declared, prefixes

    @staticmethod
    def _qualify(key: str, prefixes: dict[str, str]) -> str:
        if not key.startswith("{"):
            return key
        uri, local = key[1:].split("}", 1)
        prefix = prefixes.get(uri)
        return f"{prefix}:{local}" if prefix else local

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def attributes(self) -> dict[str, str]:
        """Copy of the root attributes."""
        return dict(self._attributes)

    @property
    def tags(self) -> dict[str, str]:
        """Copy of the child tag bodies, virtual tags included."""
        return dict(self._tags)

    @property
    def tag_attributes(self) -> dict[str, str]:
        """Copy of the flat child-tag attribute map."""
        return dict(self._tag_attributes)

    @property
    def content(self) -> str:
        return self._content

    def get_attribute(self, name: str | None = None) -> dict[str, str] | str | None:
        """Return all root attributes, or one value (None if unset)."""
        if name is None:
            return dict(self._attributes)
        return self._attributes.get(name)

    def get_tag(self, name: str | None = None) -> dict[str, str] | str | None:
        if name is None:
            return dict(self._tags)
        return self._tags.get(name)

    def get_tag_attribute(self, name: str | None = None) -> dict[str, str] | str | None:
        if name is None:
            return dict(self._tag_attributes)
        return self._tag_attributes.get(name)

    def get_scoped_tag_attributes(self, tag: str) -> dict[str, str]:
        """Attributes written for one tag only, without cross-tag collisions."""
        return dict(self._scoped_tag_attributes.get(tag, {}))

    # ------------------------------------------------------------------
    # Root attributes
    # ------------------------------------------------------------------

    def set_attribute(self, name: str, value: str) -> None:
        self._attributes[name] = str(value)

    def remove_attribute(self, name: str) -> None:
        self._attributes.pop(name, None)

    def clean_header(self) -> None:
        """Drop every root attribute except viewBox."""
        self._attributes = {k: v for k, v in self._attributes.items() if k == "viewBox"}

    def set_class(self, cls: str) -> None:
        self.set_attribute("class", cls)

    def add_class(self, cls: str) -> None:
        """Append a class name. Duplicates are not filtered."""
        existing = self._attributes.get("class", "")
        self.set_attribute("class", f"{existing} {cls}".strip())

    def set_id(self, id_: str) -> None:
        self.set_attribute("id", id_)

    def set_color(self, color: str) -> None:
        """Set fill, but only for #RGB or #RRGGBB values."""
        if HEX_COLOR_RE.fullmatch(color):
            self.set_attribute("fill", color)
        else:
            logger.debug("Ignoring non-hex color %r", color)

    def resize(self, width: str, height: str) -> None:
        self.set_attribute("width", width)
        self.set_attribute("height", height)

    # ------------------------------------------------------------------
    # Virtual tags
    # ------------------------------------------------------------------

    def _set_tag_attribute(self, tag: str, name: str, value: str) -> None:
        # The flat map is what render() reads; the scoped map mirrors it per tag.
        self._tag_attributes[name] = value
        self._scoped_tag_attributes.setdefault(tag, {})[name] = value

    def set_title(self, title: str) -> None:
        self._tags["title"] = title

    def set_link(self, text: str, href: str, cls: str | None = None) -> None:
        """Wrap the rendered SVG in an anchor showing text before the image.

        Args:
            text: Link text, rendered inside a <span> ahead of the <svg>.
            href: Link target.
            cls: Class for the <span>. Left untouched when None.
        """
        self._tags["a"] = text
        self._set_tag_attribute("a", "href", href)
        if cls is not None:
            self._set_tag_attribute("a", "class", cls)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def render(self) -> str:
        """Serialize the model back to SVG markup.

        Values are inserted as stored, without escaping.
        """
        parts: list[str] = []
        linked = "a" in self._tags

        if linked:
            href = self._tag_attributes.get("href", "#")
            span_class = self._tag_attributes.get("class", "")
            parts.append(
                f'<a href="{href}"><span class="{span_class}">{self._tags["a"]}</span>'
            )

        parts.append("<svg")
        for key, value in self._attributes.items():
            parts.append(f' {key}="{value}"')
        parts.append(f' xmlns="{SVG_NS}">')

        if "title" in self._tags:
            parts.append(f"<title>{self._tags['title']}</title>")

        parts.append(self._content)
        parts.append("</svg>")

        if linked:
            parts.append("</a>")

        return "".join(parts)

    def __str__(self) -> str:
        return self.render()

    def save(
        self, directory: str | Path, *, strict: bool = False, prefix: str = "svg_"
    ) -> Path | None:
        """Render and write to a new file in directory.

        Returns:
            The written path, or None when the directory is not writable
            and strict is False.
        """
        from svg_header.files import save_svg

        return save_svg(directory, self.render(), prefix=prefix, strict=strict)

    def debug(self, console: Console | None = None) -> None:
        """Print the three model maps."""
        from svg_header.debug import debug_dump

        debug_dump(self._attributes, self._tags, self._tag_attributes, console=console)

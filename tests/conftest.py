"""Pytest configuration and shared fixtures for svg-header tests."""

from pathlib import Path

import pytest

SVG_NS = "http://www.w3.org/2000/svg"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep user config files and env overrides out of every test."""
    for var in ("SVG_HEADER_CONFIG", "SVG_HEADER_LOG_LEVEL", "SVG_HEADER_CONTENT_MODE"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def basic_svg_content() -> str:
    """Return a one-line SVG with a class, a viewBox and two shapes."""
    return (
        f'<svg xmlns="{SVG_NS}" width="200" height="100" viewBox="0 0 200 100" class="bar">'
        '<rect x="10" y="10" width="80" height="80" fill="blue"/>'
        '<circle cx="50" cy="50" r="30" fill="red"/>'
        "</svg>"
    )


@pytest.fixture
def basic_inner_content() -> str:
    """Return the inner markup of basic_svg_content."""
    return (
        '<rect x="10" y="10" width="80" height="80" fill="blue"/>'
        '<circle cx="50" cy="50" r="30" fill="red"/>'
    )


@pytest.fixture
def prolog_svg_content() -> str:
    """Return SVG with an XML declaration before the root."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<svg xmlns="{SVG_NS}" width="10" height="10"><rect/></svg>'
    )


@pytest.fixture
def xlink_svg_content() -> str:
    """Return SVG declaring the xlink prefix on the root."""
    return (
        f'<svg xmlns="{SVG_NS}" xmlns:xlink="http://www.w3.org/1999/xlink" '
        'width="24" xml:space="preserve">'
        '<defs><path id="p" d="M0 0h1"/></defs>'
        '<use xlink:href="#p"/>'
        "</svg>"
    )


@pytest.fixture
def malformed_svg_content() -> str:
    """Return malformed SVG for error testing."""
    return f"""<svg xmlns="{SVG_NS}">
  <text x="10" y="50">Unclosed text
</svg>"""


@pytest.fixture
def temp_svg(tmp_path: Path, basic_svg_content: str) -> Path:
    """Write basic_svg_content to a temporary .svg file."""
    svg_path = tmp_path / "test.svg"
    svg_path.write_text(basic_svg_content, encoding="utf-8")
    return svg_path


@pytest.fixture
def temp_text_file(tmp_path: Path) -> Path:
    """Create a plain text file that is not an SVG."""
    path = tmp_path / "notes.txt"
    path.write_text("just some notes\n", encoding="utf-8")
    return path

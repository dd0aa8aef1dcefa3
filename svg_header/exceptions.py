"""Exception hierarchy for svg-header.

All errors raised by the package derive from SVGHeaderError, so callers
running many documents (a web service, a batch job) can catch one type.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class SVGHeaderError(Exception):
    """Base class for all svg-header errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        extra = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({extra})"


class SVGNotFoundError(SVGHeaderError):
    """Raised when a source path does not exist or is not a regular file."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(f"Resource not found: {path}")
        self.path = Path(path)


class NotSVGError(SVGHeaderError):
    """Raised when a source file is not detected as an SVG document."""

    def __init__(self, path: str | Path, media_type: str) -> None:
        super().__init__(
            f"Not an SVG file: {path}", details={"media_type": media_type}
        )
        self.path = Path(path)
        self.media_type = media_type


class SVGParseError(SVGHeaderError):
    """Raised when markup is not well-formed XML."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        details: dict[str, Any] = {}
        if line is not None:
            details["line"] = line
        if column is not None:
            details["column"] = column
        super().__init__(message, details=details)
        self.line = line
        self.column = column


class SaveError(SVGHeaderError):
    """Raised by strict saves when the target directory cannot be written."""

    def __init__(self, directory: str | Path, reason: str) -> None:
        super().__init__(
            f"Cannot save SVG to {directory}", details={"reason": reason}
        )
        self.directory = Path(directory)
        self.reason = reason


class ConfigError(SVGHeaderError):
    """Raised when a configuration file or value is invalid."""

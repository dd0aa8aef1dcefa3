"""File helpers: source validation, raw reads and saving rendered SVG."""

from __future__ import annotations

import logging
import mimetypes
import os
import re
import time
from pathlib import Path

from svg_header.exceptions import NotSVGError, SaveError, SVGNotFoundError
from svg_header.svg.content import PROLOG_PATTERN

logger = logging.getLogger(__name__)

SVG_MEDIA_TYPE = "image/svg+xml"
SNIFF_BYTES = 4096

# Prolog, then the svg root.
_SVG_SNIFF_RE = re.compile(
    r"\A" + PROLOG_PATTERN + r"<(?:[A-Za-z_][\w.-]*:)?svg[\s>/]",
    re.VERBOSE | re.DOTALL | re.IGNORECASE,
)


def detect_media_type(path: str | Path) -> str:
    """Guess the media type of a file, looking at its content first.

    Args:
        path: File to inspect.

    Returns:
        "image/svg+xml" for SVG content, otherwise the extension-based
        guess, or "application/octet-stream".
    """
    path = Path(path)
    with open(path, "rb") as f:
        head = f.read(SNIFF_BYTES)

    text = head.decode("utf-8", errors="ignore")
    if _SVG_SNIFF_RE.search(text):
        return SVG_MEDIA_TYPE

    guessed, _encoding = mimetypes.guess_type(path.name)
    return guessed or "application/octet-stream"


def verify_source(path: str | Path) -> Path:
    """Check that path is an existing SVG file.

    Raises:
        SVGNotFoundError: If path does not exist or is not a file.
        NotSVGError: If the detected media type is not SVG.
    """
    path = Path(path)
    if not path.is_file():
        raise SVGNotFoundError(path)

    media_type = detect_media_type(path)
    if "image/svg" not in media_type:
        raise NotSVGError(path, media_type)
    return path


def read_raw(path: str | Path) -> str:
    """Validate path and return its content as text."""
    path = verify_source(path)
    return path.read_text(encoding="utf-8-sig")


def _write_new(directory: Path, prefix: str, markup: str) -> Path:
    """Create a fresh timestamped file, never replacing an existing one."""
    stamp = int(time.time())
    target = directory / f"{prefix}{stamp}.svg"
    counter = 1
    while True:
        try:
            with open(target, "x", encoding="utf-8") as f:
                f.write(markup)
        except FileExistsError:
            target = directory / f"{prefix}{stamp}_{counter}.svg"
            counter += 1
            continue
        return target


def save_svg(
    directory: str | Path,
    markup: str,
    *,
    prefix: str = "svg_",
    strict: bool = False,
) -> Path | None:
    """Write markup to a new timestamped file inside directory.

    A missing or read-only directory is not an error unless strict is set:
    the call just returns None.

    Args:
        directory: Existing directory to write into.
        markup: Rendered SVG.
        prefix: Filename prefix, followed by the unix time.
        strict: Raise SaveError instead of returning None.

    Returns:
        Path of the written file, or None if nothing was written.
    """
    directory = Path(directory)
    if not directory.is_dir():
        reason = "not a directory"
    elif not os.access(directory, os.W_OK):
        reason = "directory is not writable"
    else:
        try:
            target = _write_new(directory, prefix, markup)
        except OSError as e:
            if strict:
                raise SaveError(directory, str(e)) from e
            logger.warning("Failed to write into %s: %s", directory, e)
            return None
        logger.info("Success: SVG saved to %s", target)
        return target

    if strict:
        raise SaveError(directory, reason)
    logger.debug("Skipping save to %s: %s", directory, reason)
    return None

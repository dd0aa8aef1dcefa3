"""Logging setup for svg-header.

Library modules only create loggers; handlers are installed by the CLI
(or by an application that calls setup_logging itself).
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "svg_header"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def setup_logging(level: str = "WARNING", console: Console | None = None) -> logging.Logger:
    """Attach a RichHandler to the package logger.

    Calling this again replaces the handler installed by the previous call,
    so the level can be changed without duplicating output.

    Args:
        level: Level name, case-insensitive.
        console: Console to log to. Defaults to a stderr console.

    Returns:
        The configured package logger.

    Raises:
        ValueError: If level is not a known level name.
    """
    level_name = level.upper()
    if level_name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_svg_header_handler", False):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        log_time_format="[%X]",
    )
    handler._svg_header_handler = True  # type: ignore[attr-defined]
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger.addHandler(handler)
    logger.setLevel(level_name)
    logger.propagate = False
    return logger

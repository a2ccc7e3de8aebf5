# SPDX-License-Identifier: Apache-2.0
"""
Logging configuration for bytesize.

bytesize only emits DEBUG records (formatting sentinels, parse failures).
Applications normally configure logging themselves; this module is a
convenience for scripts and tests that want to see those records.
"""

import logging
import sys
from typing import Optional

# Custom level below DEBUG
TRACE = 5


class ColoredFormatter(logging.Formatter):
    """
    Colored log formatter for terminal output.

    Uses ANSI color codes to highlight different log levels.
    """

    COLORS = {
        TRACE: "\033[90m",             # Gray
        logging.DEBUG: "\033[36m",     # Cyan
        logging.INFO: "\033[32m",      # Green
        logging.WARNING: "\033[33m",   # Yellow
        logging.ERROR: "\033[31m",     # Red
        logging.CRITICAL: "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        """Format a colored copy of the record; the original stays plain."""
        colored = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(colored.levelno, "")
        colored.levelname = f"{color}{colored.levelname}{self.RESET}"
        return super().format(colored)


def resolve_level(level: str) -> int:
    """Map a level name (including TRACE) to its numeric value."""
    level_name = level.upper()
    if level_name == "TRACE":
        return TRACE
    return getattr(logging, level_name, logging.INFO)


def configure_logging(
    level: str = "WARNING",
    colored: bool = True,
    stream: Optional[object] = None,
) -> logging.Handler:
    """
    Attach a stream handler to the "bytesize" logger.

    Args:
        level: Log level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL).
        colored: Whether to use colored output when the stream is a TTY.
        stream: Output stream, defaults to stderr.

    Returns:
        The installed handler.
    """
    log_level = resolve_level(level)
    if stream is None:
        stream = sys.stderr

    format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    handler = logging.StreamHandler(stream)
    handler.setLevel(log_level)

    isatty = getattr(stream, "isatty", None)
    if colored and isatty is not None and isatty():
        formatter = ColoredFormatter(format_str)
    else:
        formatter = logging.Formatter(format_str)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger("bytesize")
    package_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    package_logger.handlers.clear()
    package_logger.addHandler(handler)

    return handler


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the bytesize namespace.

    Args:
        name: Logger name (usually __name__).

    Returns:
        Logger instance.
    """
    if name != "bytesize" and not name.startswith("bytesize."):
        name = f"bytesize.{name}"
    return logging.getLogger(name)

"""
Utility functions for pdbelements.

This module provides:
- Logging configuration
- Table formatting for command-line output
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable, Sequence


# =============================================================================
# Logging
# =============================================================================


def setup_logging(
    level: int | str = logging.INFO,
    format_string: str | None = None,
    log_file: str | Path | None = None,
    log_file_level: int | str | None = None,
    name: str | None = "pdbelements",
    propagate: bool = True,
) -> logging.Logger:
    """Configure logging with console and optional file output.

    Console output goes to stderr, so diagnostics about unknown elements
    never mix with the tables printed on stdout.

    Parameters
    ----------
    level : int or str
        Logging level for console output.
    format_string : str, optional
        Custom format string. If None, uses a default format.
    log_file : str or Path, optional
        Path to log file for file output.
    log_file_level : int or str, optional
        Logging level for file output. Defaults to same as console.
    name : str, optional
        Logger name. If None, configures the root logger.
    propagate : bool
        Whether to propagate messages to parent loggers.

    Returns
    -------
    logging.Logger
        Configured logger instance.

    Examples
    --------
    >>> logger = setup_logging(level="DEBUG")
    >>> logger = setup_logging(log_file="elements.log", log_file_level=logging.WARNING)
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())
    if isinstance(log_file_level, str):
        log_file_level = getattr(logging, log_file_level.upper())
    elif log_file_level is None:
        log_file_level = level

    if format_string is None:
        format_string = (
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
        )

    log = logging.getLogger(name)
    log.setLevel(min(level, log_file_level) if log_file else level)
    log.propagate = propagate

    # Remove existing handlers to avoid duplicates
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(format_string, datefmt="%Y-%m-%d %H:%M:%S")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    log.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_file_level)
        file_handler.setFormatter(formatter)
        log.addHandler(file_handler)

    return log


# =============================================================================
# Formatting
# =============================================================================


def format_table(header: Sequence[str], rows: Iterable[Sequence[object]]) -> str:
    """Render rows as left-aligned, space-separated columns."""
    text_rows = [[str(cell) for cell in row] for row in rows]
    widths = [len(h) for h in header]
    for row in text_rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    lines = ["  ".join(h.ljust(w) for h, w in zip(header, widths)).rstrip()]
    for row in text_rows:
        lines.append("  ".join(c.ljust(w) for c, w in zip(row, widths)).rstrip())
    return "\n".join(lines)


__all__ = [
    "format_table",
    "setup_logging",
]

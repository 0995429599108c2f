"""
Logging configuration — central setup for the CLI entrypoint.

Called once at startup by main.py.  Every module that does
``logger = logging.getLogger(__name__)`` inherits this config.

Console levels are resolved in precedence order:
    CLI flag  >  HOSTPREP_LOG_LEVEL env var  >  WARNING (default)

The dated log file is append-only and always carries full timestamps.
It is skipped on dry runs and when the log directory isn't writable.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import date
from pathlib import Path

# ── Format strings ──────────────────────────────────────────────

# WARNING and above: bare messages
_FMT_MINIMAL = "%(message)s"

# INFO: time and logger name
_FMT_VERBOSE = "%(asctime)s [%(name)s] %(message)s"
_DATEFMT_VERBOSE = "%H:%M:%S"

# DEBUG: adds level and line number
_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_DATEFMT_DEBUG = "%H:%M:%S"

# Log file: full date, level and logger
_FMT_FILE = "%(asctime)s %(levelname)-5s %(name)s — %(message)s"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"

LOG_FILE_PREFIX = "hostprep"

# Records flagged with this attribute are already echoed by the CLI.
PROGRESS_ATTR = "progress"


class _SkipProgress(logging.Filter):
    """Keep progress records off the console; the file handler still gets them."""

    def filter(self, record: logging.LogRecord) -> bool:
        return not getattr(record, PROGRESS_ATTR, False)


def setup_logging(
    level: str = "WARNING",
    log_file: str | Path | None = None,
    log_file_level: str | None = None,
) -> None:
    """Configure Python logging for the entire process.

    Args:
        level: Console log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to an append-only log file.
        log_file_level: Optional separate level for the log file.
            Defaults to the same as ``level``.
    """
    numeric_level = _parse_level(level)

    # ── Console handler (stderr) ────────────────────────────────
    if numeric_level <= logging.DEBUG:
        fmt, datefmt = _FMT_DEBUG, _DATEFMT_DEBUG
    elif numeric_level <= logging.INFO:
        fmt, datefmt = _FMT_VERBOSE, _DATEFMT_VERBOSE
    else:
        fmt, datefmt = _FMT_MINIMAL, None

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(numeric_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    console.addFilter(_SkipProgress())

    # ── Root logger ─────────────────────────────────────────────
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.addHandler(console)

    # Effective root level = minimum of console and file levels
    effective_level = numeric_level

    # ── File handler (optional) ─────────────────────────────────
    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else numeric_level
        effective_level = min(effective_level, file_level)

        fh = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_FILE, datefmt=_DATEFMT_FILE))
        root.addHandler(fh)

    root.setLevel(effective_level)

    # Don't propagate exceptions from logging itself
    logging.raiseExceptions = False


def dated_log_path(log_dir: str | Path, day: date | None = None) -> Path:
    """Log file path for ``day`` (default: today) inside ``log_dir``."""
    day = day or date.today()
    return Path(log_dir) / f"{LOG_FILE_PREFIX}-{day.isoformat()}.log"


def resolve_log_file(log_dir: str | Path, dry_run: bool = False, day: date | None = None) -> Path | None:
    """Dated log file to write, or None when file logging should be skipped.

    Skipped on dry runs and when the directory is missing or not writable.
    An existing file that isn't writable is skipped too.
    """
    if dry_run:
        return None
    directory = Path(log_dir)
    if not directory.is_dir() or not os.access(directory, os.W_OK):
        return None
    path = dated_log_path(directory, day)
    if path.exists() and not os.access(path, os.W_OK):
        return None
    return path


def _parse_level(level: str | None) -> int:
    """Convert a level name string to its numeric constant."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric

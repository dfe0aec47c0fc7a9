"""arxiv-mcp logging utilities.

All modules log through the one package logger `log`. Console output goes to
stderr so the stdio transport keeps stdout for protocol frames.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Final

LOGGER_NAME: Final = "ArxivMCP"

_LEVEL_ABBREV: Final[dict[int, str]] = {
    logging.DEBUG: "DEBG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "ERRO",
}


class _AbbrevLevelFormatter(logging.Formatter):
    """Render `mm-dd HH:MM:SS [LVL] message` with a four-letter level."""

    def __init__(self) -> None:
        super().__init__(fmt="%(asctime)s [%(levelabbr)s] %(message)s", datefmt="%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - record is stdlib name
        record.levelabbr = _LEVEL_ABBREV.get(record.levelno, record.levelname[:4])
        return super().format(record)


log = logging.getLogger(LOGGER_NAME)


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_AbbrevLevelFormatter())
    return handler


def _file_handler(log_dir: str, action: str) -> tuple[logging.Handler, Path]:
    # One file per invocation: <log_dir>/<action>/<action>_<mmddHHMMSS>.log
    action_dir = Path(log_dir or "log") / action
    action_dir.mkdir(parents=True, exist_ok=True)
    path = action_dir / f"{action}_{datetime.now().strftime('%m%d%H%M%S')}.log"
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(_AbbrevLevelFormatter())
    return handler, path


def configure_logging(
    *,
    level: str = "INFO",
    action: str | None = None,
    log_to_file: bool = False,
    log_dir: str = "log",
) -> Path | None:
    """(Re)configure the package logger.

    Args:
        level: Console level name; unknown names fall back to INFO.
        action: CLI command name; required for file logging.
        log_to_file: Mirror everything at DEBUG into a per-command file.
        log_dir: Root directory for log files.

    Returns:
        Path of the log file, or None when logging to the console only.
    """
    console_level = getattr(logging, (level or "INFO").upper(), logging.INFO)

    log.handlers.clear()
    log.addHandler(_console_handler(console_level))
    log.propagate = False

    if not (log_to_file and action):
        log.setLevel(console_level)
        return None

    handler, path = _file_handler(log_dir, action)
    log.addHandler(handler)
    log.setLevel(logging.DEBUG)
    return path

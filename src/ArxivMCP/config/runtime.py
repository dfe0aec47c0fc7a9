"""Logging configuration (the `log` section)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from ArxivMCP.config.common import read_section, require


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Validated logging settings.

    Attributes:
        level: Console level name, upper-cased (DEBUG, INFO, ...).
        to_file: Also write a per-command DEBUG log under `dir`.
        dir: Root directory for per-command log files.
    """

    level: str
    to_file: bool
    dir: str


def load_runtime(raw: Mapping[str, Any]) -> RuntimeConfig:
    section = read_section(raw, "log")
    return RuntimeConfig(
        level=require(section, "log", "level", str).strip().upper(),
        to_file=require(section, "log", "to_file", bool, False),
        dir=require(section, "log", "dir", str, "log"),
    )


def check_runtime(config: RuntimeConfig) -> None:
    """Reject unknown level names and an empty log dir when file logging is on."""
    if not isinstance(logging.getLevelName(config.level), int) or config.level == "NOTSET":
        raise ValueError(f"log.level is not a logging level: {config.level!r}")
    if config.to_file and not config.dir.strip():
        raise ValueError("log.dir must not be empty when log.to_file is true")

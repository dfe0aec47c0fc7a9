from __future__ import annotations

"""arXiv API client configuration."""

from dataclasses import dataclass
from typing import Any, Mapping

from ArxivMCP.config.common import read_section, require


@dataclass(frozen=True, slots=True)
class ArxivConfig:
    """arXiv API settings."""

    base_url: str
    timeout: float
    keep_version: bool


def load_arxiv(raw: Mapping[str, Any]) -> ArxivConfig:
    """Load the `arxiv` section."""
    section = read_section(raw, "arxiv")
    return ArxivConfig(
        base_url=require(section, "arxiv", "base_url", str).strip(),
        timeout=require(section, "arxiv", "timeout", float),
        keep_version=require(section, "arxiv", "keep_version", bool, True),
    )


def check_arxiv(config: ArxivConfig) -> None:
    """Validate arXiv domain constraints."""
    if not config.base_url.startswith(("http://", "https://")):
        raise ValueError("arxiv.base_url must be an http(s) URL")
    if config.timeout <= 0:
        raise ValueError("arxiv.timeout must be positive")

from __future__ import annotations

"""Public configuration API for arxiv-mcp."""

from ArxivMCP.config.app import (
    AppConfig,
    apply_env_overrides,
    load_config,
    load_config_with_defaults,
    parse_config_dict,
)
from ArxivMCP.config.arxiv import ArxivConfig
from ArxivMCP.config.runtime import RuntimeConfig
from ArxivMCP.config.server import ServerConfig

__all__ = [
    "RuntimeConfig",
    "ServerConfig",
    "ArxivConfig",
    "AppConfig",
    "apply_env_overrides",
    "load_config",
    "load_config_with_defaults",
    "parse_config_dict",
]

"""Server domain configuration (MCP transport and listener)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ArxivMCP.config.common import read_section, require

ALLOWED_TRANSPORTS = ("streamable-http", "sse", "stdio")


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Validated MCP server settings.

    Attributes:
        name: Server implementation name reported to clients.
        host: Listener bind address for HTTP transports.
        port: Listener port for HTTP transports.
        transport: One of streamable-http, sse, stdio.
        stateless_http: Serve each streamable HTTP request without a session.
    """

    name: str
    host: str
    port: int
    transport: str
    stateless_http: bool


def load_server(raw: Mapping[str, Any]) -> ServerConfig:
    """Load the `server` section.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing.
    """
    section = read_section(raw, "server")
    return ServerConfig(
        name=require(section, "server", "name", str).strip(),
        host=require(section, "server", "host", str).strip(),
        port=require(section, "server", "port", int),
        transport=require(section, "server", "transport", str).strip().lower(),
        stateless_http=require(section, "server", "stateless_http", bool, False),
    )


def check_server(config: ServerConfig) -> None:
    """Validate server domain constraints.

    Raises:
        ValueError: If values violate server constraints.
    """
    if not config.name:
        raise ValueError("server.name must not be empty")
    if not config.host:
        raise ValueError("server.host must not be empty")
    if not 0 < config.port < 65536:
        raise ValueError("server.port must be between 1 and 65535")
    if config.transport not in ALLOWED_TRANSPORTS:
        raise ValueError(f"server.transport must be one of {list(ALLOWED_TRANSPORTS)}")

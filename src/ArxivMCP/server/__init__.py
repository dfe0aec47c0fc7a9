"""MCP server surface: tool, resource and prompt registration."""

from __future__ import annotations

from ArxivMCP.server.app import create_server, run_server

__all__ = ["create_server", "run_server"]

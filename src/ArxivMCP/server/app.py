"""MCP server assembly.

Builds a FastMCP server exposing the `arxiv-search` tool, the category
taxonomy resource and the `recent-category` prompt.
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from ArxivMCP.config import AppConfig
from ArxivMCP.server.prompts import register_category_prompt
from ArxivMCP.server.resources import register_taxonomy_resource
from ArxivMCP.server.tools import register_search_tool
from ArxivMCP.services.search import ArxivSearchService
from ArxivMCP.utils.log import log

SERVER_INSTRUCTIONS = (
    "Search arXiv with the arxiv-search tool using title, author, abstract, subject_category "
    "or all, optionally limited by submitted_since/submitted_before (YYYY-MM-DD) or "
    "submitted_relative (e.g. '7 days'). Read the category-taxonomy resource to find "
    "category tags."
)


def create_server(config: AppConfig, service: ArxivSearchService) -> FastMCP:
    """Create the MCP server and register its tool, resource and prompt.

    Args:
        config: Application configuration (server section is used).
        service: Search service backing the `arxiv-search` tool.

    Returns:
        Configured, not yet running, FastMCP server.
    """
    server = FastMCP(
        config.server.name,
        instructions=SERVER_INSTRUCTIONS,
        host=config.server.host,
        port=config.server.port,
        stateless_http=config.server.stateless_http,
    )
    register_search_tool(server, service)
    register_taxonomy_resource(server)
    register_category_prompt(server)
    return server


def run_server(server: FastMCP, config: AppConfig) -> None:
    """Run `server` on the configured transport until interrupted."""
    transport = config.server.transport
    if transport == "stdio":
        log.info("Serving %s over stdio", config.server.name)
    else:
        log.info(
            "Serving %s over %s on %s:%d",
            config.server.name,
            transport,
            config.server.host,
            config.server.port,
        )
    server.run(transport=transport)

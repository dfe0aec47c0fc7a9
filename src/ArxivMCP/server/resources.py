"""Category taxonomy MCP resource."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from ArxivMCP.taxonomy.loader import taxonomy_text

TAXONOMY_URI = "file://arxiv/taxonomy.json"
TAXONOMY_NAME = "category-taxonomy"
TAXONOMY_TITLE = "Category Taxonomy"
TAXONOMY_DESCRIPTION = (
    "A JSON representation of the arXiv category taxonomy, showing all category tags and their descriptions."
)


def register_taxonomy_resource(server: FastMCP) -> None:
    """Register the read-only taxonomy document on `server`."""

    @server.resource(
        TAXONOMY_URI,
        name=TAXONOMY_NAME,
        title=TAXONOMY_TITLE,
        description=TAXONOMY_DESCRIPTION,
        mime_type="application/json",
    )
    def category_taxonomy() -> str:
        return taxonomy_text()

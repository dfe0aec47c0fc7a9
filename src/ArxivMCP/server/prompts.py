"""Canned MCP prompts."""

from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

RECENT_CATEGORY_NAME = "recent-category"
RECENT_CATEGORY_DESCRIPTION = "Get articles from the last week for a specific category"


def recent_category_prompt(category: str) -> str:
    """Build the instruction text for the `recent-category` prompt."""
    return (
        f"Find the arXiv category for {category}. "
        "If the category matches a general subject like math or computer science, "
        "get the category for general articles within that field. "
        "Search for 50 articles from the last week in that category. "
        "If none are found, try expanding the time range to the last month, 6 months, or a year. "
        "Display them in a table with columns for title, first author, ID, and PDF URL."
    )


def register_category_prompt(server: FastMCP) -> None:
    """Register `recent-category` on `server`."""

    @server.prompt(name=RECENT_CATEGORY_NAME, description=RECENT_CATEGORY_DESCRIPTION)
    def recent_category(
        category: Annotated[str, Field(description="The category to get articles from")],
    ) -> str:
        return recent_category_prompt(category)

"""Search service layer for arxiv-mcp.

Provides the search service and the factory that wires it to arXiv.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ArxivMCP.services.search import ArxivSearchService, RecordSource

if TYPE_CHECKING:
    from ArxivMCP.config import AppConfig


def create_search_service(config: AppConfig) -> ArxivSearchService:
    """Create a search service backed by the arXiv API.

    Args:
        config: Application configuration containing arXiv settings.

    Returns:
        Configured ArxivSearchService instance.
    """
    from ArxivMCP.sources.arxiv.client import ArxivApiClient
    from ArxivMCP.sources.arxiv.source import ArxivSource

    return ArxivSearchService(
        source=ArxivSource(
            client=ArxivApiClient(base_url=config.arxiv.base_url, timeout=config.arxiv.timeout),
            keep_version=config.arxiv.keep_version,
        )
    )


__all__ = [
    "ArxivSearchService",
    "RecordSource",
    "create_search_service",
]

"""`arxiv-search` MCP tool.

Argument names and boundary patterns follow the published tool schema.
`run_search` holds the blocking tool body so it can be called without a
server; the registered tool runs it in a worker thread.
"""

import asyncio
from typing import Annotated, Any, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from ArxivMCP.core.query import SearchCriteria
from ArxivMCP.renderers.json import render_results
from ArxivMCP.services.search import ArxivSearchService
from ArxivMCP.utils.log import log

SEARCH_TOOL_NAME = "arxiv-search"
SEARCH_TOOL_DESCRIPTION = "Searches for papers on arXiv"

DATE_PATTERN = r"\d{4}-\d{2}-\d{2}"
RELATIVE_DATE_PATTERN = r"[0-9]+ (days|weeks|months|years)"


def run_search(
    service: ArxivSearchService,
    *,
    title: Optional[str] = None,
    author: Optional[str] = None,
    abstract: Optional[str] = None,
    subject_category: Optional[str] = None,
    submitted_since: Optional[str] = None,
    submitted_before: Optional[str] = None,
    submitted_relative: Optional[str] = None,
    all: Optional[str] = None,  # noqa: A002 - published argument name
    id_list: Optional[list[str]] = None,
    max_results: int = 0,
    return_fields: Optional[list[str]] = None,
) -> dict[str, Any]:
    """Execute one search and return the ``{"entries": [...]}`` payload.

    Raises:
        QueryError: Criteria could not be composed.
        UpstreamError: The arXiv call failed.
    """
    criteria = SearchCriteria(
        title=title or "",
        author=author or "",
        abstract=abstract or "",
        subject_category=subject_category or "",
        all=all or "",
        id_list=tuple(id_list or ()),
        submitted_since=submitted_since or "",
        submitted_before=submitted_before or "",
        submitted_relative=submitted_relative or "",
        max_results=max_results or 0,
        return_fields=tuple(return_fields or ()),
    )
    try:
        views = service.search(criteria)
    except Exception as e:  # noqa: BLE001 - tool boundary, re-raised for the MCP error result
        log.error("%s failed: %s", SEARCH_TOOL_NAME, e)
        raise
    return render_results(views)


def register_search_tool(server: FastMCP, service: ArxivSearchService) -> None:
    """Register `arxiv-search` on `server`, bound to `service`."""

    @server.tool(name=SEARCH_TOOL_NAME, description=SEARCH_TOOL_DESCRIPTION)
    async def arxiv_search(
        title: Annotated[Optional[str], Field(description="search within paper titles")] = None,
        author: Annotated[Optional[str], Field(description="search within author names")] = None,
        abstract: Annotated[Optional[str], Field(description="search within abstracts")] = None,
        subject_category: Annotated[
            Optional[str],
            Field(description="subject category, using arXiv category taxonomy"),
        ] = None,
        submitted_since: Annotated[
            Optional[str],
            Field(pattern=DATE_PATTERN, description="date in YYYY-MM-DD"),
        ] = None,
        submitted_before: Annotated[
            Optional[str],
            Field(pattern=DATE_PATTERN, description="date in YYYY-MM-DD"),
        ] = None,
        submitted_relative: Annotated[
            Optional[str],
            Field(
                pattern=RELATIVE_DATE_PATTERN,
                description="relative date in days, weeks, months, or years from today",
            ),
        ] = None,
        all: Annotated[  # noqa: A002 - published argument name
            Optional[str],
            Field(description="search within title, author, abstract, subject"),
        ] = None,
        id_list: Annotated[
            Optional[list[str]],
            Field(
                description="array of arXiv IDs to search within. Can be passed alone to retrieve specific papers",
            ),
        ] = None,
        max: Annotated[int, Field(description="maximum number of results (default 20)")] = 0,  # noqa: A002
        return_fields: Annotated[
            Optional[list[str]],
            Field(description="array of fields to return. Returns all if empty"),
        ] = None,
    ) -> dict[str, Any]:
        return await asyncio.to_thread(
            run_search,
            service,
            title=title,
            author=author,
            abstract=abstract,
            subject_category=subject_category,
            submitted_since=submitted_since,
            submitted_before=submitted_before,
            submitted_relative=submitted_relative,
            all=all,
            id_list=id_list,
            max_results=max,
            return_fields=return_fields,
        )

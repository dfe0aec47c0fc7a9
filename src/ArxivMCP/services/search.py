"""Search service: compose criteria, fetch records, project views."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Protocol, Sequence

from ArxivMCP.core.models import CatalogRecord
from ArxivMCP.core.query import ComposedQuery, SearchCriteria
from ArxivMCP.renderers.mapper import project_records
from ArxivMCP.renderers.view_models import RecordView
from ArxivMCP.sources.arxiv.query import compose_search_query
from ArxivMCP.utils.log import log


class RecordSource(Protocol):
    """Protocol for the external catalog search capability."""

    name: str

    def search(
        self,
        search_query: str,
        *,
        max_results: int,
        sort_by: str,
        sort_order: str,
        id_list: Sequence[str] = (),
    ) -> Sequence[CatalogRecord]:
        """Execute a composed query and return full records."""
        raise NotImplementedError

    def close(self) -> None:
        """Close resources held by source."""
        raise NotImplementedError


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class ArxivSearchService:
    """Application service behind the `arxiv-search` tool.

    Composition and projection are pure; the only I/O is `source.search`.
    Errors from either step propagate unchanged and nothing is retried.
    """

    source: RecordSource
    clock: Callable[[], datetime] = field(default=utc_now)

    def compose(self, criteria: SearchCriteria, *, now: datetime | None = None) -> ComposedQuery:
        """Compose criteria against `now` (defaults to the service clock)."""
        return compose_search_query(criteria, now=now if now is not None else self.clock())

    def search(self, criteria: SearchCriteria) -> list[RecordView]:
        """Run one search request end to end.

        Args:
            criteria: Caller-supplied search criteria.

        Returns:
            One view per upstream record, in upstream order.

        Raises:
            QueryError: Criteria could not be composed; no request is made.
            UpstreamError: The arXiv call failed.
        """
        now = self.clock()
        composed = self.compose(criteria, now=now)
        params = composed.params
        log.debug(
            "Searching %s: query=%r max_results=%d sort=%s/%s",
            getattr(self.source, "name", "unknown"),
            composed.expression,
            params.max_results,
            params.sort_by,
            params.sort_order,
        )
        records = self.source.search(
            composed.expression,
            max_results=params.max_results,
            sort_by=params.sort_by,
            sort_order=params.sort_order,
            id_list=params.id_list,
        )
        log.info("Search completed: source=%s count=%d", getattr(self.source, "name", "unknown"), len(records))
        return project_records(records, criteria.return_fields)

    def close(self) -> None:
        """Close the underlying source."""
        close_func = getattr(self.source, "close", None)
        if callable(close_func):
            close_func()

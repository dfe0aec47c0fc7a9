"""arXiv data source adapter.

Composes HTTP fetching and XML parsing into a `RecordSource` implementation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ArxivMCP.core.models import CatalogRecord
from ArxivMCP.sources.arxiv.client import ArxivApiClient
from ArxivMCP.sources.arxiv.parser import parse_arxiv_feed
from ArxivMCP.utils.log import log


@dataclass(slots=True)
class ArxivSource:
    """`RecordSource` implementation backed by the arXiv API.

    Executes an already-composed `search_query`; query construction happens
    upstream in the search service.
    """

    client: ArxivApiClient
    name: str = "arxiv"
    keep_version: bool = True

    def search(
        self,
        search_query: str,
        *,
        max_results: int,
        sort_by: str,
        sort_order: str,
        id_list: Sequence[str] = (),
    ) -> list[CatalogRecord]:
        """Fetch one page of records from arXiv.

        Args:
            search_query: Composed arXiv `search_query` string.
            max_results: Maximum number of records to return.
            sort_by: arXiv sort field.
            sort_order: arXiv sort order.
            id_list: Optional arXiv ids to restrict the search to.

        Returns:
            Records in the order arXiv returned them.

        Raises:
            UpstreamError: The request failed or the response was unusable.
        """
        xml = self.client.fetch_feed(
            search_query=search_query,
            start=0,
            max_results=max_results,
            sort_by=sort_by,
            sort_order=sort_order,
            id_list=id_list,
        )
        items = list(parse_arxiv_feed(xml, keep_version=self.keep_version))
        log.debug("arXiv page parsed %d entries", len(items))
        return items

    def close(self) -> None:
        self.client.close()

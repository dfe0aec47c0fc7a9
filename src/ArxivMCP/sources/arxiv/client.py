"""arXiv API client.

Calls the arXiv Atom API over HTTP. One request per call: no retry and no
fallback endpoint, so failures surface to the caller as they happen.
"""

from __future__ import annotations

from typing import Optional, Sequence

import requests

from ArxivMCP.core.errors import UpstreamError
from ArxivMCP.utils.log import log

ARXIV_API_URL = "https://export.arxiv.org/api/query"

DEFAULT_TIMEOUT = 30.0

HEADERS = {
    "User-Agent": "arxiv-mcp/0.1",
    "Accept": "application/atom+xml,application/xml;q=0.9,*/*;q=0.8",
}


class ArxivApiClient:
    """Low-level HTTP client for the arXiv Atom API.

    Responsible only for making network requests and returning the raw feed XML.
    Parsing and domain mapping are handled elsewhere.
    """

    def __init__(self, *, base_url: str = ARXIV_API_URL, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._session = requests.Session()

    def close(self) -> None:
        """Close the underlying HTTP session and release pooled connections."""
        self._session.close()

    def __enter__(self) -> ArxivApiClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def fetch_feed(
        self,
        *,
        search_query: str,
        start: int = 0,
        max_results: int = 20,
        sort_by: str = "relevance",
        sort_order: str = "descending",
        id_list: Sequence[str] = (),
        timeout: Optional[float] = None,
    ) -> str:
        """Fetch arXiv Atom feed XML using the official API endpoint.

        Args:
            search_query: arXiv API search_query string (may be empty).
            start: Start offset.
            max_results: Maximum number of results.
            sort_by: Sort field (relevance/lastUpdatedDate/submittedDate).
            sort_order: Sort order (ascending/descending).
            id_list: arXiv ids to restrict the search to.
            timeout: Request timeout in seconds; defaults to the client timeout.

        Returns:
            Atom feed XML text.

        Raises:
            UpstreamError: On network failure or a non-success HTTP status.
        """
        params = {
            "search_query": search_query,
            "start": str(start),
            "max_results": str(max_results),
            "sortBy": sort_by,
            "sortOrder": sort_order,
        }
        if id_list:
            params["id_list"] = ",".join(id_list)

        log.debug(
            "arXiv fetch feed: query=%r start=%s max_results=%s sort_by=%s sort_order=%s id_list=%s",
            search_query,
            start,
            max_results,
            sort_by,
            sort_order,
            list(id_list),
        )
        try:
            resp = self._session.get(
                self.base_url,
                params=params,
                headers=HEADERS,
                timeout=timeout or self.timeout,
            )
            resp.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status = getattr(e.response, "status_code", None)
            raise UpstreamError(f"arXiv API returned HTTP {status}") from e
        except requests.exceptions.RequestException as e:
            raise UpstreamError(f"arXiv API request failed: {e}") from e

        log.debug("arXiv response ok: status=%s bytes=%s", resp.status_code, len(resp.text))
        return resp.text

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

DEFAULT_MAX_RESULTS = 20
SORT_BY_RELEVANCE = "relevance"
SORT_ORDER_DESCENDING = "descending"


@dataclass(frozen=True, slots=True)
class SearchCriteria:
    """Caller-supplied search request; every field is optional.

    Empty strings mean "not set". Free-text values are used verbatim as clause
    values. When `submitted_relative` is set and both absolute bounds are
    empty, the relative window wins; otherwise the absolute bounds are used.

    Attributes:
        title: Text to match in titles.
        author: Text to match in author names.
        abstract: Text to match in abstracts.
        subject_category: arXiv category tag (e.g. "cs.AI").
        all: Text to match across title, author, abstract and category.
        id_list: arXiv ids to fetch; additive with the free-text clauses.
        submitted_since: Lower bound, YYYY-MM-DD.
        submitted_before: Upper bound, YYYY-MM-DD.
        submitted_relative: Window ending now, e.g. "7 days" or "3 months".
        max_results: Result cap; zero or negative means the default (20).
        return_fields: Field names to keep in each result; empty keeps all.
    """

    title: str = ""
    author: str = ""
    abstract: str = ""
    subject_category: str = ""
    all: str = ""
    id_list: Sequence[str] = ()
    submitted_since: str = ""
    submitted_before: str = ""
    submitted_relative: str = ""
    max_results: int = 0
    return_fields: Sequence[str] = ()


@dataclass(frozen=True, slots=True)
class ExecutionParams:
    """Parameters handed to the arXiv source alongside the query string."""

    max_results: int = DEFAULT_MAX_RESULTS
    sort_by: str = SORT_BY_RELEVANCE
    sort_order: str = SORT_ORDER_DESCENDING
    id_list: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ComposedQuery:
    """arXiv `search_query` expression plus its execution parameters.

    An empty expression is valid and means "no field filters".
    """

    expression: str
    params: ExecutionParams

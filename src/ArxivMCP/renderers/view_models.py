"""View models for search results.

`RecordView` is the sparse, per-request projection of a `CatalogRecord`:
every attribute is independently present (set) or absent (None).
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Optional, Sequence

from ArxivMCP.core.models import Author, Category, Link


@dataclass(slots=True)
class RecordView:
    """Record projection built fresh for one response.

    Attributes mirror `CatalogRecord`; None means "not requested".
    """

    id: Optional[str] = None
    title: Optional[str] = None
    published: Optional[datetime] = None
    updated: Optional[datetime] = None
    summary: Optional[str] = None
    authors: Optional[Sequence[Author]] = None
    categories: Optional[Sequence[Category]] = None
    primary_category: Optional[Category] = None
    links: Optional[Sequence[Link]] = None
    comment: Optional[str] = None
    journal_reference: Optional[str] = None
    doi: Optional[str] = None
    abstract_url: Optional[str] = None
    pdf_url: Optional[str] = None

    def present_fields(self) -> tuple[str, ...]:
        """Return names of attributes that are set, in declaration order."""
        return tuple(f.name for f in fields(self) if getattr(self, f.name) is not None)


VIEW_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(RecordView))

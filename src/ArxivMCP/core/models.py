from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence


@dataclass(frozen=True, slots=True)
class Author:
    """Paper author as listed in the arXiv feed.

    Attributes:
        name: Display name.
        affiliation: Affiliation when arXiv provides one.
    """

    name: str
    affiliation: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Category:
    """arXiv subject category attached to a paper.

    Attributes:
        term: Category tag (e.g. "cs.AI").
        scheme: Taxonomy scheme URL.
    """

    term: str
    scheme: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Link:
    """One `<link>` element of a feed entry."""

    href: str
    rel: Optional[str] = None
    type: Optional[str] = None
    title: Optional[str] = None


@dataclass(frozen=True, slots=True)
class CatalogRecord:
    """Internal canonical arXiv paper record.

    Produced by the arXiv source and never mutated afterwards. String fields
    that arXiv leaves out of an entry are empty strings, not None.

    Attributes:
        id: arXiv identifier (e.g. "2301.00001v2").
        title: Paper title with line breaks collapsed.
        published: First version submission time.
        updated: Latest version submission time.
        summary: Abstract text.
        authors: Authors in listed order.
        categories: All categories, primary first when arXiv lists it first.
        primary_category: Primary category.
        links: Every link listed for the entry.
        comment: Author comment (pages, figures, venue notes).
        journal_reference: Journal reference if the paper was published.
        doi: Digital Object Identifier if known.
        abstract_url: URL of the abstract page.
        pdf_url: URL of the PDF.
    """

    id: str
    title: str
    published: Optional[datetime]
    updated: Optional[datetime]
    summary: str = ""
    authors: Sequence[Author] = ()
    categories: Sequence[Category] = ()
    primary_category: Optional[Category] = None
    links: Sequence[Link] = ()
    comment: str = ""
    journal_reference: str = ""
    doi: str = ""
    abstract_url: str = ""
    pdf_url: str = ""

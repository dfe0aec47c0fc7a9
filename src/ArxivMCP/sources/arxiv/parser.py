"""arXiv Atom feed parser.

Parses arXiv Atom XML into `CatalogRecord` objects.
"""

from __future__ import annotations

from datetime import datetime
import re
import xml.etree.ElementTree as ET
from urllib.parse import urlparse
from typing import Any, Mapping, Sequence

import feedparser
from dateutil import parser as dt_parser

from ArxivMCP.core.errors import UpstreamError
from ArxivMCP.core.models import Author, CatalogRecord, Category, Link

_ERROR_ID_MARKER = "/api/errors"

_NS = {"atom": "http://www.w3.org/2005/Atom", "arxiv": "http://arxiv.org/schemas/atom"}


def _parse_dt(dt: str | None) -> datetime | None:
    """Parse an RFC3339-ish feed timestamp; empty input yields None."""
    if not dt:
        return None
    return dt_parser.parse(dt)


def _normalize_arxiv_id(raw_id: str, *, keep_version: bool) -> str:
    """Reduce an entry id or arXiv URL to the bare identifier.

    Args:
        raw_id: Raw id or URL from the feed entry.
        keep_version: Whether to keep the version suffix (e.g., v1).

    Returns:
        Normalized arXiv id string (optionally without version).
    """
    if not raw_id:
        return ""

    value = raw_id.strip()
    if "arxiv.org" in value:
        path = urlparse(value).path or ""
        if "/abs/" in path:
            value = path.split("/abs/", 1)[1]
        elif "/pdf/" in path:
            value = path.split("/pdf/", 1)[1]
        else:
            value = path.lstrip("/")
        if value.endswith(".pdf"):
            value = value[:-4]

    value = value.strip("/")
    if not value:
        return raw_id
    if not keep_version:
        value = re.sub(r"v\d+$", "", value)
    return value


def _clean_text(text: str | None) -> str:
    return " ".join((text or "").split())


def _category(raw: Mapping[str, Any] | None) -> Category | None:
    if not raw or not raw.get("term"):
        return None
    return Category(term=raw["term"], scheme=raw.get("scheme") or None)


def _check_error_entry(entry: Mapping[str, Any]) -> None:
    """Raise when arXiv reports a query error as a feed entry."""
    if _ERROR_ID_MARKER in (entry.get("id") or ""):
        message = _clean_text(entry.get("summary")) or "unknown error"
        raise UpstreamError(f"arXiv API error: {message}")


def _author_affiliations(xml_text: str) -> dict[str, list[str | None]]:
    """Map entry id -> per-author affiliation, in author order.

    feedparser folds `<arxiv:affiliation>` onto the entry rather than the
    author, so affiliations are read from the raw XML. Several affiliations
    for one author are joined with "; ". Unparseable XML yields no mapping.
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError:
        return {}

    out: dict[str, list[str | None]] = {}
    for entry in root.findall("atom:entry", _NS):
        entry_id = (entry.findtext("atom:id", default="", namespaces=_NS) or "").strip()
        per_author: list[str | None] = []
        for author in entry.findall("atom:author", _NS):
            names = [_clean_text(a.text) for a in author.findall("arxiv:affiliation", _NS)]
            per_author.append("; ".join(n for n in names if n) or None)
        out[entry_id] = per_author
    return out


def _parse_entry(
    entry: Mapping[str, Any],
    *,
    keep_version: bool,
    affiliations: Sequence[str | None] = (),
) -> CatalogRecord:
    links: list[Link] = []
    abstract_url = ""
    pdf_url = ""
    for raw_link in entry.get("links", []):
        href = raw_link.get("href", "")
        if not href:
            continue
        link = Link(
            href=href,
            rel=raw_link.get("rel") or None,
            type=raw_link.get("type") or None,
            title=raw_link.get("title") or None,
        )
        links.append(link)
        if link.rel == "alternate" and not abstract_url:
            abstract_url = href
        if (link.title or "").lower() == "pdf" or link.type == "application/pdf":
            pdf_url = pdf_url or href

    authors = [
        Author(name=a.get("name", ""), affiliation=affiliations[i] if i < len(affiliations) else None)
        for i, a in enumerate(entry.get("authors", []))
    ]
    categories = [c for c in (_category(t) for t in entry.get("tags", [])) if c is not None]

    return CatalogRecord(
        id=_normalize_arxiv_id(entry.get("id") or "", keep_version=keep_version),
        title=_clean_text(entry.get("title")),
        published=_parse_dt(entry.get("published")),
        updated=_parse_dt(entry.get("updated")),
        summary=(entry.get("summary") or "").strip(),
        authors=tuple(authors),
        categories=tuple(categories),
        primary_category=_category(entry.get("arxiv_primary_category")),
        links=tuple(links),
        comment=_clean_text(entry.get("arxiv_comment")),
        journal_reference=_clean_text(entry.get("arxiv_journal_ref")),
        doi=(entry.get("arxiv_doi") or "").strip(),
        abstract_url=abstract_url,
        pdf_url=pdf_url,
    )


def parse_arxiv_feed(xml_text: str, *, keep_version: bool = True) -> Sequence[CatalogRecord]:
    """Parse arXiv Atom feed XML into catalog records.

    Args:
        xml_text: Atom feed XML text.
        keep_version: Whether to keep the arXiv version suffix in record ids.

    Returns:
        Records in feed order.

    Raises:
        UpstreamError: The document is not a feed, or arXiv reported an error.
    """
    feed = feedparser.parse(xml_text)
    if not feed.entries and not feed.feed:
        raise UpstreamError(f"malformed arXiv response: {feed.get('bozo_exception') or 'no feed element'}")

    affiliations = _author_affiliations(xml_text)
    items: list[CatalogRecord] = []
    for entry in feed.entries:
        _check_error_entry(entry)
        items.append(
            _parse_entry(
                entry,
                keep_version=keep_version,
                affiliations=affiliations.get((entry.get("id") or "").strip(), ()),
            )
        )
    return items

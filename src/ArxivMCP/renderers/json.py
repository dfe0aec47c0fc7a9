"""JSON output renderers.

Renders `RecordView` objects into JSON-serializable dicts. Absent view
attributes are omitted; present ones use the camelCase wire names.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Iterable

from ArxivMCP.core.models import Author, Category, Link
from ArxivMCP.renderers.view_models import RecordView

_WIRE_NAMES: dict[str, str] = {
    "id": "id",
    "title": "title",
    "published": "published",
    "updated": "updated",
    "summary": "summary",
    "authors": "authors",
    "categories": "categories",
    "primary_category": "primaryCategory",
    "links": "links",
    "comment": "comment",
    "journal_reference": "journalReference",
    "doi": "doi",
    "abstract_url": "abstractUrl",
    "pdf_url": "pdfUrl",
}


def format_datetime(dt: datetime | None) -> str | None:
    """Format a timestamp as RFC 3339 (UTC rendered with a Z suffix)."""
    if dt is None:
        return None
    text = dt.isoformat()
    return text[:-6] + "Z" if text.endswith("+00:00") else text


def _author_payload(author: Author) -> dict[str, str]:
    d = {"name": author.name}
    if author.affiliation:
        d["affiliation"] = author.affiliation
    return d


def _category_payload(category: Category) -> dict[str, str]:
    d = {"term": category.term}
    if category.scheme:
        d["scheme"] = category.scheme
    return d


def _link_payload(link: Link) -> dict[str, str]:
    d = {"href": link.href}
    for key in ("rel", "type", "title"):
        value = getattr(link, key)
        if value:
            d[key] = value
    return d


def _value_payload(name: str, value: Any) -> Any:
    if name in ("published", "updated"):
        return format_datetime(value)
    if name == "authors":
        return [_author_payload(a) for a in value]
    if name == "categories":
        return [_category_payload(c) for c in value]
    if name == "primary_category":
        return _category_payload(value)
    if name == "links":
        return [_link_payload(link) for link in value]
    return value


def render_view(view: RecordView) -> dict[str, Any]:
    """Render one view, skipping attributes that are not present."""
    return {_WIRE_NAMES[name]: _value_payload(name, getattr(view, name)) for name in view.present_fields()}


def render_json(views: Iterable[RecordView]) -> list[dict[str, Any]]:
    """Render views into JSON-serializable Python objects."""
    return [render_view(v) for v in views]


def render_results(views: Iterable[RecordView]) -> dict[str, Any]:
    """Wrap rendered views in the search result envelope: ``{"entries": [...]}``."""
    return {"entries": render_json(views)}


def dumps_results(views: Iterable[RecordView], *, indent: int | None = 2) -> str:
    """Serialize the search result envelope to a JSON string."""
    return json.dumps(render_results(views), ensure_ascii=False, indent=indent)

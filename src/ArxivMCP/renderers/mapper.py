"""Projection of `CatalogRecord` domain models onto `RecordView`.

Field selection is driven by a static, case-insensitive alias table: each
accepted spelling maps to the view attributes it fills. Names that are not in
the table are ignored.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping, Sequence

from ArxivMCP.core.models import CatalogRecord
from ArxivMCP.renderers.view_models import VIEW_FIELDS, RecordView

FIELD_ALIASES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "id": ("id",),
        "title": ("title",),
        "published": ("published",),
        "updated": ("updated",),
        "summary": ("summary",),
        "abstract": ("summary",),
        "authors": ("authors",),
        "author": ("authors",),
        "categories": ("categories",),
        "category": ("categories",),
        "primarycategory": ("primary_category",),
        "primary_category": ("primary_category",),
        "links": ("links",),
        "link": ("links",),
        "comment": ("comment",),
        "journalreference": ("journal_reference",),
        "journal_reference": ("journal_reference",),
        "journal": ("journal_reference",),
        "doi": ("doi",),
        "abstracturl": ("abstract_url",),
        "abstract_url": ("abstract_url",),
        "pdfurl": ("pdf_url",),
        "pdf_url": ("pdf_url",),
        "pdf": ("pdf_url",),
    }
)


def resolve_fields(requested: Iterable[str]) -> frozenset[str]:
    """Translate requested field names into view attribute names.

    Args:
        requested: Caller-supplied names in any case.

    Returns:
        Attribute names to populate; unknown names contribute nothing.
    """
    selected: set[str] = set()
    for name in requested:
        selected.update(FIELD_ALIASES.get(name.lower(), ()))
    return frozenset(selected)


def project_record(record: CatalogRecord, requested: Sequence[str] = ()) -> RecordView:
    """Project a record onto the caller-selected view.

    Args:
        record: Full catalog record.
        requested: Field names to keep; empty keeps every field.

    Returns:
        A new `RecordView`.
    """
    selected = frozenset(VIEW_FIELDS) if not requested else resolve_fields(requested)
    return RecordView(**{name: getattr(record, name) for name in selected})


def project_records(records: Sequence[CatalogRecord], requested: Sequence[str] = ()) -> list[RecordView]:
    """Project records one by one, preserving their order."""
    return [project_record(r, requested) for r in records]

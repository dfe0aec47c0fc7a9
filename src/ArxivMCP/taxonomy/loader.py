"""Packaged arXiv category taxonomy.

The JSON asset is produced offline by `ArxivMCP.taxonomy.scraper` and shipped
with the package. It is read once per process and served verbatim.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from typing import Sequence

TAXONOMY_FILENAME = "arxiv-taxonomy.json"


@dataclass(frozen=True, slots=True)
class TaxonomyCategory:
    """One arXiv category (e.g. tag="cs.AI", label="Artificial Intelligence")."""

    tag: str
    label: str
    description: str


@dataclass(frozen=True, slots=True)
class TaxonomyField:
    """Top-level subject field and its categories, in page order."""

    title: str
    categories: Sequence[TaxonomyCategory]


@lru_cache(maxsize=1)
def taxonomy_text() -> str:
    """Return the raw taxonomy JSON exactly as packaged."""
    return resources.files("ArxivMCP.taxonomy").joinpath(TAXONOMY_FILENAME).read_text(encoding="utf-8")


def parse_taxonomy(text: str) -> tuple[TaxonomyField, ...]:
    """Parse taxonomy JSON into typed fields.

    Raises:
        ValueError: If the document is not a list of fields with categories.
    """
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("taxonomy root must be a list")
    out: list[TaxonomyField] = []
    for idx, raw_field in enumerate(data):
        if not isinstance(raw_field, dict) or not isinstance(raw_field.get("categories"), list):
            raise ValueError(f"taxonomy[{idx}] must be an object with a categories list")
        out.append(
            TaxonomyField(
                title=str(raw_field.get("title", "")),
                categories=tuple(
                    TaxonomyCategory(
                        tag=str(c.get("tag", "")),
                        label=str(c.get("label", "")),
                        description=str(c.get("description", "")),
                    )
                    for c in raw_field["categories"]
                ),
            )
        )
    return tuple(out)


@lru_cache(maxsize=1)
def load_taxonomy() -> tuple[TaxonomyField, ...]:
    """Return the packaged taxonomy as typed fields."""
    return parse_taxonomy(taxonomy_text())


def dump_taxonomy(fields: Sequence[TaxonomyField]) -> str:
    """Serialize fields to the compact JSON layout of the packaged asset."""
    payload = [
        {
            "title": f.title,
            "categories": [{"tag": c.tag, "label": c.label, "description": c.description} for c in f.categories],
        }
        for f in fields
    ]
    return json.dumps(payload, ensure_ascii=False)

"""arXiv category taxonomy asset and the scraper that produces it."""

from __future__ import annotations

from ArxivMCP.taxonomy.loader import (
    TaxonomyCategory,
    TaxonomyField,
    dump_taxonomy,
    load_taxonomy,
    parse_taxonomy,
    taxonomy_text,
)

__all__ = [
    "TaxonomyCategory",
    "TaxonomyField",
    "dump_taxonomy",
    "load_taxonomy",
    "parse_taxonomy",
    "taxonomy_text",
]

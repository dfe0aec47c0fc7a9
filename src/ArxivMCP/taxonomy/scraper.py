"""Build-time scraper for the arXiv category taxonomy page.

Fetches https://arxiv.org/category_taxonomy and extracts the subject fields
and their categories into the JSON asset served by the MCP resource.

Page layout relied upon
- Field headings are the `h2` elements after the first three.
- Each `.accordion-body` holds one field, in heading order.
- Each `.columns.divided` block inside it is one category: its first `h4`
  reads `<tag> (<label>)` and the description is the first `p` in the
  column that is not `.is-one-fifth`.
"""

from __future__ import annotations

import re
from pathlib import Path

import requests
from bs4 import BeautifulSoup, Tag

from ArxivMCP.taxonomy.loader import TaxonomyCategory, TaxonomyField, dump_taxonomy
from ArxivMCP.utils.log import log

TAXONOMY_URL = "https://arxiv.org/category_taxonomy"
DEFAULT_TIMEOUT = 30.0

_SKIPPED_HEADINGS = 3
_RE_TAG_LINE = re.compile(r"^([^\s(]+)\s+\(([^)]+)\)")


def fetch_taxonomy_html(url: str = TAXONOMY_URL, *, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Download the taxonomy page.

    Raises:
        requests.HTTPError: On a non-success status.
    """
    log.info("Fetching arXiv category taxonomy from %s", url)
    resp = requests.get(url, timeout=timeout)
    resp.raise_for_status()
    return resp.text


def _parse_category(block: Tag) -> TaxonomyCategory:
    heading = block.find("h4")
    tag_line = heading.get_text() if heading else ""
    match = _RE_TAG_LINE.match(tag_line)
    tag = match.group(1) if match else ""
    label = match.group(2) if match else ""

    description = ""
    column = block.select_one(".column:not(.is-one-fifth)")
    if column is not None:
        paragraph = column.find("p")
        if paragraph is not None:
            description = paragraph.get_text()
    return TaxonomyCategory(tag=tag, label=label, description=description)


def parse_taxonomy_html(html: str) -> list[TaxonomyField]:
    """Extract taxonomy fields from the category taxonomy page HTML.

    Args:
        html: Page HTML.

    Returns:
        Fields in page order.

    Raises:
        ValueError: If the page has more field bodies than field headings.
    """
    soup = BeautifulSoup(html, "html.parser")
    headings = [next(h2.strings, "").strip() for h2 in soup.find_all("h2")[_SKIPPED_HEADINGS:]]
    bodies = soup.select(".accordion-body")
    if len(bodies) > len(headings):
        raise ValueError(f"found {len(bodies)} field sections but only {len(headings)} headings")

    fields: list[TaxonomyField] = []
    for title, body in zip(headings, bodies):
        categories = tuple(_parse_category(block) for block in body.select(".columns.divided"))
        fields.append(TaxonomyField(title=title, categories=categories))
    return fields


def scrape_taxonomy(output: Path, *, url: str = TAXONOMY_URL, timeout: float = DEFAULT_TIMEOUT) -> list[TaxonomyField]:
    """Fetch, parse and write the taxonomy JSON to `output`."""
    fields = parse_taxonomy_html(fetch_taxonomy_html(url, timeout=timeout))
    output.write_text(dump_taxonomy(fields), encoding="utf-8")
    log.info("Wrote %d fields (%d categories) to %s", len(fields), sum(len(f.categories) for f in fields), output)
    return fields

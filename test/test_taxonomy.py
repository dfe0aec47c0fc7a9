"""Tests for the packaged category taxonomy and the taxonomy page scraper."""

from __future__ import annotations

import json
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ArxivMCP.taxonomy import TaxonomyCategory, TaxonomyField, dump_taxonomy, load_taxonomy, parse_taxonomy
from ArxivMCP.taxonomy.scraper import parse_taxonomy_html, scrape_taxonomy

PAGE = """
<html><body>
<h2>Category Taxonomy</h2>
<h2>Classification guide</h2>
<h2>Group Name</h2>
<div class="accordion">
  <h2 class="accordion-head">Computer Science<span>expand</span></h2>
  <div class="accordion-body">
    <div class="columns divided">
      <div class="column is-one-fifth"><h4>cs.AI <span>(Artificial Intelligence)</span></h4></div>
      <div class="column"><p>Covers all areas of AI.</p><p>Second paragraph.</p></div>
    </div>
    <div class="columns divided">
      <div class="column is-one-fifth"><h4>cs.CL <span>(Computation and Language)</span></h4></div>
      <div class="column"><p>Covers natural language processing.</p></div>
    </div>
  </div>
  <h2 class="accordion-head">Mathematics</h2>
  <div class="accordion-body">
    <div class="columns divided">
      <div class="column is-one-fifth"><h4>math.AG <span>(Algebraic Geometry)</span></h4></div>
      <div class="column"><p>Algebraic varieties, stacks, sheaves, schemes.</p></div>
    </div>
  </div>
</div>
</body></html>
"""


class TestPackagedTaxonomy(unittest.TestCase):
    def test_asset_parses(self) -> None:
        fields = load_taxonomy()

        titles = [f.title for f in fields]
        self.assertIn("Computer Science", titles)
        self.assertIn("Mathematics", titles)
        tags = {c.tag for f in fields for c in f.categories}
        self.assertIn("cs.AI", tags)
        self.assertIn("math.CO", tags)

    def test_every_category_is_complete(self) -> None:
        for field in load_taxonomy():
            for category in field.categories:
                with self.subTest(tag=category.tag):
                    self.assertTrue(category.tag)
                    self.assertTrue(category.label)

    def test_rejects_bad_shape(self) -> None:
        for text in ('{"title": "x"}', '[{"title": "x"}]'):
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    parse_taxonomy(text)

    def test_dump_matches_parse(self) -> None:
        fields = (TaxonomyField(title="T", categories=(TaxonomyCategory(tag="a.B", label="L", description="D"),)),)
        self.assertEqual(parse_taxonomy(dump_taxonomy(fields)), fields)


class TestTaxonomyScraper(unittest.TestCase):
    def test_parses_fields_and_categories(self) -> None:
        fields = parse_taxonomy_html(PAGE)

        self.assertEqual([f.title for f in fields], ["Computer Science", "Mathematics"])
        self.assertEqual(
            fields[0].categories[0],
            TaxonomyCategory(tag="cs.AI", label="Artificial Intelligence", description="Covers all areas of AI."),
        )
        self.assertEqual([c.tag for c in fields[0].categories], ["cs.AI", "cs.CL"])
        self.assertEqual(fields[1].categories[0].label, "Algebraic Geometry")

    def test_more_bodies_than_headings(self) -> None:
        page = "<h2>a</h2><h2>b</h2><h2>c</h2><div class='accordion-body'></div>"
        with self.assertRaises(ValueError):
            parse_taxonomy_html(page)

    def test_scrape_writes_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            output = Path(tmp) / "taxonomy.json"
            with patch("ArxivMCP.taxonomy.scraper.fetch_taxonomy_html", return_value=PAGE):
                fields = scrape_taxonomy(output)

            data = json.loads(output.read_text(encoding="utf-8"))

        self.assertEqual(len(fields), 2)
        self.assertEqual(data[1]["categories"][0]["tag"], "math.AG")


if __name__ == "__main__":
    unittest.main()

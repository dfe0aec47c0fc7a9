"""Tests for the click command-line interface."""

from __future__ import annotations

import json
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ArxivMCP.cli import cli

sys.path.insert(0, str(Path(__file__).resolve().parent))

from test_arxiv_parser import FEED
from test_taxonomy import PAGE

_ENV = {"PORT": "", "ARXIV_MCP_LOG_LEVEL": "ERROR"}


class TestSearchCommand(unittest.TestCase):
    def test_search_prints_entries(self) -> None:
        runner = CliRunner(env=_ENV)
        with runner.isolated_filesystem():
            with patch("ArxivMCP.sources.arxiv.client.ArxivApiClient.fetch_feed", return_value=FEED) as fetch:
                result = runner.invoke(cli, ["search", "--title", "learning", "--max", "2", "--field", "id"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(
            json.loads(result.output),
            {"entries": [{"id": "2301.00001v2"}, {"id": "hep-th/9901001v1"}]},
        )
        kwargs = fetch.call_args.kwargs
        self.assertEqual(kwargs["search_query"], "ti:learning")
        self.assertEqual(kwargs["max_results"], 2)

    def test_search_by_id(self) -> None:
        runner = CliRunner(env=_ENV)
        with runner.isolated_filesystem():
            with patch("ArxivMCP.sources.arxiv.client.ArxivApiClient.fetch_feed", return_value=FEED) as fetch:
                result = runner.invoke(cli, ["search", "--id", "2301.00001", "--id", "hep-th/9901001"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(fetch.call_args.kwargs["id_list"], ("2301.00001", "hep-th/9901001"))
        self.assertEqual(fetch.call_args.kwargs["search_query"], "")

    def test_invalid_criteria_aborts_without_request(self) -> None:
        runner = CliRunner(env=_ENV)
        with runner.isolated_filesystem():
            with patch("ArxivMCP.sources.arxiv.client.ArxivApiClient.fetch_feed", return_value=FEED) as fetch:
                result = runner.invoke(cli, ["search", "--relative", "lately"])

        self.assertEqual(result.exit_code, 1)
        fetch.assert_not_called()

    def test_config_override_file(self) -> None:
        runner = CliRunner(env=_ENV)
        with runner.isolated_filesystem():
            Path("override.yml").write_text("arxiv:\n  keep_version: false\n", encoding="utf-8")
            with patch("ArxivMCP.sources.arxiv.client.ArxivApiClient.fetch_feed", return_value=FEED):
                result = runner.invoke(cli, ["--config", "override.yml", "search", "--all", "x", "--field", "id"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual([e["id"] for e in json.loads(result.output)["entries"]], ["2301.00001", "hep-th/9901001"])


class TestScrapeTaxonomyCommand(unittest.TestCase):
    def test_writes_output_file(self) -> None:
        runner = CliRunner(env=_ENV)
        with runner.isolated_filesystem():
            with patch("ArxivMCP.taxonomy.scraper.fetch_taxonomy_html", return_value=PAGE):
                result = runner.invoke(cli, ["scrape-taxonomy", "out.json"])
            data = json.loads(Path("out.json").read_text(encoding="utf-8"))

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual([f["title"] for f in data], ["Computer Science", "Mathematics"])


if __name__ == "__main__":
    unittest.main()

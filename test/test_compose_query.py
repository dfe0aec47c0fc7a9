"""Tests for composing search criteria into an arXiv query."""

from __future__ import annotations

import sys
import unittest
from datetime import datetime, timedelta, timezone
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ArxivMCP.core.errors import DateParseError, InvalidFormatError, InvalidUnitError, QueryError
from ArxivMCP.core.query import SearchCriteria
from ArxivMCP.sources.arxiv.query import compose_search_query, format_wire_datetime

NOW = datetime(2024, 3, 15, 12, 30, tzinfo=timezone.utc)


def _compose(**kwargs) -> str:
    return compose_search_query(SearchCriteria(**kwargs), now=NOW).expression


class TestComposeClauses(unittest.TestCase):
    def test_empty_criteria(self) -> None:
        composed = compose_search_query(SearchCriteria(), now=NOW)

        self.assertEqual(composed.expression, "")
        self.assertEqual(composed.params.max_results, 20)
        self.assertEqual(composed.params.sort_by, "relevance")
        self.assertEqual(composed.params.sort_order, "descending")
        self.assertEqual(composed.params.id_list, ())

    def test_title_only(self) -> None:
        self.assertEqual(_compose(title="quantum computing"), "ti:quantum computing")

    def test_author_only(self) -> None:
        self.assertEqual(_compose(author="Einstein"), "au:Einstein")

    def test_abstract_only(self) -> None:
        self.assertEqual(_compose(abstract="machine learning"), "abs:machine learning")

    def test_subject_category_only(self) -> None:
        self.assertEqual(_compose(subject_category="cs.AI"), "cat:cs.AI")

    def test_all_fields_search(self) -> None:
        self.assertEqual(_compose(all="neural networks"), "all:neural networks")

    def test_title_before_author(self) -> None:
        self.assertEqual(_compose(title="quantum", author="Smith"), "ti:quantum au:Smith")

    def test_fixed_clause_order(self) -> None:
        expression = _compose(
            all="graphs",
            subject_category="math.CO",
            abstract="coloring",
            author="Erdos",
            title="chromatic",
        )
        self.assertEqual(expression, "ti:chromatic au:Erdos abs:coloring cat:math.CO all:graphs")

    def test_values_are_verbatim(self) -> None:
        self.assertEqual(_compose(title="  spaced   out "), "ti:  spaced   out ")


class TestComposeDates(unittest.TestCase):
    def test_absolute_window(self) -> None:
        expression = _compose(title="AI", submitted_since="2023-01-01", submitted_before="2023-12-31")
        self.assertEqual(expression, "ti:AI submittedDate:[202301010000 TO 202312310000]")

    def test_missing_before_defaults_to_now(self) -> None:
        expression = _compose(submitted_since="2023-01-01")
        self.assertEqual(expression, "submittedDate:[202301010000 TO 202403151230]")

    def test_missing_since_defaults_to_earliest(self) -> None:
        expression = _compose(submitted_before="2023-12-31")
        self.assertEqual(expression, "submittedDate:[000101010000 TO 202312310000]")

    def test_relative_window_ends_now(self) -> None:
        expression = _compose(title="machine learning", submitted_relative="7 days")
        self.assertEqual(expression, "ti:machine learning submittedDate:[202403081230 TO 202403151230]")

    def test_relative_ignored_when_absolute_present(self) -> None:
        expression = _compose(submitted_relative="not a window", submitted_since="2024-01-01")
        self.assertEqual(expression, "submittedDate:[202401010000 TO 202403151230]")

    def test_relative_months_use_calendar(self) -> None:
        expression = _compose(submitted_relative="1 month")
        self.assertEqual(expression, "submittedDate:[202402151230 TO 202403151230]")

    def test_invalid_since_names_field(self) -> None:
        with self.assertRaises(DateParseError) as ctx:
            _compose(title="test", submitted_since="invalid-date")
        self.assertEqual(ctx.exception.field, "submitted_since")
        self.assertEqual(ctx.exception.value, "invalid-date")

    def test_invalid_before_names_field(self) -> None:
        with self.assertRaises(DateParseError) as ctx:
            _compose(title="test", submitted_before="2023-02-30")
        self.assertEqual(ctx.exception.field, "submitted_before")

    def test_single_digit_month_rejected(self) -> None:
        with self.assertRaises(DateParseError):
            _compose(submitted_since="2023-1-01")

    def test_invalid_relative_format(self) -> None:
        with self.assertRaises(InvalidFormatError):
            _compose(title="test", submitted_relative="invalid")

    def test_invalid_relative_unit(self) -> None:
        with self.assertRaises(InvalidUnitError):
            _compose(submitted_relative="2 fortnights")

    def test_errors_are_query_errors(self) -> None:
        with self.assertRaises(QueryError):
            _compose(submitted_relative="7 days ago")
        with self.assertRaises(ValueError):
            _compose(submitted_before="yesterday")


class TestComposeParams(unittest.TestCase):
    def test_custom_max_results(self) -> None:
        composed = compose_search_query(SearchCriteria(title="quantum", max_results=5), now=NOW)
        self.assertEqual(composed.params.max_results, 5)

    def test_non_positive_max_results_uses_default(self) -> None:
        for value in (0, -3):
            composed = compose_search_query(SearchCriteria(max_results=value), now=NOW)
            self.assertEqual(composed.params.max_results, 20)

    def test_id_list_is_additive(self) -> None:
        composed = compose_search_query(SearchCriteria(id_list=["2301.00001", "2301.00002"], title="x"), now=NOW)
        self.assertEqual(composed.params.id_list, ("2301.00001", "2301.00002"))
        self.assertEqual(composed.expression, "ti:x")

    def test_id_list_alone_yields_empty_expression(self) -> None:
        composed = compose_search_query(SearchCriteria(id_list=["2301.00000"], max_results=1), now=NOW)
        self.assertEqual(composed.expression, "")
        self.assertEqual(composed.params.id_list, ("2301.00000",))
        self.assertEqual(composed.params.max_results, 1)

    def test_same_now_is_idempotent(self) -> None:
        criteria = SearchCriteria(
            title="AI",
            author="Smith",
            submitted_relative="3 weeks",
            id_list=["1234.5678"],
            max_results=7,
        )
        self.assertEqual(compose_search_query(criteria, now=NOW), compose_search_query(criteria, now=NOW))


class TestWireDatetime(unittest.TestCase):
    def test_converts_to_utc(self) -> None:
        local = datetime(2024, 1, 1, 1, 5, tzinfo=timezone(timedelta(hours=2)))
        self.assertEqual(format_wire_datetime(local), "202312312305")

    def test_pads_small_years(self) -> None:
        self.assertEqual(format_wire_datetime(datetime(1, 1, 1, tzinfo=timezone.utc)), "000101010000")


if __name__ == "__main__":
    unittest.main()

"""Tests for relative date expression parsing."""

from __future__ import annotations

import sys
import unittest
from datetime import datetime, timedelta, timezone
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ArxivMCP.core.errors import (
    InvalidFormatError,
    InvalidNumberError,
    InvalidUnitError,
    RelativeDateError,
)
from ArxivMCP.sources.arxiv.query import parse_relative_date

NOW = datetime(2024, 3, 31, 8, 0, tzinfo=timezone.utc)


class TestParseRelativeDate(unittest.TestCase):
    def test_days(self) -> None:
        self.assertEqual(parse_relative_date("7 days", now=NOW), NOW - timedelta(days=7))
        self.assertEqual(parse_relative_date("1 day", now=NOW), NOW - timedelta(days=1))

    def test_weeks_are_exact(self) -> None:
        self.assertEqual(parse_relative_date("2 weeks", now=NOW), NOW - timedelta(days=14))

    def test_week_and_seven_days_agree(self) -> None:
        self.assertEqual(parse_relative_date("1 week", now=NOW), parse_relative_date("7 days", now=NOW))

    def test_months_shift_the_calendar(self) -> None:
        self.assertEqual(parse_relative_date("3 months", now=NOW), datetime(2023, 12, 31, 8, 0, tzinfo=timezone.utc))

    def test_month_end_clamps(self) -> None:
        self.assertEqual(parse_relative_date("1 month", now=NOW), datetime(2024, 2, 29, 8, 0, tzinfo=timezone.utc))

    def test_years_shift_the_calendar(self) -> None:
        self.assertEqual(parse_relative_date("2 years", now=NOW), datetime(2022, 3, 31, 8, 0, tzinfo=timezone.utc))
        self.assertEqual(parse_relative_date("1 year", now=NOW), datetime(2023, 3, 31, 8, 0, tzinfo=timezone.utc))

    def test_zero_count_is_now(self) -> None:
        self.assertEqual(parse_relative_date("0 days", now=NOW), NOW)

    def test_units_are_case_insensitive(self) -> None:
        self.assertEqual(parse_relative_date("7 DAYS", now=NOW), NOW - timedelta(days=7))
        self.assertEqual(parse_relative_date("1 Month", now=NOW), parse_relative_date("1 month", now=NOW))

    def test_extra_whitespace_is_tolerated(self) -> None:
        self.assertEqual(parse_relative_date("  7\tdays ", now=NOW), NOW - timedelta(days=7))

    def test_error_kinds(self) -> None:
        cases = {
            "7": InvalidFormatError,
            "days": InvalidFormatError,
            "": InvalidFormatError,
            "7 days ago": InvalidFormatError,
            "abc days": InvalidNumberError,
            "-1 days": InvalidNumberError,
            "1.5 weeks": InvalidNumberError,
            "7 centuries": InvalidUnitError,
        }
        for relative, error in cases.items():
            with self.subTest(relative=relative):
                with self.assertRaises(error) as ctx:
                    parse_relative_date(relative, now=NOW)
                self.assertIsInstance(ctx.exception, RelativeDateError)
                self.assertEqual(ctx.exception.value, relative)

    def test_out_of_range_count(self) -> None:
        with self.assertRaises(InvalidNumberError):
            parse_relative_date("99999 years", now=NOW)


if __name__ == "__main__":
    unittest.main()

"""Error types raised while composing or executing a catalog search."""

from __future__ import annotations


class QueryError(ValueError):
    """Search criteria could not be turned into an arXiv query."""


class RelativeDateError(QueryError):
    """Base error for malformed relative date expressions."""

    def __init__(self, message: str, *, value: str) -> None:
        super().__init__(message)
        self.value = value


class InvalidFormatError(RelativeDateError):
    """Relative date expression does not have exactly `<count> <unit>`."""


class InvalidNumberError(RelativeDateError):
    """Relative date count is not a non-negative integer."""


class InvalidUnitError(RelativeDateError):
    """Relative date unit is not day/week/month/year (singular or plural)."""


class DateParseError(QueryError):
    """An absolute submission date is not in YYYY-MM-DD form.

    Attributes:
        field: Criteria field holding the bad value (e.g. ``submitted_since``).
        value: Raw value as supplied by the caller.
    """

    def __init__(self, field: str, value: str) -> None:
        super().__init__(f"invalid date for {field}: {value!r} (expected YYYY-MM-DD)")
        self.field = field
        self.value = value


class UpstreamError(RuntimeError):
    """The arXiv API call failed or returned an unusable response."""

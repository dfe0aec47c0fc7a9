"""arXiv query composer.

Composes the caller's `SearchCriteria` into an arXiv Atom API `search_query`
string plus execution parameters.

Rules
- Each non-empty free-text criterion becomes one `<prefix>:<value>` clause,
  value used verbatim.
- Clauses are joined with a single space in a fixed order:
  title, author, abstract, category, all, submission date range.
- The date range renders as `submittedDate:[<since> TO <before>]` with
  `YYYYMMDDHHMM` UTC timestamps.

Mapping to arXiv fields
- title            -> ti
- author           -> au
- abstract         -> abs
- subject_category -> cat
- all              -> all
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Final

from dateutil.relativedelta import relativedelta

from ArxivMCP.core.errors import (
    DateParseError,
    InvalidFormatError,
    InvalidNumberError,
    InvalidUnitError,
)
from ArxivMCP.core.query import (
    DEFAULT_MAX_RESULTS,
    SORT_BY_RELEVANCE,
    SORT_ORDER_DESCENDING,
    ComposedQuery,
    ExecutionParams,
    SearchCriteria,
)
from ArxivMCP.utils.log import log

DATE_FORMAT: Final = "%Y-%m-%d"
EARLIEST: Final = datetime.min.replace(tzinfo=timezone.utc)

_RE_DATE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_RE_COUNT = re.compile(r"\d+", re.ASCII)

# unit spelling -> relativedelta keyword; weeks are exact 7-day multiples
_UNITS: Final[dict[str, str]] = {
    "day": "days",
    "days": "days",
    "week": "weeks",
    "weeks": "weeks",
    "month": "months",
    "months": "months",
    "year": "years",
    "years": "years",
}

_TEXT_FIELDS: Final[tuple[tuple[str, str], ...]] = (
    ("title", "ti"),
    ("author", "au"),
    ("abstract", "abs"),
    ("subject_category", "cat"),
    ("all", "all"),
)


def parse_relative_date(relative: str, *, now: datetime) -> datetime:
    """Resolve a `<count> <unit>` expression to the start of its window.

    Months and years move the calendar (clamping to the last valid day of the
    month); days and weeks are exact.

    Args:
        relative: Expression such as "7 days", "1 Week" or "3 months".
        now: Reference instant the window ends at.

    Returns:
        `now` shifted back by the expression.

    Raises:
        InvalidFormatError: Not exactly two whitespace-separated tokens.
        InvalidNumberError: Count is not a non-negative integer.
        InvalidUnitError: Unit is not day/week/month/year (singular or plural).
    """
    parts = relative.split()
    if len(parts) != 2:
        raise InvalidFormatError(f"invalid relative date format: {relative!r}", value=relative)

    count_token, unit_token = parts
    if not _RE_COUNT.fullmatch(count_token):
        raise InvalidNumberError(f"invalid number in relative date: {count_token!r}", value=relative)

    unit = _UNITS.get(unit_token.lower())
    if unit is None:
        raise InvalidUnitError(f"invalid time unit in relative date: {unit_token.lower()!r}", value=relative)

    try:
        return now - relativedelta(**{unit: int(count_token)})
    except (OverflowError, ValueError) as e:
        raise InvalidNumberError(f"relative date out of range: {relative!r}", value=relative) from e


def format_wire_datetime(dt: datetime) -> str:
    """Render a datetime in the arXiv `submittedDate` format (YYYYMMDDHHMM, UTC)."""
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    # strftime pads years below 1000 inconsistently across platforms
    return f"{dt.year:04d}{dt.month:02d}{dt.day:02d}{dt.hour:02d}{dt.minute:02d}"


def _parse_calendar_date(value: str, field: str) -> datetime:
    if not _RE_DATE.fullmatch(value):
        raise DateParseError(field, value)
    try:
        parsed = datetime.strptime(value, DATE_FORMAT)
    except ValueError as e:
        raise DateParseError(field, value) from e
    return parsed.replace(tzinfo=timezone.utc)


def _resolve_window(criteria: SearchCriteria, now: datetime) -> tuple[datetime, datetime] | None:
    """Pick the effective submission window, relative first when it is alone."""
    if criteria.submitted_relative and not criteria.submitted_since and not criteria.submitted_before:
        return parse_relative_date(criteria.submitted_relative, now=now), now

    if criteria.submitted_since or criteria.submitted_before:
        since = EARLIEST
        before = now
        if criteria.submitted_since:
            since = _parse_calendar_date(criteria.submitted_since, "submitted_since")
        if criteria.submitted_before:
            before = _parse_calendar_date(criteria.submitted_before, "submitted_before")
        return since, before

    return None


def compose_search_query(criteria: SearchCriteria, *, now: datetime) -> ComposedQuery:
    """Compose criteria into an arXiv `search_query` and execution parameters.

    Args:
        criteria: Caller-supplied search criteria.
        now: Evaluation instant, captured once per request.

    Returns:
        Composed expression (possibly empty) and parameters.

    Raises:
        QueryError: A date criterion is malformed; nothing should be fetched.
    """
    clauses: list[str] = []
    for attr, prefix in _TEXT_FIELDS:
        value = getattr(criteria, attr)
        if value:
            clauses.append(f"{prefix}:{value}")

    window = _resolve_window(criteria, now)
    if window is not None:
        since, before = window
        clauses.append(f"submittedDate:[{format_wire_datetime(since)} TO {format_wire_datetime(before)}]")

    params = ExecutionParams(
        max_results=criteria.max_results if criteria.max_results > 0 else DEFAULT_MAX_RESULTS,
        sort_by=SORT_BY_RELEVANCE,
        sort_order=SORT_ORDER_DESCENDING,
        id_list=tuple(criteria.id_list),
    )
    expression = " ".join(clauses)
    log.debug("arXiv query composed: %r max_results=%d id_list=%s", expression, params.max_results, params.id_list)
    return ComposedQuery(expression=expression, params=params)

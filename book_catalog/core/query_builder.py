"""Query Builder: turns raw request parameters into validated Query values.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Only FILTER_FIELDS keys ever reach a predicate; other params are ignored
    - Defaults apply when a param is missing, empty, or has no leading integer
    - Parsed zero/negative page or page size values are kept as-is (not clamped)

Design Decisions:
    - title/author/genre match by case-insensitive substring, publicationDate
      matches exactly
    - Leading-integer parsing: "3abc" -> 3, "abc" -> default
    - The combined listing path has its own defaults (limit=10, sort on
      createdAt) and is built by a separate function
"""

import re
from collections.abc import Mapping

from book_catalog.core.query import (
    MatchKind, Matcher, Predicate, Query, SortDirection, SortSpec, Window,
)

FILTER_FIELDS: dict[str, MatchKind] = {
    "title": MatchKind.CONTAINS,
    "author": MatchKind.CONTAINS,
    "genre": MatchKind.CONTAINS,
    "publicationDate": MatchKind.EQUALS,
}

DEFAULT_SORT_FIELD = "title"
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 2

COMBINED_SORT_FIELD = "createdAt"
COMBINED_DEFAULT_ORDER = "asc"
COMBINED_DEFAULT_LIMIT = 10

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int(raw: str | None, default: int) -> int:
    """Parse the leading integer of raw, or return default."""
    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    if not match:
        return default
    return int(match.group(1))


def build_filter(params: Mapping[str, str]) -> Predicate:
    """Build a predicate from the whitelisted fields present in params."""
    predicate: Predicate = {}
    for name, kind in FILTER_FIELDS.items():
        value = params.get(name)
        if value:
            predicate[name] = Matcher(kind=kind, value=value)
    return predicate


def build_sort(params: Mapping[str, str]) -> SortSpec:
    """Sort on params["sort"] (default title); descending only for "desc"."""
    field = params.get("sort") or DEFAULT_SORT_FIELD
    if params.get("order") == "desc":
        return SortSpec(field=field, direction=SortDirection.DESCENDING)
    return SortSpec(field=field, direction=SortDirection.ASCENDING)


def build_pagination(params: Mapping[str, str]) -> Window:
    return Window(
        page=parse_int(params.get("page"), DEFAULT_PAGE),
        page_size=parse_int(params.get("pageSize"), DEFAULT_PAGE_SIZE),
    )


def build_filter_query(params: Mapping[str, str]) -> Query:
    return Query(predicate=build_filter(params))


def build_paginated_query(params: Mapping[str, str]) -> Query:
    return Query(window=build_pagination(params))


def build_sorted_query(params: Mapping[str, str]) -> Query:
    return Query(sort=build_sort(params))


def build_combined_query(params: Mapping[str, str]) -> Query:
    """Query for the combined listing path.

    Page defaults to 1 and limit (not pageSize) to 10. Ordering is always on
    createdAt and the direction is the raw "sort" token, left for the store to
    interpret. The "filter" param is never read, so the predicate is empty.
    """
    window = Window(
        page=parse_int(params.get("page"), DEFAULT_PAGE),
        page_size=parse_int(params.get("limit"), COMBINED_DEFAULT_LIMIT),
    )
    order = params.get("sort") or COMBINED_DEFAULT_ORDER
    return Query(
        predicate={},
        sort=SortSpec(field=COMBINED_SORT_FIELD, direction=order),
        window=window,
    )

"""Query Value Types: predicate, sort spec and pagination window.

Invariants:
    - Query is immutable once built
    - Predicate keys come only from the filter whitelist (see query_builder)
    - Window.skip == (page - 1) * page_size, with no clamping of page or page_size

Design Decisions:
    - Frozen dataclasses over dicts: the store adapter receives typed values,
      never caller-supplied keys or operators
    - str Enums: serialize to JSON and compare equal to their raw token
"""

from dataclasses import dataclass, field
from enum import Enum


class MatchKind(str, Enum):
    """How a matcher compares a stored field to the requested value."""
    CONTAINS = "contains"   # case-insensitive substring
    EQUALS = "equals"       # exact value


class SortDirection(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


@dataclass(frozen=True)
class Matcher:
    """A single-field condition."""
    kind: MatchKind
    value: str


# Field name -> matcher. Matchers are combined with logical AND.
Predicate = dict[str, Matcher]


@dataclass(frozen=True)
class SortSpec:
    """Ordering on one field.

    direction is normally a SortDirection. The combined listing path passes
    the caller's raw token instead and leaves interpretation to the store.
    """
    field: str
    direction: SortDirection | str = SortDirection.ASCENDING


@dataclass(frozen=True)
class Window:
    """Contiguous slice of an ordered result set."""
    page: int
    page_size: int

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


@dataclass(frozen=True)
class Query:
    """A composed retrieval: filter, then sort, then window."""
    predicate: Predicate = field(default_factory=dict)
    sort: SortSpec | None = None
    window: Window | None = None

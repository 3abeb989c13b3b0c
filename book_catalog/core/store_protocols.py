"""Boundary Protocols: contracts between the core and the document store.

Invariants:
    - Core NEVER imports from infrastructure; implementations are injected
    - Cursor composition order is fixed: filter -> sort -> skip -> limit,
      regardless of the order the builder methods are called in
    - Store failures surface as StoreError, shape rejections as ValidationError

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no base class
    - Cursor builders are sync and return self; only to_list() does IO
"""

from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, Protocol, Self
from uuid import UUID

from book_catalog.core.query import Predicate, SortSpec


class BookLike(Protocol):
    """Structural contract for stored Book records."""
    id: UUID
    title: str | None
    author: str | None
    genre: str | None
    publication_date: date | None
    created_at: datetime


class BookCursor(Protocol):
    """Lazily composed find over the books collection."""
    def sort(self, spec: SortSpec) -> Self: ...
    def skip(self, n: int) -> Self: ...
    def limit(self, m: int) -> Self: ...
    async def to_list(self) -> list[BookLike]: ...


class DocumentStore(Protocol):
    """Contract for book persistence, implemented by infrastructure."""
    async def insert(self, doc: Mapping[str, Any]) -> BookLike: ...
    def find(self, predicate: Predicate | None = None) -> BookCursor: ...
    async def count(self, predicate: Predicate | None = None) -> int: ...
    async def ping(self) -> bool: ...

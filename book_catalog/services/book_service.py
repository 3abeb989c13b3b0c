"""Book Service: create and list operations over an injected document store.

Invariants:
    - Holds no state besides the store handle
    - Every operation is one store call (two for list_paginated), no retries
    - Errors from the store propagate unchanged (ValidationError, StoreError)
    - list_all and list_filtered have no implicit result cap

Design Decisions:
    - list_paginated counts with a separate call, so total_books is best-effort:
      the collection may change between the window fetch and the count
    - list_combined keeps its own defaults (see build_combined_query) rather
      than sharing the dedicated pagination/sort conventions
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from book_catalog.core.query import Query
from book_catalog.core.store_protocols import BookCursor, BookLike, DocumentStore

logger = logging.getLogger(__name__)


@dataclass
class BookPage:
    books: list[BookLike]
    total_books: int


def _apply(cursor: BookCursor, query: Query) -> BookCursor:
    if query.sort is not None:
        cursor = cursor.sort(query.sort)
    if query.window is not None:
        cursor = cursor.skip(query.window.skip).limit(query.window.limit)
    return cursor


class BookService:
    """Book Repository/Service."""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def create(self, book_data: Mapping[str, Any]) -> BookLike:
        """Persist one book; the store assigns id and created_at."""
        book = await self.store.insert(book_data)
        logger.info("Book created", extra={"book_id": str(book.id)})
        return book

    async def list_all(self) -> list[BookLike]:
        return await self.store.find().to_list()

    async def list_filtered(self, query: Query) -> list[BookLike]:
        """Books matching every matcher in query.predicate (empty matches all)."""
        logger.debug(
            f"Filtering books on {sorted(query.predicate)}",
            extra={"operation": "list_filtered"},
        )
        return await self.store.find(query.predicate).to_list()

    async def list_paginated(self, query: Query) -> BookPage:
        books = await _apply(self.store.find(query.predicate), query).to_list()
        total = await self.store.count(query.predicate)
        return BookPage(books=books, total_books=total)

    async def list_sorted(self, query: Query) -> list[BookLike]:
        return await _apply(self.store.find(query.predicate), query).to_list()

    async def list_combined(self, query: Query) -> list[BookLike]:
        """Filter, sort and window in one call (the GET /books path)."""
        return await _apply(self.store.find(query.predicate), query).to_list()

"""Document Store Adapter: the books collection behind insert/find/count.

Invariants:
    - find() composes filter -> sort -> skip -> limit, whatever the call order
    - Unsorted finds return insertion order; sorted finds break ties on insertion order
    - An unknown sort field leaves natural order untouched
    - limit <= 0 yields an empty window; skip < 0 raises StoreError
    - Shape rejections on insert raise ValidationError, everything else StoreError
    - No retries: every failure propagates to the caller unchanged

Design Decisions:
    - Contains matches are literal (LIKE wildcards escaped), never regex
    - Missing values sort first ascending and last descending on every backend
    - Direction tokens follow the usual document-store vocabulary:
      asc/ascending/1 and desc/descending/-1
"""

import logging
from collections.abc import Mapping
from datetime import date
from typing import Any
from uuid import UUID

import pydantic
from pydantic import TypeAdapter
from sqlalchemy import Select, func, select
from sqlalchemy.exc import DataError, IntegrityError

from book_catalog.core.errors import StoreError, ValidationError
from book_catalog.core.query import MatchKind, Matcher, Predicate, SortDirection, SortSpec
from book_catalog.infrastructure.database import DatabaseSessionManager
from book_catalog.models.book import Book
from book_catalog.schemas.book import BookDraft

logger = logging.getLogger(__name__)

# Public field name -> column. Sorting and matching only ever touch these.
FIELD_COLUMNS = {
    "id": Book.id,
    "title": Book.title,
    "author": Book.author,
    "genre": Book.genre,
    "publicationDate": Book.publication_date,
    "createdAt": Book.created_at,
}

_ASCENDING_TOKENS = {"asc", "ascending", "1"}
_DESCENDING_TOKENS = {"desc", "descending", "-1"}

_date_adapter = TypeAdapter(date)
_uuid_adapter = TypeAdapter(UUID)


def normalize_direction(direction: SortDirection | str | int) -> SortDirection:
    """Interpret a sort direction token, raising StoreError if unknown."""
    if isinstance(direction, SortDirection):
        return direction
    token = str(direction).strip().lower()
    if token in _ASCENDING_TOKENS:
        return SortDirection.ASCENDING
    if token in _DESCENDING_TOKENS:
        return SortDirection.DESCENDING
    raise StoreError(f"Invalid sort value: {direction!r}", "find")


def _cast_value(field: str, raw: str) -> Any:
    adapter = {"publicationDate": _date_adapter, "id": _uuid_adapter}.get(field)
    if adapter is None:
        return raw
    try:
        return adapter.validate_python(raw)
    except pydantic.ValidationError as e:
        raise StoreError(
            f'Cast failed for value "{raw}" at path "{field}"', "find",
        ) from e


def _condition(field: str, matcher: Matcher):
    column = FIELD_COLUMNS.get(field)
    if column is None:
        raise StoreError(f"Unknown predicate field: {field}", "find")
    if matcher.kind is MatchKind.CONTAINS:
        return column.icontains(matcher.value, autoescape=True)
    return column == _cast_value(field, matcher.value)


def _conditions(predicate: Predicate) -> list:
    return [_condition(f, m) for f, m in predicate.items()]


def _cast_document(doc: Mapping[str, Any]) -> BookDraft:
    """Cast an arbitrary mapping to the stored Book shape."""
    if not isinstance(doc, Mapping):
        raise ValidationError("Book validation failed: expected an object")
    try:
        return BookDraft.model_validate(dict(doc))
    except pydantic.ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(loc) for loc in first["loc"])
        raise ValidationError(
            f"Book validation failed: {field}: {first['msg']}", field=field,
        ) from e


class SqlAlchemyBookCursor:
    """Lazily composed find; nothing runs until to_list()."""

    def __init__(self, db: DatabaseSessionManager, predicate: Predicate):
        self._db = db
        self._predicate = dict(predicate)
        self._sort: SortSpec | None = None
        self._skip = 0
        self._limit: int | None = None

    def sort(self, spec: SortSpec) -> "SqlAlchemyBookCursor":
        self._sort = spec
        return self

    def skip(self, n: int) -> "SqlAlchemyBookCursor":
        self._skip = n
        return self

    def limit(self, m: int) -> "SqlAlchemyBookCursor":
        self._limit = m
        return self

    def statement(self) -> Select:
        """Build the SELECT in fixed filter, sort, skip, limit order."""
        stmt = select(Book).where(*_conditions(self._predicate))
        if self._sort is not None:
            stmt = stmt.order_by(*self._order_by(self._sort))
        stmt = stmt.order_by(Book.seq.asc())
        if self._skip:
            stmt = stmt.offset(self._skip)
        if self._limit is not None:
            stmt = stmt.limit(self._limit)
        return stmt

    def _order_by(self, spec: SortSpec) -> list:
        direction = normalize_direction(spec.direction)
        column = FIELD_COLUMNS.get(spec.field)
        if column is None:
            logger.debug(f"Ignoring sort on unknown field {spec.field!r}")
            return []
        if direction is SortDirection.DESCENDING:
            return [column.desc().nulls_last()]
        return [column.asc().nulls_first()]

    async def to_list(self) -> list[Book]:
        if self._skip < 0:
            raise StoreError(f"skip must be non-negative, got {self._skip}", "find")
        stmt = self.statement()
        if self._limit is not None and self._limit <= 0:
            return []
        async with self._db.session("find") as session:
            result = await session.execute(stmt)
            return list(result.scalars().all())


class SqlAlchemyDocumentStore:
    """Books collection on an async SQLAlchemy engine."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def insert(self, doc: Mapping[str, Any]) -> Book:
        draft = _cast_document(doc)
        book = Book(**draft.model_dump())
        async with self._db.session("insert") as session:
            session.add(book)
            try:
                await session.commit()
            except (IntegrityError, DataError) as e:
                raise ValidationError(
                    f"Book validation failed: {e.orig or e}",
                ) from e
            await session.refresh(book)
        return book

    def find(self, predicate: Predicate | None = None) -> SqlAlchemyBookCursor:
        return SqlAlchemyBookCursor(self._db, predicate or {})

    async def count(self, predicate: Predicate | None = None) -> int:
        stmt = (
            select(func.count())
            .select_from(Book)
            .where(*_conditions(predicate or {}))
        )
        async with self._db.session("count") as session:
            result = await session.execute(stmt)
            return result.scalar_one()

    async def ping(self) -> bool:
        return await self._db.health_check()

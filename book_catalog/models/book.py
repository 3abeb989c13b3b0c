"""Book ORM: one row per document in the books collection.

Invariants:
    - id is a random UUID assigned on insert, unique and never reused
    - seq is the internal insertion order; it never leaves the store adapter
    - created_at is assigned on insert
    - title, author, genre, publication_date are all optional

Design Decisions:
    - Integer seq primary key: SQLite only autoincrements a sole integer PK,
      and natural order plus sort tiebreaks need a monotonic key
"""

import uuid
from datetime import date, datetime, timezone

from sqlalchemy import Date, DateTime, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from book_catalog.db.base import Base


class Book(Base):
    """A single catalog record."""
    __tablename__ = "books"

    seq: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), unique=True, index=True,
        nullable=False, default=uuid.uuid4,
    )
    title: Mapped[str | None] = mapped_column(String(500), nullable=True)
    author: Mapped[str | None] = mapped_column(String(500), nullable=True)
    genre: Mapped[str | None] = mapped_column(String(200), nullable=True)
    publication_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return f"<Book id={self.id} title={self.title!r}>"

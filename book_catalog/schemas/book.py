"""Book Schemas: Pydantic models for the books collection boundary.

Invariants:
    - JSON keys are camelCase (publicationDate, createdAt, totalBooks)
    - BookDraft drops unknown keys and never fails on a missing field
    - BookDraft casts numbers to strings for text fields

Design Decisions:
    - populate_by_name: ORM attributes (snake_case) and JSON aliases both accepted
    - BookDraft is the store's cast step, not a request validator: every field
      is optional and the only rejections are uncastable values
"""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class BookDraft(BaseModel):
    """Book fields as accepted on insert."""
    model_config = ConfigDict(
        populate_by_name=True, extra="ignore", coerce_numbers_to_str=True,
    )

    title: str | None = None
    author: str | None = None
    genre: str | None = None
    publication_date: date | None = Field(None, alias="publicationDate")


class BookResponse(BaseModel):
    """Public Book shape."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    title: str | None = None
    author: str | None = None
    genre: str | None = None
    publication_date: date | None = Field(None, alias="publicationDate")
    created_at: datetime = Field(alias="createdAt")


class BookPageResponse(BaseModel):
    """One pagination window plus the collection count."""
    model_config = ConfigDict(populate_by_name=True)

    books: list[BookResponse]
    total_books: int = Field(alias="totalBooks")


class ErrorResponse(BaseModel):
    message: str

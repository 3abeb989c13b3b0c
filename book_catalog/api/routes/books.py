"""Books Routes: create and list endpoints for the books collection.

Invariants:
    - Raw query params go through query_builder; routes never build predicates
    - GET /books is the combined filter/sort/paginate listing (page, limit, sort)
    - Store failures answer 500 and shape failures 400, via the global handlers

Design Decisions:
    - Query params declared as optional strings: the builder owns parsing and
      defaulting, so a non-numeric page falls back instead of failing with 422
    - The plain "list all" listing has no route; GET /books answers with the
      combined path
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status

from book_catalog.core import query_builder
from book_catalog.schemas.book import (
    BookPageResponse, BookResponse, ErrorResponse,
)
from book_catalog.services.book_service import BookService
from book_catalog.api.dependencies import get_book_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/books", tags=["books"])

_ERRORS = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _params(**values: str | None) -> dict[str, str]:
    return {k: v for k, v in values.items() if v is not None}


@router.post(
    "", response_model=BookResponse,
    status_code=status.HTTP_201_CREATED, responses=_ERRORS,
)
async def create_book(
    book_data: dict[str, Any] = Body(...),
    service: BookService = Depends(get_book_service),
):
    """Create a book from its fields."""
    book = await service.create(book_data)
    return BookResponse.model_validate(book)


@router.get("", response_model=list[BookResponse], responses=_ERRORS)
async def list_books(
    page: str | None = Query(None),
    limit: str | None = Query(None),
    sort: str | None = Query(None, description="asc or desc, on createdAt"),
    service: BookService = Depends(get_book_service),
):
    """List books ordered by creation time, one window at a time."""
    query = query_builder.build_combined_query(
        _params(page=page, limit=limit, sort=sort),
    )
    books = await service.list_combined(query)
    return [BookResponse.model_validate(b) for b in books]


@router.get("/filter", response_model=list[BookResponse], responses=_ERRORS)
async def filter_books(
    title: str | None = Query(None),
    author: str | None = Query(None),
    genre: str | None = Query(None),
    publication_date: str | None = Query(None, alias="publicationDate"),
    service: BookService = Depends(get_book_service),
):
    """Books whose title/author/genre contain the given text (any case)
    and whose publicationDate equals the given date."""
    query = query_builder.build_filter_query(_params(
        title=title, author=author, genre=genre,
        publicationDate=publication_date,
    ))
    books = await service.list_filtered(query)
    return [BookResponse.model_validate(b) for b in books]


@router.get("/paginate", response_model=BookPageResponse, responses=_ERRORS)
async def paginate_books(
    page: str | None = Query(None),
    page_size: str | None = Query(None, alias="pageSize"),
    service: BookService = Depends(get_book_service),
):
    """One page of books plus the total count."""
    query = query_builder.build_paginated_query(
        _params(page=page, pageSize=page_size),
    )
    result = await service.list_paginated(query)
    return BookPageResponse(
        books=[BookResponse.model_validate(b) for b in result.books],
        total_books=result.total_books,
    )


@router.get("/sort", response_model=list[BookResponse], responses=_ERRORS)
async def sort_books(
    sort: str | None = Query(None, description="field name, default title"),
    order: str | None = Query(None, description="desc for descending"),
    service: BookService = Depends(get_book_service),
):
    """All books ordered on one field."""
    query = query_builder.build_sorted_query(_params(sort=sort, order=order))
    books = await service.list_sorted(query)
    return [BookResponse.model_validate(b) for b in books]

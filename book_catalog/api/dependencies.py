"""FastAPI dependencies: hand the process-wide store to request handlers.

Invariants:
    - The store is built once in the lifespan and kept on app.state.store
    - No module-level store or session singleton
"""

from fastapi import Depends, Request

from book_catalog.core.store_protocols import DocumentStore
from book_catalog.services.book_service import BookService


def get_store(request: Request) -> DocumentStore:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Document store not initialized")
    return store


def get_book_service(store: DocumentStore = Depends(get_store)) -> BookService:
    return BookService(store)

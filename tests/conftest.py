"""Shared fixtures: in-memory document store, service, and API client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The API client runs against app.state.store set to the test store
    - The app lifespan is not run (ASGITransport does not send lifespan events)
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from book_catalog.infrastructure.database import DatabaseSessionManager
from book_catalog.infrastructure.document_store import SqlAlchemyDocumentStore
from book_catalog.main import app
from book_catalog.services.book_service import BookService

SEED_BOOKS = [
    {"title": "Dune", "author": "Frank Herbert", "genre": "Science Fiction",
     "publicationDate": "1965-08-01"},
    {"title": "The Hobbit", "author": "J.R.R. Tolkien", "genre": "Fantasy",
     "publicationDate": "1937-09-21"},
    {"title": "Neuromancer", "author": "William Gibson", "genre": "Cyberpunk",
     "publicationDate": "1984-07-01"},
    {"title": "Foundation", "author": "Isaac Asimov", "genre": "Science Fiction",
     "publicationDate": "1951-06-01"},
    {"title": "Hyperion", "author": "Dan Simmons", "genre": "Science Fiction",
     "publicationDate": "1989-05-26"},
]


@pytest.fixture
async def db():
    manager = DatabaseSessionManager(
        "sqlite+aiosqlite:///:memory:", poolclass=StaticPool,
    )
    await manager.create_schema()
    yield manager
    await manager.dispose()


@pytest.fixture
def store(db):
    return SqlAlchemyDocumentStore(db)


@pytest.fixture
def service(store):
    return BookService(store)


@pytest.fixture
async def seed_books(store):
    """Insert SEED_BOOKS in order and return the stored books."""
    return [await store.insert(doc) for doc in SEED_BOOKS]


@pytest.fixture
async def client(store):
    """API client wired to the test store."""
    app.state.store = store
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    del app.state.store

"""Book Catalog API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CatalogError to {"message"} JSON responses
    - The store handle is built once in the lifespan and kept on app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - serve() runs uvicorn on the configured port (default 3000)
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from book_catalog import __version__
from book_catalog.api.error_handlers import register_error_handlers
from book_catalog.api.routes import books, health
from book_catalog.config import get_settings
from book_catalog.infrastructure.database import DatabaseSessionManager
from book_catalog.infrastructure.document_store import SqlAlchemyDocumentStore
from book_catalog.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_schema:
        await db.create_schema()
    app.state.store = SqlAlchemyDocumentStore(db)
    logger.info(
        f"Book catalog runs on port {settings.port}",
        extra={"port": settings.port},
    )
    yield
    logger.info("Book catalog shutting down")
    await db.dispose()


app = FastAPI(
    title="Book Catalog API", version=__version__, lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(books.router)

register_error_handlers(app)


def serve() -> None:
    """Console entry point: run the API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "book_catalog.main:app", host=settings.host, port=settings.port,
    )


if __name__ == "__main__":
    serve()

"""ORM Models: SQLAlchemy declarative models.

All models imported here so Base.metadata is populated before create_all
or Alembic autogenerate runs.
"""

from book_catalog.models.book import Book  # noqa: F401

"""Database Infrastructure: SQLAlchemy declarative base for the books table."""

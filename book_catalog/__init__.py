"""Book Catalog: create and query book records over a document collection."""

__version__ = "1.0.0"

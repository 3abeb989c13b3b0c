"""Services Layer: orchestrates the Query Builder and the document store."""

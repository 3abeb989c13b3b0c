"""Error Hierarchy: typed, categorized exceptions for every catalog failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Exactly two concrete kinds: ValidationError (400) and StoreError (500)
    - to_response() produces the REST envelope {"message": str}

Design Decisions:
    - Single hierarchy with CatalogError base: one FastAPI handler catches all
    - No "not found" kind: no single-book lookup is exposed
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    STORE = "store"


class CatalogError(Exception):
    """Base exception for all catalog errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"message": self.message}


# --- Domain Errors (400-level) ----------------------------------------------

class ValidationError(CatalogError):
    """Book data could not be cast to the stored shape."""
    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.field = field


# --- Infrastructure Errors (500-level) --------------------------------------

class StoreError(CatalogError):
    """Document store connectivity or query execution failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            message, "STORE_ERROR", ErrorCategory.STORE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation

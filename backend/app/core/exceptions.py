"""
Export error taxonomy

ExportValidationError and its subclasses are caller mistakes (HTTP 400 with a
machine-readable code). UpstreamStoreError and EncodingError are server-side
failures surfaced as 5xx.
"""
from typing import Iterable, List


class ExportError(Exception):
    """Base exception for all export errors."""


class ExportValidationError(ExportError):
    """Raised when an export request cannot be honoured as given."""

    code = "validation_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message}


class NoSelectionError(ExportValidationError):
    """Raised when an export would contain zero orders."""

    code = "no_selection"

    def __init__(self, message: str = "No orders selected for export"):
        super().__init__(message)


class NoColumnsError(ExportValidationError):
    """Raised when the requested columns resolve to nothing."""

    code = "no_columns"

    def __init__(self, message: str = "No columns selected for export"):
        super().__init__(message)


class UnknownColumnError(ExportValidationError):
    """Raised when a requested column id is not in the registry."""

    code = "unknown_column"

    def __init__(self, column_ids: Iterable[str]):
        self.column_ids: List[str] = sorted(column_ids)
        super().__init__(f"Unknown column id(s): {', '.join(self.column_ids)}")


class DuplicateSelectionError(ExportValidationError):
    """Raised when the same order id is selected more than once."""

    code = "duplicate_selection"

    def __init__(self, order_ids: Iterable[int]):
        self.order_ids: List[int] = sorted(order_ids)
        super().__init__(
            f"Order id(s) selected more than once: {', '.join(str(i) for i in self.order_ids)}"
        )


class UpstreamStoreError(ExportError):
    """Raised when orders cannot be read from the database."""


class EncodingError(ExportError):
    """Raised when rows cannot be encoded into the CSV payload."""

from __future__ import annotations

from enum import Enum


class ErrorCategory(str, Enum):
    """Classification for error logging."""

    VALIDATION = "validation"
    LOOKUP = "lookup"


class InvalidDocumentError(ValueError):
    """Raised when something that is not a document is handed to the store."""

    category = ErrorCategory.VALIDATION

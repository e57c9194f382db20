"""In-memory document store.

Documents are kept in a plain dictionary keyed by id and queried with
optional, independently combinable search filters. Nothing is persisted and
no I/O happens on import.
"""

from .models import Author, Document, SearchRequest
from .store import DocumentStore

__all__ = [
    "Author",
    "Document",
    "DocumentStore",
    "SearchRequest",
    "__version__",
]

__version__ = "0.1.0"

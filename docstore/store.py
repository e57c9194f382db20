from __future__ import annotations

import logging
import random
import sys
import uuid
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import TextIO

from . import metrics
from .config import Settings, get_settings
from .errors import ErrorCategory, InvalidDocumentError
from .models import Author, Document, SearchRequest

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
IdFactory = Callable[[], str]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


class DocumentStore:
    """Dictionary-backed document storage with upsert, lookup and search.

    Not thread-safe: callers sharing a store across threads must serialise
    access themselves.
    """

    def __init__(
        self,
        clock: Clock | None = None,
        id_factory: IdFactory | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._clock = clock or _utcnow
        self._id_factory = id_factory or _new_id
        self._settings = settings or get_settings()
        self._documents: dict[str, Document] = {}

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._documents

    def save(self, document: Document) -> Document:
        """Insert or replace ``document`` and return it.

        A missing or empty ``id`` is replaced with a generated one. ``created``
        is reset to the current time on every call, updates included.
        """

        if not isinstance(document, Document):
            logger.warning(
                "save_rejected",
                extra={
                    "event_type": "save_rejected",
                    "error_category": InvalidDocumentError.category.value,
                },
            )
            raise InvalidDocumentError(f"expected a Document, got {type(document).__name__}")

        if not document.id:
            document.id = self._id_factory()
        document.created = self._clock()
        self._documents[document.id] = document

        metrics.documents_saved_total.inc()
        metrics.stored_documents.set(len(self._documents))
        logger.debug(
            "document_saved",
            extra={"event_type": "document_saved", "document_id": document.id},
        )
        return document

    def search(self, request: SearchRequest | None) -> list[Document]:
        """Return every stored document that satisfies ``request``."""

        request = request or SearchRequest()
        with metrics.search_ms.time():
            found = [doc for doc in self._documents.values() if _matches(doc, request)]
        metrics.searches_total.inc()
        logger.debug(
            "documents_searched",
            extra={"event_type": "documents_searched", "match_count": len(found)},
        )
        return found

    def find_by_id(self, doc_id: str) -> Document | None:
        doc = self._documents.get(doc_id)
        if doc is None:
            logger.debug(
                "document_not_found",
                extra={
                    "event_type": "document_not_found",
                    "document_id": doc_id,
                    "error_category": ErrorCategory.LOOKUP.value,
                },
            )
        return doc

    def generate_random(self, count: int) -> list[Document]:
        """Fill the store with ``count`` synthetic documents.

        The documents are inserted directly rather than through :meth:`save`
        so that their back-dated ``created`` values are kept.
        """

        if count < 0:
            raise ValueError("count must be non-negative")

        now = self._clock()
        max_age = self._settings.random_max_age_seconds
        generated: list[Document] = []
        for i in range(count):
            author = Author(id=_new_id(), name=f"Author {i}")
            doc = Document(
                id=_new_id(),
                title=f"Title {i}",
                content=f"This is the content of document {i}",
                author=author,
                created=now - timedelta(seconds=random.randrange(max_age)),
            )
            self._documents[doc.id] = doc
            generated.append(doc)

        metrics.documents_generated_total.inc(count)
        metrics.stored_documents.set(len(self._documents))
        logger.info(
            "documents_generated",
            extra={"event_type": "documents_generated", "match_count": count},
        )
        return generated

    def dump(self, stream: TextIO | None = None) -> None:
        """Write one line per stored document to ``stream`` (stdout by default)."""

        out = stream or sys.stdout
        for doc in self._documents.values():
            out.write(f"{doc!r}\n")


def _matches(doc: Document, request: SearchRequest) -> bool:
    # Documents missing a field never satisfy a filter on that field.
    if request.title_prefixes is not None:
        if doc.title is None or not any(doc.title.startswith(p) for p in request.title_prefixes):
            return False
    if request.contains_contents is not None:
        if doc.content is None or not any(s in doc.content for s in request.contains_contents):
            return False
    if request.author_ids is not None:
        if doc.author is None or doc.author.id not in request.author_ids:
            return False
    if request.created_from is not None:
        if doc.created is None or doc.created < request.created_from:
            return False
    if request.created_to is not None:
        if doc.created is None or doc.created > request.created_to:
            return False
    return True

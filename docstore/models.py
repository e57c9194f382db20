"""Value types held and queried by :class:`~docstore.store.DocumentStore`."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone


def as_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to a naive ``value``; aware values are returned unchanged."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@dataclass
class Author:
    id: str | None = None
    name: str | None = None


@dataclass
class Document:
    """A stored record.

    Every field may be left unset when building a document. ``id`` is filled
    in by the store when missing and ``created`` is stamped on every save.
    """

    id: str | None = None
    title: str | None = None
    content: str | None = None
    author: Author | None = None
    created: datetime | None = None


@dataclass
class SearchRequest:
    """Filters for :meth:`DocumentStore.search`.

    ``None`` leaves a field unconstrained. An empty list is still a
    constraint, and one that no document satisfies. List filters match when
    any element matches; the date bounds are inclusive. Naive date bounds
    are read as UTC, the zone the store stamps documents in.
    """

    title_prefixes: list[str] | None = None
    contains_contents: list[str] | None = None
    author_ids: list[str] | None = None
    created_from: datetime | None = None
    created_to: datetime | None = None

    def __post_init__(self) -> None:
        self.created_from = as_utc(self.created_from)
        self.created_to = as_utc(self.created_to)

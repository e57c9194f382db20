from __future__ import annotations

import json
from datetime import datetime

import typer

from . import metrics
from .config import Settings
from .logging import configure_logging
from .models import SearchRequest, as_utc
from .store import DocumentStore

app = typer.Typer(help="In-memory document store utility")


def _build_store(count: int | None, verbose: bool) -> DocumentStore:
    settings = Settings()
    configure_logging(settings.log_level, settings.log_format)
    if verbose:
        typer.echo(settings.model_dump_json(indent=2))
    store = DocumentStore(settings=settings)
    store.generate_random(count if count is not None else settings.demo_document_count)
    return store


def _print_metrics() -> None:
    typer.echo(json.dumps(metrics.snapshot(), indent=2))


def _parse_timestamp(value: str | None, name: str) -> datetime | None:
    if value is None:
        return None
    # fromisoformat only accepts a trailing "Z" from Python 3.11 on.
    text = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise typer.BadParameter(f"not an ISO-8601 timestamp: {value!r}", param_hint=name) from exc
    return as_utc(parsed)


@app.command()
def demo(
    count: int | None = typer.Option(None, min=0, help="Number of documents to generate"),
    verbose: bool = typer.Option(False, help="Print effective settings and metrics"),
) -> None:
    """Fill a store with random documents and print them."""
    store = _build_store(count, verbose)
    store.dump()
    if verbose:
        _print_metrics()


@app.command()
def search(
    count: int | None = typer.Option(None, min=0, help="Number of documents to generate"),
    title_prefix: list[str] | None = typer.Option(None, help="Title prefix (repeatable)"),
    contains: list[str] | None = typer.Option(None, help="Content substring (repeatable)"),
    author_id: list[str] | None = typer.Option(None, help="Author id (repeatable)"),
    created_from: str | None = typer.Option(None, help="Inclusive lower bound, ISO-8601"),
    created_to: str | None = typer.Option(None, help="Inclusive upper bound, ISO-8601"),
    verbose: bool = typer.Option(False, help="Print effective settings and metrics"),
) -> None:
    """Search a store of random documents."""
    request = SearchRequest(
        title_prefixes=list(title_prefix) if title_prefix else None,
        contains_contents=list(contains) if contains else None,
        author_ids=list(author_id) if author_id else None,
        created_from=_parse_timestamp(created_from, "--created-from"),
        created_to=_parse_timestamp(created_to, "--created-to"),
    )
    store = _build_store(count, verbose)
    found = store.search(request)
    for doc in found:
        typer.echo(repr(doc))
    typer.echo(f"{len(found)} document(s) matched")
    if verbose:
        _print_metrics()


def main() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    main()

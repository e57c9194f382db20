"""In-process store metrics.

Each metric registers itself by name so the whole set can be read back with
:func:`snapshot`.
"""

from __future__ import annotations

import time
from contextlib import contextmanager

_registry: dict[str, Counter | Gauge | Timer] = {}


class Counter:
    def __init__(self, name: str) -> None:
        self.name = name
        self.value = 0
        _registry[name] = self

    def inc(self, n: int = 1) -> None:
        self.value += n

    def read(self) -> int:
        return self.value


class Gauge:
    def __init__(self, name: str) -> None:
        self.name = name
        self.value = 0
        _registry[name] = self

    def set(self, v: int) -> None:
        self.value = v

    def read(self) -> int:
        return self.value


class Timer:
    """Keeps the duration of the most recent timed block, in milliseconds."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.last_ms: float | None = None
        self._start: float | None = None
        _registry[name] = self

    def start(self) -> None:
        self._start = time.perf_counter()

    def stop(self) -> float | None:
        if self._start is None:
            return None
        self.last_ms = (time.perf_counter() - self._start) * 1000
        self._start = None
        return self.last_ms

    def read(self) -> float | None:
        return self.last_ms

    @contextmanager
    def time(self):  # noqa: ANN201
        self.start()
        try:
            yield
        finally:
            self.stop()


def snapshot() -> dict[str, float | int | None]:
    """Current value of every registered metric."""
    return {name: metric.read() for name, metric in _registry.items()}


documents_saved_total = Counter("documents_saved_total")
documents_generated_total = Counter("documents_generated_total")
searches_total = Counter("searches_total")
stored_documents = Gauge("stored_documents")
search_ms = Timer("search_ms")

"""RouteCollection — ordered, append-only store of declared routes.

Keeps one counter per HTTP method, updated in the same step as the
append, so ``count_for()`` never has to rescan.
"""

import threading
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from routeaudit.routing.route import HTTPMethod, RouteDefinition


@dataclass(frozen=True, slots=True)
class FileDefect:
    """A problem that belongs to a whole declaration file, not one route."""

    source_file: str
    message: str


class RouteCollection:
    """Ordered collection of ``RouteDefinition`` records.

    Usage::

        collection = RouteCollection()
        collection.append(route)
        collection.count_for(HTTPMethod.GET)
        for route in collection:
            ...

    Iteration is restartable and reflects the collection at call time.
    """

    __slots__ = ("_counts", "_file_defects", "_lock", "_routes", "_sources")

    def __init__(self) -> None:
        self._routes: list[RouteDefinition] = []
        self._counts: dict[HTTPMethod, int] = dict.fromkeys(HTTPMethod, 0)
        self._file_defects: list[FileDefect] = []
        self._sources: list[str] = []
        self._lock = threading.Lock()

    def append(self, route: RouteDefinition) -> None:
        with self._lock:
            self._routes.append(route)
            self._counts[route.method] += 1

    def extend(self, routes: Iterable[RouteDefinition]) -> None:
        """Append a batch in one step, e.g. everything one source declared."""
        batch = list(routes)
        with self._lock:
            for route in batch:
                self._routes.append(route)
                self._counts[route.method] += 1

    def iterate(self) -> Iterator[RouteDefinition]:
        return iter(self._routes)

    def __iter__(self) -> Iterator[RouteDefinition]:
        return self.iterate()

    def size(self) -> int:
        return len(self._routes)

    def __len__(self) -> int:
        return self.size()

    def count_for(self, method: HTTPMethod | str) -> int:
        return self._counts[HTTPMethod.parse(method)]

    def counts(self) -> dict[HTTPMethod, int]:
        """Per-method counts in declaration order of ``HTTPMethod``."""
        return dict(self._counts)

    # -- file-scoped bookkeeping -------------------------------------------

    def add_source(self, source_file: str) -> None:
        with self._lock:
            self._sources.append(source_file)

    @property
    def sources(self) -> tuple[str, ...]:
        return tuple(self._sources)

    def add_file_defect(self, source_file: str, message: str) -> None:
        with self._lock:
            self._file_defects.append(FileDefect(source_file, message))

    @property
    def file_defects(self) -> tuple[FileDefect, ...]:
        return tuple(self._file_defects)

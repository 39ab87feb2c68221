"""RouteRegistrar — the ``router`` object declaration files talk to.

A declaration file calls one verb method per route::

    router.get("/users/{id}", {"uses": "UserController@show"})
    router.post("/users", {"uses": "UserController@store", "middleware": ["auth"]})
    router.get("/health", lambda request: "ok")

Each call builds exactly one ``RouteDefinition`` for the file being
loaded.  Definitions are buffered per file and handed to the collection
by ``flush()`` once the file is done.
"""

import logging
from typing import Any

from routeaudit.routing.collection import RouteCollection
from routeaudit.routing.route import HTTPMethod, RouteDefinition

logger = logging.getLogger("routeaudit.routing")


class RouteRegistrar:
    """Registration surface bound to one declaration source at a time."""

    __slots__ = ("_admin_suffix", "_collection", "_pending", "_source_file")

    def __init__(self, collection: RouteCollection, *, admin_suffix: str = "_admin.py") -> None:
        self._collection = collection
        self._admin_suffix = admin_suffix
        self._source_file: str | None = None
        self._pending: list[RouteDefinition] = []

    def begin(self, source_file: str) -> None:
        """Start collecting routes for *source_file*."""
        if self._pending:
            msg = f"Routes from {self._source_file!r} were not flushed."
            raise RuntimeError(msg)
        self._source_file = source_file

    def flush(self) -> int:
        """Move the buffered routes into the collection. Returns how many."""
        count = len(self._pending)
        self._collection.extend(self._pending)
        self._pending = []
        self._source_file = None
        return count

    def declare(self, method: HTTPMethod | str, pattern: str, target: Any) -> RouteDefinition:
        if self._source_file is None:
            msg = "No declaration source is being loaded; call begin() first."
            raise RuntimeError(msg)
        route = RouteDefinition.from_declaration(
            self._source_file,
            method,
            pattern,
            target,
            admin_suffix=self._admin_suffix,
        )
        logger.debug("%s %s -> %s", route.method.value, pattern, route.target_label)
        self._pending.append(route)
        return route

    def get(self, pattern: str, target: Any) -> None:
        self.declare(HTTPMethod.GET, pattern, target)

    def post(self, pattern: str, target: Any) -> None:
        self.declare(HTTPMethod.POST, pattern, target)

    def put(self, pattern: str, target: Any) -> None:
        self.declare(HTTPMethod.PUT, pattern, target)

    def patch(self, pattern: str, target: Any) -> None:
        self.declare(HTTPMethod.PATCH, pattern, target)

    def delete(self, pattern: str, target: Any) -> None:
        self.declare(HTTPMethod.DELETE, pattern, target)

    def head(self, pattern: str, target: Any) -> None:
        self.declare(HTTPMethod.HEAD, pattern, target)

    def options(self, pattern: str, target: Any) -> None:
        self.declare(HTTPMethod.OPTIONS, pattern, target)

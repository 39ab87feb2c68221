"""Declaration sources — locating route files and loading them.

A *declaration source* is one Python file in the routes directory whose
module body registers routes on a global ``router``::

    # routes/api_users.py
    router.get("/users", {"uses": "UserController@index"})
    router.get("/users/{id}", {"uses": "UserController@show"})

Loading executes the file with ``runpy``.  A file that raises while
loading is recorded as a file-level defect and the run moves on.
"""

import logging
import runpy
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from routeaudit.errors import SourceDirectoryError
from routeaudit.routing.collection import RouteCollection
from routeaudit.routing.registrar import RouteRegistrar

logger = logging.getLogger("routeaudit.sources")


@dataclass(frozen=True, slots=True)
class DeclarationSource:
    """One route declaration file."""

    name: str
    path: Path


def iter_declaration_sources(
    routes_dir: str | Path,
    *,
    prefix: str = "api_",
    suffix: str = ".py",
) -> Iterator[DeclarationSource]:
    """Yield route files in *routes_dir*, sorted by file name.

    Skips directories, dot files, and files without *prefix* / *suffix*.

    Raises:
        SourceDirectoryError: If the directory is missing or unreadable.
    """
    directory = Path(routes_dir)
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        msg = f"Cannot read route directory {str(directory)!r}: {exc.strerror or exc}"
        raise SourceDirectoryError(msg) from exc

    for entry in entries:
        name = entry.name
        if name.startswith(".") or not entry.is_file():
            continue
        if not name.startswith(prefix) or not name.endswith(suffix):
            continue
        yield DeclarationSource(name=name, path=entry)


def load_source(
    source: DeclarationSource,
    collection: RouteCollection,
    *,
    admin_suffix: str = "_admin.py",
) -> int:
    """Execute *source* against a fresh registrar and merge its routes.

    Returns the number of routes the file declared.  Routes declared
    before a failure are kept.
    """
    registrar = RouteRegistrar(collection, admin_suffix=admin_suffix)
    registrar.begin(source.name)
    collection.add_source(source.name)
    try:
        runpy.run_path(str(source.path), init_globals={"router": registrar})
    except (Exception, SystemExit) as exc:
        message = f'Failed to load route file "{source.name}": {type(exc).__name__}: {exc}'
        logger.warning(message)
        collection.add_file_defect(source.name, message)
    count = registrar.flush()
    logger.debug("Loaded %d routes from %s", count, source.name)
    return count


def load_sources(
    routes_dir: str | Path,
    collection: RouteCollection,
    *,
    prefix: str = "api_",
    suffix: str = ".py",
    admin_suffix: str = "_admin.py",
) -> int:
    """Load every declaration source in *routes_dir*. Returns the file count."""
    file_count = 0
    for source in iter_declaration_sources(routes_dir, prefix=prefix, suffix=suffix):
        load_source(source, collection, admin_suffix=admin_suffix)
        file_count += 1
    return file_count

"""Shared fixtures: temporary route directories and controller packages."""

import importlib
import sys
import textwrap
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

CONTROLLERS_PACKAGE = "audit_fixture_controllers"

_CONTROLLERS_INIT = """
class FooController:
    def bar(self):
        return "bar"


class UserController:
    def index(self):
        return []

    def show(self, id):
        return id

    label = "users"


NotAController = 42
"""

_CONTROLLERS_ADMIN = """
class DashboardController:
    def index(self):
        return "dashboard"
"""


@pytest.fixture
def routes_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "routes"
    directory.mkdir()
    return directory


@pytest.fixture
def write_route_file(routes_dir: Path) -> Callable[[str, str], Path]:
    """Write a declaration file into ``routes_dir``; source is dedented."""

    def _write(name: str, source: str) -> Path:
        path = routes_dir / name
        path.write_text(textwrap.dedent(source))
        return path

    return _write


@pytest.fixture
def controllers_package(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[str]:
    """An importable controller package with ``FooController``,
    ``UserController`` and ``admin.DashboardController``.
    """
    root = tmp_path / "pkgroot"
    package = root / CONTROLLERS_PACKAGE
    package.mkdir(parents=True)
    (package / "__init__.py").write_text(_CONTROLLERS_INIT)
    (package / "admin.py").write_text(_CONTROLLERS_ADMIN)
    monkeypatch.syspath_prepend(str(root))
    importlib.invalidate_caches()

    yield CONTROLLERS_PACKAGE

    for name in list(sys.modules):
        if name == CONTROLLERS_PACKAGE or name.startswith(CONTROLLERS_PACKAGE + "."):
            del sys.modules[name]

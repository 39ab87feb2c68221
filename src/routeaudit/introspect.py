"""Controller introspection — answers "does controller C have action A?".

The validator only depends on the ``TypeIntrospector`` shape.  Two
implementations ship:

- ``ImportIntrospector`` imports controller classes from a package.
- ``RegistryIntrospector`` answers from a static symbol table.

``has_method`` raises ``IntrospectionError`` when the type itself cannot
be found, so "no such controller" and "no such action" stay distinct.
"""

import importlib
import inspect
from collections.abc import Iterable, Mapping
from typing import Protocol, runtime_checkable

from routeaudit.errors import IntrospectionError


@runtime_checkable
class TypeIntrospector(Protocol):
    """Anything that can answer existence questions about controller types."""

    def exists(self, type_name: str) -> bool: ...

    def has_method(self, type_name: str, method_name: str) -> bool: ...


class ImportIntrospector:
    """Resolve controllers by importing them relative to *package*.

    ``"UserController"`` resolves to ``<package>.UserController`` and
    ``"admin.UserController"`` to ``UserController`` in module
    ``<package>.admin``.
    """

    __slots__ = ("_cache", "package")

    def __init__(self, package: str) -> None:
        self.package = package
        self._cache: dict[str, type | IntrospectionError] = {}

    def exists(self, type_name: str) -> bool:
        try:
            self._resolve(type_name)
        except IntrospectionError:
            return False
        return True

    def has_method(self, type_name: str, method_name: str) -> bool:
        cls = self._resolve(type_name)
        return callable(getattr(cls, method_name, None))

    def _resolve(self, type_name: str) -> type:
        cached = self._cache.get(type_name)
        if cached is None:
            try:
                cached = self._load(type_name)
            except IntrospectionError as exc:
                cached = exc
            self._cache[type_name] = cached
        if isinstance(cached, IntrospectionError):
            raise IntrospectionError(str(cached))
        return cached

    def _load(self, type_name: str) -> type:
        parts = type_name.split(".")
        if not all(part.isidentifier() for part in parts):
            msg = f'Invalid controller name "{type_name}"'
            raise IntrospectionError(msg)

        *submodules, class_name = parts
        module_path = ".".join([self.package, *submodules])
        qualified = f"{module_path}.{class_name}"
        try:
            module = importlib.import_module(module_path)
        except ModuleNotFoundError as exc:
            if not _is_module_or_parent(exc.name, module_path):
                msg = f'Class "{qualified}" could not be loaded: {type(exc).__name__}: {exc}'
                raise IntrospectionError(msg) from exc
            msg = f'Class "{qualified}" does not exist'
            raise IntrospectionError(msg) from exc
        except Exception as exc:
            msg = f'Class "{qualified}" could not be loaded: {type(exc).__name__}: {exc}'
            raise IntrospectionError(msg) from exc

        obj = getattr(module, class_name, None)
        if obj is None:
            msg = f'Class "{qualified}" does not exist'
            raise IntrospectionError(msg)
        if not inspect.isclass(obj):
            msg = f'"{qualified}" is not a class'
            raise IntrospectionError(msg)
        return obj


class RegistryIntrospector:
    """Answer from a fixed ``{type_name: method names}`` table.

    Usage::

        introspector = RegistryIntrospector({
            "UserController": ["index", "show"],
        })
    """

    __slots__ = ("_types",)

    def __init__(self, types: Mapping[str, Iterable[str]]) -> None:
        self._types: dict[str, frozenset[str]] = {
            name: frozenset(methods) for name, methods in types.items()
        }

    def exists(self, type_name: str) -> bool:
        return type_name in self._types

    def has_method(self, type_name: str, method_name: str) -> bool:
        methods = self._types.get(type_name)
        if methods is None:
            msg = f'Class "{type_name}" does not exist'
            raise IntrospectionError(msg)
        return method_name in methods


def _is_module_or_parent(missing: str | None, module_path: str) -> bool:
    """True when *missing* is *module_path* itself or one of its packages."""
    if missing is None:
        return False
    return module_path == missing or module_path.startswith(missing + ".")

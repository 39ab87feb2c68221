"""RouteDefinition — one declared route, parsed as far as it will go.

Construction never raises.  Every inconsistency found while parsing is
appended to ``defects`` so the audit can keep going and report all of
them at once.
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from routeaudit.routing.params import RouteParameter, extract_parameters


class HTTPMethod(Enum):
    """The HTTP verbs a declaration file can register routes for."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

    @classmethod
    def parse(cls, value: "str | HTTPMethod") -> "HTTPMethod":
        """Accept an enum member or a case-insensitive verb name."""
        if isinstance(value, cls):
            return value
        return cls(str(value).upper())


# Marker segment for admin routes
ADMIN_SEGMENT = "admin/"


@dataclass(slots=True)
class RouteDefinition:
    """A declared route.

    Use ``RouteDefinition.from_declaration()`` to build one from a raw
    declaration; the plain constructor performs no checks.  After
    construction only ``defects`` changes, and only by appending.
    """

    method: HTTPMethod
    raw_pattern: str
    source_file: str
    is_admin: bool = False
    parameters: tuple[RouteParameter, ...] = ()
    uses_dynamic_handler: bool = False
    controller: str | None = None
    action: str | None = None
    middlewares: list[str] = field(default_factory=list)
    defects: list[str] = field(default_factory=list)

    @classmethod
    def from_declaration(
        cls,
        source_file: str,
        method: HTTPMethod | str,
        raw_pattern: str,
        target: Any,
        *,
        admin_suffix: str = "_admin.py",
    ) -> "RouteDefinition":
        """Parse one ``(method, pattern, target)`` declaration.

        Checks, all independent of each other:

        1. **Admin placement**: a pattern containing ``admin/`` must be
           declared in a file ending with *admin_suffix*.
        2. **Parameter grammar**: every ``{...}`` must be ``{alnum}``.
        3. **Target**: a callable is a dynamic handler; a mapping must
           carry ``uses: "Controller@action"`` and may carry ``middleware``.
        """
        route = cls(
            method=HTTPMethod.parse(method),
            raw_pattern=raw_pattern,
            source_file=source_file,
            is_admin=ADMIN_SEGMENT in raw_pattern,
        )
        if route.is_admin and not source_file.endswith(admin_suffix):
            route.add_defect(
                f'Route "{raw_pattern}" in file "{source_file}" '
                f"is an admin route but is in a non-admin file"
            )
        route._parse_parameters()
        route._parse_target(target)
        return route

    @property
    def has_static_target(self) -> bool:
        """True when both controller and action were parsed."""
        return (
            not self.uses_dynamic_handler
            and self.controller is not None
            and self.action is not None
        )

    @property
    def target_label(self) -> str:
        """Short human-readable target (``Controller@action``, ``<dynamic>``, ``?``)."""
        if self.uses_dynamic_handler:
            return "<dynamic>"
        if self.has_static_target:
            return f"{self.controller}@{self.action}"
        return "?"

    def add_defect(self, message: str) -> None:
        self.defects.append(message)

    def _parse_parameters(self) -> None:
        params = extract_parameters(self.raw_pattern)
        if params is None:
            self.add_defect(
                f'Route "{self.raw_pattern}" in file "{self.source_file}" '
                f"has parameters, but the parameter grammar failed"
            )
            return
        self.parameters = params

    def _parse_target(self, target: Any) -> None:
        if isinstance(target, Mapping):
            self._parse_target_mapping(target)
        elif callable(target):
            self.uses_dynamic_handler = True
        # Anything else leaves the target unset

    def _parse_target_mapping(self, target: Mapping[str, Any]) -> None:
        middleware = target.get("middleware")
        if middleware is not None:
            self.middlewares = _normalize_middleware(middleware)
        uses = target.get("uses")
        if uses is None:
            return
        controller, sep, action = str(uses).partition("@")
        if not sep:
            self.add_defect(
                f'Route "{self.raw_pattern}" in file "{self.source_file}" '
                f'does not have a proper "uses" statement. '
                f'Expected "Controller@action", got {uses}'
            )
            return
        self.controller = controller
        self.action = action


def _normalize_middleware(middleware: str | Iterable[Any] | Callable[..., Any]) -> list[str]:
    """Middleware is collected as names only; it is never resolved."""
    if isinstance(middleware, str):
        return [middleware]
    if isinstance(middleware, Iterable):
        return [str(m) for m in middleware]
    return [str(middleware)]

"""Route target validation.

Cross-references every statically-targeted route against the available
controllers and appends a defect to each route whose target is missing.
Routes with a dynamic handler cannot be checked and are skipped.

Run it once per collection: a second pass re-derives the same verdicts
and would append them again.
"""

import logging
from dataclasses import dataclass, field

from routeaudit.introspect import TypeIntrospector
from routeaudit.routing.collection import RouteCollection
from routeaudit.routing.route import RouteDefinition

logger = logging.getLogger("routeaudit.validation")


@dataclass(slots=True)
class ValidationResult:
    """What a validation pass looked at."""

    checked: int = 0
    skipped: list[RouteDefinition] = field(default_factory=list)
    unresolved: int = 0  # no dynamic handler and no controller@action

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)


def check_route(route: RouteDefinition, introspector: TypeIntrospector) -> str | None:
    """Return the defect for *route*'s target, or ``None`` when it resolves."""
    if route.controller is None or route.action is None:
        msg = f"Route {route.raw_pattern!r} has no controller@action target to check."
        raise ValueError(msg)
    try:
        found = introspector.has_method(route.controller, route.action)
    except Exception as exc:  # lookup failures are findings, verbatim
        return str(exc)
    if found:
        return None
    return (
        f'Route "{route.raw_pattern}" in file "{route.source_file}" '
        f'expects controller "{route.controller}" to have action '
        f'"{route.action}", but it does not.'
    )


def validate(collection: RouteCollection, introspector: TypeIntrospector) -> ValidationResult:
    """Check every route target in *collection* against *introspector*.

    Mutates the ``defects`` list of failing routes in place, in
    collection order.
    """
    result = ValidationResult()
    for route in collection:
        if route.uses_dynamic_handler:
            logger.warning("Skipping %s as it uses a dynamic handler", route.raw_pattern)
            result.skipped.append(route)
            continue
        if not route.has_static_target:
            result.unresolved += 1
            continue

        result.checked += 1
        defect = check_route(route, introspector)
        if defect is not None:
            logger.debug("%s %s: %s", route.method.value, route.raw_pattern, defect)
            route.add_defect(defect)
    return result

"""Routeaudit — static audit of route declaration files.

Loads route declaration files, parses every declared route, checks each
``Controller@action`` target against the controller classes, and reports
malformed declarations, missing actions, and admin routes declared
outside admin files.

Basic usage::

    from routeaudit import AuditConfig, run_audit

    result = run_audit(AuditConfig(routes_dir="routes"))
    print(result.report.total_defects)

Or from the command line::

    routeaudit check routes --controllers app.controllers
"""

__version__ = "0.1.0"
__all__ = [
    "AuditConfig",
    "AuditResult",
    "ConfigurationError",
    "HTTPMethod",
    "ImportIntrospector",
    "IntrospectionError",
    "RegistryIntrospector",
    "Report",
    "RouteAuditError",
    "RouteCollection",
    "RouteDefinition",
    "RouteParameter",
    "RouteRegistrar",
    "SourceDirectoryError",
    "TypeIntrospector",
    "run_audit",
    "summarize",
    "validate",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routeaudit`` fast while providing a clean top-level API.
    """
    if name == "AuditConfig":
        from routeaudit.config import AuditConfig

        return AuditConfig

    if name in ("AuditResult", "run_audit"):
        from routeaudit import audit as _audit

        return getattr(_audit, name)

    if name in (
        "ConfigurationError",
        "IntrospectionError",
        "RouteAuditError",
        "SourceDirectoryError",
    ):
        from routeaudit import errors as _errors

        return getattr(_errors, name)

    if name in ("HTTPMethod", "RouteDefinition"):
        from routeaudit.routing import route as _route

        return getattr(_route, name)

    if name == "RouteParameter":
        from routeaudit.routing.params import RouteParameter

        return RouteParameter

    if name == "RouteCollection":
        from routeaudit.routing.collection import RouteCollection

        return RouteCollection

    if name == "RouteRegistrar":
        from routeaudit.routing.registrar import RouteRegistrar

        return RouteRegistrar

    if name in ("ImportIntrospector", "RegistryIntrospector", "TypeIntrospector"):
        from routeaudit import introspect as _introspect

        return getattr(_introspect, name)

    if name in ("Report", "summarize"):
        from routeaudit import report as _report

        return getattr(_report, name)

    if name == "validate":
        from routeaudit.validation import validate

        return validate

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)

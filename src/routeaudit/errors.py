"""Routeaudit exception hierarchy.

Per-route and per-file findings are never raised: they are recorded as
defects.  The exceptions here cover the conditions that stop a run before
a usable route collection exists, plus the lookup failure an introspector
reports back to the validator.
"""


class RouteAuditError(Exception):
    """Base for all routeaudit-specific errors."""


class ConfigurationError(RouteAuditError):
    """Raised when audit configuration is invalid.

    Typically raised by ``AuditConfig.__post_init__`` before any file is read.
    """


class SourceDirectoryError(RouteAuditError):
    """The route declaration directory cannot be read at all.

    The only fatal condition of a run: without the directory there is no
    collection to validate.
    """


class IntrospectionError(RouteAuditError):
    """A controller lookup failed.

    The message is copied verbatim into the owning route's defect list,
    so it must read as a complete sentence (``Class "X" does not exist``).
    """

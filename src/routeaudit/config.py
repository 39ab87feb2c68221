"""Audit configuration.

One frozen ``AuditConfig`` describes a run: where route files live, which
files count as route and admin files, where controllers are imported
from, and how chatty the output is.  Bad values fail at construction.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from routeaudit.errors import ConfigurationError

LOG_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


@dataclass(frozen=True, slots=True)
class AuditConfig:
    """Audit configuration. Immutable after creation.

    Only ``routes_dir`` is required. Override what you need::

        config = AuditConfig(routes_dir="routes", controllers_package="myapp.controllers")
    """

    # Declaration sources
    routes_dir: str | Path = "routes"
    file_prefix: str = "api_"  # Only files starting with this are route files
    file_suffix: str = ".py"

    # Admin routes must live in files ending with this suffix
    admin_suffix: str = "_admin.py"

    # Controllers are resolved relative to this importable package
    controllers_package: str = "app.controllers"

    # Output
    log_level: str = "warning"
    color: bool | None = None  # None = auto-detect from the output stream

    def __post_init__(self) -> None:
        if not self.admin_suffix:
            msg = "admin_suffix must not be empty."
            raise ConfigurationError(msg)
        if not self.file_suffix:
            msg = "file_suffix must not be empty."
            raise ConfigurationError(msg)
        if self.log_level.lower() not in LOG_LEVELS:
            allowed = ", ".join(LOG_LEVELS)
            msg = f"Unknown log level {self.log_level!r}. Expected one of: {allowed}"
            raise ConfigurationError(msg)

    @property
    def routes_path(self) -> Path:
        return Path(self.routes_dir)

    @property
    def logging_level(self) -> int:
        return LOG_LEVELS[self.log_level.lower()]

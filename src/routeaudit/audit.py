"""Audit pipeline — load, validate, summarize.

Usage::

    from routeaudit import AuditConfig, run_audit

    result = run_audit(AuditConfig(routes_dir="routes", controllers_package="app.controllers"))
    if not result.report.ok:
        ...

Phases run strictly in order: every source is loaded before validation
starts, and validation runs exactly once before the report is built.
"""

import importlib.util
import logging
from dataclasses import dataclass

from routeaudit.config import AuditConfig
from routeaudit.errors import ConfigurationError
from routeaudit.introspect import ImportIntrospector, TypeIntrospector
from routeaudit.report import Report, summarize
from routeaudit.routing.collection import RouteCollection
from routeaudit.sources import load_sources
from routeaudit.validation import ValidationResult, validate

logger = logging.getLogger("routeaudit.audit")


@dataclass(frozen=True, slots=True)
class AuditResult:
    """Everything one run produced."""

    collection: RouteCollection
    validation: ValidationResult
    report: Report


def build_introspector(config: AuditConfig) -> ImportIntrospector:
    """Create an ``ImportIntrospector`` for the configured controller package.

    Raises:
        ConfigurationError: If the package cannot be found on ``sys.path``.
    """
    package = config.controllers_package
    try:
        spec = importlib.util.find_spec(package)
    except (ImportError, ValueError) as exc:
        msg = f"Controller package {package!r} cannot be imported: {exc}"
        raise ConfigurationError(msg) from exc
    if spec is None:
        msg = f"Controller package {package!r} not found. Is it on sys.path?"
        raise ConfigurationError(msg)
    return ImportIntrospector(package)


def run_audit(
    config: AuditConfig,
    introspector: TypeIntrospector | None = None,
) -> AuditResult:
    """Run a full audit of ``config.routes_dir``.

    Raises:
        SourceDirectoryError: If the routes directory cannot be read.
        ConfigurationError: If no introspector is given and the controller
            package cannot be found.
    """
    if introspector is None:
        introspector = build_introspector(config)

    collection = RouteCollection()
    file_count = load_sources(
        config.routes_path,
        collection,
        prefix=config.file_prefix,
        suffix=config.file_suffix,
        admin_suffix=config.admin_suffix,
    )
    logger.info("%d routes parsed from %d files", collection.size(), file_count)

    validation = validate(collection, introspector)
    logger.info(
        "%d route targets checked, %d skipped", validation.checked, validation.skipped_count
    )
    return AuditResult(collection=collection, validation=validation, report=summarize(collection))

"""``routeaudit check`` — route declaration audit command.

Loads every route file, validates targets against the controller
package, and prints the report.  Exits with code 1 when defects are
found and 2 when the audit itself cannot run.
"""

import argparse
import logging
import sys

from routeaudit.audit import run_audit
from routeaudit.config import AuditConfig
from routeaudit.errors import ConfigurationError, SourceDirectoryError
from routeaudit.report import EXIT_TOOL_ERROR
from routeaudit.terminal import format_report


def config_from_args(args: argparse.Namespace) -> AuditConfig:
    return AuditConfig(
        routes_dir=args.routes_dir,
        file_prefix=args.prefix,
        admin_suffix=args.admin_suffix,
        controllers_package=getattr(args, "controllers", "app.controllers"),
        log_level=getattr(args, "log_level", "warning"),
        color=getattr(args, "color", None),
    )


def configure_logging(config: AuditConfig) -> None:
    logging.basicConfig(
        level=config.logging_level,
        format="%(levelname)s %(name)s: %(message)s",
    )


def run_check(args: argparse.Namespace) -> None:
    """Audit ``args.routes_dir`` and print the report.

    Raises ``SystemExit(1)`` when the report has defects and
    ``SystemExit(2)`` when configuration or the routes directory is
    unusable.
    """
    for path in reversed(args.path):
        sys.path.insert(0, path)

    try:
        config = config_from_args(args)
        configure_logging(config)
        result = run_audit(config)
    except (ConfigurationError, SourceDirectoryError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(EXIT_TOOL_ERROR) from exc

    print(format_report(result.report, color=config.color))
    if not result.report.ok:
        raise SystemExit(result.report.exit_code)

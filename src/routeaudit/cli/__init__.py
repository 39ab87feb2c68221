"""Routeaudit CLI — audit route declaration files against their controllers.

Entry point registered as ``routeaudit`` in ``pyproject.toml``::

    [project.scripts]
    routeaudit = "routeaudit.cli:main"
"""

import argparse
import sys

from routeaudit.config import LOG_LEVELS


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    """Arguments shared by every subcommand that reads route files."""
    parser.add_argument("routes_dir", help="Directory holding the route declaration files")
    parser.add_argument(
        "--prefix",
        default="api_",
        help="Only load files whose name starts with this (default: api_)",
    )
    parser.add_argument(
        "--admin-suffix",
        default="_admin.py",
        help="File name suffix required for admin routes (default: _admin.py)",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``routeaudit`` command."""
    parser = argparse.ArgumentParser(
        prog="routeaudit",
        description="routeaudit — static checks for route declaration files.",
    )
    parser.add_argument(
        "--log-level",
        choices=list(LOG_LEVELS),
        default="warning",
        help="Logging verbosity (default: warning)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- routeaudit check -------------------------------------------------
    check_parser = subparsers.add_parser(
        "check", help="Validate route declarations against controllers"
    )
    _add_source_arguments(check_parser)
    check_parser.add_argument(
        "--controllers",
        default="app.controllers",
        help="Importable package holding the controller classes (default: app.controllers)",
    )
    check_parser.add_argument(
        "--path",
        action="append",
        default=[],
        help="Directory to prepend to sys.path before importing controllers (repeatable)",
    )
    color = check_parser.add_mutually_exclusive_group()
    color.add_argument("--color", dest="color", action="store_true", default=None)
    color.add_argument("--no-color", dest="color", action="store_false", default=None)

    # -- routeaudit routes ------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List declared routes")
    _add_source_arguments(routes_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "check":
        from routeaudit.cli._check import run_check

        run_check(args)
    elif args.command == "routes":
        from routeaudit.cli._routes import run_routes

        run_routes(args)

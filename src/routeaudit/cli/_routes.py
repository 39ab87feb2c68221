"""``routeaudit routes`` — list declared routes.

Loads every route file and prints a table of method, path, target,
and file.  No controller lookups are made.
"""

import argparse
import sys

from routeaudit.cli._check import config_from_args, configure_logging
from routeaudit.errors import ConfigurationError, SourceDirectoryError
from routeaudit.report import EXIT_TOOL_ERROR
from routeaudit.routing.collection import RouteCollection
from routeaudit.sources import load_sources


def run_routes(args: argparse.Namespace) -> None:
    """List declared routes for ``args.routes_dir``."""
    collection = RouteCollection()
    try:
        config = config_from_args(args)
        configure_logging(config)
        load_sources(
            config.routes_path,
            collection,
            prefix=config.file_prefix,
            suffix=config.file_suffix,
            admin_suffix=config.admin_suffix,
        )
    except (ConfigurationError, SourceDirectoryError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(EXIT_TOOL_ERROR) from exc

    for file_defect in collection.file_defects:
        print(f"Warning: {file_defect.message}", file=sys.stderr)

    if not collection.size():
        print("No routes declared.")
        return

    rows: list[tuple[str, str, str, str]] = [
        (route.method.value, route.raw_pattern, route.target_label, route.source_file)
        for route in collection
    ]

    # Column widths
    max_method = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header
    max_target = max(max(len(r[2]) for r in rows), 6)  # "TARGET" header

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{:<{max_target}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "TARGET", "FILE"))
    sep_len = max_method + max_path + max_target + 6 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))

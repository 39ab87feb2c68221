"""Audit report — a read-only projection of a validated collection.

``summarize()`` rescans the collection each time it is called; the
report is never updated on its own.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from routeaudit.routing.collection import FileDefect, RouteCollection
from routeaudit.routing.route import HTTPMethod, RouteDefinition

# Process exit codes
EXIT_OK = 0
EXIT_DEFECTS = 1
EXIT_TOOL_ERROR = 2


@dataclass(frozen=True, slots=True)
class Report:
    """Totals and findings for one audit run."""

    total_routes: int
    source_count: int
    per_method_counts: dict[HTTPMethod, int]
    total_parameters: int
    admin_count: int
    total_defects: int
    defective_routes: tuple[RouteDefinition, ...]
    skipped_routes: tuple[RouteDefinition, ...] = ()
    file_defects: tuple[FileDefect, ...] = ()

    @property
    def ok(self) -> bool:
        return self.total_defects == 0 and not self.file_defects

    @property
    def exit_code(self) -> int:
        return EXIT_OK if self.ok else EXIT_DEFECTS


def summarize(collection: RouteCollection) -> Report:
    """Compute the report for *collection* as it stands."""
    total_parameters = 0
    admin_count = 0
    total_defects = 0
    defective: list[RouteDefinition] = []
    skipped: list[RouteDefinition] = []

    for route in collection:
        total_parameters += len(route.parameters)
        if route.is_admin:
            admin_count += 1
        if route.uses_dynamic_handler:
            skipped.append(route)
        if route.defects:
            total_defects += len(route.defects)
            defective.append(route)

    return Report(
        total_routes=collection.size(),
        source_count=len(collection.sources),
        per_method_counts=collection.counts(),
        total_parameters=total_parameters,
        admin_count=admin_count,
        total_defects=total_defects,
        defective_routes=tuple(defective),
        skipped_routes=tuple(skipped),
        file_defects=collection.file_defects,
    )


def iter_defects(report: Report) -> Iterator[tuple[str, str, int, str]]:
    """Yield ``(source_file, raw_pattern, index, message)`` for every defect."""
    for route in report.defective_routes:
        for i, message in enumerate(route.defects):
            yield route.source_file, route.raw_pattern, i, message


def group_by_file(report: Report) -> dict[str, list[RouteDefinition]]:
    """Defective routes keyed by source file, in first-seen order."""
    groups: dict[str, list[RouteDefinition]] = {}
    for route in report.defective_routes:
        groups.setdefault(route.source_file, []).append(route)
    return groups

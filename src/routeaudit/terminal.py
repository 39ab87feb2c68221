"""Terminal formatting for audit reports.

Produces structured, colored output for a ``Report``.  Respects TTY
detection — no ANSI codes when piped or redirected.

Example output (with color)::

    ── routeaudit ──────────────────────────────────────────────

      12 routes · 3 files · 4 parameters · 2 admin

      GET 7 · POST 3 · PUT 1 · PATCH 0 · DELETE 1 · HEAD 0 · OPTIONS 0

      ·  skipped /health (dynamic handler)

      api_users.py
        ✗  GET /admin/users
           0: Route "/admin/users" in file "api_users.py" is an admin route ...

      ✗  1 defect

    ─────────────────────────────────────────────────────────────

"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from routeaudit.report import group_by_file

if TYPE_CHECKING:
    from routeaudit.report import Report
    from routeaudit.routing.route import RouteDefinition

# Banner width
_W = 65


# ---------------------------------------------------------------------------
# ANSI helpers
# ---------------------------------------------------------------------------


def _use_color(stream: object | None = None) -> bool:
    """True if the output stream supports ANSI color."""
    s = stream or sys.stdout
    try:
        return s.isatty()  # type: ignore[union-attr]
    except (AttributeError, ValueError):
        return False


class _Palette:
    """ANSI escape sequences — empty strings when color is disabled."""

    __slots__ = ("bold", "cyan", "dim", "green", "red", "reset", "yellow")

    def __init__(self, *, enabled: bool) -> None:
        if enabled:
            self.reset = "\033[0m"
            self.bold = "\033[1m"
            self.dim = "\033[2m"
            self.red = "\033[31m"
            self.green = "\033[32m"
            self.yellow = "\033[33m"
            self.cyan = "\033[36m"
        else:
            self.reset = ""
            self.bold = ""
            self.dim = ""
            self.red = ""
            self.green = ""
            self.yellow = ""
            self.cyan = ""


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


# ---------------------------------------------------------------------------
# Route formatting
# ---------------------------------------------------------------------------


def _format_route(route: RouteDefinition, c: _Palette) -> list[str]:
    """Format a defective route and its numbered defects."""
    lines = [
        f"    {c.red}{c.bold}✗{c.reset}  "
        f"{c.bold}{route.method.value} {route.raw_pattern}{c.reset}"
    ]
    for i, defect in enumerate(route.defects):
        lines.append(f"       {c.dim}{i}:{c.reset} {defect}")
    return lines


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def format_report(report: Report, *, color: bool | None = None) -> str:
    """Format a Report for terminal display.

    Args:
        report: The report to format.
        color: Force color on/off.  ``None`` auto-detects from stdout.

    Returns:
        Multi-line string ready for ``print()``.
    """
    use = color if color is not None else _use_color()
    c = _Palette(enabled=use)

    lines: list[str] = []
    sep = f" {c.dim}·{c.reset} "

    # ── Header ──────────────────────────────────────────────
    title_text = "routeaudit"
    pad = _W - len(title_text) - 4  # 4 = "── " + " "
    lines.append(
        f"  {c.dim}──{c.reset} {c.bold}{title_text}{c.reset} "
        f"{c.dim}{'─' * max(pad, 1)}{c.reset}"
    )
    lines.append("")

    # ── Stats ───────────────────────────────────────────────
    stats = [
        (report.total_routes, "routes"),
        (report.source_count, "files"),
        (report.total_parameters, "parameters"),
        (report.admin_count, "admin"),
    ]
    lines.append(
        "  " + sep.join(f"{c.bold}{n}{c.reset} {c.dim}{label}{c.reset}" for n, label in stats)
    )
    lines.append("")
    lines.append(
        "  " + sep.join(
            f"{c.dim}{method.value}{c.reset} {count}"
            for method, count in report.per_method_counts.items()
        )
    )
    lines.append("")

    # ── Skipped (dynamic handlers) ──────────────────────────
    for route in report.skipped_routes:
        lines.append(
            f"  {c.dim}·{c.reset}  skipped {route.method.value} "
            f"{route.raw_pattern} {c.dim}(dynamic handler){c.reset}"
        )
    if report.skipped_routes:
        lines.append("")

    # ── File-level defects ──────────────────────────────────
    for file_defect in report.file_defects:
        lines.append(f"  {c.cyan}{file_defect.source_file}{c.reset}")
        lines.append(f"    {c.red}{c.bold}✗{c.reset}  {file_defect.message}")
        lines.append("")

    # ── Defects grouped by file ─────────────────────────────
    for source_file, routes in group_by_file(report).items():
        lines.append(f"  {c.cyan}{source_file}{c.reset}")
        for route in routes:
            lines.extend(_format_route(route, c))
        lines.append("")

    # ── Summary line ────────────────────────────────────────
    if report.ok:
        lines.append(f"  {c.green}{c.bold}✓{c.reset}  {c.green}0 defects{c.reset}")
    else:
        summary = f"{c.red}{_plural(report.total_defects, 'defect')}{c.reset}"
        if report.file_defects:
            summary += (
                f"{sep}{c.red}{_plural(len(report.file_defects), 'file error')}{c.reset}"
            )
        lines.append(f"  {c.red}{c.bold}✗{c.reset}  {summary}")

    # ── Footer rule ─────────────────────────────────────────
    lines.append("")
    lines.append(f"  {c.dim}{'─' * _W}{c.reset}")
    lines.append("")

    return "\n".join(lines)

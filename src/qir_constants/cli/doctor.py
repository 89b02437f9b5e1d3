"""``qir-constants doctor`` — environment and registry diagnostics.

Gathers interpreter information, checks whether the optional Rich
dependency is importable, and runs the registry self-check, then
renders a summary table.
"""

from __future__ import annotations

import platform
import sys

from qir_constants.cli import exit_codes
from qir_constants.cli.console import console, escape_markup, rich_available
from qir_constants.core.registry import REGISTRY, ConstantRegistry
from qir_constants.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _package_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the qir-constants version row."""
    return "qir-constants", __version__, "[green]OK[/green]"


def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _rich_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Rich row.

    Rich only affects rendering, so a missing install is a warning.
    """
    if not rich_available():
        return "rich", "NOT INSTALLED", "[yellow]WARN[/yellow]"
    try:
        from importlib.metadata import PackageNotFoundError, version

        return "rich", version("rich"), "[green]OK[/green]"
    except PackageNotFoundError:
        return "rich", "unknown", "[green]OK[/green]"


def _registry_check(
    registry: ConstantRegistry, problems: list[str]
) -> tuple[str, str, str]:
    """Return (label, value, status) for the registry integrity row.

    *problems* is the result of :meth:`ConstantRegistry.validate`.
    """
    total = sum(len(registry.group(name)) for name in registry)
    value = f"{len(registry)} groups, {total} constants"
    if problems:
        return "registry", value, "[red]FAIL[/red]"
    return "registry", value, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nqir-constants doctor", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    print(f"{'Component':<14} {'Value':<30} {'Status':<8}", file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<14} {value:<30} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


def _print_rich_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    from rich.table import Table

    table = Table(
        title="qir-constants doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)

    for label, value, status in checks:
        table.add_row(label, value, status)

    console.print()
    console.print(table)
    console.print()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(registry: ConstantRegistry = REGISTRY) -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    problems = registry.validate()
    checks = [
        _package_version_check(),
        _python_version_check(),
        _rich_check(),
        _registry_check(registry, problems),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    use_rich = rich_available()
    if use_rich:
        _print_rich_doctor_table(checks)
    else:
        _print_plain_doctor_table(checks)

    for problem in problems:
        if use_rich:
            console.print(f"  [red]•[/red] {escape_markup(problem)}")
        else:
            print(f"  - {problem}", file=sys.stderr)

    if has_failure:
        if use_rich:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            print("Some checks failed.", file=sys.stderr)
        return exit_codes.GENERAL_ERROR

    if use_rich:
        console.print("[bold green]All checks passed.[/bold green]")
    else:
        print("All checks passed.", file=sys.stderr)
    return exit_codes.SUCCESS

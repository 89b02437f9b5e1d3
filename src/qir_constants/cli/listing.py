"""``qir-constants list`` and ``qir-constants get`` commands.

Human-readable listings are rendered on stderr through Rich (or plain
text when Rich is missing).  Machine-readable output, the raw value of
``get`` and the JSON of ``list --json``, is written to stdout so it can
be piped.
"""

from __future__ import annotations

import json
import sys

from qir_constants.cli import exit_codes
from qir_constants.cli.console import console, rich_available
from qir_constants.core.models import ConstantEntry
from qir_constants.core.registry import REGISTRY, ConstantRegistry


def _selected_groups(registry: ConstantRegistry, group: str | None) -> tuple[str, ...]:
    """Resolve *group* to the names to render; raises for unknown groups."""
    if group is None:
        return registry.groups()
    return (registry.group(group).name,)


def _print_plain_table(entries: tuple[ConstantEntry, ...]) -> None:
    """Render a listing without Rich."""
    print("\nqir-constants", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    print(f"{'Group':<16} {'Name':<20} {'Value':<18}", file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for entry in entries:
        print(f"{entry.group:<16} {entry.name:<20} {entry.value:<18}", file=sys.stderr)
    print(file=sys.stderr)


def _print_rich_table(entries: tuple[ConstantEntry, ...]) -> None:
    from rich.table import Table

    table = Table(
        title="qir-constants",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Group", style="bold", min_width=14)
    table.add_column("Name", min_width=18)
    table.add_column("Value", style="green")

    for entry in entries:
        table.add_row(entry.group, entry.name, entry.value)

    console.print()
    console.print(table)
    console.print()


def run_list(
    group: str | None = None,
    *,
    as_json: bool = False,
    registry: ConstantRegistry = REGISTRY,
) -> int:
    """List every constant, or only those of *group*.

    Raises
    ------
    UnknownGroupError
        When *group* is given but not registered.
    """
    names = _selected_groups(registry, group)

    if as_json:
        payload = {name: dict(registry.as_mapping(name)) for name in names}
        print(json.dumps(payload, indent=2))
        return exit_codes.SUCCESS

    entries = tuple(entry for name in names for entry in registry.entries(name))
    if rich_available():
        _print_rich_table(entries)
    else:
        _print_plain_table(entries)
    return exit_codes.SUCCESS


def run_get(group: str, name: str, *, registry: ConstantRegistry = REGISTRY) -> int:
    """Write the raw value of ``group.name`` to stdout."""
    print(registry.get(group, name))
    return exit_codes.SUCCESS

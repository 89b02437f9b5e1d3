"""CLI application entry point and command routing for qir-constants.

This module is the **sole error boundary** for the entire application.
It catches :class:`~qir_constants.exceptions.QirConstantsError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages through the console proxy and returning
well-defined exit codes.

Architecture notes
------------------
* No registry logic lives here; every command only reads
  :data:`~qir_constants.core.registry.REGISTRY`.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from qir_constants.cli import exit_codes
from qir_constants.cli.console import console, escape_markup
from qir_constants.exceptions import QirConstantsError
from qir_constants.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``qir-constants list [GROUP] [--json]``
    * ``qir-constants get GROUP NAME``
    * ``qir-constants doctor``
    * ``qir-constants --version``
    """
    parser = argparse.ArgumentParser(
        prog="qir-constants",
        description="Inspect the named, read-only QIR constant groups.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    list_parser = commands.add_parser("list", help="List constants, optionally for one group.")
    list_parser.add_argument("group", nargs="?", default=None, help="Group to list.")
    list_parser.add_argument(
        "--json",
        action="store_true",
        dest="as_json",
        help="Write a JSON object to stdout instead of a table.",
    )

    get_parser = commands.add_parser("get", help="Print the value of one constant.")
    get_parser.add_argument("group", help="Group name, e.g. FileExtension.")
    get_parser.add_argument("name", help="Constant name, e.g. CppExtension.")

    commands.add_parser("doctor", help="Run environment and registry diagnostics.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_list(group: str | None, as_json: bool) -> int:
    from qir_constants.cli.listing import run_list

    return run_list(group, as_json=as_json)


def _handle_get(group: str, name: str) -> int:
    from qir_constants.cli.listing import run_get

    return run_get(group, name)


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from qir_constants.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the qir-constants CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS
    if args.command == "list":
        return _handle_list(args.group, args.as_json)
    if args.command == "get":
        return _handle_get(args.group, args.name)
    return _handle_doctor()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except QirConstantsError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)

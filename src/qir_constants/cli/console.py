"""CLI console helpers with optional Rich support.

Rich is imported lazily so that ``--help``, ``--version``, ``get`` and
``list --json`` keep working when it is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from qir_constants.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed.",
            hint="Install with: pip install rich",
        ) from exc
    return Console


def rich_available() -> bool:
    """Return ``True`` when Rich can be imported."""
    try:
        _load_rich_console_class()
    except EnvironmentError:
        return False
    return True


def escape_markup(text: str) -> str:
    """Escape Rich markup in *text*; unchanged when Rich is not installed.

    Use for any text that may carry user input before embedding it in a
    markup string passed to :data:`console`.
    """
    try:
        from rich.markup import escape
    except ModuleNotFoundError:
        return text
    return escape(text)


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with plain-stderr fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()

"""Allow ``python -m qir_constants`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m qir_constants`` behaves identically to the
``qir-constants`` console script.
"""

from __future__ import annotations

from qir_constants.cli.app import cli

if __name__ == "__main__":
    cli()

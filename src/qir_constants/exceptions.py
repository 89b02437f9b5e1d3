"""Custom exception hierarchy for qir-constants.

All exceptions that cross layer boundaries must inherit from
:class:`QirConstantsError`.  Lookups by attribute on the group classes
cannot fail at runtime; only the string-keyed accessors of the registry
raise the lookup errors below.

Hierarchy
---------
QirConstantsError
├── UnknownGroupError
├── UnknownConstantError
├── RegistryIntegrityError
└── EnvironmentError
"""

from __future__ import annotations

from collections.abc import Iterable


class QirConstantsError(Exception):
    """Base exception for all qir-constants errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Lookup ----------------------------------------------------------------

class UnknownGroupError(QirConstantsError):
    """Raised when a group name is not registered."""


class UnknownConstantError(QirConstantsError):
    """Raised when a constant name is not defined in its group."""


# --- Registry construction -------------------------------------------------

class RegistryIntegrityError(QirConstantsError):
    """Raised when a registry is assembled from conflicting groups."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(QirConstantsError):
    """Raised when an optional runtime dependency is required but missing."""


def known_names_hint(label: str, names: Iterable[str]) -> str:
    """Build a hint line listing the valid *names* for *label*."""
    listed = ", ".join(names)
    return f"Known {label}: {listed}" if listed else f"No {label} are defined."

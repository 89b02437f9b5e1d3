"""Domain models for qir-constants.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  Group tables are exposed through
:class:`types.MappingProxyType` so callers can read but never write.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Single constant
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ConstantEntry:
    """One ``(group, name, value)`` row, used for flattened listings."""

    group: str
    """Name of the owning group (e.g. ``FileExtension``)."""

    name: str
    """Symbolic constant name (e.g. ``CppExtension``)."""

    value: str
    """Literal string value (e.g. ``.cpp``)."""


# ---------------------------------------------------------------------------
# Group of constants
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ConstantGroup:
    """Named, read-only table of constants.

    ``entries`` preserves declaration order for display; lookups do not
    depend on it.
    """

    name: str
    description: str
    entries: Mapping[str, str]

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return len(self.entries) > 0

    def __contains__(self, name: object) -> bool:
        return name in self.entries

    def __iter__(self) -> Iterator[ConstantEntry]:
        for name, value in self.entries.items():
            yield ConstantEntry(group=self.name, name=name, value=value)

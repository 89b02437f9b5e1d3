"""Read-only, process-wide registry of constant groups.

The registry is assembled once at import time from the enum groups in
:mod:`qir_constants.core.groups` and never changes afterwards, so any
number of threads may read it without synchronisation.

Attribute access on the group classes is the preferred way to reference
a constant.  The string-keyed accessors here serve callers that only
hold names, such as the CLI.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from enum import Enum
from types import MappingProxyType

from qir_constants.core.groups import ALL_GROUPS
from qir_constants.core.models import ConstantEntry, ConstantGroup
from qir_constants.exceptions import (
    RegistryIntegrityError,
    UnknownConstantError,
    UnknownGroupError,
    known_names_hint,
)


def _group_from_enum(enum_cls: type[Enum]) -> ConstantGroup:
    """Snapshot an enum group into an immutable :class:`ConstantGroup`.

    ``__members__`` is used rather than iteration so that aliases (two
    names sharing a value) are kept under both names.
    """
    doc = (enum_cls.__doc__ or "").strip()
    return ConstantGroup(
        name=enum_cls.__name__,
        description=doc.splitlines()[0] if doc else "",
        entries=MappingProxyType(
            {name: member.value for name, member in enum_cls.__members__.items()}
        ),
    )


class ConstantRegistry:
    """Immutable mapping of group name to :class:`ConstantGroup`.

    Parameters
    ----------
    *group_enums:
        Enum classes whose members become the constants of one group
        each.  The group name is the class name.

    Raises
    ------
    RegistryIntegrityError
        When two groups share a name.
    """

    __slots__ = ("_groups",)

    def __init__(self, *group_enums: type[Enum]) -> None:
        groups: dict[str, ConstantGroup] = {}
        for enum_cls in group_enums:
            group = _group_from_enum(enum_cls)
            if group.name in groups:
                raise RegistryIntegrityError(
                    f"Constant group {group.name!r} is defined more than once.",
                )
            groups[group.name] = group
        self._groups: Mapping[str, ConstantGroup] = MappingProxyType(groups)

    # -- container protocol --------------------------------------------------

    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, str):
            return key in self._groups
        if isinstance(key, tuple) and len(key) == 2:
            group_name, name = key
            if not (isinstance(group_name, str) and isinstance(name, str)):
                return False
            group = self._groups.get(group_name)
            return group is not None and name in group
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(self._groups)})"

    # -- lookups -------------------------------------------------------------

    def groups(self) -> tuple[str, ...]:
        """Return the registered group names in declaration order."""
        return tuple(self._groups)

    def group(self, name: str) -> ConstantGroup:
        """Return the read-only view of group *name*.

        Raises
        ------
        UnknownGroupError
            When no group called *name* is registered.
        """
        try:
            return self._groups[name]
        except (KeyError, TypeError):
            raise UnknownGroupError(
                f"Unknown constant group {name!r}.",
                hint=known_names_hint("groups", self._groups),
            ) from None

    def get(self, group: str, name: str) -> str:
        """Return the literal value of *name* in *group*.

        Deterministic and side-effect free: the same pair always yields
        the same string for the lifetime of the process.

        Raises
        ------
        UnknownGroupError
            When *group* is not registered.
        UnknownConstantError
            When *group* has no constant called *name*.
        """
        entries = self.group(group).entries
        try:
            return entries[name]
        except (KeyError, TypeError):
            raise UnknownConstantError(
                f"Unknown constant {name!r} in group {group!r}.",
                hint=known_names_hint(f"{group} constants", entries),
            ) from None

    def names(self, group: str) -> tuple[str, ...]:
        """Return the constant names of *group* in declaration order."""
        return tuple(self.group(group).entries)

    def as_mapping(self, group: str) -> Mapping[str, str]:
        """Return a read-only ``name -> value`` view of *group*."""
        return self.group(group).entries

    def entries(self, group: str | None = None) -> tuple[ConstantEntry, ...]:
        """Flatten one group, or every group when *group* is ``None``."""
        selected = (
            [self.group(group)] if group is not None else list(self._groups.values())
        )
        return tuple(entry for grp in selected for entry in grp)

    # -- self-check ----------------------------------------------------------

    def validate(self) -> list[str]:
        """Return a description of every integrity problem found.

        A healthy registry returns an empty list: every group holds at
        least one constant and every value is a non-empty ``str``.
        """
        problems: list[str] = []
        for group in self._groups.values():
            if not group:
                problems.append(f"{group.name}: group defines no constants")
            for name, value in group.entries.items():
                if not isinstance(value, str):
                    problems.append(
                        f"{group.name}.{name}: value is {type(value).__name__}, not str"
                    )
                elif not value:
                    problems.append(f"{group.name}.{name}: value is empty")
        return problems


REGISTRY: ConstantRegistry = ConstantRegistry(*ALL_GROUPS)
"""The process-wide registry holding every group shipped with the package."""

get = REGISTRY.get
"""Module-level shortcut for :meth:`ConstantRegistry.get` on :data:`REGISTRY`."""

"""Core layer — constant groups and the read-only registry.

Rules
-----
* No ``print()`` calls.
* No filesystem, network, or environment access.
* No imports from ``cli``.
* Nothing here may be mutated after import.
"""

from qir_constants.core.groups import (
    ALL_GROUPS,
    ErrorCode,
    FileExtension,
    StringConstants,
    TestConstants,
)
from qir_constants.core.models import ConstantEntry, ConstantGroup
from qir_constants.core.registry import REGISTRY, ConstantRegistry, get

__all__: list[str] = [
    "ALL_GROUPS",
    "REGISTRY",
    "ConstantEntry",
    "ConstantGroup",
    "ConstantRegistry",
    "ErrorCode",
    "FileExtension",
    "StringConstants",
    "TestConstants",
    "get",
]

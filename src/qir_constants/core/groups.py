"""Constant group definitions.

Each group is a ``str``-valued :class:`~enum.Enum`: members are resolved
when this module is imported, misspelled names are reported by type
checkers, and every member behaves as its literal value in string
contexts::

    >>> FileExtension.CppExtension == ".cpp"
    True
    >>> f"main{FileExtension.CppExtension}"
    'main.cpp'
"""

from __future__ import annotations

from enum import Enum


class StringConstants(str, Enum):
    """Base for constant groups; ``str()`` and formatting yield the value."""

    __str__ = str.__str__
    __format__ = str.__format__


class TestConstants(StringConstants):
    """Fixture identifiers shared by the quantum workspace client tests."""

    # Not a pytest test class.
    __test__ = False

    SubscriptionId = "sub1"
    ResourceGroupName = "rg1"
    WorkspaceName = "ws1"
    ProviderId = "provider1"
    Endpoint = "https://test"


class ErrorCode(StringConstants):
    """Error-code labels reported by the QIR controller."""

    InternalError = "InternalError"


class FileExtension(StringConstants):
    """File suffixes of the artifacts produced by the QIR compiler."""

    CppExtension = ".cpp"
    BytecodeExtension = ".bc"


ALL_GROUPS: tuple[type[StringConstants], ...] = (TestConstants, ErrorCode, FileExtension)
"""Every group shipped with the package, in declaration order."""

"""Shared pytest fixtures and configuration for the qir-constants test suite.

Guidelines
----------
* No internet access in any test.
* The shared ``REGISTRY`` is never mutated; tests that need a broken
  registry build their own ``ConstantRegistry``.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import sys

import pytest


@pytest.fixture
def hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make every ``rich`` import fail for the duration of a test."""
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)

"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from qir_constants import __version__
from qir_constants.cli import exit_codes
from qir_constants.cli.app import main
from qir_constants.exceptions import (
    EnvironmentError,
    QirConstantsError,
    RegistryIntegrityError,
    UnknownConstantError,
    UnknownGroupError,
    known_names_hint,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            UnknownGroupError,
            UnknownConstantError,
            RegistryIntegrityError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[QirConstantsError]
    ) -> None:
        assert issubclass(exc_class, QirConstantsError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(QirConstantsError, Exception)

    def test_hint_is_stored(self) -> None:
        err = QirConstantsError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = QirConstantsError("boom")
        assert err.hint is None

    def test_known_names_hint_lists_names(self) -> None:
        assert known_names_hint("groups", ["A", "B"]) == "Known groups: A, B"

    def test_known_names_hint_when_empty(self) -> None:
        assert known_names_hint("groups", []) == "No groups are defined."


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """No arguments should print help and exit 0."""
        code = main([])
        assert code == exit_codes.SUCCESS
        assert "usage:" in capsys.readouterr().out

    def test_version_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    @patch("qir_constants.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_doctor_routes_to_run_doctor(self, mock_doc: object) -> None:
        code = main(["doctor"])
        assert code == exit_codes.SUCCESS
        mock_doc.assert_called_once_with()  # type: ignore[attr-defined]

    @patch("qir_constants.cli.listing.run_list", return_value=exit_codes.SUCCESS)
    def test_list_routes_with_group_and_json(self, mock_list: object) -> None:
        code = main(["list", "ErrorCode", "--json"])
        assert code == exit_codes.SUCCESS
        mock_list.assert_called_once_with("ErrorCode", as_json=True)  # type: ignore[attr-defined]

    @patch("qir_constants.cli.listing.run_get", return_value=exit_codes.SUCCESS)
    def test_get_routes_with_group_and_name(self, mock_get: object) -> None:
        code = main(["get", "FileExtension", "CppExtension"])
        assert code == exit_codes.SUCCESS
        mock_get.assert_called_once_with("FileExtension", "CppExtension")  # type: ignore[attr-defined]

    def test_get_requires_name(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["get", "FileExtension"])
        assert exc_info.value.code == 2

"""Smoke tests — verify package wiring.

These tests prove that:
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
* The CLI routes to the right handler.
"""

from __future__ import annotations

import pytest

from seqfind import __version__
from seqfind.cli import exit_codes
from seqfind.cli.app import main
from seqfind.exceptions import (
    EnvironmentError,
    FileReadError,
    FileReadFailure,
    InvalidFilePathError,
    KeyNotFoundError,
    NotAnIntegerArrayError,
    ParseFailureError,
    SeqfindError,
    UnableToReadFileError,
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
            KeyNotFoundError,
            ParseFailureError,
            FileReadError,
            InvalidFilePathError,
            UnableToReadFileError,
            NotAnIntegerArrayError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[SeqfindError]
    ) -> None:
        assert issubclass(exc_class, SeqfindError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(SeqfindError, Exception)

    def test_hint_is_stored(self) -> None:
        err = SeqfindError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = SeqfindError("boom")
        assert err.hint is None

    def test_each_classified_error_has_its_own_tag(self) -> None:
        codes = {
            InvalidFilePathError.code,
            UnableToReadFileError.code,
            NotAnIntegerArrayError.code,
        }
        assert codes == set(FileReadFailure)

    def test_classified_error_keeps_resource(self) -> None:
        err = InvalidFilePathError("missing", resource="numbers")
        assert err.resource == "numbers"
        assert err.code is FileReadFailure.INVALID_FILE_PATH


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2

    def test_not_found_is_three(self) -> None:
        assert exit_codes.NOT_FOUND == 3

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """No arguments should print help and exit 0."""
        code = main([])
        assert code == exit_codes.SUCCESS
        assert "seqfind" in capsys.readouterr().out

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_load_routes_to_handler(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from seqfind.cli import app as app_module

        monkeypatch.setattr(
            app_module, "_handle_load", lambda args, settings: exit_codes.SUCCESS,
        )
        assert main(["load", "numbers"]) == exit_codes.SUCCESS

    def test_find_routes_to_handler(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from seqfind.cli import app as app_module

        monkeypatch.setattr(
            app_module, "_handle_find", lambda args, settings: exit_codes.NOT_FOUND,
        )
        assert main(["find", "numbers", "3"]) == exit_codes.NOT_FOUND

    def test_non_integer_key_is_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["find", "numbers", "three"])
        assert exc_info.value.code == 2

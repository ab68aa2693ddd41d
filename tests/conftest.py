"""Shared pytest fixtures and configuration for the seqfind test suite.

Guidelines
----------
* No network access in any test.
* Filesystem access only under ``tmp_path``.
* Core tests must be pure — collaborators are mocked.
* Tests must not depend on the caller's ``SEQFIND_*`` environment.
"""

from __future__ import annotations

from pathlib import Path

import pytest

_ENV_VARS = (
    "SEQFIND_RESOURCE_DIR",
    "SEQFIND_RESOURCE_EXT",
    "SEQFIND_STRATEGY",
    "SEQFIND_LOG_LEVEL",
    "SEQFIND_DEBUG",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def resource_dir(tmp_path: Path) -> Path:
    """Directory pre-populated with one resource per loader outcome."""
    (tmp_path / "numbers.json").write_text("[1, 3, 2, 5, 4]", encoding="utf-8")
    (tmp_path / "duplicates.json").write_text("[7, 2, 7, 2]", encoding="utf-8")
    (tmp_path / "empty_array.json").write_text("[]", encoding="utf-8")
    (tmp_path / "object.json").write_text('{"numbers": [1, 2]}', encoding="utf-8")
    (tmp_path / "strings.json").write_text('["a", "b"]', encoding="utf-8")
    (tmp_path / "broken.json").write_text("[1, 2,", encoding="utf-8")
    return tmp_path

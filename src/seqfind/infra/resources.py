"""Infrastructure: resource resolution and byte reading.

This module is the only place in the codebase that touches the
filesystem.  Missing resources and I/O failures are reported as
``None`` — never as raw ``OSError`` — so the core loader can classify
them.

Rules
-----
* Resource names are bare stems; separators and ``..`` never resolve.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION: str = "json"
DEFAULT_PACKAGE: str = "seqfind.data"


def _is_bare_name(name: str) -> bool:
    """Reject empty names and anything that could escape the base location."""
    if not name or name in (".", ".."):
        return False
    return "/" not in name and "\\" not in name


def _file_name(name: str, extension: str) -> str:
    return f"{name}.{extension}" if extension else name


# ---------------------------------------------------------------------------
# Resolvers
# ---------------------------------------------------------------------------

class DirectoryResourceResolver:
    """Resolve ``<name>.<extension>`` inside a fixed directory.

    Satisfies :class:`~seqfind.core.protocols.ResourceResolver`
    structurally.
    """

    def __init__(self, base_dir: Path | str, extension: str = DEFAULT_EXTENSION) -> None:
        self._base_dir: Path = Path(base_dir)
        self._extension: str = extension.lstrip(".")

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def resolve(self, name: str) -> Path | None:
        if not _is_bare_name(name):
            logger.debug("Rejected resource name %r", name)
            return None
        candidate = self._base_dir / _file_name(name, self._extension)
        if not candidate.is_file():
            logger.debug("No resource at %s", candidate)
            return None
        return candidate


class PackageResourceResolver:
    """Resolve resources bundled inside an installed package.

    The default package, ``seqfind.data``, ships the demo array
    ``numbers.json``.
    """

    def __init__(
        self,
        package: str = DEFAULT_PACKAGE,
        extension: str = DEFAULT_EXTENSION,
    ) -> None:
        self._package: str = package
        self._extension: str = extension.lstrip(".")

    def resolve(self, name: str) -> Traversable | None:
        if not _is_bare_name(name):
            logger.debug("Rejected resource name %r", name)
            return None
        try:
            root = resources.files(self._package)
        except ModuleNotFoundError:
            logger.debug("Resource package %s is not importable", self._package)
            return None
        candidate = root.joinpath(_file_name(name, self._extension))
        if not candidate.is_file():
            logger.debug("No bundled resource %s in %s", name, self._package)
            return None
        return candidate


# ---------------------------------------------------------------------------
# Reader
# ---------------------------------------------------------------------------

class FileByteReader:
    """Read the full contents of a resolved handle.

    Satisfies :class:`~seqfind.core.protocols.ByteReader` structurally.
    """

    def read(self, handle: Traversable) -> bytes | None:
        try:
            return handle.read_bytes()
        except OSError as exc:
            logger.debug("Reading %s failed: %s", handle, exc)
            return None

"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from importlib.resources.abc import Traversable
from typing import Protocol


class ResourceResolver(Protocol):
    """Contract for mapping a resource name to a readable handle.

    Any object that implements :meth:`resolve` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).  :class:`pathlib.Path` is a valid handle.
    """

    def resolve(self, name: str) -> Traversable | None:
        """Return a handle for *name*, or ``None`` if it does not exist.

        Implementations must not raise for a missing resource; absence
        is reported by returning ``None``.
        """
        ...  # pragma: no cover


class ByteReader(Protocol):
    """Contract for reading the raw bytes behind a resolved handle."""

    def read(self, handle: Traversable) -> bytes | None:
        """Return the full contents of *handle*, or ``None`` on failure.

        Implementations must swallow I/O errors and report them by
        returning ``None`` so the loader can classify the failure.
        """
        ...  # pragma: no cover

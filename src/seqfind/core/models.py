"""Domain models for seqfind.

All models are **frozen** dataclasses — immutable value objects created
per call and discarded once the caller has consumed them.
"""

from __future__ import annotations

from dataclasses import dataclass

from seqfind.exceptions import KeyNotFoundError

IntegerArray = tuple[int, ...]
"""Immutable, ordered sequence of integers produced by the loader."""


@dataclass(frozen=True, slots=True)
class LookupResult:
    """Outcome of a linear search: a position or an explicit absence.

    There is no sentinel integer.  Callers must check :attr:`found` (or
    use the result in a boolean context) before using :attr:`position`,
    or call :meth:`unwrap` to fail loudly on absence.
    """

    position: int | None
    """Zero-based index of the first match, or ``None`` when not found."""

    def __post_init__(self) -> None:
        if self.position is not None and self.position < 0:
            raise ValueError(f"position must be >= 0, got {self.position}")

    @property
    def found(self) -> bool:
        return self.position is not None

    def __bool__(self) -> bool:
        return self.found

    def unwrap(self) -> int:
        """Return the position or raise :class:`KeyNotFoundError`."""
        if self.position is None:
            raise KeyNotFoundError(
                "Key not found in sequence.",
                hint="Check `found` before unwrapping the result.",
            )
        return self.position

    def unwrap_or(self, default: int) -> int:
        """Return the position, or *default* when the key was absent."""
        return self.position if self.position is not None else default


NOT_FOUND = LookupResult(position=None)
"""Canonical absent result."""

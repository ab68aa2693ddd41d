"""Pure linear-search helpers over integer sequences.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.  Absence is reported through
:class:`~seqfind.core.models.LookupResult`, never through a sentinel
index such as ``0`` or ``-1`` that could alias a real position.
"""

from __future__ import annotations

from collections.abc import Sequence

from seqfind.core.models import NOT_FOUND, LookupResult


def find(sequence: Sequence[int], key: int) -> LookupResult:
    """Return the position of the first element equal to *key*.

    The scan starts at index 0.  Returns :data:`NOT_FOUND` when *sequence*
    is empty or contains no match.
    """
    for index, element in enumerate(sequence):
        if element == key:
            return LookupResult(position=index)
    return NOT_FOUND


def find_all(sequence: Sequence[int], key: int) -> tuple[int, ...]:
    """Return every index whose element equals *key*, in ascending order."""
    return tuple(
        index for index, element in enumerate(sequence) if element == key
    )


def contains(sequence: Sequence[int], key: int) -> bool:
    """Return ``True`` when *key* occurs anywhere in *sequence*."""
    return find(sequence, key).found

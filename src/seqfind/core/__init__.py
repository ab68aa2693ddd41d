"""Core / service layer — pure lookup logic and the array loader.

Rules
-----
* No ``print()`` calls.
* No direct filesystem access; bytes arrive through injected protocols.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from seqfind.core.finder import contains, find, find_all
from seqfind.core.loader import FileBackedArrayLoader
from seqfind.core.models import NOT_FOUND, IntegerArray, LookupResult
from seqfind.core.protocols import ByteReader, ResourceResolver

__all__: list[str] = [
    "NOT_FOUND",
    "ByteReader",
    "FileBackedArrayLoader",
    "IntegerArray",
    "LookupResult",
    "ResourceResolver",
    "contains",
    "find",
    "find_all",
]

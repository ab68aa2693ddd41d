"""Infrastructure layer — external system integration.

This layer wraps all interaction with the filesystem and installed
package resources.  I/O failures are reported to the core layer as
``None`` rather than raised.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from seqfind.infra.resources import (
    DirectoryResourceResolver,
    FileByteReader,
    PackageResourceResolver,
)

__all__: list[str] = [
    "DirectoryResourceResolver",
    "FileByteReader",
    "PackageResourceResolver",
]

"""Core loader — reads an integer array from a named resource.

One algorithm, three error-propagation strategies:

* :meth:`FileBackedArrayLoader.load` — **classified**.  Each stage raises
  its own :class:`~seqfind.exceptions.FileReadError` subclass so callers
  can branch on the cause.  This is the primary API.
* :meth:`FileBackedArrayLoader.load_opaque` — **opaque**.  Parse errors
  propagate as a generic :class:`~seqfind.exceptions.ParseFailureError`;
  every other failure collapses into an empty tuple, so a missing file
  and an unreadable file look identical to the caller.
* :meth:`FileBackedArrayLoader.load_or_empty` — **local recovery**.
  Failures are logged and an empty tuple is returned.

Pipeline order (enforced by :meth:`FileBackedArrayLoader.load`):

1. **Resolve** — name → handle, else ``InvalidFilePath``.
2. **Read** — handle → bytes, else ``UnableToReadFile``.
3. **Parse** — bytes → JSON value (fragments allowed), else parse failure.
4. **Check** — value must be a list of integers, else ``NotAnIntegerArray``.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from seqfind.core.models import IntegerArray
from seqfind.core.protocols import ByteReader, ResourceResolver
from seqfind.exceptions import (
    FileReadError,
    InvalidFilePathError,
    NotAnIntegerArrayError,
    ParseFailureError,
    SeqfindError,
    UnableToReadFileError,
)

logger = logging.getLogger(__name__)

EMPTY: IntegerArray = ()


class FileBackedArrayLoader:
    """Stateless loader for integer arrays stored as JSON resources.

    Parameters
    ----------
    resolver:
        Any object satisfying the :class:`ResourceResolver` protocol.
    reader:
        Any object satisfying the :class:`ByteReader` protocol.
    """

    def __init__(self, resolver: ResourceResolver, reader: ByteReader) -> None:
        self._resolver: ResourceResolver = resolver
        self._reader: ByteReader = reader

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def load(self, name: str) -> IntegerArray:
        """Load *name* and return its integer array.

        Raises
        ------
        InvalidFilePathError
            If *name* does not resolve to a resource.
        UnableToReadFileError
            If the resolved resource yields no bytes.
        ParseFailureError
            If the bytes are not a well-formed JSON document.
        NotAnIntegerArrayError
            If the document's top-level value is not a list of integers.
        """
        handle = self._resolver.resolve(name)
        if handle is None:
            raise InvalidFilePathError(
                f"Resource not found: {name!r}",
                resource=name,
                hint="Check the resource name and the resource directory.",
            )

        data = self._reader.read(handle)
        if data is None:
            raise UnableToReadFileError(
                f"Unable to read resource: {name!r}",
                resource=name,
                hint="Check the file permissions.",
            )

        document = self._parse(name, data)

        if not self._is_integer_array(document):
            raise NotAnIntegerArrayError(
                f"Resource {name!r} does not contain an integer array "
                f"(top-level {type(document).__name__}).",
                resource=name,
                hint="Expected a JSON document such as [1, 3, 2, 5, 4].",
            )

        return tuple(document)

    def load_opaque(self, name: str) -> IntegerArray:
        """Load *name*, propagating only a generic parse error.

        Resolution, read and shape failures all return an empty tuple;
        the caller cannot tell them apart.

        Raises
        ------
        ParseFailureError
            If the resource exists but is not well-formed JSON.
        """
        try:
            return self.load(name)
        except FileReadError as exc:
            logger.debug("Opaque load of %r collapsed %s", name, exc.code.name)
            return EMPTY

    def load_or_empty(self, name: str) -> IntegerArray:
        """Load *name*, logging any failure and returning an empty tuple."""
        try:
            return self.load(name)
        except SeqfindError as exc:
            logger.warning("Failed to load resource %r: %s", name, exc)
            return EMPTY

    # ------------------------------------------------------------------
    # Stages (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def _parse(name: str, data: bytes) -> Any:
        """Parse *data* as JSON; top-level fragments are accepted.

        The encoding (UTF-8 with or without BOM, UTF-16, UTF-32) is
        detected from the bytes themselves.
        """
        try:
            return json.loads(data)
        except UnicodeDecodeError as exc:
            raise ParseFailureError(
                f"Resource {name!r} is not valid {exc.encoding}: {exc.reason}",
            ) from exc
        except json.JSONDecodeError as exc:
            raise ParseFailureError(
                f"Resource {name!r} is not valid JSON: {exc.msg} "
                f"(line {exc.lineno}, column {exc.colno})",
            ) from exc
        except ValueError as exc:
            # e.g. integer literals past the interpreter's digit limit
            raise ParseFailureError(
                f"Resource {name!r} could not be parsed: {exc}",
            ) from exc
        except RecursionError as exc:
            raise ParseFailureError(
                f"Resource {name!r} is nested too deeply to parse.",
            ) from exc

    @staticmethod
    def _is_integer_array(document: object) -> bool:
        """Return ``True`` for a list whose elements are all plain ints.

        ``bool`` is a subclass of ``int`` but ``true``/``false`` are not
        integers in JSON, so they are rejected.
        """
        if not isinstance(document, list):
            return False
        return all(
            isinstance(item, int) and not isinstance(item, bool)
            for item in document
        )

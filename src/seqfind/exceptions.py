"""Custom exception hierarchy for seqfind.

All exceptions that cross layer boundaries must inherit from
:class:`SeqfindError`.  Raw parsing exceptions (``json.JSONDecodeError``,
``UnicodeDecodeError``) must NEVER propagate beyond the loader — they are
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
SeqfindError
├── KeyNotFoundError
├── ParseFailureError
├── FileReadError
│   ├── InvalidFilePathError
│   ├── UnableToReadFileError
│   └── NotAnIntegerArrayError
└── EnvironmentError
"""

from __future__ import annotations

from enum import Enum


class SeqfindError(Exception):
    """Base exception for all seqfind errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Lookup ----------------------------------------------------------------

class KeyNotFoundError(SeqfindError):
    """Raised when an absent lookup result is forcibly unwrapped."""


# --- Parsing ---------------------------------------------------------------

class ParseFailureError(SeqfindError):
    """Raised when resource bytes are not a well-formed JSON document."""


# --- Classified file-read failures ------------------------------------------

class FileReadFailure(Enum):
    """Cause tag carried by every :class:`FileReadError`."""

    INVALID_FILE_PATH = "invalid_file_path"
    UNABLE_TO_READ_FILE = "unable_to_read_file"
    NOT_AN_INTEGER_ARRAY = "not_an_integer_array"


class FileReadError(SeqfindError):
    """Base for loader failures that carry exactly one cause tag.

    Callers may branch either on the concrete subclass or on
    :attr:`code`.
    """

    code: FileReadFailure

    def __init__(
        self,
        message: str,
        *,
        resource: str,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.resource: str = resource
        """Name of the resource that failed to load."""


class InvalidFilePathError(FileReadError):
    """Raised when a resource name does not resolve to an existing file."""

    code = FileReadFailure.INVALID_FILE_PATH


class UnableToReadFileError(FileReadError):
    """Raised when a resolved resource yields no bytes."""

    code = FileReadFailure.UNABLE_TO_READ_FILE


class NotAnIntegerArrayError(FileReadError):
    """Raised when the parsed document is not a top-level integer array."""

    code = FileReadFailure.NOT_AN_INTEGER_ARRAY


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(SeqfindError):
    """Raised when an optional runtime dependency is not available."""

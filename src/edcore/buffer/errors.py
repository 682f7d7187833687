"""Error kinds raised by buffer operations, the file adapter and the tokenizer."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple


class ErrorKind(str, Enum):
    """Closed set of failures; the value is the user-facing message."""

    INDEX_TOO_BIG = "Index too big"
    SELECTION_EMPTY = "Selection empty"
    NO_MATCH = "No match"
    INVALID_REGEX = "Invalid regex"
    MOVE_INTO_SELF = "Cannot move selection into itself"
    ESCAPED_LAST_EXPRESSION = "Last expression ends in an escaped delimiter"
    PERMISSION_DENIED = "Permission denied"
    NOT_FOUND = "File not found"
    UNKNOWN = "Unknown IO error"


class EditorError(RuntimeError):
    """Base class for every recoverable engine failure."""

    def __init__(
        self,
        kind: ErrorKind,
        message: Optional[str] = None,
        *,
        index: Optional[int] = None,
        selection: Optional[Tuple[int, int]] = None,
        path: Optional[str] = None,
    ) -> None:
        super().__init__(message or kind.value)
        self.kind = kind
        self.index = index
        self.selection = selection
        self.path = path


class BufferValidationError(EditorError):
    """Raised when an index or selection does not fit the buffer."""


class MatchError(EditorError):
    """Raised for tag/regex lookups and impossible moves."""


class ExpressionError(EditorError):
    """Raised when a delimited expression cannot be split."""


class FileAccessError(EditorError):
    """Raised when reading or writing a file fails."""


__all__ = [
    "ErrorKind",
    "EditorError",
    "BufferValidationError",
    "MatchError",
    "ExpressionError",
    "FileAccessError",
]

"""Line buffers: the capability contract, its list-backed implementation and helpers."""

from .errors import (
    BufferValidationError,
    EditorError,
    ErrorKind,
    ExpressionError,
    FileAccessError,
    MatchError,
)
from .state import Index, Selection, SessionState
from .line import NO_TAG, Line
from .clipboard import Clipboard
from .contract import Buffer
from .validation import verify_index, verify_selection
from .file import read_file, write_file
from .vecbuffer import VecBuffer

__all__ = [
    "Buffer",
    "VecBuffer",
    "Line",
    "NO_TAG",
    "Clipboard",
    "Index",
    "Selection",
    "SessionState",
    "ErrorKind",
    "EditorError",
    "BufferValidationError",
    "MatchError",
    "ExpressionError",
    "FileAccessError",
    "verify_index",
    "verify_selection",
    "read_file",
    "write_file",
]

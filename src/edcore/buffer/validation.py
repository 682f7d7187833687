"""Validation helpers shared across buffer implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import BufferValidationError, ErrorKind
from .state import Selection

if TYPE_CHECKING:
    from .contract import Buffer


def verify_index(buffer: "Buffer", index: int) -> int:
    """Check that ``index`` is an insertion point, ``0 <= index <= len``.

    ``len`` itself is valid since that is where appends go, but it may not be
    valid to read from.
    """

    if index < 0 or index > buffer.len():
        raise BufferValidationError(ErrorKind.INDEX_TOO_BIG, index=index)
    return index


def verify_selection(buffer: "Buffer", selection: Selection) -> Selection:
    """Check that ``selection`` is non-empty and names only existing lines.

    Always fails on an empty buffer since no lines exist.
    """

    start, end = selection
    if start >= end:
        raise BufferValidationError(ErrorKind.SELECTION_EMPTY, selection=selection)
    if start < 0 or end >= buffer.len():
        raise BufferValidationError(ErrorKind.INDEX_TOO_BIG, selection=selection)
    return selection


__all__ = ["verify_index", "verify_selection"]

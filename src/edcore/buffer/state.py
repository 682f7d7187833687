"""Addressing types and the mutable editing-session context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

from edcore.runtime import telemetry

if TYPE_CHECKING:
    from .contract import Buffer
    from .errors import EditorError

Index = int  # insertion point, 0..=len
Selection = Tuple[int, int]  # inclusive (start, end), start < end


@dataclass(slots=True)
class SessionState:
    """State a command dispatcher threads through every operation.

    The buffer is owned here; commands receive the whole session by reference
    instead of holding on to pieces of it.
    """

    buffer: "Buffer"
    selection: Optional[Selection] = None
    path: str = ""
    print_errors: bool = True
    last_error: Optional["EditorError"] = None

    def set_selection(self, start: int, end: int) -> None:
        self.selection = (start, end)

    def clear_selection(self) -> None:
        self.selection = None

    def default_selection(self) -> Selection:
        """Current selection, or the whole buffer when none is set."""

        if self.selection is not None:
            return self.selection
        return (0, max(self.buffer.len() - 1, 0))

    def record_error(self, error: "EditorError") -> str:
        """Remember ``error`` for later display and return its message."""

        self.last_error = error
        telemetry.record_event(
            "session.error",
            level="info",
            data={"kind": error.kind.name, "message": str(error)},
        )
        return str(error)


__all__ = ["Index", "Selection", "SessionState"]

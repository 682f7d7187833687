"""The capability contract every storage backend implements."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Protocol, Tuple

from .state import Selection


class Buffer(Protocol):
    """Operations a command dispatcher may perform on the text being edited.

    Implementations must validate every index and selection themselves and
    leave their contents untouched whenever they raise.
    """

    # Resolving and verifying addresses

    def len(self) -> int:
        """Return the number of lines stored."""
        ...

    def get_tag(self, tag: str) -> int:
        """Return the first line tagged with ``tag``; ``NO_MATCH`` otherwise."""
        ...

    def get_matching(self, pattern: str, curr_line: int, backwards: bool) -> int:
        """Return the closest line past ``curr_line`` that matches ``pattern``."""
        ...

    # Macro support ('g', 'v', 'G', 'V')

    def mark_matching(
        self, pattern: str, selection: Selection, inverse: bool
    ) -> None:
        """Flag every line in ``selection`` that matches (or, inverse, doesn't)."""
        ...

    def get_marked(self) -> Optional[int]:
        """Pop the lowest flagged line, or ``None`` once all are consumed."""
        ...

    # Modifications

    def tag_line(self, index: int, tag: str) -> None:
        ...

    def insert(self, lines: Iterable[str], index: int) -> None:
        """Insert ``lines`` before ``index``."""
        ...

    def cut(self, selection: Selection) -> None:
        """Move the selection into the clipboard."""
        ...

    def change(self, lines: Iterable[str], selection: Selection) -> None:
        """Cut the selection and insert ``lines`` in its place."""
        ...

    def mov(self, selection: Selection, index: int) -> None:
        ...

    def mov_copy(self, selection: Selection, index: int) -> None:
        ...

    def join(self, selection: Selection) -> None:
        """Join every line of the selection into its first line."""
        ...

    def copy(self, selection: Selection) -> None:
        """Replace the clipboard with copies of the selection."""
        ...

    def paste(self, index: int) -> int:
        """Insert the clipboard before ``index``; return how many lines went in."""
        ...

    def search_replace(
        self, pattern: Tuple[str, str], selection: Selection, global_: bool
    ) -> Selection:
        """Replace ``pattern[0]`` with ``pattern[1]`` over the selection.

        Returns the selection covering the replacement lines, since the line
        count may change.
        """
        ...

    # Persistence

    def read_from(self, path: str, index: Optional[int], must_exist: bool) -> int:
        """Read ``path`` in before ``index``, or replace everything if ``None``."""
        ...

    def write_to(
        self, selection: Optional[Selection], path: str, append: bool
    ) -> None:
        ...

    def saved(self) -> bool:
        """True while nothing changed since the last whole-buffer write."""
        ...

    # Output

    def get_selection(self, selection: Selection) -> Iterator[str]:
        """Yield the raw text of each selected line."""
        ...


__all__ = ["Buffer"]

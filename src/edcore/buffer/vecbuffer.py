"""``VecBuffer``: the default buffer, a Python list of lines plus a clipboard."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple

from edcore import patterns
from edcore.runtime import telemetry

from . import file
from .clipboard import Clipboard
from .contract import Buffer
from .errors import BufferValidationError, ErrorKind, MatchError
from .line import Line, fresh_lines
from .state import Selection
from .validation import verify_index, verify_selection


class VecBuffer(Buffer):
    """In-memory buffer splicing a list of ``Line`` records.

    A new buffer is empty and counts as saved until something changes it.
    """

    def __init__(self, *, name: str = "default") -> None:
        self.name = name
        self._lines: List[Line] = []
        self._clipboard = Clipboard()
        self._saved = True

    @classmethod
    def from_lines(cls, lines: Iterable[str], *, name: str = "default") -> "VecBuffer":
        buffer = cls(name=name)
        buffer._lines = fresh_lines(lines)
        return buffer

    def __len__(self) -> int:
        return len(self._lines)

    def __repr__(self) -> str:
        return (
            f"VecBuffer(name={self.name!r}, lines={len(self._lines)}, "
            f"saved={self._saved})"
        )

    def lines(self) -> Tuple[str, ...]:
        """Snapshot of every line's text."""

        return tuple(line.text for line in self._lines)

    @property
    def clipboard(self) -> Tuple[str, ...]:
        return self._clipboard.texts()

    def _span(self, operation: str, selection: Optional[Selection] = None):
        return telemetry.span(operation, buffer=self.name, selection=selection)

    # Addressing

    def len(self) -> int:
        return len(self._lines)

    def get_tag(self, tag: str) -> int:
        for index, line in enumerate(self._lines):
            if line.tag == tag:
                return index
        raise MatchError(ErrorKind.NO_MATCH)

    def get_matching(self, pattern: str, curr_line: int, backwards: bool) -> int:
        verify_index(self, curr_line)
        regex = patterns.compile_pattern(pattern)
        if backwards:
            candidates = range(curr_line - 1, -1, -1)
        else:
            candidates = range(curr_line + 1, len(self._lines))
        for index in candidates:
            if regex.search(self._lines[index].text):
                return index
        raise MatchError(ErrorKind.NO_MATCH)

    def mark_matching(
        self, pattern: str, selection: Selection, inverse: bool
    ) -> None:
        start, end = verify_selection(self, selection)
        regex = patterns.compile_pattern(pattern)
        for index, line in enumerate(self._lines):
            if start <= index <= end:
                line.matched = (regex.search(line.text) is not None) != inverse
            else:
                line.matched = False

    def get_marked(self) -> Optional[int]:
        for index, line in enumerate(self._lines):
            if line.matched:
                line.matched = False
                return index
        return None

    # Modifications

    def tag_line(self, index: int, tag: str) -> None:
        # Any character is accepted, NO_TAG included.
        if index < 0 or index >= len(self._lines):
            raise BufferValidationError(ErrorKind.INDEX_TOO_BIG, index=index)
        self._lines[index].tag = tag

    def insert(self, lines: Iterable[str], index: int) -> None:
        verify_index(self, index)
        with self._span("insert") as handle:
            new_lines = fresh_lines(lines)
            self._saved = False
            self._lines[index:index] = new_lines
            handle.lines = len(new_lines)

    def cut(self, selection: Selection) -> None:
        start, end = verify_selection(self, selection)
        with self._span("cut", selection):
            self._saved = False
            self._clipboard.take(self._lines[start : end + 1])
            del self._lines[start : end + 1]

    def change(self, lines: Iterable[str], selection: Selection) -> None:
        start, end = verify_selection(self, selection)
        with self._span("change", selection) as handle:
            new_lines = fresh_lines(lines)
            self._saved = False
            self._clipboard.take(self._lines[start : end + 1])
            self._lines[start : end + 1] = new_lines
            handle.lines = len(new_lines)

    def mov(self, selection: Selection, index: int) -> None:
        start, end = verify_selection(self, selection)
        verify_index(self, index)
        if start < index < end:
            raise MatchError(ErrorKind.MOVE_INTO_SELF, index=index, selection=selection)

        with self._span("mov", selection):
            self._saved = False
            lines = self._lines
            moved = lines[start : end + 1]
            if index <= start:
                point = max(index - 1, 0)
                self._lines = (
                    lines[:point] + moved + lines[point:start] + lines[end + 1 :]
                )
            else:
                self._lines = (
                    lines[:start]
                    + lines[end + 1 : index]
                    + moved
                    + lines[max(index, end + 1) :]
                )

    def mov_copy(self, selection: Selection, index: int) -> None:
        start, end = verify_selection(self, selection)
        verify_index(self, index)
        with self._span("mov_copy", selection):
            self._saved = False
            copies = [line.clone() for line in self._lines[start : end + 1]]
            point = max(index - 1, 0) if index <= start else index
            self._lines[point:point] = copies

    def join(self, selection: Selection) -> None:
        start, end = verify_selection(self, selection)
        with self._span("join", selection):
            self._saved = False
            first = self._lines[start]
            for line in self._lines[start + 1 : end + 1]:
                if first.text.endswith("\n"):
                    first.text = first.text[:-1]
                first.text += line.text
            del self._lines[start + 1 : end + 1]

    def copy(self, selection: Selection) -> None:
        start, end = verify_selection(self, selection)
        self._clipboard.store(self._lines[start : end + 1])

    def paste(self, index: int) -> int:
        verify_index(self, index)
        with self._span("paste") as handle:
            pasted = self._clipboard.clones()
            self._saved = False
            self._lines[index:index] = pasted
            handle.lines = len(pasted)
        return len(pasted)

    def search_replace(
        self, pattern: Tuple[str, str], selection: Selection, global_: bool
    ) -> Selection:
        start, end = verify_selection(self, selection)
        # Flagged unsaved even if nothing ends up replaced.
        self._saved = False
        regex = patterns.compile_pattern(pattern[0])

        with self._span("search_replace", selection) as handle:
            joined = "".join(line.text for line in self._lines[start : end + 1])
            after = patterns.substitute(regex, pattern[1], joined, global_)

            stop = end + 1
            if not after.endswith("\n"):
                if stop < len(self._lines):
                    after += self._lines[stop].text
                    stop += 1
                else:
                    after += "\n"

            replacement = fresh_lines(text + "\n" for text in after[:-1].split("\n"))
            self._lines[start:stop] = replacement
            handle.lines = len(replacement)
        return (start, start + len(replacement) - 1)

    # Persistence

    def read_from(self, path: str, index: Optional[int], must_exist: bool) -> int:
        if index is not None:
            verify_index(self, index)
        data = file.read_file(path, must_exist)
        with self._span("read_from") as handle:
            handle.lines = len(data)
            if index is None:
                self._lines = []
                index = 0
            self.insert(data, index)
        return len(data)

    def write_to(
        self, selection: Optional[Selection], path: str, append: bool
    ) -> None:
        if selection is None:
            data = self.lines()
        else:
            data = tuple(self.get_selection(selection))
        file.write_file(path, data, append)
        if selection is None or selection == (0, len(self._lines) - 1):
            self._saved = True

    def saved(self) -> bool:
        return self._saved

    # Output

    def get_selection(self, selection: Selection) -> Iterator[str]:
        start, end = verify_selection(self, selection)
        return iter([line.text for line in self._lines[start : end + 1]])


__all__ = ["VecBuffer"]

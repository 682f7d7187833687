"""Clipboard holding lines cut or copied out of a buffer."""

from __future__ import annotations

from typing import Iterable, Iterator, List

from .line import Line


class Clipboard:
    """Owns copies of lines; nothing stored here aliases buffer lines."""

    def __init__(self) -> None:
        self._lines: List[Line] = []

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)

    def take(self, lines: List[Line]) -> None:
        """Adopt ``lines`` outright, e.g. after they were cut from a buffer."""

        self._lines = lines

    def store(self, lines: Iterable[Line]) -> None:
        """Replace the contents with clones of ``lines``."""

        self._lines = [line.clone() for line in lines]

    def clones(self) -> List[Line]:
        return [line.clone() for line in self._lines]

    def texts(self) -> tuple[str, ...]:
        return tuple(line.text for line in self._lines)


__all__ = ["Clipboard"]

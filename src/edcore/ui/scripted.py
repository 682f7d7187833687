"""Non-interactive UI reading commands and input from a script."""

from __future__ import annotations

from typing import Iterable, Iterator, List

from edcore.buffer import Buffer, Selection
from edcore.runtime import telemetry

from .base import format_selection


class ScriptedUI:
    """Feeds lines from ``script`` and collects everything printed in ``output``."""

    def __init__(self, script: Iterable[str]) -> None:
        self._script: Iterator[str] = iter(script)
        self.output: List[str] = []

    def _next_line(self) -> str:
        try:
            line = next(self._script)
        except StopIteration:
            raise EOFError("script exhausted") from None
        return line if line.endswith("\n") else line + "\n"

    def print(self, text: str) -> None:
        self.output.append(text)

    def get_command(self, buffer: Buffer) -> str:
        del buffer
        command = self._next_line()[:-1]
        telemetry.record_event("ui.command", data={"command": command})
        return command

    def get_input(self, buffer: Buffer, terminator: str) -> List[str]:
        del buffer
        collected: List[str] = []
        while True:
            line = self._next_line()
            if line[:-1] == terminator:
                return collected
            collected.append(line)

    def print_selection(
        self, buffer: Buffer, selection: Selection, numbered: bool, literal: bool
    ) -> None:
        lines = buffer.get_selection(selection)
        self.output.append(format_selection(lines, selection[0], numbered, literal))


__all__ = ["ScriptedUI"]

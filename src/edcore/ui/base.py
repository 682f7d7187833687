"""Boundary between the engine and whatever presents it to a user."""

from __future__ import annotations

from typing import Iterable, List, Protocol

from edcore.buffer import Buffer, Selection


class UI(Protocol):
    """Protocol describing the IO a command dispatcher needs from its front end."""

    def print(self, text: str) -> None:
        """Show command output."""
        ...

    def get_command(self, buffer: Buffer) -> str:
        """Return one line of command input; trimming is optional.

        ``buffer`` is available for interactive viewing while typing.
        """
        ...

    def get_input(self, buffer: Buffer, terminator: str) -> List[str]:
        """Collect newline-terminated lines until one holding only ``terminator``.

        The terminating line is not returned.
        """
        ...

    def print_selection(
        self, buffer: Buffer, selection: Selection, numbered: bool, literal: bool
    ) -> None:
        ...


_LITERAL_ESCAPES = {
    "\\": "\\\\",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
    "\r": "\\r",
    "\v": "\\v",
    "\a": "\\a",
}


def _literal(text: str) -> str:
    body = text[:-1] if text.endswith("\n") else text
    chars = []
    for char in body:
        if char in _LITERAL_ESCAPES:
            chars.append(_LITERAL_ESCAPES[char])
        elif not char.isprintable():
            chars.append(f"\\{ord(char):03o}" if ord(char) < 256 else char)
        else:
            chars.append(char)
    return "".join(chars) + "$\n"


def format_selection(
    lines: Iterable[str], start: int, numbered: bool, literal: bool
) -> str:
    """Render ``lines`` (beginning at 0-based ``start``) the way ed's p/n/l do."""

    rendered = []
    for offset, text in enumerate(lines):
        if literal:
            text = _literal(text)
        if numbered:
            text = f"{start + offset + 1}\t{text}"
        rendered.append(text)
    return "".join(rendered)


__all__ = ["UI", "format_selection"]

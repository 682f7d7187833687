"""Line records stored by buffers and clipboards."""

from __future__ import annotations

from dataclasses import dataclass, replace

NO_TAG = "\0"


@dataclass(slots=True)
class Line:
    """One line of text, keeping its own trailing newline.

    ``tag`` is a single bookmark character, ``NO_TAG`` when unset. ``matched``
    is only meaningful between ``mark_matching`` and ``get_marked``.
    """

    text: str
    tag: str = NO_TAG
    matched: bool = False

    def clone(self) -> "Line":
        return replace(self)


def fresh_lines(texts) -> list[Line]:
    """Wrap raw texts as untagged, unmatched lines."""

    return [Line(text=text) for text in texts]


__all__ = ["Line", "NO_TAG", "fresh_lines"]

from __future__ import annotations

import pytest

from edcore.buffer import EditorError, ErrorKind, SessionState, VecBuffer
from edcore.expressions import parse_expressions


def make_session(*texts: str) -> SessionState:
    return SessionState(buffer=VecBuffer.from_lines(f"{t}\n" for t in texts))


def test_default_selection_covers_buffer() -> None:
    session = make_session("a", "b", "c")

    assert session.default_selection() == (0, 2)

    session.set_selection(0, 1)
    assert session.default_selection() == (0, 1)

    session.clear_selection()
    assert session.selection is None


def test_substitute_flow_updates_selection() -> None:
    session = make_session("foo", "bar", "baz")
    pattern, replacement = parse_expressions("/ba/XX/")[:2]

    selection = session.buffer.search_replace(
        (pattern, replacement), session.default_selection(), True
    )
    session.set_selection(*selection)

    assert session.selection == (0, 2)
    assert list(session.buffer.get_selection(session.selection)) == [
        "foo\n",
        "XXr\n",
        "XXz\n",
    ]


def test_global_command_flow() -> None:
    session = make_session("a", "b", "c", "d")
    buffer = session.buffer

    buffer.mark_matching("^[ac]", session.default_selection(), False)
    marked = buffer.get_marked()
    while marked is not None:
        buffer.join((marked, marked + 1))
        marked = buffer.get_marked()

    assert buffer.lines() == ("ab\n", "cd\n")


def test_record_error_keeps_last_error() -> None:
    session = make_session("a")

    with pytest.raises(EditorError) as excinfo:
        session.buffer.get_tag("z")
    message = session.record_error(excinfo.value)

    assert message == ErrorKind.NO_MATCH.value
    assert session.last_error is excinfo.value

from __future__ import annotations

import pytest

from edcore.buffer import (
    BufferValidationError,
    ErrorKind,
    VecBuffer,
    verify_index,
    verify_selection,
)


def make_buffer(count: int) -> VecBuffer:
    return VecBuffer.from_lines(f"line {n}\n" for n in range(count))


def test_index_valid_up_to_and_including_len() -> None:
    buffer = make_buffer(3)

    assert verify_index(buffer, 0) == 0
    assert verify_index(buffer, 3) == 3


def test_index_past_len_is_too_big() -> None:
    buffer = make_buffer(3)

    with pytest.raises(BufferValidationError) as excinfo:
        verify_index(buffer, 4)

    assert excinfo.value.kind is ErrorKind.INDEX_TOO_BIG
    assert excinfo.value.index == 4


def test_index_zero_valid_on_empty_buffer() -> None:
    assert verify_index(VecBuffer(), 0) == 0


def test_selection_must_not_be_empty() -> None:
    buffer = make_buffer(5)

    for selection in [(2, 2), (3, 1)]:
        with pytest.raises(BufferValidationError) as excinfo:
            verify_selection(buffer, selection)
        assert excinfo.value.kind is ErrorKind.SELECTION_EMPTY


def test_selection_end_must_exist() -> None:
    buffer = make_buffer(5)

    assert verify_selection(buffer, (0, 4)) == (0, 4)
    with pytest.raises(BufferValidationError) as excinfo:
        verify_selection(buffer, (0, 5))
    assert excinfo.value.kind is ErrorKind.INDEX_TOO_BIG


@pytest.mark.parametrize("selection", [(0, 1), (0, 0), (1, 0), (3, 7)])
def test_empty_buffer_rejects_every_selection(selection: tuple[int, int]) -> None:
    with pytest.raises(BufferValidationError):
        verify_selection(VecBuffer(), selection)


def test_negative_values_rejected() -> None:
    buffer = make_buffer(3)

    with pytest.raises(BufferValidationError):
        verify_index(buffer, -1)
    with pytest.raises(BufferValidationError):
        verify_selection(buffer, (-1, 1))

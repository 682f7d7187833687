"""Splitting of delimited expressions such as ``/pattern/replacement/``."""

from __future__ import annotations

from typing import List, Optional

from edcore.buffer.errors import ErrorKind, ExpressionError


def _trailing_backslashes(chunk: str) -> int:
    return len(chunk) - len(chunk.rstrip("\\"))


def parse_expressions(input: str) -> List[str]:
    """Split ``input`` on its first character.

    A delimiter preceded by an odd number of backslashes is escaped: that
    backslash is dropped and the delimiter is kept in the expression. Doubled
    backslashes are left as they are for the regex engine to interpret.
    """

    if not input:
        return []
    separator = input[0]

    expressions: List[str] = []
    partial: Optional[str] = None
    for chunk in input[1:].split(separator):
        if _trailing_backslashes(chunk) % 2 == 1:
            partial = (partial or "") + chunk[:-1] + separator
        elif partial is not None:
            expressions.append(partial + chunk)
            partial = None
        else:
            expressions.append(chunk)

    if partial is not None:
        raise ExpressionError(ErrorKind.ESCAPED_LAST_EXPRESSION)
    return expressions


__all__ = ["parse_expressions"]

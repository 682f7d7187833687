"""Regex compilation for line matching and substitution."""

from __future__ import annotations

import re
from collections import OrderedDict
from typing import Pattern

from edcore.buffer.errors import ErrorKind, MatchError
from edcore.config import get_config

FLAGS = re.MULTILINE

_CACHE: "OrderedDict[str, Pattern[str]]" = OrderedDict()


def reset_cache() -> None:
    _CACHE.clear()


def compile_pattern(pattern: str) -> Pattern[str]:
    """Compile ``pattern`` in multi-line mode, raising ``INVALID_REGEX`` on error.

    Patterns are recompiled on every call unless ``EDCORE_REGEX_CACHE`` asks
    for an LRU cache of compiled patterns.
    """

    size = get_config().regex_cache_size
    if size:
        cached = _CACHE.get(pattern)
        if cached is not None:
            _CACHE.move_to_end(pattern)
            return cached

    try:
        regex = re.compile(pattern, FLAGS)
    except re.error as exc:
        raise MatchError(ErrorKind.INVALID_REGEX, f"Invalid regex: {exc}") from exc

    if size:
        _CACHE[pattern] = regex
        while len(_CACHE) > size:
            _CACHE.popitem(last=False)
    return regex


def substitute(regex: Pattern[str], replacement: str, text: str, global_: bool) -> str:
    """Replace the first match (or every match, if ``global_``) in ``text``."""

    try:
        return regex.sub(replacement, text, count=0 if global_ else 1)
    except re.error as exc:
        raise MatchError(
            ErrorKind.INVALID_REGEX, f"Invalid replacement: {exc}"
        ) from exc


__all__ = ["FLAGS", "compile_pattern", "reset_cache", "substitute"]

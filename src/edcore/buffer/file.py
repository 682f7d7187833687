"""Blocking file IO for buffers, kept apart so other backends can reuse it."""

from __future__ import annotations

from typing import Iterable, List

from edcore.config import get_config
from edcore.runtime import telemetry

from .errors import ErrorKind, FileAccessError


def _access_error(exc: OSError, path: str) -> FileAccessError:
    if isinstance(exc, PermissionError):
        kind = ErrorKind.PERMISSION_DENIED
    elif isinstance(exc, FileNotFoundError):
        kind = ErrorKind.NOT_FOUND
    else:
        kind = ErrorKind.UNKNOWN
    return FileAccessError(kind, path=path)


def _split_lines(content: str) -> List[str]:
    # Only "\n" ends a line; "\r" stays part of the text.
    pieces = content.split("\n")
    lines = [piece + "\n" for piece in pieces[:-1]]
    if pieces[-1]:
        lines.append(pieces[-1])
    return lines


def read_file(path: str, must_exist: bool) -> List[str]:
    """Return the lines of ``path``, each with its own line terminator.

    A missing file reads as empty unless ``must_exist`` is set.
    """

    encoding = get_config().encoding
    try:
        with open(path, "r", encoding=encoding, newline="") as handle:
            lines = _split_lines(handle.read())
    except FileNotFoundError as exc:
        if must_exist:
            raise _access_error(exc, path) from exc
        lines = []
    except UnicodeError as exc:
        raise FileAccessError(ErrorKind.UNKNOWN, str(exc), path=path) from exc
    except OSError as exc:
        raise _access_error(exc, path) from exc

    telemetry.record_event("file.read", data={"path": path, "lines": len(lines)})
    return lines


def write_file(path: str, lines: Iterable[str], append: bool) -> None:
    """Write ``lines`` verbatim to ``path``, truncating unless ``append``.

    The text is encoded before the file is opened, so an unencodable line
    leaves an existing file untouched.
    """

    lines = list(lines)
    try:
        data = "".join(lines).encode(get_config().encoding)
    except UnicodeError as exc:
        raise FileAccessError(ErrorKind.UNKNOWN, str(exc), path=path) from exc

    try:
        with open(path, "ab" if append else "wb") as handle:
            handle.write(data)
            handle.flush()
    except OSError as exc:
        raise _access_error(exc, path) from exc

    telemetry.record_event(
        "file.write", data={"path": path, "lines": len(lines), "append": append}
    )


__all__ = ["read_file", "write_file"]

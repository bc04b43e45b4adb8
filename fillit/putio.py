"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os
from typing import Optional

STDOUT = 1


def _write(data: bytes, fd: int) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char(c: str, fd: int = STDOUT) -> None:
    """Write a single character to ``fd``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write(c.encode("utf-8"), fd)


def put_str(s: Optional[str], fd: int = STDOUT) -> None:
    """Write ``s`` to ``fd``; ``None`` writes nothing."""
    if s:
        _write(s.encode("utf-8"), fd)


def put_endl(s: Optional[str], fd: int = STDOUT) -> None:
    """Write ``s`` followed by a newline to ``fd``; ``None`` writes only the newline."""
    _write(((s or "") + "\n").encode("utf-8"), fd)


def put_nbr(n: int, fd: int = STDOUT) -> None:
    """Write the decimal text of ``n`` to ``fd``."""
    _write(str(n).encode("ascii"), fd)
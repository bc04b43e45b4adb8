"""Building new strings: concatenation, copying, slicing, trimming and splitting."""

from __future__ import annotations

from typing import Optional

_NUL = "\0"
_TRIM_CHARS = " \n\t"


def _check_count(n: int, name: str = "count") -> None:
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")


def concat(dest: str, src: str) -> str:
    """Return ``dest`` followed by ``src``."""
    return dest + src


def concat_n(dest: str, src: str, n: int) -> str:
    """Return ``dest`` followed by at most the first ``n`` characters of ``src``."""
    _check_count(n)
    return dest + src[:n]


def concat_bounded(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    The buffer keeps one place for a terminator, so the text is cut to at
    most ``size - 1`` characters. Returns the resulting text and the length
    the full result would have needed; when ``size`` does not exceed the
    length of ``dest`` nothing is appended and that length is
    ``len(src) + size``.
    """
    _check_count(size, "size")
    if size <= len(dest):
        return dest, len(src) + size
    room = size - 1 - len(dest)
    return dest + src[:room], len(dest) + len(src)


def copy_n(src: str, n: int) -> str:
    """Return exactly ``n`` characters: the start of ``src`` padded with NULs."""
    _check_count(n)
    return src[:n].ljust(n, _NUL)


def join(s1: Optional[str], s2: Optional[str]) -> str:
    """Return ``s1`` followed by ``s2``; a missing string counts as empty."""
    return (s1 or "") + (s2 or "")


def substring(s: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``s`` beginning at ``start``."""
    _check_count(start, "start")
    _check_count(length, "length")
    if start > len(s):
        raise ValueError(f"start {start} lies beyond the string of length {len(s)}")
    return s[start:start + length]


def trim(s: Optional[str]) -> Optional[str]:
    """Strip spaces, newlines and tabs from both ends of ``s``."""
    if s is None:
        return None
    return s.strip(_TRIM_CHARS)


def split(s: Optional[str], c: str) -> Optional[list[str]]:
    """Split ``s`` on the character ``c``, dropping empty words."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    if s is None:
        return None
    return [word for word in s.split(c) if word]


def new_string(size: int) -> bytearray:
    """Return a zeroed buffer with room for ``size`` characters and a terminator."""
    _check_count(size, "size")
    return bytearray(size + 1)


def clear(buf: bytearray) -> None:
    """Zero the bytes of ``buf`` up to its first NUL byte."""
    end = buf.find(0)
    if end < 0:
        end = len(buf)
    buf[:end] = bytes(end)
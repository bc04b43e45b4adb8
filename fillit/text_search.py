"""Measuring, searching, comparing and mapping over strings."""

from __future__ import annotations

from collections.abc import Callable
from typing import Optional

_NUL = "\0"


def _check_char(c: str) -> None:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")


def length(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def find_char(s: str, c: str) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or ``None``.

    Searching for the NUL character gives the index just past the end.
    """
    _check_char(c)
    if c == _NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def rfind_char(s: str, c: str) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or ``None``.

    Searching for the NUL character gives the index just past the end.
    """
    _check_char(c)
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def find(haystack: str, needle: str) -> Optional[int]:
    """Return the index of the first occurrence of ``needle``, or ``None``.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    index = haystack.find(needle)
    return None if index < 0 else index


def find_bounded(haystack: str, needle: str, n: int) -> Optional[int]:
    """Find ``needle`` lying wholly within the first ``n`` characters.

    An empty needle is found at index 0.
    """
    _check_count(n)
    if not needle:
        return 0
    index = haystack.find(needle, 0, n)
    return None if index < 0 else index


def compare(s1: str, s2: str) -> int:
    """Compare two strings character by character.

    Returns the code difference of the first unequal pair, where the end
    of a string counts as code 0, or 0 when the strings are equal.
    """
    for left, right in zip(s1, s2):
        if left != right:
            return ord(left) - ord(right)
    if len(s1) == len(s2):
        return 0
    if len(s1) > len(s2):
        return ord(s1[len(s2)])
    return -ord(s2[len(s1)])


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most the first ``n`` characters of two strings."""
    _check_count(n)
    return compare(s1[:n], s2[:n])


def equal(s1: Optional[str], s2: Optional[str]) -> bool:
    """Tell whether both strings are given and equal."""
    if s1 is None or s2 is None:
        return False
    return s1 == s2


def equal_n(s1: Optional[str], s2: Optional[str], n: int) -> bool:
    """Tell whether both strings are given and agree in their first ``n`` characters."""
    _check_count(n)
    if s1 is None or s2 is None:
        return False
    return s1[:n] == s2[:n]


def for_each_char(s: Optional[str], func: Optional[Callable[[str], object]]) -> None:
    """Call ``func`` on each character of ``s``; does nothing if either is missing."""
    if s is None or func is None:
        return
    for char in s:
        func(char)


def for_each_char_indexed(
    s: Optional[str], func: Optional[Callable[[int, str], object]]
) -> None:
    """Call ``func`` with each index and character of ``s``."""
    if s is None or func is None:
        return
    for index, char in enumerate(s):
        func(index, char)


def map_chars(
    s: Optional[str], func: Optional[Callable[[str], str]]
) -> Optional[str]:
    """Return a new string made of ``func`` applied to each character."""
    if s is None or func is None:
        return None
    return "".join(func(char) for char in s)


def map_chars_indexed(
    s: Optional[str], func: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """Return a new string made of ``func`` applied to each index and character."""
    if s is None or func is None:
        return None
    return "".join(func(index, char) for index, char in enumerate(s))
"""Substring and character-set searches over strings and byte strings.

Every search returns the index of the match, or ``NPOS`` (-1) when there is
none. Forward searches start at ``pos``. Backward searches consider matches
starting at or before ``pos``; ``pos=None`` means the whole text.
"""

from __future__ import annotations

from typing import TypeVar

NPOS = -1

Text = TypeVar("Text", str, bytes, bytearray)


def _check_pos(pos: int | None) -> None:
    if pos is not None and pos < 0:
        raise ValueError(f"position must not be negative, got {pos}")


def _last_index(text: Text, pos: int | None) -> int:
    """The highest index a backward search may start from; text is non-empty."""
    last = len(text) - 1
    return last if pos is None else min(pos, last)


def find(text: Text, needle: Text, pos: int = 0) -> int:
    """Return the first index at or after ``pos`` where ``needle`` occurs."""
    _check_pos(pos)
    if not text or pos > len(text):
        if not text and pos == 0 and not needle:
            return 0
        return NPOS
    if not needle:
        return pos
    return text.find(needle, pos)


def rfind(text: Text, needle: Text, pos: int | None = None) -> int:
    """Return the last index at or before ``pos`` where ``needle`` occurs."""
    _check_pos(pos)
    length = len(text)
    limit = length if pos is None else pos
    if length < len(needle):
        return NPOS
    if not needle:
        return min(length, limit)
    end = min(length - len(needle), limit) + len(needle)
    return text.rfind(needle, 0, end)


def find_first_of(text: Text, chars: Text, pos: int = 0) -> int:
    """Return the first index at or after ``pos`` holding any of ``chars``."""
    _check_pos(pos)
    if not text or not chars:
        return NPOS
    wanted = set(chars)
    return next(
        (i for i, c in enumerate(text[pos:], pos) if c in wanted), NPOS
    )


def find_last_of(text: Text, chars: Text, pos: int | None = None) -> int:
    """Return the last index at or before ``pos`` holding any of ``chars``."""
    _check_pos(pos)
    if not text or not chars:
        return NPOS
    wanted = set(chars)
    start = _last_index(text, pos)
    return next(
        (i for i in range(start, -1, -1) if text[i] in wanted), NPOS
    )


def find_first_not_of(text: Text, chars: Text, pos: int = 0) -> int:
    """Return the first index at or after ``pos`` holding none of ``chars``."""
    _check_pos(pos)
    if not text:
        return NPOS
    unwanted = set(chars)
    return next(
        (i for i, c in enumerate(text[pos:], pos) if c not in unwanted), NPOS
    )


def find_last_not_of(text: Text, chars: Text, pos: int | None = None) -> int:
    """Return the last index at or before ``pos`` holding none of ``chars``."""
    _check_pos(pos)
    if not text:
        return NPOS
    start = _last_index(text, pos)
    if not chars:
        return start
    unwanted = set(chars)
    return next(
        (i for i in range(start, -1, -1) if text[i] not in unwanted), NPOS
    )
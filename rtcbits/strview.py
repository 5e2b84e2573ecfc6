"""Comparison, substring and padding helpers for strings and byte strings.

``compare`` orders texts lexicographically. It returns -1, 0 or 1, and a
shorter text that is a prefix of a longer one sorts first. ``substr``
rejects a start position past the end. ``clipped_substr`` clamps that
position instead. ``pad`` fills a text out to a field width, as a
stream insertion with a width and adjustment does.
"""

from __future__ import annotations

from typing import TypeVar

Text = TypeVar("Text", str, bytes, bytearray)


def compare(a: Text, b: Text) -> int:
    """Return -1, 0 or 1 as ``a`` sorts before, equal to or after ``b``."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def _check_count(n: int | None) -> None:
    if n is not None and n < 0:
        raise ValueError(f"count must not be negative, got {n}")


def substr(text: Text, pos: int = 0, n: int | None = None) -> Text:
    """Return at most ``n`` elements of ``text`` starting at ``pos``.

    ``n=None`` takes everything to the end. A ``pos`` past the end of the
    text raises IndexError.
    """
    if pos < 0 or pos > len(text):
        raise IndexError(f"position {pos} is out of range for length {len(text)}")
    _check_count(n)
    end = len(text) if n is None else min(len(text), pos + n)
    return text[pos:end]


def clipped_substr(text: Text, pos: int = 0, n: int | None = None) -> Text:
    """Like :func:`substr`, but a ``pos`` past the end yields an empty result."""
    if pos < 0:
        raise ValueError(f"position must not be negative, got {pos}")
    return substr(text, min(pos, len(text)), n)


def pad(
    text: Text,
    width: int,
    fill: str | bytes | None = None,
    left: bool = False,
) -> Text:
    """Pad ``text`` with ``fill`` to ``width`` elements.

    By default the text is right-aligned, with the padding in front. With
    ``left`` it is left-aligned, with the padding after it. A text already
    at least ``width`` long is returned unchanged.
    """
    if fill is None:
        fill = " " if isinstance(text, str) else b" "
    if isinstance(text, str) != isinstance(fill, str):
        raise TypeError("fill must be of the same kind as text")
    if len(fill) != 1:
        raise ValueError("fill must be exactly one character")
    missing = width - len(text)
    if missing <= 0:
        return text
    padding = fill * missing
    if isinstance(text, bytearray):
        padding = bytearray(padding)
    return text + padding if left else padding + text
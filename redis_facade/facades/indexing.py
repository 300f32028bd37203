"""Translation of Python-style indices to Redis range arguments."""

from __future__ import annotations


def range_bounds(start: int, end: int | None) -> tuple[int, int] | None:
    """Translate an exclusive ``[start:end]`` slice to inclusive Redis bounds.

    Redis resolves negative indices against the current length and clamps
    out-of-range bounds the same way Python slicing does, so only the
    exclusive end needs shifting. Returns None when the slice is empty
    regardless of length.
    """
    if end is None:
        return start, -1
    if end == 0:
        return None
    return start, end - 1


def splice_window(start: int, count: int, length: int) -> tuple[int, int]:
    """Return the absolute ``[begin, stop)`` window removed by a splice."""
    begin = start + length if start < 0 else start
    begin = min(max(begin, 0), length)
    stop = min(begin + max(count, 0), length)
    return begin, stop

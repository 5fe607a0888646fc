"""Line splitting and numbering helpers shared by the matcher and the display."""

from __future__ import annotations

from typing import List, Tuple


def line_spans(src: str) -> List[Tuple[int, int]]:
    """Return ``(start, end)`` offsets of every line's content in *src*.

    Lines are split on ``\\n``; a trailing ``\\r`` is excluded from the span.
    A final newline does not open an extra empty line, and empty text has
    no lines at all.
    """
    spans: List[Tuple[int, int]] = []
    if not src:
        return spans

    start = 0
    while start < len(src):
        nl = src.find("\n", start)
        if nl == -1:
            end = next_start = len(src)
        else:
            end, next_start = nl, nl + 1
        if end > start and src[end - 1] == "\r":
            end -= 1
        spans.append((start, end))
        start = next_start
    return spans


def split_on_newlines(src: str) -> List[str]:
    """Split *src* into lines without their terminators."""
    return [src[start:end] for start, end in line_spans(src)]


def format_line_num(index: int) -> str:
    """1-based display number for a zero-based line index."""
    return str(index + 1)

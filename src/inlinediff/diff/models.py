"""Data models for sides, hunks, and token-level match positions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# (left index, right index); ``None`` marks a side that has no line in this row.
LinePair = Tuple[Optional[int], Optional[int]]


class Side(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class MatchKind(str, Enum):
    UNCHANGED = "unchanged"
    NOVEL = "novel"


@dataclass(frozen=True, slots=True)
class SingleLineSpan:
    """Columns ``[start_col, end_col)`` on one zero-based line."""

    line: int
    start_col: int
    end_col: int


@dataclass(frozen=True, slots=True)
class MatchedPos:
    """A token on one side and, when unchanged, the line it matched opposite."""

    kind: MatchKind
    pos: SingleLineSpan
    opposite_line: Optional[int] = None


@dataclass(frozen=True)
class Hunk:
    """One contiguous difference region as aligned line pairs."""

    lines: Tuple[LinePair, ...] = ()

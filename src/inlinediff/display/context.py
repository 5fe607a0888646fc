"""Context windows around a hunk, kept aligned through the opposite-side maps."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from inlinediff.diff.models import LinePair, MatchedPos, MatchKind

PositionMap = Dict[int, int]

BEFORE_CONTEXT_LINES = 3


def opposite_positions(positions: Sequence[MatchedPos]) -> PositionMap:
    """Map each line holding an unchanged token to its line on the other side.

    When a line matched several opposite lines, the first one seen wins.
    """
    res: PositionMap = {}
    for mp in positions:
        if mp.kind is MatchKind.UNCHANGED and mp.opposite_line is not None:
            res.setdefault(mp.pos.line, mp.opposite_line)
    return res


def _opposite(line: int, mapping: PositionMap, opposite_total: Optional[int] = None) -> Optional[int]:
    found = mapping.get(line)
    if found is None:
        return None
    if opposite_total is not None and not 0 <= found < opposite_total:
        return None
    return found


def calculate_before_context(
    lines: Sequence[LinePair],
    opposite_to_lhs: PositionMap,
    opposite_to_rhs: PositionMap,
    max_lines: int = BEFORE_CONTEXT_LINES,
) -> List[LinePair]:
    """Up to *max_lines* rows immediately preceding the first row of *lines*.

    Old numbering is the anchor when the first row has a left line; a hunk
    that opens with a pure addition is anchored on the right side instead.
    """
    if not lines or max_lines <= 0:
        return []

    first_lhs, first_rhs = lines[0]
    res: List[LinePair] = []
    if first_lhs is not None:
        for lhs_line in range(first_lhs - 1, max(first_lhs - max_lines, 0) - 1, -1):
            res.append((lhs_line, _opposite(lhs_line, opposite_to_lhs)))
    elif first_rhs is not None:
        for rhs_line in range(first_rhs - 1, max(first_rhs - max_lines, 0) - 1, -1):
            res.append((_opposite(rhs_line, opposite_to_rhs), rhs_line))

    res.reverse()
    return res


def calculate_after_context(
    lines: Sequence[LinePair],
    opposite_to_lhs: PositionMap,
    opposite_to_rhs: PositionMap,
    lhs_total: int,
    rhs_total: int,
    max_lines: int,
) -> List[LinePair]:
    """Up to *max_lines* rows immediately following the last row of *lines*.

    Neither side's index ever reaches its total line count.
    """
    if not lines or max_lines <= 0:
        return []

    last_lhs, last_rhs = lines[-1]
    res: List[LinePair] = []
    if last_lhs is not None:
        stop = min(last_lhs + 1 + max_lines, lhs_total)
        for lhs_line in range(last_lhs + 1, stop):
            res.append((lhs_line, _opposite(lhs_line, opposite_to_lhs, rhs_total)))
    elif last_rhs is not None:
        stop = min(last_rhs + 1 + max_lines, rhs_total)
        for rhs_line in range(last_rhs + 1, stop):
            res.append((_opposite(rhs_line, opposite_to_rhs, lhs_total), rhs_line))
    return res

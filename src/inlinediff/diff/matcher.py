"""Line and word matcher: produces match positions and hunks for two sources.

Lines are aligned with ``difflib.SequenceMatcher``. Every line in an
``equal`` block becomes a single UNCHANGED position pointing at its partner.
Lines in a ``replace`` block are paired off in order and refined with a
word-level match, so words that survived an edit stay UNCHANGED and only the
rest is NOVEL. Each non-equal opcode becomes one hunk.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from difflib import SequenceMatcher
from itertools import zip_longest
from typing import List, Optional

from inlinediff.diff.models import Hunk, LinePair, MatchedPos, MatchKind, SingleLineSpan
from inlinediff.lines import split_on_newlines

_TOKEN_RE = re.compile(r"\w+|\s+|[^\w\s]")


@dataclass
class MatchResult:
    """Positions for both sides plus the hunks derived from them."""

    lhs_positions: List[MatchedPos] = field(default_factory=list)
    rhs_positions: List[MatchedPos] = field(default_factory=list)
    hunks: List[Hunk] = field(default_factory=list)


def _tokenize(line: str) -> List[re.Match[str]]:
    return list(_TOKEN_RE.finditer(line))


def _whole_line(kind: MatchKind, line_no: int, text: str, opposite: Optional[int] = None) -> MatchedPos:
    return MatchedPos(kind=kind, pos=SingleLineSpan(line_no, 0, len(text)), opposite_line=opposite)


def _match_words(
    lhs_no: int,
    lhs_text: str,
    rhs_no: int,
    rhs_text: str,
    result: MatchResult,
) -> None:
    """Refine a replaced line pair into per-token positions."""
    lhs_tokens = _tokenize(lhs_text)
    rhs_tokens = _tokenize(rhs_text)
    matcher = SequenceMatcher(
        None,
        [t.group() for t in lhs_tokens],
        [t.group() for t in rhs_tokens],
        autojunk=False,
    )
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        kind = MatchKind.UNCHANGED if tag == "equal" else MatchKind.NOVEL
        for tok in lhs_tokens[i1:i2]:
            if tok.group().isspace():
                continue
            result.lhs_positions.append(MatchedPos(
                kind=kind,
                pos=SingleLineSpan(lhs_no, tok.start(), tok.end()),
                opposite_line=rhs_no if kind is MatchKind.UNCHANGED else None,
            ))
        for tok in rhs_tokens[j1:j2]:
            if tok.group().isspace():
                continue
            result.rhs_positions.append(MatchedPos(
                kind=kind,
                pos=SingleLineSpan(rhs_no, tok.start(), tok.end()),
                opposite_line=lhs_no if kind is MatchKind.UNCHANGED else None,
            ))


def match_sources(lhs_src: str, rhs_src: str) -> MatchResult:
    """Align *lhs_src* against *rhs_src* and return positions and hunks."""
    lhs_lines = split_on_newlines(lhs_src)
    rhs_lines = split_on_newlines(rhs_src)
    result = MatchResult()

    matcher = SequenceMatcher(None, lhs_lines, rhs_lines, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            for lhs_no, rhs_no in zip(range(i1, i2), range(j1, j2)):
                result.lhs_positions.append(
                    _whole_line(MatchKind.UNCHANGED, lhs_no, lhs_lines[lhs_no], rhs_no)
                )
                result.rhs_positions.append(
                    _whole_line(MatchKind.UNCHANGED, rhs_no, rhs_lines[rhs_no], lhs_no)
                )
            continue

        pairs: List[LinePair] = list(zip_longest(range(i1, i2), range(j1, j2)))
        for lhs_no, rhs_no in pairs:
            if lhs_no is not None and rhs_no is not None:
                _match_words(lhs_no, lhs_lines[lhs_no], rhs_no, rhs_lines[rhs_no], result)
            elif lhs_no is not None:
                result.lhs_positions.append(
                    _whole_line(MatchKind.NOVEL, lhs_no, lhs_lines[lhs_no])
                )
            else:
                result.rhs_positions.append(
                    _whole_line(MatchKind.NOVEL, rhs_no, rhs_lines[rhs_no])
                )
        result.hunks.append(Hunk(lines=tuple(pairs)))

    return result

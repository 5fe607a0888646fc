"""Diff inputs: hunk and match-position models, matcher, hunk files."""

from inlinediff.diff.hunk_loader import HunkFileError, dump_hunks, load_hunks, parse_hunks
from inlinediff.diff.matcher import MatchResult, match_sources
from inlinediff.diff.models import Hunk, LinePair, MatchedPos, MatchKind, Side, SingleLineSpan

__all__ = [
    "Hunk",
    "HunkFileError",
    "LinePair",
    "MatchKind",
    "MatchResult",
    "MatchedPos",
    "Side",
    "SingleLineSpan",
    "dump_hunks",
    "load_hunks",
    "match_sources",
    "parse_hunks",
]

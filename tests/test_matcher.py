"""Tests for the line/word matcher that feeds the renderer."""

from inlinediff.diff.matcher import match_sources
from inlinediff.diff.models import Hunk, MatchKind


def _novel_text(src_lines, positions):
    return [
        src_lines[p.pos.line][p.pos.start_col:p.pos.end_col]
        for p in positions
        if p.kind is MatchKind.NOVEL
    ]


class TestHunks:
    def test_identical_sources(self):
        result = match_sources("a\nb\n", "a\nb\n")
        assert result.hunks == []
        assert all(p.kind is MatchKind.UNCHANGED for p in result.lhs_positions)

    def test_deletion(self):
        result = match_sources("a\nb\nc\n", "a\nc\n")
        assert result.hunks == [Hunk(lines=((1, None),))]

    def test_insertion(self):
        result = match_sources("a\nc\n", "a\nb\nc\n")
        assert result.hunks == [Hunk(lines=((None, 1),))]

    def test_uneven_replace_pads_with_none(self):
        result = match_sources("a\nb\nz\n", "a\nx\ny\nz\n")
        assert result.hunks == [Hunk(lines=((1, 1), (None, 2)))]

    def test_hunks_in_increasing_order(self):
        result = match_sources("1\n2\n3\n4\n5\n", "1\nX\n3\n4\nY\n")
        firsts = [h.lines[0][0] for h in result.hunks]
        assert firsts == sorted(firsts)
        assert len(result.hunks) == 2

    def test_from_empty(self):
        result = match_sources("", "a\nb\n")
        assert result.hunks == [Hunk(lines=((None, 0), (None, 1)))]


class TestPositions:
    def test_equal_lines_map_across_shift(self):
        result = match_sources("a\nb\nc\n", "new\na\nb\nc\n")
        unchanged = {p.pos.line: p.opposite_line for p in result.lhs_positions if p.kind is MatchKind.UNCHANGED}
        assert unchanged == {0: 1, 1: 2, 2: 3}

    def test_word_level_refinement(self):
        old, new = "total = price * qty\n", "total = price * quantity\n"
        result = match_sources(old, new)
        assert _novel_text(old.splitlines(), result.lhs_positions) == ["qty"]
        assert _novel_text(new.splitlines(), result.rhs_positions) == ["quantity"]
        kept = [p for p in result.lhs_positions if p.kind is MatchKind.UNCHANGED]
        assert kept and all(p.opposite_line == 0 for p in kept)

    def test_deleted_line_is_novel_whole_line(self):
        result = match_sources("keep\ndrop me\n", "keep\n")
        novel = [p for p in result.lhs_positions if p.kind is MatchKind.NOVEL]
        assert len(novel) == 1
        assert (novel[0].pos.line, novel[0].pos.start_col, novel[0].pos.end_col) == (1, 0, 7)

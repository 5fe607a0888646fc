"""Tests for line splitting and numbering helpers."""

from inlinediff.lines import format_line_num, line_spans, split_on_newlines


class TestSplitOnNewlines:
    def test_trailing_newline_adds_no_line(self):
        assert split_on_newlines("a\nb\nc\n") == ["a", "b", "c"]

    def test_no_trailing_newline(self):
        assert split_on_newlines("a\nb") == ["a", "b"]

    def test_blank_lines_kept(self):
        assert split_on_newlines("a\n\n\nb\n") == ["a", "", "", "b"]

    def test_crlf(self):
        assert split_on_newlines("a\r\nb\r\n") == ["a", "b"]

    def test_empty(self):
        assert split_on_newlines("") == []

    def test_single_newline(self):
        assert split_on_newlines("\n") == [""]


class TestLineSpans:
    def test_offsets(self):
        assert line_spans("ab\ncd\r\ne") == [(0, 2), (3, 5), (7, 8)]


class TestNumbering:
    def test_format_is_one_based(self):
        assert format_line_num(0) == "1"
        assert format_line_num(99) == "100"

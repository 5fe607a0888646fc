"""Tests for colour application, tab expansion, gutters, and headers."""

import re

from inlinediff.config.schema import DisplayOptions
from inlinediff.diff.models import MatchedPos, MatchKind, Side, SingleLineSpan
from inlinediff.display.style import (
    apply_colors,
    apply_line_number_color,
    header,
    replace_tabs,
)

_ANSI = re.compile(r"\x1b\[[0-9;]*m")

PLAIN = DisplayOptions(use_color=False)
COLOR = DisplayOptions(use_color=True)


class TestReplaceTabs:
    def test_next_stop(self):
        assert replace_tabs("a\tb", 4) == "a   b"

    def test_tab_at_stop(self):
        assert replace_tabs("abcd\te", 4) == "abcd    e"

    def test_leading_tabs(self):
        assert replace_tabs("\t\tx\n", 2) == "    x\n"

    def test_escape_sequences_take_no_columns(self):
        line = "\x1b[1;91ma\x1b[0m\tb"
        assert replace_tabs(line, 4) == "\x1b[1;91ma\x1b[0m   b"

    def test_no_tabs_unchanged(self):
        assert replace_tabs("plain\n", 8) == "plain\n"


class TestApplyColors:
    def test_one_line_per_source_line(self):
        lines = apply_colors("a\nb\nc\n", Side.LEFT, False, None, "dark", [])
        assert lines == ["a\n", "b\n", "c\n"]

    def test_novel_tokens_coloured(self):
        positions = [MatchedPos(MatchKind.NOVEL, SingleLineSpan(0, 4, 7))]
        lines = apply_colors("foo bar baz\n", Side.RIGHT, False, None, "dark", positions)
        assert "\x1b[" in lines[0]
        assert _ANSI.sub("", lines[0]) == "foo bar baz\n"
        assert lines[0].startswith("foo ")

    def test_unchanged_tokens_not_coloured_without_syntax(self):
        positions = [MatchedPos(MatchKind.UNCHANGED, SingleLineSpan(0, 0, 3), 0)]
        assert apply_colors("foo\n", Side.LEFT, False, None, "light", positions) == ["foo\n"]

    def test_syntax_highlighting_keeps_text(self):
        src = "def f(x):\n    return x\n"
        lines = apply_colors(src, Side.LEFT, True, "python", "dark", [])
        assert len(lines) == 2
        assert "\x1b[" in lines[0]
        assert [_ANSI.sub("", line) for line in lines] == ["def f(x):\n", "    return x\n"]

    def test_syntax_highlighting_with_crlf_line_endings(self):
        positions = [MatchedPos(MatchKind.NOVEL, SingleLineSpan(1, 4, 10))]
        lines = apply_colors("def f():\r\n    return 1\r\n", Side.LEFT, True, "python", "dark", positions)
        assert "\x1b[" in lines[0]
        assert [_ANSI.sub("", line) for line in lines] == ["def f():\n", "    return 1\n"]
        assert lines[1].startswith("    ")

    def test_syntax_highlighting_keeps_tabs_for_expansion(self):
        lines = apply_colors("if x:\n\treturn 1\n", Side.LEFT, True, "python", "dark", [])
        assert "\t" in _ANSI.sub("", lines[1])

    def test_unknown_language_degrades_to_plain(self):
        lines = apply_colors("x = 1\n", Side.LEFT, True, "no-such-language", "dark", [])
        assert lines == ["x = 1\n"]

    def test_no_trailing_newline(self):
        assert apply_colors("a\nb", Side.LEFT, False, None, "dark", []) == ["a\n", "b\n"]


class TestLineNumberColor:
    def test_passthrough_without_colour(self):
        assert apply_line_number_color("-#3#", True, Side.LEFT, PLAIN) == "-#3#"

    def test_coloured(self):
        styled = apply_line_number_color("+#3#", True, Side.RIGHT, COLOR)
        assert styled != "+#3#"
        assert _ANSI.sub("", styled) == "+#3#"

    def test_sides_differ_when_changed(self):
        left = apply_line_number_color("x", True, Side.LEFT, COLOR)
        right = apply_line_number_color("x", True, Side.RIGHT, COLOR)
        assert left != right


class TestHeader:
    def test_single_hunk(self):
        assert header("a.py", "a.py", 1, 1, "Python", PLAIN) == "a.py --- Python"

    def test_numbered_hunks(self):
        assert header("a.py", "a.py", 2, 3, "Python", PLAIN) == "a.py --- 2/3 --- Python"

    def test_rename_on_first_hunk_only(self):
        assert header("old.py", "new.py", 1, 2, "Python", PLAIN) == "old.py => new.py --- 1/2 --- Python"
        assert header("old.py", "new.py", 2, 2, "Python", PLAIN) == "new.py --- 2/2 --- Python"

    def test_coloured_header_strips_to_plain(self):
        styled = header("a.py", "a.py", 1, 1, "Python", COLOR)
        assert _ANSI.sub("", styled) == "a.py --- Python"

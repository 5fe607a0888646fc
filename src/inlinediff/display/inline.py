"""Inline ("unified") diff display.

Each hunk is written as::

    header
    0#n#   context before      (old numbering, at most 3 rows)
    -#n#   deleted line        (every left line of the hunk)
       +#n#added line          (every right line of the hunk)
       0#n#context after       (new numbering, at most num_context_lines rows)
    <blank line>

Deletions are written as one block before the additions; rows are never
paired up across sides inside a hunk.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, TextIO

from inlinediff.config.schema import Background, DisplayOptions
from inlinediff.diff.models import Hunk, LinePair, MatchedPos, Side
from inlinediff.display import context, style
from inlinediff.display.context import BEFORE_CONTEXT_LINES, PositionMap
from inlinediff.lines import format_line_num, split_on_newlines

PADDING = "   "
DEFAULT_LANGUAGE_NAME = "Text"

ColorApplier = Callable[
    [str, Side, bool, Optional[str], Background, Sequence[MatchedPos]], List[str]
]
BeforeContext = Callable[[Sequence[LinePair], PositionMap, PositionMap, int], List[LinePair]]
AfterContext = Callable[
    [Sequence[LinePair], PositionMap, PositionMap, int, int, int], List[LinePair]
]


class RenderError(Exception):
    """Raised when the inputs to a render pass are inconsistent."""


class LineIndexError(RenderError, IndexError):
    """A hunk or context row points past the end of its side.

    This is a caller bug, not a user error: the pass stops at the first bad
    index instead of writing guessed output.
    """

    def __init__(self, side: Side, index: int, total: int) -> None:
        super().__init__(
            f"index out of bounds for side {side.value}: line index {index}, "
            f"{total} line(s) available"
        )
        self.side = side
        self.index = index
        self.total = total


@dataclass(frozen=True)
class Collaborators:
    """Pluggable pieces the renderer delegates to."""

    apply_colors: ColorApplier = style.apply_colors
    split_lines: Callable[[str], List[str]] = split_on_newlines
    replace_tabs: Callable[[str, int], str] = style.replace_tabs
    opposite_positions: Callable[[Sequence[MatchedPos]], PositionMap] = context.opposite_positions
    before_context: BeforeContext = context.calculate_before_context
    after_context: AfterContext = context.calculate_after_context
    format_line_num: Callable[[int], str] = format_line_num
    gutter_style: Callable[[str, bool, Side, DisplayOptions], str] = style.apply_line_number_color
    header: Callable[[str, str, int, int, str, DisplayOptions], str] = style.header


DEFAULT_COLLABORATORS = Collaborators()


def materialize_lines(
    src: str,
    side: Side,
    positions: Sequence[MatchedPos],
    display_options: DisplayOptions,
    language: Optional[str] = None,
    collaborators: Collaborators = DEFAULT_COLLABORATORS,
) -> List[str]:
    """Build the display string of every line on one side, tabs expanded."""
    expected = len(collaborators.split_lines(src))
    if display_options.use_color:
        lines = collaborators.apply_colors(
            src,
            side,
            display_options.syntax_highlight,
            language,
            display_options.background_color,
            positions,
        )
        if len(lines) != expected:
            raise RenderError(
                f"colouring the {side.value} side produced {len(lines)} line(s), expected {expected}"
            )
    else:
        lines = [f"{line}\n" for line in collaborators.split_lines(src)]

    return [collaborators.replace_tabs(line, display_options.tab_width) for line in lines]


def gutter(
    tag: str,
    line: int,
    is_novel: bool,
    side: Side,
    display_options: DisplayOptions,
    collaborators: Collaborators = DEFAULT_COLLABORATORS,
) -> str:
    """Styled ``<tag>#<line number>#`` label."""
    label = f"{tag}#{collaborators.format_line_num(line)}#"
    return collaborators.gutter_style(label, is_novel, side, display_options)


def _line_at(lines: Sequence[str], index: int, side: Side) -> str:
    if not 0 <= index < len(lines):
        raise LineIndexError(side, index, len(lines))
    return lines[index]


def _check_hunks(hunks: Sequence[Hunk], lhs_total: int, rhs_total: int) -> None:
    """Raise LineIndexError for the first hunk row that points past its side."""
    for hunk in hunks:
        for lhs_line, rhs_line in hunk.lines:
            if lhs_line is not None and not 0 <= lhs_line < lhs_total:
                raise LineIndexError(Side.LEFT, lhs_line, lhs_total)
            if rhs_line is not None and not 0 <= rhs_line < rhs_total:
                raise LineIndexError(Side.RIGHT, rhs_line, rhs_total)


def render(
    lhs_src: str,
    rhs_src: str,
    display_options: DisplayOptions,
    lhs_positions: Sequence[MatchedPos],
    rhs_positions: Sequence[MatchedPos],
    hunks: Sequence[Hunk],
    lhs_display_path: str,
    rhs_display_path: str,
    lang_name: str,
    language: Optional[str] = None,
    sink: Optional[TextIO] = None,
    collaborators: Collaborators = DEFAULT_COLLABORATORS,
) -> None:
    """Write every hunk of one file pair to *sink* (stdout by default).

    Raises LineIndexError before anything is written when a hunk row refers
    to a line that does not exist.
    """
    out = sink if sink is not None else sys.stdout
    c = collaborators

    lhs_lines = materialize_lines(lhs_src, Side.LEFT, lhs_positions, display_options, language, c)
    rhs_lines = materialize_lines(rhs_src, Side.RIGHT, rhs_positions, display_options, language, c)
    _check_hunks(hunks, len(lhs_lines), len(rhs_lines))

    opposite_to_lhs = c.opposite_positions(lhs_positions)
    opposite_to_rhs = c.opposite_positions(rhs_positions)

    for i, hunk in enumerate(hunks, start=1):
        out.write(
            c.header(lhs_display_path, rhs_display_path, i, len(hunks), lang_name, display_options)
            + "\n"
        )

        hunk_lines = list(hunk.lines)
        before_lines = c.before_context(
            hunk_lines, opposite_to_lhs, opposite_to_rhs, BEFORE_CONTEXT_LINES
        )
        after_lines = c.after_context(
            before_lines + hunk_lines,
            opposite_to_lhs,
            opposite_to_rhs,
            len(lhs_lines),
            len(rhs_lines),
            display_options.num_context_lines,
        )

        for lhs_line, _ in before_lines:
            if lhs_line is not None:
                content = _line_at(lhs_lines, lhs_line, Side.LEFT)
                label = gutter("0", lhs_line, False, Side.LEFT, display_options, c)
                out.write(f"{label}{PADDING}{content}")

        for lhs_line, _ in hunk_lines:
            if lhs_line is not None:
                content = _line_at(lhs_lines, lhs_line, Side.LEFT)
                label = gutter("-", lhs_line, True, Side.LEFT, display_options, c)
                out.write(f"{label}{PADDING}{content}")

        for _, rhs_line in hunk_lines:
            if rhs_line is not None:
                content = _line_at(rhs_lines, rhs_line, Side.RIGHT)
                label = gutter("+", rhs_line, True, Side.RIGHT, display_options, c)
                out.write(f"{PADDING}{label}{content}")

        for _, rhs_line in after_lines:
            if rhs_line is not None:
                content = _line_at(rhs_lines, rhs_line, Side.RIGHT)
                label = gutter("0", rhs_line, False, Side.RIGHT, display_options, c)
                out.write(f"{PADDING}{label}{content}")

        out.write("\n")

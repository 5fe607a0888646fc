"""Terminal styling: syntax colours, novel-token highlights, gutters, headers.

Everything here returns plain ``str`` with ANSI escapes already embedded, so
the interleaver can write rows without knowing whether colour is on.
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence

from rich.color import ColorSystem
from rich.console import Console
from rich.style import Style
from rich.syntax import Syntax
from rich.text import Text

from inlinediff.config.schema import Background, DisplayOptions
from inlinediff.diff.models import MatchedPos, MatchKind, Side
from inlinediff.lines import line_spans

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")

_NOVEL_STYLE = {
    ("dark", Side.LEFT): Style(color="bright_red", bold=True),
    ("dark", Side.RIGHT): Style(color="bright_green", bold=True),
    ("light", Side.LEFT): Style(color="red", bold=True),
    ("light", Side.RIGHT): Style(color="green", bold=True),
}

_SYNTAX_THEME = {
    "dark": "ansi_dark",
    "light": "ansi_light",
}

# Only needed to resolve style names while rendering segments; never printed to.
_console = Console(color_system="standard", force_terminal=True, highlight=False)


def _to_ansi(text: Text) -> str:
    """Render *text* to a string with SGR escapes, leaving tabs untouched."""
    return "".join(
        seg.style.render(seg.text, color_system=ColorSystem.STANDARD) if seg.style else seg.text
        for seg in text.render(_console)
    )


def _highlight(src: str, language: str, background: Background) -> Optional[Text]:
    """Syntax-highlight *src*, or return None when the language is unknown.

    ``tab_size=0`` keeps pygments from expanding tabs, so token offsets stay
    those of the original source.
    """
    syntax = Syntax(src, language, theme=_SYNTAX_THEME[background], tab_size=0)
    if syntax.lexer is None:
        return None
    highlighted = syntax.highlight(src)
    if not highlighted.plain.startswith(src):
        return None
    return highlighted


def _slice(text: Text, start: int, end: int) -> Text:
    line = Text(text.plain[start:end], end="")
    for span in text.spans:
        if span.end > start and span.start < end:
            line.stylize(span.style, max(span.start, start) - start, min(span.end, end) - start)
    return line


def apply_colors(
    src: str,
    side: Side,
    syntax_highlight: bool,
    language: Optional[str],
    background: Background,
    positions: Sequence[MatchedPos],
) -> List[str]:
    """Colour every line of *src*; one newline-terminated string per line.

    Novel tokens are drawn bold red on the left and bold green on the right.
    Unchanged tokens keep their syntax colour, or stay plain when
    highlighting is off or the language is unknown.
    """
    # pygments folds CRLF to LF; line content and columns are unaffected.
    body = src.replace("\r\n", "\n")
    text: Optional[Text] = None
    if syntax_highlight and language:
        text = _highlight(body, language, background)
    if text is None:
        text = Text(body, end="")

    spans = line_spans(body)
    novel_style = _NOVEL_STYLE[(background, side)]
    for mp in positions:
        if mp.kind is not MatchKind.NOVEL or mp.pos.line >= len(spans):
            continue
        line_start, line_end = spans[mp.pos.line]
        start = min(line_start + mp.pos.start_col, line_end)
        end = min(line_start + mp.pos.end_col, line_end)
        if end > start:
            text.stylize(novel_style, start, end)

    return [_to_ansi(_slice(text, start, end)) + "\n" for start, end in spans]


def replace_tabs(line: str, tab_width: int) -> str:
    """Expand tabs to the next multiple of *tab_width* columns.

    Escape sequences take no columns and a newline resets the column.
    """
    if "\t" not in line:
        return line

    out: List[str] = []
    column = 0
    pos = 0
    while pos < len(line):
        m = _ANSI_RE.match(line, pos)
        if m:
            out.append(m.group())
            pos = m.end()
            continue
        ch = line[pos]
        if ch == "\t":
            pad = tab_width - (column % tab_width)
            out.append(" " * pad)
            column += pad
        elif ch == "\n":
            out.append(ch)
            column = 0
        else:
            out.append(ch)
            column += 1
        pos += 1
    return "".join(out)


def apply_line_number_color(
    s: str,
    is_novel: bool,
    side: Side,
    display_options: DisplayOptions,
) -> str:
    """Colour a gutter label; passthrough when colour is off."""
    if not display_options.use_color:
        return s
    if is_novel:
        style = _NOVEL_STYLE[(display_options.background_color, side)]
    else:
        style = Style(dim=True)
    return style.render(s, color_system=ColorSystem.STANDARD)


def header(
    lhs_display_path: str,
    rhs_display_path: str,
    hunk_num: int,
    hunk_total: int,
    language_name: str,
    display_options: DisplayOptions,
) -> str:
    """Header line shown above each hunk.

    The first hunk of a renamed file names both paths.
    """
    if hunk_num == 1 and lhs_display_path != rhs_display_path:
        path = f"{lhs_display_path} => {rhs_display_path}"
    else:
        path = rhs_display_path

    trailer = f" --- {language_name}"
    if hunk_total > 1:
        trailer = f" --- {hunk_num}/{hunk_total}{trailer}"

    if not display_options.use_color:
        return path + trailer
    return (
        Style(bold=True).render(path, color_system=ColorSystem.STANDARD)
        + Style(dim=True).render(trailer, color_system=ColorSystem.STANDARD)
    )

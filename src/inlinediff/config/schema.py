"""Configuration schema: dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

ColorMode = Literal["auto", "always", "never"]
Background = Literal["dark", "light"]

COLOR_MODES = ("auto", "always", "never")
BACKGROUNDS = ("dark", "light")

DEFAULT_TAB_WIDTH = 4
DEFAULT_CONTEXT_LINES = 3


@dataclass(frozen=True)
class DisplayOptions:
    """Resolved, read-only options consumed by every display component."""

    use_color: bool = False
    syntax_highlight: bool = True
    background_color: Background = "dark"
    tab_width: int = DEFAULT_TAB_WIDTH
    num_context_lines: int = DEFAULT_CONTEXT_LINES


@dataclass
class DisplayConfig:
    color: ColorMode = "auto"
    background: Background = "dark"
    syntax_highlight: bool = True
    tab_width: int = DEFAULT_TAB_WIDTH
    context: int = DEFAULT_CONTEXT_LINES

    def resolve(self, is_tty: bool) -> DisplayOptions:
        """Freeze this section into :class:`DisplayOptions`.

        ``color = "auto"`` turns colour on only when the output is a terminal.
        """
        if self.color == "auto":
            use_color = is_tty
        else:
            use_color = self.color == "always"
        return DisplayOptions(
            use_color=use_color,
            syntax_highlight=self.syntax_highlight,
            background_color=self.background,
            tab_width=self.tab_width,
            num_context_lines=self.context,
        )


@dataclass
class InlineDiffConfig:
    version: str = "1.0"
    display: DisplayConfig = field(default_factory=DisplayConfig)

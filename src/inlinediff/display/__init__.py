"""Display layer: context windows, styling, and the inline renderer."""

from inlinediff.display.inline import (
    Collaborators,
    LineIndexError,
    RenderError,
    gutter,
    materialize_lines,
    render,
)

__all__ = [
    "Collaborators",
    "LineIndexError",
    "RenderError",
    "gutter",
    "materialize_lines",
    "render",
]

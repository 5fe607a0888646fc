"""Shared test fixtures: sample sources, display options, hunks."""

from __future__ import annotations

import pytest

from inlinediff.config.schema import DisplayOptions
from inlinediff.diff.models import Hunk


@pytest.fixture
def plain_options() -> DisplayOptions:
    """Colour off, one line of after-context."""
    return DisplayOptions(use_color=False, tab_width=4, num_context_lines=1)


@pytest.fixture
def color_options() -> DisplayOptions:
    return DisplayOptions(use_color=True, syntax_highlight=False, tab_width=4, num_context_lines=1)


@pytest.fixture
def abc_sources() -> tuple[str, str]:
    """Middle line changed."""
    return "a\nb\nc\n", "a\nx\nc\n"


@pytest.fixture
def middle_hunk() -> Hunk:
    return Hunk(lines=((1, 1),))


@pytest.fixture
def long_sources() -> tuple[str, str]:
    """Ten lines; line 6 (index 5) deleted from the old side."""
    old = "".join(f"line {n}\n" for n in range(1, 11))
    new = "".join(f"line {n}\n" for n in range(1, 11) if n != 6)
    return old, new

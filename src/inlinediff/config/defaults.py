"""Starter .inlinediff.toml template."""

DEFAULT_TOML = """\
# inlinediff configuration
version = "1.0"

[display]
color = "auto"            # auto | always | never
background = "dark"       # dark | light, picks the colour variants
syntax_highlight = true
tab_width = 4
context = 3               # unchanged lines shown after each hunk
"""

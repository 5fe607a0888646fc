"""inlinediff CLI: Typer application with show, hunks, and init commands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from inlinediff import __version__

app = typer.Typer(
    name="inlinediff",
    help="Show the differences between two files as one inline stream.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _read_source(path: Path) -> str:
    """Read an input file, exit 2 on failure."""
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        console.print(f"[bold red]Error:[/bold red] cannot read {path}: {exc}")
        raise typer.Exit(code=2) from exc


# ── show ──────────────────────────────────────────────────────────────────────


@app.command()
def show(
    old: Path = typer.Argument(..., help="Old version of the file"),
    new: Path = typer.Argument(..., help="New version of the file"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .inlinediff.toml"),
    color: Optional[str] = typer.Option(None, "--color", help="Colour: auto | always | never"),
    background: Optional[str] = typer.Option(None, "--background", help="Terminal background: dark | light"),
    context: Optional[int] = typer.Option(None, "--context", "-C", help="Unchanged lines shown after each hunk"),
    tab_width: Optional[int] = typer.Option(None, "--tab-width", help="Columns per tab stop"),
    syntax: Optional[bool] = typer.Option(None, "--syntax/--no-syntax", help="Syntax highlighting"),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Pygments lexer name, e.g. python"),
    hunks_file: Optional[Path] = typer.Option(None, "--hunks", help="Read precomputed hunks from a YAML file"),
    exit_code: bool = typer.Option(False, "--exit-code", help="Exit 1 when the files differ"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Render the differences between OLD and NEW."""
    from inlinediff.config.loader import ConfigError, load_config, validate
    from inlinediff.diff.hunk_loader import HunkFileError, load_hunks
    from inlinediff.diff.matcher import match_sources
    from inlinediff.display.inline import DEFAULT_LANGUAGE_NAME, RenderError, render

    # --- Load config ---
    try:
        cfg = load_config(Path.cwd(), config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    # --- CLI overrides ---
    display = cfg.display
    if color is not None:
        display.color = color  # type: ignore[assignment]
    if background is not None:
        display.background = background  # type: ignore[assignment]
    if context is not None:
        display.context = context
    if tab_width is not None:
        display.tab_width = tab_width
    if syntax is not None:
        display.syntax_highlight = syntax
    try:
        validate(cfg)
    except ConfigError as exc:
        console.print(f"[bold red]Invalid option:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    options = display.resolve(is_tty=sys.stdout.isatty())

    lhs_src = _read_source(old)
    rhs_src = _read_source(new)
    matched = match_sources(lhs_src, rhs_src)

    # --- Hunks ---
    if hunks_file is not None:
        try:
            hunks = load_hunks(hunks_file)
        except HunkFileError as exc:
            console.print(f"[bold red]Hunk file error:[/bold red] {exc}")
            raise typer.Exit(code=2) from exc
    else:
        hunks = matched.hunks

    if verbose:
        console.print(f"[dim]Config: {config or 'defaults + .inlinediff.toml'}[/dim]")
        console.print(f"[dim]Options: {options}[/dim]")
        console.print(f"[dim]Hunks: {len(hunks)}[/dim]")

    # --- Render ---
    try:
        render(
            lhs_src,
            rhs_src,
            options,
            matched.lhs_positions,
            matched.rhs_positions,
            hunks,
            str(old),
            str(new),
            language or DEFAULT_LANGUAGE_NAME,
            language=language,
            sink=sys.stdout,
        )
    except RenderError as exc:
        console.print(f"[bold red]Render error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if exit_code and hunks:
        raise typer.Exit(code=1)


# ── hunks ─────────────────────────────────────────────────────────────────────


@app.command()
def hunks(
    old: Path = typer.Argument(..., help="Old version of the file"),
    new: Path = typer.Argument(..., help="New version of the file"),
) -> None:
    """Print the hunks between OLD and NEW as YAML (input for show --hunks)."""
    from inlinediff.diff.hunk_loader import dump_hunks
    from inlinediff.diff.matcher import match_sources

    matched = match_sources(_read_source(old), _read_source(new))
    sys.stdout.write(dump_hunks(matched.hunks))


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .inlinediff.toml in the current directory."""
    from inlinediff.config.defaults import DEFAULT_TOML
    from inlinediff.config.loader import CONFIG_FILENAME

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"inlinediff {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """inlinediff: inline diffs with context that stays aligned across edits."""

"""Command line interface for treediff."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from treediff.compare.session import ComparisonSession, diff_pair
from treediff.config import AppConfig, CONTEXT_LINES
from treediff.ingestion.loader import read_source
from treediff.matching.slug import file_slug
from treediff.models import MatchedPair
from treediff.render import render_pair_diff


console = Console()
app = typer.Typer(help="treediff - match and diff two trees of text files")

STATUS_STYLES = {"modified": "blue", "added": "green", "deleted": "red"}


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _build_config(
    ignore: Optional[List[str]], no_default_ignore: bool, context: int = CONTEXT_LINES
) -> AppConfig:
    if context < 0:
        raise typer.BadParameter("--context must be zero or more")
    return AppConfig(context_lines=context).with_ignore(
        ignore or [], use_defaults=not no_default_ignore
    )


def _open_session(base: Path, target: Path, config: AppConfig) -> ComparisonSession:
    for directory in (base, target):
        if not directory.is_dir():
            raise typer.BadParameter(f"Directory not found: {directory}")
    return ComparisonSession.from_directories(base, target, config)


@app.command()
def pairs(
    base: Path = typer.Argument(..., help="Base directory.", resolve_path=True),
    target: Path = typer.Argument(..., help="Target directory.", resolve_path=True),
    search: str = typer.Option("", "--search", "-s", help="Filter by slug or target path"),
    ignore: Optional[List[str]] = typer.Option(None, "--ignore", "-i", help="Extra ignore pattern"),
    no_default_ignore: bool = typer.Option(False, "--no-default-ignore", help="Drop the built-in ignore list"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """List files matched across the two trees."""
    _setup_logging(verbose)
    session = _open_session(base, target, _build_config(ignore, no_default_ignore))

    if not session.pairs:
        console.print("[yellow]No files found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Status")
    table.add_column("Slug")
    table.add_column("Base")
    table.add_column("Target")

    for pair in session.search(search):
        style = STATUS_STYLES[pair.type]
        table.add_row(
            f"[{style}]{pair.type}[/{style}]",
            Text(pair.slug),
            Text(pair.base.path if pair.base else ""),
            Text(pair.target.path if pair.target else ""),
        )

    console.print(table)
    stats = session.stats
    console.print(f"Modified: {stats.modified}, added: {stats.added}, deleted: {stats.deleted}")


@app.command()
def show(
    base: Path = typer.Argument(..., help="Base directory.", resolve_path=True),
    target: Path = typer.Argument(..., help="Target directory.", resolve_path=True),
    slug: str = typer.Argument(..., help="Slug of the pair to display"),
    context: int = typer.Option(CONTEXT_LINES, "--context", "-c", help="Context lines around folds"),
    expand: bool = typer.Option(False, "--expand", "-e", help="Show folded lines too"),
    ignore: Optional[List[str]] = typer.Option(None, "--ignore", "-i", help="Extra ignore pattern"),
    no_default_ignore: bool = typer.Option(False, "--no-default-ignore", help="Drop the built-in ignore list"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Show the diff of one matched pair."""
    _setup_logging(verbose)
    config = _build_config(ignore, no_default_ignore, context)
    session = _open_session(base, target, config)

    pair = session.find(slug)
    if pair is None:
        raise typer.BadParameter(f"No pair with slug: {slug}")

    console.print(render_pair_diff(session.diff(pair), context_lines=config.context_lines, expand=expand))


@app.command()
def diff(
    old: Path = typer.Argument(..., help="Old file.", resolve_path=True),
    new: Path = typer.Argument(..., help="New file.", resolve_path=True),
    context: int = typer.Option(CONTEXT_LINES, "--context", "-c", help="Context lines around folds"),
    expand: bool = typer.Option(False, "--expand", "-e", help="Show folded lines too"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Diff two individual files."""
    _setup_logging(verbose)
    config = _build_config(None, no_default_ignore=True, context=context)

    sources = []
    for path in (old, new):
        source = read_source(path, path.name) if path.is_file() else None
        if source is None:
            raise typer.BadParameter(f"File not readable: {path}")
        sources.append(source)

    pair = MatchedPair("modified", file_slug(new.name), sources[0], sources[1])
    console.print(render_pair_diff(diff_pair(pair), context_lines=config.context_lines, expand=expand))

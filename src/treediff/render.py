"""Rich console rendering of a pair diff."""

from __future__ import annotations

from typing import List, Optional

from rich.console import Group
from rich.text import Text

from treediff.compare.session import PairDiff
from treediff.config import CONTEXT_LINES
from treediff.diff.chunks import Fold, fold_chunk
from treediff.diff.lines import LineDiff
from treediff.models import DiffLine

LINE_STYLES = {"unchanged": "", "added": "green", "removed": "red"}
HIGHLIGHT_STYLES = {"added": "bold black on green", "removed": "bold black on red"}
PREFIXES = {"unchanged": " ", "added": "+", "removed": "-"}


def _gutter(number: Optional[int], width: int) -> str:
    return str(number).rjust(width) if number is not None else " " * width


def render_line(diff: LineDiff, index: int, *, width: int = 4) -> Text:
    line: DiffLine = diff[index]
    style = LINE_STYLES[line.kind]
    text = Text(
        f"{_gutter(line.old_line_no, width)} {_gutter(line.new_line_no, width)} ",
        style="dim",
    )
    text.append(f"{PREFIXES[line.kind]} ", style=style)

    segments = diff.segments_for(index)
    if segments is None:
        text.append(line.content, style=style)
        return text

    # Paired lines show shared words plus only their own side's changes.
    for segment in segments:
        if segment.kind == "equal":
            text.append(segment.value, style=style)
        elif segment.kind == line.kind:
            text.append(segment.value, style=HIGHLIGHT_STYLES[line.kind])
    return text


def render_fold(fold: Fold, *, width: int = 4) -> Text:
    noun = "line" if fold.hidden == 1 else "lines"
    return Text(f"{' ' * (width * 2 + 2)}⋯ {fold.hidden} unchanged {noun}", style="dim italic")


def render_pair_header(pair_diff: PairDiff) -> Text:
    pair = pair_diff.pair
    header = Text(pair.display_path, style="bold")
    header.append(f"  [{pair.type}]", style="cyan")
    header.append(f"  +{pair_diff.tally.added}", style="green")
    header.append(f" -{pair_diff.tally.removed}", style="red")
    return header


def render_pair_diff(
    pair_diff: PairDiff, *, context_lines: int = CONTEXT_LINES, expand: bool = False
) -> Group:
    """Render every chunk, folding long unchanged chunks unless ``expand`` is set."""
    diff = pair_diff.lines
    width = max(len(str(len(diff))), 3)
    rows: List[Text] = [render_pair_header(pair_diff)]
    for chunk in pair_diff.chunks:
        visible = range(chunk.start, chunk.end) if expand else fold_chunk(chunk, context_lines)
        for row in visible:
            if isinstance(row, Fold):
                rows.append(render_fold(row, width=width))
            else:
                rows.append(render_line(diff, row, width=width))
    return Group(*rows)

"""Grouping diff lines into chunks and folding long unchanged stretches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Union

from treediff.config import CONTEXT_LINES
from treediff.models import Chunk, DiffLine


@dataclass(slots=True, frozen=True)
class Fold:
    """Hidden run of lines inside an unchanged chunk, by absolute line index."""

    start: int
    hidden: int

    @property
    def end(self) -> int:
        return self.start + self.hidden


def _chunk_kind(line: DiffLine) -> str:
    return "unchanged" if line.kind == "unchanged" else "changed"


def chunkify(lines: Sequence[DiffLine]) -> List[Chunk]:
    """Split a flat diff into maximal unchanged and changed runs."""
    chunks: List[Chunk] = []
    start = 0
    for index in range(1, len(lines) + 1):
        if index < len(lines) and _chunk_kind(lines[index]) == _chunk_kind(lines[start]):
            continue
        chunks.append(Chunk(_chunk_kind(lines[start]), start, tuple(lines[start:index])))
        start = index
    return chunks


def should_fold(chunk: Chunk, context: int = CONTEXT_LINES) -> bool:
    return chunk.kind == "unchanged" and len(chunk.lines) > context * 2 + 2


def fold_chunk(chunk: Chunk, context: int = CONTEXT_LINES) -> List[Union[int, Fold]]:
    """Return the visible line indices of a chunk, with a Fold marker in place of hidden lines."""
    if not should_fold(chunk, context):
        return list(range(chunk.start, chunk.end))

    fold = Fold(chunk.start + context, len(chunk.lines) - context * 2)
    rows: List[Union[int, Fold]] = list(range(chunk.start, fold.start))
    rows.append(fold)
    rows.extend(range(fold.end, chunk.end))
    return rows


def expand_fold(fold: Fold) -> range:
    return range(fold.start, fold.end)

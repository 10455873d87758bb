"""Core treediff data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Optional, Tuple

PairType = Literal["modified", "added", "deleted"]
OpKind = Literal["equal", "added", "removed"]
LineKind = Literal["unchanged", "added", "removed"]
ChunkKind = Literal["unchanged", "changed"]


@dataclass(slots=True, frozen=True)
class SourceFile:
    """A text file read from one of the compared trees."""

    path: str
    content: str
    size: int


@dataclass(slots=True, frozen=True)
class MatchedPair:
    """Files from the base and target trees sharing one slug."""

    type: PairType
    slug: str
    base: Optional[SourceFile] = None
    target: Optional[SourceFile] = None

    @property
    def display_path(self) -> str:
        source = self.target or self.base
        return source.path if source is not None else ""


@dataclass(slots=True, frozen=True)
class EditOp:
    """One step of an edit script; indices are 0-based positions in the inputs."""

    kind: OpKind
    old_index: Optional[int]
    new_index: Optional[int]
    value: Any


@dataclass(slots=True, frozen=True)
class DiffLine:
    kind: LineKind
    old_line_no: Optional[int]
    new_line_no: Optional[int]
    content: str


@dataclass(slots=True, frozen=True)
class WordSegment:
    kind: OpKind
    value: str


@dataclass(slots=True, frozen=True)
class Chunk:
    """Contiguous run of unchanged lines, or of removed/added lines."""

    kind: ChunkKind
    start: int
    lines: Tuple[DiffLine, ...]

    @property
    def end(self) -> int:
        return self.start + len(self.lines)


@dataclass(slots=True)
class DiffTally:
    added: int = 0
    removed: int = 0

"""Line-level diffing with intra-line pairing."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from treediff.diff.lcs import diff_sequences
from treediff.diff.words import diff_words
from treediff.models import DiffLine, DiffTally, EditOp, WordSegment
from treediff.utils.text import split_lines

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class LineDiff:
    """Ordered diff lines plus pairing and word-segment tables keyed by line index.

    ``partners`` is symmetric. A paired removed/added couple shares one
    segments tuple, stored under both indices.
    """

    lines: List[DiffLine]
    partners: Dict[int, int] = field(default_factory=dict)
    segments: Dict[int, Tuple[WordSegment, ...]] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[DiffLine]:
        return iter(self.lines)

    def __getitem__(self, index: int) -> DiffLine:
        return self.lines[index]

    def partner(self, index: int) -> Optional[int]:
        return self.partners.get(index)

    def segments_for(self, index: int) -> Optional[Tuple[WordSegment, ...]]:
        return self.segments.get(index)

    def tally(self) -> DiffTally:
        tally = DiffTally()
        for line in self.lines:
            if line.kind == "added":
                tally.added += 1
            elif line.kind == "removed":
                tally.removed += 1
        return tally


def _to_line(op: EditOp) -> DiffLine:
    if op.kind == "equal":
        return DiffLine("unchanged", op.old_index + 1, op.new_index + 1, op.value)
    if op.kind == "added":
        return DiffLine("added", None, op.new_index + 1, op.value)
    return DiffLine("removed", op.old_index + 1, None, op.value)


def _interleave(removed: Sequence[DiffLine], added: Sequence[DiffLine]) -> Iterator[DiffLine]:
    for k in range(max(len(removed), len(added))):
        if k < len(removed):
            yield removed[k]
        if k < len(added):
            yield added[k]


def resequence(ops: Sequence[EditOp]) -> List[DiffLine]:
    """Turn an edit script into diff lines, interleaving each change run index by index."""
    lines: List[DiffLine] = []
    removed: List[DiffLine] = []
    added: List[DiffLine] = []
    for op in ops:
        if op.kind == "equal":
            lines.extend(_interleave(removed, added))
            removed, added = [], []
            lines.append(_to_line(op))
        elif op.kind == "removed":
            removed.append(_to_line(op))
        else:
            added.append(_to_line(op))
    lines.extend(_interleave(removed, added))
    return lines


def pair_lines(lines: Sequence[DiffLine]) -> LineDiff:
    """Pair index-adjacent removed/added lines and attach their word segments."""
    result = LineDiff(list(lines))
    for index in range(len(lines) - 1):
        current, following = lines[index], lines[index + 1]
        if {current.kind, following.kind} != {"removed", "added"}:
            continue
        if index in result.partners or index + 1 in result.partners:
            continue
        old, new = (current, following) if current.kind == "removed" else (following, current)
        segments = tuple(diff_words(old.content, new.content))
        result.partners[index] = index + 1
        result.partners[index + 1] = index
        result.segments[index] = segments
        result.segments[index + 1] = segments
    return result


def diff_lines(old_text: Optional[str], new_text: Optional[str]) -> LineDiff:
    """Compute the line diff between two texts; ``None`` counts as empty text."""
    old_lines = split_lines(old_text)
    new_lines = split_lines(new_text)
    LOGGER.debug("Diffing %d old lines against %d new lines", len(old_lines), len(new_lines))
    return pair_lines(resequence(diff_sequences(old_lines, new_lines)))

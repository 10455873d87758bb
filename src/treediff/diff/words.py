"""Word-level diffing of a removed/added line pair."""

from __future__ import annotations

from typing import Iterable, List

from treediff.diff.lcs import diff_sequences
from treediff.models import EditOp, WordSegment
from treediff.utils.text import tokenize_words


def coalesce(ops: Iterable[EditOp]) -> List[WordSegment]:
    """Merge runs of same-kind ops into single segments."""
    segments: List[WordSegment] = []
    for op in ops:
        if segments and segments[-1].kind == op.kind:
            segments[-1] = WordSegment(op.kind, segments[-1].value + op.value)
        else:
            segments.append(WordSegment(op.kind, op.value))
    return segments


def diff_words(old_line: str, new_line: str) -> List[WordSegment]:
    """Classify the words of two lines as equal, removed or added.

    Equal segments belong to both lines, removed ones only to ``old_line`` and
    added ones only to ``new_line``.
    """
    return coalesce(diff_sequences(tokenize_words(old_line), tokenize_words(new_line)))

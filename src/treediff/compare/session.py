"""Comparison of two file trees."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from treediff.config import AppConfig
from treediff.diff.chunks import chunkify
from treediff.diff.lines import LineDiff, diff_lines
from treediff.ingestion.loader import load_tree
from treediff.matching.matcher import match_files
from treediff.models import Chunk, DiffTally, MatchedPair, SourceFile

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class PairStats:
    modified: int = 0
    added: int = 0
    deleted: int = 0

    def increment(self, pair_type: str) -> None:
        if pair_type == "modified":
            self.modified += 1
        elif pair_type == "added":
            self.added += 1
        else:
            self.deleted += 1

    @property
    def total(self) -> int:
        return self.modified + self.added + self.deleted


@dataclass(slots=True)
class PairDiff:
    pair: MatchedPair
    lines: LineDiff
    chunks: List[Chunk]
    tally: DiffTally


def diff_pair(pair: MatchedPair) -> PairDiff:
    """Diff the two sides of a pair; a missing side counts as empty text."""
    old_text = pair.base.content if pair.base is not None else None
    new_text = pair.target.content if pair.target is not None else None
    lines = diff_lines(old_text, new_text)
    LOGGER.debug("Diffed %s (%s): %d lines", pair.slug, pair.type, len(lines))
    return PairDiff(pair=pair, lines=lines, chunks=chunkify(lines.lines), tally=lines.tally())


class ComparisonSession:
    """Matched pairs of one base/target comparison and their diffs."""

    def __init__(
        self,
        base_files: Iterable[SourceFile],
        target_files: Iterable[SourceFile],
    ) -> None:
        self.base_files = list(base_files)
        self.target_files = list(target_files)
        self.pairs = match_files(self.base_files, self.target_files)

    @classmethod
    def from_directories(
        cls, base_dir: Path, target_dir: Path, config: Optional[AppConfig] = None
    ) -> ComparisonSession:
        config = config or AppConfig()
        load = dict(
            ignore_patterns=config.ignore_patterns,
            batch_size=config.batch_size,
            max_workers=config.max_workers,
        )
        base_files = load_tree(base_dir, **load)
        target_files = load_tree(target_dir, **load)
        return cls(base_files, target_files)

    @property
    def stats(self) -> PairStats:
        stats = PairStats()
        for pair in self.pairs:
            stats.increment(pair.type)
        return stats

    def search(self, term: str) -> List[MatchedPair]:
        """Pairs whose slug or target path contains ``term``, ignoring case."""
        needle = term.strip().lower()
        if not needle:
            return list(self.pairs)
        return [
            pair
            for pair in self.pairs
            if needle in pair.slug
            or (pair.target is not None and needle in pair.target.path.lower())
        ]

    def find(self, slug: str) -> Optional[MatchedPair]:
        slug = slug.lower()
        for pair in self.pairs:
            if pair.slug == slug:
                return pair
        return None

    def diff(self, pair: MatchedPair) -> PairDiff:
        return diff_pair(pair)

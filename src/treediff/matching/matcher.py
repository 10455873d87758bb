"""Pairing of base and target files by slug."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from treediff.matching.slug import file_slug
from treediff.models import MatchedPair, SourceFile

LOGGER = logging.getLogger(__name__)


def group_by_slug(files: Iterable[SourceFile]) -> Dict[str, List[SourceFile]]:
    groups: Dict[str, List[SourceFile]] = {}
    for source in files:
        groups.setdefault(file_slug(source.path), []).append(source)
    return groups


def _log_dropped(side: str, slug: str, matches: List[SourceFile]) -> None:
    if len(matches) > 1:
        LOGGER.debug(
            "Slug %r has %d %s files; keeping %s, dropping %s",
            slug,
            len(matches),
            side,
            matches[0].path,
            ", ".join(source.path for source in matches[1:]),
        )


def match_files(
    base_files: Iterable[SourceFile], target_files: Iterable[SourceFile]
) -> List[MatchedPair]:
    """Match two file collections into modified/added/deleted pairs sorted by slug.

    Only the first file recorded for a slug on each side takes part in a pair.
    """
    base = group_by_slug(base_files)
    target = group_by_slug(target_files)

    pairs: List[MatchedPair] = []
    for slug in sorted(base.keys() | target.keys()):
        base_matches = base.get(slug, [])
        target_matches = target.get(slug, [])
        _log_dropped("base", slug, base_matches)
        _log_dropped("target", slug, target_matches)

        if base_matches and target_matches:
            pairs.append(MatchedPair("modified", slug, base_matches[0], target_matches[0]))
        elif base_matches:
            pairs.append(MatchedPair("deleted", slug, base_matches[0], None))
        else:
            pairs.append(MatchedPair("added", slug, None, target_matches[0]))

    LOGGER.debug("Matched %d base and %d target slugs into %d pairs", len(base), len(target), len(pairs))
    return pairs

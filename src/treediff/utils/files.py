"""Utility helpers for working with files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

LOGGER = logging.getLogger(__name__)


def iter_file_paths(root: Path) -> Iterator[Path]:
    """Yield every regular file under ``root``, descending into directories in sorted order.

    Symlinked directories are not followed. Directories that cannot be listed
    are logged and skipped.
    """
    try:
        children = sorted(root.iterdir())
    except OSError as exc:
        LOGGER.warning("Failed to list %s: %s", root, exc)
        return

    for child in children:
        if child.is_symlink() and child.is_dir():
            LOGGER.debug("Skipping symlinked directory %s", child)
        elif child.is_dir():
            yield from iter_file_paths(child)
        elif child.is_file():
            yield child


def relative_posix(path: Path, root: Path) -> str:
    return path.relative_to(root).as_posix()


def should_ignore(path: str, patterns: Iterable[str]) -> bool:
    """Check a ``/``-separated relative path against the ignore patterns.

    A pattern matches when the path ends with it (extensions, file names),
    or when it names a directory segment.
    """
    lower_path = path.lower()
    for pattern in patterns:
        p = pattern.lower()
        if lower_path.endswith(p) or f"/{p}/" in lower_path or lower_path.startswith(f"{p}/"):
            return True
    return False

"""Reading a directory tree into SourceFile records.

Files are read on a thread pool in small batches so large trees do not block
the caller for one long sequential pass.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from treediff.config import DEFAULT_IGNORE
from treediff.models import SourceFile
from treediff.utils.files import iter_file_paths, relative_posix, should_ignore

LOGGER = logging.getLogger(__name__)


def read_source(path: Path, relative: str) -> Optional[SourceFile]:
    """Read one file as UTF-8 text, replacing undecodable bytes.

    Returns ``None`` when the file cannot be read.
    """
    try:
        data = path.read_bytes()
    except OSError as exc:
        LOGGER.warning("Failed to read %s: %s", path, exc)
        return None
    return SourceFile(path=relative, content=data.decode("utf-8", errors="replace"), size=len(data))


def find_sources(root: Path, ignore_patterns: Iterable[str] = DEFAULT_IGNORE) -> List[tuple[Path, str]]:
    """List ``(absolute, relative)`` paths under root that survive the ignore list."""
    patterns = list(ignore_patterns)
    found = []
    skipped = 0
    for path in iter_file_paths(root):
        relative = relative_posix(path, root)
        if should_ignore(relative, patterns):
            skipped += 1
            continue
        found.append((path, relative))
    LOGGER.debug("Found %d files under %s (%d ignored)", len(found), root, skipped)
    return found


def load_tree(
    root: Path,
    *,
    ignore_patterns: Sequence[str] = DEFAULT_IGNORE,
    batch_size: int = 20,
    max_workers: Optional[int] = None,
) -> List[SourceFile]:
    """Load every non-ignored file under ``root``, in path order."""
    root = Path(root)
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")

    sources = find_sources(root, ignore_patterns)
    files: List[SourceFile] = []
    step = max(batch_size, 1)

    with ThreadPoolExecutor(max_workers=max_workers or step) as pool:
        for i in range(0, len(sources), step):
            batch = sources[i : i + step]
            results = pool.map(lambda item: read_source(*item), batch)
            files.extend(source for source in results if source is not None)

    LOGGER.info("Loaded %d files from %s", len(files), root)
    return files

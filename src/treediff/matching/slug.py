"""Filename-derived identity keys used to match files across trees."""

from __future__ import annotations

import re

_VERSION_MARKER = re.compile(r"[._-]v?\d+(\.\d+)*")
_STAGE_MARKER = re.compile(r"[._-](legacy|modern|old|new|final|latest)")
_EXTENSION = re.compile(r"\.[^/.]+$")


def file_slug(path: str) -> str:
    """Derive the slug of a path.

    Version markers (``_v2``, ``-1.2.3``) are stripped before stage markers
    (``-legacy``, ``.final``), and both before the extension, so
    ``src/Util-Legacy_v2.js`` and ``lib/util-modern.js`` both resolve to
    ``util``. The result may be empty.
    """
    filename = path.replace("\\", "/").split("/")[-1].lower()
    filename = _VERSION_MARKER.sub("", filename)
    filename = _STAGE_MARKER.sub("", filename)
    filename = _EXTENSION.sub("", filename)
    return filename.strip()

"""Text helpers: the line and word tokenizers fed to the diff engine."""

from __future__ import annotations

import re
from typing import List, Optional

_WORD_BOUNDARY = re.compile(r"(\W+)")


def split_lines(text: Optional[str]) -> List[str]:
    """Split text on newlines without dropping a trailing empty line.

    ``None`` is treated as empty text, so it yields ``[""]`` like ``""`` does.
    """
    return (text or "").split("\n")


def tokenize_words(text: str) -> List[str]:
    """Split a line into alternating word and non-word runs.

    Whitespace and punctuation are kept as tokens so the pieces concatenate
    back to the original line.
    """
    return [token for token in _WORD_BOUNDARY.split(text) if token]

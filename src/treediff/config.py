"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional

DEFAULT_IGNORE = (
    "png", "jpg", "jpeg", "gif", "svg", "ico", "pdf", "zip", "tar", "gz",
    "exe", "dll", "so", "dylib", "bin", "woff", "woff2", "ttf", "eot",
    "node_modules", ".git", ".DS_Store", "dist", "build", "__pycache__", ".next",
)

CONTEXT_LINES = 3


def _default_ignore() -> List[str]:
    return list(DEFAULT_IGNORE)


@dataclass(slots=True)
class AppConfig:
    ignore_patterns: List[str] = field(default_factory=_default_ignore)
    context_lines: int = CONTEXT_LINES
    batch_size: int = 20
    max_workers: Optional[int] = None

    def __post_init__(self) -> None:
        if self.context_lines < 0:
            raise ValueError("context_lines must be non-negative")
        if self.batch_size < 1:
            raise ValueError("batch_size must be at least 1")

    def with_ignore(self, extra: Iterable[str] = (), *, use_defaults: bool = True) -> AppConfig:
        """Return a copy whose ignore list is the defaults (optionally) plus ``extra``."""
        patterns = list(self.ignore_patterns) if use_defaults else []
        for pattern in extra:
            pattern = pattern.strip()
            if pattern and pattern not in patterns:
                patterns.append(pattern)
        return replace(self, ignore_patterns=patterns)

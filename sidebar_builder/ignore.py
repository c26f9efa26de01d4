"""Partial-file-name filtering for markdown listings.

Patterns are plain substrings tested against the normalized absolute file
path; regular-expression metacharacters have no special meaning.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass

from .paths import normalize_path


def coerce_patterns(patterns: str | Iterable[str] | None) -> tuple[str, ...]:
    """Normalize ignore input to a tuple, wrapping a bare string.

    Empty patterns are dropped since they would match every path.
    """
    if patterns is None:
        return ()
    if isinstance(patterns, str):
        patterns = (patterns,)
    return tuple(str(pattern) for pattern in patterns if str(pattern))


@dataclass(frozen=True)
class PartialNameMatcher:
    """Ignore matcher over a fixed set of substring patterns."""

    patterns: tuple[str, ...] = ()

    @classmethod
    def from_patterns(cls, patterns: str | Iterable[str] | None) -> PartialNameMatcher:
        return cls(patterns=coerce_patterns(patterns))

    def matching_pattern(self, path: str | os.PathLike[str]) -> str | None:
        """Return the first pattern contained in ``path``, or ``None``."""
        normalized = normalize_path(path)
        for pattern in self.patterns:
            if pattern in normalized:
                return pattern
        return None

    def is_ignored(self, path: str | os.PathLike[str]) -> bool:
        return self.matching_pattern(path) is not None


__all__ = [
    "PartialNameMatcher",
    "coerce_patterns",
]

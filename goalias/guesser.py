"""Derive candidate aliases from import paths.

Candidates are built from the trailing segments of a slash-separated path.
Level 1 uses only the last segment, level N the whole path; each segment is
sanitized on its own before the pieces are joined.
"""

from __future__ import annotations

import re
from typing import Iterator, List

# Alias used when a path yields no usable characters at all.
FALLBACK_ALIAS = "pkg"

# Leading run of decimal digits from any script.
_LEADING_DIGITS_RE = re.compile(r"^\d+")


def split_path(path: str) -> List[str]:
    """Return the non-empty slash-separated segments of *path*."""
    return [segment for segment in path.split("/") if segment]


def sanitize_segment(segment: str) -> str:
    """Lower-case *segment* and keep only letters and digits, never digit-first."""
    kept = "".join(ch for ch in segment.lower() if ch.isalpha() or ch.isdecimal())
    return _LEADING_DIGITS_RE.sub("", kept)


def candidate(segments: List[str], level: int) -> str:
    """Return the candidate built from the last *level* segments (may be empty)."""
    if level < 1:
        return ""
    return "".join(sanitize_segment(segment) for segment in segments[-level:])


def iter_candidates(path: str) -> Iterator[str]:
    """Yield the candidate for each level from 1 up to the segment count."""
    segments = split_path(path)
    for level in range(1, len(segments) + 1):
        yield candidate(segments, level)


def guess_alias(path: str, fallback: str = FALLBACK_ALIAS) -> str:
    """Return the best alias for *path* with no knowledge of other imports.

    This is the last segment sanitized, e.g. ``"github.com/foo/go-yaml"``
    gives ``"goyaml"``; *fallback* is returned when nothing usable remains.
    """
    return candidate(split_path(path), 1) or fallback

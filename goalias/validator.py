"""Acceptance check for candidate aliases."""

from __future__ import annotations

from typing import AbstractSet


def is_valid_alias(
    candidate: str,
    used_aliases: AbstractSet[str],
    reserved_words: AbstractSet[str],
) -> bool:
    """Return True if *candidate* can be committed as a new alias.

    The guesser already guarantees the character set, so only emptiness,
    reserved names and earlier aliases of the same file are checked here.
    """
    if not candidate:
        return False
    if candidate in reserved_words:
        return False
    return candidate not in used_aliases

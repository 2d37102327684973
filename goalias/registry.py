"""Per-file registry that assigns every import path a unique alias."""

from __future__ import annotations

import sys
from typing import Dict, FrozenSet, Iterator, List, NamedTuple, Optional, Set, Tuple

from .config import GoAliasConfig, validate_config
from .errors import GoAliasError
from .guesser import candidate, split_path
from .reserved import reserved_words
from .stdlib import standard_package_name
from .stats import AliasStats
from .validator import is_valid_alias

# The cgo pseudo-package; its name is always "C".
CGO_PATH = "C"


class _Candidate(NamedTuple):
    alias: str
    source: str  # "hint", "path" or "suffix"
    level: int  # number of trailing segments used; 0 for hints


class ImportRegistry:
    """Import path to alias mapping for one generated file.

    Registration is append-only: once a path has an alias it keeps it, and
    every alias handed out is distinct from all others in the same registry
    and from the target language's reserved words.  A registry is not safe
    for concurrent use; create one per generated file.
    """

    def __init__(
        self,
        package_path: Optional[str] = None,
        config: Optional[GoAliasConfig] = None,
        stats: Optional[AliasStats] = None,
    ) -> None:
        if config is None:
            config = GoAliasConfig()
        validate_config(config)
        self.config = config
        self.package_path = (
            package_path if package_path is not None else config.package_path
        )
        self.reserved: FrozenSet[str] = reserved_words(
            config.target, config.common_names, config.extra_reserved
        )
        self.stats: AliasStats = stats if stats is not None else AliasStats()
        self._aliases: Dict[str, str] = {}
        self._used: Set[str] = set()
        self._hints: Dict[str, str] = {}

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def __contains__(self, path: object) -> bool:
        return path in self._aliases

    def __len__(self) -> int:
        return len(self._aliases)

    def items(self) -> List[Tuple[str, str]]:
        """Return (path, alias) pairs in registration order."""
        return list(self._aliases.items())

    @property
    def used_aliases(self) -> FrozenSet[str]:
        return frozenset(self._used)

    def alias_for(self, path: str) -> Optional[str]:
        """Return the alias already assigned to *path*, or None."""
        return self._aliases.get(path)

    def package_name(self, path: str) -> Optional[str]:
        """Return the hinted or standard-library package name for *path*, if known."""
        if path in self._hints:
            return self._hints[path]
        if path == CGO_PATH:
            return CGO_PATH
        if self.config.target == "go":
            return standard_package_name(path)
        return None

    def is_local(self, path: str) -> bool:
        return self.package_path is not None and path == self.package_path

    def is_valid_alias(self, alias: str) -> bool:
        return is_valid_alias(alias, self._used, self.reserved)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def hint(self, path: str, name: str) -> None:
        """Declare that the package at *path* is named *name*.

        The name is tried before any path-derived candidate when *path* is
        registered.  Must be called before the first registration of *path*.
        """
        if not name.isidentifier():
            raise GoAliasError(
                f"package name {name!r} for {path!r} is not an identifier"
            )
        if name == "_":
            raise GoAliasError(
                f"package name for {path!r} cannot be the blank identifier"
            )
        if path in self._aliases:
            raise GoAliasError(
                f"{path!r} is already registered as {self._aliases[path]!r}"
            )
        self._hints[path] = name

    def register(self, path: str) -> str:
        """Return the alias for *path*, assigning a new one on first use.

        The file's own package needs no qualifier and always yields "".
        """
        if self.is_local(path):
            self.stats.local_skipped += 1
            return ""
        existing = self._aliases.get(path)
        if existing is not None:
            self.stats.reused += 1
            return existing

        for cand in self._candidates(path):
            if self.is_valid_alias(cand.alias):
                break
        self._commit(path, cand)
        return cand.alias

    def _candidates(self, path: str) -> Iterator[_Candidate]:
        """Yield candidates for *path* from most to least preferred.

        The sequence is infinite: after the hint and every path level, the
        whole-path candidate is extended with the filler character forever.
        """
        name = self.package_name(path)
        if name:
            yield _Candidate(name, "hint", 0)

        segments = split_path(path)
        for level in range(1, len(segments) + 1):
            yield _Candidate(candidate(segments, level), "path", level)

        base = candidate(segments, len(segments))
        if not base:
            base = self.config.fallback
            yield _Candidate(base, "suffix", len(segments))
        suffix = ""
        while True:
            suffix += self.config.filler
            yield _Candidate(base + suffix, "suffix", len(segments))

    def _commit(self, path: str, cand: _Candidate) -> None:
        self._aliases[path] = cand.alias
        self._used.add(cand.alias)
        self.stats.registered += 1
        if cand.source == "hint":
            self.stats.hinted += 1
        elif cand.source == "suffix":
            self.stats.suffixed += 1
        elif cand.level > 1:
            self.stats.escalated += 1
        if self.config.verbose:
            detail = cand.source if cand.source != "path" else f"level {cand.level}"
            print(
                f"goalias: {path!r} → {cand.alias!r} ({detail})",
                file=sys.stderr,
                flush=True,
            )

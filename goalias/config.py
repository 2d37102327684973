"""Load goalias configuration from pyproject.toml and optional .goalias.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .errors import GoAliasConfigError
from .guesser import FALLBACK_ALIAS, sanitize_segment
from .reserved import DEFAULT_COMMON_NAMES, TARGETS


@dataclass
class GoAliasConfig:
    """Runtime configuration for goalias."""

    # Target language whose reserved words aliases must avoid: "go" (default)
    # or "python".
    target: str = "go"
    # Generic local names that aliases must not take, on top of the target's
    # keywords and predeclared identifiers.
    common_names: List[str] = field(
        default_factory=lambda: sorted(DEFAULT_COMMON_NAMES)
    )
    # Additional names the surrounding emitter binds itself.
    extra_reserved: List[str] = field(default_factory=list)
    # Alias base used when a path has no letters left after sanitizing.
    fallback: str = FALLBACK_ALIAS
    # Character appended repeatedly when every path-derived candidate is taken.
    filler: str = "x"
    # Import path of the package being generated; registering it yields "".
    package_path: Optional[str] = None
    # Print one line per alias decision to stderr.
    verbose: bool = False


def _read_toml(path: Path) -> dict:
    """Read a TOML file; return empty dict if missing or unparseable."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except Exception:
        return {}


def _apply(cfg: GoAliasConfig, d: dict) -> None:
    """Overlay dict values onto cfg, ignoring unknown keys."""
    valid = set(cfg.__dataclass_fields__)
    for key, val in d.items():
        if key in valid:
            setattr(cfg, key, val)


def _check_types(cfg: GoAliasConfig) -> None:
    """Raise GoAliasConfigError for values of the wrong TOML type."""
    for key in ("target", "filler", "fallback"):
        val = getattr(cfg, key)
        if not isinstance(val, str):
            raise GoAliasConfigError(f"{key} must be a string, got {val!r}")
    for key in ("common_names", "extra_reserved"):
        val = getattr(cfg, key)
        if not isinstance(val, list) or not all(isinstance(v, str) for v in val):
            raise GoAliasConfigError(f"{key} must be a list of strings, got {val!r}")
    if cfg.package_path is not None and not isinstance(cfg.package_path, str):
        raise GoAliasConfigError(
            f"package_path must be a string, got {cfg.package_path!r}"
        )
    if not isinstance(cfg.verbose, bool):
        raise GoAliasConfigError(
            f"verbose must be true or false, got {cfg.verbose!r}"
        )


def validate_config(cfg: GoAliasConfig) -> None:
    """Raise GoAliasConfigError if *cfg* cannot drive a registry."""
    _check_types(cfg)
    if cfg.target not in TARGETS:
        raise GoAliasConfigError(
            f"unknown target {cfg.target!r} "
            f"(expected one of: {', '.join(sorted(TARGETS))})"
        )
    if len(cfg.filler) != 1 or not ("a" <= cfg.filler <= "z"):
        raise GoAliasConfigError(
            f"filler must be a single lower-case letter, got {cfg.filler!r}"
        )
    if not cfg.fallback or sanitize_segment(cfg.fallback) != cfg.fallback:
        raise GoAliasConfigError(
            f"fallback must be a lower-case identifier, got {cfg.fallback!r}"
        )


def load_config(project_root: Optional[Path] = None) -> GoAliasConfig:
    """Load config from pyproject.toml [tool.goalias], then .goalias.toml."""
    if project_root is None:
        project_root = Path.cwd()
    cfg = GoAliasConfig()
    pyproject = _read_toml(project_root / "pyproject.toml")
    _apply(cfg, pyproject.get("tool", {}).get("goalias", {}))
    local = _read_toml(project_root / ".goalias.toml")
    _apply(cfg, local)
    validate_config(cfg)
    return cfg

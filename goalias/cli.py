"""CLI entry point: reads import paths on stdin, prints their import block."""

import sys
from typing import List

from .config import load_config
from .errors import GoAliasError
from .registry import ImportRegistry
from .render import render_go_imports, render_python_imports
from .stats import AliasStats

_RENDERERS = {
    "go": render_go_imports,
    "python": render_python_imports,
}


def _read_paths(text: str) -> List[str]:
    """Return the import paths in *text*, skipping blanks and # comments."""
    paths = []
    for line in text.splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            paths.append(line)
    return paths


def main() -> None:
    paths = _read_paths(sys.stdin.read())
    if not paths:
        print("goalias: no import paths provided on stdin", file=sys.stderr)
        sys.exit(1)

    alias_stats = AliasStats()
    try:
        config = load_config()
        registry = ImportRegistry(config=config, stats=alias_stats)
        for path in paths:
            registry.register(path)
        output = _RENDERERS[config.target](registry)
    except GoAliasError as exc:
        print(f"goalias: {exc}", file=sys.stderr)
        sys.exit(1)
    sys.stdout.write(output)
    for line in alias_stats.format_summary():
        print(line, file=sys.stderr)

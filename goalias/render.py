"""Render a registry's imports as source text for the generated file."""

from __future__ import annotations

import json
import keyword
from typing import List

import libcst as cst

from .errors import GoAliasError
from .guesser import split_path
from .registry import CGO_PATH, ImportRegistry


def _go_quote(path: str) -> str:
    """Return *path* as a Go interpreted string literal."""
    return json.dumps(path, ensure_ascii=False)


def _go_import_line(registry: ImportRegistry, path: str, alias: str) -> str:
    quoted = _go_quote(path)
    if alias == registry.package_name(path):
        return quoted
    return f"{alias} {quoted}"


def render_go_imports(registry: ImportRegistry) -> str:
    """Return the Go import declarations for every registered path.

    Paths are sorted; the alias is written only when it differs from the
    known package name.  The cgo pseudo-package is written as its own
    ``import "C"`` declaration ahead of the rest.
    """
    lines: List[str] = []
    entries: List[str] = []
    for path, alias in sorted(registry.items()):
        if path == CGO_PATH and alias == CGO_PATH:
            lines.append(f"import {_go_quote(path)}\n")
            continue
        entries.append(_go_import_line(registry, path, alias))
    if len(entries) == 1:
        lines.append(f"import {entries[0]}\n")
    elif entries:
        lines.append("import (\n")
        lines.extend(f"\t{entry}\n" for entry in entries)
        lines.append(")\n")
    return "".join(lines)


def _dotted_name(path: str) -> cst.BaseExpression:
    """Turn ``a/b/c`` into the expression ``a.b.c``."""
    parts = path.split("/")
    for part in parts:
        if not part.isidentifier() or keyword.iskeyword(part):
            raise GoAliasError(f"cannot import {path!r}: {part!r} is not a module name")
    node: cst.BaseExpression = cst.Name(parts[0])
    for part in parts[1:]:
        node = cst.Attribute(value=node, attr=cst.Name(part))
    return node


def render_python_imports(registry: ImportRegistry) -> str:
    """Return ``import a.b as alias`` statements for every registered path.

    A single-segment path already bound under its own name is imported
    without an ``as`` clause.
    """
    body: List[cst.SimpleStatementLine] = []
    for path, alias in sorted(registry.items()):
        module = "/".join(split_path(path))
        if module == alias:
            import_alias = cst.ImportAlias(name=_dotted_name(module))
        else:
            import_alias = cst.ImportAlias(
                name=_dotted_name(module), asname=cst.AsName(name=cst.Name(alias))
            )
        body.append(cst.SimpleStatementLine(body=[cst.Import(names=[import_alias])]))
    if not body:
        return ""
    return cst.Module(body=body).code

"""Built-in reserved-word data for each supported target language."""

from __future__ import annotations

import builtins
import keyword
from typing import FrozenSet, Iterable, Optional

from .errors import GoAliasConfigError

GO_KEYWORDS: FrozenSet[str] = frozenset(
    {
        "break",
        "case",
        "chan",
        "const",
        "continue",
        "default",
        "defer",
        "else",
        "fallthrough",
        "for",
        "func",
        "go",
        "goto",
        "if",
        "import",
        "interface",
        "map",
        "package",
        "range",
        "return",
        "select",
        "struct",
        "switch",
        "type",
        "var",
    }
)

# Predeclared types, constants, the zero value and builtin functions.
GO_PREDECLARED: FrozenSet[str] = frozenset(
    {
        # types
        "any",
        "bool",
        "byte",
        "comparable",
        "complex64",
        "complex128",
        "error",
        "float32",
        "float64",
        "int",
        "int8",
        "int16",
        "int32",
        "int64",
        "rune",
        "string",
        "uint",
        "uint8",
        "uint16",
        "uint32",
        "uint64",
        "uintptr",
        # constants
        "true",
        "false",
        "iota",
        # zero value
        "nil",
        # functions
        "append",
        "cap",
        "clear",
        "close",
        "complex",
        "copy",
        "delete",
        "imag",
        "len",
        "make",
        "max",
        "min",
        "new",
        "panic",
        "print",
        "println",
        "real",
        "recover",
    }
)

# Names generated code routinely binds as locals; an import alias with one of
# these names would be shadowed inside function bodies.
DEFAULT_COMMON_NAMES: FrozenSet[str] = frozenset({"err", "ctx", "ok"})

PYTHON_RESERVED: FrozenSet[str] = frozenset(
    set(keyword.kwlist) | set(keyword.softkwlist) | set(dir(builtins))
)

_TARGETS = {
    "go": GO_KEYWORDS | GO_PREDECLARED,
    "python": PYTHON_RESERVED,
}

TARGETS: FrozenSet[str] = frozenset(_TARGETS)


def reserved_words(
    target: str = "go",
    common_names: Optional[Iterable[str]] = None,
    extra_reserved: Iterable[str] = (),
) -> FrozenSet[str]:
    """Return every name an alias must never take for *target*.

    *common_names* replaces :data:`DEFAULT_COMMON_NAMES` when given;
    *extra_reserved* is added on top.
    """
    try:
        base = _TARGETS[target]
    except KeyError:
        raise GoAliasConfigError(
            f"unknown target {target!r} "
            f"(expected one of: {', '.join(sorted(_TARGETS))})"
        ) from None
    if common_names is None:
        common_names = DEFAULT_COMMON_NAMES
    return base | frozenset(common_names) | frozenset(extra_reserved)

"""Preparation of embedded runtime source before it is inlined."""

_COLLECTIONS_IMPORTS = frozenset(
    {"use std::collections::HashMap;", "use std::collections::HashSet;"}
)


def _lines(src: str) -> list[str]:
    parts = src.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part.removesuffix("\r") for part in parts]


def strip_collections_imports(src: str) -> str:
    """Drop standalone HashMap/HashSet import lines, which the builtin prelude provides."""
    return "\n".join(
        line for line in _lines(src) if line.strip() not in _COLLECTIONS_IMPORTS
    )
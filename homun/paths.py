"""Path manipulation and whole-file read/write helpers."""

from __future__ import annotations

import os
from pathlib import Path, PurePath


def path_join(directory: str, name: str) -> str:
    """Join ``name`` onto ``directory``; an absolute ``name`` replaces it."""
    return os.path.join(directory, name)


def path_parent(path: str) -> str:
    """Return the parent directory of ``path``, or '' when it has none."""
    if not path:
        return ""
    p = PurePath(path)
    if not p.parts or (p.anchor and len(p.parts) == 1):
        return ""
    parent = p.parent
    if not parent.parts:
        return ""
    return str(parent)


def path_canonicalize(path: str) -> str:
    """Return the absolute path with symlinks and '..' resolved.

    Raises OSError if the path does not exist.
    """
    try:
        return str(Path(path).resolve(strict=True))
    except OSError as exc:
        raise OSError(f"Cannot canonicalize {path}: {exc}") from exc


def path_strip_prefix(path: str, prefix: str) -> str:
    """Remove the leading components ``prefix`` from ``path``.

    Returns ``path`` unchanged when ``prefix`` is not a component-wise prefix.
    """
    try:
        rest = PurePath(path).relative_to(PurePath(prefix))
    except ValueError:
        return path
    return str(rest) if rest.parts else ""


def fs_read(path: str) -> str:
    """Read the whole file at ``path`` as UTF-8 text. Raises OSError on failure."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise OSError(f"Cannot read {path}: {exc}") from exc


def fs_write(path: str, content: str) -> None:
    """Create or overwrite the file at ``path`` with ``content``. Raises OSError on failure."""
    try:
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
    except OSError as exc:
        raise OSError(f"Cannot write {path}: {exc}") from exc


def fs_exists(path: str) -> bool:
    """True if ``path`` exists, as a file or a directory."""
    return os.path.exists(path)


def fs_is_dir(path: str) -> bool:
    """True if ``path`` exists and is a directory."""
    return os.path.isdir(path)
"""Filesystem primitives used by the emitter and the bootstrap step.

Every primitive takes the project root and refuses to touch anything that
resolves outside it. ``OSError`` is translated to :class:`IOFailure` here so
callers only deal with the scaffolding error taxonomy.
"""

from __future__ import annotations

from pathlib import Path

from create_clean_arch.domain.errors import IOFailure


def ensure_inside(root: Path, path: Path) -> Path:
    """Return *path* if it resolves inside *root*, else raise :class:`IOFailure`."""
    root_resolved = root.resolve()
    resolved = path.resolve()
    if resolved != root_resolved and not resolved.is_relative_to(root_resolved):
        msg = f"Path escapes project root: {path}"
        raise IOFailure(msg, path=str(path))
    return path


def make_directory(root: Path, path: Path) -> None:
    """Create *path* and any missing parents under *root*."""
    ensure_inside(root, path)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        msg = f"Cannot create directory {path}: {exc.strerror or exc}"
        raise IOFailure(msg, path=str(path)) from exc


def write_text_file(root: Path, path: Path, content: str) -> None:
    """Write *content* to *path* as UTF-8, replacing any existing file."""
    ensure_inside(root, path)
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot write {path}: {exc.strerror or exc}"
        raise IOFailure(msg, path=str(path)) from exc

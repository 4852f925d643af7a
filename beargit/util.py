"""Helper functions: atomic writes, safe reads, file copy/remove, path checks."""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional


def write_text_atomic(path: Path, text: str) -> None:
    """Replace path's contents with text; readers see the old or the new file, never a mix."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        "w", encoding="utf-8", dir=path.parent, prefix=".tmp_", delete=False
    ) as tmp:
        tmp.write(text)
    try:
        os.replace(tmp.name, path)
    except OSError:
        Path(tmp.name).unlink(missing_ok=True)
        raise


def read_text_safe(path: Path) -> Optional[str]:
    """Text of path, or None when it does not exist."""
    path = Path(path)
    if not path.is_file():
        return None
    return path.read_text(encoding="utf-8")


def read_lines(path: Path) -> list[str]:
    """Read non-empty lines of a text file; missing file -> []."""
    raw = read_text_safe(path)
    if not raw:
        return []
    return [line for line in raw.splitlines() if line.strip()]


def write_lines_atomic(path: Path, lines: list[str]) -> None:
    """Write one entry per line (trailing newline after each) atomically."""
    write_text_atomic(path, "".join(f"{line}\n" for line in lines))


def copy_file(src: Path, dst: Path) -> None:
    """Copy file bytes from src to dst, creating parent dirs and overwriting dst."""
    dst = Path(dst)
    dst.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(src, dst)


def remove_file(path: Path, stop_at: Optional[Path] = None) -> None:
    """Delete file if present; prune now-empty parent dirs up to stop_at."""
    path = Path(path)
    path.unlink(missing_ok=True)
    if stop_at is None:
        return
    parent = path.parent
    while parent != stop_at and parent.exists() and not any(parent.iterdir()):
        parent.rmdir()
        parent = parent.parent


def normalize_path(repo_root: Path, path: str) -> str:
    """Lexically clean path ('.', '..', '//') to a '/'-separated path under repo_root.

    Symlinks are not followed: a link is tracked under its own name. Raises
    ValueError if the cleaned path leaves repo_root ('' means the root itself).
    """
    root = os.path.abspath(repo_root)
    full = os.path.normpath(os.path.join(root, path))
    if full != root and not full.startswith(root.rstrip(os.sep) + os.sep):
        raise ValueError(f"path escapes repository: {path}")
    rel = os.path.relpath(full, root)
    return "" if rel == os.curdir else Path(rel).as_posix()

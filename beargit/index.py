"""Staging area: ordered list of tracked paths, one per line in .beargit/.index."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from .constants import INDEX_FILENAME
from .errors import AlreadyTrackedError, IndexCorruptError, NotTrackedError
from .util import read_text_safe, write_lines_atomic


def _index_path(control_dir: Path) -> Path:
    return control_dir / INDEX_FILENAME


def parse_index(raw: str) -> List[str]:
    """Parse index text into paths (blank lines skipped). Duplicates -> IndexCorruptError."""
    paths: List[str] = []
    seen: set[str] = set()
    for line in raw.splitlines():
        if not line:
            continue
        if line in seen:
            raise IndexCorruptError(f"index lists {line!r} more than once")
        seen.add(line)
        paths.append(line)
    return paths


def load_index(control_dir: Path) -> List[str]:
    """Load tracked paths in insertion order. Missing index -> []."""
    raw = read_text_safe(_index_path(control_dir))
    if raw is None:
        return []
    return parse_index(raw)


def save_index(control_dir: Path, paths: Iterable[str]) -> None:
    """Save index (atomic)."""
    write_lines_atomic(_index_path(control_dir), list(paths))


def add_to_index(control_dir: Path, path: str) -> List[str]:
    """Append path; raises AlreadyTrackedError if present. Returns the new index."""
    paths = load_index(control_dir)
    if path in paths:
        raise AlreadyTrackedError(f"File {path} already added")
    paths.append(path)
    save_index(control_dir, paths)
    return paths


def remove_from_index(control_dir: Path, path: str) -> List[str]:
    """Drop path keeping the order of the rest; raises NotTrackedError if absent."""
    paths = load_index(control_dir)
    if path not in paths:
        raise NotTrackedError(f"File {path} not tracked")
    paths.remove(path)
    save_index(control_dir, paths)
    return paths

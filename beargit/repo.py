"""Repository: ties paths, index, branch registry and commit store together."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

from .constants import (
    BRANCH_HEADS_FILENAME,
    BRANCHES_FILENAME,
    CONTROL_DIR,
    CURRENT_BRANCH_FILENAME,
    DEFAULT_BRANCH,
    PREV_FILENAME,
    ROOT_ID,
)
from .errors import InvalidPathError, NotARepositoryError, PathOutsideRepoError
from .index import load_index as index_load, save_index as index_save
from .store import CommitStore
from .util import normalize_path, write_lines_atomic, write_text_atomic

logger = logging.getLogger(__name__)


class Repository:
    """beargit repository: working tree root plus its .beargit control dir.

    Every operation receives one of these; there is no module-level state, so
    several repositories can be driven side by side.
    """

    def __init__(self, path: str | Path = ".") -> None:
        self.path = Path(path).resolve()
        self.control_dir = self.path / CONTROL_DIR
        self.store = CommitStore(self.control_dir)

    def require_repo(self) -> None:
        """Raise NotARepositoryError if not a beargit repo."""
        if not self.control_dir.is_dir():
            raise NotARepositoryError("not a beargit repository")

    def relative_path(self, path: str) -> str:
        """Normalize path to a '/'-separated path relative to the repo root (symlinks kept as named)."""
        if not path or "\n" in path or "\r" in path:
            raise InvalidPathError(f"invalid path: {path!r}")
        try:
            rel = normalize_path(self.path, path)
        except ValueError as e:
            raise PathOutsideRepoError(str(e)) from e
        if not rel:
            raise InvalidPathError(f"path names the repository root: {path!r}")
        if rel.split("/", 1)[0] == CONTROL_DIR:
            raise PathOutsideRepoError(f"path is inside {CONTROL_DIR}: {path}")
        return rel

    def init(self) -> bool:
        """Create new repo. Return False if already exists."""
        if self.control_dir.exists():
            return False
        self.control_dir.mkdir(parents=True)
        index_save(self.control_dir, [])
        write_lines_atomic(self.control_dir / BRANCHES_FILENAME, [DEFAULT_BRANCH])
        write_lines_atomic(
            self.control_dir / BRANCH_HEADS_FILENAME, [f"{ROOT_ID} {DEFAULT_BRANCH}"]
        )
        write_text_atomic(self.control_dir / PREV_FILENAME, ROOT_ID)
        write_text_atomic(self.control_dir / CURRENT_BRANCH_FILENAME, DEFAULT_BRANCH)
        logger.info("initialized repository at %s", self.control_dir)
        return True

    def load_index(self) -> list[str]:
        """Load tracked paths in insertion order."""
        return index_load(self.control_dir)

    def save_index(self, paths: list[str]) -> None:
        """Save index."""
        index_save(self.control_dir, paths)

    def tracked_paths(self) -> Tuple[str, ...]:
        """Read-only view of the index."""
        return tuple(self.load_index())

"""Commit store: one directory per commit under .beargit/<id>/ with a file snapshot."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Tuple

from .constants import INDEX_FILENAME, MSG_FILENAME, PREV_FILENAME, ROOT_ID, SNAPSHOT_DIRNAME
from .errors import (
    CommitExistsError,
    CommitNotFoundError,
    CorruptIdentifierError,
    MissingWorkingFileError,
)
from .ids import is_commit_id, parse_commit_id
from .index import parse_index
from .util import copy_file, read_text_safe, write_lines_atomic, write_text_atomic

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommitRecord:
    """Immutable commit metadata: parent pointer, message, staged paths."""

    commit_id: str
    parent_id: str
    message: str
    index: Tuple[str, ...]


class CommitStore:
    """Commit directories under the control dir, keyed by commit id."""

    def __init__(self, control_dir: Path) -> None:
        self.control_dir = Path(control_dir)

    def _commit_dir(self, commit_id: str) -> Path:
        """Path to commit dir. commit_id must be a full 40-symbol id."""
        if not is_commit_id(commit_id):
            raise CorruptIdentifierError(f"not a commit id: {commit_id!r}")
        return self.control_dir / commit_id

    def exists(self, commit_id: str) -> bool:
        """Return True if a commit dir exists for commit_id. Root id and garbage -> False."""
        if not is_commit_id(commit_id):
            return False
        return self._commit_dir(commit_id).is_dir()

    def snapshot_path(self, commit_id: str, path: str) -> Path:
        """Where the snapshot of path lives inside a commit."""
        return self._commit_dir(commit_id) / SNAPSHOT_DIRNAME / path

    def create(
        self,
        message: str,
        index: Sequence[str],
        parent_id: str,
        new_id: str,
        work_tree: Path,
    ) -> CommitRecord:
        """Write commit new_id with a byte copy of every indexed file in work_tree.

        Either the whole commit dir appears or nothing does: it is assembled in
        a scratch dir and renamed into place.
        """
        parse_commit_id(parent_id)
        if parent_id != ROOT_ID and not self.exists(parent_id):
            raise CommitNotFoundError(f"parent commit {parent_id} does not exist")
        final = self._commit_dir(new_id)
        if final.exists():
            raise CommitExistsError(f"commit {new_id} already exists")
        work_tree = Path(work_tree)
        missing = [p for p in index if not (work_tree / p).is_file()]
        if missing:
            raise MissingWorkingFileError(
                f"tracked file(s) missing from working tree: {', '.join(missing)}"
            )
        scratch = Path(tempfile.mkdtemp(dir=self.control_dir, prefix=".tmp_"))
        try:
            write_lines_atomic(scratch / INDEX_FILENAME, list(index))
            write_text_atomic(scratch / PREV_FILENAME, parent_id)
            write_text_atomic(scratch / MSG_FILENAME, message)
            (scratch / SNAPSHOT_DIRNAME).mkdir()
            for path in index:
                copy_file(work_tree / path, scratch / SNAPSHOT_DIRNAME / path)
            os.replace(scratch, final)
        except Exception:
            shutil.rmtree(scratch, ignore_errors=True)
            raise
        logger.debug("stored commit %s (parent %s, %d files)", new_id, parent_id, len(index))
        return CommitRecord(new_id, parent_id, message, tuple(index))

    def get(self, commit_id: str) -> CommitRecord:
        """Load commit metadata. Raises CommitNotFoundError."""
        if not self.exists(commit_id):
            raise CommitNotFoundError(f"Commit {commit_id} does not exist")
        cdir = self._commit_dir(commit_id)
        parent = (read_text_safe(cdir / PREV_FILENAME) or ROOT_ID).strip()
        parse_commit_id(parent)
        message = read_text_safe(cdir / MSG_FILENAME) or ""
        index = parse_index(read_text_safe(cdir / INDEX_FILENAME) or "")
        return CommitRecord(commit_id, parent, message, tuple(index))

    def restore_file(self, commit_id: str, path: str, work_tree: Path) -> None:
        """Copy path's snapshot from commit_id back into work_tree (overwriting)."""
        copy_file(self.snapshot_path(commit_id, path), Path(work_tree) / path)

    def list_commits(self) -> List[str]:
        """All stored commit ids, sorted."""
        if not self.control_dir.is_dir():
            return []
        return sorted(
            p.name for p in self.control_dir.iterdir() if p.is_dir() and is_commit_id(p.name)
        )

"""Commit graph helpers: history walk."""

from __future__ import annotations

from typing import Generator

from .constants import ROOT_ID
from .store import CommitRecord, CommitStore


def iter_history(store: CommitStore, start_id: str) -> Generator[CommitRecord, None, None]:
    """Walk from start_id following parent pointers until the root id.
    Yields commit records newest first. Raises CommitNotFoundError at the first
    missing link; the root id itself yields nothing.
    """
    commit_id = start_id
    while commit_id != ROOT_ID:
        record = store.get(commit_id)
        yield record
        commit_id = record.parent_id

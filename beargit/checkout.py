"""Checkout engine: move HEAD between commits and branches, rewriting the working tree."""

from __future__ import annotations

import logging

from .branches import (
    HeadState,
    branch_exists,
    current_branch_name,
    head_commit,
    head_of,
    read_head,
    register_branch,
    set_current_branch,
    set_head_of,
    validate_branch_name,
    write_head_commit,
)
from .constants import ROOT_ID
from .errors import BranchExistsError, BranchNotFoundError, CommitNotFoundError
from .ids import is_commit_id
from .repo import Repository
from .util import remove_file

logger = logging.getLogger(__name__)


def _save_current_head(repo: Repository) -> None:
    """If attached, record HEAD's commit as the current branch's head."""
    branch = current_branch_name(repo.control_dir)
    if branch is not None:
        set_head_of(repo.control_dir, branch, head_commit(repo.control_dir))


def restore_commit(repo: Repository, commit_id: str) -> None:
    """Replace tracked working files and the index with commit_id's snapshot; move HEAD there.

    Files listed in the current index are deleted first, so tracked files the
    target does not have disappear. The root id restores an empty index.
    """
    if commit_id == ROOT_ID:
        new_index: list[str] = []
    else:
        new_index = list(repo.store.get(commit_id).index)
    for rel in repo.load_index():
        remove_file(repo.path / rel, stop_at=repo.path)
    repo.save_index(new_index)
    for rel in new_index:
        repo.store.restore_file(commit_id, rel, repo.path)
    write_head_commit(repo.control_dir, commit_id)
    logger.debug("restored %d file(s) from %s", len(new_index), commit_id)


def checkout_commit(repo: Repository, commit_id: str) -> HeadState:
    """Detach HEAD at an existing commit."""
    repo.require_repo()
    if not repo.store.exists(commit_id):
        raise CommitNotFoundError(f"Commit {commit_id} does not exist")
    _save_current_head(repo)
    set_current_branch(repo.control_dir, None)
    restore_commit(repo, commit_id)
    logger.info("detached HEAD at %s", commit_id)
    return read_head(repo.control_dir)


def checkout_branch(repo: Repository, name: str, create: bool = False) -> HeadState:
    """Attach HEAD to branch name (registering it first if create) and restore its head."""
    repo.require_repo()
    exists = branch_exists(repo.control_dir, name)
    if create and exists:
        raise BranchExistsError(f"A branch named {name} already exists")
    if not create and not exists:
        raise BranchNotFoundError(f"No branch {name} exists")
    if create:
        validate_branch_name(name)
    current = current_branch_name(repo.control_dir)
    _save_current_head(repo)
    if create:
        register_branch(repo.control_dir, name)
    elif current == name:
        return read_head(repo.control_dir)
    target = head_of(repo.control_dir, name)
    set_current_branch(repo.control_dir, name)
    restore_commit(repo, target)
    logger.info("switched to branch %s at %s", name, target)
    return read_head(repo.control_dir)


def checkout(repo: Repository, target: str, new_branch: bool = False) -> HeadState:
    """Check out a commit id (always detached) or a branch name.

    A target that is syntactically a commit id is never read as a branch name,
    even when new_branch is set.
    """
    if is_commit_id(target):
        return checkout_commit(repo, target)
    return checkout_branch(repo, target, create=new_branch)

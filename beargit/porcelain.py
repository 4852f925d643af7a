"""Porcelain commands: init, add, rm, commit, status, log, branch, checkout, config."""

from __future__ import annotations

import logging
from typing import Optional

from .branches import (
    branch_number,
    current_branch_name,
    head_commit,
    list_branches,
    set_head_of,
    write_head_commit,
)
from .checkout import checkout as checkout_target
from .config import get_setting, required_message_token, set_setting
from .constants import ROOT_ID
from .errors import BeargitError, DetachedHeadError, MessageRejectedError
from .graph import iter_history
from .ids import next_commit_id
from .index import add_to_index, remove_from_index
from .repo import Repository

logger = logging.getLogger(__name__)


def init(repo: Repository) -> bool:
    """Create the repository; False if one is already there."""
    created = repo.init()
    if created:
        print(f"Initialized empty beargit repository in {repo.control_dir}")
    return created


def add_path(repo: Repository, path: str) -> None:
    """Start tracking path. Raises AlreadyTrackedError if it is tracked already."""
    repo.require_repo()
    add_to_index(repo.control_dir, repo.relative_path(path))


def rm_path(repo: Repository, path: str) -> None:
    """Stop tracking path (the working file is left alone). Raises NotTrackedError."""
    repo.require_repo()
    remove_from_index(repo.control_dir, repo.relative_path(path))


def message_ok(message: str, token: str) -> bool:
    """True if message contains token anywhere (plain substring match)."""
    return token in message


def commit(repo: Repository, message: str) -> str:
    """Snapshot every tracked file into a new commit on the current branch.

    Returns the new commit id. Nothing is written when the head is detached,
    the message lacks the required token, or a tracked file is missing.
    """
    repo.require_repo()
    branch = current_branch_name(repo.control_dir)
    if branch is None:
        raise DetachedHeadError("Need to be on HEAD of a branch to commit")
    token = required_message_token(repo)
    if not message_ok(message, token):
        raise MessageRejectedError(f'Message must contain "{token}"')
    parent = head_commit(repo.control_dir)
    new_id = next_commit_id(parent, branch_number(repo.control_dir, branch))
    repo.store.create(message, repo.load_index(), parent, new_id, repo.path)
    write_head_commit(repo.control_dir, new_id)
    set_head_of(repo.control_dir, branch, new_id)
    logger.info("commit %s on %s", new_id, branch)
    return new_id


def status(repo: Repository) -> None:
    """Print tracked files and their count."""
    repo.require_repo()
    paths = repo.tracked_paths()
    print("Tracked files:\n")
    for p in paths:
        print(f"  {p}")
    print(f"\n{len(paths)} files total")


def log(repo: Repository, max_count: Optional[int] = None) -> None:
    """Print history from HEAD, newest first. Raises BeargitError before the first commit."""
    repo.require_repo()
    head = head_commit(repo.control_dir)
    if head == ROOT_ID:
        raise BeargitError("There are no commits!")
    print()
    for n, record in enumerate(iter_history(repo.store, head)):
        if max_count is not None and n >= max_count:
            break
        print(f"commit {record.commit_id}")
        print(f"    {record.message}")
        print()


def branch_list(repo: Repository) -> None:
    """List branches in registration order with current marked."""
    repo.require_repo()
    current = current_branch_name(repo.control_dir)
    for b in list_branches(repo.control_dir):
        mark = "*  " if b == current else "   "
        print(f"{mark}{b}")


def checkout(repo: Repository, target: str, new_branch: bool = False) -> None:
    """Check out a branch or commit id and report where HEAD ended up."""
    state = checkout_target(repo, target, new_branch=new_branch)
    if state.kind == "detached":
        print(f"Switched to detached HEAD at {state.commit}")
    elif new_branch:
        print(f"Created and switched to branch {state.branch}")
    else:
        print(f"Switched to branch {state.branch}")


def config_show(repo: Repository, key: str) -> None:
    print(get_setting(repo, key))


def config_set(repo: Repository, key: str, value: str) -> None:
    """Override key; an empty value restores the default."""
    set_setting(repo, key, value)

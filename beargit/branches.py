"""Branch registry and HEAD: branch numbers, branch heads, attached vs detached."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Literal, Optional

from .constants import (
    BRANCH_HEADS_FILENAME,
    BRANCHES_FILENAME,
    CURRENT_BRANCH_FILENAME,
    PREV_FILENAME,
    ROOT_ID,
)
from .errors import (
    BranchExistsError,
    BranchNotFoundError,
    InvalidBranchNameError,
)
from .ids import is_commit_id, parse_commit_id
from .util import read_lines, read_text_safe, write_lines_atomic, write_text_atomic


@dataclass
class HeadState:
    """HEAD state: attached to a branch, or detached at a commit."""
    kind: Literal["attached", "detached"]
    branch: str  # "" when detached
    commit: str


def validate_branch_name(name: str) -> None:
    """Raise InvalidBranchNameError if name is empty, has whitespace, or is a commit id."""
    if not name or name != name.strip():
        raise InvalidBranchNameError(f"invalid branch name: {name!r}")
    if any(c.isspace() for c in name):
        raise InvalidBranchNameError(f"invalid branch name: {name!r}")
    if is_commit_id(name) or name == ROOT_ID:
        raise InvalidBranchNameError(f"branch name looks like a commit id: {name!r}")


def list_branches(control_dir: Path) -> List[str]:
    """Branch names in registration order (index = branch number)."""
    return [line.strip() for line in read_lines(control_dir / BRANCHES_FILENAME)]


def branch_exists(control_dir: Path, name: str) -> bool:
    return name in list_branches(control_dir)


def branch_number(control_dir: Path, name: str) -> int:
    """Return the permanent 0-based registration number of a branch."""
    branches = list_branches(control_dir)
    try:
        return branches.index(name)
    except ValueError:
        raise BranchNotFoundError(f"No branch {name} exists") from None


def read_branch_heads(control_dir: Path) -> Dict[str, str]:
    """Read the branch -> head commit mapping (lines of '<commit-id> <name>')."""
    result: Dict[str, str] = {}
    for line in read_lines(control_dir / BRANCH_HEADS_FILENAME):
        parts = line.split(None, 1)
        if len(parts) < 2:
            continue
        commit_id, name = parts[0], parts[1].strip()
        parse_commit_id(commit_id)
        result[name] = commit_id
    return result


def _write_branch_heads(control_dir: Path, heads: Dict[str, str]) -> None:
    order = list_branches(control_dir)
    names = [b for b in order if b in heads] + sorted(b for b in heads if b not in order)
    write_lines_atomic(
        control_dir / BRANCH_HEADS_FILENAME,
        [f"{heads[name]} {name}" for name in names],
    )


def head_of(control_dir: Path, name: str) -> str:
    """Head commit id of a registered branch."""
    if not branch_exists(control_dir, name):
        raise BranchNotFoundError(f"No branch {name} exists")
    return read_branch_heads(control_dir).get(name, ROOT_ID)


def set_head_of(control_dir: Path, name: str, commit_id: str) -> None:
    """Point a registered branch at commit_id."""
    if not branch_exists(control_dir, name):
        raise BranchNotFoundError(f"No branch {name} exists")
    parse_commit_id(commit_id)
    heads = read_branch_heads(control_dir)
    heads[name] = commit_id
    _write_branch_heads(control_dir, heads)


def register_branch(control_dir: Path, name: str) -> int:
    """Append a new branch at the next number, head = current HEAD commit. Returns its number."""
    validate_branch_name(name)
    branches = list_branches(control_dir)
    if name in branches:
        raise BranchExistsError(f"A branch named {name} already exists")
    branches.append(name)
    write_lines_atomic(control_dir / BRANCHES_FILENAME, branches)
    set_head_of(control_dir, name, head_commit(control_dir))
    return len(branches) - 1


def current_branch_name(control_dir: Path) -> Optional[str]:
    """Return current branch name or None if detached."""
    raw = read_text_safe(control_dir / CURRENT_BRANCH_FILENAME)
    if raw is None:
        return None
    name = raw.strip()
    return name or None


def set_current_branch(control_dir: Path, name: Optional[str]) -> None:
    """Attach HEAD to a registered branch; None detaches."""
    if name is not None and not branch_exists(control_dir, name):
        raise BranchNotFoundError(f"No branch {name} exists")
    write_text_atomic(control_dir / CURRENT_BRANCH_FILENAME, name or "")


def head_commit(control_dir: Path) -> str:
    """HEAD commit id; root id if nothing recorded yet."""
    raw = read_text_safe(control_dir / PREV_FILENAME)
    if raw is None or not raw.strip():
        return ROOT_ID
    return raw.strip()


def write_head_commit(control_dir: Path, commit_id: str) -> None:
    """Move HEAD's commit pointer."""
    parse_commit_id(commit_id)
    write_text_atomic(control_dir / PREV_FILENAME, commit_id)


def read_head(control_dir: Path) -> HeadState:
    branch = current_branch_name(control_dir)
    commit = head_commit(control_dir)
    if branch is None:
        return HeadState("detached", "", commit)
    return HeadState("attached", branch, commit)

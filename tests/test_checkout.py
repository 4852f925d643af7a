"""Tests for checkout: literal ids, existing branches, new branches, HEAD transitions."""

import tempfile
import unittest
from pathlib import Path

from beargit.branches import current_branch_name, head_commit, head_of, list_branches
from beargit.checkout import checkout
from beargit.constants import ROOT_ID
from beargit.errors import (
    BranchExistsError,
    BranchNotFoundError,
    CommitNotFoundError,
    DetachedHeadError,
)
from beargit.porcelain import add_path, commit
from beargit.repo import Repository

MSG = "work GO BEARS!"


def make_repo() -> tuple[Path, Repository]:
    d = tempfile.mkdtemp(prefix="beargit_checkout_")
    repo = Repository(d)
    repo.init()
    return Path(d), repo


class TestCheckout(unittest.TestCase):
    def setUp(self) -> None:
        self.repo_dir, self.repo = make_repo()
        (self.repo_dir / "f.txt").write_text("v1")
        add_path(self.repo, "f.txt")
        self.c1 = commit(self.repo, MSG)
        (self.repo_dir / "f.txt").write_text("v2")
        (self.repo_dir / "g.txt").write_text("only in c2")
        add_path(self.repo, "g.txt")
        self.c2 = commit(self.repo, MSG)

    def test_literal_id_restores_and_detaches(self) -> None:
        state = checkout(self.repo, self.c1)
        self.assertEqual(state.kind, "detached")
        self.assertEqual(state.commit, self.c1)
        self.assertEqual((self.repo_dir / "f.txt").read_text(), "v1")
        self.assertFalse((self.repo_dir / "g.txt").exists())
        self.assertEqual(self.repo.load_index(), ["f.txt"])
        self.assertIsNone(current_branch_name(self.repo.control_dir))

    def test_commit_round_trip(self) -> None:
        checkout(self.repo, self.c1)
        checkout(self.repo, self.c2)
        self.assertEqual((self.repo_dir / "f.txt").read_text(), "v2")
        self.assertEqual((self.repo_dir / "g.txt").read_text(), "only in c2")
        self.assertEqual(self.repo.load_index(), ["f.txt", "g.txt"])

    def test_unknown_commit(self) -> None:
        missing = "c" * 40
        with self.assertRaises(CommitNotFoundError):
            checkout(self.repo, missing)
        self.assertEqual(current_branch_name(self.repo.control_dir), "master")
        self.assertEqual(head_commit(self.repo.control_dir), self.c2)

    def test_commit_refused_when_detached(self) -> None:
        checkout(self.repo, self.c1)
        with self.assertRaises(DetachedHeadError):
            commit(self.repo, MSG)

    def test_back_to_branch_after_detach(self) -> None:
        checkout(self.repo, self.c1)
        state = checkout(self.repo, "master")
        self.assertEqual(state.kind, "attached")
        self.assertEqual(state.commit, self.c2)
        self.assertEqual((self.repo_dir / "f.txt").read_text(), "v2")

    def test_unknown_branch(self) -> None:
        with self.assertRaises(BranchNotFoundError):
            checkout(self.repo, "nope")

    def test_new_branch_keeps_files(self) -> None:
        state = checkout(self.repo, "feature", new_branch=True)
        self.assertEqual(state.kind, "attached")
        self.assertEqual(state.branch, "feature")
        self.assertEqual(state.commit, self.c2)
        self.assertEqual(head_of(self.repo.control_dir, "feature"), self.c2)
        self.assertEqual((self.repo_dir / "f.txt").read_text(), "v2")
        self.assertEqual(list_branches(self.repo.control_dir), ["master", "feature"])

    def test_new_branch_existing(self) -> None:
        with self.assertRaises(BranchExistsError):
            checkout(self.repo, "master", new_branch=True)

    def test_id_wins_over_new_branch_flag(self) -> None:
        state = checkout(self.repo, self.c1, new_branch=True)
        self.assertEqual(state.kind, "detached")
        self.assertEqual(list_branches(self.repo.control_dir), ["master"])

    def test_checkout_current_branch_is_idempotent(self) -> None:
        (self.repo_dir / "f.txt").write_text("edited, not committed")
        before = head_commit(self.repo.control_dir)
        state = checkout(self.repo, "master")
        self.assertEqual(state.commit, before)
        self.assertEqual(state.branch, "master")
        self.assertEqual((self.repo_dir / "f.txt").read_text(), "edited, not committed")
        self.assertEqual(self.repo.load_index(), ["f.txt", "g.txt"])

    def test_branch_head_saved_when_leaving(self) -> None:
        checkout(self.repo, "feature", new_branch=True)
        (self.repo_dir / "h.txt").write_text("feature work")
        add_path(self.repo, "h.txt")
        c3 = commit(self.repo, MSG)
        checkout(self.repo, self.c1)
        self.assertEqual(head_of(self.repo.control_dir, "feature"), c3)
        checkout(self.repo, "feature")
        self.assertEqual(head_commit(self.repo.control_dir), c3)
        self.assertEqual((self.repo_dir / "h.txt").read_text(), "feature work")

    def test_nested_paths_removed_and_restored(self) -> None:
        checkout(self.repo, "feature", new_branch=True)
        (self.repo_dir / "pkg").mkdir()
        (self.repo_dir / "pkg" / "mod.py").write_text("x = 1\n")
        add_path(self.repo, "pkg/mod.py")
        commit(self.repo, MSG)
        checkout(self.repo, "master")
        self.assertFalse((self.repo_dir / "pkg").exists())
        checkout(self.repo, "feature")
        self.assertEqual((self.repo_dir / "pkg" / "mod.py").read_text(), "x = 1\n")


class TestCheckoutFromEmptyRepo(unittest.TestCase):
    def test_new_branch_before_any_commit(self) -> None:
        repo_dir, repo = make_repo()
        state = checkout(repo, "feature", new_branch=True)
        self.assertEqual(state.commit, ROOT_ID)
        self.assertEqual(repo.load_index(), [])
        (repo_dir / "a").write_text("a")
        add_path(repo, "a")
        cid = commit(repo, MSG)
        self.assertEqual(cid, "1" + "6" * 39)


if __name__ == "__main__":
    unittest.main()

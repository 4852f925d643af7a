"""Tests for the commit store and history walk."""

import tempfile
import unittest
from pathlib import Path

from beargit.constants import ROOT_ID
from beargit.errors import (
    CommitExistsError,
    CommitNotFoundError,
    CorruptIdentifierError,
    MissingWorkingFileError,
)
from beargit.graph import iter_history
from beargit.store import CommitRecord, CommitStore

COMMIT_A = "6" * 40
COMMIT_B = "6" * 10 + "1" + "6" * 29
COMMIT_C = "6" * 10 + "c" + "6" * 29


class TestCommitStore(unittest.TestCase):
    def setUp(self) -> None:
        self.work = Path(tempfile.mkdtemp(prefix="beargit_store_"))
        self.control = self.work / ".beargit"
        self.control.mkdir()
        self.store = CommitStore(self.control)
        (self.work / "f.txt").write_bytes(b"hi")
        (self.work / "sub").mkdir()
        (self.work / "sub" / "g.bin").write_bytes(b"\x00\x01\xff")

    def test_create_and_get(self) -> None:
        record = self.store.create("first GO BEARS!", ["f.txt", "sub/g.bin"], ROOT_ID, COMMIT_A, self.work)
        self.assertEqual(record, CommitRecord(COMMIT_A, ROOT_ID, "first GO BEARS!", ("f.txt", "sub/g.bin")))
        self.assertTrue(self.store.exists(COMMIT_A))
        self.assertEqual(self.store.get(COMMIT_A), record)
        cdir = self.control / COMMIT_A
        self.assertEqual((cdir / ".prev").read_text(), ROOT_ID)
        self.assertEqual((cdir / ".msg").read_text(), "first GO BEARS!")
        self.assertEqual((cdir / ".index").read_text(), "f.txt\nsub/g.bin\n")
        self.assertEqual((cdir / "tree" / "sub" / "g.bin").read_bytes(), b"\x00\x01\xff")

    def test_snapshot_is_frozen(self) -> None:
        self.store.create("m", ["f.txt"], ROOT_ID, COMMIT_A, self.work)
        (self.work / "f.txt").write_bytes(b"changed")
        self.assertEqual(self.store.snapshot_path(COMMIT_A, "f.txt").read_bytes(), b"hi")

    def test_restore_file(self) -> None:
        self.store.create("m", ["sub/g.bin"], ROOT_ID, COMMIT_A, self.work)
        (self.work / "sub" / "g.bin").unlink()
        (self.work / "sub").rmdir()
        self.store.restore_file(COMMIT_A, "sub/g.bin", self.work)
        self.assertEqual((self.work / "sub" / "g.bin").read_bytes(), b"\x00\x01\xff")

    def test_tracked_file_named_like_metadata(self) -> None:
        (self.work / ".msg").write_text("user data")
        self.store.create("real message", [".msg"], ROOT_ID, COMMIT_A, self.work)
        self.assertEqual(self.store.get(COMMIT_A).message, "real message")

    def test_missing_working_file_writes_nothing(self) -> None:
        with self.assertRaises(MissingWorkingFileError):
            self.store.create("m", ["f.txt", "gone.txt"], ROOT_ID, COMMIT_A, self.work)
        self.assertFalse(self.store.exists(COMMIT_A))
        self.assertEqual(list(self.control.iterdir()), [])

    def test_unknown_parent(self) -> None:
        with self.assertRaises(CommitNotFoundError):
            self.store.create("m", ["f.txt"], COMMIT_B, COMMIT_C, self.work)

    def test_duplicate_id(self) -> None:
        self.store.create("m", ["f.txt"], ROOT_ID, COMMIT_A, self.work)
        with self.assertRaises(CommitExistsError):
            self.store.create("m", ["f.txt"], ROOT_ID, COMMIT_A, self.work)

    def test_corrupt_new_id(self) -> None:
        with self.assertRaises(CorruptIdentifierError):
            self.store.create("m", ["f.txt"], ROOT_ID, "zzz", self.work)

    def test_get_missing(self) -> None:
        with self.assertRaises(CommitNotFoundError):
            self.store.get(COMMIT_A)
        self.assertFalse(self.store.exists(ROOT_ID))

    def test_list_commits(self) -> None:
        self.store.create("a", ["f.txt"], ROOT_ID, COMMIT_A, self.work)
        self.store.create("b", ["f.txt"], COMMIT_A, COMMIT_B, self.work)
        self.assertEqual(self.store.list_commits(), sorted([COMMIT_A, COMMIT_B]))


class TestHistory(unittest.TestCase):
    def setUp(self) -> None:
        self.work = Path(tempfile.mkdtemp(prefix="beargit_graph_"))
        self.control = self.work / ".beargit"
        self.control.mkdir()
        self.store = CommitStore(self.control)
        (self.work / "f").write_text("x")
        self.store.create("one", ["f"], ROOT_ID, COMMIT_A, self.work)
        self.store.create("two", ["f"], COMMIT_A, COMMIT_B, self.work)
        self.store.create("three", ["f"], COMMIT_B, COMMIT_C, self.work)

    def test_newest_first_to_root(self) -> None:
        messages = [r.message for r in iter_history(self.store, COMMIT_C)]
        self.assertEqual(messages, ["three", "two", "one"])

    def test_root_is_empty(self) -> None:
        self.assertEqual(list(iter_history(self.store, ROOT_ID)), [])

    def test_lazy(self) -> None:
        walk = iter_history(self.store, COMMIT_C)
        self.assertEqual(next(walk).commit_id, COMMIT_C)
        self.assertEqual(next(walk).commit_id, COMMIT_B)

    def test_broken_link_is_fatal(self) -> None:
        import shutil
        shutil.rmtree(self.control / COMMIT_B)
        walk = iter_history(self.store, COMMIT_C)
        self.assertEqual(next(walk).commit_id, COMMIT_C)
        with self.assertRaises(CommitNotFoundError):
            next(walk)


if __name__ == "__main__":
    unittest.main()

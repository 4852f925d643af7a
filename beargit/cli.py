"""CLI: argparse and command dispatch."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .errors import BeargitError, NotARepositoryError
from .porcelain import (
    add_path,
    branch_list,
    checkout,
    commit,
    config_set,
    config_show,
    init,
    log,
    rm_path,
    status,
)
from .repo import Repository


def _repo() -> Repository:
    return Repository(Path.cwd())


def cmd_init(_: argparse.Namespace) -> int:
    if not init(_repo()):
        print("Repository already exists")
        return 1
    return 0


def cmd_add(args: argparse.Namespace) -> int:
    repo = _repo()
    for path in args.paths:
        add_path(repo, path)
    return 0


def cmd_rm(args: argparse.Namespace) -> int:
    repo = _repo()
    for path in args.paths:
        rm_path(repo, path)
    return 0


def cmd_commit(args: argparse.Namespace) -> int:
    commit_id = commit(_repo(), args.message)
    print(f"Created commit {commit_id}")
    return 0


def cmd_status(_: argparse.Namespace) -> int:
    status(_repo())
    return 0


def cmd_log(args: argparse.Namespace) -> int:
    log(_repo(), max_count=args.max_count)
    return 0


def cmd_branch(_: argparse.Namespace) -> int:
    branch_list(_repo())
    return 0


def cmd_checkout(args: argparse.Namespace) -> int:
    checkout(_repo(), args.target, new_branch=args.create_branch)
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    if args.value is None:
        config_show(_repo(), args.key)
    else:
        config_set(_repo(), args.key, args.value)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="beargit",
        description="A tiny snapshot version control system (init, add, rm, commit, status, log, branch, checkout).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    sub = parser.add_subparsers(dest="command", help="Commands")

    sub.add_parser("init", help="Initialize a new repository")

    p_add = sub.add_parser("add", help="Start tracking files")
    p_add.add_argument("paths", nargs="+", help="Paths to add")

    p_rm = sub.add_parser("rm", help="Stop tracking files")
    p_rm.add_argument("paths", nargs="+", help="Paths to remove from the index")

    p_commit = sub.add_parser("commit", help="Create a commit")
    p_commit.add_argument("-m", "--message", required=True, help="Commit message")

    sub.add_parser("status", help="List tracked files")

    p_log = sub.add_parser("log", help="Show history from HEAD")
    p_log.add_argument("--max-count", "-n", type=int, default=None, help="Limit number of commits")

    sub.add_parser("branch", help="List branches")

    p_co = sub.add_parser("checkout", help="Switch to a branch or commit id")
    p_co.add_argument("-b", dest="create_branch", action="store_true", help="Create the branch first")
    p_co.add_argument("target", help="Branch name or 40-symbol commit id")

    p_cfg = sub.add_parser("config", help="Show or change a repository setting")
    p_cfg.add_argument("key", help="Setting name, e.g. commit.requiredtoken")
    p_cfg.add_argument("value", nargs="?", default=None, help="New value ('' restores the default)")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if not args.command:
        parser.print_help()
        return 0

    handlers = {
        "init": cmd_init,
        "add": cmd_add,
        "rm": cmd_rm,
        "commit": cmd_commit,
        "status": cmd_status,
        "log": cmd_log,
        "branch": cmd_branch,
        "checkout": cmd_checkout,
        "config": cmd_config,
    }
    handler = handlers.get(args.command)
    if not handler:
        parser.print_help()
        return 1
    try:
        return handler(args) or 0
    except NotARepositoryError:
        print("Not a beargit repository")
        return 1
    except BeargitError as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

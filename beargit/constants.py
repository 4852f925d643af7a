"""Constants for beargit: control directory layout, identifier alphabet, defaults."""

from __future__ import annotations

# Control directory at the repository root
CONTROL_DIR = ".beargit"

# Files under the control directory
INDEX_FILENAME = ".index"
BRANCHES_FILENAME = ".branches"
BRANCH_HEADS_FILENAME = ".branch_heads"
CURRENT_BRANCH_FILENAME = ".current_branch"
PREV_FILENAME = ".prev"
CONFIG_FILENAME = "config"

# Files inside each commit directory (plus INDEX_FILENAME and PREV_FILENAME)
MSG_FILENAME = ".msg"
SNAPSHOT_DIRNAME = "tree"

DEFAULT_BRANCH = "master"

# Commit identifiers: branch prefix + little-endian ternary sequence
COMMIT_ID_LEN = 40
BRANCH_PREFIX_LEN = 10
SEQUENCE_LEN = COMMIT_ID_LEN - BRANCH_PREFIX_LEN

# Trit value -> persisted symbol (0 -> '6', 1 -> '1', 2 -> 'c')
DIGITS = "61c"
ROOT_SYMBOL = "0"
ROOT_ID = ROOT_SYMBOL * COMMIT_ID_LEN

# Commit messages must contain this unless commit.requiredtoken overrides it
REQUIRED_MESSAGE_TOKEN = "GO BEARS!"

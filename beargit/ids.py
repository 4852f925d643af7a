"""Commit identifiers: branch-number prefix plus a ternary-odometer sequence.

An identifier is 40 symbols. The first 10 encode the number of the branch the
commit was made on (base 3, least-significant trit first); the remaining 30
are a little-endian base-3 counter. Trits are persisted as ``6``/``1``/``c``.
Forty ``0`` characters is the root id: no commit yet.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from .constants import (
    BRANCH_PREFIX_LEN,
    COMMIT_ID_LEN,
    DIGITS,
    ROOT_ID,
    SEQUENCE_LEN,
)
from .errors import CorruptIdentifierError, IdentifierSpaceExhaustedError

MAX_BRANCH_NUMBER = 3**BRANCH_PREFIX_LEN - 1


@dataclass(frozen=True)
class RootId:
    """History root (no commit)."""

    def __str__(self) -> str:
        return ROOT_ID


@dataclass(frozen=True)
class SequenceId:
    """A real commit: owning branch number and its 30 sequence trits."""

    branch: int
    trits: Tuple[int, ...]

    def __str__(self) -> str:
        return branch_prefix(self.branch) + "".join(DIGITS[t] for t in self.trits)


CommitId = Union[RootId, SequenceId]


def is_commit_id(text: str) -> bool:
    """True if text is exactly 40 symbols over the sequence alphabet (root id excluded)."""
    return len(text) == COMMIT_ID_LEN and all(c in DIGITS for c in text)


def branch_prefix(number: int) -> str:
    """Encode a branch number as the 10-symbol id prefix."""
    if number < 0:
        raise ValueError(f"branch number must be non-negative: {number}")
    if number > MAX_BRANCH_NUMBER:
        raise IdentifierSpaceExhaustedError(
            f"branch number {number} does not fit in {BRANCH_PREFIX_LEN} trits"
        )
    symbols = []
    for _ in range(BRANCH_PREFIX_LEN):
        symbols.append(DIGITS[number % 3])
        number //= 3
    return "".join(symbols)


def parse_commit_id(text: str) -> CommitId:
    """Parse a persisted id. Raises CorruptIdentifierError on bad length or symbols.

    Only the exact all-'0' string is the root. An id with some '0' symbols in
    an otherwise valid shape is rejected as corrupt rather than read as a
    partial root, since '0' never appears in a generated id.
    """
    if text == ROOT_ID:
        return RootId()
    if len(text) != COMMIT_ID_LEN:
        raise CorruptIdentifierError(
            f"commit id must be {COMMIT_ID_LEN} symbols (got {len(text)}): {text!r}"
        )
    bad = sorted({c for c in text if c not in DIGITS})
    if bad:
        raise CorruptIdentifierError(
            f"commit id may only contain {list(DIGITS)} (found {bad}): {text!r}"
        )
    trits = tuple(DIGITS.index(c) for c in text)
    prefix = trits[:BRANCH_PREFIX_LEN]
    branch = sum(t * 3**i for i, t in enumerate(prefix))
    return SequenceId(branch=branch, trits=trits[BRANCH_PREFIX_LEN:])


def next_sequence(commit_id: CommitId) -> Tuple[int, ...]:
    """Ternary-odometer increment of a sequence suffix. Root -> all zero trits."""
    if isinstance(commit_id, RootId):
        return (0,) * SEQUENCE_LEN
    trits = list(commit_id.trits)
    for i, t in enumerate(trits):
        if t == 2:
            trits[i] = 0
            continue
        trits[i] = t + 1
        return tuple(trits)
    raise IdentifierSpaceExhaustedError(
        f"sequence counter exhausted after {commit_id}"
    )


def next_commit_id(prev_id: str, branch_number: int) -> str:
    """Id of the next commit on branch_number whose parent is prev_id."""
    seq = next_sequence(parse_commit_id(prev_id))
    return str(SequenceId(branch=branch_number, trits=seq))

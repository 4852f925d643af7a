"""Custom exceptions for beargit."""

from __future__ import annotations


class BeargitError(Exception):
    """Base exception for beargit."""

    pass


class NotARepositoryError(BeargitError):
    """Raised when not in a beargit repository."""

    pass


class AlreadyTrackedError(BeargitError):
    """Raised when adding a path that is already in the index."""

    pass


class NotTrackedError(BeargitError):
    """Raised when removing a path that is not in the index."""

    pass


class IndexCorruptError(BeargitError):
    """Raised when the index file lists the same path twice."""

    pass


class InvalidPathError(BeargitError):
    """Raised when a path cannot be stored in the index (empty, newline)."""

    pass


class PathOutsideRepoError(BeargitError):
    """Raised when a path would escape the repository root or enter the control dir."""

    pass


class BranchExistsError(BeargitError):
    """Raised when registering a branch name that is already taken."""

    pass


class BranchNotFoundError(BeargitError):
    """Raised when a branch name is not registered."""

    pass


class InvalidBranchNameError(BeargitError):
    """Raised when a branch name is empty, has whitespace, or looks like a commit id."""

    pass


class CommitNotFoundError(BeargitError):
    """Raised when a commit id has no commit directory."""

    pass


class CommitExistsError(BeargitError):
    """Raised when creating a commit whose id is already stored."""

    pass


class DetachedHeadError(BeargitError):
    """Raised when committing with no current branch."""

    pass


class CorruptIdentifierError(BeargitError):
    """Raised when a commit id has the wrong length or a symbol outside the alphabet."""

    pass


class IdentifierSpaceExhaustedError(BeargitError):
    """Raised when the sequence counter or branch prefix overflows."""

    pass


class MessageRejectedError(BeargitError):
    """Raised when a commit message lacks the required token."""

    pass


class MissingWorkingFileError(BeargitError):
    """Raised when a tracked file is missing from the working tree at commit time."""

    pass


class InvalidConfigKeyError(BeargitError):
    """Raised when a config key is not one of the known settings."""

    pass

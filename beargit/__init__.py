"""beargit: a tiny snapshot version control system (init, add, rm, commit, status, log, branch, checkout)."""

from .repo import Repository
from .errors import BeargitError, NotARepositoryError

__all__ = ["Repository", "BeargitError", "NotARepositoryError"]

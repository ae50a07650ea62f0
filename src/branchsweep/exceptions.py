"""Branchsweep exception hierarchy.

All branchsweep-specific exceptions inherit from SweepError.
"""

from __future__ import annotations

from collections.abc import Sequence


class SweepError(Exception):
    """Base exception for all branchsweep errors."""


class GitCommandError(SweepError):
    """Raised when a git invocation exits non-zero under a fail-fast policy."""

    def __init__(self, args: Sequence[str], returncode: int, stderr: str) -> None:
        self.command = list(args)
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip() or "no error output"
        super().__init__(
            f"git {' '.join(self.command)} failed with exit status {returncode}: {detail}"
        )


class GitNotFoundError(SweepError):
    """Raised when the git executable cannot be started."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Unable to run git: {reason}")


class CommitDateParseError(SweepError):
    """Raised when git reports a commit date that is not ISO-8601."""

    def __init__(self, ref: str, raw: str) -> None:
        self.ref = ref
        self.raw = raw
        super().__init__(f"Cannot parse commit date for '{ref}': {raw!r}")

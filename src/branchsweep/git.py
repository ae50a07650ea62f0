"""git CLI backend for branchsweep.

GitRunner executes one git command at a time and applies an ErrorPolicy to
its exit status. GitRepository composes two runners into a RepositoryClient:
a fail-fast runner for discovery and a lenient runner for destructive
commands.
"""

from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass
from datetime import datetime

from branchsweep.exceptions import CommitDateParseError, GitCommandError, GitNotFoundError
from branchsweep.models.branch import BranchMode, DeletionOutcome, MergeFilter
from branchsweep.models.config import DELETION_POLICY, DISCOVERY_POLICY, ErrorPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Captured output of a finished git command."""

    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def error_text(self) -> str:
        """Best available description of a failure."""
        return self.stderr.strip() or self.stdout.strip() or f"exit status {self.returncode}"


class GitRunner:
    """Runs git commands in ``cwd`` under a fixed ErrorPolicy.

    Commands block until git exits. There is no timeout.
    """

    def __init__(
        self,
        cwd: str | os.PathLike[str] | None = None,
        policy: ErrorPolicy = DISCOVERY_POLICY,
    ) -> None:
        self.cwd = cwd
        self.policy = policy

    def run(self, *args: str) -> CommandResult:
        """Run ``git *args`` and return its captured output.

        Raises:
            GitCommandError: If git exits non-zero and the policy is fail-fast.
            GitNotFoundError: If git cannot be started at all.
        """
        logger.debug("git %s", " ".join(args))
        try:
            proc = subprocess.run(
                ["git", *args],
                cwd=self.cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise GitNotFoundError(str(e)) from e

        result = CommandResult(
            args=tuple(args),
            returncode=proc.returncode,
            stdout=proc.stdout or "",
            stderr=proc.stderr or "",
        )
        if result.ok:
            return result

        if self.policy.fail_fast:
            raise GitCommandError(args, result.returncode, result.stderr)

        logger.debug("git %s exited %d: %s", " ".join(args), result.returncode, result.error_text)
        return result


def _branch_args(mode: BranchMode, merge_filter: MergeFilter, base: str) -> list[str]:
    args = ["branch", "--list"]
    if mode is BranchMode.REMOTE:
        args.append("--remotes")
    if merge_filter is MergeFilter.MERGED:
        args += ["--merged", base]
    elif merge_filter is MergeFilter.NOT_MERGED:
        args += ["--no-merged", base]
    return args


def parse_commit_date(ref: str, raw: str) -> datetime:
    """Parse git's ``%cI`` strict ISO-8601 output into an aware datetime.

    Raises:
        CommitDateParseError: If ``raw`` is not an ISO-8601 timestamp.
    """
    text = raw.strip()
    # fromisoformat() only accepts a trailing "Z" from Python 3.11.
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise CommitDateParseError(ref, raw) from None
    if parsed.tzinfo is None:
        parsed = parsed.astimezone()
    return parsed


class GitRepository:
    """RepositoryClient implementation backed by the git executable."""

    def __init__(self, cwd: str | os.PathLike[str] | None = None) -> None:
        self.cwd = cwd
        self._discovery = GitRunner(cwd, DISCOVERY_POLICY)
        self._deletion = GitRunner(cwd, DELETION_POLICY)

    # -- discovery (fail-fast) ----------------------------------------------

    def fetch_prune(self, remote: str) -> None:
        self._discovery.run("fetch", "--prune", remote)

    def list_branches(
        self, mode: BranchMode, merge_filter: MergeFilter, base: str
    ) -> list[str]:
        result = self._discovery.run(*_branch_args(mode, merge_filter, base))
        return [line for line in result.stdout.splitlines() if line.strip()]

    def resolve_commit(self, ref: str) -> tuple[str, datetime]:
        commit_hash = self._discovery.run("rev-parse", ref).stdout.strip()
        raw_date = self._discovery.run("show", "-s", "--format=%cI", commit_hash).stdout
        return commit_hash, parse_commit_date(ref, raw_date)

    # -- deletion (lenient) -------------------------------------------------

    def delete_local(self, name: str, force: bool) -> DeletionOutcome:
        result = self._deletion.run("branch", "-D" if force else "-d", name)
        return _outcome(name, result)

    def delete_remote(self, remote: str, name: str) -> DeletionOutcome:
        result = self._deletion.run("push", remote, "--delete", name)
        return _outcome(name, result)

    def prune_remote(self, remote: str) -> bool:
        return self._deletion.run("remote", "prune", remote).ok


def _outcome(name: str, result: CommandResult) -> DeletionOutcome:
    if result.ok:
        return DeletionOutcome(name=name, deleted=True)
    return DeletionOutcome(name=name, deleted=False, error=result.error_text)

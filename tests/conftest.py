"""Shared test fixtures for branchsweep.

Provides an in-memory RepositoryClient that records every call, plus
helpers for building commit dates relative to a fixed "today".
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import Optional

import pytest

from branchsweep.exceptions import GitCommandError
from branchsweep.models.branch import BranchMode, DeletionOutcome, MergeFilter

TODAY = date(2026, 3, 15)


def days_ago(days: int, today: date = TODAY) -> datetime:
    """Noon local time ``days`` calendar days before ``today``, timezone-aware."""
    return datetime.combine(today - timedelta(days=days), time(12, 0)).astimezone()


@dataclass
class FakeBranch:
    name: str  # as git lists it, e.g. "feature" or "origin/feature"
    commit_hash: str
    commit_date: datetime
    merged: bool = True
    remote: bool = False
    current: bool = False


@dataclass
class FakeRepository:
    """RepositoryClient backed by a list of FakeBranch records.

    ``calls`` records (operation, *args) tuples in invocation order.
    ``failing_deletes`` names branches whose deletion reports an error;
    ``spurious_errors`` names branches that are deleted but still report one.
    """

    branches: list[FakeBranch] = field(default_factory=list)
    calls: list[tuple] = field(default_factory=list)
    failing_deletes: set[str] = field(default_factory=set)
    spurious_errors: set[str] = field(default_factory=set)
    fail_listing: bool = False
    prune_ok: bool = True
    today: date = TODAY

    def add(
        self,
        name: str,
        age: int,
        *,
        merged: bool = True,
        remote: bool = False,
        current: bool = False,
        commit_hash: Optional[str] = None,
    ) -> FakeBranch:
        branch = FakeBranch(
            name=name,
            commit_hash=commit_hash or hashlib.sha1(name.encode()).hexdigest(),
            commit_date=days_ago(age, self.today),
            merged=merged,
            remote=remote,
            current=current,
        )
        self.branches.append(branch)
        return branch

    def names(self) -> list[str]:
        return [b.name for b in self.branches]

    def ops(self) -> list[str]:
        return [c[0] for c in self.calls]

    # -- RepositoryClient ---------------------------------------------------

    def fetch_prune(self, remote: str) -> None:
        self.calls.append(("fetch_prune", remote))

    def list_branches(
        self, mode: BranchMode, merge_filter: MergeFilter, base: str
    ) -> list[str]:
        self.calls.append(("list_branches", mode, merge_filter, base))
        if self.fail_listing:
            raise GitCommandError(["branch"], 128, "fatal: not a git repository")
        lines = []
        for b in self.branches:
            if b.remote != (mode is BranchMode.REMOTE):
                continue
            if merge_filter is MergeFilter.MERGED and not b.merged:
                continue
            if merge_filter is MergeFilter.NOT_MERGED and b.merged:
                continue
            lines.append(("* " if b.current else "  ") + b.name)
        return lines

    def resolve_commit(self, ref: str) -> tuple[str, datetime]:
        self.calls.append(("resolve_commit", ref))
        for b in self.branches:
            if b.name == ref:
                return b.commit_hash, b.commit_date
        raise GitCommandError(["rev-parse", ref], 128, f"fatal: bad revision '{ref}'")

    def _remove(self, name: str, listed: str, remote: bool) -> DeletionOutcome:
        if name in self.failing_deletes:
            return DeletionOutcome(name=name, deleted=False, error=f"error: cannot delete '{name}'")
        self.branches = [
            b for b in self.branches if not (b.name == listed and b.remote == remote)
        ]
        if name in self.spurious_errors:
            return DeletionOutcome(name=name, deleted=False, error="error: unable to delete")
        return DeletionOutcome(name=name, deleted=True)

    def delete_local(self, name: str, force: bool) -> DeletionOutcome:
        self.calls.append(("delete_local", name, force))
        return self._remove(name, name, remote=False)

    def delete_remote(self, remote: str, name: str) -> DeletionOutcome:
        self.calls.append(("delete_remote", remote, name))
        return self._remove(name, f"{remote}/{name}", remote=True)

    def prune_remote(self, remote: str) -> bool:
        self.calls.append(("prune_remote", remote))
        return self.prune_ok


@pytest.fixture
def repo() -> FakeRepository:
    """Empty fake repository."""
    return FakeRepository()


@pytest.fixture
def today() -> date:
    return TODAY

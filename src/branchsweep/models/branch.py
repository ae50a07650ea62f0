"""Branch domain models for branchsweep.

BranchCandidate is the transient record built during discovery and held
only for the duration of one run.
"""

from __future__ import annotations

import enum
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel


class BranchMode(str, enum.Enum):
    """Which side of the repository to sweep."""

    LOCAL = "local"
    REMOTE = "remote"


class MergeFilter(str, enum.Enum):
    """Merge state relative to the base branch."""

    MERGED = "merged"
    NOT_MERGED = "not-merged"
    ANY = "any"


class BranchCandidate(BaseModel):
    """A branch selected for deletion.

    ``commit_hash`` and ``commit_date`` are resolved once at discovery time
    and are not re-checked before the branch is deleted.
    """

    model_config = {"frozen": True}

    name: str
    ref: str
    commit_hash: str
    commit_date: datetime

    @property
    def local_date(self) -> date:
        """Commit date as a calendar date in the local timezone."""
        return self.commit_date.astimezone().date()

    def age_days(self, today: date) -> int:
        """Whole calendar days between the commit and ``today``."""
        return (today - self.local_date).days


class DeletionOutcome(BaseModel):
    """Result of one deletion attempt."""

    name: str
    deleted: bool
    error: Optional[str] = None


class SweepReport(BaseModel):
    """Summary of a sweep run, returned by operations.sweep.sweep()."""

    candidates: list[BranchCandidate] = []
    outcomes: list[DeletionOutcome] = []
    pruned: bool = False
    still_present: Optional[list[str]] = None  # None = not verified

    @property
    def deleted(self) -> list[DeletionOutcome]:
        return [o for o in self.outcomes if o.deleted]

    @property
    def failed(self) -> list[DeletionOutcome]:
        return [o for o in self.outcomes if not o.deleted]

"""Configuration models for branchsweep.

SweepConfig holds the per-run settings collected by the CLI.
ErrorPolicy tells a git runner whether a failed command aborts the run.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from pydantic import BaseModel, Field

from branchsweep.models.branch import BranchMode, MergeFilter


@dataclass(frozen=True)
class ErrorPolicy:
    """Per-phase error strictness for git invocations."""

    fail_fast: bool


# Discovery failures mean the candidate set cannot be trusted.
DISCOVERY_POLICY = ErrorPolicy(fail_fast=True)
# git sometimes reports errors for deletions that actually succeeded.
DELETION_POLICY = ErrorPolicy(fail_fast=False)


class SweepConfig(BaseModel):
    """Per-run sweep configuration."""

    force: bool = False
    age_days: int = Field(default=14, ge=0)
    delete_unmerged: bool = False
    mode: BranchMode = BranchMode.LOCAL
    dry_run: bool = False
    verify: bool = True
    extra_protected: list[str] = []

    # Fixed for this tool; not exposed on the command line.
    remote: str = "origin"
    base_branch: str = "master"
    maintenance_branch: str = "maintenance"

    @property
    def merge_filter(self) -> MergeFilter:
        return MergeFilter.NOT_MERGED if self.delete_unmerged else MergeFilter.MERGED

    @property
    def is_remote(self) -> bool:
        return self.mode is BranchMode.REMOTE

    def protected_patterns(self) -> list[re.Pattern[str]]:
        """Compile the patterns for branches that are never deleted.

        Raises:
            re.error: If an extra pattern is not a valid regex.
        """
        patterns = [
            r"^release/",
            re.escape(f"{self.remote}/{self.base_branch}"),
            re.escape(self.base_branch) + "$",
            re.escape(self.maintenance_branch),
            *self.extra_protected,
        ]
        return [re.compile(p) for p in patterns]

"""Protocol definitions for branchsweep.

RepositoryClient is the narrow capability the sweep pipeline needs from a
version-control backend. GitRepository in branchsweep.git implements it by
shelling out to the git CLI; tests substitute in-memory fakes.

No subprocess imports allowed in this module -- pure domain protocols.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from branchsweep.models.branch import BranchMode, DeletionOutcome, MergeFilter


@runtime_checkable
class RepositoryClient(Protocol):
    """Operations the sweep pipeline performs against a repository."""

    def fetch_prune(self, remote: str) -> None:
        """Refresh remote-tracking refs and drop those deleted upstream."""
        ...

    def list_branches(
        self, mode: BranchMode, merge_filter: MergeFilter, base: str
    ) -> list[str]:
        """Return raw branch listing lines, one per branch."""
        ...

    def resolve_commit(self, ref: str) -> tuple[str, datetime]:
        """Return the commit hash ``ref`` points to and its commit timestamp."""
        ...

    def delete_local(self, name: str, force: bool) -> DeletionOutcome:
        """Delete a local branch; ``force`` deletes even if unmerged."""
        ...

    def delete_remote(self, remote: str, name: str) -> DeletionOutcome:
        """Delete ``name`` on ``remote``."""
        ...

    def prune_remote(self, remote: str) -> bool:
        """Prune stale remote-tracking refs. Returns True on success."""
        ...

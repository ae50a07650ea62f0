"""Branchsweep domain models."""

from branchsweep.models.branch import (
    BranchCandidate,
    BranchMode,
    DeletionOutcome,
    MergeFilter,
    SweepReport,
)
from branchsweep.models.config import (
    DELETION_POLICY,
    DISCOVERY_POLICY,
    ErrorPolicy,
    SweepConfig,
)

__all__ = [
    "BranchCandidate",
    "BranchMode",
    "DeletionOutcome",
    "MergeFilter",
    "SweepReport",
    "DELETION_POLICY",
    "DISCOVERY_POLICY",
    "ErrorPolicy",
    "SweepConfig",
]

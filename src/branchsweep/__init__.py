"""branchsweep: delete stale git branches.

Lists local or remote branches merged (or not) into master, keeps protected
and recent ones, and deletes the rest after confirmation.
"""

from branchsweep._version import __version__

# Models and configuration
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

# Backends and protocols
from branchsweep.protocols import RepositoryClient
from branchsweep.git import GitRepository, GitRunner

# Pipeline
from branchsweep.operations.sweep import delete, discover, sweep, verify

# Exceptions
from branchsweep.exceptions import (
    CommitDateParseError,
    GitCommandError,
    GitNotFoundError,
    SweepError,
)

__all__ = [
    "__version__",
    "BranchCandidate",
    "BranchMode",
    "DeletionOutcome",
    "MergeFilter",
    "SweepReport",
    "DELETION_POLICY",
    "DISCOVERY_POLICY",
    "ErrorPolicy",
    "SweepConfig",
    "RepositoryClient",
    "GitRepository",
    "GitRunner",
    "delete",
    "discover",
    "sweep",
    "verify",
    "CommitDateParseError",
    "GitCommandError",
    "GitNotFoundError",
    "SweepError",
]

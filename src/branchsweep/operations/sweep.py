"""The sweep pipeline.

Composes a RepositoryClient with the pure naming and age filters:

    discover  -> fetch/prune, list, filter names, resolve commits, filter age
    delete    -> delete each candidate, then prune remote-tracking refs
    verify    -> re-list branches and report candidates still present

Discovery errors propagate and abort the run before anything is deleted.
Deletion failures are recorded per candidate and never stop the loop.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import date
from typing import TYPE_CHECKING, Optional

from branchsweep.exceptions import SweepError
from branchsweep.models.branch import (
    BranchCandidate,
    DeletionOutcome,
    MergeFilter,
    SweepReport,
)
from branchsweep.operations.filtering import filter_by_age
from branchsweep.operations.naming import parse_branch_line, select_names

if TYPE_CHECKING:
    from branchsweep.models.config import SweepConfig
    from branchsweep.protocols import RepositoryClient

logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[Sequence[BranchCandidate]], None]


def discover(
    client: RepositoryClient,
    config: SweepConfig,
    today: date,
) -> list[BranchCandidate]:
    """Find the branches eligible for deletion, oldest first.

    Args:
        client: Repository backend.
        config: Sweep settings (mode, merge filter, age threshold).
        today: Local calendar date used for age comparisons.

    Returns:
        Candidates sorted ascending by commit date.

    Raises:
        SweepError: If any repository query fails or a commit date cannot
            be parsed. No partial result is returned.
    """
    client.fetch_prune(config.remote)
    lines = client.list_branches(config.mode, config.merge_filter, config.base_branch)
    remote = config.remote if config.is_remote else None
    names = select_names(lines, config.protected_patterns(), remote)
    logger.debug("%d of %d listed branches survive name filtering", len(names), len(lines))

    candidates = []
    for branch in names:
        commit_hash, commit_date = client.resolve_commit(branch.full)
        candidates.append(
            BranchCandidate(
                name=branch.name,
                ref=branch.full,
                commit_hash=commit_hash,
                commit_date=commit_date,
            )
        )

    selected = filter_by_age(candidates, config.age_days, today)
    logger.info(
        "%d branch(es) at least %d day(s) old", len(selected), config.age_days
    )
    return selected


def delete(
    client: RepositoryClient,
    candidates: Sequence[BranchCandidate],
    config: SweepConfig,
) -> tuple[list[DeletionOutcome], bool]:
    """Attempt to delete every candidate, then prune the remote.

    Each deletion is attempted regardless of earlier failures. The prune
    runs even when every deletion failed.

    Returns:
        (outcomes in candidate order, whether the prune succeeded)
    """
    outcomes = []
    for candidate in candidates:
        if config.is_remote:
            outcome = client.delete_remote(config.remote, candidate.name)
        else:
            outcome = client.delete_local(candidate.name, force=config.delete_unmerged)
        if outcome.deleted:
            logger.info("Deleted %s", candidate.name)
        else:
            logger.debug("Could not delete %s: %s", candidate.name, outcome.error)
        outcomes.append(outcome)

    pruned = client.prune_remote(config.remote)
    return outcomes, pruned


def verify(
    client: RepositoryClient,
    candidates: Sequence[BranchCandidate],
    config: SweepConfig,
) -> Optional[list[str]]:
    """Return names of candidates that still exist after deletion.

    git occasionally reports an error for a deletion that succeeded; this
    re-lists branches so real failures can be told apart. Returns None when
    the listing itself fails.
    """
    try:
        lines = client.list_branches(config.mode, MergeFilter.ANY, config.base_branch)
    except SweepError as e:
        logger.warning("Could not verify deletions: %s", e)
        return None

    remote = config.remote if config.is_remote else None
    parsed = [parse_branch_line(line, remote) for line in lines]
    if remote:
        parsed = [b for b in parsed if b.full.startswith(f"{remote}/")]
    present = {b.name for b in parsed}
    return [c.name for c in candidates if c.name in present]


def sweep(
    client: RepositoryClient,
    config: SweepConfig,
    today: date,
    confirm: Optional[ConfirmCallback] = None,
    on_candidates: Optional[ConfirmCallback] = None,
) -> SweepReport:
    """Run the full discover, confirm, delete, prune pipeline.

    Args:
        client: Repository backend.
        config: Sweep settings.
        today: Local calendar date used for age comparisons.
        confirm: Called with the candidates before anything is deleted,
            unless ``config.force`` or ``config.dry_run`` is set. It blocks
            until the user acknowledges and aborts the run by raising.
        on_candidates: Called with the candidates as soon as discovery
            finds at least one, before ``confirm``. Used to display them.

    Returns:
        SweepReport. With no candidates, nothing is shown, confirmed,
        deleted or pruned.
    """
    candidates = discover(client, config, today)
    report = SweepReport(candidates=candidates)
    if not candidates:
        return report

    if on_candidates is not None:
        on_candidates(candidates)

    if config.dry_run:
        logger.info("Dry run: nothing deleted")
        return report

    if not config.force and confirm is not None:
        confirm(candidates)

    outcomes, pruned = delete(client, candidates, config)
    still_present = verify(client, candidates, config) if config.verify else None
    return SweepReport(
        candidates=candidates,
        outcomes=outcomes,
        pruned=pruned,
        still_present=still_present,
    )

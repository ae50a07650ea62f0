"""Age filtering and ordering of branch candidates."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from branchsweep.models.branch import BranchCandidate


def filter_by_age(
    candidates: Iterable[BranchCandidate],
    age_days: int,
    today: date,
) -> list[BranchCandidate]:
    """Keep candidates at least ``age_days`` old, oldest first.

    Age is counted in calendar days using the local date of each commit, so
    a branch committed late yesterday is one day old. A candidate exactly
    ``age_days`` old is kept.
    """
    kept = [c for c in candidates if c.age_days(today) >= age_days]
    return sorted(kept, key=lambda c: c.commit_date)

"""Branch name parsing and protected-name filtering.

Turns raw ``git branch`` lines into bare names and drops branches that must
never be swept. Everything here is pure.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from typing import NamedTuple, Optional

# Leading markers git prints before a branch name: current branch, or
# checked out in another worktree.
_MARKERS = ("* ", "+ ")

# Placeholder lines git prints instead of a branch name when HEAD is detached.
_DETACHED_PREFIXES = ("(HEAD detached ", "(no branch")


class BranchName(NamedTuple):
    """A parsed branch listing line."""

    full: str  # marker stripped, remote prefix kept
    name: str  # remote prefix stripped


def parse_branch_line(line: str, remote: Optional[str] = None) -> BranchName:
    """Parse one line of ``git branch`` output.

    Args:
        line: Raw output line, e.g. ``"* feature"`` or ``"  origin/feature"``.
        remote: Remote name whose ``<remote>/`` prefix is stripped from
            ``name``. None in local mode.

    Returns:
        BranchName with the full and bare names. A line consisting only of
        the remote prefix yields an empty ``name``.
    """
    full = line.strip()
    for marker in _MARKERS:
        if full.startswith(marker):
            full = full[len(marker):].lstrip()
            break

    name = full
    if remote:
        prefix = f"{remote}/"
        if name.startswith(prefix):
            name = name[len(prefix):]
    return BranchName(full=full, name=name)


def is_protected(branch: BranchName, patterns: Sequence[re.Pattern[str]]) -> bool:
    """True if any pattern matches the full or the bare branch name.

    Matching is a case-sensitive ``re.search``.
    """
    return any(p.search(branch.full) or p.search(branch.name) for p in patterns)


def _is_pseudo_ref(branch: BranchName) -> bool:
    # "origin/HEAD -> origin/master" and "(HEAD detached at 1a2b3c)"
    return " -> " in branch.full or branch.full.startswith(_DETACHED_PREFIXES)


def select_names(
    lines: Iterable[str],
    patterns: Sequence[re.Pattern[str]],
    remote: Optional[str] = None,
) -> list[BranchName]:
    """Parse listing lines and keep the branches eligible for sweeping.

    With ``remote`` set, branches of any other remote are dropped. Order of
    the input is preserved.
    """
    selected = []
    for line in lines:
        branch = parse_branch_line(line, remote)
        if not branch.name or _is_pseudo_ref(branch):
            continue
        if remote and not branch.full.startswith(f"{remote}/"):
            continue
        if is_protected(branch, patterns):
            continue
        selected.append(branch)
    return selected

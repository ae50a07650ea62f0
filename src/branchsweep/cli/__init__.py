"""branchsweep CLI -- delete stale git branches.

Loaded via the ``branch-sweep`` entry point defined in pyproject.toml.
"""

from __future__ import annotations

import re
from datetime import date
from typing import TYPE_CHECKING

import click

from branchsweep._version import __version__
from branchsweep.cli.formatting import (
    format_candidates,
    format_error,
    format_report,
    get_console,
    setup_logging,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from branchsweep.models.branch import BranchCandidate
    from branchsweep.protocols import RepositoryClient


def _get_repository(repo: str | None) -> "RepositoryClient":
    """Open the git backend for REPO (current directory when None)."""
    from branchsweep.git import GitRepository

    return GitRepository(cwd=repo)


def _prompt(candidates: Sequence[BranchCandidate]) -> None:
    """Block until the user presses Enter. Ctrl+C or EOF aborts."""
    click.prompt(
        f"Press Enter to delete {len(candidates)} branch(es), Ctrl+C to abort",
        default="",
        show_default=False,
    )


@click.command()
@click.option("--force", is_flag=True, envvar="BRANCHSWEEP_FORCE", help="Delete without asking for confirmation.")
@click.option(
    "--age",
    "age_days",
    default=14,
    show_default=True,
    type=click.IntRange(min=0),
    envvar="BRANCHSWEEP_AGE",
    help="Only delete branches whose last commit is at least this many days old.",
)
@click.option("--delete-unmerged", is_flag=True, help="Target branches NOT merged into master and force-delete them.")
@click.option("--remote", "remote_mode", is_flag=True, help="Delete branches on origin instead of local branches.")
@click.option("--dry-run", is_flag=True, help="List candidates without deleting anything.")
@click.option("--verify/--no-verify", default=True, help="Re-list branches afterwards and report any still present.")
@click.option("--protect", "extra_protected", multiple=True, metavar="PATTERN", help="Extra regex of branch names to keep (repeatable).")
@click.option(
    "--repo",
    default=None,
    envvar="BRANCHSWEEP_REPO",
    type=click.Path(exists=True, file_okay=False),
    help="Repository to operate on (default: current directory).",
)
@click.option("-v", "--verbose", is_flag=True, help="Log every git command.")
@click.version_option(__version__, prog_name="branch-sweep")
def cli(
    force: bool,
    age_days: int,
    delete_unmerged: bool,
    remote_mode: bool,
    dry_run: bool,
    verify: bool,
    extra_protected: tuple[str, ...],
    repo: str | None,
    verbose: bool,
) -> None:
    """Delete stale branches that are merged into master.

    Branches are listed after fetching and pruning origin. release/*,
    master, origin/master and the maintenance branch are always kept.
    Deletion errors are reported but do not stop the run.
    """
    from branchsweep.models.branch import BranchMode
    from branchsweep.models.config import SweepConfig
    from branchsweep.operations.sweep import sweep

    setup_logging(verbose)
    console = get_console()

    config = SweepConfig(
        force=force,
        age_days=age_days,
        delete_unmerged=delete_unmerged,
        mode=BranchMode.REMOTE if remote_mode else BranchMode.LOCAL,
        dry_run=dry_run,
        verify=verify,
        extra_protected=list(extra_protected),
    )
    try:
        config.protected_patterns()
    except re.error as e:
        raise click.BadParameter(str(e), param_hint="--protect") from None

    try:
        client = _get_repository(repo)
        report = sweep(
            client,
            config,
            date.today(),
            confirm=_prompt,
            on_candidates=lambda candidates: format_candidates(candidates, console),
        )
    except (SystemExit, click.Abort):
        raise
    except Exception as e:
        format_error(str(e), console)
        raise SystemExit(1) from None

    format_report(report, console)

"""Rich formatting helpers for the branchsweep CLI.

Rich auto-detects TTY and degrades gracefully when piped (no ANSI codes).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Sequence

    from branchsweep.models.branch import BranchCandidate, SweepReport


def get_console() -> Console:
    """Create a Rich Console that auto-detects TTY for graceful pipe degradation."""
    return Console(stderr=False)


def setup_logging(verbose: bool) -> None:
    """Route log records to stderr through Rich, unless logging is already configured."""
    root = logging.getLogger()
    if root.hasHandlers():
        return
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[handler],
    )


def format_candidates(candidates: Sequence[BranchCandidate], console: Console) -> None:
    """Display the branches about to be deleted, oldest first."""
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Branch")
    table.add_column("Commit", style="yellow")
    table.add_column("Date", style="dim")

    for candidate in candidates:
        table.add_row(
            escape(candidate.name),
            candidate.commit_hash[:12],
            candidate.commit_date.strftime("%Y-%m-%d %H:%M:%S %z"),
        )

    console.print(table)


def format_report(report: SweepReport, console: Console) -> None:
    """Display per-branch deletion results and any leftover branches."""
    for outcome in report.outcomes:
        if outcome.deleted:
            console.print(f"[green]Deleted[/green] {escape(outcome.name)}")
        else:
            console.print(
                f"[red]Failed[/red] {escape(outcome.name)}: {escape(outcome.error or '')}",
                highlight=False,
            )

    if report.outcomes and not report.pruned:
        console.print("[yellow]Remote prune did not complete.[/yellow]")

    if report.still_present:
        names = ", ".join(report.still_present)
        console.print(
            f"[yellow]Still present after deletion:[/yellow] {escape(names)}",
            highlight=False,
        )


def format_error(message: str, console: Console) -> None:
    """Display an error message."""
    console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)

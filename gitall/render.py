"""
Rendering functions for gitall output.

This module handles all console formatting. The service layer yields
plain result objects and these functions print each one as it arrives.
"""

from typing import Iterable, List

from rich.console import Console
from rich.markup import escape

from .domain.repository import AheadRepo, DirtyRepo, RepoStatus, repo_name
from .domain.operation import OperationDetail

console = Console(highlight=False, emoji=False)


def _print(text: str = "") -> None:
    # soft_wrap keeps long paths and git output on one line when piped
    console.print(text, soft_wrap=True)


def format_status_line(status: RepoStatus) -> str:
    """One status line: icon, name, branch, change count and divergence."""
    name = escape(status.name)
    if not status.ok:
        return f"[red]✗[/red] [bold]{name}[/bold] [red](error)[/red]"

    icon = "[yellow]●[/yellow]" if status.dirty else "[green]✓[/green]"
    branch = escape(status.branch) if status.branch else "(detached)"
    line = f"{icon} [bold]{name}[/bold] [cyan]{branch}[/cyan]"

    if status.dirty:
        line += f"[yellow] +{status.changes}[/yellow]"
    if status.ahead > 0:
        line += f"[green] ↑{status.ahead}[/green]"
    if status.behind > 0:
        line += f"[red] ↓{status.behind}[/red]"

    return line


def render_status(statuses: Iterable[RepoStatus]) -> int:
    """
    Print the status summary.

    Returns:
        Number of repositories whose status could not be read
    """
    _print("\n[bold]📊 Repository Status[/bold]\n")

    errors = 0
    for status in statuses:
        if not status.ok:
            errors += 1
        _print(format_status_line(status))

    _print()
    return errors


def render_dirty(repos: Iterable[DirtyRepo]) -> int:
    """
    Print each dirty repository with a preview of its changed files.

    Returns:
        Number of dirty repositories
    """
    _print("\n[bold]🔧 Dirty Repositories[/bold]\n")

    count = 0
    for repo in repos:
        count += 1
        _print(f"[yellow]● {escape(repo.name)}[/yellow]")
        for line in repo.shown:
            _print(f"[dim]    {escape(line)}[/dim]")
        if repo.hidden:
            _print(f"[dim]    ... and {repo.hidden} more[/dim]")
        _print()

    if count == 0:
        _print("[green]All repositories are clean! 🎉[/green]")

    return count


def render_ahead(repos: Iterable[AheadRepo]) -> int:
    """
    Print each repository that has unpushed commits.

    Returns:
        Number of repositories ahead of their upstream
    """
    _print("\n[bold]⬆️ Repos Ahead of Remote[/bold]\n")

    count = 0
    for repo in repos:
        count += 1
        _print(
            f"[green]↑[/green] [bold]{escape(repo.name)}[/bold] "
            f"[green]+{repo.ahead} commit(s)[/green]"
        )
        for line in repo.commits:
            _print(f"[dim]    {escape(line)}[/dim]")
        _print()

    if count == 0:
        _print("[dim]No repos ahead of remote.[/dim]")

    return count


def render_run_header(command: str) -> None:
    _print(f"\n[bold]🚀 Running: {escape(command)}[/bold]\n")


def render_run_detail(detail: OperationDetail) -> None:
    """Print the outcome of a command in one repository."""
    _print(f"[cyan]→ {escape(detail.repo_name)}[/cyan]")
    if detail.ok:
        if detail.output:
            _print(f"[dim]{escape(detail.output)}[/dim]")
        _print("[green]  ✓[/green]")
    else:
        _print(f"[red]  ✗ {escape(detail.error or 'failed')}[/red]")


def render_run(command: str, details: Iterable[OperationDetail]) -> None:
    """Print the header, then each repository's outcome as it completes."""
    render_run_header(command)
    for detail in details:
        render_run_detail(detail)
    _print()


def render_list(repos: List[str]) -> None:
    """Print the discovered repositories with their full paths."""
    _print(f"\n[bold]📁 Git Repositories ({len(repos)})[/bold]\n")
    for path in repos:
        _print(f"  [cyan]{escape(repo_name(path))}[/cyan]")
        _print(f"[dim]    {escape(path)}[/dim]")
    _print()

"""
Read-only report commands: status, dirty, ahead and list.
"""

import click

from ..cli_utils import dir_option, get_service, resolve_repos, standard_command
from ..exit_codes import PartialSuccessError
from ..render import render_ahead, render_dirty, render_list, render_status


@click.command(name='status')
@dir_option
@click.pass_context
@standard_command
def status_cmd(ctx, base_dir):
    """Show status of all repos (alias: st).

    One line per repository: branch, number of changed files and
    commits ahead (↑) or behind (↓) the upstream branch.
    """
    repos = resolve_repos(ctx, base_dir)
    service = get_service(ctx)

    errors = render_status(service.status_repos(repos))

    if errors and ctx.obj['strict']:
        raise PartialSuccessError(
            f"Could not read status of {errors} of {len(repos)} repositories",
            succeeded=len(repos) - errors,
            failed=errors,
        )


@click.command(name='dirty')
@dir_option
@click.pass_context
@standard_command
def dirty_cmd(ctx, base_dir):
    """Show only repos with uncommitted changes."""
    repos = resolve_repos(ctx, base_dir)
    render_dirty(get_service(ctx).dirty_repos(repos))


@click.command(name='ahead')
@dir_option
@click.pass_context
@standard_command
def ahead_cmd(ctx, base_dir):
    """Show repos ahead of remote.

    Repositories without an upstream branch are skipped.
    """
    repos = resolve_repos(ctx, base_dir)
    render_ahead(get_service(ctx).ahead_repos(repos))


@click.command(name='list')
@dir_option
@click.pass_context
@standard_command
def list_cmd(ctx, base_dir):
    """List all git repositories (alias: ls)."""
    render_list(resolve_repos(ctx, base_dir))

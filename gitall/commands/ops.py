"""
Commands that run git in every repository: pull, fetch, push, commit, run.

Each one builds a list of git argument vectors and hands it to the
dispatcher, which runs them repository by repository.
"""

import shlex
from typing import List, Sequence

import click

from ..cli_utils import dir_option, get_service, resolve_repos, standard_command
from ..exit_codes import PartialSuccessError
from ..render import render_run
from ..services.git_ops_service import command_text


def dispatch(ctx: click.Context, base_dir, steps: List[List[str]]) -> None:
    """Run steps in every discovered repository and print the outcome."""
    repos = resolve_repos(ctx, base_dir)
    service = get_service(ctx)

    render_run(command_text(steps), service.run_repos(repos, steps))

    summary = service.last_result
    if summary is not None and not summary.success and ctx.obj['strict']:
        raise PartialSuccessError(
            f"{summary.operation} failed in {summary.failed} of {summary.total} repositories",
            succeeded=summary.successful,
            failed=summary.failed,
        )


def build_run_steps(tokens: Sequence[str]) -> List[List[str]]:
    """
    Turn 'run' arguments into a git argument vector.

    A single token is split with shell rules so that `run "log -1"`
    works; several tokens are used as given.
    """
    if len(tokens) == 1:
        try:
            args = shlex.split(tokens[0])
        except ValueError as e:
            raise click.UsageError(f"Cannot parse command {tokens[0]!r}: {e}")
    else:
        args = list(tokens)

    if not args:
        raise click.UsageError("Missing git command to run")

    return [args]


@click.command(name='pull')
@dir_option
@click.pass_context
@standard_command
def pull_cmd(ctx, base_dir):
    """Pull all repos."""
    dispatch(ctx, base_dir, [["pull"]])


@click.command(name='fetch')
@dir_option
@click.pass_context
@standard_command
def fetch_cmd(ctx, base_dir):
    """Fetch all remotes in all repos."""
    dispatch(ctx, base_dir, [["fetch", "--all"]])


@click.command(name='push')
@dir_option
@click.pass_context
@standard_command
def push_cmd(ctx, base_dir):
    """Push all repos."""
    dispatch(ctx, base_dir, [["push"]])


@click.command(name='commit')
@click.argument('message')
@dir_option
@click.pass_context
@standard_command
def commit_cmd(ctx, message, base_dir):
    """Stage and commit all changes in all repos.

    Runs `git add -A` and then `git commit -m MESSAGE`. Repositories with
    nothing to commit are reported as failed.
    """
    dispatch(ctx, base_dir, [["add", "-A"], ["commit", "-m", message]])


@click.command(
    name='run',
    context_settings={'ignore_unknown_options': True, 'allow_interspersed_args': False},
)
@dir_option
@click.argument('command', nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_context
@standard_command
def run_cmd(ctx, base_dir, command):
    """Run arbitrary git command in all repos.

    Options for gitall itself (-d) must come before the git command.

    \b
    Examples:
        gitall run log -1 --oneline
        gitall run "remote -v"
        gitall run -d ~/work checkout main
    """
    dispatch(ctx, base_dir, build_run_steps(command))

#!/usr/bin/env python3

import click

from gitall import __version__
from gitall.config import load_config, set_verbose
from gitall.cli_utils import create_alias
from gitall.commands.report import status_cmd, dirty_cmd, ahead_cmd, list_cmd
from gitall.commands.ops import pull_cmd, fetch_cmd, push_cmd, commit_cmd, run_cmd


@click.group()
@click.version_option(__version__, prog_name='gitall')
@click.option('-v', '--verbose', is_flag=True, help='Log every git command to stderr')
@click.option('--timeout', type=float, default=None, metavar='SECONDS',
              help='Give up on a git command after this many seconds')
@click.option('--strict', is_flag=True,
              help='Exit with code 71 if any repository failed')
@click.pass_context
def cli(ctx, verbose, timeout, strict):
    """gitall - Run git commands across multiple repositories.

    Every immediate subdirectory of the base directory (-d, default
    ~/projects) that contains a .git entry is treated as a repository.
    Repositories are processed one at a time in path order.
    """
    set_verbose(verbose)

    config = load_config()
    if timeout is not None:
        config['timeout'] = timeout
    if strict:
        config['strict'] = True

    ctx.ensure_object(dict)
    ctx.obj['config'] = config
    ctx.obj['strict'] = bool(config.get('strict'))


cli.add_command(status_cmd)
cli.add_command(pull_cmd)
cli.add_command(fetch_cmd)
cli.add_command(run_cmd)
cli.add_command(dirty_cmd)
cli.add_command(ahead_cmd)
cli.add_command(commit_cmd)
cli.add_command(push_cmd)
cli.add_command(list_cmd)

# Short aliases
cli.add_command(create_alias(status_cmd, 'st'))
cli.add_command(create_alias(list_cmd, 'ls'))


def main():
    cli(prog_name='gitall')

if __name__ == "__main__":
    main()

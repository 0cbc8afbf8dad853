"""
Common CLI utilities and decorators for consistent command behavior.
"""

import copy
import sys
from functools import wraps
from typing import List

import click

from .config import logger
from .discovery import find_repos
from .exit_codes import INTERRUPTED, CommandError
from .infra.git_client import GitClient
from .services.git_ops_service import GitOpsService


def dir_option(f):
    """Decorator adding the -d/--dir base directory option."""
    return click.option(
        '-d', '--dir', 'base_dir',
        default=None,
        metavar='DIRECTORY',
        help='Base directory to scan (default: configured base_dir, ~/projects)',
    )(f)


def standard_command(func):
    """
    Decorator that provides standard error handling:
    - Ctrl+C exits with INTERRUPTED after a short message
    - CommandError exits with its own exit code
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            click.echo("Interrupted by user", err=True)
            sys.exit(INTERRUPTED)
        except CommandError as e:
            logger.error(str(e))
            sys.exit(e.exit_code)

    return wrapper


def resolve_repos(ctx: click.Context, base_dir) -> List[str]:
    """Discover repositories under --dir, falling back to the configured base_dir."""
    config = ctx.obj['config']
    if base_dir is None:
        base_dir = config['base_dir']
    return find_repos(base_dir)


def get_service(ctx: click.Context) -> GitOpsService:
    """Build the git service from the context configuration."""
    config = ctx.obj['config']
    return GitOpsService(git_client=GitClient(timeout=config.get('timeout')))


def create_alias(original_cmd: click.Command, alias: str) -> click.Command:
    """Create a hidden copy of a command under another name."""
    alias_cmd = copy.deepcopy(original_cmd)
    alias_cmd.name = alias
    alias_cmd.hidden = True
    return alias_cmd

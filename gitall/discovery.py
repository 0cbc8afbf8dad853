"""
Repository discovery for gitall.
"""
import os
import logging
from typing import List

logger = logging.getLogger(__name__)

GIT_MARKER = '.git'


def expand_base_dir(base_dir: str) -> str:
    """Expand a leading '~' and return an absolute path."""
    return os.path.abspath(os.path.expanduser(base_dir))


def is_git_repo(path: str) -> bool:
    """True if path has a direct '.git' child (file or directory)."""
    return os.path.exists(os.path.join(path, GIT_MARKER))


def find_repos(base_dir: str) -> List[str]:
    """Find the git repositories directly below base_dir.

    Only one level is scanned; repositories nested deeper are not found.
    An unreadable base directory is reported and yields an empty list.

    Args:
        base_dir: Directory to scan, may start with '~'

    Returns:
        Absolute repository paths sorted by full path
    """
    directory = expand_base_dir(base_dir)
    repos = []

    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if entry.is_dir() and is_git_repo(entry.path):
                    repos.append(entry.path)
    except OSError as e:
        logger.error(f"Error reading {directory}: {e.strerror or e}")
        return []

    return sorted(repos)

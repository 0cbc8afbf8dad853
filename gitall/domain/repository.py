"""
Per-repository report objects for gitall.

Each reporter yields one of these per repository. They are plain values
so that rendering can be tested without running git.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

DIRTY_PREVIEW_LINES = 5
AHEAD_PREVIEW_COMMITS = 3


def repo_name(path: str) -> str:
    """Short display name of a repository path."""
    return Path(path).name


@dataclass
class RepoStatus:
    """
    Branch, working tree and upstream state of one repository.

    When the status or branch query fails, error holds the first line of
    the failure and the other fields keep their defaults.
    """
    path: str
    name: str
    branch: str = ""
    changes: int = 0
    ahead: int = 0
    behind: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def dirty(self) -> bool:
        return self.ok and self.changes > 0


@dataclass
class DirtyRepo:
    """A repository with a non-empty working tree status."""
    path: str
    name: str
    lines: List[str] = field(default_factory=list)

    @property
    def shown(self) -> List[str]:
        return self.lines[:DIRTY_PREVIEW_LINES]

    @property
    def hidden(self) -> int:
        return max(0, len(self.lines) - DIRTY_PREVIEW_LINES)


@dataclass
class AheadRepo:
    """A repository with local commits that are not on its upstream."""
    path: str
    name: str
    ahead: int
    commits: List[str] = field(default_factory=list)

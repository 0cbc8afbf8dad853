"""
Infrastructure layer for gitall.

Contains the abstraction over the external git executable:
- GitClient: Git command execution
- CommandOutput: Captured result of one git process
- GitError: Raised by queries that need a successful exit

These provide clean interfaces that can be mocked for testing.
"""

from .git_client import GitClient, CommandOutput, GitError

__all__ = [
    'GitClient',
    'CommandOutput',
    'GitError',
]

"""
Git client infrastructure for gitall.

Provides a clean abstraction over git command execution.
All git processes are spawned here, which makes them:
- Easy to mock for testing
- Consistent in error handling
- Always invoked as an argument vector, never through a shell
"""

import subprocess
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandOutput:
    """Result of one git process."""
    args: Tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str:
        """Combined stdout and stderr, trimmed."""
        parts = [text.strip() for text in (self.stdout, self.stderr)]
        return "\n".join(p for p in parts if p)

    @property
    def error_line(self) -> str:
        """
        One line describing the failure.

        The first line of stderr, else the last line of stdout: commands
        such as 'git commit' print their reason for failing at the end.
        """
        for line in self.stderr.splitlines():
            if line.strip():
                return line.strip()
        for line in reversed(self.stdout.splitlines()):
            if line.strip():
                return line.strip()
        return f"exit status {self.returncode}"


class GitError(Exception):
    """Raised when a git query exits non-zero or cannot be spawned."""

    def __init__(self, result: CommandOutput):
        super().__init__(result.error_line)
        self.result = result


class GitClient:
    """
    Abstraction over git commands.

    Example:
        client = GitClient()
        lines = client.status_lines("/path/to/repo")
        if not lines:
            print("Repository is clean")
    """

    def __init__(self, timeout: Optional[float] = None, git: str = "git"):
        """
        Initialize GitClient.

        Args:
            timeout: Command timeout in seconds (None waits forever)
            git: Name or path of the git executable
        """
        self.timeout = timeout
        self.git = git

    def run(self, args: Sequence[str], cwd: str) -> CommandOutput:
        """
        Run one git command and capture its output.

        Never raises for a failing command: spawn errors and timeouts are
        reported as a non-zero CommandOutput.

        Args:
            args: Arguments after 'git' (e.g. ['status', '--porcelain'])
            cwd: Working directory

        Returns:
            CommandOutput
        """
        cmd = [self.git, *args]
        logger.debug(f"Running {' '.join(cmd)} in {cwd}")

        try:
            result = subprocess.run(
                cmd,
                cwd=cwd,
                capture_output=True,
                text=True,
                timeout=self.timeout
            )
        except subprocess.TimeoutExpired:
            logger.warning(f"Git command timed out: {' '.join(cmd)} in {cwd}")
            return CommandOutput(
                tuple(cmd), -1, stderr=f"timed out after {self.timeout}s"
            )
        except OSError as e:
            logger.debug(f"Git command could not start: {' '.join(cmd)} - {e}")
            return CommandOutput(tuple(cmd), -1, stderr=str(e))

        return CommandOutput(
            tuple(cmd),
            result.returncode,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
        )

    def _check(self, args: Sequence[str], cwd: str) -> str:
        """Run a query and return stdout, raising GitError on failure."""
        result = self.run(args, cwd)
        if not result.ok:
            raise GitError(result)
        return result.stdout

    def status_lines(self, path: str) -> List[str]:
        """Lines of 'git status --porcelain'; empty when clean."""
        output = self._check(["status", "--porcelain"], path)
        return [line for line in output.splitlines() if line.strip()]

    def current_branch(self, path: str) -> str:
        """Current branch name; empty string on a detached HEAD."""
        return self._check(["branch", "--show-current"], path).strip()

    def ahead_behind(self, path: str) -> Tuple[int, int]:
        """
        Commits ahead of and behind the upstream branch.

        Raises:
            GitError: no upstream is configured or the output is unreadable
        """
        result = self.run(
            ["rev-list", "--left-right", "--count", "HEAD...@{u}"], path
        )
        if not result.ok:
            raise GitError(result)

        parts = result.stdout.split()
        if len(parts) != 2:
            raise GitError(result)
        try:
            return int(parts[0]), int(parts[1])
        except ValueError:
            raise GitError(result) from None

    def commits_ahead(self, path: str, limit: int = 3) -> List[str]:
        """Oneline log of commits on HEAD that are not on the upstream."""
        output = self._check(
            ["log", "--oneline", "-n", str(limit), "@{u}..HEAD"], path
        )
        return [line for line in output.splitlines() if line.strip()]

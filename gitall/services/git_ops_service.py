"""
Git operations service for gitall.

Runs git queries and commands across a list of repositories, one
repository at a time. Every method is a generator that yields one result
per repository as soon as it is known, so the caller can print while the
next repository is still being processed. A failure in one repository is
captured in its result and never stops the loop.
"""

import logging
import shlex
from typing import Generator, List, Optional, Sequence

from ..infra.git_client import GitClient, GitError
from ..domain.repository import (
    AHEAD_PREVIEW_COMMITS,
    AheadRepo,
    DirtyRepo,
    RepoStatus,
    repo_name,
)
from ..domain.operation import (
    OperationDetail,
    OperationStatus,
    OperationSummary,
)

logger = logging.getLogger(__name__)

Steps = Sequence[Sequence[str]]


def command_text(steps: Steps) -> str:
    """Shell-style rendering of a command, e.g. "git add -A && git commit -m 'x'"."""
    return " && ".join(shlex.join(["git", *step]) for step in steps)


class GitOpsService:
    """
    Service for git operations across multiple repositories.

    Example:
        service = GitOpsService()

        for status in service.status_repos(repos):
            print(status.name, status.branch)

        for detail in service.run_repos(repos, [["pull"]]):
            print(detail.repo_name, detail.status)
        print(f"{service.last_result.failed} failed")
    """

    def __init__(self, git_client: Optional[GitClient] = None):
        """
        Initialize GitOpsService.

        Args:
            git_client: GitClient instance (creates new if None)
        """
        self.git = git_client or GitClient()
        self.last_result: Optional[OperationSummary] = None

    def status_repos(self, repos: List[str]) -> Generator[RepoStatus, None, None]:
        """
        Yield branch, change count and upstream divergence per repository.

        A repository without an upstream reports zero ahead and behind.
        """
        for path in repos:
            name = repo_name(path)
            try:
                lines = self.git.status_lines(path)
                branch = self.git.current_branch(path)
            except GitError as e:
                logger.debug(f"{name}: status failed: {e}")
                yield RepoStatus(path=path, name=name, error=str(e))
                continue

            try:
                ahead, behind = self.git.ahead_behind(path)
            except GitError:
                ahead, behind = 0, 0

            yield RepoStatus(
                path=path,
                name=name,
                branch=branch,
                changes=len(lines),
                ahead=ahead,
                behind=behind,
            )

    def dirty_repos(self, repos: List[str]) -> Generator[DirtyRepo, None, None]:
        """Yield only the repositories with uncommitted changes."""
        for path in repos:
            name = repo_name(path)
            try:
                lines = self.git.status_lines(path)
            except GitError as e:
                logger.debug(f"{name}: skipped, status failed: {e}")
                continue

            if lines:
                yield DirtyRepo(path=path, name=name, lines=lines)

    def ahead_repos(self, repos: List[str]) -> Generator[AheadRepo, None, None]:
        """Yield only the repositories with commits their upstream lacks."""
        for path in repos:
            name = repo_name(path)
            try:
                ahead, _ = self.git.ahead_behind(path)
            except GitError:
                continue

            if ahead <= 0:
                continue

            try:
                commits = self.git.commits_ahead(path, AHEAD_PREVIEW_COMMITS)
            except GitError as e:
                logger.debug(f"{name}: skipped, could not list ahead commits: {e}")
                continue

            yield AheadRepo(path=path, name=name, ahead=ahead, commits=commits)

    def run_repos(
        self,
        repos: List[str],
        steps: Steps
    ) -> Generator[OperationDetail, None, OperationSummary]:
        """
        Run a command in every repository.

        Steps run in order inside each repository and the first failing
        step ends that repository, as with '&&' in a shell.

        Args:
            repos: Repository paths
            steps: Argument vectors after 'git', e.g. [["add", "-A"], ["commit", "-m", msg]]

        Yields:
            One OperationDetail per repository

        Returns:
            OperationSummary with results
        """
        result = OperationSummary(operation=command_text(steps))
        self.last_result = result

        for path in repos:
            name = repo_name(path)
            outputs = []
            error = None

            for step in steps:
                output = self.git.run(step, cwd=path)
                if output.output:
                    outputs.append(output.output)
                if not output.ok:
                    error = output.error_line
                    break

            if error is None:
                detail = OperationDetail(
                    repo_path=path,
                    repo_name=name,
                    status=OperationStatus.SUCCESS,
                    output="\n".join(outputs),
                )
            else:
                logger.debug(f"{name}: {result.operation} failed: {error}")
                detail = OperationDetail(
                    repo_path=path,
                    repo_name=name,
                    status=OperationStatus.FAILED,
                    error=error,
                )

            result.add_detail(detail)
            yield detail

        return result

"""
Tests for the git client infrastructure.

Unit tests patch subprocess.run; the TestGitClientRealRepo class runs
the real git executable against throw-away repositories.
"""

import shutil
import subprocess
from unittest.mock import patch

import pytest

from gitall.infra.git_client import CommandOutput, GitClient, GitError


def _completed(returncode=0, stdout="", stderr=""):
    return subprocess.CompletedProcess(
        args=["git"], returncode=returncode, stdout=stdout, stderr=stderr
    )


class TestCommandOutput:
    """Tests for CommandOutput."""

    def test_ok(self):
        assert CommandOutput(("git",), 0).ok is True
        assert CommandOutput(("git",), 1).ok is False

    def test_output_combines_and_trims(self):
        result = CommandOutput(("git",), 0, stdout="  out\n", stderr="\nerr  \n")
        assert result.output == "out\nerr"

    def test_output_empty(self):
        assert CommandOutput(("git",), 0, stdout="\n", stderr="").output == ""

    def test_error_line_prefers_stderr(self):
        result = CommandOutput(
            ("git",), 1,
            stdout="something\n",
            stderr="\nfatal: not a git repository\nhint: more\n",
        )
        assert result.error_line == "fatal: not a git repository"

    def test_error_line_falls_back_to_last_stdout_line(self):
        result = CommandOutput(
            ("git",), 1,
            stdout="On branch main\nnothing to commit, working tree clean\n\n",
        )
        assert result.error_line == "nothing to commit, working tree clean"

    def test_error_line_without_output(self):
        assert CommandOutput(("git",), 128).error_line == "exit status 128"


class TestGitClientRun:
    """Tests for GitClient.run with subprocess mocked."""

    def test_runs_argument_vector(self):
        client = GitClient()
        with patch("gitall.infra.git_client.subprocess.run") as mock_run:
            mock_run.return_value = _completed(stdout="ok\n")

            result = client.run(["commit", "-m", "it's \"quoted\" && rm -rf /"], cwd="/repo")

        args, kwargs = mock_run.call_args
        assert args[0] == ["git", "commit", "-m", "it's \"quoted\" && rm -rf /"]
        assert kwargs["cwd"] == "/repo"
        assert kwargs.get("shell", False) is False
        assert result.ok
        assert result.stdout == "ok\n"

    def test_passes_timeout(self):
        client = GitClient(timeout=5)
        with patch("gitall.infra.git_client.subprocess.run") as mock_run:
            mock_run.return_value = _completed()
            client.run(["status"], cwd="/repo")

        assert mock_run.call_args.kwargs["timeout"] == 5

    def test_nonzero_exit(self):
        client = GitClient()
        with patch("gitall.infra.git_client.subprocess.run") as mock_run:
            mock_run.return_value = _completed(128, stderr="fatal: bad\n")
            result = client.run(["status"], cwd="/repo")

        assert not result.ok
        assert result.returncode == 128
        assert result.error_line == "fatal: bad"

    def test_timeout_is_failure(self):
        client = GitClient(timeout=1)
        with patch("gitall.infra.git_client.subprocess.run") as mock_run:
            mock_run.side_effect = subprocess.TimeoutExpired(["git"], 1)
            result = client.run(["fetch"], cwd="/repo")

        assert not result.ok
        assert "timed out" in result.error_line

    def test_spawn_failure_is_failure(self):
        client = GitClient()
        with patch("gitall.infra.git_client.subprocess.run") as mock_run:
            mock_run.side_effect = FileNotFoundError(2, "No such file or directory", "git")
            result = client.run(["status"], cwd="/repo")

        assert not result.ok
        assert "No such file or directory" in result.error_line


class TestGitClientQueries:
    """Tests for the parsing query helpers."""

    @pytest.fixture
    def client(self):
        return GitClient()

    def test_status_lines(self, client):
        with patch.object(client, "run") as mock_run:
            mock_run.return_value = CommandOutput(
                ("git",), 0, stdout=" M a.py\n?? b.py\n\n"
            )
            assert client.status_lines("/repo") == [" M a.py", "?? b.py"]

        mock_run.assert_called_once_with(["status", "--porcelain"], "/repo")

    def test_status_lines_clean(self, client):
        with patch.object(client, "run", return_value=CommandOutput(("git",), 0)):
            assert client.status_lines("/repo") == []

    def test_status_lines_failure_raises(self, client):
        failure = CommandOutput(("git",), 128, stderr="fatal: not a git repository")
        with patch.object(client, "run", return_value=failure):
            with pytest.raises(GitError) as exc_info:
                client.status_lines("/repo")

        assert str(exc_info.value) == "fatal: not a git repository"
        assert exc_info.value.result is failure

    def test_current_branch(self, client):
        with patch.object(client, "run", return_value=CommandOutput(("git",), 0, stdout="main\n")):
            assert client.current_branch("/repo") == "main"

    def test_ahead_behind(self, client):
        with patch.object(client, "run", return_value=CommandOutput(("git",), 0, stdout="3\t1\n")):
            assert client.ahead_behind("/repo") == (3, 1)

    def test_ahead_behind_no_upstream(self, client):
        failure = CommandOutput(("git",), 128, stderr="fatal: no upstream configured")
        with patch.object(client, "run", return_value=failure):
            with pytest.raises(GitError):
                client.ahead_behind("/repo")

    @pytest.mark.parametrize("stdout", ["", "3\n", "a\tb\n"])
    def test_ahead_behind_unreadable(self, client, stdout):
        with patch.object(client, "run", return_value=CommandOutput(("git",), 0, stdout=stdout)):
            with pytest.raises(GitError):
                client.ahead_behind("/repo")

    def test_commits_ahead(self, client):
        with patch.object(client, "run") as mock_run:
            mock_run.return_value = CommandOutput(
                ("git",), 0, stdout="abc123 second\ndef456 first\n"
            )
            assert client.commits_ahead("/repo") == ["abc123 second", "def456 first"]

        mock_run.assert_called_once_with(
            ["log", "--oneline", "-n", "3", "@{u}..HEAD"], "/repo"
        )


@pytest.mark.skipif(shutil.which("git") is None, reason="git executable not found")
class TestGitClientRealRepo:
    """Tests against real repositories."""

    def test_clean_repo(self, make_repo):
        repo = make_repo("clean")
        client = GitClient()

        assert client.status_lines(str(repo)) == []
        assert client.current_branch(str(repo)) == "main"

    def test_dirty_repo(self, make_repo):
        repo = make_repo("dirty")
        (repo / "new.txt").write_text("x")
        (repo / "README.md").write_text("changed")

        lines = GitClient().status_lines(str(repo))

        assert len(lines) == 2
        assert " M README.md" in lines
        assert "?? new.txt" in lines

    def test_no_upstream(self, make_repo):
        repo = make_repo("lonely")

        with pytest.raises(GitError):
            GitClient().ahead_behind(str(repo))

    def test_ahead_of_local_upstream(self, make_repo, git_cmd):
        repo = make_repo("tracked")
        git_cmd(repo, "branch", "base")
        git_cmd(repo, "branch", "--set-upstream-to=base")
        for i in range(2):
            (repo / f"f{i}.txt").write_text(str(i))
            git_cmd(repo, "add", ".")
            git_cmd(repo, "commit", "-q", "-m", f"change {i}")

        client = GitClient()

        assert client.ahead_behind(str(repo)) == (2, 0)
        commits = client.commits_ahead(str(repo))
        assert len(commits) == 2
        assert commits[0].endswith("change 1")

    def test_broken_marker(self, broken_repo):
        with pytest.raises(GitError):
            GitClient().status_lines(str(broken_repo))

"""Pytest configuration and fixtures."""

import subprocess
from pathlib import Path

import pytest
from rich.console import Console

from gitall import render


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep the user's home, git config and gitall config out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test User")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@test.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test User")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@test.com")
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    monkeypatch.setenv("GITALL_CONFIG", str(home / ".gitall.json"))
    for name in ("GITALL_DIR", "GITALL_TIMEOUT", "GITALL_STRICT"):
        monkeypatch.delenv(name, raising=False)
    return home


@pytest.fixture(autouse=True)
def plain_console(monkeypatch):
    """Render without colors so assertions can match plain text."""
    monkeypatch.setattr(
        render, "console", Console(color_system=None, highlight=False, emoji=False)
    )


@pytest.fixture
def base_dir(tmp_path) -> Path:
    """Directory the repositories under test live in."""
    path = tmp_path / "projects"
    path.mkdir()
    return path


def git(repo: Path, *args: str) -> str:
    """Run git in repo and return stdout, failing the test on error."""
    result = subprocess.run(
        ["git", *args], cwd=repo, check=True, capture_output=True, text=True
    )
    return result.stdout


@pytest.fixture
def git_cmd():
    """The git helper, for tests that change repositories."""
    return git


@pytest.fixture
def make_repo(base_dir):
    """Factory creating a git repository with one commit on 'main'."""

    def _make(name: str) -> Path:
        repo_path = base_dir / name
        repo_path.mkdir()
        git(repo_path, "init", "-q")
        git(repo_path, "symbolic-ref", "HEAD", "refs/heads/main")
        git(repo_path, "config", "user.email", "test@test.com")
        git(repo_path, "config", "user.name", "Test User")
        # Disable GPG signing for test commits
        git(repo_path, "config", "commit.gpgsign", "false")

        (repo_path / "README.md").write_text(f"# {name}\n")
        git(repo_path, "add", ".")
        git(repo_path, "commit", "-q", "-m", "Initial commit")
        return repo_path

    return _make


@pytest.fixture
def broken_repo(base_dir):
    """Directory with a .git marker that git cannot read."""
    repo_path = base_dir / "broken"
    repo_path.mkdir()
    (repo_path / ".git").write_text("gitdir: does-not-exist\n")
    return repo_path

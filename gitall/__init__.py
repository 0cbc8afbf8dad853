"""
gitall - Run git commands across multiple repositories.

gitall treats every immediate subdirectory of a base directory that
contains a .git entry as a repository, and runs one operation over all of
them in path order, printing a short report.

Quick Start:
    from gitall.discovery import find_repos
    from gitall.services import GitOpsService

    repos = find_repos("~/projects")
    service = GitOpsService()

    for status in service.status_repos(repos):
        print(status.name, status.branch, status.changes)

    for detail in service.run_repos(repos, [["fetch", "--all"]]):
        print(detail.repo_name, detail.status.value)

Command line:
    gitall status          # one line per repository
    gitall dirty           # repositories with uncommitted changes
    gitall ahead           # repositories with unpushed commits
    gitall pull | fetch | push
    gitall commit "message"
    gitall run log -1 --oneline
    gitall list
"""

__version__ = "1.0.0"

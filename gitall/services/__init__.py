"""
Service layer for gitall.

Services orchestrate git client calls across repositories and produce
domain objects; they never print.
"""

from .git_ops_service import GitOpsService, command_text

__all__ = [
    'GitOpsService',
    'command_text',
]

"""
Domain objects for gitall.

Immutable-by-convention values passed from the service layer to the
renderers. They carry no behavior beyond simple derived properties.
"""

from .repository import (
    RepoStatus,
    DirtyRepo,
    AheadRepo,
    repo_name,
    DIRTY_PREVIEW_LINES,
    AHEAD_PREVIEW_COMMITS,
)
from .operation import OperationStatus, OperationDetail, OperationSummary

__all__ = [
    'RepoStatus',
    'DirtyRepo',
    'AheadRepo',
    'repo_name',
    'DIRTY_PREVIEW_LINES',
    'AHEAD_PREVIEW_COMMITS',
    'OperationStatus',
    'OperationDetail',
    'OperationSummary',
]

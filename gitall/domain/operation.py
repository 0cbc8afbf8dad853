"""
Operation result domain objects for gitall.

Provides standardized result types for commands dispatched to every
repository (pull, fetch, push, commit, run).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class OperationStatus(Enum):
    """Status of an individual operation."""
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class OperationDetail:
    """
    Details of a single operation on one repository.

    Used to track what happened to each repo during bulk operations.
    """
    repo_path: str
    repo_name: str
    status: OperationStatus
    output: str = ""
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == OperationStatus.SUCCESS


@dataclass
class OperationSummary:
    """
    Summary of one command dispatched across multiple repositories.
    """
    operation: str  # command text, e.g. "git pull"
    total: int = 0
    successful: int = 0
    failed: int = 0
    details: List[OperationDetail] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """True if no failures occurred."""
        return self.failed == 0

    def add_detail(self, detail: OperationDetail) -> None:
        """Add an operation detail and update counts."""
        self.details.append(detail)
        self.total += 1

        if detail.status == OperationStatus.SUCCESS:
            self.successful += 1
        elif detail.status == OperationStatus.FAILED:
            self.failed += 1
            if detail.error:
                self.errors.append(f"{detail.repo_name}: {detail.error}")


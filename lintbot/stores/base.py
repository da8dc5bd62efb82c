"""Abstract FileReview store interface.

The orchestrator depends on FileReviewStore, not on a concrete backend.
Every backend must enforce uniqueness of (build_id, filename, linter_name)
itself; callers never check-then-insert.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from lintbot.models.file_review import FileReview, Violation


class FileReviewStore(ABC):
    """Persistence layer for FileReview records."""

    @abstractmethod
    async def insert_or_fetch(
        self,
        build_id: int,
        filename: str,
        linter_name: str,
        patch: Optional[str] = None
    ) -> FileReview:
        """Atomically create an incomplete review, or return the existing one."""

    @abstractmethod
    async def find(self, build_id: int, filename: str, linter_name: str) -> Optional[FileReview]:
        """Return the review for the tuple, or None."""

    @abstractmethod
    async def list_for_build(self, build_id: int) -> List[FileReview]:
        """Return every review of a build. Empty list if there are none."""

    @abstractmethod
    async def complete(
        self,
        build_id: int,
        filename: str,
        linter_name: str,
        violations: List[Violation]
    ) -> Optional[FileReview]:
        """Mark a review completed with its violations.

        Used by workers, never by the orchestrator. Must be idempotent:
        completing twice keeps the first completion time.
        """

    async def close(self) -> None:
        """Release any resources held by the store.

        Default is a no-op so callers can always call close() safely.
        """

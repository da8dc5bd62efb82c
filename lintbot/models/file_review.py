"""File review lifecycle data models."""

from datetime import datetime, timedelta, timezone
from typing import List, Optional

from pydantic import BaseModel, Field


class Violation(BaseModel):
    """Lint violation reported by a worker for one line."""

    line_number: int
    messages: List[str] = []


class FileReview(BaseModel):
    """
    Durable record of one file's review by one linter within one build.

    Created incomplete by the orchestrator; only the external worker sets
    ``completed_at`` and ``violations``.
    """

    id: Optional[int] = None
    build_id: int
    filename: str
    linter_name: str
    patch: Optional[str] = None
    violations: List[Violation] = []
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    completed_at: Optional[datetime] = None

    @property
    def completed(self) -> bool:
        return self.completed_at is not None

    def is_stale(self, now: datetime, threshold_seconds: int) -> bool:
        """Return True if the review is still incomplete after the threshold."""
        if self.completed:
            return False
        created_at = self.created_at
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return now - created_at > timedelta(seconds=threshold_seconds)

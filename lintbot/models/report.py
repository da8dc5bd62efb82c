"""Build fan-out result data models."""

from typing import List

from pydantic import BaseModel

from .file_review import FileReview


class TupleFailure(BaseModel):
    """Orchestration failure for one (file, linter) tuple."""

    filename: str
    linter_name: str
    error_type: str
    message: str


class BuildReviewReport(BaseModel):
    """Outcome of orchestrating every changed file for one build."""

    build_id: int
    reviews: List[FileReview] = []
    skipped: int = 0
    failures: List[TupleFailure] = []

    @property
    def degraded(self) -> bool:
        return bool(self.failures)

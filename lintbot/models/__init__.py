"""Data models for the review orchestration core."""

from .build import Build, CommitFile
from .config import RepositoryConfig, ResolvedConfig
from .file_review import FileReview, Violation
from .job import ReviewJobPayload
from .report import BuildReviewReport, TupleFailure

__all__ = [
    # Build models
    "Build",
    "CommitFile",
    # Config models
    "RepositoryConfig",
    "ResolvedConfig",
    # Review models
    "FileReview",
    "Violation",
    # Job models
    "ReviewJobPayload",
    # Report models
    "BuildReviewReport",
    "TupleFailure",
]

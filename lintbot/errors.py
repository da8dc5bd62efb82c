"""Error taxonomy for the review orchestration core."""

from typing import Optional


class OrchestrationError(Exception):
    """Base error for a single (file, linter) review tuple."""

    def __init__(
        self,
        message: str,
        filename: Optional[str] = None,
        linter_name: Optional[str] = None
    ):
        super().__init__(message)
        self.filename = filename
        self.linter_name = linter_name


class ConfigResolutionError(OrchestrationError):
    """Raised when a configuration document cannot be parsed or merged."""
    pass


class PersistenceError(OrchestrationError):
    """Raised when a FileReview record cannot be created or fetched."""
    pass


class EnqueueError(OrchestrationError):
    """Raised when the job queue rejects a review job."""
    pass

"""
Utility modules for the review orchestration core.
"""

from lintbot.utils.logging import (
    get_logger,
    setup_logging,
    log_error_with_context,
)
from lintbot.utils.metrics import (
    BuildReviewMetrics,
    emit_metric,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "log_error_with_context",
    "BuildReviewMetrics",
    "emit_metric",
]

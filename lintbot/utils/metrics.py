"""
Metrics collection and emission for observability.

This module tracks, per build fan-out:
- Fan-out duration
- Dispatched, skipped and failed (file, linter) tuples
- Failures by error kind
"""

import time
from typing import Any, Dict, Optional

from lintbot.utils.logging import get_logger

logger = get_logger(__name__)


class BuildReviewMetrics:
    """
    Collects metrics while a build's changed files are orchestrated.
    """
    
    def __init__(self, build_id: int, commit_sha: str):
        """
        Initialize metrics collector.
        
        Args:
            build_id: Build ID
            commit_sha: Commit under review
        """
        self.build_id = build_id
        self.commit_sha = commit_sha
        
        self.start_time: Optional[float] = None
        self.duration_ms: Optional[int] = None
        
        self.dispatched: int = 0
        self.skipped: int = 0
        self.failures: Dict[str, int] = {}
    
    @property
    def failed(self) -> int:
        return sum(self.failures.values())
    
    def start(self) -> None:
        """Mark fan-out start."""
        self.start_time = time.monotonic()
    
    def record_dispatched(self) -> None:
        self.dispatched += 1
    
    def record_skipped(self) -> None:
        self.skipped += 1
    
    def record_failure(self, error_type: str) -> None:
        self.failures[error_type] = self.failures.get(error_type, 0) + 1
    
    def complete(self) -> None:
        """Mark fan-out completion and log the summary."""
        if self.start_time is not None:
            self.duration_ms = int((time.monotonic() - self.start_time) * 1000)
        
        logger.info(
            f"Build {self.build_id} review fan-out completed",
            extra=self.get_metrics_summary()
        )
        
        emit_metric("file_reviews.dispatched", self.dispatched, build_id=self.build_id)
        if self.failed:
            emit_metric("file_reviews.failed", self.failed, build_id=self.build_id)
    
    def get_metrics_summary(self) -> Dict[str, Any]:
        """
        Get summary of collected metrics.
        
        Returns:
            Dictionary with all metrics
        """
        return {
            "build_id": self.build_id,
            "commit_sha": self.commit_sha,
            "duration_ms": self.duration_ms,
            "dispatched": self.dispatched,
            "skipped": self.skipped,
            "failed": self.failed,
            "failures_by_type": dict(self.failures),
        }


def emit_metric(metric_name: str, value: float, **tags: Any) -> None:
    """
    Emit a metric as a structured log line.
    
    Args:
        metric_name: Metric name
        value: Metric value
        **tags: Metric tags/labels
    """
    logger.info(
        f"Metric: {metric_name}",
        extra={
            "metric_name": metric_name,
            "metric_value": value,
            "metric_tags": tags,
        }
    )

"""
Review orchestration.

Composes the capability check, ignore-list filter, config resolution,
pending record creation and job dispatch for one linter against one file,
and fans that out over every changed file of a build.
"""

import asyncio
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Iterable, List, Optional

from lintbot.errors import OrchestrationError
from lintbot.models.build import Build, CommitFile
from lintbot.models.file_review import FileReview
from lintbot.models.report import BuildReviewReport, TupleFailure
from lintbot.services.config_loader import ConfigLoader
from lintbot.services.dispatcher import Dispatcher
from lintbot.services.review_records import ReviewRecordManager
from lintbot.utils.logging import get_logger, log_error_with_context
from lintbot.utils.metrics import BuildReviewMetrics

if TYPE_CHECKING:
    from linters.base import BoundLinter
    from linters.registry import LinterRegistry


logger = get_logger(__name__)


class ReviewOrchestrator:
    """Orchestrates file reviews for builds."""
    
    def __init__(
        self,
        record_manager: ReviewRecordManager,
        dispatcher: Dispatcher,
        config_loader: Optional[ConfigLoader] = None,
        fanout_concurrency: Optional[int] = None,
        stale_review_seconds: Optional[int] = None
    ):
        """
        Initialize the orchestrator.
        
        Args:
            record_manager: Creates pending FileReview records
            dispatcher: Enqueues review jobs
            config_loader: Loads build configuration, required by review_build
            fanout_concurrency: Max concurrent tuples. If None, loads from settings.
            stale_review_seconds: Staleness threshold. If None, loads from settings.
        """
        if fanout_concurrency is None or stale_review_seconds is None:
            from lintbot.config import settings
            if fanout_concurrency is None:
                fanout_concurrency = settings.fanout_concurrency
            if stale_review_seconds is None:
                stale_review_seconds = settings.stale_review_seconds
        
        self.record_manager = record_manager
        self.dispatcher = dispatcher
        self.config_loader = config_loader
        self.fanout_concurrency = max(1, fanout_concurrency)
        self.stale_review_seconds = stale_review_seconds
    
    async def file_review(self, linter: "BoundLinter", commit_file: CommitFile) -> Optional[FileReview]:
        """
        Review one file with one linter.
        
        Args:
            linter: Linter bound to the build's configuration
            commit_file: Changed file
        
        Returns:
            The persisted, incomplete FileReview, or None when the linter
            does not apply to the file
        
        Raises:
            ConfigResolutionError: If the linter's configuration is malformed
            PersistenceError: If the record could not be created; nothing is enqueued
            EnqueueError: If the job could not be enqueued; the record stays incomplete
        """
        if not linter.can_lint(commit_file.filename):
            return None
        
        try:
            if not linter.file_included(commit_file):
                logger.debug(f"{commit_file.filename} ignored by {linter.name}")
                return None
            
            resolved_config = linter.resolved_config
            
            file_review = await self.record_manager.create_pending(
                linter.build,
                commit_file,
                linter.name
            )
            
            await self.dispatcher.dispatch(
                commit_file,
                linter.build,
                linter.name,
                resolved_config,
                linter.plugin.job_class
            )
        
        except OrchestrationError as e:
            if e.filename is None:
                e.filename = commit_file.filename
            if e.linter_name is None:
                e.linter_name = linter.name
            raise
        
        return file_review
    
    async def review_build(
        self,
        build: Build,
        commit_files: Iterable[CommitFile],
        registry: "LinterRegistry"
    ) -> BuildReviewReport:
        """
        Review every changed file of a build with every enabled linter.
        
        Failures are isolated per (file, linter) tuple and reported;
        removed files are not reviewed.
        
        Args:
            build: Build under review
            commit_files: Files changed in the build's commit
            registry: Linter types to consider
        
        Returns:
            BuildReviewReport with created reviews and failures
        
        Raises:
            ConfigResolutionError: If the build's configuration index is unparsable
        """
        if self.config_loader is None:
            raise RuntimeError("review_build requires a config loader")
        
        repository_config = await self.config_loader.load(build)
        linters = [plugin.bind(build, repository_config) for plugin in registry.all()]
        linters = [linter for linter in linters if linter.enabled]
        
        tuples = [
            (linter, commit_file)
            for commit_file in commit_files
            if not commit_file.removed
            for linter in linters
            if linter.can_lint(commit_file.filename)
        ]
        
        report = BuildReviewReport(build_id=build.id)
        metrics = BuildReviewMetrics(build.id, build.commit_sha)
        metrics.start()
        build_logger = logger.with_context(build_id=build.id, commit_sha=build.commit_sha)
        
        semaphore = asyncio.Semaphore(self.fanout_concurrency)
        
        async def _review(linter: "BoundLinter", commit_file: CommitFile) -> None:
            async with semaphore:
                try:
                    file_review = await self.file_review(linter, commit_file)
                except OrchestrationError as e:
                    log_error_with_context(
                        build_logger,
                        f"Review of {commit_file.filename} with {linter.name} failed: {e}",
                        e,
                        linter_name=linter.name,
                        file_path=commit_file.filename
                    )
                    metrics.record_failure(type(e).__name__)
                    report.failures.append(TupleFailure(
                        filename=commit_file.filename,
                        linter_name=linter.name,
                        error_type=type(e).__name__,
                        message=str(e)
                    ))
                    return
            
            if file_review is None:
                metrics.record_skipped()
                report.skipped += 1
            else:
                metrics.record_dispatched()
                report.reviews.append(file_review)
        
        # Every tuple runs to completion before an unexpected error propagates
        results = await asyncio.gather(
            *(_review(linter, commit_file) for linter, commit_file in tuples),
            return_exceptions=True
        )
        unexpected = [r for r in results if isinstance(r, BaseException)]
        if unexpected:
            build_logger.error(
                f"Build {build.id} review aborted: {len(unexpected)} tuples raised unexpected errors"
            )
            raise unexpected[0]
        
        metrics.complete()
        
        if report.degraded:
            build_logger.warning(
                f"Build {build.id} review degraded: {len(report.failures)} of {len(tuples)} tuples failed"
            )
        
        return report
    
    async def stale_reviews(self, build_id: int, now: Optional[datetime] = None) -> List[FileReview]:
        """
        List incomplete reviews of a build older than the staleness threshold.
        
        Args:
            build_id: Build ID
            now: Reference time, defaults to the current UTC time
        
        Returns:
            Stale FileReview records
        """
        now = now or datetime.now(timezone.utc)
        reviews = await self.record_manager.store.list_for_build(build_id)
        return [r for r in reviews if r.is_stale(now, self.stale_review_seconds)]

"""
Review job dispatch.

Builds the ReviewJobPayload for one tuple and hands it to the job queue.
Exactly one enqueue per call; the outcome of the worker is never observed.
"""

import logging

from lintbot.models.build import Build, CommitFile
from lintbot.models.config import ResolvedConfig
from lintbot.models.job import ReviewJobPayload
from lintbot.services.job_queue import JobQueue


logger = logging.getLogger(__name__)


class Dispatcher:
    """Enqueues review jobs."""
    
    def __init__(self, job_queue: JobQueue):
        self.job_queue = job_queue
    
    def build_payload(
        self,
        commit_file: CommitFile,
        build: Build,
        linter_name: str,
        resolved_config: ResolvedConfig
    ) -> ReviewJobPayload:
        return ReviewJobPayload(
            filename=commit_file.filename,
            commit_sha=build.commit_sha,
            linter_name=linter_name,
            pull_request_number=build.pull_request_number,
            patch=commit_file.patch,
            content=commit_file.content,
            config=resolved_config.to_json()
        )
    
    async def dispatch(
        self,
        commit_file: CommitFile,
        build: Build,
        linter_name: str,
        resolved_config: ResolvedConfig,
        job_kind: str
    ) -> ReviewJobPayload:
        """
        Enqueue a review job.
        
        Args:
            commit_file: File to review
            build: Build the file belongs to
            linter_name: Linter to run
            resolved_config: Effective linter configuration
            job_kind: Job class workers dispatch on
        
        Returns:
            The enqueued payload
        
        Raises:
            EnqueueError: If the job queue rejects the job
        """
        payload = self.build_payload(commit_file, build, linter_name, resolved_config)
        
        await self.job_queue.enqueue(job_kind, payload.model_dump())
        
        logger.info(
            f"Dispatched {job_kind} for {commit_file.filename}",
            extra={
                "build_id": build.id,
                "commit_sha": build.commit_sha,
                "pull_request_number": build.pull_request_number,
                "linter_name": linter_name,
                "file_path": commit_file.filename,
            }
        )
        
        return payload

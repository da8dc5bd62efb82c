"""
Review record management.

Creates the incomplete FileReview for a (build, file, linter) tuple before
any job is dispatched, so every enqueued job has a discoverable record.
"""

import logging

from lintbot.models.build import Build, CommitFile
from lintbot.models.file_review import FileReview
from lintbot.stores.base import FileReviewStore


logger = logging.getLogger(__name__)


class ReviewRecordManager:
    """Creates pending FileReview records through a FileReviewStore."""
    
    def __init__(self, store: FileReviewStore):
        self.store = store
    
    async def create_pending(
        self,
        build: Build,
        commit_file: CommitFile,
        linter_name: str
    ) -> FileReview:
        """
        Persist an incomplete FileReview, or return the existing one.
        
        Args:
            build: Build under review
            commit_file: Changed file
            linter_name: Linter reviewing the file
        
        Returns:
            The persisted FileReview for the tuple
        
        Raises:
            PersistenceError: If the record could not be created or fetched
        """
        file_review = await self.store.insert_or_fetch(
            build.id,
            commit_file.filename,
            linter_name,
            patch=commit_file.patch
        )
        
        logger.debug(
            f"Pending file review {file_review.id} for {commit_file.filename} ({linter_name})",
            extra={
                "build_id": build.id,
                "linter_name": linter_name,
                "file_path": commit_file.filename,
            }
        )
        
        return file_review

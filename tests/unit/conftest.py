"""
Shared fixtures and in-memory collaborators for unit tests.
"""

import asyncio
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

import pytest

from lintbot.errors import EnqueueError, PersistenceError
from lintbot.models.build import Build, CommitFile
from lintbot.models.file_review import FileReview
from lintbot.services.job_queue import JobQueue
from lintbot.stores.base import FileReviewStore
from linters.registry import default_registry


class InMemoryFileReviewStore(FileReviewStore):
    """FileReview store keeping records in a dict keyed by tuple."""
    
    def __init__(self):
        self.records: Dict[Tuple[int, str, str], FileReview] = {}
        self._lock = asyncio.Lock()
        self._next_id = 1
    
    async def insert_or_fetch(self, build_id, filename, linter_name, patch=None):
        key = (build_id, filename, linter_name)
        async with self._lock:
            if key not in self.records:
                self.records[key] = FileReview(
                    id=self._next_id,
                    build_id=build_id,
                    filename=filename,
                    linter_name=linter_name,
                    patch=patch
                )
                self._next_id += 1
            return self.records[key]
    
    async def find(self, build_id, filename, linter_name):
        return self.records.get((build_id, filename, linter_name))
    
    async def list_for_build(self, build_id):
        return [r for r in self.records.values() if r.build_id == build_id]
    
    async def complete(self, build_id, filename, linter_name, violations):
        record = self.records.get((build_id, filename, linter_name))
        if record is None:
            return None
        record.violations = list(violations)
        if record.completed_at is None:
            record.completed_at = datetime.now(timezone.utc)
        return record


class FailingFileReviewStore(InMemoryFileReviewStore):
    """Store whose inserts always fail."""
    
    async def insert_or_fetch(self, build_id, filename, linter_name, patch=None):
        raise PersistenceError("database unavailable")


class RecordingJobQueue(JobQueue):
    """Job queue that records enqueue calls, optionally failing."""
    
    def __init__(self, fail_for: Optional[List[str]] = None):
        self.jobs: List[Tuple[str, Dict[str, Any]]] = []
        self.fail_for = fail_for or []
    
    async def enqueue(self, job_kind, payload):
        if payload.get("filename") in self.fail_for:
            raise EnqueueError("queue unavailable")
        self.jobs.append((job_kind, payload))


@pytest.fixture
def build() -> Build:
    return Build(id=1, commit_sha="foo", pull_request_number=123, repo_name="acme/widgets")


@pytest.fixture
def commit_file() -> CommitFile:
    return CommitFile(filename="lib/a.js", patch="@@ -1 +1 @@\n+var a = 1", content="var a = 1\n")


@pytest.fixture
def registry():
    return default_registry()


@pytest.fixture
def store() -> InMemoryFileReviewStore:
    return InMemoryFileReviewStore()


@pytest.fixture
def job_queue() -> RecordingJobQueue:
    return RecordingJobQueue()


@pytest.fixture
def failing_store() -> FailingFileReviewStore:
    return FailingFileReviewStore()


@pytest.fixture
def failing_queue_factory():
    """Build a job queue that rejects jobs for the given filenames."""
    return lambda *filenames: RecordingJobQueue(fail_for=list(filenames))

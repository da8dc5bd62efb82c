"""
Job queue for review jobs.

Jobs are pushed as Resque-style envelopes so that existing workers can
consume them:

    {"class": "JshintReviewJob", "args": [{...payload...}]}

The queue for a job kind is its snake-cased name without the ``Job``
suffix (``JshintReviewJob`` -> ``jshint_review``). Delivery retries are the
transport's concern; nothing here retries.
"""

import json
import logging
import re
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

import redis.asyncio as redis
from redis.asyncio.connection import ConnectionPool
from redis.exceptions import RedisError

from lintbot.errors import EnqueueError


logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r'(?<=[a-z0-9])(?=[A-Z])')


def queue_name_for(job_kind: str) -> str:
    """Derive the queue name for a job kind."""
    name = job_kind[:-3] if job_kind.endswith("Job") else job_kind
    return _CAMEL_BOUNDARY.sub("_", name).lower()


class JobQueue(ABC):
    """Fire-and-forget job queue."""

    @abstractmethod
    async def enqueue(self, job_kind: str, payload: Dict[str, Any]) -> None:
        """
        Enqueue one job.

        Raises:
            EnqueueError: If the transport rejects the job
        """

    async def close(self) -> None:
        """Release transport resources. Default is a no-op."""


class RedisJobQueue(JobQueue):
    """
    Redis list-backed job queue.
    
    Each queue is a list at ``<prefix>:<queue>``; known queue names are
    tracked in the set ``<prefix>s``.
    """
    
    def __init__(
        self,
        redis_url: Optional[str] = None,
        prefix: Optional[str] = None,
        connection_timeout: int = 5
    ):
        """
        Initialize the queue.
        
        Args:
            redis_url: Redis connection URL. If None, will load from settings.
            prefix: Key prefix. If None, will load from settings.
            connection_timeout: Connection timeout in seconds
        """
        self._redis_url = redis_url
        self._prefix = prefix
        self._pool: Optional[ConnectionPool] = None
        self._client: Optional[redis.Redis] = None
        self._connection_timeout = connection_timeout
    
    @property
    def prefix(self) -> str:
        if self._prefix is None:
            from lintbot.config import settings
            self._prefix = settings.job_queue_prefix
        return self._prefix
    
    def queue_key(self, queue: str) -> str:
        return f"{self.prefix}:{queue}"
    
    @property
    def queues_key(self) -> str:
        return f"{self.prefix}s"
    
    async def initialize(self) -> None:
        """
        Initialize the Redis connection pool.
        
        Raises:
            EnqueueError: If Redis is unreachable
        """
        try:
            if not self._redis_url:
                from lintbot.config import settings
                self._redis_url = settings.redis_url
            
            self._pool = ConnectionPool.from_url(
                self._redis_url,
                max_connections=10,
                decode_responses=True,
                socket_timeout=self._connection_timeout,
                socket_connect_timeout=self._connection_timeout
            )
            self._client = redis.Redis(connection_pool=self._pool)
            
            await self._client.ping()
            
            logger.info("Redis connection pool initialized successfully")
        
        except RedisError as e:
            logger.error(f"Failed to initialize Redis connection pool: {e}")
            raise EnqueueError(f"Failed to connect to Redis: {e}")
    
    async def close(self) -> None:
        """Close the Redis connection pool."""
        if self._client:
            await self._client.aclose()
        
        if self._pool:
            await self._pool.disconnect()
        
        logger.info("Redis connection pool closed")
    
    @asynccontextmanager
    async def _get_client(self):
        """
        Get Redis client with connection check.
        
        Raises:
            RuntimeError: If client not initialized
        """
        if not self._client:
            raise RuntimeError("Redis client not initialized. Call initialize() first.")
        
        yield self._client
    
    async def enqueue(self, job_kind: str, payload: Dict[str, Any]) -> None:
        queue = queue_name_for(job_kind)
        envelope = json.dumps({"class": job_kind, "args": [payload]}, sort_keys=True)
        
        try:
            async with self._get_client() as client:
                await client.sadd(self.queues_key, queue)
                await client.rpush(self.queue_key(queue), envelope)
        
        except RedisError as e:
            logger.error(f"Failed to enqueue {job_kind}: {e}")
            raise EnqueueError(
                f"Failed to enqueue {job_kind}: {e}",
                filename=payload.get("filename"),
                linter_name=payload.get("linter_name")
            )
        
        logger.info(f"Enqueued {job_kind} on queue {queue}")
    
    async def length(self, queue: str) -> int:
        """Get number of jobs waiting on a queue."""
        async with self._get_client() as client:
            return await client.llen(self.queue_key(queue))

"""
Service wiring.

Builds a ReviewOrchestrator on the MySQL store and Redis job queue
configured in settings.
"""

from lintbot.config import settings
from lintbot.services.config_loader import ConfigLoader
from lintbot.services.dispatcher import Dispatcher
from lintbot.services.job_queue import RedisJobQueue
from lintbot.services.orchestrator import ReviewOrchestrator
from lintbot.services.review_records import ReviewRecordManager
from lintbot.stores.mysql import MySQLFileReviewStore
from lintbot.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


async def create_orchestrator(config_loader: ConfigLoader) -> ReviewOrchestrator:
    """
    Initialize services and return a ready orchestrator.
    
    Args:
        config_loader: Source of owner and repository configuration
    
    Returns:
        ReviewOrchestrator with initialized store and queue
    """
    setup_logging(settings.log_level.upper())
    logger.info("Starting review orchestrator")
    
    store = MySQLFileReviewStore(settings.database_url)
    await store.initialize()
    logger.info("File review store initialized")
    
    job_queue = RedisJobQueue(settings.redis_url, settings.job_queue_prefix)
    try:
        await job_queue.initialize()
    except Exception:
        await store.close()
        raise
    logger.info("Job queue initialized")
    
    return ReviewOrchestrator(
        ReviewRecordManager(store),
        Dispatcher(job_queue),
        config_loader=config_loader,
        fanout_concurrency=settings.fanout_concurrency,
        stale_review_seconds=settings.stale_review_seconds
    )


async def shutdown(orchestrator: ReviewOrchestrator) -> None:
    """Close the orchestrator's store and queue."""
    logger.info("Shutting down review orchestrator")
    await orchestrator.record_manager.store.close()
    await orchestrator.dispatcher.job_queue.close()

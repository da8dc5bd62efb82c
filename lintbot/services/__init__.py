"""Business logic services package."""

from lintbot.services.config_loader import ConfigLoader, StaticConfigLoader, build_config_document
from lintbot.services.config_resolver import deep_merge, parse_config_document, resolve
from lintbot.services.dispatcher import Dispatcher
from lintbot.services.job_queue import JobQueue, RedisJobQueue
from lintbot.services.orchestrator import ReviewOrchestrator
from lintbot.services.path_filter import PathFilter
from lintbot.services.review_records import ReviewRecordManager

__all__ = [
    'ConfigLoader',
    'StaticConfigLoader',
    'build_config_document',
    'deep_merge',
    'parse_config_document',
    'resolve',
    'Dispatcher',
    'JobQueue',
    'RedisJobQueue',
    'ReviewOrchestrator',
    'PathFilter',
    'ReviewRecordManager',
]

"""Unit tests for service wiring."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from lintbot.bootstrap import create_orchestrator, shutdown
from lintbot.errors import EnqueueError
from lintbot.services.config_loader import StaticConfigLoader
from lintbot.services.job_queue import RedisJobQueue


@pytest.fixture
def mock_services():
    store = MagicMock()
    store.initialize = AsyncMock()
    store.close = AsyncMock()
    queue = MagicMock(spec=RedisJobQueue)
    queue.initialize = AsyncMock()
    queue.close = AsyncMock()
    with patch("lintbot.bootstrap.MySQLFileReviewStore", return_value=store), \
            patch("lintbot.bootstrap.RedisJobQueue", return_value=queue), \
            patch("lintbot.bootstrap.setup_logging"):
        yield store, queue


@pytest.mark.asyncio
async def test_create_orchestrator_initializes_services(mock_services):
    store, queue = mock_services
    loader = StaticConfigLoader()
    
    orchestrator = await create_orchestrator(loader)
    
    store.initialize.assert_awaited_once()
    queue.initialize.assert_awaited_once()
    assert orchestrator.record_manager.store is store
    assert orchestrator.dispatcher.job_queue is queue
    assert orchestrator.config_loader is loader


@pytest.mark.asyncio
async def test_queue_failure_closes_store(mock_services):
    store, queue = mock_services
    queue.initialize.side_effect = EnqueueError("redis down")
    
    with pytest.raises(EnqueueError):
        await create_orchestrator(StaticConfigLoader())
    
    store.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_shutdown_closes_services(mock_services):
    store, queue = mock_services
    orchestrator = await create_orchestrator(StaticConfigLoader())
    
    await shutdown(orchestrator)
    
    store.close.assert_awaited_once()
    queue.close.assert_awaited_once()

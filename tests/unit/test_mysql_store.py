"""
Unit tests for MySQLFileReviewStore.

Tests SQL issued and row mapping with a mocked aiomysql pool.
"""

import json
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock, patch

import aiomysql
import pytest

from lintbot.errors import PersistenceError
from lintbot.models.file_review import Violation
from lintbot.stores.mysql import MySQLFileReviewStore


def review_row(**overrides):
    row = {
        'id': 7,
        'build_id': 1,
        'filename': 'lib/a.js',
        'linter_name': 'jshint',
        'patch': '+var a = 1',
        'violations_json': None,
        'created_at': datetime(2024, 1, 1, 12, 0, 0),
        'completed_at': None,
    }
    row.update(overrides)
    return row


class TestMySQLFileReviewStore:
    """Test FileReview persistence operations."""
    
    @pytest.fixture
    def store(self):
        return MySQLFileReviewStore("mysql+aiomysql://user:pass@db:3307/reviews")
    
    @pytest.fixture
    def mock_connection(self):
        """Create a mock database connection."""
        conn = AsyncMock()
        cursor = AsyncMock()
        cursor.__aenter__ = AsyncMock(return_value=cursor)
        cursor.__aexit__ = AsyncMock(return_value=None)
        conn.cursor = MagicMock(return_value=cursor)
        return conn, cursor
    
    def _attach_pool(self, store, conn):
        store._pool = MagicMock()
        store._pool.acquire = MagicMock()
        store._pool.acquire.return_value.__aenter__ = AsyncMock(return_value=conn)
        store._pool.acquire.return_value.__aexit__ = AsyncMock(return_value=None)
    
    def test_parse_database_url(self, store):
        result = store._parse_database_url("mysql+aiomysql://user:pass@db:3307/reviews")
        
        assert result == {
            'host': 'db',
            'port': 3307,
            'user': 'user',
            'password': 'pass',
            'database': 'reviews',
        }
    
    def test_parse_database_url_with_defaults(self, store):
        result = store._parse_database_url("mysql+aiomysql:///reviews")
        
        assert result['host'] == 'localhost'
        assert result['port'] == 3306
        assert result['user'] == 'root'
        assert result['database'] == 'reviews'
    
    @pytest.mark.asyncio
    async def test_insert_or_fetch_returns_incomplete_review(self, store, mock_connection):
        conn, cursor = mock_connection
        self._attach_pool(store, conn)
        cursor.fetchone = AsyncMock(return_value=review_row())
        
        result = await store.insert_or_fetch(1, 'lib/a.js', 'jshint', patch='+var a = 1')
        
        assert result.id == 7
        assert result.filename == 'lib/a.js'
        assert result.completed is False
        assert cursor.execute.call_count == 2  # upsert, select by key
        insert_sql = cursor.execute.call_args_list[0].args[0]
        assert "ON DUPLICATE KEY UPDATE" in insert_sql
        assert cursor.execute.call_args_list[1].args[1] == (1, 'lib/a.js', 'jshint')
        assert conn.commit.called
    
    @pytest.mark.asyncio
    async def test_insert_or_fetch_stamps_created_at_in_utc(self, store, mock_connection):
        conn, cursor = mock_connection
        self._attach_pool(store, conn)
        cursor.fetchone = AsyncMock(return_value=review_row())
        before = datetime.now(timezone.utc).replace(tzinfo=None)
        
        await store.insert_or_fetch(1, 'lib/a.js', 'jshint')
        
        insert_sql, params = cursor.execute.call_args_list[0].args
        assert "created_at" in insert_sql
        created_at = params[4]
        assert created_at.tzinfo is None
        assert before <= created_at <= datetime.now(timezone.utc).replace(tzinfo=None)
    
    @pytest.mark.asyncio
    async def test_insert_or_fetch_returns_existing_completed_review(self, store, mock_connection):
        conn, cursor = mock_connection
        self._attach_pool(store, conn)
        cursor.fetchone = AsyncMock(return_value=review_row(
            violations_json=json.dumps([{"line_number": 3, "messages": ["Missing semicolon."]}]),
            completed_at=datetime(2024, 1, 1, 12, 5, 0),
        ))
        
        result = await store.insert_or_fetch(1, 'lib/a.js', 'jshint')
        
        assert result.completed is True
        assert result.violations == [Violation(line_number=3, messages=["Missing semicolon."])]
    
    @pytest.mark.asyncio
    async def test_insert_or_fetch_wraps_database_errors(self, store, mock_connection):
        conn, cursor = mock_connection
        self._attach_pool(store, conn)
        cursor.execute = AsyncMock(side_effect=aiomysql.OperationalError(2013, "Lost connection"))
        
        with pytest.raises(PersistenceError) as exc_info:
            await store.insert_or_fetch(1, 'lib/a.js', 'jshint')
        
        assert exc_info.value.filename == 'lib/a.js'
        assert exc_info.value.linter_name == 'jshint'
        assert not conn.commit.called
    
    @pytest.mark.asyncio
    async def test_insert_or_fetch_missing_row(self, store, mock_connection):
        conn, cursor = mock_connection
        self._attach_pool(store, conn)
        cursor.fetchone = AsyncMock(return_value=None)
        
        with pytest.raises(PersistenceError):
            await store.insert_or_fetch(1, 'lib/a.js', 'jshint')
    
    @pytest.mark.asyncio
    async def test_uninitialized_pool(self, store):
        with pytest.raises(RuntimeError):
            await store.insert_or_fetch(1, 'lib/a.js', 'jshint')
    
    @pytest.mark.asyncio
    async def test_find(self, store, mock_connection):
        conn, cursor = mock_connection
        self._attach_pool(store, conn)
        cursor.fetchone = AsyncMock(side_effect=[review_row(), None])
        
        assert (await store.find(1, 'lib/a.js', 'jshint')).id == 7
        assert await store.find(1, 'lib/b.js', 'jshint') is None
    
    @pytest.mark.asyncio
    async def test_list_for_build(self, store, mock_connection):
        conn, cursor = mock_connection
        self._attach_pool(store, conn)
        cursor.fetchall = AsyncMock(return_value=[
            review_row(),
            review_row(id=8, filename='lib/b.js'),
        ])
        
        result = await store.list_for_build(1)
        
        assert [r.filename for r in result] == ['lib/a.js', 'lib/b.js']
        assert cursor.execute.call_args.args[1] == (1,)
    
    @pytest.mark.asyncio
    async def test_complete(self, store, mock_connection):
        conn, cursor = mock_connection
        self._attach_pool(store, conn)
        cursor.fetchone = AsyncMock(return_value=review_row(
            violations_json='[{"line_number": 1, "messages": ["x"]}]',
            completed_at=datetime(2024, 1, 1, 12, 5, 0),
        ))
        
        result = await store.complete(1, 'lib/a.js', 'jshint', [Violation(line_number=1, messages=["x"])])
        
        assert result.completed is True
        update_sql, params = cursor.execute.call_args_list[0].args
        assert "COALESCE(completed_at" in update_sql
        assert json.loads(params[0]) == [{"line_number": 1, "messages": ["x"]}]
        assert conn.commit.called
    
    @pytest.mark.asyncio
    async def test_complete_unknown_review(self, store, mock_connection):
        conn, cursor = mock_connection
        self._attach_pool(store, conn)
        cursor.fetchone = AsyncMock(return_value=None)
        
        assert await store.complete(1, 'lib/z.js', 'jshint', []) is None
    
    @pytest.mark.asyncio
    async def test_initialize_creates_pool_and_schema(self, store, mock_connection):
        conn, cursor = mock_connection
        pool = MagicMock()
        pool.acquire.return_value.__aenter__ = AsyncMock(return_value=conn)
        pool.acquire.return_value.__aexit__ = AsyncMock(return_value=None)
        
        with patch("lintbot.stores.mysql.aiomysql.create_pool", AsyncMock(return_value=pool)) as create_pool:
            await store.initialize()
        
        assert create_pool.call_args.kwargs['host'] == 'db'
        assert create_pool.call_args.kwargs['db'] == 'reviews'
        assert create_pool.call_args.kwargs['init_command'] == "SET time_zone = '+00:00'"
        assert "CREATE TABLE IF NOT EXISTS file_reviews" in cursor.execute.call_args.args[0]
        assert conn.commit.called
    
    @pytest.mark.asyncio
    async def test_initialize_failure(self, store):
        error = aiomysql.OperationalError(2003, "Can't connect")
        
        with patch("lintbot.stores.mysql.aiomysql.create_pool", AsyncMock(side_effect=error)):
            with pytest.raises(PersistenceError):
                await store.initialize()
    
    @pytest.mark.asyncio
    async def test_close(self, store):
        pool = MagicMock()
        pool.wait_closed = AsyncMock()
        store._pool = pool
        
        await store.close()
        
        pool.close.assert_called_once()
        pool.wait_closed.assert_awaited_once()

"""Async database connection management.

Provides async database connectivity using aiosqlite.
"""
import asyncio
import logging
import sqlite3
from pathlib import Path
from typing import Optional

import aiosqlite

from ... import database as db_module

logger = logging.getLogger(__name__)

# Global connection pool reference
_pool: Optional['AsyncConnectionPool'] = None


class AsyncConnectionPool:
    """Simple async connection pool for aiosqlite.

    At most ``max_connections`` connections are handed out at once;
    released connections are kept for reuse.
    """

    def __init__(self, db_path: Path, max_connections: int = 10):
        self.db_path = db_path
        self.max_connections = max_connections
        self._connections: list[aiosqlite.Connection] = []
        self._semaphore = asyncio.Semaphore(max_connections)
        self._lock = asyncio.Lock()

    async def acquire(self) -> aiosqlite.Connection:
        """Acquire a connection from the pool."""
        await self._semaphore.acquire()
        try:
            async with self._lock:
                if self._connections:
                    return self._connections.pop()

            conn = await aiosqlite.connect(
                self.db_path,
                detect_types=sqlite3.PARSE_DECLTYPES
            )
            conn.row_factory = aiosqlite.Row
            return conn
        except BaseException:
            self._semaphore.release()
            raise

    async def release(self, conn: aiosqlite.Connection) -> None:
        """Release a connection back to the pool."""
        async with self._lock:
            if len(self._connections) < self.max_connections:
                self._connections.append(conn)
            else:
                await conn.close()
        self._semaphore.release()

    async def close_all(self) -> None:
        """Close all idle connections in the pool."""
        async with self._lock:
            for conn in self._connections:
                await conn.close()
            self._connections.clear()


async def get_async_db() -> aiosqlite.Connection:
    """Get async database connection.

    Returns:
        Async database connection (release it with release_async_db)
    """
    global _pool
    if _pool is None:
        _pool = AsyncConnectionPool(db_module.DATABASE_PATH)
    return await _pool.acquire()


async def release_async_db(conn: aiosqlite.Connection) -> None:
    """Release async database connection back to pool.

    Args:
        conn: Connection to release
    """
    if _pool:
        await _pool.release(conn)
    else:
        await conn.close()


async def init_async_db() -> None:
    """Initialize database schema using async connection."""
    conn = await get_async_db()
    try:
        await conn.execute(db_module.TASKS_SCHEMA)
        await conn.commit()
    finally:
        await release_async_db(conn)
    logger.info("Async database initialized at %s", db_module.DATABASE_PATH)


async def close_async_db() -> None:
    """Close all async database connections."""
    global _pool
    if _pool:
        await _pool.close_all()
        _pool = None

"""Row and transaction helpers shared by the task repositories.

Both flavours expose the same three helpers: ``_fetchone`` and
``_fetchall`` return plain dicts, ``_write`` runs a single statement in
its own transaction and returns the affected row count.
"""
import sqlite3

import aiosqlite


class Repository:
    """Repository over a ``sqlite3`` connection using ``sqlite3.Row`` rows."""

    def __init__(self, connection: sqlite3.Connection):
        self._conn = connection

    def _fetchone(self, sql: str, parameters: tuple = ()) -> dict | None:
        row = self._conn.execute(sql, parameters).fetchone()
        return dict(row) if row else None

    def _fetchall(self, sql: str, parameters: tuple = ()) -> list[dict]:
        return [dict(row) for row in self._conn.execute(sql, parameters).fetchall()]

    def _write(self, sql: str, parameters: tuple = ()) -> int:
        """Execute and commit; a failed statement is rolled back and re-raised."""
        try:
            cursor = self._conn.execute(sql, parameters)
        except sqlite3.Error:
            self._conn.rollback()
            raise
        self._conn.commit()
        return cursor.rowcount


class AsyncRepository:
    """Same helpers over an ``aiosqlite`` connection."""

    def __init__(self, connection: aiosqlite.Connection):
        self._conn = connection

    async def _fetchone(self, sql: str, parameters: tuple = ()) -> dict | None:
        async with self._conn.execute(sql, parameters) as cursor:
            row = await cursor.fetchone()
        return dict(row) if row else None

    async def _fetchall(self, sql: str, parameters: tuple = ()) -> list[dict]:
        async with self._conn.execute(sql, parameters) as cursor:
            rows = await cursor.fetchall()
        return [dict(row) for row in rows]

    async def _write(self, sql: str, parameters: tuple = ()) -> int:
        try:
            cursor = await self._conn.execute(sql, parameters)
        except sqlite3.Error:
            await self._conn.rollback()
            raise
        await self._conn.commit()
        return cursor.rowcount

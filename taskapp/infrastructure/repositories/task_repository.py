"""Task repository - the task document collection.

Every write is validated here, at the storage boundary, so callers that
skip the HTTP layer still cannot persist a task without a title. The
table's NOT NULL / CHECK constraints back this up; a violation of either
surfaces as the same TaskValidationError.
"""
import logging
import sqlite3
import uuid
from datetime import datetime
from typing import Optional, List, Dict

from ...errors import TaskValidationError, required_field_message
from .base import Repository, AsyncRepository

logger = logging.getLogger(__name__)

MODEL_NAME = "Task"

INSERT_SQL = """INSERT INTO tasks (_id, title, created_at, updated_at)
                VALUES (?, ?, ?, ?)"""
UPDATE_SQL = "UPDATE tasks SET title = ?, updated_at = ? WHERE _id = ?"
SELECT_ALL_SQL = "SELECT * FROM tasks ORDER BY rowid"
SELECT_BY_ID_SQL = "SELECT * FROM tasks WHERE _id = ?"
SELECT_BY_TITLE_SQL = "SELECT * FROM tasks WHERE title = ? ORDER BY rowid LIMIT 1"
COUNT_SQL = "SELECT COUNT(*) AS n FROM tasks"


def validate_task(document: Dict) -> None:
    """Validate a task document before it is written.

    Args:
        document: Candidate document (only ``title`` is checked)

    Raises:
        TaskValidationError: If ``title`` is missing, empty, not a string
            or not encodable as UTF-8
    """
    errors = {}
    title = document.get("title")
    if title is None or title == "":
        errors["title"] = required_field_message("title")
    elif not isinstance(title, str):
        errors["title"] = f'Cast to string failed for value {title!r} at path "title"'
    else:
        try:
            title.encode("utf-8")
        except UnicodeEncodeError:
            errors["title"] = "Path `title` must be valid UTF-8 text."

    if errors:
        raise TaskValidationError(MODEL_NAME, errors)


def _is_schema_violation(exc: sqlite3.IntegrityError) -> bool:
    message = str(exc)
    return "CHECK constraint failed" in message or "NOT NULL constraint failed" in message


def _schema_error() -> TaskValidationError:
    return TaskValidationError(MODEL_NAME, {"title": required_field_message("title")})


class TaskRepository(Repository):
    """Repository for task documents."""

    def _guarded_write(self, sql: str, parameters: tuple) -> int:
        try:
            return self._write(sql, parameters)
        except sqlite3.IntegrityError as e:
            if not _is_schema_violation(e):
                raise
            raise _schema_error() from e

    def create(self, title: str, task_id: str = None) -> Dict:
        """Validate and insert a new task.

        Args:
            title: Task title (required, non-empty)
            task_id: Optional UUID, generated when omitted

        Returns:
            The stored document

        Raises:
            TaskValidationError: If the document is invalid
        """
        validate_task({"title": title})

        if task_id is None:
            task_id = str(uuid.uuid4())
        now = datetime.now()
        self._guarded_write(INSERT_SQL, (task_id, title, now, now))

        logger.info("Created task %s", task_id)
        return {"_id": task_id, "title": title, "created_at": now, "updated_at": now}

    def get_all(self) -> List[Dict]:
        """Get all tasks in insertion order."""
        return self._fetchall(SELECT_ALL_SQL)

    def get_by_id(self, task_id: str) -> Optional[Dict]:
        return self._fetchone(SELECT_BY_ID_SQL, (task_id,))

    def find_one(self, title: str) -> Optional[Dict]:
        """Get the first task with exactly this title."""
        return self._fetchone(SELECT_BY_TITLE_SQL, (title,))

    def count(self) -> int:
        return self._fetchone(COUNT_SQL)["n"]

    def update(self, task_id: str, title: str) -> Optional[Dict]:
        """Validate and replace a task's title.

        Returns:
            Updated document, or None if the task does not exist
        """
        validate_task({"title": title})

        if self._guarded_write(UPDATE_SQL, (title, datetime.now(), task_id)) == 0:
            return None
        logger.info("Updated task %s", task_id)
        return self.get_by_id(task_id)

    def delete(self, task_id: str) -> bool:
        """Delete task; True if it existed."""
        return self._write("DELETE FROM tasks WHERE _id = ?", (task_id,)) > 0

    def delete_all(self) -> int:
        """Delete every task; returns number deleted."""
        return self._write("DELETE FROM tasks")


# =============================================================================
# ASYNC VERSION
# =============================================================================

class AsyncTaskRepository(AsyncRepository):
    """Async repository for task documents (used by the health check)."""

    async def _guarded_write(self, sql: str, parameters: tuple) -> int:
        try:
            return await self._write(sql, parameters)
        except sqlite3.IntegrityError as e:
            if not _is_schema_violation(e):
                raise
            raise _schema_error() from e

    async def create(self, title: str, task_id: str = None) -> Dict:
        validate_task({"title": title})

        if task_id is None:
            task_id = str(uuid.uuid4())
        now = datetime.now()
        await self._guarded_write(INSERT_SQL, (task_id, title, now, now))

        logger.info("Created task %s", task_id)
        return {"_id": task_id, "title": title, "created_at": now, "updated_at": now}

    async def get_all(self) -> List[Dict]:
        return await self._fetchall(SELECT_ALL_SQL)

    async def get_by_id(self, task_id: str) -> Optional[Dict]:
        return await self._fetchone(SELECT_BY_ID_SQL, (task_id,))

    async def find_one(self, title: str) -> Optional[Dict]:
        return await self._fetchone(SELECT_BY_TITLE_SQL, (title,))

    async def count(self) -> int:
        return (await self._fetchone(COUNT_SQL))["n"]

    async def update(self, task_id: str, title: str) -> Optional[Dict]:
        validate_task({"title": title})

        if await self._guarded_write(UPDATE_SQL, (title, datetime.now(), task_id)) == 0:
            return None
        return await self.get_by_id(task_id)

    async def delete(self, task_id: str) -> bool:
        return await self._write("DELETE FROM tasks WHERE _id = ?", (task_id,)) > 0

    async def delete_all(self) -> int:
        return await self._write("DELETE FROM tasks")

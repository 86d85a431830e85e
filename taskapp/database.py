"""Database connection management.

This module contains only utility functions:
- Database connection management
- Database initialization

All CRUD operations live in repositories.
"""
import logging
import sqlite3
import threading
from datetime import datetime

from .config import DATABASE_PATH

logger = logging.getLogger(__name__)


# =============================================================================
# SQLite3 datetime adapter (Python 3.12 compatibility)
# =============================================================================
def _adapt_datetime(dt: datetime) -> str:
    """Adapt datetime to ISO 8601 string for SQLite."""
    return dt.isoformat()

def _convert_datetime(val: bytes) -> datetime:
    """Convert ISO 8601 string from SQLite to datetime."""
    return datetime.fromisoformat(val.decode())

sqlite3.register_adapter(datetime, _adapt_datetime)
sqlite3.register_converter("DATETIME", _convert_datetime)
sqlite3.register_converter("TIMESTAMP", _convert_datetime)


# Tasks collection. The CHECK constraint keeps the non-empty title
# invariant even for writes that bypass the repository.
TASKS_SCHEMA = """
    CREATE TABLE IF NOT EXISTS tasks (
        _id TEXT PRIMARY KEY,
        title TEXT NOT NULL CHECK(title <> ''),
        created_at TIMESTAMP NOT NULL,
        updated_at TIMESTAMP NOT NULL
    )
"""


# =============================================================================
# Database Connection
# =============================================================================
_connection_local = threading.local()


def create_connection(db_path=None) -> sqlite3.Connection:
    """Open a new connection with row factory and type detection."""
    conn = sqlite3.connect(
        db_path or DATABASE_PATH,
        detect_types=sqlite3.PARSE_DECLTYPES | sqlite3.PARSE_COLNAMES,
        check_same_thread=False
    )
    conn.row_factory = sqlite3.Row
    return conn


def get_db() -> sqlite3.Connection:
    """Get thread-local database connection.

    The connection is reopened when DATABASE_PATH has changed since it
    was created, so worker threads never keep writing to a stale file.
    """
    conn = getattr(_connection_local, "connection", None)
    if conn is not None and getattr(_connection_local, "path", None) != DATABASE_PATH:
        conn.close()
        conn = None
    if conn is None:
        conn = create_connection(DATABASE_PATH)
        _connection_local.connection = conn
        _connection_local.path = DATABASE_PATH
    return conn


def close_db() -> None:
    """Close the current thread's connection, if any."""
    conn = getattr(_connection_local, "connection", None)
    if conn is not None:
        conn.close()
    _connection_local.connection = None
    _connection_local.path = None


def init_db() -> None:
    """Initialize database schema."""
    db = get_db()
    db.execute(TASKS_SCHEMA)
    db.commit()
    logger.info("Database initialized at %s", DATABASE_PATH)

"""Test configuration and fixtures for the task service.

This module provides isolated test environments:
- Temporary database (SQLite) per test
- Patched configuration pointing at it
- A TestClient over the FastAPI app
"""
import os
import sys
from pathlib import Path
from typing import Generator, Dict

import pytest
from fastapi.testclient import TestClient

# Ensure taskapp is importable
sys.path.insert(0, str(Path(__file__).parent.parent))

# Set test environment BEFORE importing app modules
os.environ["TASKS_BASE_URL"] = ""
os.environ["TASKS_LOG_LEVEL"] = "WARNING"


@pytest.fixture(scope="function")
def isolated_environment(tmp_path: Path) -> Dict:
    """Create isolated paths for a single test.

    Returns:
        Dict with paths: db_path, base_dir
    """
    return {
        "db_path": tmp_path / "test.db",
        "base_dir": tmp_path,
    }


@pytest.fixture(scope="function")
def patched_config(isolated_environment: Dict):
    """Monkey-patch app configuration to use the isolated database."""
    import taskapp.config as config
    import taskapp.database as db_module

    # Store original values
    originals = {
        "CONFIG_DATABASE_PATH": config.DATABASE_PATH,
        "DATABASE_PATH": db_module.DATABASE_PATH,
    }

    # Apply patches
    config.DATABASE_PATH = isolated_environment["db_path"]
    db_module.DATABASE_PATH = isolated_environment["db_path"]

    yield isolated_environment

    # Restore original values
    config.DATABASE_PATH = originals["CONFIG_DATABASE_PATH"]
    db_module.DATABASE_PATH = originals["DATABASE_PATH"]


@pytest.fixture(scope="function")
def fresh_database(patched_config: Dict):
    """Initialize fresh database with schema for each test."""
    from taskapp.database import init_db, close_db

    close_db()
    init_db()

    yield patched_config["db_path"]

    close_db()


@pytest.fixture(scope="function")
def db_connection(fresh_database: Path):
    """Connection to the fresh test database (this thread's)."""
    from taskapp.database import get_db

    return get_db()


@pytest.fixture(scope="function")
def task_repo(db_connection):
    """TaskRepository over the test database."""
    from taskapp.infrastructure.repositories import TaskRepository

    return TaskRepository(db_connection)


@pytest.fixture(scope="function")
def client(fresh_database: Path, task_repo) -> Generator[TestClient, None, None]:
    """Create test client with fresh isolated environment.

    Usage:
        def test_something(client):
            response = client.get("/tasks")
            assert response.status_code == 200
    """
    from taskapp.main import app

    with TestClient(app) as test_client:
        yield test_client

    # Mirror per-test teardown of the collection
    task_repo.delete_all()

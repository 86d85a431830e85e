# Repository Pattern Implementation
"""
Repositories abstract database operations.

Usage:
    repo = TaskRepository(get_db())
    repo.create("Write report")
"""
from .base import Repository, AsyncRepository
from .task_repository import TaskRepository, AsyncTaskRepository, validate_task

__all__ = [
    "Repository",
    "AsyncRepository",
    "TaskRepository",
    "AsyncTaskRepository",
    "validate_task",
]

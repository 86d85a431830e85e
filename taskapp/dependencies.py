"""Shared dependencies for task routes.

Factory functions for creating services used by the routers.
"""
from .application.services import TaskService
from .infrastructure.repositories import TaskRepository


def get_task_service(db) -> TaskService:
    """Create TaskService with repositories."""
    return TaskService(task_repository=TaskRepository(db))

"""Application layer - business logic services.

This layer contains application services that orchestrate repository
operations. Services can be tested in isolation with mocked repositories.
"""

from .services.task_service import TaskService

__all__ = [
    "TaskService",
]

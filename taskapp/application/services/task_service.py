"""Task service - create, list, fetch, rename and delete tasks."""
import logging
from typing import List, Dict

from fastapi import HTTPException

from ...infrastructure.repositories import TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    """Service for managing tasks.

    Responsibilities:
    - Create/list tasks
    - Look up a single task (404 when missing)
    - Rename and delete tasks

    Validation is owned by the repository; TaskValidationError raised
    there is passed through untouched.
    """

    def __init__(self, task_repository: TaskRepository):
        self.task_repo = task_repository

    def create_task(self, title: str) -> Dict:
        """Create a new task.

        Args:
            title: Task title

        Returns:
            Created task dict
        """
        return self.task_repo.create(title=title)

    def list_tasks(self) -> List[Dict]:
        """Get all tasks."""
        return self.task_repo.get_all()

    def get_task(self, task_id: str) -> Dict:
        """Get task or raise 404."""
        task = self.task_repo.get_by_id(task_id)
        if not task:
            raise HTTPException(404, "Task not found")
        return task

    def update_task(self, task_id: str, title: str) -> Dict:
        """Rename an existing task.

        Args:
            task_id: Task ID
            title: New title

        Returns:
            Updated task dict
        """
        self.get_task(task_id)

        updated = self.task_repo.update(task_id, title=title)
        if not updated:
            # Deleted between lookup and update
            raise HTTPException(404, "Task not found")
        return updated

    def delete_task(self, task_id: str) -> None:
        """Delete task or raise 404."""
        if not self.task_repo.delete(task_id):
            raise HTTPException(404, "Task not found")
        logger.info("Deleted task %s", task_id)

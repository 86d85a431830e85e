"""Task CRUD routes."""
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from ..database import get_db
from ..dependencies import get_task_service

router = APIRouter(prefix="/tasks", tags=["tasks"])


class TaskInput(BaseModel):
    # Optional so that a missing title reaches repository validation
    title: Optional[str] = None


@router.post("", status_code=201)
def create_task(task: TaskInput):
    """Create a task."""
    service = get_task_service(get_db())
    return service.create_task(task.title)


@router.get("")
def list_tasks():
    """Get all tasks."""
    service = get_task_service(get_db())
    return service.list_tasks()


@router.get("/{task_id}")
def get_task(task_id: str):
    """Get a single task."""
    service = get_task_service(get_db())
    return service.get_task(task_id)


@router.put("/{task_id}")
def update_task(task_id: str, task: TaskInput):
    """Replace a task's title."""
    service = get_task_service(get_db())
    return service.update_task(task_id, task.title)


@router.delete("/{task_id}")
def delete_task(task_id: str):
    """Delete a task."""
    service = get_task_service(get_db())
    service.delete_task(task_id)
    return {"status": "ok"}

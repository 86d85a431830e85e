"""Health check route."""
from fastapi import APIRouter

from ..infrastructure.database import get_async_db, release_async_db
from ..infrastructure.repositories import AsyncTaskRepository

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    """Readiness probe: the task collection must be queryable."""
    conn = await get_async_db()
    try:
        count = await AsyncTaskRepository(conn).count()
    finally:
        await release_async_db(conn)
    return {"status": "ok", "tasks": count}

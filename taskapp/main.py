"""Task Service - FastAPI Entry Point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .config import HOST, PORT, LOG_LEVEL, ROOT_PATH
from .database import close_db
from .error_handling import setup_error_handling
from .infrastructure.database import init_async_db, close_async_db

# Import routers
from .routes.health import router as health_router
from .routes.tasks import router as tasks_router

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    await init_async_db()
    yield
    await close_async_db()
    close_db()


app = FastAPI(title="Task Service", root_path=ROOT_PATH, lifespan=lifespan)

setup_error_handling(app)

# Include routers
app.include_router(health_router)
app.include_router(tasks_router)


if __name__ == "__main__":
    import uvicorn
    logger.info("Starting Task Service on %s:%s", HOST, PORT)
    uvicorn.run(app, host=HOST, port=PORT)

"""Application configuration and constants."""
import os
from pathlib import Path

# Directory paths
BASE_DIR = Path(__file__).resolve().parent.parent

# Database location (SQLite file holding the task collection)
DATABASE_PATH = Path(os.environ.get("TASKS_DATABASE_PATH", str(BASE_DIR / "tasks.db")))

# Base URL configuration (for running under a subpath like /todo)
# Set via environment variable TASKS_BASE_URL, e.g., "todo" or "/todo"
BASE_URL = os.environ.get("TASKS_BASE_URL", "").strip("/")
ROOT_PATH = f"/{BASE_URL}" if BASE_URL else ""

# Logging
LOG_LEVEL = os.environ.get("TASKS_LOG_LEVEL", "INFO").upper()

# Server
HOST = os.environ.get("TASKS_HOST", "127.0.0.1")
PORT = int(os.environ.get("TASKS_PORT", "8000"))

"""Task service - a small JSON CRUD API over a task collection."""

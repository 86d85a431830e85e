# Infrastructure layer - database connections and repositories
"""
Infrastructure layer contains:
- Database connection management (sync and async)
- Repositories over the task collection

This layer depends on the domain errors, not on the HTTP layer.
"""

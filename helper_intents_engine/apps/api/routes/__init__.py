"""Router namespace exports for FastAPI include hooks."""

from . import health, webhooks

__all__ = ["health", "webhooks"]

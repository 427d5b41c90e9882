"""Server module - FastAPI HTTP server."""

from workout_builder.server.app import app

__all__ = ["app"]

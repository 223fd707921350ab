"""User Directory API: in-memory user records behind a FastAPI service."""

__version__ = "2.0.0"

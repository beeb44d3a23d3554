"""Dependency injection for FastAPI."""

from typing import Any

from fastapi import Request


def get_subject(request: Request) -> Any:
    """Provide the subject the running app was bound to."""
    return request.app.state.subject

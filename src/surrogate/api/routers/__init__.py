"""API routers package."""

from surrogate.api.routers.calls import router as calls_router

__all__ = [
    "calls_router",
]

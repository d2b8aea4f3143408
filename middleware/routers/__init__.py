"""
API Routers

FastAPI routers exposed by the middleware.
"""

from .workflows import router as workflows_router

__all__ = [
    "workflows_router",
]

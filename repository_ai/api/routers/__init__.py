"""API routers."""

from .ai import router as ai_router
from .health import router as health_router
from .ingest import router as ingest_router

__all__ = [
    "ai_router",
    "health_router",
    "ingest_router",
]

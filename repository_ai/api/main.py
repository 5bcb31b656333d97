"""
FastAPI application.

Mounts the health, ingestion and AI routers under /api/v1. Application
errors that escape a route become JSON responses carrying their message.

Dependencies: fastapi, repository_ai.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from repository_ai.api.deps.dependencies import get_service_cache
from repository_ai.configs import get_settings
from repository_ai.core.exceptions import RepositoryAIError, StorageError, ValidationError
from repository_ai.observability import configure_logging, log_exception_with_context
from .routers import ai_router, health_router, ingest_router

API_PREFIX = "/api/v1"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build shared services on startup and release them on shutdown."""
    configure_logging(get_settings().log_level)

    cache = get_service_cache()
    # Fail at startup rather than on the first request when config is wrong.
    _ = cache.ingestion_pipeline
    _ = cache.rag_assembler
    logger.info(f"{__name__}:lifespan - Services ready")

    yield

    await cache.aclose()
    cache.clear()
    logger.info(f"{__name__}:lifespan - Services released")


async def repository_error_handler(request: Request, exc: RepositoryAIError) -> JSONResponse:
    if isinstance(exc, ValidationError):
        status_code = 400
    elif isinstance(exc, StorageError):
        status_code = 503
    else:
        status_code = 500
    log_exception_with_context(logger, f"{__name__}:repository_error_handler - Unhandled", exc, path=request.url.path)
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


def create_app() -> FastAPI:
    """
    Create the FastAPI application.

    Returns:
        FastAPI: App with CORS, error handling and all routers registered
    """
    app = FastAPI(
        title="Research Repository AI API",
        description="PDF ingestion, retrieval and summaries for the research repository",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RepositoryAIError, repository_error_handler)

    for router in (health_router, ingest_router, ai_router):
        app.include_router(router, prefix=API_PREFIX)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("repository_ai.api.main:app", host="0.0.0.0", port=8000)

"""
Flowparse Middleware API - Main Application

FastAPI application entry point for the workflow parsing service.

Features:
- Prose-to-workflow-graph parsing endpoint
- Health check endpoint for load balancers
- LLM connectivity check
- Structured logging

Usage:
    # Run with uvicorn
    uvicorn middleware.main:app --reload

    # Or run directly
    python -m middleware.main

Version: 1.0.0
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.workflows.constants import WORKFLOW_PROMPT_VERSION
from utils.logging.LoggerAdaptor import LoggerAdaptor

from .config import get_settings
from .routers import workflows_router

SERVICE_NAME = "flowparse-middleware"
SERVICE_VERSION = "1.0.0"

# Configure structured logging
logging.basicConfig(
    level=logging.INFO,
    format='{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = LoggerAdaptor.get_logger("middleware")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan handler.

    Applies logging settings on startup.
    """
    settings = get_settings()
    LoggerAdaptor.configure_defaults(level=settings.log_level.value, backend=settings.log_backend.value)

    # Startup
    logger.info(
        "Starting Flowparse Middleware API",
        host=settings.api_host,
        port=settings.api_port,
        api_prefix=settings.api_prefix,
        llm_model=settings.llm_model,
        api_key_configured=bool(settings.deepseek_api_key),
    )

    yield

    # Shutdown
    logger.info("Shutting down Flowparse Middleware API")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Flowparse Middleware API",
        description="REST API that turns prose descriptions into workflow graphs",
        version=SERVICE_VERSION,
        lifespan=lifespan,
        docs_url=f"{settings.api_prefix}/docs",
        redoc_url=f"{settings.api_prefix}/redoc",
        openapi_url=f"{settings.api_prefix}/openapi.json",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(
        workflows_router,
        prefix=settings.api_prefix,
        tags=["Workflows"],
    )

    # Health check endpoint
    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint for load balancers and container orchestration."""
        current = get_settings()
        return {
            "status": "healthy",
            "service": SERVICE_NAME,
            "version": SERVICE_VERSION,
            "checks": {
                "llm_api_key_configured": bool(current.deepseek_api_key),
                "prompt_version": WORKFLOW_PROMPT_VERSION,
            },
        }

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API info."""
        return {
            "service": "Flowparse Middleware API",
            "version": SERVICE_VERSION,
            "docs": f"{settings.api_prefix}/docs",
            "health": "/health",
        }

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "middleware.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_debug,
    )

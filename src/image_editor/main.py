"""
Image Editor - Main FastAPI Application
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from image_editor.api.exceptions import register_exception_handlers
from image_editor.api.routers import transform
from image_editor.common.constants import SystemConstants
from image_editor.config import get_settings
from image_editor.services.transform_service import TransformService

# Get configuration
settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.system.log_level),
    format=SystemConstants.LOG_FORMAT,
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle"""
    logger.info("Starting Image Editor server...")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Debug mode: {settings.system.debug}")

    # Store service in app state for access by routers
    app.state.transform_service = TransformService(settings=settings)
    app.state.debug = settings.system.debug

    yield

    logger.info("Image Editor server shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="Image Editor",
    description="Pixel transforms: grayscale, brightness, rotation, flip and block blur",
    version=settings.api.api_version,
    lifespan=lifespan,
)

if settings.api.cors_enabled:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Register exception handlers
register_exception_handlers(app)

# Include routers
app.include_router(transform.router, prefix="/api/transform", tags=["Transform"])


# Root endpoint
@app.get("/")
async def root():
    return {
        "name": "Image Editor",
        "status": "running",
        "version": settings.api.api_version,
        "endpoints": {
            "transform": "/api/transform",
            "docs": "/docs",
        },
    }


# Health check endpoint
@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "services": {
            "transform_service": getattr(app.state, "transform_service", None) is not None,
        },
    }


def run():
    """Run the API server with uvicorn."""
    try:
        uvicorn.run(
            "image_editor.main:app",
            host=settings.api.host,
            port=settings.api.port,
            reload=settings.system.debug,
            log_level=settings.system.log_level.lower(),
        )
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt, shutting down...")


if __name__ == "__main__":
    run()

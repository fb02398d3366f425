"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from movieshelf.api.error_handlers import register_error_handlers
from movieshelf.api.routes import health, movies
from movieshelf.config import settings
from movieshelf.database import engine
from movieshelf.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)
    logger.info("Movieshelf API started")

    yield

    # Shutdown: release pooled connections
    await engine.dispose()
    logger.info("Movieshelf API shut down")


# Create FastAPI app
app = FastAPI(
    title="Movieshelf API",
    description="Read-only JSON API for movies and their summaries",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Include routers
app.include_router(health.router)
app.include_router(movies.router, tags=["movies"])


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run("movieshelf.main:app", host=settings.api_host, port=settings.api_port)

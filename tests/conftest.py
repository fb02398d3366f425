"""Shared test fixtures."""

import pytest
from fastapi import FastAPI

from movieshelf.api.error_handlers import register_error_handlers
from movieshelf.api.routes import health, movies


@pytest.fixture
def test_app() -> FastAPI:
    """Minimal FastAPI app without the lifespan hook, for API tests."""
    app = FastAPI()
    register_error_handlers(app)
    app.include_router(health.router)
    app.include_router(movies.router)
    return app

"""
FastAPI server — Chirpy routes, static file server, and error handling.

create_app() builds the application around one HitCounter (created here
unless injected) and one ChirpValidator, both stored on app.state. Config via
env (see chirpy.config.settings).
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.responses import Response
from fastapi.staticfiles import StaticFiles

from chirpy import __version__
from chirpy.api_server import admin, api
from chirpy.api_server.middleware import log_requests
from chirpy.api_server.responses import respond_with_error
from chirpy.chirpy_logging import get_logger
from chirpy.config import Settings, get_settings
from chirpy.core.exceptions import ChirpValidationError
from chirpy.metrics import HitCounter
from chirpy.moderation import ChirpValidator, ProfanityFilter

logger = get_logger(__name__)

APP_PREFIX = "/app"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and shutdown with the active configuration."""
    settings: Settings = app.state.settings
    logger.info(
        "api_started",
        filepath_root=str(settings.filepath_root),
        max_chirp_length=settings.max_chirp_length,
        version=__version__,
    )
    yield
    logger.info("api_stopped", hits=app.state.hit_counter.read())


def chirp_validation_exception_handler(request: Any, exc: ChirpValidationError) -> Response:
    """Consistent JSON error response for rejected chirps: {"error": message}."""
    return respond_with_error(exc.status_code, exc.message)


def create_app(
    settings: Settings | None = None,
    hit_counter: HitCounter | None = None,
) -> FastAPI:
    """
    Build the Chirpy application.

    Args:
        settings: Configuration; defaults to get_settings().
        hit_counter: Shared counter for /app hits; a fresh one is created when omitted.
    """
    settings = settings or get_settings()
    hit_counter = hit_counter if hit_counter is not None else HitCounter()

    app = FastAPI(
        title="Chirpy API",
        description="Static web app, chirp validation and admin metrics.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.hit_counter = hit_counter
    app.state.chirp_validator = ChirpValidator(
        ProfanityFilter(settings.profane_words),
        max_length=settings.max_chirp_length,
    )

    app.middleware("http")(log_requests)
    app.add_exception_handler(ChirpValidationError, chirp_validation_exception_handler)

    app.include_router(api.router)
    app.include_router(admin.router)

    file_server = StaticFiles(directory=settings.filepath_root, html=True)
    app.mount(APP_PREFIX, hit_counter.middleware(file_server), name="app")

    return app

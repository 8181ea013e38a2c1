"""Exercise Tracker API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ExerciseTrackerError → {"error": message} responses
    - CORS configured from settings (not hardcoded)
    - Each app owns exactly one ExerciseStore, created empty with the app

Design Decisions:
    - create_app() factory: tests build a fresh app (and store) per case,
      uvicorn imports the module-level ``app``
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Static files mounted AFTER API routes so /api/* takes precedence
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from exercise_tracker.api.error_handlers import register_error_handlers
from exercise_tracker.api.routes import health, users
from exercise_tracker.config import Settings, get_settings
from exercise_tracker.infrastructure.observability import setup_logging
from exercise_tracker.infrastructure.store import ExerciseStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None, store: ExerciseStore | None = None,
) -> FastAPI:
    """Build a configured FastAPI app with its own in-memory store."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info(f"Exercise Tracker API started on port {settings.port}")
        yield
        logger.info("Exercise Tracker API shutting down")

    app = FastAPI(
        title="Exercise Tracker API", version="1.0.0", lifespan=lifespan,
    )
    app.state.store = store if store is not None else ExerciseStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(users.router)

    register_error_handlers(app)

    # html=True serves index.html for /
    if os.path.isdir(settings.static_dir):
        app.mount(
            "/", StaticFiles(directory=settings.static_dir, html=True),
            name="static",
        )

    return app


app = create_app()

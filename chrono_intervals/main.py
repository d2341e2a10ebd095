"""chrono-intervals API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map IntervalsError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - create_app() factory plus module-level `app` for `uvicorn chrono_intervals.main:app`
    - Lifespan over @app.on_event: FastAPI recommended pattern
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chrono_intervals import __version__
from chrono_intervals.api.error_handlers import register_error_handlers
from chrono_intervals.api.routes import health, intervals
from chrono_intervals.config import get_settings
from chrono_intervals.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("chrono-intervals API started")
    yield
    logger.info("chrono-intervals API shutting down")


def create_app() -> FastAPI:
    app = FastAPI(
        title="chrono-intervals API", version=__version__, lifespan=lifespan,
    )

    settings = get_settings()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(intervals.router)

    register_error_handlers(app)
    return app


app = create_app()

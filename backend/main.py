"""
Application factory for FastAPI.

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings
    test_settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=test_settings)
"""

import logging
import os
from typing import Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Initialize Sentry for error tracking
    _init_sentry(settings)

    app = FastAPI(
        title="FitTrack API",
        description="Workout, nutrition and body-weight logging with a trends dashboard",
        version="1.0.0",
    )

    _configure_cors(app)
    _include_routers(app)
    _log_pipeline_config(settings)

    return app


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
        )
        logger.info("Sentry initialized for fittrack-api")


def _configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware for the application."""
    trusted_origins = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]
    # Add production domains from environment if configured
    production_origins = os.environ.get("CORS_ALLOWED_ORIGINS", "").split(",")
    trusted_origins.extend([origin.strip() for origin in production_origins if origin.strip()])

    app.add_middleware(
        CORSMiddleware,
        allow_origins=trusted_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import (
        health_router,
        workouts_router,
        nutrition_router,
        progress_router,
        dashboard_router,
    )

    # Health router (no prefix - /health at root)
    app.include_router(health_router)

    # Domain routers (with prefixes defined in each router)
    app.include_router(workouts_router)
    app.include_router(nutrition_router)
    app.include_router(progress_router)
    app.include_router(dashboard_router)


def _log_pipeline_config(settings: Settings) -> None:
    """Log the submission and dashboard policies at startup."""
    logger.info(
        "Submission validation=%s, nutrition batch mode=%s",
        settings.submission_validation.value,
        settings.nutrition_batch_mode.value,
    )
    if settings.nutrition_batch_mode.value == "best_effort":
        logger.warning("Nutrition batches are best-effort: failed rows are not rolled back")
    logger.info(
        "Weight series policy=%s, limit=%d",
        settings.weight_series_policy.value,
        settings.weight_series_limit,
    )


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()

"""FastAPI application with lifespan management."""

from __future__ import annotations

import importlib.metadata
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Depends, FastAPI

from kisan_ai.api.auth import require_auth
from kisan_ai.api.middleware.error_handler import register_error_handlers
from kisan_ai.api.routes import diagnose, health, interpret
from kisan_ai.core.config import APIConfig, AppSettings
from kisan_ai.core.logging_config import setup_logging
from kisan_ai.core.startup_checks import validate_settings
from kisan_ai.providers.vision.client import VisionClient
from kisan_ai.services.diagnosis_service import DiagnosisService


def _get_version() -> str:
    """Read package version from installed metadata, with dev fallback."""
    try:
        return importlib.metadata.version("kisan-ai")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0-dev"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application startup/shutdown lifecycle."""
    settings = AppSettings()
    validate_settings(settings)
    setup_logging(settings.observability)

    app.state.settings = settings
    app.state.diagnosis_service = DiagnosisService(
        VisionClient(settings.vision),
        max_image_bytes=settings.vision.max_image_bytes,
    )
    yield


def include_routes(app: FastAPI) -> None:
    """Mount probes, authenticated API routes and error handlers on *app*."""
    app.include_router(health.router)
    app.include_router(interpret.router, prefix="/api", dependencies=[Depends(require_auth)])
    app.include_router(diagnose.router, prefix="/api", dependencies=[Depends(require_auth)])
    register_error_handlers(app)


_api_config = APIConfig()

app = FastAPI(
    title=_api_config.title,
    description=_api_config.description,
    version=_get_version(),
    lifespan=lifespan,
)
include_routes(app)

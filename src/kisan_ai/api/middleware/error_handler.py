"""Global exception handlers mapping domain exceptions to HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from kisan_ai.exceptions import (
    EmptyAnalysisError,
    ImageInputError,
    KisanError,
    NonRetryableError,
    RetryableError,
)

log = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register exception-to-HTTP-status mappings."""

    @app.exception_handler(ImageInputError)
    async def handle_image_error(request: Request, exc: ImageInputError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"error": str(exc), "type": "image_input_error"})

    @app.exception_handler(EmptyAnalysisError)
    async def handle_empty_analysis(request: Request, exc: EmptyAnalysisError) -> JSONResponse:
        return JSONResponse(status_code=502, content={"error": str(exc), "type": "empty_analysis"})

    @app.exception_handler(NonRetryableError)
    async def handle_provider_rejected(request: Request, exc: NonRetryableError) -> JSONResponse:
        log.error("Vision provider rejected request: %s", exc)
        return JSONResponse(status_code=502, content={"error": str(exc), "type": "provider_error"})

    @app.exception_handler(RetryableError)
    async def handle_provider_unavailable(request: Request, exc: RetryableError) -> JSONResponse:
        log.error("Vision provider unavailable: %s", exc)
        return JSONResponse(status_code=503, content={"error": str(exc), "type": "provider_unavailable"})

    @app.exception_handler(KisanError)
    async def handle_generic_error(request: Request, exc: KisanError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"error": str(exc), "type": "kisan_error"})

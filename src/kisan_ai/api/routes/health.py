"""Liveness and readiness probes."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    """200 whenever the process is serving HTTP."""
    return {"status": "ok"}


@router.get("/ready", response_model=None)
async def ready(request: Request) -> dict[str, str] | JSONResponse:
    """200 once the lifespan has wired the diagnosis service, 503 before."""
    if getattr(request.app.state, "diagnosis_service", None) is None:
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "reason": "diagnosis service not initialised"},
        )
    return {"status": "ready"}

"""Interpretation endpoint: structure a diagnosis text that is already in hand."""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from kisan_ai.interpretation.pipeline import interpret as interpret_report
from kisan_ai.models import InterpretedReport

router = APIRouter(tags=["interpretation"])


class InterpretRequest(BaseModel):
    """Raw diagnosis text, typically a vision model's answer."""

    text: str


@router.post("/interpret", response_model=InterpretedReport)
async def interpret(request: InterpretRequest) -> InterpretedReport:
    """Split, classify, shape and group the submitted text."""
    return interpret_report(request.text)

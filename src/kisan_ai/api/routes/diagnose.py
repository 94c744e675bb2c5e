"""Diagnosis endpoint: upload a plant photo, receive the interpreted report."""

from __future__ import annotations

from fastapi import APIRouter, File, Request, UploadFile

from kisan_ai.models import DiagnosisResult, ImageInput
from kisan_ai.services.diagnosis_service import DiagnosisService

router = APIRouter(tags=["diagnosis"])


@router.post("/diagnose", response_model=DiagnosisResult)
async def diagnose(req: Request, file: UploadFile = File(...)) -> DiagnosisResult:
    """Send the uploaded image to the vision model and interpret its answer."""
    service: DiagnosisService = req.app.state.diagnosis_service
    # One byte past the limit is enough for validate_image to reject it
    data = await file.read(service.max_image_bytes + 1)
    image = ImageInput(
        data=data,
        mime_type=file.content_type or "application/octet-stream",
        filename=file.filename or "upload",
    )
    return await service.diagnose(image)

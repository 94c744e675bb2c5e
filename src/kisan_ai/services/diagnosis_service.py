"""Diagnosis service: validates an image, asks the vision model, interprets the answer."""

from __future__ import annotations

import logging

from kisan_ai.core.config import DEFAULT_MAX_IMAGE_BYTES
from kisan_ai.exceptions import ImageInputError
from kisan_ai.interfaces.vision import IVisionProvider
from kisan_ai.interpretation.pipeline import ReportInterpreter
from kisan_ai.models import DiagnosisResult, ImageInput
from kisan_ai.prompts.templates.plant.diagnosis import DIAGNOSIS_PROMPT

log = logging.getLogger(__name__)


class DiagnosisService:
    """Image in, interpreted diagnosis report out."""

    def __init__(
        self,
        vision_provider: IVisionProvider,
        interpreter: ReportInterpreter | None = None,
        *,
        max_image_bytes: int = DEFAULT_MAX_IMAGE_BYTES,
        prompt: str = DIAGNOSIS_PROMPT,
    ) -> None:
        self._vision = vision_provider
        self._interpreter = interpreter or ReportInterpreter()
        self._max_image_bytes = max_image_bytes
        self._prompt = prompt

    @property
    def max_image_bytes(self) -> int:
        """Largest accepted image payload; callers may stop reading one byte past it."""
        return self._max_image_bytes

    def validate_image(self, image: ImageInput) -> None:
        """Raise ``ImageInputError`` unless *image* can be sent to the model."""
        if not image.mime_type.startswith("image/"):
            raise ImageInputError("Please select a valid image file")
        if not image.data:
            raise ImageInputError(f"Image '{image.filename}' is empty")
        if len(image.data) > self._max_image_bytes:
            raise ImageInputError(
                f"Image '{image.filename}' is too large; "
                f"limit is {self._max_image_bytes} bytes"
            )

    async def diagnose(self, image: ImageInput) -> DiagnosisResult:
        self.validate_image(image)

        log.info(
            "Diagnosing %s (%s, %d bytes) with %s",
            image.filename, image.mime_type, len(image.data), self._vision.model,
        )
        text = await self._vision.analyze(image, self._prompt)
        report = self._interpreter.interpret(text)

        if not report.has_structure:
            log.warning("Diagnosis for %s has no structured sections", image.filename)
        log.info(
            "Diagnosis complete: %d sections, %d unrecognised",
            len(report.sections), len(report.ungrouped),
        )
        return DiagnosisResult(filename=image.filename, model=self._vision.model, report=report)

"""Fake vision provider for testing."""

from __future__ import annotations

from typing import Any

from kisan_ai.interfaces.vision import IVisionProvider
from kisan_ai.models import ImageInput

# Minimal JPEG header bytes; nothing in the pipeline decodes image content.
SAMPLE_JPEG = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00\xff\xd9"


class FakeVisionProvider(IVisionProvider):
    """Canned-response vision provider — no network calls needed."""

    def __init__(
        self,
        *,
        response: str = "fake response",
        error: Exception | None = None,
        model: str = "fake/vision-model",
    ) -> None:
        self._response = response
        self._error = error
        self._model = model
        self.calls: list[dict[str, Any]] = []

    @property
    def model(self) -> str:
        return self._model

    async def analyze(self, image: ImageInput, prompt: str) -> str:
        self.calls.append({"image": image, "prompt": prompt})
        if self._error is not None:
            raise self._error
        return self._response

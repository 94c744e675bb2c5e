"""Abstract vision provider."""

from __future__ import annotations

from abc import ABC, abstractmethod

from kisan_ai.models import ImageInput


class IVisionProvider(ABC):
    @property
    @abstractmethod
    def model(self) -> str:
        """Identifier of the model answering requests."""

    @abstractmethod
    async def analyze(self, image: ImageInput, prompt: str) -> str:
        """Send *image* with *prompt* and return the model's free-text answer."""

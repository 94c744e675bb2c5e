"""Vision provider backed by LiteLLM."""

from __future__ import annotations

from kisan_ai.providers.vision.client import VisionClient

__all__ = ["VisionClient"]

"""Prompt templates sent to the vision provider."""

from __future__ import annotations

from kisan_ai.prompts.templates.plant.diagnosis import DIAGNOSIS_PROMPT, SECTION_HEADERS

__all__ = ["DIAGNOSIS_PROMPT", "SECTION_HEADERS"]

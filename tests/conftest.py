"""Shared fixtures for kisan-ai tests."""

from __future__ import annotations

import pytest

from kisan_ai.core.config import AppSettings, AuthConfig, VisionConfig
from kisan_ai.models import ImageInput
from tests.fakes.fake_vision import SAMPLE_JPEG


@pytest.fixture
def plant_report() -> str:
    """A full seven-section answer in the format the diagnosis prompt requests."""
    return (
        "**PLANT IDENTIFICATION:**\n"
        "- Tomato (Solanum lycopersicum)\n"
        "- Growth stage: flowering\n\n"
        "**DISEASE/ISSUE DETECTED:**\n"
        "- Early blight (Alternaria solani)\n"
        "- Severity level: Moderate\n"
        "- Confidence level in diagnosis: High\n\n"
        "**SYMPTOMS OBSERVED:**\n"
        "- Concentric brown rings on lower leaves\n"
        "- Yellowing around lesions\n\n"
        "**POSSIBLE CAUSES:**\n"
        "- Fungal pathogen\n"
        "- Warm, humid weather\n\n"
        "**TREATMENT RECOMMENDATIONS:**\n"
        "Immediate actions:\n"
        "- Remove infected leaves\n"
        "- Apply copper-based fungicide\n\n"
        "**PREVENTION TIPS:**\n"
        "- Rotate crops every season\n"
        "- Water at the base of the plant\n\n"
        "**PROGNOSIS:**\n"
        "- Recovery expected within 2-3 weeks\n"
        "- Low spread risk if treated promptly\n"
    )


@pytest.fixture
def vision_config() -> VisionConfig:
    """Vision config with a single attempt and no real credentials."""
    return VisionConfig(
        model="gemini/gemini-1.5-flash",
        api_key="test-key",
        max_retries=1,
    )


@pytest.fixture
def settings(vision_config: VisionConfig) -> AppSettings:
    settings = AppSettings()
    settings.vision = vision_config
    settings.auth = AuthConfig(enabled=False)
    return settings


@pytest.fixture
def jpeg_image() -> ImageInput:
    return ImageInput(data=SAMPLE_JPEG, mime_type="image/jpeg", filename="leaf.jpg")
